import random

from draughts.board import Board, init_board
from draughts.game import GameState, choose_computer_move, winner
from draughts.types import Cell, Color, MoveSequence, MoveStep

LAST_CAPTURE = """
    ........
    ........
    ...b....
    ....w...
    ........
    ........
    ........
    ........
"""


def test_new_game():
    state = GameState()
    assert state.side_to_move is Color.LIGHT
    assert state.move_number == 1
    assert not state.game_over
    assert len(state.legal_moves()) == 7
    assert state.is_human_turn()
    assert state.get_piece_counts() == (12, 12)


def test_make_move_switches_side():
    state = GameState()
    seq = MoveSequence((MoveStep(5, 0, 4, 1),), 0)
    assert state.make_move(seq)
    assert state.side_to_move is Color.DARK
    assert state.last_move == seq
    assert state.board[4, 1] is Cell.LIGHT_MAN
    assert not state.is_human_turn()


def test_illegal_move_is_rejected():
    state = GameState()
    before = state.board.copy()
    assert not state.make_move(MoveSequence((MoveStep(5, 0, 4, 0),), 0))
    assert not state.make_move(MoveSequence())
    assert state.board == before
    assert state.side_to_move is Color.LIGHT


def test_simple_move_rejected_while_capture_available():
    state = GameState()
    state.board = Board()
    state.board[5, 0] = Cell.LIGHT_MAN
    state.board[6, 5] = Cell.LIGHT_MAN
    state.board[5, 4] = Cell.DARK_MAN
    state.board[0, 1] = Cell.DARK_MAN
    assert not state.make_move(MoveSequence((MoveStep(5, 0, 4, 1),), 0))
    assert state.make_move(MoveSequence((MoveStep(6, 5, 4, 3),), 1))
    assert state.board[5, 4] is Cell.EMPTY


def test_undo_restores_previous_position():
    state = GameState()
    state.make_move(state.legal_moves()[0])
    assert state.undo_move()
    assert state.board == init_board()
    assert state.side_to_move is Color.LIGHT
    assert state.move_number == 1
    assert not state.undo_move()


def test_capturing_last_piece_wins():
    state = GameState(human_side=None)
    state.board = Board.from_text(LAST_CAPTURE)
    (seq,) = state.legal_moves()
    assert state.make_move(seq)
    assert state.game_over
    assert state.winner is Color.LIGHT
    assert state.legal_moves() == []
    assert not state.make_move(seq)


def test_winner_rules():
    board = Board.from_text(LAST_CAPTURE)
    assert winner(board, Color.LIGHT) is None
    blocked = Board()
    blocked[7, 0] = Cell.LIGHT_MAN
    blocked[6, 1] = Cell.DARK_MAN
    blocked[5, 2] = Cell.DARK_MAN
    assert winner(blocked, Color.LIGHT) is Color.DARK
    assert winner(Board(), Color.DARK) is Color.LIGHT


def test_choose_computer_move():
    moves = GameState().legal_moves()
    rng = random.Random(3)
    picked = choose_computer_move(moves, rng)
    assert picked in moves
    assert choose_computer_move(moves, random.Random(3)) == picked
    assert choose_computer_move([]) is None


def test_reset_game():
    state = GameState()
    state.make_move(state.legal_moves()[0])
    state.reset_game(human_side=Color.DARK)
    assert state.board == init_board()
    assert state.side_to_move is Color.LIGHT
    assert state.history == []
    assert not state.is_human_turn()


def test_load_position_discards_history_and_rechecks_end():
    state = GameState()
    state.make_move(state.legal_moves()[0])
    board = Board.from_text(LAST_CAPTURE)
    state.load_position(board, Color.DARK)
    assert state.history == [] and state.last_move is None
    assert state.side_to_move is Color.DARK
    assert not state.game_over
    assert state.board == board and state.board is not board

    lone = Board()
    lone[3, 4] = Cell.LIGHT_MAN
    state.load_position(lone, Color.DARK)
    assert state.game_over
    assert state.winner is Color.LIGHT
    assert state.legal_moves() == []
