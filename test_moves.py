import pytest

from draughts.board import Board, init_board
from draughts.moves import (
    MoveValidator,
    get_all_captures_for_piece,
    king_simple_moves,
    man_simple_moves,
    simple_moves_for_piece,
)
from draughts.types import Cell, Color, MoveSequence, MoveStep, is_chained

# Helpers

def make_empty_board():
    return Board()


def place_piece(board, row, col, cell):
    board[row, col] = cell


def ends(moves):
    return sorted(m.end for m in moves)


def test_man_simple_moves_from_start_edge():
    board = init_board()
    moves = man_simple_moves(board, 5, 0, Color.LIGHT)
    assert moves == [MoveSequence((MoveStep(5, 0, 4, 1),), 0)]


def test_dark_man_moves_down_the_board():
    board = make_empty_board()
    place_piece(board, 2, 3, Cell.DARK_MAN)
    assert ends(simple_moves_for_piece(board, 2, 3)) == [(3, 2), (3, 4)]


def test_man_blocked_forward_has_no_simple_moves():
    board = make_empty_board()
    place_piece(board, 4, 3, Cell.LIGHT_MAN)
    place_piece(board, 3, 2, Cell.DARK_MAN)
    place_piece(board, 3, 4, Cell.LIGHT_MAN)
    assert man_simple_moves(board, 4, 3, Color.LIGHT) == []


def test_king_simple_moves_stop_at_first_occupied():
    board = make_empty_board()
    place_piece(board, 4, 4, Cell.LIGHT_KING)
    place_piece(board, 2, 2, Cell.LIGHT_MAN)
    moves = king_simple_moves(board, 4, 4)
    dests = set(ends(moves))
    assert (3, 3) in dests
    assert (2, 2) not in dests and (1, 1) not in dests
    # Remaining diagonals run to the edge.
    assert {(5, 5), (6, 6), (7, 7), (5, 3), (6, 2), (7, 1), (3, 5), (2, 6), (1, 7)} <= dests
    assert len(moves) == 10
    assert all(m.captures_count == 0 and len(m) == 1 for m in moves)


def test_simple_moves_for_empty_square():
    assert simple_moves_for_piece(make_empty_board(), 3, 3) == []


def test_single_man_capture():
    board = make_empty_board()
    place_piece(board, 3, 4, Cell.LIGHT_MAN)
    place_piece(board, 2, 3, Cell.DARK_MAN)
    caps = get_all_captures_for_piece(board, 3, 4)
    assert caps == [MoveSequence((MoveStep(3, 4, 1, 2),), 1)]


def test_man_captures_backward():
    board = make_empty_board()
    place_piece(board, 3, 4, Cell.LIGHT_MAN)
    place_piece(board, 4, 5, Cell.DARK_MAN)
    caps = get_all_captures_for_piece(board, 3, 4)
    assert len(caps) == 1
    assert caps[0].end == (5, 6)


def test_no_capture_when_landing_occupied_or_off_board():
    board = make_empty_board()
    place_piece(board, 1, 1, Cell.LIGHT_MAN)
    place_piece(board, 0, 0, Cell.DARK_MAN)      # landing would be off board
    place_piece(board, 2, 2, Cell.DARK_MAN)
    place_piece(board, 3, 3, Cell.DARK_MAN)      # landing occupied
    assert get_all_captures_for_piece(board, 1, 1) == []


def test_multi_jump_chain():
    board = make_empty_board()
    place_piece(board, 5, 1, Cell.LIGHT_MAN)
    place_piece(board, 4, 2, Cell.DARK_MAN)
    place_piece(board, 2, 4, Cell.DARK_MAN)
    caps = get_all_captures_for_piece(board, 5, 1)
    assert len(caps) == 1
    seq = caps[0]
    assert seq.captures_count == 2
    assert [s.end for s in seq.steps] == [(3, 3), (1, 5)]
    assert is_chained(seq)


def test_branching_captures_are_all_reported():
    board = make_empty_board()
    place_piece(board, 5, 3, Cell.LIGHT_MAN)
    place_piece(board, 4, 2, Cell.DARK_MAN)
    place_piece(board, 4, 4, Cell.DARK_MAN)
    caps = get_all_captures_for_piece(board, 5, 3)
    assert ends(caps) == [(3, 1), (3, 5)]
    assert all(c.captures_count == 1 for c in caps)


def test_king_long_range_capture_lands_anywhere_beyond():
    board = make_empty_board()
    place_piece(board, 4, 4, Cell.LIGHT_KING)
    place_piece(board, 2, 2, Cell.DARK_MAN)
    caps = get_all_captures_for_piece(board, 4, 4)
    assert ends(caps) == [(0, 0), (1, 1)]
    assert all(c.captures_count == 1 and len(c) == 1 for c in caps)


def test_king_blocked_by_friend_before_foe():
    board = make_empty_board()
    place_piece(board, 4, 4, Cell.LIGHT_KING)
    place_piece(board, 3, 3, Cell.LIGHT_MAN)
    place_piece(board, 2, 2, Cell.DARK_MAN)
    assert get_all_captures_for_piece(board, 4, 4) == []


def test_king_cannot_jump_two_pieces_in_a_row():
    board = make_empty_board()
    place_piece(board, 4, 4, Cell.LIGHT_KING)
    place_piece(board, 3, 3, Cell.DARK_MAN)
    place_piece(board, 2, 2, Cell.DARK_MAN)
    assert get_all_captures_for_piece(board, 4, 4) == []


def test_king_multi_capture_along_one_diagonal():
    board = make_empty_board()
    place_piece(board, 7, 0, Cell.LIGHT_KING)
    place_piece(board, 5, 2, Cell.DARK_MAN)
    place_piece(board, 2, 5, Cell.DARK_MAN)
    caps = get_all_captures_for_piece(board, 7, 0)
    assert len(caps) == 4
    assert all(c.captures_count == 2 and is_chained(c) for c in caps)
    assert {c.steps[0].end for c in caps} == {(4, 3), (3, 4)}
    assert {c.end for c in caps} == {(1, 6), (0, 7)}


def test_man_promoted_mid_chain_continues_as_king():
    board = make_empty_board()
    place_piece(board, 2, 1, Cell.LIGHT_MAN)
    place_piece(board, 1, 2, Cell.DARK_MAN)
    place_piece(board, 2, 5, Cell.DARK_MAN)
    caps = get_all_captures_for_piece(board, 2, 1)
    # (2,5) is not adjacent to (0,3), so only a king can take it.
    assert ends(caps) == [(3, 6), (4, 7)]
    assert all(c.captures_count == 2 for c in caps)
    assert all(c.steps[0].end == (0, 3) for c in caps)


def test_search_does_not_touch_input_board():
    board = make_empty_board()
    place_piece(board, 5, 1, Cell.LIGHT_MAN)
    place_piece(board, 4, 2, Cell.DARK_MAN)
    place_piece(board, 2, 4, Cell.DARK_MAN)
    before = board.copy()
    get_all_captures_for_piece(board, 5, 1)
    assert board == before


def test_captures_for_empty_origin():
    assert get_all_captures_for_piece(make_empty_board(), 4, 4) == []


@pytest.mark.parametrize("text,origin", [
    (
        """
        ........
        ..b.b...
        ........
        ..b.b...
        ...W....
        ..b.b...
        ........
        ........
        """,
        (4, 3),
    ),
    (
        """
        ........
        ........
        ..b.b...
        ........
        ..b.b...
        .w......
        ........
        ........
        """,
        (5, 1),
    ),
])
def test_no_square_captured_twice(text, origin):
    board = Board.from_text(text)
    caps = get_all_captures_for_piece(board, *origin)
    assert caps
    for seq in caps:
        captured = MoveValidator.captured_squares(board, seq)
        assert len(captured) == seq.captures_count
        assert len(set(captured)) == len(captured)
        assert is_chained(seq)


def test_validator_find():
    seq = MoveSequence((MoveStep(5, 0, 4, 1),), 0)
    assert MoveValidator.find([seq], (5, 0), (4, 1)) is seq
    assert MoveValidator.find([seq], (5, 0), (4, 0)) is None
    assert MoveValidator.find([MoveSequence()], (5, 0), (4, 1)) is None
