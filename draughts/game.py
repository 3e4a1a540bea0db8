"""
Game state management: turn order, move history and end-of-game checks.
"""
from __future__ import annotations

import logging
import random
from typing import List, Optional, Tuple

from config import EngineSettings

from .apply import make_move_sequence
from .board import Board, init_board
from .engine import has_any_move, legal_moves
from .types import Color, MoveSequence

logger = logging.getLogger(__name__)


def winner(board: Board, side_to_move: Color,
           settings: Optional[EngineSettings] = None) -> Optional[Color]:
    """The winning side, or None while the game goes on.

    A side loses when it has no pieces left or cannot move on its turn.
    """
    if board.count_pieces(side_to_move) == 0:
        return side_to_move.opponent
    if board.count_pieces(side_to_move.opponent) == 0:
        return side_to_move
    if not has_any_move(board, side_to_move, settings):
        return side_to_move.opponent
    return None


def choose_computer_move(moves: List[MoveSequence],
                         rng: Optional[random.Random] = None) -> Optional[MoveSequence]:
    """Uniform random pick; None when there is nothing to choose from."""
    if not moves:
        return None
    return (rng or random).choice(moves)


class GameState:
    """Manages the board, side to move, history and the game result."""

    def __init__(self, human_side: Optional[Color] = Color.LIGHT,
                 settings: Optional[EngineSettings] = None) -> None:
        self.settings = settings
        self.board: Board = init_board()
        self.side_to_move: Color = Color.LIGHT
        self.human_side: Optional[Color] = human_side
        self.move_number: int = 1
        self.last_move: Optional[MoveSequence] = None
        self.history: List[Tuple[Board, Color, int, Optional[MoveSequence]]] = []
        self.game_over: bool = False
        self.winner: Optional[Color] = None
        self._check_game_end()

    def reset_game(self, human_side: Optional[Color] = Color.LIGHT) -> None:
        self.board = init_board()
        self.side_to_move = Color.LIGHT
        self.human_side = human_side
        self.move_number = 1
        self.last_move = None
        self.history.clear()
        self.game_over = False
        self.winner = None
        self._check_game_end()

    def load_position(self, board: Board, side_to_move: Color = Color.LIGHT) -> None:
        """Start from an arbitrary position; history is discarded."""
        self.board = board.copy()
        self.side_to_move = side_to_move
        self.last_move = None
        self.history.clear()
        self.game_over = False
        self.winner = None
        self._check_game_end()

    def legal_moves(self) -> List[MoveSequence]:
        """Moves the side to move may play; captures shadow simple moves."""
        if self.game_over:
            return []
        return legal_moves(self.board, self.side_to_move, self.settings)

    def make_move(self, seq: MoveSequence) -> bool:
        """Apply a legal move and pass the turn. False if rejected."""
        if self.game_over:
            return False
        if seq not in self.legal_moves():
            logger.debug("Rejected move %s: not in the legal-move list", seq)
            return False

        self.history.append((
            self.board.copy(),
            self.side_to_move,
            self.move_number,
            self.last_move,
        ))
        make_move_sequence(self.board, seq)
        self.last_move = seq

        self.side_to_move = self.side_to_move.opponent
        self.move_number += 1
        self._check_game_end()
        return True

    def undo_move(self) -> bool:
        if not self.history:
            return False
        self.board, self.side_to_move, self.move_number, self.last_move = self.history.pop()
        self.game_over = False
        self.winner = None
        return True

    def _check_game_end(self) -> None:
        result = winner(self.board, self.side_to_move, self.settings)
        if result is not None:
            self.game_over = True
            self.winner = result
            logger.info("Game over after %d move(s): %s wins", self.move_number - 1, result.name)

    def is_human_turn(self) -> bool:
        return self.human_side is not None and self.side_to_move == self.human_side

    def get_piece_counts(self) -> Tuple[int, int]:
        """(light pieces, dark pieces)."""
        return self.board.count_pieces(Color.LIGHT), self.board.count_pieces(Color.DARK)
