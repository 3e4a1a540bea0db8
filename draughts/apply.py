"""
Move application: executes move sequences on a board in place.
"""
from __future__ import annotations

from .board import Board, promote
from .types import Cell, MoveSequence, MoveStep


def make_one_step(board: Board, step: MoveStep, is_capture: bool) -> bool:
    """Relocate a piece by one step, removing the jumped piece for captures.

    The destination must already have been checked empty by the caller.
    For a capture the first occupied square strictly between start and end
    is cleared, which covers both short man jumps and long king jumps.
    """
    piece: Cell = board[step.start]
    board[step.start] = Cell.EMPTY
    board[step.end] = piece

    if is_capture:
        dr: int = 1 if step.end_row > step.start_row else -1
        dc: int = 1 if step.end_col > step.start_col else -1
        r, c = step.start_row + dr, step.start_col + dc
        while (r, c) != step.end:
            if not board.is_empty(r, c):
                board[r, c] = Cell.EMPTY
                break
            r += dr
            c += dc

    promote(board, step.end_row, step.end_col)
    return True


def make_move_sequence(board: Board, seq: MoveSequence) -> bool:
    """Apply every step of ``seq`` to ``board``. False for an empty sequence."""
    if not seq.steps:
        return False
    capture: bool = seq.captures_count > 0
    for step in seq.steps:
        make_one_step(board, step, capture)
    return True


def apply_move(board: Board, seq: MoveSequence) -> Board:
    """Return a new board with ``seq`` applied, leaving ``board`` untouched."""
    nb: Board = board.copy()
    make_move_sequence(nb, seq)
    return nb
