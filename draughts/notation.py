"""
Human-facing square notation: file letter A..H for the column and rank
digit 1..8 for ``row + 1``, both mirrored when the board is shown from
the dark side.
"""
from __future__ import annotations

from typing import List, Optional, Tuple

from .board import BOARD_SIZE, on_board
from .moves import MoveValidator
from .types import MoveSequence, Position


def cell_to_string(row: int, col: int, user_light: bool = True) -> str:
    """(row, col) -> "A3"."""
    if not user_light:
        row = BOARD_SIZE - 1 - row
        col = BOARD_SIZE - 1 - col
    return f"{chr(ord('A') + col)}{chr(ord('1') + row)}"


def parse_cell(text: str, user_light: bool = True) -> Optional[Position]:
    """Parse "A3" into (row, col), or None when the text is not a square."""
    if len(text) != 2:
        return None
    file_ch: str = text[0].upper()
    rank_ch: str = text[1]
    if not ('A' <= file_ch <= 'H') or not ('1' <= rank_ch <= '8'):
        return None
    col: int = ord(file_ch) - ord('A')
    row: int = ord(rank_ch) - ord('1')
    if not user_light:
        row = BOARD_SIZE - 1 - row
        col = BOARD_SIZE - 1 - col
    return (row, col) if on_board(row, col) else None


def parse_move_input(line: str, user_light: bool = True) -> Optional[Tuple[Position, Position]]:
    """Parse "A3 B4" into a (from, to) pair of positions."""
    parts: List[str] = line.split()
    if len(parts) != 2:
        return None
    frm = parse_cell(parts[0], user_light)
    to = parse_cell(parts[1], user_light)
    if frm is None or to is None:
        return None
    return frm, to


def seq_to_str(seq: MoveSequence, user_light: bool = True) -> str:
    """Render every step as "(A3)->(B4)", joined with commas."""
    return ", ".join(
        f"({cell_to_string(s.start_row, s.start_col, user_light)})"
        f"->({cell_to_string(s.end_row, s.end_col, user_light)})"
        for s in seq.steps
    )


def find_move(moves: List[MoveSequence], frm: Position, to: Position) -> Optional[MoveSequence]:
    return MoveValidator.find(moves, frm, to)
