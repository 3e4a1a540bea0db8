"""
Board model and geometry helpers.

The board is an 8x8 ``numpy`` array of ``int8`` cell codes (see ``Cell``).
Only squares with ``(row + col)`` odd ever hold pieces.
"""
from __future__ import annotations

from typing import Iterator, Optional

import numpy as np

from .types import Cell, Color, Position

BOARD_SIZE: int = 8


def on_board(row: int, col: int) -> bool:
    """True iff both coordinates are in [0, 7]."""
    return 0 <= row < BOARD_SIZE and 0 <= col < BOARD_SIZE


def color_of(cell: int) -> Optional[Color]:
    return Cell(int(cell)).color


def is_king(cell: int) -> bool:
    return abs(int(cell)) == 2


class Board:
    """Mutable 8x8 grid of cells addressed as ``board[row, col]``."""

    __slots__ = ("grid",)

    def __init__(self, grid: Optional[np.ndarray] = None) -> None:
        if grid is None:
            grid = np.zeros((BOARD_SIZE, BOARD_SIZE), dtype=np.int8)
        if not isinstance(grid, np.ndarray) or grid.shape != (BOARD_SIZE, BOARD_SIZE):
            raise ValueError("Board grid must be an 8x8 array")
        self.grid: np.ndarray = grid.astype(np.int8, copy=False)

    @classmethod
    def initial(cls) -> Board:
        """Starting layout: dark men on rows 0..2, light men on rows 5..7."""
        b = cls()
        for r in range(BOARD_SIZE):
            for c in range(BOARD_SIZE):
                if (r + c) % 2 == 1:
                    if r <= 2:
                        b.grid[r, c] = Cell.DARK_MAN
                    elif r >= 5:
                        b.grid[r, c] = Cell.LIGHT_MAN
        return b

    @classmethod
    def from_text(cls, text: str) -> Board:
        """Build a board from eight rows of ``.wWbB`` characters."""
        rows = [line.strip() for line in text.strip().splitlines() if line.strip()]
        if len(rows) != BOARD_SIZE or any(len(r) != BOARD_SIZE for r in rows):
            raise ValueError("Board text must have 8 rows of 8 characters")
        by_symbol = {cell.symbol: cell for cell in Cell}
        b = cls()
        for r, line in enumerate(rows):
            for c, ch in enumerate(line):
                if ch not in by_symbol:
                    raise ValueError(f"Unknown cell symbol {ch!r}")
                b.grid[r, c] = by_symbol[ch]
        return b

    def __getitem__(self, pos: Position) -> Cell:
        r, c = pos
        if not on_board(r, c):
            raise IndexError("Position out of board")
        return Cell(int(self.grid[r, c]))

    def __setitem__(self, pos: Position, cell: Cell) -> None:
        r, c = pos
        if not on_board(r, c):
            raise IndexError("Position out of board")
        self.grid[r, c] = int(cell)

    def cell(self, row: int, col: int) -> Cell:
        """Cell accessor for renderers: returns the color/kind at a square."""
        return self[row, col]

    def is_empty(self, row: int, col: int) -> bool:
        return self.grid[row, col] == 0

    def copy(self) -> Board:
        return Board(self.grid.copy())

    def pieces(self, color: Color) -> Iterator[Position]:
        """Yield positions holding pieces of ``color`` in row-major order."""
        rows, cols = np.nonzero(self.grid * int(color) > 0)
        for r, c in zip(rows.tolist(), cols.tolist()):
            yield (r, c)

    def count_pieces(self, color: Color) -> int:
        return int(np.count_nonzero(self.grid * int(color) > 0))

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Board):
            return NotImplemented
        return bool(np.array_equal(self.grid, other.grid))

    __hash__ = None  # type: ignore[assignment]

    def to_text(self) -> str:
        return '\n'.join(
            ''.join(Cell(int(v)).symbol for v in row) for row in self.grid
        )

    def __repr__(self) -> str:
        return f"Board(\n{self.to_text()}\n)"


def init_board() -> Board:
    return Board.initial()


def promote(board: Board, row: int, col: int) -> None:
    """Crown a man standing on its far rank. No-op for anything else."""
    cell = board[row, col]
    if cell is Cell.LIGHT_MAN and row == Color.LIGHT.promotion_row:
        board[row, col] = Cell.LIGHT_KING
    elif cell is Cell.DARK_MAN and row == Color.DARK.promotion_row:
        board[row, col] = Cell.DARK_KING
