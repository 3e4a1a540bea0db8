"""
Type definitions for the draughts move engine.

This module provides:
- Enum definitions for piece colors and cell contents
- Frozen dataclasses for move steps and move sequences
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import IntEnum
from typing import Optional, Tuple

# Basic type aliases
Position = Tuple[int, int]  # (row, col) coordinates


class Color(IntEnum):
    """Side of a piece. The value is the sign used in the cell encoding."""

    LIGHT = 1
    DARK = -1

    @property
    def opponent(self) -> Color:
        return Color(-self.value)

    @property
    def forward(self) -> int:
        """Row delta of a man's non-capturing move."""
        return -1 if self is Color.LIGHT else 1

    @property
    def promotion_row(self) -> int:
        return 0 if self is Color.LIGHT else 7


class Cell(IntEnum):
    """
    Content of one board square.

    The sign encodes the color and the magnitude encodes the kind
    (1 for a man, 2 for a king).
    """

    DARK_KING = -2
    DARK_MAN = -1
    EMPTY = 0
    LIGHT_MAN = 1
    LIGHT_KING = 2

    @classmethod
    def man(cls, color: Color) -> Cell:
        return cls(int(color))

    @classmethod
    def king(cls, color: Color) -> Cell:
        return cls(2 * int(color))

    @property
    def color(self) -> Optional[Color]:
        if self.value == 0:
            return None
        return Color.LIGHT if self.value > 0 else Color.DARK

    @property
    def is_king(self) -> bool:
        return abs(self.value) == 2

    @property
    def symbol(self) -> str:
        return _SYMBOLS[self]


_SYMBOLS = {
    Cell.DARK_KING: 'B',
    Cell.DARK_MAN: 'b',
    Cell.EMPTY: '.',
    Cell.LIGHT_MAN: 'w',
    Cell.LIGHT_KING: 'W',
}


@dataclass(frozen=True)
class MoveStep:
    """One diagonal displacement of a single piece."""

    start_row: int
    start_col: int
    end_row: int
    end_col: int

    @property
    def start(self) -> Position:
        return (self.start_row, self.start_col)

    @property
    def end(self) -> Position:
        return (self.end_row, self.end_col)


@dataclass(frozen=True)
class MoveSequence:
    """
    Ordered chain of steps plus the number of pieces it captures.

    A sequence with ``captures_count == 0`` is a simple move and has exactly
    one step. A capture sequence has one step per captured piece, each step
    starting where the previous one ended.
    """

    steps: Tuple[MoveStep, ...] = ()
    captures_count: int = 0

    @property
    def start(self) -> Optional[Position]:
        return self.steps[0].start if self.steps else None

    @property
    def end(self) -> Optional[Position]:
        return self.steps[-1].end if self.steps else None

    @property
    def is_capture(self) -> bool:
        return self.captures_count > 0

    def extended(self, step: MoveStep) -> MoveSequence:
        """Return a new sequence with one more capturing step."""
        return MoveSequence(self.steps + (step,), self.captures_count + 1)

    def __len__(self) -> int:
        return len(self.steps)


# Sequence checks
def is_chained(seq: MoveSequence) -> bool:
    """Check that every step starts where the previous one ended."""
    return all(a.end == b.start for a, b in zip(seq.steps, seq.steps[1:]))
