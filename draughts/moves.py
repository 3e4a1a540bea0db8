from __future__ import annotations

from typing import FrozenSet, List, Optional, Tuple

from .apply import make_one_step
from .board import Board, on_board
from .types import Cell, Color, MoveSequence, MoveStep, Position

_DIRS: List[Tuple[int, int]] = [(1, 1), (1, -1), (-1, 1), (-1, -1)]


# -----------------------------
# Simple (non-capturing) moves
# -----------------------------
def man_simple_moves(board: Board, row: int, col: int, color: Color) -> List[MoveSequence]:
    """One-square forward diagonal moves onto empty squares."""
    result: List[MoveSequence] = []
    dr: int = color.forward
    for dc in (-1, 1):
        nr, nc = row + dr, col + dc
        if on_board(nr, nc) and board.is_empty(nr, nc):
            result.append(MoveSequence((MoveStep(row, col, nr, nc),), 0))
    return result


def king_simple_moves(board: Board, row: int, col: int) -> List[MoveSequence]:
    """Every empty square reachable along the four diagonals."""
    result: List[MoveSequence] = []
    for dr, dc in _DIRS:
        nr, nc = row + dr, col + dc
        while on_board(nr, nc) and board.is_empty(nr, nc):
            result.append(MoveSequence((MoveStep(row, col, nr, nc),), 0))
            nr += dr
            nc += dc
    return result


def simple_moves_for_piece(board: Board, row: int, col: int) -> List[MoveSequence]:
    cell: Cell = board[row, col]
    color: Optional[Color] = cell.color
    if color is None:
        return []
    if cell.is_king:
        return king_simple_moves(board, row, col)
    return man_simple_moves(board, row, col, color)


# -----------------------------
# Capture search
# -----------------------------
def search_captures(board: Board, row: int, col: int, color: Color,
                    used: FrozenSet[Position], current: MoveSequence,
                    results: List[MoveSequence]) -> None:
    """Depth-first search for maximal capture chains from (row, col).

    Each branch jumps on its own copy of ``board`` and carries its own
    ``used`` set of already captured squares. A chain is recorded once
    nothing extends it, provided it captured at least one piece.
    """
    man: bool = not board[row, col].is_king
    enemy: int = int(color.opponent)
    found_further: bool = False

    if man:
        for dr, dc in _DIRS:
            mid_r, mid_c = row + dr, col + dc
            land_r, land_c = row + 2 * dr, col + 2 * dc
            if not on_board(land_r, land_c):
                continue
            if board.grid[mid_r, mid_c] * enemy <= 0 or (mid_r, mid_c) in used:
                continue
            if not board.is_empty(land_r, land_c):
                continue
            step = MoveStep(row, col, land_r, land_c)
            nb: Board = board.copy()
            make_one_step(nb, step, True)
            search_captures(nb, land_r, land_c, color, used | {(mid_r, mid_c)},
                            current.extended(step), results)
            found_further = True
    else:
        for dr, dc in _DIRS:
            r, c = row + dr, col + dc
            foe: Optional[Position] = None
            while on_board(r, c):
                if foe is None:
                    if board.is_empty(r, c):
                        r += dr
                        c += dc
                        continue
                    if board.grid[r, c] * enemy > 0 and (r, c) not in used:
                        foe = (r, c)
                        r += dr
                        c += dc
                        continue
                    break
                # Past the foe: every empty square is a landing option.
                if not board.is_empty(r, c):
                    break
                step = MoveStep(row, col, r, c)
                nb = board.copy()
                make_one_step(nb, step, True)
                search_captures(nb, r, c, color, used | {foe},
                                current.extended(step), results)
                found_further = True
                r += dr
                c += dc

    if not found_further and current.captures_count > 0:
        results.append(current)


def get_all_captures_for_piece(board: Board, row: int, col: int) -> List[MoveSequence]:
    """Every maximal capture sequence for the piece at (row, col)."""
    color: Optional[Color] = board[row, col].color
    if color is None:
        return []
    results: List[MoveSequence] = []
    search_captures(board, row, col, color, frozenset(), MoveSequence(), results)
    return results


class MoveValidator:
    """Checks externally requested moves against generated legal moves."""

    @staticmethod
    def find(moves: List[MoveSequence], frm: Position, to: Position) -> Optional[MoveSequence]:
        """First sequence starting at ``frm`` and ending at ``to``, if any."""
        for seq in moves:
            if seq.steps and seq.start == frm and seq.end == to:
                return seq
        return None


    @staticmethod
    def captured_squares(board: Board, seq: MoveSequence) -> List[Position]:
        """Squares cleared by playing ``seq`` on ``board``, in step order."""
        if not seq.is_capture:
            return []
        nb: Board = board.copy()
        captured: List[Position] = []
        for step in seq.steps:
            dr = 1 if step.end_row > step.start_row else -1
            dc = 1 if step.end_col > step.start_col else -1
            r, c = step.start_row + dr, step.start_col + dc
            while (r, c) != step.end:
                if not nb.is_empty(r, c):
                    captured.append((r, c))
                    break
                r += dr
                c += dc
            make_one_step(nb, step, True)
        return captured
