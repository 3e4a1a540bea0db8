"""
Side-wide move enumeration.

The 8 board rows are cut into contiguous chunks, one worker per chunk, and
the per-piece generators run inside each worker on a read-only view of the
board. Partial results are concatenated once every worker has finished.
Result order is not significant.

Captures are compulsory: when ``find_all_captures`` is non-empty for the
side to move, ``find_all_normal_moves`` must not be offered that turn.
``legal_moves`` applies this rule and is what callers should use.
"""
from __future__ import annotations

import logging
import os
from multiprocessing import Pool
from multiprocessing.pool import ThreadPool
from typing import Callable, List, Optional, Tuple

from config import EngineSettings, get_engine_settings

from .board import BOARD_SIZE, Board
from .moves import get_all_captures_for_piece, king_simple_moves, man_simple_moves
from .types import Color, MoveSequence

logger = logging.getLogger(__name__)

RowRange = Tuple[int, int]
ChunkScanner = Callable[[Board, Color, int, int], List[MoveSequence]]


def worker_count(max_workers: Optional[int] = None) -> int:
    """Available parallelism, capped by ``max_workers`` and never below 1."""
    hw: int = os.cpu_count() or 2
    if max_workers is not None:
        hw = min(hw, max_workers)
    return max(1, hw)


def row_chunks(workers: int) -> List[RowRange]:
    """Split rows 0..7 into contiguous ``[start, end)`` ranges."""
    chunk_size: int = max(1, BOARD_SIZE // max(1, workers))
    return [(start, min(start + chunk_size, BOARD_SIZE))
            for start in range(0, BOARD_SIZE, chunk_size)]


def _scan_captures(board: Board, color: Color, row_start: int, row_end: int) -> List[MoveSequence]:
    local: List[MoveSequence] = []
    for r in range(row_start, row_end):
        for c in range(BOARD_SIZE):
            if board.grid[r, c] * int(color) > 0:
                local.extend(get_all_captures_for_piece(board, r, c))
    return local


def _scan_normal_moves(board: Board, color: Color, row_start: int, row_end: int) -> List[MoveSequence]:
    local: List[MoveSequence] = []
    for r in range(row_start, row_end):
        for c in range(BOARD_SIZE):
            v: int = int(board.grid[r, c]) * int(color)
            if v == 1:
                local.extend(man_simple_moves(board, r, c, color))
            elif v == 2:
                local.extend(king_simple_moves(board, r, c))
    return local


def _fan_out(scan: ChunkScanner, board: Board, color: Color,
             settings: Optional[EngineSettings]) -> List[MoveSequence]:
    settings = settings or get_engine_settings()
    workers: int = worker_count(settings.max_workers)
    chunks: List[RowRange] = row_chunks(workers)
    # The chunk count rounds up, so it can exceed the worker limit
    pool_size: int = min(workers, len(chunks))
    args = [(board, color, start, end) for start, end in chunks]

    if len(chunks) == 1:
        partials = [scan(*args[0])]
    else:
        pool_cls = Pool if settings.worker_backend == "process" else ThreadPool
        with pool_cls(pool_size) as pool:
            partials = pool.starmap(scan, args)

    moves: List[MoveSequence] = [seq for part in partials for seq in part]
    logger.debug("%s: %d %s worker(s) produced %d sequence(s) for %s",
                 scan.__name__, pool_size, settings.worker_backend, len(moves), color.name)
    return moves


def find_all_captures(board: Board, color: Color,
                      settings: Optional[EngineSettings] = None) -> List[MoveSequence]:
    """Every maximal capture sequence available to ``color``."""
    return _fan_out(_scan_captures, board, color, settings)


def find_all_normal_moves(board: Board, color: Color,
                          settings: Optional[EngineSettings] = None) -> List[MoveSequence]:
    """Every simple move available to ``color``.

    Only legal when ``find_all_captures`` is empty for the same position.
    """
    return _fan_out(_scan_normal_moves, board, color, settings)


def legal_moves(board: Board, color: Color,
                settings: Optional[EngineSettings] = None) -> List[MoveSequence]:
    """Captures if any exist, otherwise simple moves."""
    captures = find_all_captures(board, color, settings)
    if captures:
        return captures
    return find_all_normal_moves(board, color, settings)


def has_any_move(board: Board, color: Color,
                 settings: Optional[EngineSettings] = None) -> bool:
    if find_all_captures(board, color, settings):
        return True
    return bool(find_all_normal_moves(board, color, settings))
