"""Draughts move engine: mandatory multi-capture move generation and application.

Usage examples:
    from draughts import init_board, legal_moves, make_move_sequence, Color
    from draughts import GameState
"""
from __future__ import annotations

# Board model
from .types import Cell, Color, MoveSequence, MoveStep, Position
from .board import BOARD_SIZE, Board, color_of, init_board, is_king, on_board, promote

# Generators and application
from .moves import (
    MoveValidator,
    get_all_captures_for_piece,
    king_simple_moves,
    man_simple_moves,
    search_captures,
    simple_moves_for_piece,
)
from .apply import apply_move, make_move_sequence, make_one_step
from .engine import (
    find_all_captures,
    find_all_normal_moves,
    has_any_move,
    legal_moves,
    row_chunks,
    worker_count,
)

# Presentation and game flow
from .notation import cell_to_string, find_move, parse_cell, parse_move_input, seq_to_str
from .game import GameState, choose_computer_move, winner

__version__ = "1.0.0"
