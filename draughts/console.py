"""
Console front end: board rendering and the human-vs-computer turn loop.
"""
from __future__ import annotations

import logging
import random
import sys
import time
from typing import List, Optional, TextIO

from config import PlaySettings, UISettings, EngineSettings

from .board import BOARD_SIZE, Board
from .game import GameState, choose_computer_move
from .notation import cell_to_string, find_move, parse_move_input, seq_to_str
from .types import Cell, Color, MoveSequence

logger = logging.getLogger(__name__)

RULES_TEXT = """\
---- RULES ----
1) Men move forward one square diagonally.
2) A king moves any distance along a diagonal, forward or backward, but
   cannot jump over its own pieces.
3) Capturing is compulsory.
4) Men capture both forward and backward.
5) Multiple captures chain: keep capturing while it is possible.
6) A king captures along a diagonal and may land on any empty square
   beyond the captured piece.
7) A king keeps capturing while it can, just like a man.
8) With several capture options you may choose any of them, short or long.
9) Light moves first.

---- VICTORY ----
Capture every enemy piece, or leave the opponent without a legal move.
"""

_UNICODE = {
    Cell.DARK_KING: '♛',
    Cell.DARK_MAN: '●',
    Cell.EMPTY: '·',
    Cell.LIGHT_MAN: '○',
    Cell.LIGHT_KING: '♕',
}

_ANSI_LIGHT = "\033[97m"
_ANSI_DARK = "\033[91m"
_ANSI_RESET = "\033[0m"


def _glyph(cell: Cell, ui: UISettings) -> str:
    g = _UNICODE[cell] if ui.use_unicode else cell.symbol
    if ui.use_color and cell.color is not None:
        prefix = _ANSI_LIGHT if cell.color is Color.LIGHT else _ANSI_DARK
        return f"{prefix}{g}{_ANSI_RESET}"
    return g


def render_board(board: Board, user_light: bool = True, ui: Optional[UISettings] = None) -> str:
    """Text picture of the board as seen by the user.

    The rank label of each printed row and the file letters match
    ``cell_to_string`` for the same orientation.
    """
    ui = ui or UISettings(use_color=False)
    rows = range(BOARD_SIZE) if user_light else range(BOARD_SIZE - 1, -1, -1)
    cols = list(range(BOARD_SIZE)) if user_light else list(range(BOARD_SIZE - 1, -1, -1))
    lines = []
    if ui.show_coordinates:
        lines.append("   | " + " ".join(chr(ord('A') + i) for i in range(BOARD_SIZE)))
        lines.append("   " + "-" * (2 * BOARD_SIZE + 1))
    for r in rows:
        cells = " ".join(_glyph(board[r, c], ui) for c in cols)
        if ui.show_coordinates:
            rank = cell_to_string(r, cols[0], user_light)[1]
            lines.append(f" {rank:>2} | {cells}")
        else:
            lines.append(cells)
    return "\n".join(lines) + "\n"


class ConsoleGame:
    """Plays one game on text streams, a human against a random mover."""

    def __init__(self, play: Optional[PlaySettings] = None, ui: Optional[UISettings] = None,
                 engine: Optional[EngineSettings] = None,
                 stdin: Optional[TextIO] = None, stdout: Optional[TextIO] = None) -> None:
        self.play = play or PlaySettings()
        self.ui = ui or UISettings()
        self.stdin = stdin or sys.stdin
        self.stdout = stdout or sys.stdout
        human = {'light': Color.LIGHT, 'dark': Color.DARK, 'none': None}[self.play.human_side]
        self.state = GameState(human_side=human, settings=engine)
        self.rng = random.Random(self.play.seed)
        # Orientation follows the human; a computer-only game is shown from light.
        self.user_light: bool = human is not Color.DARK

    def _print(self, text: str = "") -> None:
        self.stdout.write(text + "\n")

    def _side_name(self, color: Color) -> str:
        return "Light" if color is Color.LIGHT else "Dark"

    def _read_human_move(self, moves: List[MoveSequence]) -> Optional[MoveSequence]:
        """Prompt until the input names a legal move. None on end of input."""
        while True:
            self.stdout.write("Enter your move (e.g. A6 B5): ")
            self.stdout.flush()
            line = self.stdin.readline()
            if not line:
                return None
            parsed = parse_move_input(line, self.user_light)
            if parsed is None:
                self._print("Invalid input. Try again.")
                continue
            seq = find_move(moves, *parsed)
            if seq is None:
                self._print("Illegal move: not found in the legal-move list.")
                continue
            return seq

    def _computer_turn(self, moves: List[MoveSequence], capture: bool) -> MoveSequence:
        seq = choose_computer_move(moves, self.rng)
        side = self._side_name(self.state.side_to_move)
        if capture:
            self._print(f"Computer ({side}) captures: {seq_to_str(seq, self.user_light)} "
                        f"[captured: {seq.captures_count}]")
        else:
            frm = cell_to_string(*seq.start, self.user_light)
            to = cell_to_string(*seq.end, self.user_light)
            self._print(f"Computer ({side}) moves: ({frm}) -> ({to})")
        return seq

    def play_turn(self) -> bool:
        """Play one turn. Returns False when the game cannot continue."""
        state = self.state
        started = time.perf_counter()
        self._print(render_board(state.board, self.user_light, self.ui))
        who = "you" if state.is_human_turn() else "computer"
        self._print(f"[{self._side_name(state.side_to_move)} to move] ({who}):")

        moves = state.legal_moves()
        capture = bool(moves) and moves[0].is_capture
        if state.is_human_turn():
            if capture:
                self._print("Capture is compulsory!")
            seq = self._read_human_move(moves)
            if seq is None:
                logger.info("Input closed, abandoning the game")
                return False
        else:
            seq = self._computer_turn(moves, capture)

        state.make_move(seq)
        elapsed_ms = (time.perf_counter() - started) * 1000
        self._print(f"Move #{state.move_number - 1} finished in {elapsed_ms:.0f} ms\n")
        return True

    def run(self) -> Optional[Color]:
        """Play until the game ends, input closes or the turn limit is hit."""
        if self.play.show_rules:
            self._print(RULES_TEXT)
        turns = 0
        while not self.state.game_over:
            if self.play.max_turns and turns >= self.play.max_turns:
                self._print("Turn limit reached.")
                break
            if not self.play_turn():
                break
            turns += 1

        if self.state.game_over:
            self._print(render_board(self.state.board, self.user_light, self.ui))
            loser = self.state.winner.opponent
            if self.state.board.count_pieces(loser) == 0:
                self._print(f"{self._side_name(self.state.winner)} wins!")
            else:
                self._print(f"{self._side_name(loser)} has no moves! "
                            f"{self._side_name(self.state.winner)} wins.")
        self._print("Thanks for playing!")
        return self.state.winner
