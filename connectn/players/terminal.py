"""
terminal.py - A human player typing column numbers into the terminal
"""

from typing import Callable, Optional

from connectn.debug import debug
from connectn.exceptions import PlayerQuitError
from connectn.game.board import Board
from connectn.interfaces.terminal import TerminalDisplay
from connectn.players.base import Player
from connectn.utils import Color

QUIT_COMMANDS = ("q", "quit", "exit")


class TerminalPlayer(Player):
    """
    Prompts for a 1-based column number until an open column is entered.

    Typing q (or closing input) raises PlayerQuitError.
    """

    def __init__(self, name: str, display: Optional[TerminalDisplay] = None,
                 input_func: Callable[[str], str] = input):
        super().__init__(name)
        self.display = display or TerminalDisplay()
        self.input_func = input_func

    def _read(self, prompt: str) -> str:
        try:
            return self.input_func(prompt).strip().lower()
        except EOFError:
            raise PlayerQuitError(f"{self.name} closed the input.") from None

    def decide(self, board: Board, color: Color) -> int:
        error_msg = None
        while True:
            self.display.clear()
            self.display.show(board.render())
            self.display.show(board.render_column_numbers())
            if error_msg:
                self.display.show(error_msg)

            raw = self._read(f"{color} ({self.name}): ")
            if raw in QUIT_COMMANDS:
                raise PlayerQuitError(f"{self.name} quit the game.")

            try:
                col_index = int(raw) - 1
            except ValueError:
                error_msg = "Please input a valid integer."
                continue

            if board.available_column(col_index):
                debug.debug(f"{self.name} ({color}) entered column {col_index}", "player")
                return col_index
            error_msg = f"Please input a valid column index (1-{board.num_columns})."
