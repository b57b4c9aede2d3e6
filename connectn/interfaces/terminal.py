"""
terminal.py - Terminal output used by the game loop and human players
"""

import sys
from typing import List, Optional, TextIO

from connectn.utils import CLEAR_SCREEN

CLEAR_SEQUENCE = "\033[2J\033[H"


def clear_screen(stream: Optional[TextIO] = None) -> None:
    """Clear the terminal and move the cursor to the top-left corner."""
    stream = stream or sys.stdout
    stream.write(CLEAR_SEQUENCE)
    stream.flush()


class TerminalDisplay:
    """Writes game output to a terminal stream."""

    def __init__(self, clear: bool = CLEAR_SCREEN, stream: Optional[TextIO] = None):
        self.clear_enabled = clear
        self.stream = stream

    def clear(self) -> None:
        if self.clear_enabled:
            clear_screen(self.stream or sys.stdout)

    def show(self, text: str) -> None:
        print(text, file=self.stream or sys.stdout)


class QuietDisplay(TerminalDisplay):
    """Keeps output in memory instead of printing it, for simulations and tests."""

    def __init__(self):
        super().__init__(clear=False)
        self.lines: List[str] = []
        self.clears = 0

    def clear(self) -> None:
        self.clears += 1

    def show(self, text: str) -> None:
        self.lines.append(text)
