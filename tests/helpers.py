"""
Shared helpers for the connectn tests.
"""

from typing import Iterable

from connectn.game.board import Board
from connectn.players.base import Player
from connectn.utils import Color


class ScriptedPlayer(Player):
    """Plays a fixed list of columns and remembers what it was asked."""

    def __init__(self, name: str, columns: Iterable[int]):
        super().__init__(name)
        self.columns = list(columns)
        self.calls = []

    def decide(self, board: Board, color: Color) -> int:
        self.calls.append((board, color))
        return self.columns.pop(0)


def place(board: Board, color: Color, cells):
    """Write pieces straight into the grid, ignoring gravity."""
    for row, col in cells:
        board.grid[row, col] = color.value
    return board
