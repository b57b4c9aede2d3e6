"""
base.py - The interface every connect-N player implements
"""

from abc import ABC, abstractmethod

from connectn.game.board import Board
from connectn.utils import Color


class Player(ABC):
    """
    Something that chooses columns.

    The game calls decide() once per turn with a copy of the board and the
    color the player is playing. The returned column must satisfy
    board.available_column(); anything else ends the game with an error.
    """

    def __init__(self, name: str):
        self.name = name

    @abstractmethod
    def decide(self, board: Board, color: Color) -> int:
        """Return the 0-indexed column to drop into."""

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self.name!r})"
