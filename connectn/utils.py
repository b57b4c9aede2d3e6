"""
utils.py - Constants and shared types for the connectn engine

This module holds the default board settings, the team colors, the game
outcome enumeration and small formatting helpers used by the game loop and
the command line interface.
"""

from enum import Enum, auto
from typing import List, Sequence

# Board defaults
ROWS = 6
COLS = 7
ROW_HEIGHT = 3     # terminal lines per board row
COLUMN_WIDTH = 7   # terminal characters per board column
CONNECT_N = 4      # pieces in a line needed to win

# Cell value used for an empty slot in the board grid
EMPTY = 0

# Terminal toggles
CLEAR_SCREEN = True


class Color(Enum):
    """Team colors. Values start at 1 so that 0 can mark an empty cell."""
    RED = 1
    BLACK = 2
    YELLOW = 3
    BLUE = 4

    @classmethod
    def from_value(cls, value: int):
        """Map a grid cell value to a Color, or None for an empty cell."""
        if value == EMPTY:
            return None
        return cls(int(value))

    @classmethod
    def from_string(cls, name: str) -> 'Color':
        """
        Parse a color name, ignoring case.

        Raises:
            ValueError: If the name is not a known color
        """
        try:
            return cls[name.strip().upper()]
        except KeyError:
            choices = ", ".join(str(color) for color in cls)
            raise ValueError(f"Unknown color '{name}' (choose from {choices})") from None

    def __str__(self):
        return self.name.capitalize()


class GameResult(Enum):
    """Outcome of a game."""
    IN_PROGRESS = auto()
    WIN = auto()
    TIE = auto()

    def is_game_over(self) -> bool:
        return self != GameResult.IN_PROGRESS


def format_names(names: Sequence[str]) -> str:
    """
    Join player names for an announcement.

    Examples:
        ["Ann"] -> "Ann"
        ["Ann", "Bo"] -> "Ann and Bo"
        ["Ann", "Bo", "Cy"] -> "Ann, Bo, and Cy"
    """
    names: List[str] = list(names)
    if not names:
        return ""
    if len(names) == 1:
        return names[0]
    if len(names) == 2:
        return f"{names[0]} and {names[1]}"
    return ", ".join(names[:-1]) + ", and " + names[-1]
