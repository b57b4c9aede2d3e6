"""
random_player.py - A player that picks uniformly among open columns
"""

import numpy as np
from typing import Optional

from connectn.debug import debug
from connectn.exceptions import NoAvailableColumnError
from connectn.game.board import Board
from connectn.players.base import Player
from connectn.utils import Color


class RandomPlayer(Player):
    """Chooses any available column with equal probability."""

    def __init__(self, name: str, seed: Optional[int] = None):
        super().__init__(name)
        self.rng = np.random.default_rng(seed)

    def decide(self, board: Board, color: Color) -> int:
        valid_moves = board.get_available_columns()
        if not valid_moves:
            raise NoAvailableColumnError(f"No columns available for {self.name}.")
        col_index = int(self.rng.choice(valid_moves))
        debug.debug(f"{self.name} ({color}) picked column {col_index}", "player")
        return col_index
