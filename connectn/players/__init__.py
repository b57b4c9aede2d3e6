"""
connectn.players - Column-choosing strategies

A Player is handed a copy of the board and its color each turn and answers
with a column index.
"""

from connectn.players.base import Player
from connectn.players.random_player import RandomPlayer
from connectn.players.terminal import TerminalPlayer

__all__ = ['Player', 'RandomPlayer', 'TerminalPlayer']
