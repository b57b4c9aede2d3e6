"""
connectn.game - Core game mechanics for connect-N

This package contains the board representation with win detection and
the turn-based game loop.
"""

from connectn.game.board import Board
from connectn.game.rules import Game

__all__ = ['Board', 'Game']
