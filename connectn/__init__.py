"""
connectn - Connect-N game engine

This package provides a turn-based connect-N implementation: a gravity-fed
board with configurable size and win length, a game loop supporting any
number of players and shared team colors, and terminal front ends.
"""

# Version number
__version__ = '0.1.0'
