"""
exceptions.py - Error types raised by the connectn engine
"""


class ConnectNError(Exception):
    """Base class for every error the engine raises."""


class InvalidColumnError(ConnectNError, ValueError):
    """A piece was dropped into a full or out-of-range column."""

    def __init__(self, column: int):
        super().__init__(f"Column {column} is not available.")
        self.column = column


class InvalidConfigurationError(ConnectNError, ValueError):
    pass


class LifecycleError(ConnectNError, RuntimeError):
    """start() or resume() was called out of sequence."""


class RenderingError(ConnectNError):
    """The board cannot be drawn with its configured column width."""


class PlayerQuitError(ConnectNError):
    """A player gave up instead of choosing a column."""


class NoAvailableColumnError(ConnectNError):
    """A player was asked to move on a board with no open column."""
