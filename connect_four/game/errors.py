"""
errors.py - Exception types raised by the Connect Four engine

Only ColumnFullError is a recoverable game condition; the session turns it
into a Rejected move result. The remaining errors signal a caller bug and
are meant to propagate.
"""


class ConnectFourError(Exception):
    """Base class for engine errors."""


class ColumnFullError(ConnectFourError):
    """A piece was dropped into a column with no free cell."""

    def __init__(self, column: int):
        super().__init__(f"Column {column} is full")
        self.column = column


class InvalidColumnError(ConnectFourError, ValueError):
    """A column index outside [0, COLS) was supplied."""

    def __init__(self, column):
        super().__init__(f"Column {column!r} is not a valid column index")
        self.column = column


class RoundOverError(ConnectFourError, RuntimeError):
    """A move was attempted after the round reached a win or draw."""
