"""
errors.py - Exceptions raised by the Connect Four engine

Every rejected move leaves the game state untouched, so callers can
catch these, ignore the input and carry on.
"""

from typing import Any, Optional


class Connect4Error(Exception):
    """Base class for all engine errors."""


class IllegalMoveError(Connect4Error, ValueError):
    """A move was rejected."""

    def __init__(self, message: str, column: Any = None):
        super().__init__(message)
        self.column = column


class InvalidColumn(IllegalMoveError):
    """Column index is not an integer in [0, width)."""

    def __init__(self, column: Any, width: int):
        super().__init__(f"Column {column!r} is out of range [0, {width})", column)
        self.width = width


class ColumnFull(IllegalMoveError):
    """Column has no empty cell left."""

    def __init__(self, column: int):
        super().__init__(f"Column {column} is full", column)


class GameAlreadyOver(IllegalMoveError):
    """A move was attempted after the game reached a terminal result."""

    def __init__(self, result: Any, column: Optional[int] = None):
        super().__init__(f"Game is already over ({result.name})", column)
        self.result = result


class InvalidBoardSize(Connect4Error, ValueError):
    """Board dimensions are not positive integers."""

    def __init__(self, width: Any, height: Any):
        super().__init__(f"Invalid board size {width!r}x{height!r}")
        self.width = width
        self.height = height
