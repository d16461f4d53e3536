"""
utils.py - Constants, enumerations and win detection for the Connect Four engine

This module provides the board constants, the player/result enumerations,
and the line scan used to adjudicate wins.
"""

from enum import Enum, auto
from typing import List, Optional, Tuple

import numpy as np

# Game constants
HEIGHT = 6
WIDTH = 7
CONNECT_N = 4  # Number of pieces in a row to win

Coord = Tuple[int, int]  # (row, col), row 0 is the top


class Player(Enum):
    """Enumeration representing players and cell states."""
    EMPTY = 0
    ONE = 1    # Moves first
    TWO = 2

    def other(self) -> 'Player':
        """Get the opponent."""
        if self == Player.ONE:
            return Player.TWO
        elif self == Player.TWO:
            return Player.ONE
        return Player.EMPTY

    def __str__(self):
        if self == Player.EMPTY:
            return "empty"
        return f"Player {self.value}"


class GameResult(Enum):
    """Enumeration representing the game status."""
    IN_PROGRESS = auto()
    PLAYER_ONE_WIN = auto()
    PLAYER_TWO_WIN = auto()
    DRAW = auto()

    def is_game_over(self) -> bool:
        """Check if the game is over."""
        return self != GameResult.IN_PROGRESS

    @property
    def winner(self) -> Optional[Player]:
        """The winning player, or None for an unfinished or drawn game."""
        if self == GameResult.PLAYER_ONE_WIN:
            return Player.ONE
        if self == GameResult.PLAYER_TWO_WIN:
            return Player.TWO
        return None

    @classmethod
    def won_by(cls, player: Player) -> 'GameResult':
        """Map a player to the matching win result."""
        if player == Player.ONE:
            return cls.PLAYER_ONE_WIN
        if player == Player.TWO:
            return cls.PLAYER_TWO_WIN
        raise ValueError(f"No win result for {player!r}")


class Outcome(Enum):
    """What a single accepted move led to."""
    CONTINUE = auto()
    WIN = auto()
    TIE = auto()


class Direction(Enum):
    """Enumeration representing line directions for win checking."""
    HORIZONTAL = auto()      # left to right
    VERTICAL = auto()        # top to bottom
    DIAGONAL_RIGHT = auto()  # top-left to bottom-right
    DIAGONAL_LEFT = auto()   # top-right to bottom-left


# Direction vectors (row, col). Dict order is the scan order.
DIRECTION_VECTORS = {
    Direction.HORIZONTAL: (0, 1),
    Direction.VERTICAL: (1, 0),
    Direction.DIAGONAL_RIGHT: (1, 1),
    Direction.DIAGONAL_LEFT: (1, -1),
}


def is_valid_position(row: int, col: int, height: int = HEIGHT, width: int = WIDTH) -> bool:
    """
    Check if a position is within the board boundaries.

    Args:
        row: Row index
        col: Column index
        height: Number of rows on the board
        width: Number of columns on the board

    Returns:
        True if position is valid, False otherwise
    """
    return 0 <= row < height and 0 <= col < width


def line_from(row: int, col: int, direction: Direction, length: int = CONNECT_N) -> List[Coord]:
    """Build the coordinates of a line starting at (row, col). Bounds are not checked."""
    dr, dc = DIRECTION_VECTORS[direction]
    return [(row + i * dr, col + i * dc) for i in range(length)]


def find_winning_line(grid: np.ndarray, player: Player) -> Optional[List[Coord]]:
    """
    Find a line of CONNECT_N pieces owned by the given player.

    Every cell is tried as a line start in row-major order, and at each
    start the directions are tried in DIRECTION_VECTORS order. The first
    complete line found is returned, so when several lines exist the
    report is deterministic.

    Args:
        grid: The game board
        player: The player to check for (only their pieces are considered)

    Returns:
        List of (row, col) positions forming the line, or None if there is none
    """
    height, width = grid.shape
    value = player.value

    for row in range(height):
        for col in range(width):
            for direction in DIRECTION_VECTORS:
                cells = line_from(row, col, direction)
                if all(is_valid_position(r, c, height, width) and grid[r, c] == value
                       for r, c in cells):
                    return cells

    return None


def check_win(grid: np.ndarray, player: Player) -> bool:
    """Check whether the given player has CONNECT_N in a row anywhere on the board."""
    return find_winning_line(grid, player) is not None
