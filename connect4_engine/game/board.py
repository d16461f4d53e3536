"""
board.py - Board representation for the Connect Four engine

The Board owns the grid and knows how pieces fall. It does not know whose
turn it is or whether the game is over; that is the engine's job.
"""

from typing import List, Optional

import numpy as np

from connect4_engine.debug import debug
from connect4_engine.errors import ColumnFull, InvalidBoardSize, InvalidColumn
from connect4_engine.utils import CONNECT_N, HEIGHT, WIDTH, Coord, Player, find_winning_line


def _is_int(value) -> bool:
    return isinstance(value, (int, np.integer)) and not isinstance(value, (bool, np.bool_))


class Board:
    """
    A HEIGHT x WIDTH grid of cells, each EMPTY or holding a player's value.

    Row 0 is the top and row height-1 is the bottom, so pieces are placed
    in the highest-numbered empty row of a column.
    """

    def __init__(self, width: int = WIDTH, height: int = HEIGHT):
        if not (_is_int(width) and _is_int(height)) or width < 1 or height < 1:
            raise InvalidBoardSize(width, height)

        self.width = int(width)
        self.height = int(height)

        if self.width < CONNECT_N and self.height < CONNECT_N:
            debug.warning(f"Board {self.width}x{self.height} cannot hold any line of {CONNECT_N}", "board")
        elif self.width < CONNECT_N or self.height < CONNECT_N:
            debug.warning(f"Board {self.width}x{self.height} is smaller than {CONNECT_N} along one axis", "board")

        self.clear()

    def clear(self):
        """Empty every cell."""
        debug.debug(f"Clearing {self.width}x{self.height} board", "board")
        self.grid = np.full((self.height, self.width), Player.EMPTY.value, dtype=np.int8)

    def validate_column(self, column) -> int:
        """Return column as an int, or raise InvalidColumn."""
        if not _is_int(column) or not (0 <= column < self.width):
            raise InvalidColumn(column, self.width)
        return int(column)

    def lowest_empty_row(self, column: int) -> Optional[int]:
        """
        Find the row a piece dropped into this column would land in.

        Returns:
            The row index, or None if the column is full
        """
        column = self.validate_column(column)
        for row in range(self.height - 1, -1, -1):
            if self.grid[row, column] == Player.EMPTY.value:
                return row
        return None

    def available_rows(self, column: int) -> int:
        """Number of empty cells left in a column."""
        column = self.validate_column(column)
        return int(np.count_nonzero(self.grid[:, column] == Player.EMPTY.value))

    def is_column_full(self, column: int) -> bool:
        return self.available_rows(column) == 0

    def is_full(self) -> bool:
        """True when no column can take another piece."""
        return all(self.is_column_full(col) for col in range(self.width))

    def open_columns(self) -> List[int]:
        return [col for col in range(self.width) if not self.is_column_full(col)]

    def drop(self, column: int, player: Player) -> Coord:
        """
        Place a piece for the player in the given column.

        Args:
            column: The column to drop into (0-indexed)
            player: Player.ONE or Player.TWO

        Returns:
            The (row, col) the piece landed on

        Raises:
            InvalidColumn: column is not in [0, width)
            ColumnFull: column has no empty cell
        """
        if player == Player.EMPTY:
            raise ValueError("Cannot drop an EMPTY piece")

        column = self.validate_column(column)
        row = self.lowest_empty_row(column)
        if row is None:
            raise ColumnFull(column)

        self.grid[row, column] = player.value
        debug.trace(f"Placed {player} at ({row}, {column})", "board")
        return row, column

    def cell(self, row: int, column: int) -> Player:
        return Player(int(self.grid[row, column]))

    def winning_line(self, player: Player) -> Optional[List[Coord]]:
        return find_winning_line(self.grid, player)

    def get_state(self) -> np.ndarray:
        """
        Get a read-only copy of the grid.

        Returns:
            2D numpy array; changes to the board are not reflected in it
        """
        state = self.grid.copy()
        state.flags.writeable = False
        return state

    def __repr__(self) -> str:
        pieces = int(np.count_nonzero(self.grid))
        return f"Board(width={self.width}, height={self.height}, pieces={pieces})"
