"""
board.py - Board representation for Connect Four

This module implements the Board class which owns the 6x7 grid of cell
occupancy and the per-column fill pointers. It knows nothing about turns
or winning; the session decides who drops where.
"""

from typing import List

import numpy as np

from connect_four.debug import debug
from connect_four.game.errors import ColumnFullError, InvalidColumnError
from connect_four.utils import (ROWS, COLS, BOTTOM_ROW, Player,
                                is_valid_position, render_board_ascii, to_position)


class Board:
    """
    Represents a Connect Four game board.

    ``grid[row, col]`` holds the Player value occupying the cell (0 when
    empty), with row 0 at the top. ``fill_pointers[col]`` is the row index
    of the next free cell in that column: it starts at the bottom row and
    decreases as pieces land, reaching -1 once the column is full.
    """

    def __init__(self):
        """Initialize an empty Connect Four board."""
        debug.debug("Initializing new Board", "board")
        self.reset()

    def reset(self):
        """Clear every cell and reset every fill pointer to the bottom row."""
        debug.debug("Resetting board", "board")
        self.grid = np.zeros((ROWS, COLS), dtype=int)
        self.fill_pointers = np.full(COLS, BOTTOM_ROW, dtype=int)

    def copy(self) -> 'Board':
        """
        Create a deep copy of the current board.

        Returns:
            A new Board instance with the same state
        """
        new_board = Board.__new__(Board)
        new_board.grid = self.grid.copy()
        new_board.fill_pointers = self.fill_pointers.copy()
        return new_board

    @staticmethod
    def _check_column(column) -> None:
        if isinstance(column, bool) or not isinstance(column, (int, np.integer)):
            raise InvalidColumnError(column)
        if not 0 <= column < COLS:
            raise InvalidColumnError(column)

    def is_column_full(self, column: int) -> bool:
        """Check whether a column has no free cell left."""
        self._check_column(column)
        return bool(self.fill_pointers[column] < 0)

    def drop_piece(self, column: int, player: Player) -> int:
        """
        Drop a piece for ``player`` into ``column``.

        Args:
            column: The column to drop into (0-indexed)
            player: Player.ONE or Player.TWO

        Returns:
            The flat position (row * COLS + column) where the piece landed

        Raises:
            ColumnFullError: If the column has no free cell
            InvalidColumnError: If the column index is out of range
        """
        self._check_column(column)
        if player not in (Player.ONE, Player.TWO):
            raise ValueError(f"Cannot drop a piece for {player!r}")

        row = int(self.fill_pointers[column])
        if row < 0:
            debug.debug(f"Rejected drop: column {column} is full", "board")
            raise ColumnFullError(column)

        self.grid[row, column] = player.value
        self.fill_pointers[column] -= 1
        position = to_position(row, column)
        debug.trace(f"Placed {player.name} at ({row}, {column}) -> position {position}", "board")
        return position

    def get_cell_state(self, row: int, col: int) -> Player:
        """Return the occupant of a cell (Player.EMPTY when free)."""
        if not is_valid_position(row, col):
            raise ValueError(f"Cell ({row}, {col}) is outside the board")
        return Player(int(self.grid[row, col]))

    def column_height(self, column: int) -> int:
        """Number of pieces currently stacked in a column."""
        self._check_column(column)
        return BOTTOM_ROW - int(self.fill_pointers[column])

    def get_valid_moves(self) -> List[int]:
        """
        Get a list of columns that still accept a piece.

        Returns:
            List of valid column indices
        """
        return [int(col) for col in np.flatnonzero(self.fill_pointers >= 0)]

    def is_full(self) -> bool:
        """True once every column is full."""
        return bool(np.all(self.fill_pointers < 0))

    def piece_count(self) -> int:
        """Total number of pieces on the board."""
        return int(np.count_nonzero(self.grid))

    def get_state(self) -> np.ndarray:
        """
        Get the current board state as a numpy array.

        Returns:
            Copy of the 2D grid
        """
        return self.grid.copy()

    def render(self, highlight=None) -> str:
        """
        Render the board as a string.

        Args:
            highlight: Optional positions to mark (e.g. a winning connection)
        """
        return render_board_ascii(self.grid, highlight)

    def __str__(self) -> str:
        return self.render()
