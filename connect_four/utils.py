"""
utils.py - Constants, enumerations and helpers for the Connect Four engine

Cells are addressed by a flat position in [0, 41]:

    position = row * COLS + col

Row 0 is the top of the board and row 5 the bottom, so pieces land on
row 5 first and columns fill upwards towards row 0.
"""

from enum import Enum, auto
from typing import Iterable, Optional, Tuple

import numpy as np

# Game constants
ROWS = 6
COLS = 7
CONNECT_N = 4  # Number of pieces in a line to win
NUM_CELLS = ROWS * COLS
BOTTOM_ROW = ROWS - 1


class Player(Enum):
    """Enumeration representing players and cell states."""
    EMPTY = 0
    ONE = 1    # First player
    TWO = 2    # Second player

    def other(self):
        """Get the other player."""
        if self == Player.ONE:
            return Player.TWO
        elif self == Player.TWO:
            return Player.ONE
        return Player.EMPTY

    @classmethod
    def from_id(cls, player_id: int) -> 'Player':
        """Map a player id (1 or 2) onto its enum member."""
        if player_id not in (1, 2):
            raise ValueError(f"Player id must be 1 or 2, got {player_id!r}")
        return cls(player_id)

    def __str__(self):
        if self == Player.EMPTY:
            return " "
        elif self == Player.ONE:
            return "X"
        else:
            return "O"


class Direction(Enum):
    """Enumeration representing the orientations of a winning line."""
    HORIZONTAL = auto()
    VERTICAL = auto()
    DIAGONAL_UP = auto()  # Diagonal from bottom-left to top-right
    DIAGONAL_DOWN = auto()  # Diagonal from top-left to bottom-right


# Direction vectors (row, col) for each direction
DIRECTION_VECTORS = {
    Direction.HORIZONTAL: (0, 1),
    Direction.VERTICAL: (1, 0),
    Direction.DIAGONAL_UP: (-1, 1),
    Direction.DIAGONAL_DOWN: (1, 1)
}


def is_valid_position(row: int, col: int) -> bool:
    """
    Check if a row/column pair is within the board boundaries.

    Args:
        row: Row index
        col: Column index

    Returns:
        True if position is valid, False otherwise
    """
    return 0 <= row < ROWS and 0 <= col < COLS


def to_position(row: int, col: int) -> int:
    """Convert a row/column pair to its flat position."""
    if not is_valid_position(row, col):
        raise ValueError(f"Cell ({row}, {col}) is outside the {ROWS}x{COLS} board")
    return row * COLS + col


def to_row_col(position: int) -> Tuple[int, int]:
    """Convert a flat position to its (row, col) pair."""
    if not 0 <= position < NUM_CELLS:
        raise ValueError(f"Position {position} is outside [0, {NUM_CELLS - 1}]")
    return divmod(position, COLS)


def render_board_ascii(board: np.ndarray, highlight: Optional[Iterable[int]] = None) -> str:
    """
    Render the board as ASCII art.

    Args:
        board: The game grid
        highlight: Positions to mark with '*' (e.g. a winning connection)

    Returns:
        ASCII representation of the board
    """
    highlight = set(highlight or ())
    result = ["|" + "-" * (COLS * 2 - 1) + "|"]

    for row in range(ROWS):
        cells = []
        for col in range(COLS):
            if row * COLS + col in highlight:
                cells.append("*")
            else:
                cells.append(str(Player(int(board[row, col]))))
        result.append("|" + " ".join(cells) + "|")

    result.append("|" + "-" * (COLS * 2 - 1) + "|")
    result.append("|" + " ".join(str(i) for i in range(COLS)) + "|")

    return "\n".join(result)
