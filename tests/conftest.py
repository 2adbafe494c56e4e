"""
Pytest configuration for the Connect Four tests.

Puts the project root on sys.path so the suite runs from a plain checkout,
and provides shared fixtures.
"""

import sys
from pathlib import Path

import pytest

_root_path = str(Path(__file__).resolve().parent.parent)
if _root_path not in sys.path:
    sys.path.insert(0, _root_path)

from connect_four.game.rules import GameSession  # noqa: E402

# A full 42-move game in which nobody connects four. Player one ends up on
# every cell whose column parity matches the pattern 0,0,1,1,0,1 read from
# the bottom row up, which leaves every line of four mixed.
DRAW_SEQUENCE = (
    [0, 1, 0, 1, 1, 0, 1, 0, 0, 1, 1, 0]
    + [2, 3, 2, 3, 3, 2, 3, 2, 2, 3, 3, 2]
    + [6, 5, 6, 6, 4, 6, 6, 6, 4, 5, 5, 4, 5, 4, 4, 5, 5, 4]
)

# The same shape as DRAW_SEQUENCE with columns 0 and 1 reordered so player
# two holds 22; the final drop at position 4 completes the diagonal
# 4, 10, 16, 22 on the 42nd move.
LAST_MOVE_WIN_SEQUENCE = (
    [0, 1, 0, 0, 0, 1, 0, 1, 1, 1, 1, 0]
    + DRAW_SEQUENCE[12:]
)

# Player one stacks column 0 while player two stacks column 1
VERTICAL_WIN_SEQUENCE = [0, 1, 0, 1, 0, 1, 0]

# Player one completes 35..39 on the bottom row by filling the gap last
FIVE_IN_A_ROW_SEQUENCE = [0, 0, 1, 1, 3, 3, 4, 6, 2]


@pytest.fixture
def session():
    return GameSession()


def play(session, columns):
    """Apply a list of columns and return the list of outcomes."""
    return [session.drop_piece(column) for column in columns]
