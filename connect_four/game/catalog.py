"""
catalog.py - The fixed catalog of winning lines

Every line of CONNECT_N cells that fits on the board is enumerated once by
walking each direction vector from every starting cell. On a 6x7 board this
gives 69 lines: 24 horizontal, 21 vertical and 12 per diagonal direction.
Lines are stored as tuples of flat positions sorted ascending.
"""

from typing import Dict, FrozenSet, List, Tuple

from connect_four.debug import debug
from connect_four.utils import (ROWS, COLS, CONNECT_N, Direction,
                                DIRECTION_VECTORS, is_valid_position)

Line = Tuple[int, ...]


def lines_by_direction() -> Dict[Direction, List[Line]]:
    """
    Enumerate the winning lines grouped by orientation.

    Returns:
        Mapping of Direction to its lines, each a sorted tuple of positions
    """
    catalog = {}
    for direction, (dr, dc) in DIRECTION_VECTORS.items():
        lines = []
        for row in range(ROWS):
            for col in range(COLS):
                end_row = row + dr * (CONNECT_N - 1)
                end_col = col + dc * (CONNECT_N - 1)
                if not is_valid_position(end_row, end_col):
                    continue
                cells = [(row + dr * i) * COLS + (col + dc * i) for i in range(CONNECT_N)]
                lines.append(tuple(sorted(cells)))
        catalog[direction] = lines
    return catalog


def generate_winning_lines() -> FrozenSet[Line]:
    """Build the full catalog as an immutable set of sorted lines."""
    grouped = lines_by_direction()
    lines = frozenset(line for group in grouped.values() for line in group)
    debug.debug(f"Generated {len(lines)} winning lines "
                + ", ".join(f"{d.name.lower()}={len(g)}" for d, g in grouped.items()),
                "catalog")
    return lines


# Built once at import and shared read-only by every round
WINNING_LINES = generate_winning_lines()
