"""
win_detector.py - Match a player's positions against the winning-line catalog

The detector enumerates every 4-combination of the player's sorted positions
and keeps going after the first hit, so the reported connection covers every
matching line (five in a row reports five cells, crossing lines report both).
"""

from typing import AbstractSet, FrozenSet, NamedTuple, Sequence, Tuple

from connect_four.game.catalog import WINNING_LINES
from connect_four.game.combinations import combinations_of
from connect_four.utils import CONNECT_N


class WinCheck(NamedTuple):
    is_win: bool
    matched_positions: FrozenSet[int]


NO_WIN = WinCheck(False, frozenset())


def check_win(player_positions: Sequence[int],
              catalog: AbstractSet[Tuple[int, ...]] = WINNING_LINES) -> WinCheck:
    """
    Check whether a player's positions complete any winning line.

    Args:
        player_positions: The player's occupied positions, sorted ascending
        catalog: Set of sorted winning lines

    Returns:
        WinCheck with the union of every matched line's positions
    """
    if len(player_positions) < CONNECT_N:
        return NO_WIN

    matched = set()
    for combo in combinations_of(player_positions, CONNECT_N):
        if combo in catalog:
            matched.update(combo)

    if not matched:
        return NO_WIN
    return WinCheck(True, frozenset(matched))
