"""
combinations.py - Recursive k-combination enumeration

Used by the win detector to enumerate every 4-piece selection of a player's
positions. Input order is preserved inside each combination, so a sorted
input yields sorted combinations that compare directly against the sorted
winning-line catalog.
"""

from typing import List, Sequence, Tuple


def combinations_of(positions: Sequence[int], k: int) -> List[Tuple[int, ...]]:
    """
    Enumerate all k-length combinations of ``positions``.

    Args:
        positions: Distinct integers, typically sorted ascending
        k: Size of each combination

    Returns:
        List of k-tuples in lexicographic order of input index. Empty when
        k <= 0 or k > len(positions); a single tuple equal to the input
        when k == len(positions).
    """
    positions = tuple(positions)
    size = len(positions)

    if k <= 0 or k > size:
        return []
    if k == size:
        return [positions]
    if k == 1:
        return [(p,) for p in positions]

    combos = []
    # The head must leave at least k-1 elements after it
    for i in range(size - k + 1):
        head = positions[i]
        for tail in combinations_of(positions[i + 1:], k - 1):
            combos.append((head,) + tail)
    return combos
