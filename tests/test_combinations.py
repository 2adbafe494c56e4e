"""Tests for the recursive k-combination generator."""

import itertools

import pytest

from connect_four.game.combinations import combinations_of


class TestCombinationsOf:
    """Tests for combinations_of."""

    def test_five_choose_four(self):
        combos = combinations_of([1, 2, 3, 4, 5], 4)

        assert combos == [(1, 2, 3, 4), (1, 2, 3, 5), (1, 2, 4, 5),
                          (1, 3, 4, 5), (2, 3, 4, 5)]

    def test_combinations_preserve_input_order(self):
        values = [9, 3, 7, 1, 5]
        for combo in combinations_of(values, 3):
            indices = [values.index(v) for v in combo]
            assert indices == sorted(indices)

    @pytest.mark.parametrize("k", [0, -1, 6])
    def test_out_of_range_k_is_empty(self, k):
        assert combinations_of([1, 2, 3, 4, 5], k) == []

    def test_k_equal_to_size_returns_input(self):
        assert combinations_of([4, 8, 15], 3) == [(4, 8, 15)]

    def test_k_of_one_returns_singletons(self):
        assert combinations_of([2, 4, 6], 1) == [(2,), (4,), (6,)]

    def test_empty_input(self):
        assert combinations_of([], 1) == []

    def test_matches_itertools_for_a_full_hand(self):
        positions = list(range(0, 42, 2))  # 21 positions

        combos = combinations_of(positions, 4)

        assert combos == list(itertools.combinations(positions, 4))
        assert len(set(combos)) == 5985
