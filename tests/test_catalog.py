"""Tests for the winning-line catalog."""

from connect_four.game.catalog import WINNING_LINES, generate_winning_lines, lines_by_direction
from connect_four.utils import COLS, Direction


class TestWinningLines:
    """Tests for the generated catalog."""

    def test_catalog_has_69_distinct_lines(self):
        all_lines = [line for lines in lines_by_direction().values() for line in lines]

        assert len(all_lines) == 69
        assert len(set(all_lines)) == 69
        assert len(WINNING_LINES) == 69

    def test_counts_per_direction(self):
        grouped = lines_by_direction()

        assert len(grouped[Direction.VERTICAL]) == 21
        assert len(grouped[Direction.HORIZONTAL]) == 24
        assert len(grouped[Direction.DIAGONAL_UP]) == 12
        assert len(grouped[Direction.DIAGONAL_DOWN]) == 12

    def test_lines_are_sorted_and_in_range(self):
        for line in WINNING_LINES:
            assert len(line) == 4
            assert list(line) == sorted(line)
            assert all(0 <= p <= 41 for p in line)

    def test_known_lines_present(self):
        assert (0, 7, 14, 21) in WINNING_LINES      # vertical, top of column 0
        assert (35, 36, 37, 38) in WINNING_LINES    # horizontal, bottom row
        assert (0, 8, 16, 24) in WINNING_LINES      # diagonal down-right
        assert (3, 9, 15, 21) in WINNING_LINES      # diagonal down-left

    def test_horizontal_lines_do_not_wrap_rows(self):
        for line in lines_by_direction()[Direction.HORIZONTAL]:
            assert len({p // COLS for p in line}) == 1
        assert (4, 5, 6, 7) not in WINNING_LINES

    def test_generation_is_deterministic(self):
        assert generate_winning_lines() == WINNING_LINES
