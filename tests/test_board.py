"""Tests for the Board grid and fill pointers."""

import numpy as np
import pytest

from connect_four.game.board import Board
from connect_four.game.errors import ColumnFullError, InvalidColumnError
from connect_four.utils import ROWS, COLS, Player


@pytest.fixture
def board():
    return Board()


class TestDropPiece:
    """Tests for Board.drop_piece."""

    def test_first_piece_lands_on_bottom_row(self, board):
        position = board.drop_piece(3, Player.ONE)

        assert position == 5 * COLS + 3
        assert board.get_cell_state(5, 3) == Player.ONE
        assert board.fill_pointers[3] == 4

    def test_pieces_stack_upwards(self, board):
        positions = [board.drop_piece(0, Player.ONE if i % 2 == 0 else Player.TWO)
                     for i in range(ROWS)]

        assert positions == [35, 28, 21, 14, 7, 0]
        assert board.column_height(0) == ROWS
        assert board.is_column_full(0)

    def test_full_column_raises_and_leaves_board_unchanged(self, board):
        for _ in range(ROWS):
            board.drop_piece(2, Player.TWO)
        before = board.get_state()

        with pytest.raises(ColumnFullError) as excinfo:
            board.drop_piece(2, Player.ONE)

        assert excinfo.value.column == 2
        assert np.array_equal(board.get_state(), before)
        assert board.fill_pointers[2] == -1

    @pytest.mark.parametrize("column", [-1, COLS, 99])
    def test_out_of_range_column_fails_fast(self, board, column):
        with pytest.raises(InvalidColumnError):
            board.drop_piece(column, Player.ONE)

    def test_empty_player_is_rejected(self, board):
        with pytest.raises(ValueError):
            board.drop_piece(0, Player.EMPTY)


class TestBoardQueries:
    """Tests for the read-only board queries."""

    def test_new_board_is_empty(self, board):
        assert board.piece_count() == 0
        assert board.get_valid_moves() == list(range(COLS))
        assert all(board.get_cell_state(r, c) == Player.EMPTY
                   for r in range(ROWS) for c in range(COLS))

    def test_valid_moves_skip_full_columns(self, board):
        for _ in range(ROWS):
            board.drop_piece(4, Player.ONE)

        assert 4 not in board.get_valid_moves()
        assert len(board.get_valid_moves()) == COLS - 1

    def test_is_full(self, board):
        for col in range(COLS):
            for _ in range(ROWS):
                board.drop_piece(col, Player.ONE)

        assert board.is_full()
        assert board.get_valid_moves() == []

    def test_cell_query_out_of_range(self, board):
        with pytest.raises(ValueError):
            board.get_cell_state(ROWS, 0)

    def test_reset_clears_cells_and_pointers(self, board):
        board.drop_piece(1, Player.ONE)
        board.drop_piece(1, Player.TWO)

        board.reset()

        assert board.piece_count() == 0
        assert list(board.fill_pointers) == [ROWS - 1] * COLS

    def test_copy_is_independent(self, board):
        board.drop_piece(0, Player.ONE)
        clone = board.copy()
        clone.drop_piece(0, Player.TWO)

        assert board.column_height(0) == 1
        assert clone.column_height(0) == 2

    def test_render_marks_highlighted_cells(self, board):
        board.drop_piece(0, Player.ONE)
        board.drop_piece(1, Player.TWO)

        lines = board.render(highlight=[35]).splitlines()

        assert lines[ROWS] == "|* O          |"
        assert lines[-1] == "|0 1 2 3 4 5 6|"
