"""
connect_four.game - Core game mechanics for Connect Four

This package contains the board representation, the winning-line catalog,
win detection and the session/round controller.
"""

from connect_four.game.board import Board
from connect_four.game.catalog import WINNING_LINES
from connect_four.game.combinations import combinations_of
from connect_four.game.errors import (ConnectFourError, ColumnFullError,
                                      InvalidColumnError, RoundOverError)
from connect_four.game.rules import GameSession, ConnectFourEnv
from connect_four.game.win_detector import check_win, WinCheck

__all__ = ['Board', 'WINNING_LINES', 'combinations_of', 'check_win', 'WinCheck',
           'GameSession', 'ConnectFourEnv', 'ConnectFourError', 'ColumnFullError',
           'InvalidColumnError', 'RoundOverError']
