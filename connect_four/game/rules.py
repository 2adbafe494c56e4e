"""
rules.py - Round/turn management and Gymnasium environment for Connect Four

This module provides:
1. GameSession, the single owner of the board, both players and the round
   state. It accepts "drop a piece in column C" intents, runs win and draw
   detection and keeps the cumulative score across rounds.
2. A gymnasium-compatible environment that drives a GameSession.

Interfaces never mutate the session directly. They call its operations and
either inspect the returned values or subscribe to GameEvents.
"""

from dataclasses import dataclass, field
from enum import Enum, auto
from typing import AbstractSet, Callable, Dict, FrozenSet, List, Optional, Tuple, Union

import gymnasium as gym
import numpy as np
from gymnasium import spaces

from connect_four.debug import debug
from connect_four.game.board import Board
from connect_four.game.catalog import WINNING_LINES
from connect_four.game.errors import ColumnFullError, RoundOverError
from connect_four.game.win_detector import check_win
from connect_four.utils import ROWS, COLS, CONNECT_N, NUM_CELLS, Player, to_row_col


class RoundStatus(Enum):
    """State of the current round."""
    AWAITING_MOVE = auto()
    WIN_DETECTED = auto()
    DRAW_DETECTED = auto()

    def is_over(self) -> bool:
        return self != RoundStatus.AWAITING_MOVE


class TurnOrder(Enum):
    """Policy choosing who starts the next round."""
    FIXED = "fixed"              # Player one always starts
    ALTERNATE = "alternate"      # Starter swaps every round
    LOSER_FIRST = "loser_first"  # Loser starts; starter swaps after a draw


class RejectReason(Enum):
    COLUMN_FULL = "column_full"


class EventType(Enum):
    MOVE_ACCEPTED = auto()
    MOVE_REJECTED = auto()
    ROUND_WON = auto()
    ROUND_DRAWN = auto()
    ROUND_RESET = auto()


@dataclass
class PlayerState:
    """A player's identity, per-round positions and cumulative wins."""
    player: Player
    name: str
    color: str
    move_count: int = 0
    wins: int = 0
    positions: List[int] = field(default_factory=list)

    @property
    def player_id(self) -> int:
        return self.player.value

    def record(self, position: int) -> None:
        """Add a landed piece; positions stay sorted for the win detector."""
        self.positions.append(position)
        self.positions.sort()
        self.move_count += 1

    def reset_round(self) -> None:
        self.positions = []
        self.move_count = 0


@dataclass(frozen=True)
class MoveResult:
    landing_position: int
    player_id: int
    move_number: int

    @property
    def row(self) -> int:
        return to_row_col(self.landing_position)[0]

    @property
    def col(self) -> int:
        return to_row_col(self.landing_position)[1]


@dataclass(frozen=True)
class Rejected:
    reason: RejectReason
    column: int
    player_id: int


@dataclass(frozen=True)
class RoundOutcome:
    status: RoundStatus
    player_id: Optional[int] = None
    winning_positions: FrozenSet[int] = frozenset()
    moves_taken: Optional[int] = None

    @property
    def is_win(self) -> bool:
        return self.status == RoundStatus.WIN_DETECTED

    @property
    def is_draw(self) -> bool:
        return self.status == RoundStatus.DRAW_DETECTED

    @property
    def in_progress(self) -> bool:
        return self.status == RoundStatus.AWAITING_MOVE


@dataclass(frozen=True)
class Score:
    player1_wins: int
    player2_wins: int
    ties: int


@dataclass(frozen=True)
class GameEvent:
    type: EventType
    payload: Union[MoveResult, Rejected, RoundOutcome, None] = None


GameEventCallback = Callable[[GameEvent], None]
MoveOutcome = Union[MoveResult, Rejected]


class GameSession:
    """
    A sequence of rounds between two players sharing a cumulative score.

    The session is the only component that mutates the board and the
    players. Moves are applied one at a time to completion; callers that
    share a session between threads must serialize calls themselves.
    """

    def __init__(self,
                 player_one_name: str = "Player 1",
                 player_two_name: str = "Player 2",
                 player_one_color: str = "red",
                 player_two_color: str = "yellow",
                 turn_order: TurnOrder = TurnOrder.FIXED,
                 ai_opponent: bool = False,
                 catalog: AbstractSet[Tuple[int, ...]] = WINNING_LINES):
        """
        Initialize a new session and start its first round.

        Args:
            player_one_name: Display name for player one
            player_two_name: Display name for player two
            player_one_color: Color tag for player one's pieces
            player_two_color: Color tag for player two's pieces
            turn_order: Policy choosing who starts each new round
            ai_opponent: Whether player two is meant to be a computer
                opponent. Stored for interfaces; no AI is provided.
            catalog: Winning lines to check against
        """
        debug.debug("Initializing GameSession", "session")
        self.board = Board()
        self.players: Dict[Player, PlayerState] = {
            Player.ONE: PlayerState(Player.ONE, player_one_name, player_one_color),
            Player.TWO: PlayerState(Player.TWO, player_two_name, player_two_color),
        }
        self.turn_order = TurnOrder(turn_order)
        self.ai_opponent = ai_opponent
        self.catalog = catalog
        self.ties = 0
        self.round_number = 0
        self._listeners: List[GameEventCallback] = []
        self._starting_player = Player.ONE
        self._start_round(Player.ONE)

    # ---- listeners ----

    def add_listener(self, callback: GameEventCallback) -> None:
        """Register a callback invoked after every state change."""
        if callback not in self._listeners:
            self._listeners.append(callback)

    def remove_listener(self, callback: GameEventCallback) -> bool:
        """Unregister a callback. Returns False if it was not registered."""
        if callback in self._listeners:
            self._listeners.remove(callback)
            return True
        return False

    def _notify(self, event_type: EventType, payload=None) -> None:
        event = GameEvent(event_type, payload)
        for listener in list(self._listeners):
            try:
                listener(event)
            except Exception as e:
                # A broken renderer must not corrupt the round
                debug.error(f"Listener {listener!r} failed on {event_type.name}: {e}", "session")

    # ---- round lifecycle ----

    def _start_round(self, starting_player: Player) -> None:
        self.board.reset()
        for state in self.players.values():
            state.reset_round()
        self.turn_count = 0
        self.status = RoundStatus.AWAITING_MOVE
        self.winner: Optional[Player] = None
        self.winning_positions: FrozenSet[int] = frozenset()
        self._starting_player = starting_player
        self.round_number += 1
        debug.info(f"Round {self.round_number} started, {starting_player.name} moves first", "session")

    def _next_starting_player(self) -> Player:
        if self.turn_order == TurnOrder.FIXED:
            return Player.ONE
        if not self.status.is_over():
            # Abandoned round: replay it with the same starter
            return self._starting_player
        if self.turn_order == TurnOrder.LOSER_FIRST and self.winner is not None:
            return self.winner.other()
        return self._starting_player.other()

    def reset_round(self, starting_player: Union[Player, int, None] = None) -> None:
        """
        Start a new round, keeping the cumulative score.

        Args:
            starting_player: Overrides the turn-order policy for this round
        """
        if starting_player is None:
            starter = self._next_starting_player()
        elif isinstance(starting_player, Player):
            starter = Player.from_id(starting_player.value)
        else:
            starter = Player.from_id(starting_player)

        debug.debug(f"Resetting round {self.round_number} (status {self.status.name})", "session")
        self._start_round(starter)
        self._notify(EventType.ROUND_RESET)

    def reset_score(self) -> None:
        """Zero both win counters and the tie counter."""
        for state in self.players.values():
            state.wins = 0
        self.ties = 0

    # ---- moves ----

    def drop_piece(self, column: int) -> MoveOutcome:
        """
        Drop the current player's piece into a column.

        Args:
            column: Column index (0-indexed)

        Returns:
            MoveResult on success, or Rejected if the column is full. A
            rejection leaves the round untouched and the same player to move.

        Raises:
            RoundOverError: If the round has already been won or drawn
            InvalidColumnError: If the column index is out of range
        """
        if self.status.is_over():
            raise RoundOverError(f"Round {self.round_number} is over ({self.status.name}); "
                                 "call reset_round() first")

        player = self.get_current_player()
        try:
            position = self.board.drop_piece(column, player)
        except ColumnFullError:
            rejected = Rejected(RejectReason.COLUMN_FULL, column, player.value)
            debug.debug(f"{player.name} rejected: column {column} is full", "session")
            self._notify(EventType.MOVE_REJECTED, rejected)
            return rejected

        state = self.players[player]
        state.record(position)
        self.turn_count += 1
        result = MoveResult(position, player.value, state.move_count)
        debug.debug(f"Turn {self.turn_count}: {player.name} -> position {position}", "session")
        self._notify(EventType.MOVE_ACCEPTED, result)

        if len(state.positions) >= CONNECT_N:
            debug.start_timer("win_check")
            win = check_win(state.positions, self.catalog)
            debug.end_timer("win_check", "win")
            if win.is_win:
                self.status = RoundStatus.WIN_DETECTED
                self.winner = player
                self.winning_positions = win.matched_positions
                state.wins += 1
                debug.info(f"{state.name} ({player.name}) wins round {self.round_number} "
                           f"with {sorted(self.winning_positions)}", "session")
                self._notify(EventType.ROUND_WON, self.get_round_outcome())
                return result

        if self.turn_count == NUM_CELLS:
            self.status = RoundStatus.DRAW_DETECTED
            self.ties += 1
            debug.info(f"Round {self.round_number} ends in a draw", "session")
            self._notify(EventType.ROUND_DRAWN, self.get_round_outcome())

        return result

    # ---- queries ----

    def get_current_player(self) -> Player:
        """The player to move; after a win, the winner."""
        if self.winner is not None:
            return self.winner
        if self.turn_count % 2 == 0:
            return self._starting_player
        return self._starting_player.other()

    @property
    def starting_player(self) -> Player:
        return self._starting_player

    def get_player(self, player: Union[Player, int]) -> PlayerState:
        if not isinstance(player, Player):
            player = Player.from_id(player)
        return self.players[player]

    def get_cell_state(self, row: int, col: int) -> Player:
        return self.board.get_cell_state(row, col)

    def get_round_outcome(self) -> RoundOutcome:
        if self.status == RoundStatus.WIN_DETECTED:
            return RoundOutcome(self.status, self.winner.value, self.winning_positions,
                                self.players[self.winner].move_count)
        return RoundOutcome(self.status)

    def get_score(self) -> Score:
        return Score(self.players[Player.ONE].wins, self.players[Player.TWO].wins, self.ties)

    def get_valid_moves(self) -> List[int]:
        if self.status.is_over():
            return []
        return self.board.get_valid_moves()

    def is_round_over(self) -> bool:
        return self.status.is_over()

    def render(self) -> str:
        """ASCII board with the winning connection marked."""
        return self.board.render(highlight=self.winning_positions)


class ConnectFourEnv(gym.Env):
    """
    Connect Four environment following the Gymnasium interface.

    Each step drops a piece for whichever player is to move, so a single
    agent can drive both sides. Rewards are from the mover's perspective.
    """

    metadata = {'render_modes': ['ascii', 'human'], 'render_fps': 4}

    def __init__(self, render_mode: Optional[str] = None, session: Optional[GameSession] = None):
        """
        Initialize the Connect Four environment.

        Args:
            render_mode: Mode for rendering the environment
            session: Session to drive; a fresh one is created by default
        """
        debug.debug("Initializing ConnectFourEnv", "env")

        self.action_space = spaces.Discrete(COLS)
        # Observation space: 6x7 board with 3 possible values (0, 1, 2)
        self.observation_space = spaces.Box(low=0, high=2, shape=(ROWS, COLS), dtype=np.int8)

        self.session = session or GameSession()
        self.render_mode = render_mode

        self.reward_win = 1.0
        self.reward_draw = 0.1
        self.reward_invalid_move = -0.5
        self.reward_step = -0.01

    def reset(self, seed: Optional[int] = None, options: Optional[Dict] = None) -> Tuple[np.ndarray, Dict]:
        """
        Start a new round on the underlying session.

        Args:
            seed: Random seed for reproducibility
            options: May contain "starting_player" (1 or 2)

        Returns:
            Initial observation and info dictionary
        """
        super().reset(seed=seed)
        starting_player = (options or {}).get("starting_player")
        self.session.reset_round(starting_player)

        if self.render_mode == "human":
            self.render()

        return self._get_observation(), self._get_info()

    def step(self, action: int) -> Tuple[np.ndarray, float, bool, bool, Dict]:
        """
        Drop a piece for the player to move.

        Args:
            action: Column to place a piece (0-indexed)

        Returns:
            Tuple of (observation, reward, terminated, truncated, info)
        """
        outcome = self.session.drop_piece(int(action))
        info_extra = {}

        if isinstance(outcome, Rejected):
            debug.warning(f"Invalid action: column {action} is full", "env")
            reward = self.reward_invalid_move
            info_extra['rejected'] = outcome.reason.value
        elif self.session.status == RoundStatus.WIN_DETECTED:
            reward = self.reward_win
        elif self.session.status == RoundStatus.DRAW_DETECTED:
            reward = self.reward_draw
        else:
            reward = self.reward_step

        terminated = self.session.is_round_over()
        info = self._get_info()
        info.update(info_extra)

        if self.render_mode == "human":
            self.render()

        return self._get_observation(), reward, terminated, False, info

    def render(self) -> Optional[str]:
        if self.render_mode == "ascii":
            return self.session.render()
        if self.render_mode == "human":
            print(self.session.render())
        return None

    def _get_observation(self) -> np.ndarray:
        return self.session.board.get_state().astype(np.int8)

    def _get_info(self) -> Dict:
        valid_moves = self.session.get_valid_moves()
        return {
            'valid_moves': valid_moves,
            'num_valid_moves': len(valid_moves),
            'current_player': self.session.get_current_player().value,
            'status': self.session.status.name,
            'turn_count': self.session.turn_count,
            'winning_positions': sorted(self.session.winning_positions),
        }
