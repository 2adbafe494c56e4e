"""
cli.py - Command-line interface for the Connect Four engine

This module provides a terminal front end for playing hot-seat games,
replaying move sequences, inspecting the winning-line catalog and
benchmarking the win detector.
"""

import argparse
import random
import sys
from typing import List, Optional

from connect_four.debug import debug, DebugLevel
from connect_four.game.catalog import WINNING_LINES, lines_by_direction
from connect_four.game.combinations import combinations_of
from connect_four.game.errors import InvalidColumnError
from connect_four.game.rules import GameSession, Rejected, TurnOrder
from connect_four.game.win_detector import check_win
from connect_four.utils import COLS, CONNECT_N, NUM_CELLS, Player


def positive_int(value: str) -> int:
    """argparse type accepting integers >= 1."""
    try:
        number = int(value)
    except ValueError:
        raise argparse.ArgumentTypeError(f"{value!r} is not an integer") from None
    if number < 1:
        raise argparse.ArgumentTypeError(f"{value} must be at least 1")
    return number

class SimpleCLI:
    """Simple command-line interface for Connect Four."""

    def __init__(self):
        """Initialize the CLI."""
        self.session: Optional[GameSession] = None
        self.args = None

    @staticmethod
    def build_parser() -> argparse.ArgumentParser:
        parser = argparse.ArgumentParser(prog='connect-four', description='Connect Four CLI')
        parser.add_argument('--debug', action='store_true', help='Enable debug output')
        parser.add_argument('--debug-level', default=None,
                            choices=[level.name.lower() for level in DebugLevel],
                            help='Set an explicit debug level')

        subparsers = parser.add_subparsers(dest='command', help='Command to run')

        play_parser = subparsers.add_parser('play', help='Play a hot-seat game in the terminal')
        play_parser.add_argument('--player1', default='Player 1', help='Name of player one')
        play_parser.add_argument('--player2', default='Player 2', help='Name of player two')
        play_parser.add_argument('--turn-order', default=TurnOrder.FIXED.value,
                                 choices=[order.value for order in TurnOrder],
                                 help='Who starts each new round')
        play_parser.add_argument('--ai', action='store_true',
                                 help='Request a computer opponent (not available)')

        replay_parser = subparsers.add_parser('replay', help='Apply a move sequence and show the result')
        replay_parser.add_argument('--moves', required=True,
                                   help='Comma-separated column indices, e.g. 3,3,4,4')
        replay_parser.add_argument('--starting-player', type=int, choices=[1, 2], default=1,
                                   help='Player making the first move')

        catalog_parser = subparsers.add_parser('catalog', help='Show the winning-line catalog')
        catalog_parser.add_argument('--list', action='store_true', help='Print every line')

        benchmark_parser = subparsers.add_parser('benchmark', help='Benchmark performance')
        benchmark_parser.add_argument('--iterations', type=positive_int, default=100,
                                      help='Number of iterations for benchmarking')
        benchmark_parser.add_argument('--seed', type=int, default=None, help='Random seed')

        return parser

    def parse_args(self, argv: Optional[List[str]] = None) -> None:
        """Parse command-line arguments and apply the debug settings."""
        self.args = self.build_parser().parse_args(argv)

        if self.args.debug_level:
            debug.set_from_string(self.args.debug_level)
        elif self.args.debug:
            debug.configure(level=DebugLevel.DEBUG)

    def run(self, argv: Optional[List[str]] = None) -> int:
        """Run the CLI. Returns a process exit code."""
        if argv is not None or not self.args:
            self.parse_args(argv)

        commands = {
            'play': self.play_game,
            'replay': self.replay,
            'catalog': self.show_catalog,
            'benchmark': self.benchmark,
        }
        handler = commands.get(self.args.command)
        if handler is None:
            print("Please specify a command. Use --help for options.")
            return 1
        return handler() or 0

    # ---- play ----

    def play_game(self) -> int:
        """Play hot-seat rounds until the players quit."""
        if self.args.ai:
            print("No computer opponent is available; both sides are played from this terminal.")

        self.session = GameSession(player_one_name=self.args.player1,
                                   player_two_name=self.args.player2,
                                   turn_order=TurnOrder(self.args.turn_order),
                                   ai_opponent=self.args.ai)
        print("Starting a new Connect Four game!")
        print(f"Enter column number (0-{COLS - 1}) to drop a piece.")
        print("Other commands: 'q' to quit, 'r' to restart the round.")

        while True:
            print(self.session.render())
            while not self.session.is_round_over():
                command = self.get_human_move()
                if command == 'q':
                    print("Quitting game.")
                    self.print_score()
                    return 0
                if command == 'r':
                    self.session.reset_round()
                    print("Round restarted.")
                    print(self.session.render())
                    continue
                if command is None:
                    continue

                outcome = self.session.drop_piece(command)
                if isinstance(outcome, Rejected):
                    print(f"Column {command} is full, pick another.")
                    continue
                print(self.session.render())

            self.print_round_outcome()
            self.print_score()
            if self.ask_next_round():
                self.session.reset_round()
            else:
                print("Quitting game.")
                return 0

    def ask_next_round(self) -> bool:
        """Wait for 'n' (next round) or 'q' (quit) after a finished round."""
        while True:
            answer = self.read_line("Round over: 'n' for the next round, 'q' to quit: ")
            if answer in ('n', 'q'):
                return answer == 'n'
            print("Please enter 'n' or 'q'.")

    def read_line(self, prompt: str) -> str:
        try:
            return input(prompt).strip().lower()
        except EOFError:
            return 'q'

    def get_human_move(self):
        """
        Read one command from the player to move.

        Returns:
            Column index, 'q' or 'r', or None if the input was invalid
        """
        player = self.session.get_player(self.session.get_current_player())
        user_input = self.read_line(f"{player.name} ({player.player}) move (0-{COLS - 1}, q/r): ")

        if user_input in ('q', 'r'):
            return user_input
        try:
            move = int(user_input)
        except ValueError:
            print("Invalid input. Please enter a column number or command.")
            return None
        if not 0 <= move < COLS:
            print(f"Column must be between 0 and {COLS - 1}.")
            return None
        return move

    def print_round_outcome(self) -> None:
        outcome = self.session.get_round_outcome()
        if outcome.is_win:
            winner = self.session.get_player(outcome.player_id)
            print(f"{winner.name} wins in {outcome.moves_taken} moves! "
                  f"Connection: {sorted(outcome.winning_positions)}")
        elif outcome.is_draw:
            print("It's a draw!")

    def print_score(self) -> None:
        score = self.session.get_score()
        one = self.session.get_player(Player.ONE).name
        two = self.session.get_player(Player.TWO).name
        print(f"Score - {one}: {score.player1_wins}, {two}: {score.player2_wins}, ties: {score.ties}")

    # ---- replay ----

    def replay(self) -> int:
        """Apply a comma-separated move sequence to a fresh session."""
        try:
            moves = [int(c) for c in self.args.moves.split(',') if c.strip()]
        except ValueError as e:
            print(f"Error parsing moves: {e}")
            return 2

        self.session = GameSession()
        self.session.reset_round(self.args.starting_player)

        for i, column in enumerate(moves, start=1):
            if self.session.is_round_over():
                print(f"Ignoring {len(moves) - i + 1} move(s) after the end of the round")
                break
            try:
                outcome = self.session.drop_piece(column)
            except InvalidColumnError as e:
                print(f"Move {i}: {e}")
                return 2
            if isinstance(outcome, Rejected):
                print(f"Move {i}: column {column} rejected ({outcome.reason.value})")
            else:
                print(f"Move {i}: player {outcome.player_id} -> position {outcome.landing_position}")

        print(self.session.render())
        outcome = self.session.get_round_outcome()
        if outcome.in_progress:
            print(f"Round in progress, player {self.session.get_current_player().value} to move")
        else:
            self.print_round_outcome()
        return 0

    # ---- catalog ----

    def show_catalog(self) -> int:
        grouped = lines_by_direction()
        for direction, lines in grouped.items():
            print(f"{direction.name.lower()}: {len(lines)}")
            if self.args.list:
                for line in lines:
                    print("  " + " ".join(f"{p:2d}" for p in line))
        print(f"total: {len(WINNING_LINES)}")
        return 0

    # ---- benchmark ----

    def benchmark(self) -> int:
        """Benchmark combination generation, win checks and full games."""
        iterations = self.args.iterations
        rng = random.Random(self.args.seed)
        print(f"Running benchmark with {iterations} iterations...")

        # Worst case for one player: 21 pieces on the board
        positions = sorted(rng.sample(range(NUM_CELLS), 21))
        debug.start_timer("combinations")
        for _ in range(iterations):
            combinations_of(positions, CONNECT_N)
        elapsed = debug.end_timer("combinations")
        print(f"combinations_of(21, {CONNECT_N}): {elapsed / iterations * 1000:.3f} ms each")

        debug.start_timer("win_checks")
        for _ in range(iterations):
            check_win(sorted(rng.sample(range(NUM_CELLS), rng.randint(4, 21))))
        elapsed = debug.end_timer("win_checks")
        print(f"check_win on random positions: {elapsed / iterations * 1000:.3f} ms each")

        games = max(1, iterations // 10)
        total_moves = 0
        session = GameSession()
        debug.start_timer("games")
        for _ in range(games):
            session.reset_round()
            while not session.is_round_over():
                session.drop_piece(rng.choice(session.get_valid_moves()))
            total_moves += session.turn_count
        elapsed = debug.end_timer("games")
        score = session.get_score()
        print(f"Played {games} games ({total_moves} moves): {elapsed / games * 1000:.3f} ms per game")
        print(f"Results - player 1: {score.player1_wins}, player 2: {score.player2_wins}, ties: {score.ties}")
        return 0


def main(argv: Optional[List[str]] = None) -> int:
    """Main entry point for the CLI."""
    cli = SimpleCLI()
    return cli.run(argv)


if __name__ == "__main__":
    sys.exit(main())
