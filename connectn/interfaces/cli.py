"""
cli.py - Command-line interface for connect-N

This module provides a CLI for playing a game in the terminal and for
running batches of random games to check the engine end to end.
"""

import argparse
import sys
from collections import Counter
from typing import List, Optional, Sequence, Tuple

from connectn.debug import debug, DebugLevel
from connectn.exceptions import ConnectNError, InvalidConfigurationError
from connectn.game.board import Board
from connectn.game.rules import Game
from connectn.interfaces.terminal import QuietDisplay, TerminalDisplay
from connectn.players import Player, RandomPlayer, TerminalPlayer
from connectn.utils import (ROWS, COLS, ROW_HEIGHT, COLUMN_WIDTH, CONNECT_N,
                            Color, GameResult)

PLAYER_KINDS = ('human', 'random')
DEFAULT_PLAYERS = ['You:red:human', 'Computer:black:random']

PlayerSpec = Tuple[str, Color, str]


def parse_player_spec(spec: str) -> PlayerSpec:
    """
    Parse a --player value of the form NAME:COLOR[:KIND].

    Raises:
        InvalidConfigurationError: If the value is malformed
    """
    parts = [part.strip() for part in spec.split(':')]
    if len(parts) not in (2, 3) or not parts[0]:
        raise InvalidConfigurationError(
            f"Invalid player '{spec}', expected NAME:COLOR[:{'|'.join(PLAYER_KINDS)}]"
        )
    kind = parts[2].lower() if len(parts) == 3 else 'human'
    if kind not in PLAYER_KINDS:
        raise InvalidConfigurationError(f"Unknown player kind '{kind}' in '{spec}'")
    try:
        color = Color.from_string(parts[1])
    except ValueError as e:
        raise InvalidConfigurationError(str(e)) from None
    return parts[0], color, kind


class SimpleCLI:
    """Simple command-line interface for connect-N."""

    def __init__(self, display: Optional[TerminalDisplay] = None, input_func=input):
        self.display = display
        self.input_func = input_func
        self.args = None

    def build_parser(self) -> argparse.ArgumentParser:
        parser = argparse.ArgumentParser(description='Connect-N in the terminal')
        parser.add_argument('--debug', action='store_true', help='Enable debug logging')
        parser.add_argument('--debug-level', default='warning',
                            choices=[level.name.lower() for level in DebugLevel],
                            help='Logging verbosity')
        parser.add_argument('--log-file', help='Also write log messages to this file')

        subparsers = parser.add_subparsers(dest='command', help='Command to run')

        board_options = argparse.ArgumentParser(add_help=False)
        board_options.add_argument('--rows', type=int, default=ROWS, help='Board rows')
        board_options.add_argument('--cols', type=int, default=COLS, help='Board columns')
        board_options.add_argument('--row-height', type=int, default=ROW_HEIGHT,
                                   help='Terminal lines per board row')
        board_options.add_argument('--column-width', type=int, default=COLUMN_WIDTH,
                                   help='Terminal characters per board column')
        board_options.add_argument('--connect', type=int, default=CONNECT_N,
                                   help='Pieces in a line needed to win')
        board_options.add_argument('--player', action='append', dest='players',
                                   metavar='NAME:COLOR[:KIND]',
                                   help='Add a player in turn order (repeatable)')
        board_options.add_argument('--seed', type=int, help='Seed for random players')

        play_parser = subparsers.add_parser('play', parents=[board_options],
                                            help='Play a game interactively')
        play_parser.add_argument('--no-clear', action='store_true',
                                 help='Do not clear the screen between turns')

        simulate_parser = subparsers.add_parser('simulate', parents=[board_options],
                                                help='Play games between random players')
        simulate_parser.add_argument('--games', type=int, default=100,
                                     help='Number of games to play')
        return parser

    def parse_args(self, argv: Optional[Sequence[str]] = None) -> None:
        """Parse command-line arguments and apply the logging options."""
        self.args = self.build_parser().parse_args(argv)

        if self.args.debug:
            debug.configure(level=DebugLevel.DEBUG)
        else:
            debug.set_from_string(self.args.debug_level)
        if self.args.log_file:
            debug.configure(log_file=self.args.log_file)

    def run(self, argv: Optional[Sequence[str]] = None) -> int:
        """Run the CLI and return the process exit status."""
        if not self.args:
            self.parse_args(argv)

        try:
            if self.args.command == 'play':
                self.play_game()
            elif self.args.command == 'simulate':
                self.simulate()
            else:
                print("Please specify a command. Use --help for options.")
                return 1
        except ConnectNError as e:
            debug.error(str(e), "cli")
            print(f"Error: {e}")
            return 1
        except KeyboardInterrupt:
            print("\nQuitting game.")
            return 1
        return 0

    def make_board(self) -> Board:
        if self.args.rows < 1 or self.args.cols < 1:
            raise InvalidConfigurationError(
                f"--rows and --cols must be at least 1, got {self.args.rows}x{self.args.cols}"
            )
        return Board(self.args.rows, self.args.cols,
                     self.args.row_height, self.args.column_width)

    def make_players(self, force_random: bool = False,
                     seed_base: Optional[int] = None) -> Tuple[List[Player], List[Color]]:
        specs = [parse_player_spec(spec) for spec in (self.args.players or DEFAULT_PLAYERS)]
        players: List[Player] = []
        colors: List[Color] = []
        for index, (name, color, kind) in enumerate(specs):
            if kind == 'random' or force_random:
                seed = None if seed_base is None else seed_base + index
                players.append(RandomPlayer(name, seed=seed))
            else:
                players.append(TerminalPlayer(name, display=self.display,
                                              input_func=self.input_func))
            colors.append(color)
        return players, colors

    def play_game(self) -> Game:
        """Play one game in the terminal."""
        if self.display is None:
            self.display = TerminalDisplay(clear=not self.args.no_clear)
        players, colors = self.make_players(seed_base=self.args.seed)
        game = Game(players, colors, board=self.make_board(),
                    amount_to_win=self.args.connect, display=self.display)
        game.start()
        return game

    def simulate(self) -> Counter:
        """Play a batch of random games and print how they ended."""
        if self.args.games < 1:
            raise InvalidConfigurationError("--games must be at least 1")

        tally: Counter = Counter()
        debug.start_timer("simulate")
        num_players = len(self.args.players or DEFAULT_PLAYERS)
        for game_number in range(self.args.games):
            seed_base = None
            if self.args.seed is not None:
                seed_base = self.args.seed + game_number * num_players
            players, colors = self.make_players(force_random=True, seed_base=seed_base)
            game = Game(players, colors, board=self.make_board(),
                        amount_to_win=self.args.connect, display=QuietDisplay())
            game.start()
            if game.result == GameResult.WIN:
                tally[str(game.winning_color)] += 1
            else:
                tally['Tie'] += 1
        elapsed = debug.end_timer("simulate", "cli")

        print(f"Played {self.args.games} games")
        for outcome, count in tally.most_common():
            print(f"  {outcome}: {count}")
        if elapsed is not None:
            print(f"  {elapsed / self.args.games * 1000:.3f} ms per game")
        return tally


def main(argv: Optional[Sequence[str]] = None) -> int:
    """Main entry point for the CLI."""
    cli = SimpleCLI()
    return cli.run(argv)


if __name__ == "__main__":
    sys.exit(main())
