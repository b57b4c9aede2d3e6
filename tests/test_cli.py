"""
Tests for the command-line interface.
"""

import io
import unittest
from unittest.mock import Mock, patch

from connectn.debug import debug, DebugLevel
from connectn.exceptions import InvalidConfigurationError
from connectn.interfaces.cli import SimpleCLI, main, parse_player_spec
from connectn.interfaces.terminal import QuietDisplay
from connectn.players import RandomPlayer, TerminalPlayer
from connectn.utils import Color


class TestParsePlayerSpec(unittest.TestCase):

    def test_name_color_kind(self):
        self.assertEqual(parse_player_spec("Ann:red:random"), ("Ann", Color.RED, "random"))

    def test_kind_defaults_to_human(self):
        self.assertEqual(parse_player_spec("Bo:Black"), ("Bo", Color.BLACK, "human"))

    def test_bad_values(self):
        for spec in ("Ann", "Ann:purple", "Ann:red:robot", ":red", "a:b:c:d"):
            with self.subTest(spec=spec):
                with self.assertRaises(InvalidConfigurationError):
                    parse_player_spec(spec)


class CLITestCase(unittest.TestCase):

    def tearDown(self):
        debug.configure(level=DebugLevel.WARNING)

    def run_cli(self, argv, display=None, input_func=input):
        cli = SimpleCLI(display=display, input_func=input_func)
        with patch('sys.stdout', new_callable=io.StringIO) as stdout:
            status = cli.run(argv)
        return cli, status, stdout.getvalue()


class TestPlayCommand(CLITestCase):

    def test_random_game_runs_to_the_end(self):
        display = QuietDisplay()
        _, status, _ = self.run_cli(
            ["play", "--player", "A:red:random", "--player", "B:black:random", "--seed", "3"],
            display=display)
        self.assertEqual(status, 0)
        self.assertTrue(display.lines[-1].endswith("wins!") or display.lines[-1] == "Tie.")

    def test_default_players(self):
        cli = SimpleCLI(display=QuietDisplay())
        cli.parse_args(["play"])
        players, colors = cli.make_players()
        self.assertIsInstance(players[0], TerminalPlayer)
        self.assertIsInstance(players[1], RandomPlayer)
        self.assertEqual(colors, [Color.RED, Color.BLACK])

    def test_board_options(self):
        cli = SimpleCLI()
        cli.parse_args(["play", "--rows", "4", "--cols", "5", "--row-height", "1",
                        "--column-width", "6"])
        board = cli.make_board()
        self.assertEqual((board.num_rows, board.num_columns), (4, 5))
        self.assertEqual((board.row_height, board.column_width), (1, 6))

    def test_human_quit_reports_error(self):
        input_func = Mock(side_effect=EOFError())
        _, status, output = self.run_cli(["play"], display=QuietDisplay(),
                                         input_func=input_func)
        self.assertEqual(status, 1)
        self.assertIn("Error:", output)

    def test_rendering_error_reports_error(self):
        _, status, output = self.run_cli(
            ["play", "--player", "A:yellow:random", "--column-width", "3", "--seed", "0"],
            display=QuietDisplay())
        self.assertEqual(status, 1)
        self.assertIn("does not fit", output)

    def test_debug_flag_sets_level(self):
        cli = SimpleCLI()
        cli.parse_args(["--debug", "play"])
        self.assertEqual(debug.level, DebugLevel.DEBUG)


class TestSimulateCommand(CLITestCase):

    def test_tally_covers_every_game(self):
        cli, status, output = self.run_cli(["simulate", "--games", "5", "--seed", "1"])
        self.assertEqual(status, 0)
        self.assertIn("Played 5 games", output)

    def test_team_simulation(self):
        cli = SimpleCLI()
        cli.parse_args(["simulate", "--games", "8", "--seed", "2",
                        "--rows", "4", "--cols", "4", "--connect", "3",
                        "--player", "A:red", "--player", "B:blue",
                        "--player", "C:red", "--player", "D:blue"])
        with patch('sys.stdout', new_callable=io.StringIO):
            tally = cli.simulate()
        self.assertEqual(sum(tally.values()), 8)
        self.assertTrue(set(tally) <= {"Red", "Blue", "Tie"})

    def test_seeded_simulations_repeat(self):
        argv = ["simulate", "--games", "10", "--seed", "11"]
        tallies = []
        for _ in range(2):
            cli = SimpleCLI()
            cli.parse_args(argv)
            with patch('sys.stdout', new_callable=io.StringIO):
                tallies.append(cli.simulate())
        self.assertEqual(tallies[0], tallies[1])

    def test_zero_games_is_rejected(self):
        _, status, output = self.run_cli(["simulate", "--games", "0"])
        self.assertEqual(status, 1)
        self.assertIn("--games", output)

    def test_empty_board_dimensions_are_rejected(self):
        for option in ("--rows", "--cols"):
            for value in ("0", "-1"):
                with self.subTest(option=option, value=value):
                    _, status, output = self.run_cli(
                        ["simulate", "--games", "1", option, value])
                    self.assertEqual(status, 1)
                    self.assertIn("must be at least 1", output)

    def test_play_rejects_empty_board(self):
        _, status, output = self.run_cli(
            ["play", "--player", "A:red:random", "--rows", "0"], display=QuietDisplay())
        self.assertEqual(status, 1)
        self.assertIn("Error:", output)


class TestMain(CLITestCase):

    def test_missing_command(self):
        with patch('sys.stdout', new_callable=io.StringIO) as stdout:
            status = main([])
        self.assertEqual(status, 1)
        self.assertIn("Please specify a command", stdout.getvalue())


if __name__ == '__main__':
    unittest.main()
