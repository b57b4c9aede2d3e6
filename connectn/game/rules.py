"""
rules.py - Turn order and game lifecycle for connect-N

This module provides the Game class, which seats any number of players
around one board, asks each in turn for a column, and stops when a color
completes a run or the board fills up. Several players may share a color,
in which case they win or lose together as a team.
"""

from typing import TYPE_CHECKING, List, Optional, Sequence

from connectn.debug import debug
from connectn.exceptions import InvalidConfigurationError, LifecycleError
from connectn.game.board import Board
from connectn.interfaces.terminal import TerminalDisplay
from connectn.utils import CONNECT_N, Color, GameResult, format_names

if TYPE_CHECKING:
    from connectn.players.base import Player


class Game:
    """
    A single connect-N match.

    A game moves from not started, to started, to ended, and each step
    happens once. start() begins play; resume() continues a started game
    whose loop was interrupted by an error.
    """

    def __init__(self, players: Sequence['Player'], colors: Sequence[Color],
                 board: Optional[Board] = None, amount_to_win: int = CONNECT_N,
                 display: Optional[TerminalDisplay] = None):
        """
        Set up a game.

        Args:
            players: Players in turn order
            colors: Color for each player, index for index
            board: Board to play on (a default empty board if omitted)
            amount_to_win: Run length that wins
            display: Where the final board and outcome are shown

        Raises:
            InvalidConfigurationError: If players and colors differ in length,
                there are no players, or amount_to_win is below 1
        """
        if len(players) != len(colors):
            raise InvalidConfigurationError(
                "Player list and player color list's lengths do not match"
            )
        if not players:
            raise InvalidConfigurationError("A game needs at least one player")
        if amount_to_win < 1:
            raise InvalidConfigurationError(
                f"amount_to_win must be at least 1, got {amount_to_win}"
            )

        self.board = board if board is not None else Board()
        self.players = list(players)
        self.player_colors = list(colors)
        self.amount_to_win = amount_to_win
        self.display = display or TerminalDisplay()
        self.current_player_index = 0
        self.started = False
        self.ended = False
        self.result = GameResult.IN_PROGRESS
        self.winning_color: Optional[Color] = None
        self._winner_indices: Optional[List[int]] = None
        debug.debug(f"Game created with {len(self.players)} players, "
                    f"{self.amount_to_win} to win", "game")

    @property
    def winner_indices(self) -> Optional[List[int]]:
        """Indices of every player holding the winning color, or None."""
        if self._winner_indices is None:
            return None
        return list(self._winner_indices)

    @property
    def winners(self) -> List['Player']:
        return [self.players[i] for i in self._winner_indices or []]

    def is_game_over(self) -> bool:
        return self.ended

    def get_current_player(self) -> 'Player':
        return self.players[self.current_player_index]

    def get_current_color(self) -> Color:
        return self.player_colors[self.current_player_index]

    def get_player_indices_with_color(self, color: Color) -> List[int]:
        return [i for i, player_color in enumerate(self.player_colors) if player_color == color]

    def _switch_turn(self) -> None:
        self.current_player_index = (self.current_player_index + 1) % len(self.players)

    def _take_turn(self) -> None:
        player = self.get_current_player()
        color = self.get_current_color()
        col_index = player.decide(self.board.copy(), color)
        row_index = self.board.drop_piece(color, col_index)
        debug.debug(f"{player.name} ({color}) dropped at ({row_index}, {col_index})", "game")

    def _handle_win(self, color: Color) -> None:
        self.ended = True
        self.result = GameResult.WIN
        self.winning_color = color
        self._winner_indices = self.get_player_indices_with_color(color)

        names = format_names([player.name for player in self.winners])
        if len(self._winner_indices) == 1:
            message = f"{color} ({names}) wins!"
        else:
            message = f"{color} team ({names}) wins!"
        debug.info(message, "game")

        self.display.clear()
        self.display.show(self.board.render())
        self.display.show(message)

    def _handle_tie(self) -> None:
        self.ended = True
        self.result = GameResult.TIE
        debug.info("Game ended in a tie", "game")

        self.display.clear()
        self.display.show(self.board.render())
        self.display.show("Tie.")

    def resume(self) -> None:
        """
        Play turns until someone wins or the board is full.

        Raises:
            LifecycleError: If the game has not started or has already ended
            InvalidColumnError: If a player picks a full or missing column
        """
        if not self.started:
            raise LifecycleError("Attempted to resume a game that has not started.")
        if self.ended:
            raise LifecycleError("Attempted to resume an ended game.")

        while True:
            self._take_turn()
            color = self.board.get_winning_color(self.amount_to_win)
            if color is not None:
                self._handle_win(color)
                break
            if self.board.is_full():
                self._handle_tie()
                break
            self._switch_turn()

    def start(self) -> None:
        """
        Begin play.

        Raises:
            LifecycleError: If the game was already started or has ended
        """
        if self.started:
            raise LifecycleError("Attempted to start a game that has already started.")
        if self.ended:
            raise LifecycleError("Attempted to start an ended game.")
        self.started = True
        debug.info("Starting game: " + ", ".join(
            f"{player.name} ({color})" for player, color in zip(self.players, self.player_colors)
        ), "game")
        self.resume()
