"""
board.py - Board representation and win detection for connect-N

This module implements the Board class: a gravity-fed grid that accepts
pieces column by column, reports which columns still have room, and scans
every row, column and diagonal for a run of same-colored pieces.
"""

import numpy as np
from typing import Iterator, List, Optional

from connectn.debug import debug
from connectn.exceptions import InvalidColumnError, RenderingError
from connectn.utils import ROWS, COLS, ROW_HEIGHT, COLUMN_WIDTH, EMPTY, Color


class Board:
    """
    A connect-N game board.

    Row 0 is the top of the board; pieces fall towards row num_rows - 1.
    Cells hold Color values (0 when empty) and are never cleared once set.
    """

    def __init__(self, num_rows: int = ROWS, num_columns: int = COLS,
                 row_height: int = ROW_HEIGHT, column_width: int = COLUMN_WIDTH):
        """
        Create an empty board.

        Args:
            num_rows: Number of rows in the grid
            num_columns: Number of columns in the grid
            row_height: Terminal lines used to draw one row
            column_width: Terminal characters used to draw one column
        """
        debug.debug(f"Initializing {num_rows}x{num_columns} board", "board")
        self.num_rows = num_rows
        self.num_columns = num_columns
        self.row_height = row_height
        self.column_width = column_width
        self.grid = np.full((num_rows, num_columns), EMPTY, dtype=int)

    def copy(self) -> 'Board':
        """Return an independent copy of this board."""
        new_board = Board(self.num_rows, self.num_columns,
                          self.row_height, self.column_width)
        new_board.grid = self.grid.copy()
        return new_board

    def get_cell(self, row: int, col: int) -> Optional[Color]:
        """
        Raises:
            IndexError: If row or col is outside the board (negative included)
        """
        if not (0 <= row < self.num_rows and 0 <= col < self.num_columns):
            raise IndexError(f"Cell ({row}, {col}) is outside the board.")
        return Color.from_value(self.grid[row, col])

    def get_state(self) -> np.ndarray:
        """Get a copy of the raw grid (0 for empty, Color values otherwise)."""
        return self.grid.copy()

    def available_column(self, col_index: int) -> bool:
        """
        Check whether a piece can be dropped into a column.

        Returns:
            False if the column is out of range or its top cell is taken
        """
        if not 0 <= col_index < self.num_columns:
            return False
        return self.grid[0, col_index] == EMPTY

    def get_available_columns(self) -> List[int]:
        return [col for col in range(self.num_columns) if self.available_column(col)]

    def _get_highest_index(self, col_index: int) -> int:
        # Last empty row above the first occupied one, scanning down from the top
        occupied = np.flatnonzero(self.grid[:, col_index] != EMPTY)
        if occupied.size == 0:
            return self.num_rows - 1
        return int(occupied[0]) - 1

    def drop_piece(self, color: Color, col_index: int) -> int:
        """
        Drop a piece into a column.

        Args:
            color: Color of the piece
            col_index: Column to drop into (0-indexed)

        Returns:
            The row the piece settled in

        Raises:
            InvalidColumnError: If the column is full or out of range
        """
        if not self.available_column(col_index):
            debug.debug(f"Rejected {color} piece in column {col_index}", "board")
            raise InvalidColumnError(col_index)

        row_index = self._get_highest_index(col_index)
        self.grid[row_index, col_index] = color.value
        debug.debug(f"Placed {color} piece at ({row_index}, {col_index})", "board")
        return row_index

    def is_full(self) -> bool:
        """True when no column has room left."""
        return bool(np.all(self.grid[0] != EMPTY))

    def get_lines(self) -> Iterator[np.ndarray]:
        """
        Yield every line that can hold a run.

        Rows come first, then columns, then for each diagonal index the
        left-leaning and right-leaning diagonals, each ordered from the top
        row down.
        """
        for row_index in range(self.num_rows):
            yield self.grid[row_index]
        for col_index in range(self.num_columns):
            yield self.grid[:, col_index]
        flipped = np.fliplr(self.grid)
        for diag_index in range(self.num_rows + self.num_columns - 1):
            offset = self.num_columns - 1 - diag_index
            # left: col == row - diag_index + num_columns - 1
            yield np.diagonal(self.grid, offset=offset)
            # right: col == diag_index - row
            yield np.diagonal(flipped, offset=offset)

    @staticmethod
    def _check_line(line: np.ndarray, amount_to_win: int) -> Optional[Color]:
        current = EMPTY
        count = 0
        for value in line:
            if value == EMPTY:
                current = EMPTY
                count = 0
                continue
            if value == current:
                count += 1
            else:
                current = value
                count = 1
            if count >= amount_to_win:
                return Color.from_value(current)
        return None

    def get_winning_color(self, amount_to_win: int) -> Optional[Color]:
        """
        Find a color with amount_to_win consecutive pieces on any line.

        The run length is compared with the threshold after every cell,
        including a cell that starts a new run, so amount_to_win == 1 is
        won by the first piece on the board.

        Returns:
            The color of the first winning run found, or None
        """
        debug.start_timer("win_check")
        winner = None
        for line in self.get_lines():
            winner = self._check_line(line, amount_to_win)
            if winner is not None:
                break
        debug.end_timer("win_check", "board")
        return winner

    def _render_cell(self, value: int) -> str:
        color = Color.from_value(value)
        if color is None:
            return " " * self.column_width
        label = str(color)
        if len(label) > self.column_width:
            raise RenderingError(
                f"Color label '{label}' does not fit in a column width of {self.column_width}."
            )
        return label.center(self.column_width)

    def render(self) -> str:
        """
        Draw the board as text.

        Raises:
            RenderingError: If a piece's color label is wider than column_width
        """
        blank = "|" + "|".join(" " * self.column_width for _ in range(self.num_columns)) + "|"
        border = "+" + "+".join("-" * self.column_width for _ in range(self.num_columns)) + "+"
        label_line = (self.row_height - 1) // 2

        lines = [border]
        for row_index in range(self.num_rows):
            cells = [self._render_cell(value) for value in self.grid[row_index]]
            for line_index in range(self.row_height):
                if line_index == label_line:
                    lines.append("|" + "|".join(cells) + "|")
                else:
                    lines.append(blank)
            lines.append(border)
        return "\n".join(lines)

    def render_column_numbers(self) -> str:
        """1-based column numbers lined up under the centre of each rendered column."""
        header = " " * (1 + (self.column_width - 1) // 2)
        for number in range(1, self.num_columns + 1):
            label = str(number)
            header += label + " " * (self.column_width + 1 - len(label))
        return header.rstrip()

    def __str__(self) -> str:
        return self.render()


if __name__ == "__main__":
    board = Board()
    for turn, col in enumerate([3, 3, 4, 4, 5, 5, 6]):
        board.drop_piece(Color.RED if turn % 2 == 0 else Color.BLACK, col)
    print(board)
    print(board.render_column_numbers())
    print(f"Winner: {board.get_winning_color(4)}")
