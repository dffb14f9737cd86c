"""
board.py - Board representation for the Connect Four engine

This module implements the Board class: fixed-size grid storage of occupancy
state, gravity drops and the full-board check. Win detection lives in
win_detector.py and turn handling in rules.py.
"""

import numpy as np
from typing import List, Optional, Sequence

from connect4_engine.debug import debug
from connect4_engine.utils import (DEFAULT_ROWS, DEFAULT_COLS, EMPTY,
                                   is_column_index, is_valid_position,
                                   render_board_ascii)


class BoardInvariantError(RuntimeError):
    """Raised when a caller writes into a cell that cannot take a piece."""


class Board:
    """
    Represents a Connect Four game board.

    Cells hold 0 when empty, otherwise the token of the occupying player.
    Row 0 is the top row; pieces fall toward row `rows - 1`.
    """

    def __init__(self, rows: int = DEFAULT_ROWS, cols: int = DEFAULT_COLS):
        """
        Initialize an empty board.

        Args:
            rows: Board height (H)
            cols: Board width (W)
        """
        if rows < 1 or cols < 1:
            raise ValueError(f"Board dimensions must be positive, got {rows}x{cols}")
        debug.trace(f"Initializing new {rows}x{cols} Board", "board")
        self.rows = rows
        self.cols = cols
        self.grid = np.zeros((rows, cols), dtype=np.int8)

    @classmethod
    def from_rows(cls, rows: Sequence[Sequence[int]]) -> 'Board':
        """
        Build a board from nested row lists (row 0 first).

        Args:
            rows: Cell values, one list per row

        Returns:
            A new Board holding the given position
        """
        grid = np.array(rows, dtype=np.int8)
        if grid.ndim != 2:
            raise ValueError("Rows must form a rectangular grid")
        board = cls(grid.shape[0], grid.shape[1])
        board.grid = grid
        return board

    def copy(self) -> 'Board':
        """
        Create a deep copy of the current board.

        Returns:
            A new Board instance with the same cells
        """
        new_board = Board(self.rows, self.cols)
        new_board.grid = self.grid.copy()
        return new_board

    @property
    def frozen(self) -> bool:
        """True once the board belongs to a game state and can no longer change."""
        return not self.grid.flags.writeable

    def freeze(self) -> 'Board':
        """
        Make the grid read-only.

        Returns:
            The board itself, for chaining
        """
        self.grid.flags.writeable = False
        return self

    def drop_spot(self, column) -> Optional[int]:
        """
        Find the row a piece dropped into `column` would land on.

        Args:
            column: The column to drop into (0-indexed)

        Returns:
            The lowest empty row index, or None if the column is full
            or not a column of this board
        """
        if not is_column_index(column) or not (0 <= column < self.cols):
            debug.debug(f"No drop spot: column {column!r} out of bounds", "board")
            return None

        for row in range(self.rows - 1, -1, -1):
            if self.grid[row, column] == EMPTY:
                return row

        debug.debug(f"No drop spot: column {column} is full", "board")
        return None

    def place(self, row: int, column: int, token: int) -> None:
        """
        Write a player's token into a cell.

        Args:
            row: Row index
            column: Column index
            token: Player token to store

        Raises:
            BoardInvariantError: if the cell is off the board or already occupied,
                or the board is frozen
        """
        if self.frozen:
            problem = "Board is frozen"
        elif not is_valid_position(row, column, self.rows, self.cols):
            problem = f"Cell ({row}, {column}) is outside the board"
        elif self.grid[row, column] != EMPTY:
            problem = f"Cell ({row}, {column}) already holds {int(self.grid[row, column])}"
        elif token == EMPTY:
            problem = "Cannot place an empty token"
        else:
            problem = None

        if problem:
            debug.error(problem, "board")
            raise BoardInvariantError(problem)

        debug.trace(f"Placing {token} at ({row}, {column})", "board")
        self.grid[row, column] = token

    def is_full(self) -> bool:
        """Return True iff every cell is occupied."""
        return bool(np.all(self.grid != EMPTY))

    def get(self, row: int, column: int) -> int:
        """Return the cell value at (row, column)."""
        return int(self.grid[row, column])

    def valid_moves(self) -> List[int]:
        """
        Get a list of columns that can still take a piece.

        Returns:
            List of valid column indices
        """
        return [col for col in range(self.cols) if self.grid[0, col] == EMPTY]

    def mirrored(self) -> 'Board':
        """Return a copy with the column order reversed."""
        new_board = Board(self.rows, self.cols)
        new_board.grid = self.grid[:, ::-1].copy()
        return new_board

    def get_state(self) -> np.ndarray:
        """
        Get the current board state as a numpy array.

        Returns:
            2D numpy array representing the board
        """
        return self.grid.copy()

    def render(self) -> str:
        """
        Render the board as a string.

        Returns:
            String representation of the board
        """
        return render_board_ascii(self.grid)

    def __eq__(self, other) -> bool:
        if not isinstance(other, Board):
            return NotImplemented
        return self.grid.shape == other.grid.shape and bool(np.array_equal(self.grid, other.grid))

    def __hash__(self) -> int:
        return hash((self.rows, self.cols, self.grid.tobytes()))

    def __str__(self) -> str:
        """String representation of the board."""
        return self.render()

    def __repr__(self) -> str:
        return f"Board(rows={self.rows}, cols={self.cols})"
