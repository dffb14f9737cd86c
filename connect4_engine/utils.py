"""
utils.py - Constants, enumerations and helpers for the Connect Four engine

This module provides the default configuration values, the Player value type,
the status and event enumerations, and small board helpers shared by the
board, the win detector and the turn engine.
"""

from dataclasses import dataclass
from enum import Enum, auto
from typing import Any, Tuple
import numpy as np

# Game constants
DEFAULT_ROWS = 6
DEFAULT_COLS = 7
CONNECT_N = 4  # Number of pieces in a row to win
EMPTY = 0  # Cell value for an unoccupied cell

# Default player markers (colours chosen before the first game)
DEFAULT_MARKERS = ("red", "blue")


@dataclass(frozen=True)
class Player:
    """
    A participant in one game.

    Attributes:
        number: Player ordinal, 1 or 2
        marker: Display token chosen by the collaborator (a colour, a symbol, ...)
    """
    number: int
    marker: Any

    @property
    def token(self) -> int:
        """Value written into board cells for this player's pieces."""
        return self.number

    @property
    def symbol(self) -> str:
        """Single character used by the ASCII renderer."""
        return "X" if self.number == 1 else "O"

    def __str__(self):
        return f"Player {self.number} ({self.marker})"


class GameStatus(Enum):
    """Enumeration representing the engine state."""
    IN_PROGRESS = auto()
    WON = auto()
    TIED = auto()

    def is_game_over(self) -> bool:
        """Check if the game is over."""
        return self != GameStatus.IN_PROGRESS


class EventType(Enum):
    """Outcome reported for a single column-drop request."""
    PLACED = auto()
    REJECTED = auto()
    WON = auto()
    TIED = auto()


class Direction(Enum):
    """Enumeration representing the four directional runs checked for a win."""
    HORIZONTAL = auto()
    VERTICAL = auto()
    DIAGONAL_DOWN_RIGHT = auto()
    DIAGONAL_DOWN_LEFT = auto()


# Direction vectors (row, col) for each direction; row grows downward
DIRECTION_VECTORS = {
    Direction.HORIZONTAL: (0, 1),
    Direction.VERTICAL: (1, 0),
    Direction.DIAGONAL_DOWN_RIGHT: (1, 1),
    Direction.DIAGONAL_DOWN_LEFT: (1, -1)
}


def is_valid_position(row: int, col: int, rows: int, cols: int) -> bool:
    """
    Check if a position is within the board boundaries.

    Args:
        row: Row index
        col: Column index
        rows: Board height
        cols: Board width

    Returns:
        True if position is valid, False otherwise
    """
    return 0 <= row < rows and 0 <= col < cols


def is_column_index(column: Any) -> bool:
    """Check that a value can be used as a column index (bools excluded)."""
    return isinstance(column, (int, np.integer)) and not isinstance(column, (bool, np.bool_))


def render_board_ascii(grid: np.ndarray) -> str:
    """
    Render a board grid as ASCII art.

    Args:
        grid: 2D array of cell values

    Returns:
        ASCII representation of the board
    """
    rows, cols = grid.shape
    result = []
    result.append("|" + "-" * (cols * 2 - 1) + "|")

    for row in range(rows):
        cells = []
        for col in range(cols):
            cell = grid[row, col]
            if cell == EMPTY:
                cells.append(" ")
            elif cell == 1:
                cells.append("X")
            else:
                cells.append("O")
        result.append("|" + " ".join(cells) + "|")

    result.append("|" + "-" * (cols * 2 - 1) + "|")

    # Column numbers wider than one digit are shown modulo 10
    result.append("|" + " ".join(str(i % 10) for i in range(cols)) + "|")

    return "\n".join(result)


def run_coordinates(row: int, col: int, direction: Direction,
                    length: int = CONNECT_N) -> Tuple[Tuple[int, int], ...]:
    """List the coordinates of a run of `length` cells starting at (row, col)."""
    dr, dc = DIRECTION_VECTORS[direction]
    return tuple((row + i * dr, col + i * dc) for i in range(length))
