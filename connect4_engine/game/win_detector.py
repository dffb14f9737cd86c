"""
win_detector.py - Four-in-a-row detection for the Connect Four engine

Two equivalent checks are provided:

1. `has_win_at` scans every cell of the board and tests the four runs that
   start there (horizontal, vertical, down-right and down-left diagonals).
   This is what the turn engine calls after each placed piece.
2. `has_win_through` looks only at the lines through one cell, which is what
   a caller that knows the last move can use instead.

All functions are pure: they read the board and never modify it.
"""

from typing import List, Tuple

from connect4_engine.debug import debug
from connect4_engine.utils import (CONNECT_N, DIRECTION_VECTORS, EMPTY, Direction,
                                   is_valid_position, run_coordinates)
from connect4_engine.game.board import Board

Coord = Tuple[int, int]  # (row, col)


def _is_winning_run(board: Board, cells, token: int) -> bool:
    """True if every cell is on the board and holds `token`."""
    return all(
        is_valid_position(r, c, board.rows, board.cols) and board.grid[r, c] == token
        for r, c in cells
    )


def find_winning_line(board: Board, token: int) -> List[Coord]:
    """
    Find the first run of four cells owned by `token`.

    Cells are visited row by row, left to right; at each cell the directions
    are tried in the order horizontal, vertical, down-right, down-left.

    Args:
        board: The board to inspect
        token: Player token to look for

    Returns:
        The run's (row, col) coordinates, or an empty list if there is none
    """
    if token == EMPTY:
        return []

    for y in range(board.rows):
        for x in range(board.cols):
            for direction in Direction:
                cells = run_coordinates(y, x, direction)
                if _is_winning_run(board, cells, token):
                    debug.trace(f"Winning {direction.name} run for {token} at {cells}", "win")
                    return list(cells)
    return []


def has_win_at(board: Board, token: int) -> bool:
    """
    Check whether `token` has four in a row anywhere on the board.

    Args:
        board: The board to inspect
        token: Player token to look for

    Returns:
        True if a winning run exists, False otherwise
    """
    return bool(find_winning_line(board, token))


def has_win_through(board: Board, row: int, col: int) -> bool:
    """
    Check if the piece at (row, col) is part of four in a row.

    Counts matching pieces both ways along each axis through the cell.

    Args:
        board: The board to inspect
        row: Row index of the piece just placed
        col: Column index of the piece just placed

    Returns:
        True if the piece completes a run, False otherwise (also for empty cells)
    """
    if not is_valid_position(row, col, board.rows, board.cols):
        return False

    token = board.grid[row, col]
    if token == EMPTY:
        return False

    for dr, dc in DIRECTION_VECTORS.values():
        count = 1  # The piece itself

        # Positive direction
        r, c = row + dr, col + dc
        while is_valid_position(r, c, board.rows, board.cols) and board.grid[r, c] == token:
            count += 1
            r += dr
            c += dc

        # Negative direction
        r, c = row - dr, col - dc
        while is_valid_position(r, c, board.rows, board.cols) and board.grid[r, c] == token:
            count += 1
            r -= dr
            c -= dc

        if count >= CONNECT_N:
            return True

    return False
