"""
rules.py - Turn engine and game state management for Connect Four

This module provides:
1. The immutable GameState value and the MoveEvent reported for each request
2. The transition functions `new_game`, `drop_piece` and `reset`
3. ConnectFourGame, a holder a presentation layer can own instead of globals
"""

from dataclasses import dataclass, field, replace
from typing import List, Optional, Tuple

from connect4_engine.debug import debug
from connect4_engine.utils import (DEFAULT_ROWS, DEFAULT_COLS, DEFAULT_MARKERS,
                                   EventType, GameStatus, Player)
from connect4_engine.game.board import Board
from connect4_engine.game.win_detector import find_winning_line

Coord = Tuple[int, int]


@dataclass(frozen=True)
class MoveEvent:
    """
    What happened in response to one column-drop request.

    PLACED, WON and TIED carry the cell that received the piece and the player
    who dropped it; WON also carries the winning run. REJECTED carries only
    the requested column.
    """
    type: EventType
    column: object = None
    row: Optional[int] = None
    player: Optional[Player] = None
    winning_line: Tuple[Coord, ...] = ()

    @property
    def accepted(self) -> bool:
        return self.type != EventType.REJECTED

    @classmethod
    def rejected(cls, column) -> 'MoveEvent':
        return cls(EventType.REJECTED, column=column)


@dataclass(frozen=True)
class GameState:
    """
    Snapshot of a game between two players.

    Transitions never modify a state in place: `drop_piece` returns a new
    GameState with its own board, and every board held by a state is frozen
    (read-only), so a state can be shared freely with the presentation layer.
    """
    board: Board
    player1: Player
    player2: Player
    current_player: Player
    status: GameStatus = GameStatus.IN_PROGRESS
    winner: Optional[Player] = None
    last_move: Optional[Coord] = None
    winning_line: Tuple[Coord, ...] = ()
    moves_made: int = field(default=0, compare=False)

    @property
    def rows(self) -> int:
        return self.board.rows

    @property
    def cols(self) -> int:
        return self.board.cols

    def is_game_over(self) -> bool:
        return self.status.is_game_over()

    def other_player(self, player: Player) -> Player:
        """Get the opponent of `player`."""
        return self.player2 if player == self.player1 else self.player1

    def valid_moves(self) -> List[int]:
        """Columns that would accept a piece; empty once the game is over."""
        if self.is_game_over():
            return []
        return self.board.valid_moves()


def new_game(height: int, width: int, player1: Player, player2: Player) -> GameState:
    """
    Start a game on an empty height x width board with Player 1 to move.

    Args:
        height: Number of rows
        width: Number of columns
        player1: The player numbered 1
        player2: The player numbered 2

    Returns:
        The initial GameState

    Raises:
        ValueError: for non-positive dimensions or misnumbered players
    """
    if player1.number != 1 or player2.number != 2:
        raise ValueError(
            f"Players must be numbered 1 and 2, got {player1.number} and {player2.number}")

    board = Board(height, width).freeze()
    debug.info(f"New {height}x{width} game: {player1} vs {player2}", "engine")
    return GameState(board=board, player1=player1, player2=player2, current_player=player1)


def drop_piece(state: GameState, column) -> Tuple[GameState, MoveEvent]:
    """
    Drop the current player's piece into `column`.

    Requests that cannot be played (game over, column out of range or full)
    leave the state untouched and report REJECTED.

    Args:
        state: The state to play on
        column: Column index (0-indexed)

    Returns:
        Tuple of (resulting state, event)
    """
    if state.is_game_over():
        debug.debug(f"Rejected column {column!r}: game is over ({state.status.name})", "engine")
        return state, MoveEvent.rejected(column)

    row = state.board.drop_spot(column)
    if row is None:
        debug.debug(f"Rejected column {column!r}: no drop spot", "engine")
        return state, MoveEvent.rejected(column)

    column = int(column)
    player = state.current_player
    board = state.board.copy()
    board.place(row, column, player.token)
    board.freeze()
    moves_made = state.moves_made + 1

    debug.start_timer("win_check")
    winning_line = tuple(find_winning_line(board, player.token))
    debug.end_timer("win_check", "engine")

    # Win takes precedence over a tie when the last piece fills the board
    if winning_line:
        debug.info(f"{player} wins after move at ({row}, {column})", "engine")
        new_state = replace(state, board=board, status=GameStatus.WON, winner=player,
                            last_move=(row, column), winning_line=winning_line,
                            moves_made=moves_made)
        return new_state, MoveEvent(EventType.WON, column=column, row=row, player=player,
                                    winning_line=winning_line)

    if board.is_full():
        debug.info("Game ends in a tie", "engine")
        new_state = replace(state, board=board, status=GameStatus.TIED,
                            last_move=(row, column), moves_made=moves_made)
        return new_state, MoveEvent(EventType.TIED, column=column, row=row, player=player)

    next_player = state.other_player(player)
    debug.debug(f"{player} placed at ({row}, {column}); {next_player} to move", "engine")
    new_state = replace(state, board=board, current_player=next_player,
                        last_move=(row, column), moves_made=moves_made)
    return new_state, MoveEvent(EventType.PLACED, column=column, row=row, player=player)


def reset(state: GameState) -> GameState:
    """
    Start over with an empty board of the same size and the same players.

    Args:
        state: Any state of the game to restart

    Returns:
        A fresh GameState with Player 1 to move
    """
    return new_game(state.rows, state.cols, state.player1, state.player2)


class ConnectFourGame:
    """
    High-level Connect Four game holder.

    A presentation layer creates one of these, forwards column choices to
    `drop` and reacts to the returned events. Markers can only change when
    the game is restarted.
    """

    def __init__(self, rows: int = DEFAULT_ROWS, cols: int = DEFAULT_COLS,
                 player1_marker=DEFAULT_MARKERS[0], player2_marker=DEFAULT_MARKERS[1]):
        """
        Initialize a new Connect Four game.

        Args:
            rows: Board height
            cols: Board width
            player1_marker: Marker for Player 1
            player2_marker: Marker for Player 2
        """
        self.state = new_game(rows, cols, Player(1, player1_marker), Player(2, player2_marker))

    def drop(self, column) -> MoveEvent:
        """
        Play the current player's piece in `column`.

        Returns:
            The event describing the outcome
        """
        self.state, event = drop_piece(self.state, column)
        return event

    def restart(self, player1_marker=None, player2_marker=None) -> bool:
        """
        Reset the board, optionally with new player markers.

        Blank markers (None keeps the current one) are refused and the
        game is left as it is.

        Returns:
            True if the game was restarted, False otherwise
        """
        markers = []
        for player, marker in ((self.state.player1, player1_marker),
                               (self.state.player2, player2_marker)):
            if marker is None:
                marker = player.marker
            elif isinstance(marker, str) and not marker.strip():
                debug.debug(f"Restart refused: blank marker for player {player.number}", "engine")
                return False
            markers.append(marker)

        self.state = new_game(self.state.rows, self.state.cols,
                              Player(1, markers[0]), Player(2, markers[1]))
        return True

    def is_game_over(self) -> bool:
        """Check if the game is over."""
        return self.state.is_game_over()

    def get_winner(self) -> Optional[Player]:
        """
        Get the winner of the game.

        Returns:
            The winning player, or None if no winner yet or tie
        """
        return self.state.winner

    def get_current_player(self) -> Player:
        return self.state.current_player

    def get_valid_moves(self) -> List[int]:
        return self.state.valid_moves()

    def render(self) -> str:
        """Render the board as a string."""
        return self.state.board.render()
