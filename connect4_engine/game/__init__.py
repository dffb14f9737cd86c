"""
connect4_engine.game - Core game mechanics for Connect Four

This package contains the board representation, win detection
and the turn engine that manages game state.
"""

from connect4_engine.game.board import Board, BoardInvariantError
from connect4_engine.game.win_detector import find_winning_line, has_win_at, has_win_through
from connect4_engine.game.rules import (ConnectFourGame, GameState, MoveEvent,
                                        drop_piece, new_game, reset)

__all__ = ['Board', 'BoardInvariantError', 'find_winning_line', 'has_win_at',
           'has_win_through', 'ConnectFourGame', 'GameState', 'MoveEvent',
           'drop_piece', 'new_game', 'reset']
