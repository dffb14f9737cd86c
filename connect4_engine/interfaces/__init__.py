"""
connect4_engine.interfaces - Front ends for the Connect Four engine

This package contains the command-line interface used to play a game
at a terminal.
"""
