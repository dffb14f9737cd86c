"""
connect4_engine - Rules engine for two-player Connect Four

This package provides the board, four-in-a-row detection and the turn engine
for Connect Four on a board of any size, plus a small terminal front end.
Rendering and input handling belong to the caller.
"""

# Version number
__version__ = '0.1.0'
