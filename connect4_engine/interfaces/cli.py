"""
cli.py - Command-line front end for the Connect Four engine

This module lets two people play at one terminal. It only translates typed
column numbers into drop requests and prints the engine's answers; all rules
live in connect4_engine.game.
"""

import argparse
import sys
from typing import Callable, List, Optional

from connect4_engine.debug import debug, DebugLevel
from connect4_engine.utils import DEFAULT_ROWS, DEFAULT_COLS, DEFAULT_MARKERS, EventType
from connect4_engine.game.rules import ConnectFourGame, MoveEvent

QUIT = "q"
RESTART = "r"


def positive_int(value: str) -> int:
    """argparse type for board dimensions."""
    number = int(value)
    if number < 1:
        raise argparse.ArgumentTypeError(f"must be at least 1, got {value}")
    return number


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description='Two-player Connect Four')
    parser.add_argument('--rows', type=positive_int, default=DEFAULT_ROWS,
                        help='Board height')
    parser.add_argument('--cols', type=positive_int, default=DEFAULT_COLS,
                        help='Board width')
    parser.add_argument('--player1', default=DEFAULT_MARKERS[0],
                        help='Marker (colour) for player 1')
    parser.add_argument('--player2', default=DEFAULT_MARKERS[1],
                        help='Marker (colour) for player 2')
    parser.add_argument('--debug', action='store_true', help='Enable debug logging')
    parser.add_argument('--debug-level', default='warning',
                        choices=[level.name.lower() for level in DebugLevel],
                        help='Logging level')
    parser.add_argument('--log-file', default=None, help='Also write logs to this file')
    return parser


class SimpleCLI:
    """Terminal game loop around a ConnectFourGame."""

    def __init__(self, input_func: Callable[[str], str] = input,
                 output_func: Callable[[str], None] = print):
        self.input = input_func
        self.output = output_func
        self.game: Optional[ConnectFourGame] = None
        self.args = None

    def parse_args(self, argv: Optional[List[str]] = None) -> None:
        """Parse command-line arguments and configure logging."""
        self.args = build_parser().parse_args(argv)

        if self.args.debug:
            debug.configure(level=DebugLevel.DEBUG)
        else:
            debug.set_from_string(self.args.debug_level)
        if self.args.log_file:
            debug.configure(log_file=self.args.log_file)

    def run(self, argv: Optional[List[str]] = None) -> int:
        """Run the CLI; returns a process exit code."""
        if not self.args:
            self.parse_args(argv)

        self.game = ConnectFourGame(self.args.rows, self.args.cols,
                                    self.args.player1, self.args.player2)
        self.play_game()
        return 0

    def play_game(self) -> None:
        """Play games until the user quits or input runs out."""
        cols = self.game.state.cols
        self.output("Starting a new Connect Four game!")
        self.output(f"Enter a column number (0-{cols - 1}) to drop a piece.")
        self.output(f"Other commands: '{QUIT}' to quit, '{RESTART}' to restart.")
        self.output(self.game.render())

        while True:
            command = self.read_command()
            if command is None or command == QUIT:
                self.output("Quitting game.")
                return
            if command == RESTART:
                self.restart_game()
                continue
            if self.game.is_game_over():
                self.output(f"The game is over. Type '{RESTART}' to play again or '{QUIT}' to quit.")
                continue

            event = self.game.drop(command)
            self.show_event(event)

    def read_command(self):
        """
        Read one command from the user.

        Returns:
            A column index, QUIT, RESTART, or None when input is exhausted
        """
        while True:
            player = self.game.get_current_player()
            if self.game.is_game_over():
                prompt = f"Game over. '{RESTART}' to restart, '{QUIT}' to quit: "
            else:
                prompt = f"{player.marker} ({player.symbol}) to move: "
            try:
                user_input = self.input(prompt).strip().lower()
            except EOFError:
                return None

            if user_input in (QUIT, RESTART):
                return user_input
            try:
                return int(user_input)
            except ValueError:
                self.output("Invalid input. Please enter a column number or command.")

    def restart_game(self) -> None:
        """Ask for new markers (blank keeps the old one) and restart."""
        state = self.game.state
        markers = []
        for player in (state.player1, state.player2):
            try:
                answer = self.input(f"Marker for player {player.number} [{player.marker}]: ")
            except EOFError:
                answer = ""
            markers.append(answer.strip() or None)

        self.game.restart(*markers)
        self.output("Game restarted.")
        self.output(self.game.render())

    def show_event(self, event: MoveEvent) -> None:
        """Print the outcome of a drop request."""
        if event.type == EventType.REJECTED:
            self.output(f"Column {event.column} cannot take a piece.")
            return

        self.output(self.game.render())
        if event.type == EventType.WON:
            self.output(f"{event.player.marker} wins!")
        elif event.type == EventType.TIED:
            self.output("Tie!")


def main(argv: Optional[List[str]] = None) -> int:
    """Main entry point for the CLI."""
    return SimpleCLI().run(argv)


if __name__ == "__main__":
    sys.exit(main())
