import os
import tempfile
import unittest

from connect4_engine.debug import debug, DebugLevel
from connect4_engine.interfaces.cli import SimpleCLI, build_parser


class _ScriptedInput:
    def __init__(self, answers):
        self.answers = list(answers)
        self.prompts = []

    def __call__(self, prompt):
        self.prompts.append(prompt)
        if not self.answers:
            raise EOFError
        return self.answers.pop(0)


class TestCLI(unittest.TestCase):
    def setUp(self):
        self.lines = []

    def tearDown(self):
        debug.configure(level=DebugLevel.WARNING)

    def _run(self, answers, argv=None):
        scripted = _ScriptedInput(answers)
        cli = SimpleCLI(input_func=scripted, output_func=self.lines.append)
        code = cli.run(argv or [])
        return cli, scripted, code

    def test_given_defaults_when_parsing_then_standard_board_and_colours(self):
        args = build_parser().parse_args([])
        self.assertEqual((args.rows, args.cols), (6, 7))
        self.assertEqual((args.player1, args.player2), ("red", "blue"))

    def test_given_zero_rows_when_parsing_then_exits(self):
        with self.assertRaises(SystemExit):
            build_parser().parse_args(["--rows", "0"])

    def test_given_winning_moves_when_playing_then_winner_announced(self):
        cli, _, code = self._run(["0", "0", "1", "0", "2", "0", "3", "q"])
        self.assertEqual(code, 0)
        self.assertIn("red wins!", self.lines)
        self.assertTrue(cli.game.is_game_over())
        self.assertEqual(self.lines[-1], "Quitting game.")

    def test_given_finished_game_when_column_typed_then_game_over_message(self):
        cli, _, _ = self._run(["0", "0", "1", "0", "2", "0", "3", "4", "q"])
        self.assertIn("The game is over. Type 'r' to play again or 'q' to quit.", self.lines)
        self.assertNotIn("Column 4 cannot take a piece.", self.lines)
        self.assertEqual(cli.game.state.moves_made, 7)

    def test_given_bad_input_when_playing_then_reprompted_and_rejected(self):
        cli, scripted, _ = self._run(["abc", "9", "q"])
        self.assertIn("Invalid input. Please enter a column number or command.", self.lines)
        self.assertIn("Column 9 cannot take a piece.", self.lines)
        self.assertEqual(cli.game.state.moves_made, 0)
        self.assertEqual(len(scripted.prompts), 3)

    def test_given_restart_when_playing_then_new_markers_used(self):
        cli, _, _ = self._run(["3", "r", "green", "", "q"])
        self.assertIn("Game restarted.", self.lines)
        self.assertEqual(cli.game.state.player1.marker, "green")
        self.assertEqual(cli.game.state.player2.marker, "blue")
        self.assertEqual(cli.game.state.moves_made, 0)

    def test_given_small_board_when_filled_then_tie_announced(self):
        moves = ["0", "2", "2", "0", "0", "2", "2", "0",
                 "1", "3", "3", "1", "1", "3", "3", "1"]
        self._run(moves, ["--rows", "4", "--cols", "4"])
        self.assertIn("Tie!", self.lines)

    def test_given_input_exhausted_when_playing_then_quits(self):
        self._run([])
        self.assertEqual(self.lines[-1], "Quitting game.")

    def test_given_debug_flag_when_parsing_then_debug_level_set(self):
        cli = SimpleCLI(input_func=_ScriptedInput([]), output_func=self.lines.append)
        cli.parse_args(["--debug"])
        self.assertEqual(debug.level, DebugLevel.DEBUG)
        cli.parse_args(["--debug-level", "error"])
        self.assertEqual(debug.level, DebugLevel.ERROR)

    def test_given_log_file_when_playing_then_engine_messages_written(self):
        with tempfile.TemporaryDirectory() as tmp:
            path = os.path.join(tmp, "game.log")
            try:
                self._run(["0", "q"], ["--debug-level", "info", "--log-file", path])
            finally:
                debug.configure(log_file="")
            with open(path) as handle:
                contents = handle.read()
        self.assertIn("[engine] New 6x7 game", contents)


if __name__ == '__main__':
    unittest.main(verbosity=2)
