import os
import unittest
from unittest.mock import patch

import parser as parser_mod
from exceptions import UndefinedVariable
from shell_state import ShellState


class TestParser(unittest.TestCase):
    def setUp(self):
        self.state = ShellState()

    def test_empty_tokens_returns_none(self):
        self.assertIsNone(parser_mod.parse_command_line([], self.state))

    def test_builds_command_from_first_word(self):
        cmd = parser_mod.parse_command_line(["echo", "a", "b"], self.state)
        self.assertEqual("echo", cmd.name)
        self.assertEqual(["a", "b"], cmd.args)
        self.assertEqual(["echo", "a", "b"], cmd.argv)

    def test_interpolates_vars(self):
        self.state.set_var("X", "hello")
        cmd = parser_mod.parse_command_line(["echo", "$X", "world"], self.state)
        self.assertEqual(["hello", "world"], cmd.args)

    def test_program_name_is_expanded(self):
        self.state.set_var("P", "ls")
        cmd = parser_mod.parse_command_line(["$P", "-l"], self.state)
        self.assertEqual("ls", cmd.name)

    def test_expansion_error_propagates(self):
        with patch.dict(os.environ, {}, clear=True):
            with self.assertRaises(UndefinedVariable):
                parser_mod.parse_command_line(["echo", "$UNSET"], self.state)

    @patch.object(parser_mod, "expand_words", return_value=["x"])
    def test_delegates_to_expander(self, mock_expand):
        cmd = parser_mod.parse_command_line(["$Y"], self.state)
        mock_expand.assert_called_once_with(["$Y"], self.state)
        self.assertEqual("x", cmd.name)
        self.assertEqual([], cmd.args)


if __name__ == "__main__":
    unittest.main()
