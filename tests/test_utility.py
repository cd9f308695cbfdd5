#!/usr/bin/python3
# -*- coding: UTF-8 -*-
# tests/test_utility.py — Tests for utility.userChoice()

import unittest
from unittest.mock import patch
import utility


class TestUserChoice(unittest.TestCase):
    """Tests for utility.userChoice() menu selection logic."""

    @patch('builtins.print')
    def testUserChoiceValidFirst(self, mock_print):
        """Verify userChoice() returns the element at the chosen 1-indexed position."""
        options = ["Cut A", "Cut B", "Cut C"]
        with patch('builtins.input', return_value='2'):
            result = utility.userChoice(options)
        self.assertEqual(result, "Cut B")

    @patch('builtins.print')
    def testUserChoiceLastOption(self, mock_print):
        options = ["Auto 7/7", "Repeat 7/7", "Quit"]
        with patch('builtins.input', return_value='3'):
            result = utility.userChoice(options)
        self.assertEqual(result, "Quit")

    @patch('builtins.print')
    def testUserChoiceOutOfBoundsRetries(self, mock_print):
        """Verify userChoice() ignores out-of-range inputs and retries until valid."""
        options = ["Alpha", "Beta"]
        with patch('builtins.input', side_effect=['5', '0', '-1', '1']):
            result = utility.userChoice(options)
        self.assertEqual(result, "Alpha")

    @patch('builtins.print')
    def testUserChoiceNonNumberRetries(self, mock_print):
        """Verify userChoice() re-prompts on input that isn't an integer."""
        with patch('builtins.input', side_effect=['a', '', '2']) as mock_input:
            result = utility.userChoice(["Reset", "Quit"])
        self.assertEqual(result, "Quit")
        self.assertEqual(mock_input.call_count, 3)

    @patch('builtins.print')
    def testUserChoiceCustomPrompt(self, mock_print):
        with patch('builtins.input', return_value='1') as mock_input:
            utility.userChoice(["Only Choice"], prompt="Cut which? ")
        mock_input.assert_called_once_with("Cut which? ")


if __name__ == "__main__":
    unittest.main(buffer=True)
