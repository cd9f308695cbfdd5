#!/usr/bin/python3
# -*- coding: UTF-8 -*-
# tests/test_strategy.py — Target checks for seven-seven and sixteen

import unittest

from strategy import (
    SEVEN_SEVEN, SIXTEEN, STRATEGIES,
    check_seven_seven, check_sixteen, is_success, normalize_strategy,
)
from helpers import full_stone


class TestNormalizeStrategy(unittest.TestCase):
    """normalize_strategy() maps names and short aliases to canonical names."""

    def test_canonical_names_pass_through(self):
        for name in STRATEGIES:
            with self.subTest(name=name):
                self.assertEqual(normalize_strategy(name), name)

    def test_aliases(self):
        self.assertEqual(normalize_strategy("77"), SEVEN_SEVEN)
        self.assertEqual(normalize_strategy("16"), SIXTEEN)

    def test_unknown_name_raises(self):
        with self.assertRaises(ValueError):
            normalize_strategy("nine-seven")


class TestSevenSeven(unittest.TestCase):
    """A >= 7, B >= 7, C <= 4."""

    def test_exact_threshold_with_four_on_c(self):
        self.assertTrue(check_seven_seven(7, 7, 4))

    def test_five_on_c_fails(self):
        self.assertFalse(check_seven_seven(7, 7, 5))

    def test_one_short_on_either_side_fails(self):
        self.assertFalse(check_seven_seven(6, 9, 0))
        self.assertFalse(check_seven_seven(9, 6, 0))

    def test_perfect_stone(self):
        self.assertTrue(check_seven_seven(10, 10, 0))

    def test_is_success_reads_stone_counts(self):
        self.assertTrue(is_success(full_stone(7, 7, 4), SEVEN_SEVEN))
        self.assertFalse(is_success(full_stone(7, 7, 5), SEVEN_SEVEN))


class TestSixteen(unittest.TestCase):
    """A + B >= 16, C <= 4, and never an 8/8 split."""

    def test_nine_seven_succeeds(self):
        self.assertTrue(check_sixteen(9, 7, 0))

    def test_seven_nine_succeeds(self):
        self.assertTrue(check_sixteen(7, 9, 0))

    def test_eight_eight_is_excluded(self):
        """8/8 reaches sixteen but is explicitly not a sixteen stone."""
        self.assertFalse(check_sixteen(8, 8, 0))

    def test_eight_nine_is_not_excluded(self):
        self.assertTrue(check_sixteen(8, 9, 0))

    def test_fifteen_fails(self):
        self.assertFalse(check_sixteen(8, 7, 0))

    def test_c_cap(self):
        self.assertTrue(check_sixteen(10, 6, 4))
        self.assertFalse(check_sixteen(10, 6, 5))

    def test_is_success_reads_stone_counts(self):
        self.assertFalse(is_success(full_stone(8, 8, 0), SIXTEEN))
        self.assertTrue(is_success(full_stone(9, 7, 0), SIXTEEN))

    def test_is_success_accepts_alias(self):
        self.assertTrue(is_success(full_stone(9, 7, 0), "16"))


if __name__ == "__main__":
    unittest.main(buffer=True)
