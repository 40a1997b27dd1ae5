"""Unit tests for guess matching and scoring."""

import itertools
import unittest

from vnconnections.engine import (
    calculate_score,
    check_guess,
    check_one_away,
    validate_puzzle,
)

from helpers import make_puzzle, VIET_GROUPS


class TestCheckGuess(unittest.TestCase):
    """Tests for check_guess."""

    def setUp(self):
        self.puzzle = make_puzzle()

    def test_exact_group_matches(self):
        """Each group's own words match that group."""
        for group in self.puzzle.groups:
            result = check_guess(self.puzzle, group.texts)
            self.assertTrue(result.matched)
            self.assertIs(result.group, group)

    def test_case_and_whitespace_ignored(self):
        result = check_guess(self.puzzle, ["MỘT", " hai ", "ba", "bốn"])

        self.assertTrue(result.matched)
        self.assertEqual(result.group.id, "g0")

    def test_order_independent(self):
        for perm in itertools.permutations(["đỏ", "xanh", "vàng", "tím"]):
            self.assertEqual(check_guess(self.puzzle, list(perm)).group.id, "g1")

    def test_wrong_combination(self):
        result = check_guess(self.puzzle, ["một", "hai", "năm", "sáu"])

        self.assertFalse(result.matched)
        self.assertIsNone(result.group)

    def test_mixed_groups_do_not_match(self):
        result = check_guess(self.puzzle, ["một", "hai", "ba", "đỏ"])
        self.assertFalse(result.matched)

    def test_wrong_length_never_matches(self):
        for guess in ([], ["một"], ["một", "hai", "ba"], ["một", "hai", "ba", "bốn", "đỏ"]):
            self.assertFalse(check_guess(self.puzzle, guess).matched)

    def test_repeated_word_does_not_match(self):
        self.assertFalse(check_guess(self.puzzle, ["một"] * 4).matched)

    def test_non_string_entries_are_a_miss(self):
        for guess in (["một", None, "ba", "bốn"], ["một", "hai", 3, "bốn"], None, "một", {"một": 1}):
            self.assertFalse(check_guess(self.puzzle, guess).matched)
            self.assertFalse(check_one_away(self.puzzle, guess))

    def test_tuple_guess(self):
        self.assertTrue(check_guess(self.puzzle, ("một", "hai", "ba", "bốn")).matched)

    def test_idempotent(self):
        guess = ["ba", "một", "bốn", "hai"]
        first = check_guess(self.puzzle, guess)
        second = check_guess(self.puzzle, guess)

        self.assertEqual(first, second)
        self.assertEqual(guess, ["ba", "một", "bốn", "hai"])

    def test_one_away(self):
        self.assertTrue(check_one_away(self.puzzle, ["một", "hai", "ba", "đỏ"]))
        self.assertFalse(check_one_away(self.puzzle, ["một", "hai", "đỏ", "xanh"]))
        self.assertFalse(check_one_away(self.puzzle, ["một", "hai", "ba"]))


class TestCalculateScore(unittest.TestCase):
    """Tests for calculate_score."""

    def test_perfect_score(self):
        self.assertEqual(calculate_score(1, 0), 1000)

    def test_examples(self):
        self.assertEqual(calculate_score(1, 30000), 970)
        self.assertEqual(calculate_score(4, 180000), 220)
        self.assertEqual(calculate_score(10, 999999000), 100)

    def test_attempt_penalty(self):
        for t in (0, 5000, 61000):
            self.assertEqual(calculate_score(1, t) - calculate_score(2, t), 200)
            self.assertEqual(calculate_score(2, t) - calculate_score(3, t), 200)

    def test_time_penalty(self):
        for attempts in (1, 2, 3):
            self.assertEqual(calculate_score(attempts, 10000) - calculate_score(attempts, 11000), 1)

    def test_partial_seconds_floor(self):
        self.assertEqual(calculate_score(1, 1999), 999)

    def test_floor(self):
        for attempts, t in [(5, 0), (100, 0), (1, 10 ** 9), (3, 900000)]:
            self.assertGreaterEqual(calculate_score(attempts, t), 100)

    def test_total_for_odd_inputs(self):
        self.assertEqual(calculate_score(0, 0), 1200)
        self.assertIsInstance(calculate_score(-3, -5000), int)


class TestValidatePuzzle(unittest.TestCase):
    """Tests for validate_puzzle."""

    def test_well_formed(self):
        self.assertTrue(validate_puzzle(make_puzzle()))

    def test_duplicate_across_groups(self):
        groups = list(VIET_GROUPS)
        groups[3] = ("Trái cây", ["cam", "chuối", "táo", "Một "])
        self.assertFalse(validate_puzzle(make_puzzle(groups)))

    def test_wrong_group_count(self):
        self.assertFalse(validate_puzzle(make_puzzle(VIET_GROUPS[:3])))


if __name__ == "__main__":
    unittest.main()
