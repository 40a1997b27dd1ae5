"""Unit tests for response parsing helpers."""

import unittest

from vnconnections.utils import (
    check_one_away,
    extract_json_from_response,
    normalize_word,
    normalize_words,
)


class TestExtractJson(unittest.TestCase):

    def test_plain_object(self):
        self.assertEqual(extract_json_from_response('{"a": 1}'), {"a": 1})

    def test_surrounding_commentary(self):
        text = 'Here is your puzzle:\n{"gameName": "x", "groups": []}\nHope you enjoy!'
        self.assertEqual(extract_json_from_response(text), {"gameName": "x", "groups": []})

    def test_markdown_fence(self):
        text = '```json\n{"ok": true}\n```'
        self.assertEqual(extract_json_from_response(text), {"ok": True})

    def test_first_object_wins(self):
        text = '{"first": 1} and then {"second": 2}'
        self.assertEqual(extract_json_from_response(text), {"first": 1})

    def test_braces_inside_strings(self):
        text = 'x {"theme": "a } tricky { one", "n": 2} y'
        self.assertEqual(extract_json_from_response(text), {"theme": "a } tricky { one", "n": 2})

    def test_skips_stray_brace(self):
        text = 'use {braces} like {"real": 1}'
        self.assertEqual(extract_json_from_response(text), {"real": 1})

    def test_no_json(self):
        self.assertIsNone(extract_json_from_response("sorry, I can't"))
        self.assertIsNone(extract_json_from_response(""))

    def test_malformed_json(self):
        self.assertIsNone(extract_json_from_response('{"groups": [1, 2,'))

    def test_nested_object_of_malformed_outer_not_returned(self):
        text = '{"puzzle": {"gameName": "x", "groups": []}, "note": oops}'
        self.assertIsNone(extract_json_from_response(text))

    def test_object_after_malformed_one(self):
        text = '{"a": {"b": 1}, bad} then {"c": 2}'
        self.assertEqual(extract_json_from_response(text), {"c": 2})


class TestNormalize(unittest.TestCase):

    def test_normalize_word(self):
        self.assertEqual(normalize_word("  MỘT "), "một")

    def test_normalize_words_sorted(self):
        self.assertEqual(normalize_words(["B", " a", "C "]), ["a", "b", "c"])

    def test_check_one_away(self):
        groups = [frozenset("abcd"), frozenset("efgh")]
        self.assertTrue(check_one_away(frozenset("abce"), groups))
        self.assertFalse(check_one_away(frozenset("abef"), groups))


if __name__ == "__main__":
    unittest.main()
