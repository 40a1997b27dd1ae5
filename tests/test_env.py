"""Unit tests for environment-driven configuration."""

import os
import unittest
from unittest.mock import patch

from vnconnections.core.env import Settings, credential_slot_names, load_credential_pool, load_env
from vnconnections.generator import PuzzleGenerator
from vnconnections.models import GeminiClient


class TestCredentialPool(unittest.TestCase):

    def test_slot_names(self):
        self.assertEqual(
            credential_slot_names("GEMINI_API_KEY"),
            ["GEMINI_API_KEY", "GEMINI_API_KEY_2", "GEMINI_API_KEY_3", "GEMINI_API_KEY_4", "GEMINI_API_KEY_5"],
        )

    @patch.dict(os.environ, {"GEMINI_API_KEY": "a", "GEMINI_API_KEY_2": "", "GEMINI_API_KEY_3": " c ",
                             "GEMINI_API_KEY_5": "e"}, clear=True)
    def test_unset_slots_dropped_in_order(self):
        self.assertEqual(load_credential_pool("GEMINI_API_KEY"), ["a", "c", "e"])

    @patch.dict(os.environ, {}, clear=True)
    def test_empty_pool(self):
        self.assertEqual(load_credential_pool("GEMINI_API_KEY"), [])


class TestSettings(unittest.TestCase):

    @patch.dict(os.environ, {}, clear=True)
    def test_defaults(self):
        settings = Settings.from_env(dotenv_path=os.devnull)

        self.assertEqual(settings.model, "gemini")
        self.assertEqual(settings.store_path, "data/puzzles.jsonl")
        self.assertEqual(settings.timeout, 60.0)
        self.assertEqual(settings.quota_status_codes, [429])
        self.assertEqual(settings.quota_status_names, ["RESOURCE_EXHAUSTED"])

    @patch.dict(os.environ, {
        "PUZZLE_MODEL": "gpt4o",
        "GENERATION_TIMEOUT": "15",
        "QUOTA_STATUS_CODES": "429, 503",
        "QUOTA_STATUS_NAMES": "RESOURCE_EXHAUSTED,rate_limit_exceeded",
    }, clear=True)
    def test_overrides(self):
        settings = Settings.from_env(dotenv_path=os.devnull)

        self.assertEqual(settings.model, "gpt4o")
        self.assertEqual(settings.timeout, 15.0)
        self.assertEqual(settings.quota_status_codes, [429, 503])
        self.assertEqual(settings.quota_status_names, ["RESOURCE_EXHAUSTED", "rate_limit_exceeded"])

    @patch.dict(os.environ, {"GEMINI_API_KEY": "abcdefgh"}, clear=True)
    def test_load_env_masks_keys(self):
        self.assertEqual(load_env(os.devnull), {"GEMINI_API_KEY": "abcd…"})

    @patch.dict(os.environ, {"GEMINI_API_KEY": "g1", "GEMINI_API_KEY_2": "g2"}, clear=True)
    def test_generator_from_settings(self):
        generator = PuzzleGenerator.from_settings(Settings(timeout=5))

        self.assertIsInstance(generator.client, GeminiClient)
        self.assertEqual(generator.credentials, ("g1", "g2"))
        self.assertEqual(generator.model, "models/gemini-2.5-flash")
        self.assertEqual(generator.timeout, 5)


if __name__ == "__main__":
    unittest.main()
