"""Unit tests for admin puzzle upload."""

import unittest

from vnconnections.errors import UploadError
from vnconnections.types import GroupColor, OverallDifficulty
from vnconnections.upload import build_puzzle_from_upload, split_words


def payload(**overrides):
    data = {
        "gameName": "Bộ đầu tiên",
        "overallDifficulty": "medium",
        "groups": [
            {"theme": "Số đếm", "words": "Một, hai, ba, bốn"},
            {"theme": "Màu sắc", "words": "đỏ,xanh , vàng,tím"},
            {"theme": "Động vật", "words": "mèo, chó, gà, vịt"},
            {"theme": "Trái cây", "words": "cam, chuối, táo, nho"},
        ],
    }
    data.update(overrides)
    return data


class TestBuildPuzzleFromUpload(unittest.TestCase):

    def test_valid_upload(self):
        puzzle = build_puzzle_from_upload(payload())

        self.assertEqual(puzzle.game_name, "Bộ đầu tiên")
        self.assertEqual(puzzle.overall_difficulty, OverallDifficulty.MEDIUM)
        self.assertEqual(puzzle.created_by, "ADMIN")
        self.assertTrue(puzzle.verified)
        self.assertEqual(puzzle.groups[0].texts, ["một", "hai", "ba", "bốn"])
        self.assertEqual(puzzle.groups[1].texts, ["đỏ", "xanh", "vàng", "tím"])
        self.assertEqual([g.color for g in puzzle.groups],
                         [GroupColor.GREEN, GroupColor.YELLOW, GroupColor.PURPLE, GroupColor.RED])

    def test_word_lists_accepted(self):
        data = payload()
        data["groups"][0]["words"] = ["Một", "hai", "ba", "bốn"]
        self.assertEqual(build_puzzle_from_upload(data).groups[0].texts, ["một", "hai", "ba", "bốn"])

    def test_missing_fields(self):
        for bad in (payload(gameName=""), payload(overallDifficulty=None), payload(groups=[])):
            with self.assertRaises(UploadError):
                build_puzzle_from_upload(bad)

    def test_unknown_difficulty(self):
        with self.assertRaises(UploadError):
            build_puzzle_from_upload(payload(overallDifficulty="insane"))

    def test_group_word_count(self):
        data = payload()
        data["groups"][2]["words"] = "mèo, chó, gà"
        with self.assertRaises(UploadError) as ctx:
            build_puzzle_from_upload(data)
        self.assertIn("Động vật", str(ctx.exception))

    def test_duplicates_rejected(self):
        data = payload()
        data["groups"][3]["words"] = "cam, chuối, táo, MỘT"
        with self.assertRaises(UploadError):
            build_puzzle_from_upload(data)

    def test_split_words(self):
        self.assertEqual(split_words(" A, b ,, C "), ["a", "b", "c"])


if __name__ == "__main__":
    unittest.main()
