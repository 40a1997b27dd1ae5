"""
Manual puzzle upload from the admin panel.
"""

from __future__ import annotations
from typing import Any, Dict, List

from .engine import GROUP_COUNT, GROUP_SIZE
from .errors import UploadError
from .types import POSITIONAL_TIERS, Group, OverallDifficulty, Puzzle, Word, new_id
from .utils import normalize_word

ADMIN_CREATOR = "ADMIN"


def split_words(raw: str) -> List[str]:
    """'Một, hai ,BA' -> ['một', 'hai', 'ba']"""
    return [normalize_word(w) for w in raw.split(",") if w.strip()]


def build_puzzle_from_upload(payload: Dict[str, Any]) -> Puzzle:
    """
    Build a verified puzzle from an admin upload.

    Payload shape::

        {"gameName": "...", "overallDifficulty": "medium",
         "groups": [{"theme": "...", "words": "a, b, c, d"}, ...4]}

    Group colors and difficulties follow upload order.
    """
    game_name = payload.get("gameName")
    difficulty = payload.get("overallDifficulty")
    raw_groups = payload.get("groups")

    if not game_name or not difficulty or not isinstance(raw_groups, list) or len(raw_groups) != GROUP_COUNT:
        raise UploadError("Invalid puzzle data. Need gameName, overallDifficulty, and 4 groups")

    try:
        overall = OverallDifficulty(str(difficulty).strip().lower())
    except ValueError:
        raise UploadError(f"Unknown overallDifficulty: {difficulty}")

    groups = []
    for index, raw in enumerate(raw_groups):
        if not isinstance(raw, dict):
            raise UploadError(f"Group {index + 1} must be an object with theme and words")
        theme = str(raw.get("theme") or "").strip()
        words = raw.get("words") or ""
        texts = split_words(words) if isinstance(words, str) else [normalize_word(str(w)) for w in words if str(w).strip()]
        if len(texts) != GROUP_SIZE:
            raise UploadError(f'Group "{theme}" must have exactly 4 words (comma separated)')

        color, level = POSITIONAL_TIERS[index]
        groups.append(Group(
            id=new_id(),
            theme=theme,
            words=[Word.create(t) for t in texts],
            color=color,
            difficulty=level,
        ))

    all_words = [w.text for g in groups for w in g.words]
    if len(set(all_words)) != GROUP_COUNT * GROUP_SIZE:
        dupes = sorted({w for w in all_words if all_words.count(w) > 1})
        raise UploadError(f"All 16 words must be unique, duplicates: {dupes}")

    return Puzzle(
        id=new_id(),
        overall_difficulty=overall,
        groups=groups,
        game_name=str(game_name).strip(),
        created_by=ADMIN_CREATOR,
        verified=True,
    )
