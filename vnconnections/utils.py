"""
Utility functions for parsing model outputs and normalizing words.
"""

import json
from typing import Optional, List, Dict, Iterable

_decoder = json.JSONDecoder()


def _span_end(text: str, start: int) -> int:
    """Index just past the brace that closes the one at ``start``, or -1."""
    depth = 0
    in_string = False
    escaped = False
    for i in range(start, len(text)):
        ch = text[i]
        if in_string:
            if escaped:
                escaped = False
            elif ch == '\\':
                escaped = True
            elif ch == '"':
                in_string = False
        elif ch == '"':
            in_string = True
        elif ch == '{':
            depth += 1
        elif ch == '}':
            depth -= 1
            if depth == 0:
                return i + 1
    return -1


def extract_json_from_response(text: str) -> Optional[Dict]:
    """
    Extract the first JSON object embedded in a model response.

    Tolerates commentary or ```json fences around the object. Each top-level
    '{' is tried in order with a raw decode; a candidate that fails is skipped
    as a whole, so nothing nested inside a malformed object is ever returned.
    Returns None when no complete object decodes.
    """
    if not text:
        return None

    start = text.find('{')
    while start != -1:
        try:
            obj, _ = _decoder.raw_decode(text, start)
        except json.JSONDecodeError:
            end = _span_end(text, start)
            if end == -1:
                return None
            start = text.find('{', end)
            continue
        return obj

    return None


def normalize_word(word: str) -> str:
    """Gameplay form of a word: lower-cased, surrounding whitespace trimmed."""
    return word.lower().strip()


def normalize_words(words: Iterable[str]) -> List[str]:
    """Normalize and sort, so two lists compare as multisets."""
    return sorted(normalize_word(w) for w in words)


def check_one_away(guess_set: frozenset, solution_groups: Iterable[frozenset]) -> bool:
    """Check if guess is ONE AWAY (3 correct, 1 wrong) from any solution group."""
    return any(len(guess_set & sol) == 3 for sol in solution_groups)
