"""
Guess matching and scoring.

Pure functions with no I/O; the caller (session or request handler) tracks
attempts across calls.
"""

from __future__ import annotations
from typing import Sequence

from .types import Puzzle, GuessResult
from .utils import normalize_word, normalize_words, check_one_away as _one_away

GROUP_SIZE = 4
GROUP_COUNT = 4

BASE_SCORE = 1000
ATTEMPT_PENALTY = 200
MIN_SCORE = 100


def is_word_list(guessed_words) -> bool:
    """A guess must be a sized sequence of exactly 4 strings."""
    return (
        isinstance(guessed_words, (list, tuple))
        and len(guessed_words) == GROUP_SIZE
        and all(isinstance(w, str) for w in guessed_words)
    )


def check_guess(puzzle: Puzzle, guessed_words: Sequence[str]) -> GuessResult:
    """
    Return the first group whose words equal the guess.

    Comparison ignores case, surrounding whitespace and order. Anything other
    than exactly 4 strings is simply a miss.
    """
    if not is_word_list(guessed_words):
        return GuessResult(matched=False)

    guess = normalize_words(guessed_words)

    for group in puzzle.groups:
        if normalize_words(group.texts) == guess:
            return GuessResult(matched=True, group=group)

    return GuessResult(matched=False)


def check_one_away(puzzle: Puzzle, guessed_words: Sequence[str]) -> bool:
    """True when a 4-word guess shares exactly 3 words with some group."""
    if not is_word_list(guessed_words):
        return False
    guess_set = frozenset(normalize_word(w) for w in guessed_words)
    groups = [frozenset(normalize_word(t) for t in g.texts) for g in puzzle.groups]
    return _one_away(guess_set, groups)


def calculate_score(attempts_used: int, elapsed_millis: int) -> int:
    """
    Score a solved puzzle.

    1000 for a first-try instant solve, minus 200 per wrong attempt before the
    winning one and 1 per elapsed second, never below 100.
    """
    attempt_penalty = (attempts_used - 1) * ATTEMPT_PENALTY
    time_penalty = int(elapsed_millis // 1000)
    return max(MIN_SCORE, BASE_SCORE - attempt_penalty - time_penalty)


def validate_puzzle(puzzle: Puzzle) -> bool:
    """Exactly 4 groups and 16 distinct words after normalization."""
    words = [normalize_word(w) for w in puzzle.all_words()]
    return len(puzzle.groups) == GROUP_COUNT and len(set(words)) == GROUP_COUNT * GROUP_SIZE
