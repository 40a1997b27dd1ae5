"""
Player-side game state for a single Connections puzzle.

The engine is stateless; this tracks found groups, mistakes and repeated
guesses across submissions the way the web client does.
"""

from __future__ import annotations
import time
from dataclasses import dataclass
from typing import Callable, Dict, List, Optional, Sequence

from .engine import check_guess, check_one_away, calculate_score, is_word_list
from .types import Group, Puzzle
from .utils import normalize_word

CORRECT = "CORRECT"
WRONG = "WRONG"
ONE_AWAY = "ONE_AWAY"
DUPLICATE = "DUPLICATE"
INVALID = "INVALID"
FINISHED = "FINISHED"


@dataclass
class GuessOutcome:
    result: str
    group: Optional[Group] = None
    remaining_attempts: int = 0


class GameSession:
    """
    Tracks one player's progress through a puzzle.

    Args:
        puzzle: The puzzle being played
        max_mistakes: Wrong guesses allowed before the game is lost (default 4)
        clock: Monotonic clock in seconds, injectable for tests
    """

    def __init__(
        self,
        puzzle: Puzzle,
        max_mistakes: int = 4,
        clock: Callable[[], float] = time.monotonic,
    ):
        self.puzzle = puzzle
        self.max_mistakes = max_mistakes
        self._clock = clock
        self.started_at = clock()
        self.finished_at: Optional[float] = None

        self.found_groups: List[Group] = []
        self.mistakes = 0
        self.attempts = 0
        self.history: List[Dict] = []
        self._tried: set = set()

    @property
    def solved(self) -> bool:
        return len(self.found_groups) == len(self.puzzle.groups)

    @property
    def failed(self) -> bool:
        return self.mistakes >= self.max_mistakes

    @property
    def finished(self) -> bool:
        return self.solved or self.failed

    @property
    def remaining_attempts(self) -> int:
        return max(0, self.max_mistakes - self.mistakes)

    def remaining_words(self) -> List[str]:
        found = {g.id for g in self.found_groups}
        return [w.text for g in self.puzzle.groups if g.id not in found for w in g.words]

    def elapsed_millis(self) -> int:
        end = self.finished_at if self.finished_at is not None else self._clock()
        return int((end - self.started_at) * 1000)

    def submit(self, words: Sequence[str]) -> GuessOutcome:
        if self.finished:
            return self._outcome(FINISHED)

        if not is_word_list(words):
            return self._record(words, self._outcome(INVALID))

        guess_set = frozenset(normalize_word(w) for w in words)
        remaining = {normalize_word(w) for w in self.remaining_words()}

        # Repeated words, or words already placed
        if len(guess_set) != len(words) or not guess_set <= remaining:
            return self._record(words, self._outcome(INVALID))

        if guess_set in self._tried:
            return self._record(words, self._outcome(DUPLICATE))
        self._tried.add(guess_set)

        self.attempts += 1
        result = check_guess(self.puzzle, list(words))
        if result.matched:
            self.found_groups.append(result.group)
            outcome = self._outcome(CORRECT, result.group)
        else:
            self.mistakes += 1
            feedback = ONE_AWAY if check_one_away(self.puzzle, list(words)) else WRONG
            outcome = self._outcome(feedback)

        if self.finished:
            self.finished_at = self._clock()
        return self._record(words, outcome)

    def score(self) -> Optional[int]:
        """Score of a solved game; wrong attempts before the last group count against it."""
        if not self.solved:
            return None
        return calculate_score(self.mistakes + 1, self.elapsed_millis())

    def _outcome(self, result: str, group: Optional[Group] = None) -> GuessOutcome:
        return GuessOutcome(result=result, group=group, remaining_attempts=self.remaining_attempts)

    def _record(self, words: Sequence[str], outcome: GuessOutcome) -> GuessOutcome:
        recorded = list(words) if isinstance(words, (list, tuple)) else words
        self.history.append({"words": recorded, "result": outcome.result})
        return outcome
