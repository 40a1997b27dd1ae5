"""
Durable puzzle storage: one JSON puzzle per line.
"""

from __future__ import annotations
import copy
import logging
import os
import random
import threading
from pathlib import Path
from typing import Callable, Dict, Iterable, List, Optional

import orjson

from .errors import PuzzleNotFoundError
from .types import Puzzle, as_utc

logger = logging.getLogger(__name__)

DEFAULT_CREATOR = "ADMIN"
UNTITLED = "Untitled Game"


def read_jsonl(path: Path) -> Iterable[Dict]:
    with path.open("rb") as f:
        for line in f:
            if line.strip():
                yield orjson.loads(line)


def write_jsonl(path: Path, rows: Iterable[Dict]) -> None:
    path.parent.mkdir(parents=True, exist_ok=True)
    tmp = path.with_name(path.name + ".tmp")
    try:
        with tmp.open("wb") as f:
            for r in rows:
                f.write(orjson.dumps(r) + b"\n")
        os.replace(tmp, path)
    except BaseException:
        tmp.unlink(missing_ok=True)
        raise


def pick_probability(rating: int) -> float:
    """Chance a puzzle is eligible for a random draw, by rating."""
    if rating >= 0:
        return 1.0
    if rating >= -5:
        return 0.5
    if rating >= -10:
        return 0.1
    return 0.0


class PuzzleStore:
    """
    Puzzle repository backed by a JSONL file.

    The file is read on first use and rewritten in full after every change.
    Changes reach memory only once the rewrite succeeds, and callers always
    get detached copies.
    """

    def __init__(self, path: str | Path):
        self.path = Path(path)
        self._lock = threading.RLock()
        self._puzzles: Optional[Dict[str, Puzzle]] = None

    def _load(self) -> Dict[str, Puzzle]:
        if self._puzzles is None:
            puzzles: Dict[str, Puzzle] = {}
            if self.path.exists():
                for row in read_jsonl(self.path):
                    p = Puzzle.from_dict(row)
                    puzzles[p.id] = p
            logger.debug("Loaded %d puzzles from %s", len(puzzles), self.path)
            self._puzzles = puzzles
        return self._puzzles

    def _commit(self, puzzles: Dict[str, Puzzle]) -> None:
        write_jsonl(self.path, (p.to_dict() for p in puzzles.values()))
        self._puzzles = puzzles

    def __len__(self) -> int:
        with self._lock:
            return len(self._load())

    def save(self, puzzle: Puzzle, created_by: Optional[str] = None) -> Puzzle:
        """
        Store a puzzle. Admin-created puzzles are auto-verified.

        Args:
            puzzle: Puzzle to save
            created_by: 'ADMIN' or 'AI' (default: the puzzle's own tag, else 'ADMIN')
        """
        creator = created_by or puzzle.created_by or DEFAULT_CREATOR
        stored = copy.deepcopy(puzzle).copy(
            created_by=creator,
            created_at=as_utc(puzzle.created_at),
            game_name=puzzle.game_name or UNTITLED,
            verified=puzzle.verified or creator == DEFAULT_CREATOR,
        )
        with self._lock:
            self._commit({**self._load(), stored.id: stored})
        logger.info("Saved puzzle %s (created by %s)", stored.id, creator)
        return copy.deepcopy(stored)

    def get_by_id(self, puzzle_id: str) -> Optional[Puzzle]:
        with self._lock:
            return copy.deepcopy(self._load().get(puzzle_id))

    def get_random(self, rng: Optional[random.Random] = None) -> Optional[Puzzle]:
        """
        Draw a random puzzle, thinning out poorly rated ones.

        rating >= 0 always eligible, -5..-1 half the time, -10..-6 one time in
        ten, below -10 never.
        """
        rng = rng or random
        with self._lock:
            eligible = [
                p for p in self._load().values()
                if rng.random() < pick_probability(p.rating)
            ]
            if not eligible:
                return None
            return copy.deepcopy(rng.choice(eligible))

    def list_all(self, limit: int = 50) -> List[Puzzle]:
        with self._lock:
            puzzles = sorted(self._load().values(), key=lambda p: p.created_at, reverse=True)
            return copy.deepcopy(puzzles[:limit])

    def update_rating(self, puzzle_id: str, delta: int) -> Puzzle:
        with self._lock:
            puzzle = self._require(puzzle_id)
            return self._replace(puzzle.copy(rating=puzzle.rating + delta))

    def mark_verified(self, puzzle_id: str) -> Puzzle:
        """Verified puzzles are skipped by the unverified-retention sweep."""
        with self._lock:
            return self._replace(self._require(puzzle_id).copy(verified=True))

    def delete(self, puzzle_id: str) -> bool:
        with self._lock:
            puzzles = self._load()
            if puzzle_id not in puzzles:
                return False
            self._commit({pid: p for pid, p in puzzles.items() if pid != puzzle_id})
        return True

    def delete_where(self, predicate: Callable[[Puzzle], bool]) -> int:
        with self._lock:
            puzzles = self._load()
            kept = {pid: p for pid, p in puzzles.items() if not predicate(p)}
            deleted = len(puzzles) - len(kept)
            if deleted:
                self._commit(kept)
        return deleted

    def _replace(self, puzzle: Puzzle) -> Puzzle:
        self._commit({**self._load(), puzzle.id: puzzle})
        return copy.deepcopy(puzzle)

    def _require(self, puzzle_id: str) -> Puzzle:
        puzzle = self._load().get(puzzle_id)
        if puzzle is None:
            raise PuzzleNotFoundError(puzzle_id)
        return puzzle
