"""
Background retention sweep over the puzzle store.
"""

from __future__ import annotations
import logging
from datetime import datetime, timedelta
from typing import Dict, Optional

from .store import PuzzleStore
from .types import as_utc, utcnow

logger = logging.getLogger(__name__)

UNPOPULAR_RATING = -10
UNVERIFIED_TTL = timedelta(hours=24)


def delete_unpopular(store: PuzzleStore, threshold: int = UNPOPULAR_RATING) -> int:
    """Delete puzzles rated below the threshold."""
    deleted = store.delete_where(lambda p: p.rating < threshold)
    if deleted:
        logger.info("Deleted %d unpopular puzzle(s) with rating < %d", deleted, threshold)
    return deleted


def delete_unverified(
    store: PuzzleStore,
    now: Optional[datetime] = None,
    ttl: timedelta = UNVERIFIED_TTL,
) -> int:
    """Delete puzzles nobody verified within the ttl."""
    cutoff = as_utc(now or utcnow()) - ttl
    deleted = store.delete_where(lambda p: not p.verified and p.created_at < cutoff)
    if deleted:
        logger.info("Deleted %d unverified puzzle(s) older than %s", deleted, ttl)
    return deleted


def run_sweep(store: PuzzleStore, now: Optional[datetime] = None) -> Dict[str, int]:
    return {
        "unpopular": delete_unpopular(store),
        "unverified": delete_unverified(store, now=now),
    }
