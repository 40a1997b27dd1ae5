from __future__ import annotations
import uuid
from dataclasses import dataclass, field, replace
from datetime import datetime, timezone
from enum import Enum
from typing import List, Dict, Any, Optional, Tuple


class GroupColor(str, Enum):
    GREEN = "green"
    YELLOW = "yellow"
    PURPLE = "purple"
    RED = "red"


class DifficultyLevel(str, Enum):
    EASY = "easy"
    MEDIUM = "medium"
    HARD = "hard"
    EXPERT = "expert"


class OverallDifficulty(str, Enum):
    EASY = "easy"
    MEDIUM = "medium"
    HARD = "hard"
    BRAIN_TEASER = "brain-teaser"


# Group position -> (color, difficulty). Labels proposed by the model are ignored.
POSITIONAL_TIERS: Tuple[Tuple[GroupColor, DifficultyLevel], ...] = (
    (GroupColor.GREEN, DifficultyLevel.EASY),
    (GroupColor.YELLOW, DifficultyLevel.MEDIUM),
    (GroupColor.PURPLE, DifficultyLevel.HARD),
    (GroupColor.RED, DifficultyLevel.EXPERT),
)


def new_id() -> str:
    return str(uuid.uuid4())


def utcnow() -> datetime:
    return datetime.now(timezone.utc)


def as_utc(value: datetime) -> datetime:
    """Naive datetimes are taken to be UTC."""
    if value.tzinfo is None:
        return value.replace(tzinfo=timezone.utc)
    return value


@dataclass(frozen=True)
class Word:
    id: str
    text: str

    @classmethod
    def create(cls, text: str) -> "Word":
        return cls(id=new_id(), text=text)


@dataclass
class Group:
    """A themed set of exactly 4 words."""
    id: str
    theme: str
    words: List[Word]
    color: GroupColor
    difficulty: DifficultyLevel

    @property
    def texts(self) -> List[str]:
        return [w.text for w in self.words]

    def to_dict(self) -> Dict[str, Any]:
        return {
            "id": self.id,
            "theme": self.theme,
            "words": [{"id": w.id, "text": w.text} for w in self.words],
            "color": self.color.value,
            "difficulty": self.difficulty.value,
        }

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "Group":
        return cls(
            id=data["id"],
            theme=data.get("theme", ""),
            words=[Word(id=w["id"], text=w["text"]) for w in data["words"]],
            color=GroupColor(data["color"]),
            difficulty=DifficultyLevel(data["difficulty"]),
        )


@dataclass
class Puzzle:
    """
    The full 16-word, 4-group game unit.

    ``rating`` is the cumulative up/down vote count; it drives the weighted
    random pick and the retention sweep.
    """
    id: str
    overall_difficulty: OverallDifficulty
    groups: List[Group]
    created_at: datetime = field(default_factory=utcnow)
    game_name: Optional[str] = None
    created_by: Optional[str] = None
    verified: bool = False
    rating: int = 0

    def all_words(self) -> List[str]:
        return [w.text for g in self.groups for w in g.words]

    def copy(self, **changes) -> "Puzzle":
        return replace(self, **changes)

    def to_dict(self) -> Dict[str, Any]:
        """Wire shape shared with the web client (camelCase keys)."""
        return {
            "id": self.id,
            "gameName": self.game_name,
            "overallDifficulty": self.overall_difficulty.value,
            "groups": [g.to_dict() for g in self.groups],
            "createdAt": self.created_at.isoformat(),
            "createdBy": self.created_by,
            "verified": self.verified,
            "rating": self.rating,
        }

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "Puzzle":
        created_at = data.get("createdAt")
        if isinstance(created_at, str):
            created_at = datetime.fromisoformat(created_at)
        created_at = as_utc(created_at) if created_at is not None else utcnow()
        return cls(
            id=data["id"],
            overall_difficulty=OverallDifficulty(data.get("overallDifficulty", "medium")),
            groups=[Group.from_dict(g) for g in data["groups"]],
            created_at=created_at,
            game_name=data.get("gameName"),
            created_by=data.get("createdBy"),
            verified=bool(data.get("verified", False)),
            rating=int(data.get("rating", 0)),
        )


@dataclass
class GuessResult:
    """Outcome of checking one 4-word guess against a puzzle."""
    matched: bool
    group: Optional[Group] = None
