"""
AI puzzle generation.

Builds the prompt, calls a generative text client, pulls the puzzle JSON out
of the free-text answer and validates it. Credentials are tried in pool order;
a quota/rate-limit error moves on to the next key, anything else stops the
call.
"""

from __future__ import annotations
import logging
import random
from dataclasses import dataclass
from enum import Enum
from typing import Any, Dict, List, Optional, Sequence

from tenacity import RetryError, Retrying, retry_if_exception, stop_after_attempt

from .core.env import Settings, load_credential_pool
from .engine import GROUP_COUNT, GROUP_SIZE
from .errors import (
    CredentialsExhaustedError,
    DuplicateWordsError,
    GenerationError,
    ResponseParseError,
)
from .models import get_client_for_model, credential_prefix_for_model
from .models.base_client import TextClient
from .types import (
    POSITIONAL_TIERS,
    Group,
    OverallDifficulty,
    Puzzle,
    Word,
    new_id,
)
from .utils import extract_json_from_response, normalize_word

logger = logging.getLogger(__name__)

AI_CREATOR = "AI"


PROMPT_TEMPLATE = """You are designing a {language}-language edition of the NYT Connections puzzle.

Generate ONE 16-word puzzle divided into 4 groups of 4.

The puzzle language must be {language}.
The topic scope is UNRESTRICTED (science, internet, brands, slang, pop culture, math, technology, etc).
Do NOT bias toward local culture unless the theme requires it.

The puzzle MUST be designed for MISDIRECTION:
- Many words should appear to belong to multiple groups
- At least two groups must share semantic overlap to create traps

Difficulty tiers must be strictly enforced:

GREEN  - obvious, concrete, everyday category
YELLOW - conceptual category, not directly visible
PURPLE - abstract, linguistic, metaphorical, or pattern-based category
RED    - wordplay, hidden structure, homonym, acronym, letter-logic, multi-meaning, etc

Overall difficulty must reflect how deceptive the full 16-word set is.
{theme_line}
Rules:
- All 16 words must be unique
- Use {language} vocabulary (loanwords allowed)
- Proper nouns: capitalize. Others lowercase.
- Do NOT explain anything

Return ONLY this JSON:

{{
  "gameName": "short catchy name",
  "overallDifficulty": "easy | medium | hard | brain-teaser",
  "groups": [
    {{ "color": "green",  "theme": "...", "words": ["...", "...", "...", "..."] }},
    {{ "color": "yellow", "theme": "...", "words": ["...", "...", "...", "..."] }},
    {{ "color": "purple", "theme": "...", "words": ["...", "...", "...", "..."] }},
    {{ "color": "red",    "theme": "...", "words": ["...", "...", "...", "..."] }}
  ]
}}
"""


def build_prompt(theme: Optional[str] = None, language: str = "Vietnamese") -> str:
    """Build the generation prompt, optionally nudged toward a theme."""
    theme_line = ""
    if theme and theme.strip():
        theme_line = f"\nOptional inspiration (NOT restriction): {theme.strip()}\n"
    return PROMPT_TEMPLATE.format(language=language, theme_line=theme_line)


def _field(obj: Any, name: str) -> Any:
    if isinstance(obj, dict):
        return obj.get(name)
    return getattr(obj, name, None)


@dataclass(frozen=True)
class QuotaPolicy:
    """
    Which error shapes mean "this key is out of quota, try the next one".

    Providers report it differently (HTTP 429 on ``status_code``/``code``,
    gRPC ``RESOURCE_EXHAUSTED`` on ``status``/``grpc_status_code``, or the same
    fields nested under ``error``), so the recognised shapes come from config.
    """
    status_codes: Sequence[int] = (429,)
    status_names: Sequence[str] = ("RESOURCE_EXHAUSTED",)
    fields: Sequence[str] = ("code", "status", "status_code", "grpc_status_code")
    nested: Sequence[str] = ("error",)

    @classmethod
    def from_settings(cls, settings: Settings) -> "QuotaPolicy":
        return cls(
            status_codes=tuple(settings.quota_status_codes),
            status_names=tuple(n.upper() for n in settings.quota_status_names),
        )

    def matches(self, exc: BaseException) -> bool:
        if isinstance(exc, GenerationError):
            return False
        candidates: List[Any] = [exc]
        for name in self.nested:
            inner = _field(exc, name)
            if inner is not None:
                candidates.append(inner)
        return any(
            self._is_quota_value(_field(obj, f))
            for obj in candidates
            for f in self.fields
        )

    def _is_quota_value(self, value: Any) -> bool:
        if value is None or isinstance(value, bool):
            return False
        if isinstance(value, int):
            return int(value) in self.status_codes
        if isinstance(value, Enum):
            return value.name.upper() in self.status_names
        if isinstance(value, str):
            text = value.strip()
            if text.isdigit():
                return int(text) in self.status_codes
            return text.upper() in self.status_names
        return False


def _parse_difficulty(value: Any) -> Optional[OverallDifficulty]:
    if not isinstance(value, str):
        return None
    try:
        return OverallDifficulty(value.strip().lower())
    except ValueError:
        return None


def parse_puzzle_response(text: str, fallback_difficulty: OverallDifficulty) -> Puzzle:
    """
    Turn raw model output into a Puzzle.

    Groups are mapped onto the fixed green/yellow/purple/red order by position,
    whatever colors the model wrote. Every puzzle, group and word gets a fresh id.

    Raises:
        ResponseParseError: No JSON object, or not 4 groups of 4 words
        DuplicateWordsError: The 16 words are not distinct
    """
    data = extract_json_from_response(text)
    if data is None:
        raise ResponseParseError(f"No JSON from AI: {text[:200]!r}")

    raw_groups = data.get("groups")
    if not (isinstance(raw_groups, list) and len(raw_groups) == GROUP_COUNT):
        count = len(raw_groups) if isinstance(raw_groups, list) else 0
        raise ResponseParseError(f"Expected {GROUP_COUNT} groups, got {count}")

    groups: List[Group] = []
    for index, raw in enumerate(raw_groups):
        words = raw.get("words") if isinstance(raw, dict) else None
        if not (isinstance(words, list) and len(words) == GROUP_SIZE):
            raise ResponseParseError(f"Group {index} must have exactly {GROUP_SIZE} words")
        if not all(isinstance(w, str) and w.strip() for w in words):
            raise ResponseParseError(f"All words in group {index} must be non-empty strings")

        color, difficulty = POSITIONAL_TIERS[index]
        groups.append(Group(
            id=new_id(),
            theme=str(raw.get("theme") or "").strip(),
            words=[Word.create(w.strip()) for w in words],
            color=color,
            difficulty=difficulty,
        ))

    all_words = [normalize_word(w.text) for g in groups for w in g.words]
    if len(set(all_words)) != GROUP_COUNT * GROUP_SIZE:
        dupes = sorted({w for w in all_words if all_words.count(w) > 1})
        raise DuplicateWordsError(f"Duplicate words detected: {dupes}")

    game_name = data.get("gameName")
    return Puzzle(
        id=new_id(),
        overall_difficulty=_parse_difficulty(data.get("overallDifficulty")) or fallback_difficulty,
        groups=groups,
        game_name=game_name.strip() if isinstance(game_name, str) and game_name.strip() else None,
        created_by=AI_CREATOR,
        verified=False,
    )


class PuzzleGenerator:
    """
    Generates puzzles with a generative text client and a pool of API keys.

    Each generate_puzzle() call walks its own cursor over the pool, so
    concurrent calls never disturb each other's rotation. A call makes at most
    len(credentials) requests.

    Args:
        client: Provider client (see vnconnections.models)
        credentials: Ordered API keys
        model: Provider model name
        quota_policy: Error shapes that trigger rotation to the next key
        timeout: Per-request timeout in seconds
        language: Puzzle language written into the prompt
        rng: Random source for the fallback difficulty
    """

    def __init__(
        self,
        client: TextClient,
        credentials: Sequence[str],
        model: str,
        quota_policy: Optional[QuotaPolicy] = None,
        timeout: float = 60.0,
        language: str = "Vietnamese",
        rng: Optional[random.Random] = None,
    ):
        self.client = client
        self.credentials = tuple(credentials)
        self.model = model
        self.quota_policy = quota_policy or QuotaPolicy()
        self.timeout = timeout
        self.language = language
        self.rng = rng or random.Random()

        if not self.credentials:
            logger.error("No API credentials configured for %s", model)

    @classmethod
    def from_settings(cls, settings: Settings) -> "PuzzleGenerator":
        client, resolved_model = get_client_for_model(settings.model)
        credentials = load_credential_pool(credential_prefix_for_model(settings.model))
        return cls(
            client=client,
            credentials=credentials,
            model=resolved_model,
            quota_policy=QuotaPolicy.from_settings(settings),
            timeout=settings.timeout,
            language=settings.language,
        )

    def generate_puzzle(self, theme: Optional[str] = None) -> Puzzle:
        """
        Generate one puzzle, rotating keys on quota errors.

        Raises:
            CredentialsExhaustedError: Every key hit its quota, or no keys
            ResponseParseError / DuplicateWordsError: Unusable model output
            GenerationError: Any other provider error (no rotation)
        """
        # Picked before any request so it doesn't depend on which key succeeds
        fallback_difficulty = self.rng.choice(list(OverallDifficulty))
        prompt = build_prompt(theme, self.language)
        text = self._request(prompt)
        puzzle = parse_puzzle_response(text, fallback_difficulty)
        logger.info("Generated puzzle %s (%s)", puzzle.id, puzzle.game_name or "untitled")
        return puzzle

    def generate_random_puzzle(self) -> Puzzle:
        return self.generate_puzzle(None)

    def _request(self, prompt: str) -> str:
        if not self.credentials:
            raise CredentialsExhaustedError("No API credentials configured")

        total = len(self.credentials)
        keys = iter(self.credentials)
        retrying = Retrying(
            stop=stop_after_attempt(total),
            retry=retry_if_exception(self.quota_policy.matches),
            before_sleep=lambda state: logger.warning(
                "API key %d/%d quota exceeded, trying next key...",
                state.attempt_number, total,
            ),
        )

        try:
            for attempt in retrying:
                with attempt:
                    api_key = next(keys)
                    return self.client.generate(
                        prompt, api_key=api_key, model=self.model, timeout=self.timeout
                    )
        except RetryError as e:
            last = e.last_attempt.exception()
            raise CredentialsExhaustedError(
                f"All {total} API keys exhausted. Last error: {last}"
            ) from last
        except GenerationError:
            raise
        except Exception as e:
            raise GenerationError(f"Puzzle generation failed: {e}") from e

        # Retrying always yields at least one attempt
        raise GenerationError("Puzzle generation produced no response")
