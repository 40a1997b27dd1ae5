# vnconnections/core/env.py
from __future__ import annotations
import os
from dataclasses import dataclass, field
from typing import List
from dotenv import load_dotenv

# Ordered credential slots: PREFIX, PREFIX_2 ... PREFIX_5
CREDENTIAL_SLOTS = 5

KNOWN_KEYS = [
    "GEMINI_API_KEY",
    "GEMINI_API_KEY_2",
    "GEMINI_API_KEY_3",
    "GEMINI_API_KEY_4",
    "GEMINI_API_KEY_5",
    "OPENAI_API_KEY",
    "ANTHROPIC_API_KEY",
    "PUZZLE_MODEL",
    "PUZZLE_STORE",
]

_loaded = False


def load_env(dotenv_path: str | None = None) -> dict[str, str]:
    """
    Load .env once. Returns a dict of which keys are present (masked).
    """
    global _loaded
    if not _loaded or dotenv_path:
        load_dotenv(dotenv_path or os.getenv("DOTENV_PATH", ".env"), override=False)
        _loaded = True
    found = {}
    for k in KNOWN_KEYS:
        v = os.getenv(k)
        if v:
            mask = v[:4] + "…" if len(v) > 4 else "…"
            found[k] = mask
    return found


def credential_slot_names(prefix: str, slots: int = CREDENTIAL_SLOTS) -> List[str]:
    return [prefix] + [f"{prefix}_{i}" for i in range(2, slots + 1)]


def load_credential_pool(prefix: str = "GEMINI_API_KEY", slots: int = CREDENTIAL_SLOTS) -> List[str]:
    """Read the fixed ordered credential slots, dropping unset or blank ones."""
    keys = []
    for name in credential_slot_names(prefix, slots):
        value = (os.getenv(name) or "").strip()
        if value:
            keys.append(value)
    return keys


def _split_env(name: str, default: str) -> List[str]:
    raw = os.getenv(name, default)
    return [part.strip() for part in raw.split(",") if part.strip()]


@dataclass
class Settings:
    """Runtime configuration, read from the environment (and .env)."""
    model: str = "gemini"
    store_path: str = "data/puzzles.jsonl"
    timeout: float = 60.0
    language: str = "Vietnamese"
    log_level: str = "INFO"
    quota_status_codes: List[int] = field(default_factory=lambda: [429])
    quota_status_names: List[str] = field(default_factory=lambda: ["RESOURCE_EXHAUSTED"])

    @classmethod
    def from_env(cls, dotenv_path: str | None = None) -> "Settings":
        load_env(dotenv_path)
        return cls(
            model=os.getenv("PUZZLE_MODEL", cls.model),
            store_path=os.getenv("PUZZLE_STORE", cls.store_path),
            timeout=float(os.getenv("GENERATION_TIMEOUT", cls.timeout)),
            language=os.getenv("PUZZLE_LANGUAGE", cls.language),
            log_level=os.getenv("LOG_LEVEL", cls.log_level),
            quota_status_codes=[int(c) for c in _split_env("QUOTA_STATUS_CODES", "429")],
            quota_status_names=_split_env("QUOTA_STATUS_NAMES", "RESOURCE_EXHAUSTED"),
        )
