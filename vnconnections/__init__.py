"""
Vietnamese Connections - core modules.
"""

from .types import Word, Group, Puzzle, GuessResult, GroupColor, DifficultyLevel, OverallDifficulty
from .engine import check_guess, calculate_score, validate_puzzle
from .game_loop import GameSession
from .generator import PuzzleGenerator, QuotaPolicy, build_prompt, parse_puzzle_response
from .store import PuzzleStore
from .upload import build_puzzle_from_upload

__all__ = [
    "Word",
    "Group",
    "Puzzle",
    "GuessResult",
    "GroupColor",
    "DifficultyLevel",
    "OverallDifficulty",
    "check_guess",
    "calculate_score",
    "validate_puzzle",
    "GameSession",
    "PuzzleGenerator",
    "QuotaPolicy",
    "build_prompt",
    "parse_puzzle_response",
    "PuzzleStore",
    "build_puzzle_from_upload",
]
