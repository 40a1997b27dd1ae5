"""
Exceptions raised by the generation, upload and storage layers.

The matching/scoring engine raises nothing: every guess maps to a result.
"""


class GenerationError(RuntimeError):
    """Puzzle generation failed; the message carries the underlying cause."""


class ResponseParseError(GenerationError):
    """Model output had no usable JSON puzzle object."""


class DuplicateWordsError(GenerationError):
    """Generated puzzle does not contain 16 distinct words."""


class CredentialsExhaustedError(GenerationError):
    """Every credential in the pool hit its quota (or none were configured)."""


class UploadError(ValueError):
    """Admin upload payload is malformed."""


class PuzzleNotFoundError(KeyError):
    def __init__(self, puzzle_id: str):
        self.puzzle_id = puzzle_id
        super().__init__(f"Puzzle not found: {puzzle_id}")
