from __future__ import annotations
from typing import Protocol


class TextClient(Protocol):
    """Protocol defining the interface all generative text clients implement."""

    def generate(self, prompt: str, api_key: str, model: str, timeout: float = 60.0) -> str:
        """
        Run a single prompt with one credential.

        Args:
            prompt: Full instruction text
            api_key: Credential to authenticate this call with
            model: Provider-specific model identifier
            timeout: Request timeout in seconds

        Returns:
            Raw model output text

        Raises:
            Whatever the provider SDK raises. Quota errors are recognised by
            the caller from the error's status fields, so they must not be
            wrapped here.
        """
        ...


DEFAULT_TEMPERATURE = 0.9
MAX_OUTPUT_TOKENS = 2048
