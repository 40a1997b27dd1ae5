from __future__ import annotations
from anthropic import Anthropic

from .base_client import DEFAULT_TEMPERATURE, MAX_OUTPUT_TOKENS


class AnthropicClient:
    """Client for Anthropic Claude models using official SDK."""

    def __init__(self, temperature: float = DEFAULT_TEMPERATURE, max_tokens: int = MAX_OUTPUT_TOKENS):
        self.temperature = temperature
        self.max_tokens = max_tokens

    def generate(
        self,
        prompt: str,
        api_key: str,
        model: str = "claude-3-5-sonnet-20241022",
        timeout: float = 60.0,
    ) -> str:
        client = Anthropic(api_key=api_key, timeout=timeout, max_retries=0)
        response = client.messages.create(
            model=model,
            max_tokens=self.max_tokens,
            temperature=self.temperature,
            messages=[{"role": "user", "content": prompt}],
        )
        return "".join(block.text for block in response.content if getattr(block, "text", None))
