from __future__ import annotations
from openai import OpenAI

from .base_client import DEFAULT_TEMPERATURE, MAX_OUTPUT_TOKENS


class OpenAIClient:
    """Client for OpenAI models using official SDK."""

    def __init__(self, temperature: float = DEFAULT_TEMPERATURE, max_tokens: int = MAX_OUTPUT_TOKENS):
        self.temperature = temperature
        self.max_tokens = max_tokens

    def generate(
        self,
        prompt: str,
        api_key: str,
        model: str = "gpt-4o",
        timeout: float = 60.0,
    ) -> str:
        # SDK-level retries would spin on a 429 instead of handing over to the next key
        client = OpenAI(api_key=api_key, timeout=timeout, max_retries=0)
        response = client.chat.completions.create(
            model=model,
            messages=[{"role": "user", "content": prompt}],
            temperature=self.temperature,
            max_tokens=self.max_tokens,
            response_format={"type": "json_object"},
        )
        return response.choices[0].message.content or ""
