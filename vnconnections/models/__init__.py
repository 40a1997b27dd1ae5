"""
Generative text clients used to create puzzles.

Every client exposes the same call, so the generator can rotate credentials
without knowing the provider:
- Google (Gemini) via google-generativeai (default)
- OpenAI (GPT-4o, etc.) via official SDK
- Anthropic (Claude) via official SDK

Usage:
    from vnconnections.models import get_client_for_model

    client, model = get_client_for_model("gemini")
    text = client.generate(prompt, api_key=key, model=model)
"""

from .base_client import TextClient
from .openai_client import OpenAIClient
from .anthropic_client import AnthropicClient
from .gemini_client import GeminiClient
from .client_factory import (
    get_client_for_model,
    credential_prefix_for_model,
    resolve_model,
    MODEL_PRESETS,
)

__all__ = [
    "get_client_for_model",
    "credential_prefix_for_model",
    "resolve_model",

    "OpenAIClient",
    "AnthropicClient",
    "GeminiClient",

    "TextClient",

    "MODEL_PRESETS",
]
