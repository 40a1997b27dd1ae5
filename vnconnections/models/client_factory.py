from __future__ import annotations
from typing import Dict, Tuple

from .base_client import TextClient
from .openai_client import OpenAIClient
from .anthropic_client import AnthropicClient
from .gemini_client import GeminiClient


# Model presets for convenience
MODEL_PRESETS: Dict[str, str] = {
    # Google models (names as listed by genai.list_models())
    "gemini": "models/gemini-2.5-flash",
    "gemini-flash": "models/gemini-2.5-flash",
    "gemini-pro": "models/gemini-2.5-pro",
    "gemini-flash-lite": "models/gemini-2.5-flash-lite",

    # OpenAI models
    "gpt4o": "gpt-4o",
    "gpt4o-mini": "gpt-4o-mini",

    # Anthropic models
    "sonnet": "claude-3-5-sonnet-20241022",
    "haiku": "claude-3-5-haiku-20241022",
}

# Env prefix of each provider's credential pool
CREDENTIAL_PREFIXES: Dict[str, str] = {
    "gemini": "GEMINI_API_KEY",
    "openai": "OPENAI_API_KEY",
    "anthropic": "ANTHROPIC_API_KEY",
}


def resolve_model(model: str) -> Tuple[str, str]:
    """
    Resolve a preset alias and work out which provider serves it.

    Returns:
        (provider, resolved_model)

    Raises:
        ValueError: If model type cannot be determined
    """
    resolved_model = MODEL_PRESETS.get(model, model)
    name = resolved_model.lower()

    if "gemini" in name:
        return "gemini", resolved_model
    if "claude" in name:
        return "anthropic", resolved_model
    if any(name.startswith(x) for x in ["gpt", "o1", "o3", "o4"]):
        return "openai", resolved_model

    raise ValueError(
        f"Unknown model type: {model}\n"
        f"Supported: Google (gemini-*), OpenAI (gpt-*), Anthropic (claude-*)"
    )


def get_client_for_model(model: str) -> Tuple[TextClient, str]:
    """
    Factory function to get the appropriate client for a model.

    Args:
        model: Model identifier (can be preset name or full model string)

    Returns:
        (client instance, resolved model name)
    """
    provider, resolved_model = resolve_model(model)
    if provider == "gemini":
        return GeminiClient(), resolved_model
    if provider == "anthropic":
        return AnthropicClient(), resolved_model
    return OpenAIClient(), resolved_model


def credential_prefix_for_model(model: str) -> str:
    provider, _ = resolve_model(model)
    return CREDENTIAL_PREFIXES[provider]
