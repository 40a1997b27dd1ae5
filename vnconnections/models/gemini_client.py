from __future__ import annotations
import threading
import google.generativeai as genai

from .base_client import DEFAULT_TEMPERATURE, MAX_OUTPUT_TOKENS

# genai.configure() sets a process-wide key; hold it for the whole request
_configure_lock = threading.Lock()


class GeminiClient:
    """Client for Google Gemini models using official SDK."""

    def __init__(self, temperature: float = DEFAULT_TEMPERATURE, max_tokens: int = MAX_OUTPUT_TOKENS):
        self.generation_config = {
            "temperature": temperature,
            "max_output_tokens": max_tokens,
        }

    def generate(
        self,
        prompt: str,
        api_key: str,
        model: str = "models/gemini-2.5-flash",
        timeout: float = 60.0,
    ) -> str:
        """
        Generate text with Gemini using the given API key.

        Args:
            prompt: Instruction text
            api_key: Google AI Studio key
            model: Gemini model name (e.g., "models/gemini-2.5-flash")
            timeout: Request timeout in seconds

        Returns:
            Raw response text
        """
        with _configure_lock:
            genai.configure(api_key=api_key)
            gem_model = genai.GenerativeModel(
                model_name=model,
                generation_config=self.generation_config,
            )
            response = gem_model.generate_content(
                prompt,
                request_options={"timeout": timeout},
            )
        return response.text or ""
