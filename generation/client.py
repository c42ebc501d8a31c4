"""LLM client abstraction for the generation layer.

Provides a unified interface for LLM providers, starting with Gemini.
The multi-stage pipeline only depends on ``LLMClientProtocol``, so tests and
other providers can plug in without touching the stages.
"""

import os
from typing import Optional, Protocol

from .models import LLMResponse


class LLMClientProtocol(Protocol):
    """Protocol for LLM clients (dependency inversion)."""

    def generate(
        self,
        prompt: str,
        system_prompt: Optional[str] = None,
        temperature: float = 0.7,
        max_tokens: int = 2048,
        json_mode: bool = False,
    ) -> LLMResponse:
        """Generate response from prompt."""
        ...


class GeminiLLMClient:
    """Gemini LLM client using google-generativeai.

    Example:
        >>> client = GeminiLLMClient()
        >>> response = client.generate("Explain selection sort", json_mode=False)
        >>> print(response.content)
    """

    def __init__(
        self,
        model: str = "gemini-2.0-flash",
        api_key: Optional[str] = None,
    ):
        """Initialize Gemini LLM client.

        Args:
            model: Gemini model to use (default: gemini-2.0-flash)
            api_key: Google API key (falls back to GOOGLE_API_KEY env var)
        """
        import google.generativeai as genai

        key = api_key or os.getenv("GOOGLE_API_KEY")
        if not key:
            raise RuntimeError("GOOGLE_API_KEY is required for Gemini LLM")

        genai.configure(api_key=key)
        self._model = genai.GenerativeModel(model)
        self._model_name = model

    def generate(
        self,
        prompt: str,
        system_prompt: Optional[str] = None,
        temperature: float = 0.7,
        max_tokens: int = 2048,
        json_mode: bool = False,
    ) -> LLMResponse:
        """Generate response using Gemini.

        Args:
            prompt: User prompt
            system_prompt: Optional system instruction
            temperature: Generation temperature (0-1)
            max_tokens: Maximum output tokens
            json_mode: Ask the model for a JSON object response

        Returns:
            LLMResponse with generated content

        Raises:
            RuntimeError: If the request fails or the response is blocked/empty
        """
        # Build full prompt with system instruction
        full_prompt = prompt
        if system_prompt:
            full_prompt = f"{system_prompt}\n\n{prompt}"

        generation_config = {
            "temperature": temperature,
            "max_output_tokens": max_tokens,
        }
        if json_mode:
            generation_config["response_mime_type"] = "application/json"

        try:
            response = self._model.generate_content(
                full_prompt,
                generation_config=generation_config,
            )
        except Exception as e:
            print(f"[llm] Generation failed: {e}")
            raise RuntimeError(f"Gemini request failed: {e}") from e

        # Handle blocked or empty responses
        if not response.candidates:
            raise RuntimeError("Gemini returned no candidates (blocked or empty response)")

        try:
            text = response.text
        except ValueError as e:
            raise RuntimeError(f"Gemini response has no text: {e}") from e

        return LLMResponse(
            content=(text or "").strip(),
            model=self._model_name,
            usage=None,  # Gemini doesn't expose token usage easily
        )

    @property
    def model_name(self) -> str:
        """Get the model name."""
        return self._model_name


__all__ = ["LLMClientProtocol", "GeminiLLMClient", "LLMResponse"]
