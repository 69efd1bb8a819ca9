"""Google Gemini chat completion adapter using the google-genai SDK."""

from __future__ import annotations

import logging
from collections.abc import Sequence
from typing import TYPE_CHECKING

from ...common.utils import clean_text
from ...domain.exceptions import (
    LLMConnectionError,
    LLMGenerationError,
    LLMRateLimitError,
    MissingAPIKeyError,
)
from ...domain.models import Message, Role

if TYPE_CHECKING:
    from google import genai
    from google.genai import types

logger = logging.getLogger(__name__)

# Gemini calls the assistant side of a conversation "model"
_GEMINI_ROLES = {Role.USER: "user", Role.ASSISTANT: "model"}


class GeminiLLMAdapter:
    """Chat completion against Gemini, one request per call, no retries."""

    def __init__(self, api_key: str, model: str = "gemini-2.0-flash") -> None:
        """Initialize the adapter.

        Args:
            api_key: Google AI API key.
            model: Model to use.
        """
        self.api_key = api_key
        self.model_name = model
        self._client: genai.Client | None = None

    def _get_client(self) -> "genai.Client":
        """Lazy load the Gemini client."""
        if self._client is None:
            if not self.api_key:
                raise MissingAPIKeyError(
                    "Google API key not set. Set GOOGLE_API_KEY in your .env file."
                )

            from google import genai

            self._client = genai.Client(api_key=self.api_key)
            logger.info("Gemini client initialized for model: %s", self.model_name)

        return self._client

    def complete(
        self,
        messages: Sequence[Message],
        system_prompt: str,
        temperature: float = 0.7,
        max_tokens: int = 1000,
    ) -> str:
        """Generate the next assistant turn for a conversation.

        System-role messages in the conversation are appended to the system
        instruction since Gemini only accepts user and model turns.

        Args:
            messages: Conversation so far, oldest first.
            system_prompt: Assembled system instructions.
            temperature: Sampling temperature.
            max_tokens: Maximum output tokens.

        Returns:
            Generated text, or an empty string if the model returned none.

        Raises:
            LLMRateLimitError: Quota or rate limit exhausted.
            LLMConnectionError: Provider unreachable or key rejected.
            LLMGenerationError: Any other provider failure.
        """
        from google.genai import types

        contents, system_instruction = self._build_request(messages, system_prompt)

        try:
            client = self._get_client()
            response = client.models.generate_content(
                model=self.model_name,
                contents=contents,
                config=types.GenerateContentConfig(
                    system_instruction=system_instruction,
                    temperature=temperature,
                    max_output_tokens=max_tokens,
                ),
            )
        except MissingAPIKeyError:
            raise
        except Exception as e:
            raise self._translate_error(e) from e

        if not response.candidates:
            logger.warning("Gemini returned no candidates")
            return ""
        return clean_text(response.text)

    def _build_request(
        self, messages: Sequence[Message], system_prompt: str
    ) -> tuple[list["types.Content"], str]:
        from google.genai import types

        instructions = [system_prompt]
        contents: list[types.Content] = []
        for message in messages:
            if message.role == Role.SYSTEM:
                instructions.append(message.content)
                continue
            contents.append(
                types.Content(
                    role=_GEMINI_ROLES[message.role],
                    parts=[types.Part(text=message.content)],
                )
            )
        return contents, "\n\n".join(instructions)

    def _translate_error(self, error: Exception) -> Exception:
        """Map SDK failures onto the LLM exception hierarchy."""
        error_msg = str(error).lower()
        context = {"model": self.model_name}
        if any(marker in error_msg for marker in ("quota", "rate limit", "resource_exhausted", "429")):
            return LLMRateLimitError("Gemini rate limit reached", cause=error, context=context)
        if any(marker in error_msg for marker in ("api key", "permission", "connect", "timed out")):
            return LLMConnectionError("Could not reach Gemini", cause=error, context=context)
        return LLMGenerationError("Gemini failed to generate a response", cause=error, context=context)
