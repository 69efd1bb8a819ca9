"""LLM exceptions for WebDoc Chat."""

from .base import WebDocChatError


class LLMError(WebDocChatError):
    """Base error for LLM operations."""

    error_code = "WDC_LLM_001"


class LLMConnectionError(LLMError):
    """Failed to reach the LLM provider.

    Common causes:
    - Invalid API key
    - Network issues
    - Service unavailable
    """

    error_code = "WDC_LLM_002"


class LLMRateLimitError(LLMError):
    """Rate limit or quota exceeded on the LLM provider."""

    error_code = "WDC_LLM_003"


class LLMGenerationError(LLMError):
    """Provider accepted the request but failed to generate a response."""

    error_code = "WDC_LLM_004"
