"""Custom exception hierarchy for WebDoc Chat.

All exceptions are re-exported here:

    from webdoc_chat.domain.exceptions import WebDocChatError, LLMRateLimitError
"""

from .base import ExceptionContext, WebDocChatError
from .configuration import ConfigurationError, MissingAPIKeyError
from .ingestion import DocumentIngestionError, TextExtractionError
from .llm import LLMConnectionError, LLMError, LLMGenerationError, LLMRateLimitError
from .search import PageFetchError, SearchError, SearchUnavailableError
from .validation import (
    EmptyConversationError,
    MissingFileError,
    UnsupportedMediaTypeError,
    ValidationError,
)

__all__ = [
    # Base
    "ExceptionContext",
    "WebDocChatError",
    # Configuration
    "ConfigurationError",
    "MissingAPIKeyError",
    # Validation
    "ValidationError",
    "EmptyConversationError",
    "MissingFileError",
    "UnsupportedMediaTypeError",
    # LLM
    "LLMError",
    "LLMConnectionError",
    "LLMRateLimitError",
    "LLMGenerationError",
    # Search
    "SearchError",
    "SearchUnavailableError",
    "PageFetchError",
    # Ingestion
    "DocumentIngestionError",
    "TextExtractionError",
]
