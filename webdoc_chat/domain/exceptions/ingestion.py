"""Document ingestion exceptions for WebDoc Chat."""

from .base import WebDocChatError


class DocumentIngestionError(WebDocChatError):
    """Error while turning an upload into stored text."""

    error_code = "WDC_DOC_001"


class TextExtractionError(DocumentIngestionError):
    """Failed to extract text from an uploaded PDF."""

    error_code = "WDC_DOC_002"
