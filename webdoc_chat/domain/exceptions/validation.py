"""Client input validation exceptions for WebDoc Chat."""

from .base import WebDocChatError


class ValidationError(WebDocChatError):
    """Input validation failed."""

    error_code = "WDC_VAL_001"


class EmptyConversationError(ValidationError):
    """Chat request carried no messages to answer."""

    error_code = "WDC_VAL_002"


class MissingFileError(ValidationError):
    """Upload request did not include a file."""

    error_code = "WDC_VAL_003"


class UnsupportedMediaTypeError(ValidationError):
    """Uploaded file is not of the accepted document type."""

    error_code = "WDC_VAL_004"
