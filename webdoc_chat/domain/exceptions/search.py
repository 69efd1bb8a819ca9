"""Web lookup exceptions for WebDoc Chat."""

from .base import WebDocChatError


class SearchError(WebDocChatError):
    """Base error for web lookups."""

    error_code = "WDC_SRC_001"


class SearchUnavailableError(SearchError):
    """Search endpoint could not be queried or returned garbage."""

    error_code = "WDC_SRC_002"


class PageFetchError(SearchError):
    """Result page could not be fetched or parsed."""

    error_code = "WDC_SRC_003"
