"""Common utilities shared across layers."""

from .exception_handler import (
    format_exception_json,
    get_error_code,
    get_http_status_code,
    log_exception,
)
from .utils import clean_text, collapse_whitespace, format_size_kb

__all__ = [
    # Utilities
    "clean_text",
    "collapse_whitespace",
    "format_size_kb",
    # Exception handlers
    "format_exception_json",
    "get_error_code",
    "get_http_status_code",
    "log_exception",
]
