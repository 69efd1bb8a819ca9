"""Common text utilities for WebDoc Chat.

Text handling contract
----------------------
* Text arriving from the outside (model output, scraped pages) has BOM and
  replacement markers stripped before it reaches a client.
* User input is passed through untouched so keyword matching and fallback
  replies see exactly what the user typed.
"""

import re
import unicodedata

_WHITESPACE_RE = re.compile(r"\s+")


def clean_text(text: str | None, *, normalize: bool = False) -> str:
    """Remove BOM and replacement markers, optionally NFKC-normalizing.

    Args:
        text: Input text that may contain BOM or special characters.
        normalize: Whether to apply NFKC normalization.

    Returns:
        Cleaned text, or an empty string for empty input.
    """
    if not text:
        return ""

    cleaned = text.replace("\ufeff", "").replace("\ufffd", "")
    if normalize:
        cleaned = unicodedata.normalize("NFKC", cleaned)
    return cleaned


def collapse_whitespace(text: str) -> str:
    """Collapse every whitespace run to a single space and strip the ends."""
    return _WHITESPACE_RE.sub(" ", text).strip()


def format_size_kb(num_bytes: int) -> str:
    """Render a byte count as kilobytes with two decimals (e.g. ``"1.50 KB"``)."""
    return f"{num_bytes / 1024:.2f} KB"
