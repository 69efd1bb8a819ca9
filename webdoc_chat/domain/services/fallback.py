"""Deterministic reply used when the language model is unavailable."""

from __future__ import annotations

from ..models import AssembledContext
from ..prompts import (
    CREDENTIALS_NOTICE,
    FALLBACK_CLOSING,
    FALLBACK_DOCUMENT_ACK,
    FALLBACK_ECHO,
    FALLBACK_SEARCH_FOLLOWUP,
    FALLBACK_SEARCH_INTRO,
)


def build_fallback_reply(
    query: str,
    context: AssembledContext,
    excerpt_chars: int = 800,
) -> str:
    """Template a reply from the query and whatever context was gathered.

    The output depends only on the arguments, so repeated calls with the
    same query and context return the same string.

    Args:
        query: Raw content of the last user message.
        context: Assembled search/document context.
        excerpt_chars: Maximum characters of the search block to quote.

    Returns:
        The fallback reply text.
    """
    parts: list[str] = []

    if context.has_search:
        parts.append(FALLBACK_SEARCH_INTRO.format(excerpt=context.search_block[:excerpt_chars]))

    if context.has_documents:
        parts.append(FALLBACK_DOCUMENT_ACK)

    if not context.has_search and not context.has_documents:
        parts.append(FALLBACK_ECHO.format(query=query))

    parts.append(CREDENTIALS_NOTICE)

    if context.has_search:
        parts.append(FALLBACK_SEARCH_FOLLOWUP)

    parts.append(FALLBACK_CLOSING)
    return "".join(parts)
