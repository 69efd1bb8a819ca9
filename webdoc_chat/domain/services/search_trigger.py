"""Keyword heuristic deciding whether a message needs a web lookup."""

from __future__ import annotations

# Plain substring matches: "now" also fires on "know", "when" on "whenever".
SEARCH_KEYWORDS: tuple[str, ...] = (
    "search",
    "look up",
    "find",
    "what is",
    "who is",
    "when",
    "where",
    "current",
    "latest",
    "recent",
    "news",
    "today",
    "now",
    "information about",
    "tell me about",
    "explain",
    "definition of",
)


def needs_web_search(message: str, keywords: tuple[str, ...] = SEARCH_KEYWORDS) -> bool:
    """Return True if any keyword occurs in the lower-cased message."""
    lower_message = message.lower()
    return any(keyword in lower_message for keyword in keywords)


class SearchTrigger:
    """Classify user messages into "look it up" or "answer directly"."""

    def __init__(self, keywords: tuple[str, ...] = SEARCH_KEYWORDS) -> None:
        self.keywords = keywords

    def should_search(self, message: str) -> bool:
        return needs_web_search(message, self.keywords)
