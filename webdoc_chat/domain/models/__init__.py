"""Domain models for the chat assistant."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum


class Role(str, Enum):
    """Author of a conversation message."""

    USER = "user"
    ASSISTANT = "assistant"
    SYSTEM = "system"


@dataclass(frozen=True)
class Message:
    """One turn of a conversation."""

    role: Role
    content: str


@dataclass(frozen=True)
class DocumentRecord:
    """Extracted text of an uploaded document, keyed by its filename."""

    filename: str
    text: str


@dataclass(frozen=True)
class SearchResult:
    """Single candidate returned by the search endpoint."""

    title: str
    description: str
    url: str


class SearchStatus(Enum):
    """How far a web lookup got."""

    COMPLETE = "complete"
    DEGRADED = "degraded"
    NO_RESULTS = "no_results"
    UNAVAILABLE = "unavailable"


@dataclass(frozen=True)
class SearchOutcome:
    """Result of one web lookup.

    ``text`` is always usable as a search block: the formatted results for
    COMPLETE and DEGRADED lookups, or a fixed sentence otherwise.
    """

    status: SearchStatus
    text: str
    results: list[SearchResult] = field(default_factory=list)
    excerpt: str = ""


@dataclass(frozen=True)
class AssembledContext:
    """Search and document context merged into the system instructions."""

    system_prompt: str
    search_block: str | None = None
    document_block: str | None = None

    @property
    def has_search(self) -> bool:
        return bool(self.search_block)

    @property
    def has_documents(self) -> bool:
        return bool(self.document_block)


class ReplySource(Enum):
    """Which terminal path produced a reply."""

    MODEL = "model"
    FALLBACK = "fallback"


@dataclass(frozen=True)
class ChatReply:
    """Reply produced by the chat service."""

    text: str
    source: ReplySource
    searched: bool = False
    search_status: SearchStatus | None = None


@dataclass(frozen=True)
class IngestionResult:
    """Outcome of storing an uploaded document."""

    filename: str
    size: int
    text: str
    degraded: bool = False
