"""Web lookup port abstraction."""

from __future__ import annotations

from typing import Protocol

from ..domain.models import SearchOutcome


class SearchPort(Protocol):
    """Abstract interface for internet lookups.

    ``lookup`` never raises for network or parse failures; it reports them
    through the returned outcome's status.
    """

    def lookup(self, query: str) -> SearchOutcome:  # pragma: no cover - protocol
        ...
