"""Document store port abstraction."""

from __future__ import annotations

from typing import Protocol

from ..domain.models import DocumentRecord


class DocumentStorePort(Protocol):
    """Keyed storage of extracted document text."""

    def put(self, filename: str, text: str) -> DocumentRecord:  # pragma: no cover - protocol
        ...

    def get(self, filename: str) -> DocumentRecord | None:  # pragma: no cover - protocol
        ...

    def records(self) -> list[DocumentRecord]:  # pragma: no cover - protocol
        ...

    def __len__(self) -> int:  # pragma: no cover - protocol
        ...
