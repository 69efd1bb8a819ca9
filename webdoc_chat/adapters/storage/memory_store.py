"""Process-local document store guarded by a lock."""

from __future__ import annotations

import logging
import threading

from ...domain.models import DocumentRecord

logger = logging.getLogger(__name__)


class InMemoryDocumentStore:
    """Filename-keyed document text held for the lifetime of the process.

    Writes to an existing filename replace the previous record in place, so
    the last writer wins when two uploads race. Reads return snapshots taken
    under the lock.
    """

    def __init__(self) -> None:
        self._records: dict[str, DocumentRecord] = {}
        self._lock = threading.Lock()

    def put(self, filename: str, text: str) -> DocumentRecord:
        """Store ``text`` under ``filename``, replacing any previous record."""
        record = DocumentRecord(filename=filename, text=text)
        with self._lock:
            replaced = filename in self._records
            self._records[filename] = record
        logger.info("%s document %s (%d chars)", "Replaced" if replaced else "Stored", filename, len(text))
        return record

    def get(self, filename: str) -> DocumentRecord | None:
        with self._lock:
            return self._records.get(filename)

    def records(self) -> list[DocumentRecord]:
        """Snapshot of all records in first-upload order."""
        with self._lock:
            return list(self._records.values())

    def __len__(self) -> int:
        with self._lock:
            return len(self._records)
