"""Tests for DocumentIngestionService."""

import pytest

from webdoc_chat.application.services.ingest_document import (
    TRUNCATION_NOTICE,
    DocumentIngestionService,
)
from webdoc_chat.domain.exceptions import MissingFileError, UnsupportedMediaTypeError

pytestmark = pytest.mark.unit


@pytest.fixture
def service(store):
    return DocumentIngestionService(store)


class TestValidation:
    def test_rejects_non_pdf(self, service, store):
        with pytest.raises(UnsupportedMediaTypeError) as exc_info:
            service.ingest("notes.txt", "text/plain", b"plain text")

        assert exc_info.value.message == "File must be a PDF"
        assert len(store) == 0

    def test_rejects_missing_file(self, service, store):
        with pytest.raises(MissingFileError) as exc_info:
            service.ingest(None, None, None)

        assert exc_info.value.message == "No file provided"
        assert len(store) == 0


class TestExtraction:
    def test_readable_pdf_is_wrapped(self, service, store, sample_pdf_bytes):
        result = service.ingest("fox.pdf", "application/pdf", sample_pdf_bytes)

        stored = store.get("fox.pdf").text
        assert stored.startswith('Content extracted from "fox.pdf":\n\n')
        assert "The quick brown fox" in stored
        assert stored.endswith("\n\n" + TRUNCATION_NOTICE)
        assert result.filename == "fox.pdf"
        assert result.size == len(sample_pdf_bytes)
        assert result.degraded is False

    def test_text_is_truncated(self, store):
        service = DocumentIngestionService(store, extractor=lambda data: "y" * 5000)

        service.ingest("long.pdf", "application/pdf", b"%PDF")

        stored = store.get("long.pdf").text
        assert "y" * 3000 in stored
        assert "y" * 3001 not in stored

    def test_short_text_uses_limited_notice(self, service, store):
        result = service.ingest("tiny.pdf", "application/pdf", b"\x00\x01short\x00\x02")

        stored = store.get("tiny.pdf").text
        assert '"tiny.pdf"' in stored
        assert "0.01 KB" in stored
        assert "Content extracted" not in stored
        assert result.degraded is True

    def test_extractor_failure_degrades(self, store):
        def broken(data: bytes) -> str:
            raise RuntimeError("corrupt stream")

        service = DocumentIngestionService(store, extractor=broken)

        result = service.ingest("broken.pdf", "application/pdf", b"x" * 2048)

        stored = store.get("broken.pdf").text
        assert 'PDF file "broken.pdf" uploaded successfully. Size: 2.00 KB.' in stored
        assert "Text extraction is limited" in stored
        assert result.degraded is True

    def test_reupload_overwrites(self, store):
        texts = iter(["first " * 20, "second " * 20])
        service = DocumentIngestionService(store, extractor=lambda data: next(texts))

        service.ingest("same.pdf", "application/pdf", b"1")
        service.ingest("same.pdf", "application/pdf", b"2")

        assert len(store) == 1
        assert "second" in store.get("same.pdf").text
        assert "first" not in store.get("same.pdf").text
