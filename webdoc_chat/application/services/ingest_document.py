"""Use-case service for ingesting an uploaded PDF into the document store."""

from __future__ import annotations

import logging
from collections.abc import Callable

from ...common.utils import format_size_kb
from ...domain.exceptions import MissingFileError, UnsupportedMediaTypeError
from ...domain.models import IngestionResult
from ...domain.services.text_extraction import extract_readable_text
from ...ports.document_store import DocumentStorePort

logger = logging.getLogger(__name__)

PDF_MEDIA_TYPE = "application/pdf"
TRUNCATION_NOTICE = "[Content truncated for brevity...]"


def limited_extraction_notice(filename: str, size: int) -> str:
    """Stored text when the upload yielded too little readable text."""
    return (
        f'PDF file "{filename}" uploaded. Size: {format_size_kb(size)}.\n\n'
        "Note: This PDF may contain images or complex formatting, so only limited "
        "text could be extracted.\n\n"
        "The system acknowledges this PDF and can reference it in conversations. "
        "You can ask questions about general PDF topics."
    )


def extraction_failed_notice(filename: str, size: int) -> str:
    """Stored text when extraction raised."""
    return (
        f'PDF file "{filename}" uploaded successfully. Size: {format_size_kb(size)}.\n\n'
        "Note: Text extraction is limited for this file. "
        "The AI can still reference this PDF in conversations."
    )


class DocumentIngestionService:
    """Validate uploads, extract their text and store it by filename."""

    def __init__(
        self,
        store: DocumentStorePort,
        extractor: Callable[[bytes], str] | None = None,
        min_text_chars: int = 50,
        max_text_chars: int = 3000,
    ) -> None:
        """Initialize the service.

        Args:
            store: Destination for extracted text.
            extractor: Callable turning raw bytes into text; defaults to the
                readable-run heuristic.
            min_text_chars: Extracted text shorter than this counts as a miss.
            max_text_chars: Stored excerpt length.
        """
        self.store = store
        self.extractor = extractor or extract_readable_text
        self.min_text_chars = min_text_chars
        self.max_text_chars = max_text_chars

    def ingest(
        self,
        filename: str | None,
        content_type: str | None,
        data: bytes | None,
    ) -> IngestionResult:
        """Extract text from an uploaded PDF and store it under its filename.

        Once the type check passes this never fails: extraction problems are
        logged and replaced by a notice naming the file.

        Raises:
            MissingFileError: If no file was provided.
            UnsupportedMediaTypeError: If the file is not declared as a PDF.
        """
        if not filename or data is None:
            raise MissingFileError("No file provided")
        if content_type != PDF_MEDIA_TYPE:
            raise UnsupportedMediaTypeError(
                "File must be a PDF", context={"filename": filename, "content_type": content_type}
            )

        size = len(data)
        degraded = False
        try:
            extracted = self.extractor(data)
            if not extracted or len(extracted) < self.min_text_chars:
                text = limited_extraction_notice(filename, size)
                degraded = True
            else:
                text = (
                    f'Content extracted from "{filename}":\n\n'
                    f"{extracted[: self.max_text_chars]}\n\n{TRUNCATION_NOTICE}"
                )
        except Exception:
            logger.exception("PDF parsing error for %s", filename)
            text = extraction_failed_notice(filename, size)
            degraded = True

        self.store.put(filename, text)
        logger.info("Ingested %s (%d bytes, degraded=%s)", filename, size, degraded)
        return IngestionResult(filename=filename, size=size, text=text, degraded=degraded)
