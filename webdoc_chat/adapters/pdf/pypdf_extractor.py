"""Page-text extraction backed by pypdf."""

from __future__ import annotations

import io

from pypdf import PdfReader
from pypdf.errors import PdfReadError

from ...common.utils import collapse_whitespace
from ...domain.exceptions import TextExtractionError


def extract_pdf_text(data: bytes) -> str:
    """Extract and whitespace-collapse the text of every page.

    Pages without a text layer contribute nothing.

    Raises:
        TextExtractionError: If the bytes are not a readable PDF.
    """
    try:
        reader = PdfReader(io.BytesIO(data))
        text_parts = []
        for page in reader.pages:
            text = page.extract_text()
            if text:
                text_parts.append(text)
    except (PdfReadError, ValueError, OSError) as e:
        raise TextExtractionError("pypdf could not read the document", cause=e) from e
    return collapse_whitespace(" ".join(text_parts))
