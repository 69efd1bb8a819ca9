"""
Pytest configuration and shared fixtures.
"""

from unittest.mock import MagicMock

import pytest

from webdoc_chat.adapters.storage.memory_store import InMemoryDocumentStore
from webdoc_chat.domain.models import SearchOutcome, SearchResult, SearchStatus


def pytest_configure(config):
    """Configure pytest markers."""
    config.addinivalue_line("markers", "unit: Unit tests (no external dependencies)")
    config.addinivalue_line("markers", "integration: API tests through the FastAPI test client")


@pytest.fixture
def store():
    """Fresh, empty document store."""
    return InMemoryDocumentStore()


@pytest.fixture
def search_outcome():
    """A completed Wikipedia lookup about gravity."""
    return SearchOutcome(
        status=SearchStatus.COMPLETE,
        text=(
            "Search results from Wikipedia:\n\n"
            "1. Gravity\nFundamental interaction\nURL: https://en.wikipedia.org/wiki/Gravity\n\n"
            "\nDetailed content from Gravity:\n"
            "In physics, gravity is a fundamental interaction which causes mutual attraction."
        ),
        results=[
            SearchResult(
                title="Gravity",
                description="Fundamental interaction",
                url="https://en.wikipedia.org/wiki/Gravity",
            )
        ],
        excerpt="In physics, gravity is a fundamental interaction which causes mutual attraction.",
    )


@pytest.fixture
def fake_search(search_outcome):
    """Search port double that never touches the network."""
    mock = MagicMock()
    mock.lookup.return_value = search_outcome
    return mock


@pytest.fixture
def sample_pdf_bytes():
    """Bytes shaped like an uncompressed PDF with one readable text run."""
    return (
        b"%PDF-1.4\n1 0 obj\n<< /Type /Catalog >>\nendobj\n"
        b"BT (The quick brown fox jumps over the lazy dog near the river bank.) Tj ET\n"
        b"%%EOF\n"
    )
