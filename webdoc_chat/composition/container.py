"""Composition root wiring adapters to the application services."""

from __future__ import annotations

import logging
from collections.abc import Callable
from functools import lru_cache, partial

from ..adapters.llm.gemini_llm import GeminiLLMAdapter
from ..adapters.pdf.pypdf_extractor import extract_pdf_text
from ..adapters.search.wikipedia_search import WikipediaSearchAdapter
from ..adapters.storage.memory_store import InMemoryDocumentStore
from ..application.services.chat_service import ChatService
from ..application.services.ingest_document import DocumentIngestionService
from ..config import settings
from ..domain.services.context_assembler import ContextAssembler
from ..domain.services.search_trigger import SearchTrigger
from ..domain.services.text_extraction import extract_readable_text

logger = logging.getLogger(__name__)


@lru_cache
def get_document_store() -> InMemoryDocumentStore:
    logger.info("Initializing InMemoryDocumentStore...")
    return InMemoryDocumentStore()


@lru_cache
def get_search() -> WikipediaSearchAdapter:
    logger.info("Initializing WikipediaSearchAdapter...")
    return WikipediaSearchAdapter(
        endpoint=settings.search_endpoint,
        timeout=settings.search_timeout,
        max_results=settings.search_max_results,
        paragraph_limit=settings.search_paragraph_limit,
        min_paragraph_chars=settings.search_min_paragraph_chars,
        excerpt_chars=settings.search_excerpt_chars,
    )


@lru_cache
def get_llm() -> GeminiLLMAdapter | None:
    if not settings.llm_enabled:
        logger.warning("GOOGLE_API_KEY not configured; replies will use the fallback template")
        return None
    logger.info("Initializing GeminiLLMAdapter...")
    return GeminiLLMAdapter(api_key=settings.google_api_key, model=settings.llm_model)


def get_extractor() -> Callable[[bytes], str]:
    if settings.pdf_extractor == "pypdf":
        return extract_pdf_text
    return partial(
        extract_readable_text,
        prefix_bytes=settings.upload_prefix_bytes,
        min_run_chars=settings.upload_min_run_chars,
        max_runs=settings.upload_max_runs,
    )


@lru_cache
def get_chat_service() -> ChatService:
    logger.info("Initializing ChatService...")
    return ChatService(
        trigger=SearchTrigger(),
        search=get_search(),
        assembler=ContextAssembler(),
        store=get_document_store(),
        llm=get_llm(),
        temperature=settings.llm_temperature,
        max_tokens=settings.llm_max_tokens,
        fallback_excerpt_chars=settings.fallback_excerpt_chars,
    )


@lru_cache
def get_ingestion_service() -> DocumentIngestionService:
    logger.info("Initializing DocumentIngestionService...")
    return DocumentIngestionService(
        store=get_document_store(),
        extractor=get_extractor(),
        min_text_chars=settings.upload_min_text_chars,
        max_text_chars=settings.upload_max_text_chars,
    )
