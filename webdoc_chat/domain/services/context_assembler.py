"""Merge search results and stored documents into system instructions."""

from __future__ import annotations

from collections.abc import Iterable

from ..models import AssembledContext, DocumentRecord
from ..prompts import (
    DOCUMENT_BLOCK_HEADER,
    DOCUMENT_SEPARATOR,
    SEARCH_SECTION_TEMPLATE,
    SYSTEM_PROMPT_TEMPLATE,
)


def build_document_block(documents: Iterable[DocumentRecord]) -> str | None:
    """Join every stored document's text under one header, or None if there are none."""
    texts = [record.text for record in documents]
    if not texts:
        return None
    return DOCUMENT_BLOCK_HEADER + DOCUMENT_SEPARATOR.join(texts)


class ContextAssembler:
    """Build the system prompt from the optional search block and stored documents."""

    def assemble(
        self,
        search_block: str | None,
        documents: Iterable[DocumentRecord],
    ) -> AssembledContext:
        search_block = search_block or None
        document_block = build_document_block(documents)

        search_section = (
            SEARCH_SECTION_TEMPLATE.format(search_block=search_block) if search_block else ""
        )
        document_section = f"\n\n{document_block}" if document_block else ""

        system_prompt = SYSTEM_PROMPT_TEMPLATE.format(
            search_section=search_section,
            document_section=document_section,
        )
        return AssembledContext(
            system_prompt=system_prompt,
            search_block=search_block,
            document_block=document_block,
        )
