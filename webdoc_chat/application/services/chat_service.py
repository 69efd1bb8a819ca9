"""Use-case service answering a chat conversation."""

from __future__ import annotations

import logging
from collections.abc import Sequence

from ...domain.exceptions import EmptyConversationError, WebDocChatError
from ...domain.models import (
    AssembledContext,
    ChatReply,
    Message,
    ReplySource,
    SearchOutcome,
    SearchStatus,
)
from ...domain.prompts import NO_RESPONSE_GENERATED, SEARCH_UNAVAILABLE
from ...domain.services.context_assembler import ContextAssembler
from ...domain.services.fallback import build_fallback_reply
from ...domain.services.search_trigger import SearchTrigger
from ...ports.document_store import DocumentStorePort
from ...ports.llm import LLMPort
from ...ports.search import SearchPort

logger = logging.getLogger(__name__)


class ChatService:
    """Orchestrate search triggering, context assembly and completion.

    With no ``llm`` configured every reply comes from the deterministic
    fallback template.
    """

    def __init__(
        self,
        trigger: SearchTrigger,
        search: SearchPort,
        assembler: ContextAssembler,
        store: DocumentStorePort,
        llm: LLMPort | None = None,
        temperature: float = 0.7,
        max_tokens: int = 1000,
        fallback_excerpt_chars: int = 800,
    ) -> None:
        self.trigger = trigger
        self.search = search
        self.assembler = assembler
        self.store = store
        self.llm = llm
        self.temperature = temperature
        self.max_tokens = max_tokens
        self.fallback_excerpt_chars = fallback_excerpt_chars

    def build_context(self, query: str) -> tuple[AssembledContext, SearchOutcome | None]:
        """Look up the query if it looks like it needs one and merge in stored documents."""
        outcome: SearchOutcome | None = None
        if self.trigger.should_search(query):
            try:
                outcome = self.search.lookup(query)
            except Exception:
                logger.warning("Web lookup for %r raised", query, exc_info=True)
                outcome = SearchOutcome(status=SearchStatus.UNAVAILABLE, text=SEARCH_UNAVAILABLE)
            logger.info("Web lookup for %r finished: %s", query, outcome.status.value)

        context = self.assembler.assemble(
            outcome.text if outcome else None,
            self.store.records(),
        )
        return context, outcome

    def reply(self, messages: Sequence[Message]) -> ChatReply:
        """Produce the assistant's reply to the last message of a conversation.

        Raises:
            EmptyConversationError: If ``messages`` is empty.
        """
        if not messages:
            raise EmptyConversationError("Invalid request format")

        query = messages[-1].content
        context, outcome = self.build_context(query)

        text, source = self._complete(messages, query, context)
        return ChatReply(
            text=text,
            source=source,
            searched=outcome is not None,
            search_status=outcome.status if outcome else None,
        )

    def _complete(
        self,
        messages: Sequence[Message],
        query: str,
        context: AssembledContext,
    ) -> tuple[str, ReplySource]:
        if self.llm is None:
            return self._fallback(query, context), ReplySource.FALLBACK

        try:
            text = self.llm.complete(
                messages,
                system_prompt=context.system_prompt,
                temperature=self.temperature,
                max_tokens=self.max_tokens,
            )
        except WebDocChatError as e:
            logger.warning("LLM error (%s), using fallback reply: %s", e.error_code, e.cause or e)
            return self._fallback(query, context), ReplySource.FALLBACK
        except Exception:
            logger.warning("Unexpected LLM failure, using fallback reply", exc_info=True)
            return self._fallback(query, context), ReplySource.FALLBACK

        return text or NO_RESPONSE_GENERATED, ReplySource.MODEL

    def _fallback(self, query: str, context: AssembledContext) -> str:
        return build_fallback_reply(query, context, excerpt_chars=self.fallback_excerpt_chars)
