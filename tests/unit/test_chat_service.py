"""Tests for ChatService orchestration."""

from unittest.mock import MagicMock

import pytest

from webdoc_chat.application.services.chat_service import ChatService
from webdoc_chat.domain.exceptions import EmptyConversationError, LLMGenerationError
from webdoc_chat.domain.models import Message, ReplySource, Role, SearchStatus
from webdoc_chat.domain.prompts import (
    CREDENTIALS_NOTICE,
    NO_RESPONSE_GENERATED,
    SEARCH_UNAVAILABLE,
)
from webdoc_chat.domain.services.context_assembler import ContextAssembler
from webdoc_chat.domain.services.search_trigger import SearchTrigger

pytestmark = pytest.mark.unit


def user(content: str) -> Message:
    return Message(role=Role.USER, content=content)


@pytest.fixture
def make_service(fake_search, store):
    def factory(llm=None):
        return ChatService(
            trigger=SearchTrigger(),
            search=fake_search,
            assembler=ContextAssembler(),
            store=store,
            llm=llm,
        )

    return factory


class TestFallbackPath:
    def test_no_keyword_skips_search(self, make_service, fake_search):
        reply = make_service().reply([user("Hello there")])

        fake_search.lookup.assert_not_called()
        assert reply.source is ReplySource.FALLBACK
        assert reply.searched is False
        assert reply.search_status is None
        assert 'I received your message: "Hello there"' in reply.text
        assert CREDENTIALS_NOTICE in reply.text

    def test_keyword_runs_lookup(self, make_service, fake_search):
        reply = make_service().reply([user("tell me about gravity")])

        fake_search.lookup.assert_called_once_with("tell me about gravity")
        assert reply.searched is True
        assert reply.search_status is SearchStatus.COMPLETE
        assert reply.text.startswith("Based on the internet search results:\n\n")
        assert "1. Gravity" in reply.text
        assert "I found relevant information from Wikipedia" in reply.text

    def test_documents_are_acknowledged(self, make_service, store):
        store.put("a.pdf", "Alpha")

        reply = make_service().reply([user("Hello there")])

        assert "I also have access to the uploaded PDF document(s)." in reply.text
        assert "I received your message" not in reply.text

    def test_only_last_message_drives_search(self, make_service, fake_search):
        messages = [
            user("what is gravity"),
            Message(role=Role.ASSISTANT, content="It is a force."),
            user("thanks"),
        ]

        reply = make_service().reply(messages)

        fake_search.lookup.assert_not_called()
        assert 'I received your message: "thanks"' in reply.text

    def test_fallback_is_deterministic(self, make_service, store):
        store.put("a.pdf", "Alpha")
        service = make_service()

        first = service.reply([user("what is gravity")])
        second = service.reply([user("what is gravity")])

        assert first.text == second.text

    def test_empty_conversation_rejected(self, make_service):
        with pytest.raises(EmptyConversationError):
            make_service().reply([])


class TestModelPath:
    def test_llm_receives_conversation_and_context(self, make_service, store):
        store.put("a.pdf", "Alpha document")
        llm = MagicMock()
        llm.complete.return_value = "Gravity bends spacetime."
        messages = [user("what is gravity")]

        reply = make_service(llm=llm).reply(messages)

        assert reply.text == "Gravity bends spacetime."
        assert reply.source is ReplySource.MODEL
        args, kwargs = llm.complete.call_args
        assert list(args[0]) == messages
        assert "Internet Search Results:" in kwargs["system_prompt"]
        assert "Alpha document" in kwargs["system_prompt"]
        assert kwargs["temperature"] == 0.7
        assert kwargs["max_tokens"] == 1000

    def test_empty_completion(self, make_service):
        llm = MagicMock()
        llm.complete.return_value = ""

        reply = make_service(llm=llm).reply([user("Hello there")])

        assert reply.text == NO_RESPONSE_GENERATED
        assert reply.source is ReplySource.MODEL

    def test_llm_error_falls_back(self, make_service):
        llm = MagicMock()
        llm.complete.side_effect = LLMGenerationError("backend down")

        reply = make_service(llm=llm).reply([user("Hello there")])

        assert reply.source is ReplySource.FALLBACK
        assert 'I received your message: "Hello there"' in reply.text
        assert CREDENTIALS_NOTICE in reply.text

    def test_unexpected_llm_exception_falls_back(self, make_service):
        llm = MagicMock()
        llm.complete.side_effect = RuntimeError("sdk bug")

        reply = make_service(llm=llm).reply([user("Hello there")])

        assert reply.source is ReplySource.FALLBACK
        assert 'I received your message: "Hello there"' in reply.text


class TestLookupFailures:
    def test_raising_lookup_is_reported_unavailable(self, make_service, fake_search):
        fake_search.lookup.side_effect = RuntimeError("backend exploded")

        reply = make_service().reply([user("what is gravity")])

        assert reply.searched is True
        assert reply.search_status is SearchStatus.UNAVAILABLE
        assert reply.source is ReplySource.FALLBACK
        assert CREDENTIALS_NOTICE in reply.text

    def test_raising_lookup_still_reaches_model(self, make_service, fake_search):
        fake_search.lookup.side_effect = RuntimeError("backend exploded")
        llm = MagicMock()
        llm.complete.return_value = "Answer."

        reply = make_service(llm=llm).reply([user("what is gravity")])

        assert reply.source is ReplySource.MODEL
        assert SEARCH_UNAVAILABLE in llm.complete.call_args.kwargs["system_prompt"]
