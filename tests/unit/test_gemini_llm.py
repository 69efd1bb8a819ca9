"""Tests for GeminiLLMAdapter with the SDK client mocked."""

from unittest.mock import MagicMock

import pytest

from webdoc_chat.adapters.llm.gemini_llm import GeminiLLMAdapter
from webdoc_chat.domain.exceptions import (
    LLMConnectionError,
    LLMGenerationError,
    LLMRateLimitError,
    MissingAPIKeyError,
)
from webdoc_chat.domain.models import Message, Role

pytestmark = pytest.mark.unit

CONVERSATION = [
    Message(role=Role.USER, content="hi"),
    Message(role=Role.ASSISTANT, content="hello"),
    Message(role=Role.SYSTEM, content="be brief"),
    Message(role=Role.USER, content="what is gravity"),
]


@pytest.fixture
def adapter():
    adapter = GeminiLLMAdapter(api_key="test-key", model="gemini-test")
    adapter._client = MagicMock()
    return adapter


def set_response(adapter, text="Answer", candidates=True):
    response = MagicMock()
    response.candidates = [MagicMock()] if candidates else []
    response.text = text
    adapter._client.models.generate_content.return_value = response


class TestComplete:
    def test_request_shape(self, adapter):
        set_response(adapter, "Gravity is a force.")

        text = adapter.complete(CONVERSATION, system_prompt="SYSTEM", max_tokens=1000)

        assert text == "Gravity is a force."
        kwargs = adapter._client.models.generate_content.call_args.kwargs
        assert kwargs["model"] == "gemini-test"
        contents = kwargs["contents"]
        assert [c.role for c in contents] == ["user", "model", "user"]
        assert contents[-1].parts[0].text == "what is gravity"
        config = kwargs["config"]
        assert config.system_instruction == "SYSTEM\n\nbe brief"
        assert config.temperature == 0.7
        assert config.max_output_tokens == 1000

    def test_no_candidates_returns_empty(self, adapter):
        set_response(adapter, candidates=False)

        assert adapter.complete(CONVERSATION, system_prompt="S") == ""

    def test_none_text_returns_empty(self, adapter):
        set_response(adapter, text=None)

        assert adapter.complete(CONVERSATION, system_prompt="S") == ""

    def test_bom_is_stripped(self, adapter):
        set_response(adapter, "\ufeffHello")

        assert adapter.complete(CONVERSATION, system_prompt="S") == "Hello"


class TestErrors:
    def test_quota_error(self, adapter):
        error = RuntimeError("429 RESOURCE_EXHAUSTED: quota exceeded")
        adapter._client.models.generate_content.side_effect = error

        with pytest.raises(LLMRateLimitError) as exc_info:
            adapter.complete(CONVERSATION, system_prompt="S")

        assert exc_info.value.cause is error

    def test_invalid_key_error(self, adapter):
        adapter._client.models.generate_content.side_effect = RuntimeError("API key not valid")

        with pytest.raises(LLMConnectionError):
            adapter.complete(CONVERSATION, system_prompt="S")

    def test_other_errors(self, adapter):
        adapter._client.models.generate_content.side_effect = RuntimeError("boom")

        with pytest.raises(LLMGenerationError) as exc_info:
            adapter.complete(CONVERSATION, system_prompt="S")

        assert exc_info.value.extra_context == {"model": "gemini-test"}

    def test_missing_key(self):
        with pytest.raises(MissingAPIKeyError):
            GeminiLLMAdapter(api_key="").complete(CONVERSATION, system_prompt="S")
