from collections.abc import Iterator
from unittest.mock import MagicMock, patch

import httpx
import openai
import pytest

from app.enrichment.exceptions import (
    GenerativeModelError,
    GenerativeModelNetworkError,
    GenerativeModelSafetyError,
)
from app.enrichment.openai_client_adapter import OpenAIModelAdapter

_REQUEST = httpx.Request("POST", "https://api.openai.com/v1/chat/completions")


def _response(content: str | None, finish_reason: str = "stop", refusal: str | None = None):
    choice = MagicMock()
    choice.finish_reason = finish_reason
    choice.message.content = content
    choice.message.refusal = refusal
    response = MagicMock()
    response.choices = [choice]
    return response


@pytest.fixture
def client() -> Iterator[MagicMock]:
    with patch("app.enrichment.openai_client_adapter.openai.OpenAI") as factory:
        yield factory.return_value


def _adapter() -> OpenAIModelAdapter:
    return OpenAIModelAdapter(api_key="key", model="gpt-4o-mini", timeout_seconds=30)


class TestOpenAIModelAdapter:
    def test_client_is_built_without_retries(self) -> None:
        with patch("app.enrichment.openai_client_adapter.openai.OpenAI") as factory:
            OpenAIModelAdapter(
                api_key="key",
                model="m",
                timeout_seconds=12,
                base_url="https://openrouter.ai/api/v1",
            )
        factory.assert_called_once_with(
            api_key="key",
            timeout=12,
            base_url="https://openrouter.ai/api/v1",
            max_retries=0,
        )

    def test_returns_message_content(self, client: MagicMock) -> None:
        client.chat.completions.create.return_value = _response('{"summary":"S"}')
        assert _adapter().complete("prompt") == '{"summary":"S"}'

    def test_sends_system_and_user_messages(self, client: MagicMock) -> None:
        client.chat.completions.create.return_value = _response("ok")
        _adapter().complete("prompt")

        kwargs = client.chat.completions.create.call_args.kwargs
        assert kwargs["model"] == "gpt-4o-mini"
        assert kwargs["temperature"] == 0.2
        assert kwargs["messages"][0]["role"] == "system"
        assert kwargs["messages"][1] == {"role": "user", "content": "prompt"}

    def test_connection_error(self, client: MagicMock) -> None:
        client.chat.completions.create.side_effect = openai.APIConnectionError(
            request=_REQUEST
        )
        with pytest.raises(GenerativeModelNetworkError, match="network error"):
            _adapter().complete("prompt")

    def test_timeout(self, client: MagicMock) -> None:
        client.chat.completions.create.side_effect = openai.APITimeoutError(request=_REQUEST)
        with pytest.raises(GenerativeModelNetworkError):
            _adapter().complete("prompt")

    def test_api_error(self, client: MagicMock) -> None:
        client.chat.completions.create.side_effect = openai.APIError(
            "bad request", _REQUEST, body=None
        )
        with pytest.raises(GenerativeModelNetworkError, match="API error"):
            _adapter().complete("prompt")

    def test_no_choices(self, client: MagicMock) -> None:
        response = MagicMock()
        response.choices = []
        client.chat.completions.create.return_value = response
        with pytest.raises(GenerativeModelError, match="no choices"):
            _adapter().complete("prompt")

    def test_empty_content(self, client: MagicMock) -> None:
        client.chat.completions.create.return_value = _response(None)
        with pytest.raises(GenerativeModelError, match="empty response"):
            _adapter().complete("prompt")

    def test_content_filter(self, client: MagicMock) -> None:
        client.chat.completions.create.return_value = _response(
            None, finish_reason="content_filter"
        )
        with pytest.raises(GenerativeModelSafetyError, match="^SAFETY"):
            _adapter().complete("prompt")

    def test_refusal(self, client: MagicMock) -> None:
        client.chat.completions.create.return_value = _response(None, refusal="I can't")
        with pytest.raises(GenerativeModelSafetyError, match="refused"):
            _adapter().complete("prompt")
