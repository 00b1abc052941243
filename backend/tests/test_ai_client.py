from __future__ import annotations

import httpx
import openai
import pytest

from app.services.ai import client as llm_client
from app.services.ai.error_handler import CONFIGURATION_MESSAGE, handle_ai_error
from app.services.ai.errors import LLMProviderError

_REQUEST = httpx.Request("POST", "https://api.openai.com/v1/chat/completions")


def _status_error(cls, status_code, code=None):
    response = httpx.Response(status_code, request=_REQUEST)
    return cls("provider said no", response=response, body={"code": code} if code else None)


def test_missing_key_is_failed_precondition(monkeypatch) -> None:
    monkeypatch.setattr(llm_client.settings, "openai_api_key", None)

    with pytest.raises(LLMProviderError) as excinfo:
        llm_client.complete_json(None, "hello")

    assert str(excinfo.value).startswith("FAILED_PRECONDITION")
    assert str(handle_ai_error(excinfo.value, "goal suggestions")) == CONFIGURATION_MESSAGE


@pytest.mark.parametrize(
    "exc, prefix",
    [
        (_status_error(openai.AuthenticationError, 401), "FAILED_PRECONDITION"),
        (_status_error(openai.RateLimitError, 429, code="insufficient_quota"), "QUOTA_EXCEEDED"),
        (_status_error(openai.RateLimitError, 429, code="rate_limit_exceeded"), "RATE_LIMIT_EXCEEDED"),
        (openai.APITimeoutError(request=_REQUEST), "NETWORK_ERROR: request timeout"),
        (openai.APIConnectionError(request=_REQUEST), "NETWORK_ERROR: Connection failed"),
    ],
)
def test_provider_errors_get_canonical_prefix(exc, prefix) -> None:
    assert str(llm_client.translate_provider_error(exc)).startswith(prefix)


def test_not_found_mentions_model() -> None:
    translated = llm_client.translate_provider_error(_status_error(openai.NotFoundError, 404))

    assert "model" in str(translated)


def test_complete_json_returns_message_content(monkeypatch) -> None:
    class _Completions:
        def create(self, **kwargs):
            assert kwargs["response_format"] == {"type": "json_object"}
            message = type("Message", (), {"content": '{"tips": []}'})()
            choice = type("Choice", (), {"message": message})()
            return type("Completion", (), {"choices": [choice]})()

    class _Client:
        chat = type("Chat", (), {"completions": _Completions()})()

    monkeypatch.setattr(llm_client, "get_client", lambda: _Client())

    assert llm_client.complete_json("system", "user") == '{"tips": []}'
