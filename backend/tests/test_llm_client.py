import asyncio

import pytest

from wordsmith.errors import UpstreamError
from wordsmith.services.llm_client import INVALID_KEY_MESSAGE, GeminiCompletionClient


class _Models:
    def __init__(self, outcome):
        self.outcome = outcome
        self.calls = []

    async def generate_content(self, *, model, contents):
        self.calls.append((model, contents))
        if isinstance(self.outcome, Exception):
            raise self.outcome
        return self.outcome


class _Response:
    def __init__(self, text):
        self.text = text


class _StubGenaiClient:
    def __init__(self, outcome):
        self.aio = type("Aio", (), {})()
        self.aio.models = _Models(outcome)


def _client(outcome):
    client = GeminiCompletionClient(api_key="key", model="gemini-test")
    client._client = _StubGenaiClient(outcome)
    return client


def test_generate_returns_response_text():
    client = _client(_Response("happy | adjective"))
    assert asyncio.run(client.generate("Define happy")) == "happy | adjective"
    assert client._client.aio.models.calls == [("gemini-test", "Define happy")]


def test_missing_text_becomes_empty_string():
    assert asyncio.run(_client(_Response(None)).generate("x")) == ""


def test_sdk_errors_are_wrapped_verbatim():
    with pytest.raises(UpstreamError, match="429 RESOURCE_EXHAUSTED"):
        asyncio.run(_client(RuntimeError("429 RESOURCE_EXHAUSTED")).generate("x"))


def test_invalid_key_message():
    with pytest.raises(UpstreamError) as excinfo:
        asyncio.run(_client(RuntimeError("400 API_KEY_INVALID")).generate("x"))
    assert str(excinfo.value) == INVALID_KEY_MESSAGE


def test_missing_key_fails_on_first_request():
    client = GeminiCompletionClient(api_key=None, model="gemini-test")
    with pytest.raises(UpstreamError):
        asyncio.run(client.generate("x"))
