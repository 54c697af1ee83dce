"""End-to-end facade tests over ``httpx.MockTransport``."""

from __future__ import annotations

import json

import httpx
import pytest

from chat_adapters import ChatRequest, Client, ProviderError
from chat_adapters.chat import accumulate_events
from chat_adapters.webc import WebClient


def _client(handler, config_set):
    web = WebClient(httpx.Client(transport=httpx.MockTransport(handler)))
    return Client(config_set=config_set, web_client=web)


def test_exec_chat_openai(all_keys):
    seen = []

    def handler(request: httpx.Request) -> httpx.Response:
        seen.append(request)
        return httpx.Response(
            200,
            json={
                "id": "c1",
                "model": "gpt-4o-mini",
                "choices": [{"message": {"role": "assistant", "content": "pong"}}],
                "usage": {"prompt_tokens": 1, "completion_tokens": 1},
            },
        )

    with _client(handler, all_keys) as client:
        resp = client.exec_chat("gpt-4o-mini", ChatRequest.from_user("ping"))

    assert resp.content == "pong"  # nosec B101
    assert resp.usage.total_tokens == 2  # nosec B101
    req = seen[0]
    assert str(req.url) == "https://api.openai.com/v1/chat/completions"  # nosec B101
    assert req.headers["authorization"] == "Bearer sk-openai-123"  # nosec B101
    assert json.loads(req.content)["messages"] == [{"role": "user", "content": "ping"}]  # nosec B101


def test_exec_chat_routes_by_model_prefix(all_keys):
    hosts = []

    def handler(request: httpx.Request) -> httpx.Response:
        hosts.append(request.url.host)
        return httpx.Response(200, json={"content": [{"type": "text", "text": "ok"}]})

    with _client(handler, all_keys) as client:
        assert client.exec_chat("claude-3-5-sonnet", ChatRequest.from_user("hi")).content == "ok"  # nosec B101
    assert hosts == ["api.anthropic.com"]  # nosec B101


def test_exec_chat_provider_error(all_keys):
    def handler(request: httpx.Request) -> httpx.Response:
        return httpx.Response(401, json={"error": {"message": "Incorrect API key"}})

    with _client(handler, all_keys) as client, pytest.raises(ProviderError) as ei:
        client.exec_chat("gpt-4o", ChatRequest.from_user("hi"))
    assert ei.value.status == 401  # nosec B101
    assert ei.value.body == {"error": {"message": "Incorrect API key"}}  # nosec B101


def test_exec_chat_stream_sends_on_iteration(all_keys):
    calls = []
    body = (
        'data: {"choices":[{"delta":{"content":"po"}}]}\n\n'
        'data: {"choices":[{"delta":{"content":"ng"}}]}\n\n'
        'data: {"choices":[],"usage":{"prompt_tokens":1,"completion_tokens":2,"total_tokens":3}}\n\n'
        "data: [DONE]\n\n"
    )

    def handler(request: httpx.Request) -> httpx.Response:
        calls.append(json.loads(request.content))
        return httpx.Response(200, headers={"content-type": "text/event-stream"}, content=body.encode())

    with _client(handler, all_keys) as client:
        stream = client.exec_chat_stream("gpt-4o", ChatRequest.from_user("ping"))
        assert calls == []  # nosec B101
        events = list(stream)

    assert calls[0]["stream"] is True  # nosec B101
    assert [e.kind for e in events] == ["start", "chunk", "chunk", "end"]  # nosec B101
    resp = accumulate_events(events)
    assert resp.content == "pong" and resp.usage.total_tokens == 3  # nosec B101


def test_exec_chat_stream_ollama_without_auth(all_keys):
    body = 'data: {"choices":[{"delta":{"content":"hi"}}]}\n\ndata: [DONE]\n\n'

    def handler(request: httpx.Request) -> httpx.Response:
        assert "authorization" not in request.headers  # nosec B101
        return httpx.Response(200, content=body.encode())

    with _client(handler, all_keys) as client:
        events = list(client.exec_chat_stream("llama3.1", ChatRequest.from_user("hi")))
    assert accumulate_events(events).content == "hi"  # nosec B101


def test_exec_chat_stream_error_status_raised_on_iteration(all_keys):
    def handler(request: httpx.Request) -> httpx.Response:
        return httpx.Response(429, json={"error": {"message": "slow down"}})

    with _client(handler, all_keys) as client:
        stream = client.exec_chat_stream("gemini-1.5-pro", ChatRequest.from_user("hi"))
        with pytest.raises(ProviderError) as ei:
            list(stream)
    assert ei.value.status == 429  # nosec B101
    assert ei.value.body == {"error": {"message": "slow down"}}  # nosec B101


def test_client_closes_only_owned_transport():
    owned = Client()
    owned.close()
    assert owned.web_client.http_client.is_closed  # nosec B101

    http = httpx.Client()
    shared = Client(web_client=WebClient(http))
    shared.close()
    assert not http.is_closed  # nosec B101
    http.close()
