from __future__ import annotations

import pytest

from chat_adapters.adapter import AdapterDispatcher, AdapterKind, ServiceType
from chat_adapters.chat import ChatMessage, ChatRequest
from chat_adapters.errors import MalformedRequestError, MissingCredentialError, ParseError, ProviderError
from chat_adapters.webc import WebResponse

GEMINI = AdapterKind.GEMINI

REPLY = {
    "candidates": [
        {
            "content": {"role": "model", "parts": [{"text": "I am "}, {"text": "fine."}]},
            "finishReason": "STOP",
        }
    ],
    "usageMetadata": {"promptTokenCount": 7, "candidatesTokenCount": 3, "totalTokenCount": 10},
    "modelVersion": "gemini-1.5-flash-002",
    "responseId": "resp-9",
}


def test_request_shape(all_keys, chat_req):
    data = AdapterDispatcher.to_web_request_data(GEMINI, all_keys, "gemini-1.5-flash", chat_req, ServiceType.CHAT)
    assert data.url == (  # nosec B101
        "https://generativelanguage.googleapis.com/v1beta/models/gemini-1.5-flash:generateContent"
    )
    assert data.header("x-goog-api-key") == "gm-123"  # nosec B101
    assert "key=" not in data.url  # nosec B101
    assert data.payload == {  # nosec B101
        "contents": [
            {"role": "user", "parts": [{"text": "hi"}]},
            {"role": "model", "parts": [{"text": "hello"}]},
            {"role": "user", "parts": [{"text": "how are you?"}]},
        ],
        "systemInstruction": {"parts": [{"text": "be brief"}]},
        "generationConfig": {"maxOutputTokens": 64, "temperature": 0.2},
    }


def test_stream_url_and_prefixed_model(all_keys):
    req = ChatRequest.from_user("hi")
    data = AdapterDispatcher.to_web_request_data(GEMINI, all_keys, "models/gemini-pro", req, ServiceType.CHAT_STREAM)
    assert data.url.endswith("/models/gemini-pro:streamGenerateContent?alt=sse")  # nosec B101
    assert "generationConfig" not in data.payload  # nosec B101


def test_model_id_is_url_escaped(all_keys):
    req = ChatRequest.from_user("hi")
    data = AdapterDispatcher.to_web_request_data(GEMINI, all_keys, "gemini-pro?alt=x#frag/../y", req, ServiceType.CHAT)
    root = "https://generativelanguage.googleapis.com/v1beta/models/"
    assert data.url == root + "gemini-pro%3Falt%3Dx%23frag%2F..%2Fy:generateContent"  # nosec B101


def test_service_url_is_models_root():
    url = AdapterDispatcher.get_service_url(GEMINI, ServiceType.CHAT)
    assert url == "https://generativelanguage.googleapis.com/v1beta/models/"  # nosec B101


def test_google_api_key_alias(monkeypatch):
    monkeypatch.setenv("GOOGLE_API_KEY", "g-alias")
    assert AdapterDispatcher.get_api_key(GEMINI, None) == "g-alias"  # nosec B101


def test_missing_key_lists_aliases():
    with pytest.raises(MissingCredentialError) as ei:
        AdapterDispatcher.get_api_key(GEMINI, None)
    assert ei.value.env_names == ("GEMINI_API_KEY", "GOOGLE_API_KEY")  # nosec B101


def test_rejections(all_keys):
    with pytest.raises(MalformedRequestError):
        AdapterDispatcher.to_web_request_data(
            GEMINI, all_keys, "gemini-pro", ChatRequest(messages=[ChatMessage.system("x")]), ServiceType.CHAT
        )
    with pytest.raises(MalformedRequestError):
        AdapterDispatcher.to_web_request_data(
            GEMINI,
            all_keys,
            "gemini-pro",
            ChatRequest.from_user("hi").append_message(ChatMessage.tool("r", tool_call_id="c")),
            ServiceType.CHAT,
        )


def test_chat_response():
    resp = AdapterDispatcher.to_chat_response(GEMINI, WebResponse(status=200, body=REPLY))
    assert resp.content == "I am fine."  # nosec B101
    assert resp.model_name == "gemini-1.5-flash-002"  # nosec B101
    assert resp.response_id == "resp-9"  # nosec B101
    assert resp.usage.total_tokens == 10  # nosec B101


def test_blocked_prompt_has_no_content():
    body = {"promptFeedback": {"blockReason": "SAFETY"}}
    resp = AdapterDispatcher.to_chat_response(GEMINI, WebResponse(status=200, body=body))
    assert resp.content is None  # nosec B101


def test_errors():
    err = {"error": {"code": 400, "message": "API key not valid", "status": "INVALID_ARGUMENT"}}
    with pytest.raises(ProviderError) as ei:
        AdapterDispatcher.to_chat_response(GEMINI, WebResponse(status=400, body=err))
    assert ei.value.body == err  # nosec B101
    with pytest.raises(ParseError):
        AdapterDispatcher.to_chat_response(GEMINI, WebResponse(status=200, body={}))
