from __future__ import annotations

import pytest

from chat_adapters.adapter import Adapter, AdapterDispatcher, AdapterKind, ServiceType
from chat_adapters.adapter.gemini import GeminiAdapter
from chat_adapters.adapter.ollama.adapter import OllamaAdapter


def test_every_kind_has_an_adapter():
    assert set(AdapterDispatcher.supported()) == set(AdapterKind)  # nosec B101
    for kind in AdapterKind:
        assert issubclass(AdapterDispatcher.adapter_for(kind), Adapter)  # nosec B101


def test_adapter_for_accepts_names():
    assert AdapterDispatcher.adapter_for("gemini") is GeminiAdapter  # nosec B101
    assert AdapterDispatcher.adapter_for(AdapterKind.from_model("phi3")) is OllamaAdapter  # nosec B101
    with pytest.raises(ValueError):
        AdapterDispatcher.adapter_for("bedrock")


@pytest.mark.parametrize(
    "kind,url",
    [
        (AdapterKind.OPENAI, "https://api.openai.com/v1/chat/completions"),
        (AdapterKind.OLLAMA, "http://localhost:11434/v1/chat/completions"),
        (AdapterKind.ANTHROPIC, "https://api.anthropic.com/v1/messages"),
        (AdapterKind.COHERE, "https://api.cohere.com/v1/chat"),
        (AdapterKind.GEMINI, "https://generativelanguage.googleapis.com/v1beta/models/"),
    ],
)
def test_service_urls(kind, url):
    for service_type in ServiceType:
        assert AdapterDispatcher.get_service_url(kind, service_type) == url  # nosec B101


def test_contract_is_abstract():
    with pytest.raises(TypeError):
        Adapter()


@pytest.mark.parametrize("service_type", list(ServiceType))
@pytest.mark.parametrize("kind", list(AdapterKind))
def test_request_building_is_deterministic(kind, service_type, all_keys, chat_req):
    first = AdapterDispatcher.to_web_request_data(kind, all_keys, "some-model", chat_req, service_type)
    second = AdapterDispatcher.to_web_request_data(kind, all_keys, "some-model", chat_req, service_type)
    assert first.url == second.url  # nosec B101
    assert first.headers == second.headers  # nosec B101
    assert first.payload == second.payload  # nosec B101
    assert first.payload is not second.payload  # nosec B101
