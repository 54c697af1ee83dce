from __future__ import annotations

import pytest

from chat_adapters.adapter import DEFAULT_ADAPTER_KIND, MODEL_PREFIXES, AdapterKind


@pytest.mark.parametrize(
    "model,expected",
    [
        ("gpt-4o", AdapterKind.OPENAI),
        ("gpt-3.5-turbo", AdapterKind.OPENAI),
        ("claude-3-haiku-20240307", AdapterKind.ANTHROPIC),
        ("command-r-plus", AdapterKind.COHERE),
        ("command-light", AdapterKind.COHERE),
        ("gemini-1.5-flash", AdapterKind.GEMINI),
        ("llama3", AdapterKind.OLLAMA),
        ("mixtral:8x7b", AdapterKind.OLLAMA),
    ],
)
def test_from_model_prefixes(model, expected):
    assert AdapterKind.from_model(model) is expected  # nosec B101


def test_from_model_is_case_sensitive_and_prefix_only():
    assert AdapterKind.from_model("GPT-4") is AdapterKind.OLLAMA  # nosec B101
    assert AdapterKind.from_model("my-gpt-4") is AdapterKind.OLLAMA  # nosec B101
    assert AdapterKind.from_model("claud") is AdapterKind.OLLAMA  # nosec B101


def test_from_model_total_on_edge_inputs():
    assert AdapterKind.from_model("") is DEFAULT_ADAPTER_KIND  # nosec B101
    assert AdapterKind.from_model("  gpt-4") is AdapterKind.OLLAMA  # nosec B101
    assert AdapterKind.from_model("模型-gpt") is AdapterKind.OLLAMA  # nosec B101
    assert AdapterKind.from_model("gpt" + "x" * 100_000) is AdapterKind.OPENAI  # nosec B101


def test_bare_prefix_matches():
    for prefix, kind in MODEL_PREFIXES:
        assert AdapterKind.from_model(prefix) is kind  # nosec B101


def test_no_prefix_shadows_another():
    prefixes = [p for p, _ in MODEL_PREFIXES]
    for a in prefixes:
        for b in prefixes:
            if a != b:
                assert not b.startswith(a)  # nosec B101


def test_fallback_is_logged_at_debug(log_events):
    AdapterKind.from_model("mistral")
    fallback = [e for e in log_events.events() if e["event"] == "adapter.kind.fallback"]
    assert fallback and fallback[-1]["adapter_kind"] == "ollama"  # nosec B101


def test_kind_values_and_names():
    assert {k.value for k in AdapterKind} == {"openai", "ollama", "anthropic", "cohere", "gemini"}  # nosec B101
    assert str(AdapterKind.GEMINI) == "gemini"  # nosec B101
    assert AdapterKind("cohere") is AdapterKind.COHERE  # nosec B101
    assert AdapterKind.OPENAI.display_name == "OpenAI"  # nosec B101
    assert len({AdapterKind.OPENAI, AdapterKind("openai")}) == 1  # nosec B101
