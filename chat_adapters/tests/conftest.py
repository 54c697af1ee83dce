"""Shared fixtures for the adapter test suite.

Every test runs with credential, base-URL and config-file env vars removed so
results never depend on the developer's shell.
"""

from __future__ import annotations

import json
import logging
from typing import Iterator, List

import pytest

from chat_adapters.chat import ChatMessage, ChatRequest
from chat_adapters.config import ConfigSet, clear_config_cache

_ISOLATED_ENV = (
    "OPENAI_API_KEY",
    "ANTHROPIC_API_KEY",
    "COHERE_API_KEY",
    "CO_API_KEY",
    "GEMINI_API_KEY",
    "GOOGLE_API_KEY",
    "OPENAI_BASE_URL",
    "ANTHROPIC_BASE_URL",
    "COHERE_BASE_URL",
    "GEMINI_BASE_URL",
    "OLLAMA_BASE_URL",
    "CHAT_ADAPTERS_CONFIG_FILE",
)


@pytest.fixture(autouse=True)
def isolated_env(monkeypatch: pytest.MonkeyPatch) -> Iterator[None]:
    for name in _ISOLATED_ENV:
        monkeypatch.delenv(name, raising=False)
    clear_config_cache()
    yield
    clear_config_cache()


@pytest.fixture()
def all_keys() -> ConfigSet:
    """Config set with an explicit key for every keyed adapter."""
    return ConfigSet(
        api_keys={
            "openai": "sk-openai-123",
            "anthropic": "sk-ant-123",
            "cohere": "co-123",
            "gemini": "gm-123",
        },
        use_config_file=False,
    )


@pytest.fixture()
def chat_req() -> ChatRequest:
    return ChatRequest(
        messages=[
            ChatMessage.system("be brief"),
            ChatMessage.user("hi"),
            ChatMessage.assistant("hello"),
            ChatMessage.user("how are you?"),
        ],
        max_tokens=64,
        temperature=0.2,
    )


class _ListHandler(logging.Handler):
    def __init__(self) -> None:
        super().__init__(level=logging.DEBUG)
        self.records: List[logging.LogRecord] = []

    def emit(self, record: logging.LogRecord) -> None:
        self.records.append(record)

    def events(self) -> List[dict]:
        out = []
        for r in self.records:
            try:
                out.append(json.loads(r.getMessage()))
            except ValueError:
                continue
        return out


@pytest.fixture()
def log_events() -> Iterator[_ListHandler]:
    """Capture ``log_event`` payloads from the shared ``chat_adapters`` logger.

    The base logger does not propagate to root, so ``caplog`` cannot see it;
    a handler is attached directly and the level lowered to DEBUG.
    """
    from chat_adapters.logging import get_logger

    logger = get_logger()
    handler = _ListHandler()
    previous = logger.level
    logger.setLevel(logging.DEBUG)
    logger.addHandler(handler)
    try:
        yield handler
    finally:
        logger.removeHandler(handler)
        logger.setLevel(previous)
