"""Adapter kinds and the model-to-adapter resolution rule."""
from __future__ import annotations

import logging
from enum import Enum
from typing import Tuple

from ..logging import get_logger, log_event

_logger = get_logger("chat_adapters.adapter")


class AdapterKind(str, Enum):
    """Closed set of backend families.

    Values are the canonical lower-case names used in logs, env var prefixes
    and config file sections.
    """

    OPENAI = "openai"
    OLLAMA = "ollama"
    ANTHROPIC = "anthropic"
    COHERE = "cohere"
    GEMINI = "gemini"

    def __str__(self) -> str:
        return self.value

    @property
    def display_name(self) -> str:
        return _DISPLAY_NAMES[self]

    @classmethod
    def from_model(cls, model: str) -> "AdapterKind":
        """Resolve the adapter that owns ``model``.

        Prefixes are tested in :data:`MODEL_PREFIXES` order and the first
        match wins. Anything else, including ``""``, falls back to
        :attr:`DEFAULT_ADAPTER_KIND`. Never raises.
        """
        name = model if isinstance(model, str) else str(model)
        for prefix, kind in MODEL_PREFIXES:
            if name.startswith(prefix):
                return kind
        log_event(
            _logger,
            "adapter.kind.fallback",
            level=logging.DEBUG,
            model=name[:200],
            adapter_kind=DEFAULT_ADAPTER_KIND.value,
        )
        return DEFAULT_ADAPTER_KIND


_DISPLAY_NAMES = {
    AdapterKind.OPENAI: "OpenAI",
    AdapterKind.OLLAMA: "Ollama",
    AdapterKind.ANTHROPIC: "Anthropic",
    AdapterKind.COHERE: "Cohere",
    AdapterKind.GEMINI: "Gemini",
}

# Checked in order; a new entry must not shadow or be shadowed by an existing one.
MODEL_PREFIXES: Tuple[Tuple[str, AdapterKind], ...] = (
    ("gpt", AdapterKind.OPENAI),
    ("claude", AdapterKind.ANTHROPIC),
    ("command", AdapterKind.COHERE),
    ("gemini", AdapterKind.GEMINI),
)

DEFAULT_ADAPTER_KIND = AdapterKind.OLLAMA


__all__ = ["AdapterKind", "MODEL_PREFIXES", "DEFAULT_ADAPTER_KIND"]
