"""Single dispatch point from an :class:`AdapterKind` to its adapter.

Routing code never names a concrete adapter: it resolves a kind (usually via
:meth:`AdapterKind.from_model`) and calls the matching operation here. The
mapping is closed and exhaustive over ``AdapterKind``; adding a kind without
registering an adapter fails at import time.
"""
from __future__ import annotations

from typing import Dict, Optional, Tuple, Type

from ..chat import ChatRequest, ChatResponse, ChatStreamResponse
from ..config.config_set import ConfigSet
from ..webc import PendingRequest, WebResponse
from .adapter_base import Adapter
from .adapter_config import AdapterConfig
from .adapter_kind import AdapterKind
from .anthropic import AnthropicAdapter
from .cohere import CohereAdapter
from .gemini import GeminiAdapter
from .ollama import OllamaAdapter
from .openai import OpenAIAdapter
from .service_type import ServiceType
from .web_request_data import WebRequestData


class AdapterDispatcher:
    """Forward each contract operation to the adapter registered for ``kind``."""

    _ADAPTERS: Dict[AdapterKind, Type[Adapter]] = {
        AdapterKind.OPENAI: OpenAIAdapter,
        AdapterKind.OLLAMA: OllamaAdapter,
        AdapterKind.ANTHROPIC: AnthropicAdapter,
        AdapterKind.COHERE: CohereAdapter,
        AdapterKind.GEMINI: GeminiAdapter,
    }

    @classmethod
    def adapter_for(cls, kind: AdapterKind) -> Type[Adapter]:
        """Return the adapter class for ``kind``.

        Strings naming a kind (``"openai"``) are accepted; anything else
        raises ``ValueError`` from the enum lookup.
        """
        return cls._ADAPTERS[AdapterKind(kind)]

    @classmethod
    def supported(cls) -> Tuple[AdapterKind, ...]:
        return tuple(cls._ADAPTERS)

    @classmethod
    def default_adapter_config(cls, kind: AdapterKind) -> AdapterConfig:
        return cls.adapter_for(kind).default_adapter_config(AdapterKind(kind))

    @classmethod
    def get_service_url(cls, kind: AdapterKind, service_type: ServiceType) -> str:
        return cls.adapter_for(kind).get_service_url(AdapterKind(kind), service_type)

    @classmethod
    def get_api_key(cls, kind: AdapterKind, config_set: Optional[ConfigSet] = None) -> str:
        return cls.adapter_for(kind).get_api_key(AdapterKind(kind), config_set)

    @classmethod
    def to_web_request_data(
        cls,
        kind: AdapterKind,
        config_set: Optional[ConfigSet],
        model: str,
        chat_req: ChatRequest,
        service_type: ServiceType,
    ) -> WebRequestData:
        return cls.adapter_for(kind).to_web_request_data(AdapterKind(kind), config_set, model, chat_req, service_type)

    @classmethod
    def to_chat_response(cls, kind: AdapterKind, web_response: WebResponse) -> ChatResponse:
        return cls.adapter_for(kind).to_chat_response(AdapterKind(kind), web_response)

    @classmethod
    def to_chat_stream(cls, kind: AdapterKind, pending_request: PendingRequest) -> ChatStreamResponse:
        return cls.adapter_for(kind).to_chat_stream(AdapterKind(kind), pending_request)


_missing = set(AdapterKind) - set(AdapterDispatcher._ADAPTERS)
if _missing:  # pragma: no cover - guards future enum additions
    raise RuntimeError(f"no adapter registered for: {sorted(k.value for k in _missing)}")
del _missing


__all__ = ["AdapterDispatcher"]
