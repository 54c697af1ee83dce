"""Client facade: resolve the adapter for a model and run one chat call.

The facade owns no translation logic. It picks the adapter kind from the
model name, asks :class:`AdapterDispatcher` for the wire request, executes it
through :class:`WebClient` and hands the raw result back to the same adapter.
Adapter errors and ``httpx`` transport errors propagate unchanged.
"""
from __future__ import annotations

import logging
import time
from typing import Optional

from .adapter import AdapterDispatcher, AdapterKind, ServiceType
from .chat import ChatRequest, ChatResponse, ChatStreamResponse
from .config import ConfigSet
from .logging import LogContext, get_logger, log_event
from .webc import WebClient


class Client:
    """Uniform chat entry point over every supported provider.

    Parameters
    ----------
    config_set:
        Credential wiring passed to every adapter call. Defaults to an empty
        :class:`ConfigSet` (environment and config file only).
    web_client:
        Transport to use. When omitted the client creates and owns one, and
        :meth:`close` releases it.
    """

    def __init__(self, config_set: Optional[ConfigSet] = None, web_client: Optional[WebClient] = None) -> None:
        self.config_set = config_set or ConfigSet()
        self._owns_web_client = web_client is None
        self.web_client = web_client or WebClient()
        self._logger = get_logger("chat_adapters.client")

    def resolve_adapter_kind(self, model: str) -> AdapterKind:
        return AdapterKind.from_model(model)

    def exec_chat(self, model: str, chat_req: ChatRequest) -> ChatResponse:
        """Send ``chat_req`` to the provider owning ``model`` and wait for the reply."""
        kind = self.resolve_adapter_kind(model)
        ctx = LogContext(adapter_kind=kind.value, model=model, service_type=ServiceType.CHAT.value)
        data = AdapterDispatcher.to_web_request_data(kind, self.config_set, model, chat_req, ServiceType.CHAT)
        started = time.perf_counter()
        web_response = self.web_client.do_post(data)
        log_event(
            self._logger,
            "chat.response",
            ctx,
            level=logging.DEBUG,
            status=web_response.status,
            latency_ms=round((time.perf_counter() - started) * 1000, 1),
        )
        return AdapterDispatcher.to_chat_response(kind, web_response)

    def exec_chat_stream(self, model: str, chat_req: ChatRequest) -> ChatStreamResponse:
        """Prepare a streaming call; the request is sent when the stream is iterated."""
        kind = self.resolve_adapter_kind(model)
        data = AdapterDispatcher.to_web_request_data(kind, self.config_set, model, chat_req, ServiceType.CHAT_STREAM)
        pending = self.web_client.pending_post(data)
        return AdapterDispatcher.to_chat_stream(kind, pending)

    def close(self) -> None:
        if self._owns_web_client:
            self.web_client.close()

    def __enter__(self) -> "Client":
        return self

    def __exit__(self, *exc_info) -> None:
        self.close()


__all__ = ["Client"]
