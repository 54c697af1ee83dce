"""The adapter contract every provider backend implements.

Adapters are stateless: every operation is a classmethod taking the
:class:`AdapterKind`, so one implementation can serve several kinds (Ollama
reuses the OpenAI wire format). Routing code stays provider-agnostic and goes
through ``AdapterDispatcher``; each subclass owns its own translation rules.

Contract summary
----------------
- ``default_adapter_config``: memoized, computed once per (adapter, kind) per
  process.
- ``get_service_url``: pure URL construction.
- ``get_api_key``: default delegates to the credential resolver, or returns
  ``""`` when the config sets ``requires_api_key=False``.
- ``to_web_request_data``: uniform request -> wire request.
- ``to_chat_response``: raw response -> uniform response.
- ``to_chat_stream``: attach stream decoding to an unsent request.
"""
from __future__ import annotations

import logging
from abc import ABC, abstractmethod
from typing import Callable, Iterable, Iterator, Optional

from ..chat import ChatRequest, ChatResponse, ChatStream, ChatStreamEvent, ChatStreamResponse
from ..config.config_set import ConfigSet
from ..config.resolver import resolve_api_key
from ..errors import ProviderError, StreamSetupError
from ..logging import LogContext, get_logger, log_event
from ..webc import PendingRequest, WebResponse, decode_body
from .adapter_config import DEFAULT_CONFIGS, AdapterConfig
from .adapter_kind import AdapterKind
from .service_type import ServiceType
from .web_request_data import WebRequestData

StreamDecoder = Callable[[Iterable[str]], Iterator[ChatStreamEvent]]

_logger = get_logger("chat_adapters.adapter")


class Adapter(ABC):
    """Capability set implemented by each provider adapter."""

    @classmethod
    def default_adapter_config(cls, kind: AdapterKind) -> AdapterConfig:
        """Return this adapter's process-wide default config for ``kind``.

        The first call for a (adapter, kind) pair runs
        :meth:`build_default_config`; every later call, from any thread,
        returns that same object. Adapters never share a cached record.
        """
        return DEFAULT_CONFIGS.get_or_init((cls, kind), lambda: cls.build_default_config(kind))

    @classmethod
    @abstractmethod
    def build_default_config(cls, kind: AdapterKind) -> AdapterConfig:
        """Compute the default config for ``kind``. Called at most once per (adapter, kind)."""

    @classmethod
    @abstractmethod
    def get_service_url(cls, kind: AdapterKind, service_type: ServiceType) -> str:
        """Return the endpoint URL for ``service_type``."""

    @classmethod
    def get_api_key(cls, kind: AdapterKind, config_set: Optional[ConfigSet] = None) -> str:
        """Return the API key for ``kind``, or ``""`` when the config needs none.

        Raises:
            MissingCredentialError: no lookup produced a usable key.
        """
        if not cls.default_adapter_config(kind).requires_api_key:
            return ""
        return resolve_api_key(kind, config_set)

    @classmethod
    @abstractmethod
    def to_web_request_data(
        cls,
        kind: AdapterKind,
        config_set: Optional[ConfigSet],
        model: str,
        chat_req: ChatRequest,
        service_type: ServiceType,
    ) -> WebRequestData:
        """Translate ``chat_req`` into the provider's wire request.

        Raises:
            MalformedRequestError: the request cannot be represented.
            MissingCredentialError: a required key is missing.
        """

    @classmethod
    @abstractmethod
    def to_chat_response(cls, kind: AdapterKind, web_response: WebResponse) -> ChatResponse:
        """Translate a raw response into a :class:`ChatResponse`.

        Raises:
            ProviderError: non-success status.
            ParseError: success body does not match the expected shape.
        """

    @classmethod
    @abstractmethod
    def stream_decoder(cls, kind: AdapterKind) -> StreamDecoder:
        """Return a fresh decoder turning body lines into stream events."""

    @classmethod
    def to_chat_stream(cls, kind: AdapterKind, pending_request: PendingRequest) -> ChatStreamResponse:
        """Attach this adapter's stream decoding to an unsent request.

        Nothing is sent here; the call is made when the returned stream is
        iterated. A non-success status then raises :class:`ProviderError`.

        Raises:
            StreamSetupError: ``pending_request`` is not a usable handle.
        """
        if not isinstance(pending_request, PendingRequest):
            raise StreamSetupError(
                message=f"expected PendingRequest, got {type(pending_request).__name__}",
                adapter_kind=kind.value,
            )
        if pending_request.client is None or pending_request.request is None:
            raise StreamSetupError(message="pending request has no client or request", adapter_kind=kind.value)
        if pending_request.client.is_closed:
            raise StreamSetupError(message="transport client is closed", adapter_kind=kind.value)
        decoder = cls.stream_decoder(kind)
        return ChatStreamResponse(
            stream=ChatStream(lambda: _run_stream(kind, pending_request, decoder), adapter_kind=kind.value)
        )


def _run_stream(kind: AdapterKind, pending: PendingRequest, decoder: StreamDecoder) -> Iterator[ChatStreamEvent]:
    ctx = LogContext(adapter_kind=kind.value)
    response = pending.send()
    try:
        if not response.is_success:
            response.read()
            log_event(_logger, "response.error", ctx, level=logging.WARNING, status=response.status_code, stream=True)
            raise ProviderError(
                message=f"{kind.display_name} returned HTTP {response.status_code}",
                adapter_kind=kind.value,
                status=response.status_code,
                body=decode_body(response.content),
            )
        log_event(_logger, "stream.start", ctx, level=logging.DEBUG, status=response.status_code)
        emitted = 0
        for evt in decoder(response.iter_lines()):
            emitted += 1
            yield evt
        log_event(_logger, "stream.end", ctx, level=logging.DEBUG, emitted=emitted)
    finally:
        response.close()


__all__ = ["Adapter", "StreamDecoder"]
