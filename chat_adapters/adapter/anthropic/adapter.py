"""Anthropic adapter.

Wire format: ``POST {base_url}messages`` with ``x-api-key`` and
``anthropic-version`` headers. System text is lifted out of the message list
into the top-level ``system`` field; only ``user`` and ``assistant`` turns
remain in ``messages``. ``max_tokens`` is mandatory for this API, so a
default is filled in when the request sets none.
"""
from __future__ import annotations

from typing import Any, Dict, List, Optional

from ...chat import ChatRequest, ChatResponse, MetaUsage
from ...config.config_set import ConfigSet
from ...config.defaults import ANTHROPIC_API_VERSION, ANTHROPIC_DEFAULT_MAX_TOKENS, JSON_CONTENT_TYPE
from ...config.provider_config import get_provider_config
from ...errors import MalformedRequestError
from ...webc import WebResponse
from ..adapter_base import Adapter, StreamDecoder
from ..adapter_config import AdapterConfig, normalize_base_url
from ..adapter_kind import AdapterKind
from ..service_type import ServiceType
from ..support import (
    check_web_response,
    ensure_sendable,
    finish_request,
    put_if,
    request_headers,
    validate_body,
)
from ..web_request_data import WebRequestData
from .streamer import AnthropicStreamer
from .wire import AnthropicMessage

MESSAGES_PATH = "messages"


class AnthropicAdapter(Adapter):
    @classmethod
    def build_default_config(cls, kind: AdapterKind) -> AdapterConfig:
        cfg = get_provider_config(kind.value)
        return AdapterConfig(
            base_url=normalize_base_url(cfg["base_url"]),
            default_headers=(("Content-Type", JSON_CONTENT_TYPE),),
            auth_header="x-api-key",
            auth_scheme=None,
            api_version=cfg.get("api_version") or ANTHROPIC_API_VERSION,
            version_header="anthropic-version",
            default_max_tokens=ANTHROPIC_DEFAULT_MAX_TOKENS,
        )

    @classmethod
    def get_service_url(cls, kind: AdapterKind, service_type: ServiceType) -> str:
        return f"{cls.default_adapter_config(kind).base_url}{MESSAGES_PATH}"

    @classmethod
    def to_web_request_data(
        cls,
        kind: AdapterKind,
        config_set: Optional[ConfigSet],
        model: str,
        chat_req: ChatRequest,
        service_type: ServiceType,
    ) -> WebRequestData:
        ensure_sendable(kind, model, chat_req, unsupported_roles=("tool",))
        config = cls.default_adapter_config(kind)
        payload = cls._payload(kind, config, model, chat_req, service_type)
        api_key = cls.get_api_key(kind, config_set)
        return finish_request(
            kind,
            model,
            service_type,
            cls.get_service_url(kind, service_type),
            request_headers(config, api_key),
            payload,
        )

    @staticmethod
    def _payload(
        kind: AdapterKind,
        config: AdapterConfig,
        model: str,
        chat_req: ChatRequest,
        service_type: ServiceType,
    ) -> Dict[str, Any]:
        messages: List[Dict[str, Any]] = [
            {"role": m.role, "content": m.content} for m in chat_req.messages if m.role != "system"
        ]
        if not messages:
            raise MalformedRequestError(
                message="Anthropic needs at least one user or assistant message",
                adapter_kind=kind.value,
            )
        max_tokens = config.default_max_tokens if chat_req.max_tokens is None else chat_req.max_tokens
        if max_tokens < 1:
            raise MalformedRequestError(
                message=f"max_tokens must be at least 1, got {max_tokens}",
                adapter_kind=kind.value,
            )
        payload: Dict[str, Any] = {"model": model, "messages": messages, "max_tokens": max_tokens}
        put_if(payload, "system", chat_req.joined_system())
        put_if(payload, "temperature", chat_req.temperature)
        put_if(payload, "top_p", chat_req.top_p)
        if chat_req.stop_sequences:
            payload["stop_sequences"] = list(chat_req.stop_sequences)
        if service_type.is_stream:
            payload["stream"] = True
        return payload

    @classmethod
    def to_chat_response(cls, kind: AdapterKind, web_response: WebResponse) -> ChatResponse:
        body = check_web_response(kind, web_response)
        message = validate_body(kind, AnthropicMessage, body)
        texts = [b.text for b in message.content if b.type == "text" and b.text is not None]
        usage = message.usage
        return ChatResponse(
            content="".join(texts) if texts else None,
            usage=MetaUsage(
                input_tokens=usage.input_tokens if usage else None,
                output_tokens=usage.output_tokens if usage else None,
            ),
            model_name=message.model,
            response_id=message.id,
            raw=body,
        )

    @classmethod
    def stream_decoder(cls, kind: AdapterKind) -> StreamDecoder:
        return AnthropicStreamer(kind)


__all__ = ["AnthropicAdapter", "MESSAGES_PATH"]
