"""Cohere adapter (v1 chat API).

Wire format: ``POST {base_url}chat`` with a bearer token. Cohere splits the
conversation: the final user turn goes in ``message``, earlier turns in
``chat_history`` with ``USER`` / ``CHATBOT`` roles, and system text in
``preamble``. A conversation that does not end with a user turn cannot be
expressed and is rejected.
"""
from __future__ import annotations

from typing import Any, Dict, List, Optional

from ...chat import ChatRequest, ChatResponse
from ...config.config_set import ConfigSet
from ...config.defaults import JSON_CONTENT_TYPE
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
from .streamer import CohereStreamer, usage_from_cohere
from .wire import CohereChatResponse

CHAT_PATH = "chat"

_ROLE_MAP = {"user": "USER", "assistant": "CHATBOT"}


class CohereAdapter(Adapter):
    @classmethod
    def build_default_config(cls, kind: AdapterKind) -> AdapterConfig:
        cfg = get_provider_config(kind.value)
        return AdapterConfig(
            base_url=normalize_base_url(cfg["base_url"]),
            default_headers=(("Content-Type", JSON_CONTENT_TYPE),),
            auth_header="Authorization",
            auth_scheme="Bearer",
        )

    @classmethod
    def get_service_url(cls, kind: AdapterKind, service_type: ServiceType) -> str:
        return f"{cls.default_adapter_config(kind).base_url}{CHAT_PATH}"

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
        payload = cls._payload(kind, model, chat_req, service_type)
        api_key = cls.get_api_key(kind, config_set)
        config = cls.default_adapter_config(kind)
        return finish_request(
            kind,
            model,
            service_type,
            cls.get_service_url(kind, service_type),
            request_headers(config, api_key),
            payload,
        )

    @staticmethod
    def _payload(kind: AdapterKind, model: str, chat_req: ChatRequest, service_type: ServiceType) -> Dict[str, Any]:
        turns = [m for m in chat_req.messages if m.role != "system"]
        if not turns or turns[-1].role != "user":
            raise MalformedRequestError(
                message="Cohere needs the conversation to end with a user message",
                adapter_kind=kind.value,
            )
        history: List[Dict[str, str]] = [
            {"role": _ROLE_MAP[m.role], "message": m.content} for m in turns[:-1]
        ]
        payload: Dict[str, Any] = {"model": model, "message": turns[-1].content}
        if history:
            payload["chat_history"] = history
        put_if(payload, "preamble", chat_req.joined_system())
        put_if(payload, "max_tokens", chat_req.max_tokens)
        put_if(payload, "temperature", chat_req.temperature)
        put_if(payload, "p", chat_req.top_p)
        if chat_req.stop_sequences:
            payload["stop_sequences"] = list(chat_req.stop_sequences)
        payload["stream"] = service_type.is_stream
        return payload

    @classmethod
    def to_chat_response(cls, kind: AdapterKind, web_response: WebResponse) -> ChatResponse:
        body = check_web_response(kind, web_response)
        reply = validate_body(kind, CohereChatResponse, body)
        return ChatResponse(
            content=reply.text,
            usage=usage_from_cohere(reply.meta),
            response_id=reply.response_id,
            raw=body,
        )

    @classmethod
    def stream_decoder(cls, kind: AdapterKind) -> StreamDecoder:
        return CohereStreamer(kind)


__all__ = ["CohereAdapter", "CHAT_PATH"]
