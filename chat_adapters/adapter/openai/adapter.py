"""OpenAI adapter.

Wire format: ``POST {base_url}chat/completions`` with a bearer token. The
payload helpers are module-level functions so the Ollama adapter, which talks
to Ollama's OpenAI-compatible endpoint, can reuse them unchanged.
"""
from __future__ import annotations

from typing import Any, Dict, Optional

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
from .streamer import OpenAIStreamer, usage_from_openai
from .wire import OpenAIChatCompletion

CHAT_PATH = "chat/completions"


def openai_messages(kind: AdapterKind, chat_req: ChatRequest) -> list[Dict[str, Any]]:
    """Map messages to ``[{role, content}]``; the top-level system prompt goes first."""
    messages: list[Dict[str, Any]] = []
    if chat_req.system:
        messages.append({"role": "system", "content": chat_req.system})
    for idx, m in enumerate(chat_req.messages):
        msg: Dict[str, Any] = {"role": m.role, "content": m.content}
        if m.role == "tool":
            if not m.tool_call_id:
                raise MalformedRequestError(
                    message=f"message {idx}: tool message needs a tool_call_id", adapter_kind=kind.value
                )
            msg["tool_call_id"] = m.tool_call_id
        messages.append(msg)
    return messages


def openai_payload(kind: AdapterKind, model: str, chat_req: ChatRequest, service_type: ServiceType) -> Dict[str, Any]:
    payload: Dict[str, Any] = {
        "model": model,
        "messages": openai_messages(kind, chat_req),
        "stream": service_type.is_stream,
    }
    put_if(payload, "max_tokens", chat_req.max_tokens)
    put_if(payload, "temperature", chat_req.temperature)
    put_if(payload, "top_p", chat_req.top_p)
    if chat_req.stop_sequences:
        payload["stop"] = list(chat_req.stop_sequences)
    if service_type.is_stream:
        payload["stream_options"] = {"include_usage": True}
    return payload


def openai_chat_response(kind: AdapterKind, web_response: WebResponse) -> ChatResponse:
    body = check_web_response(kind, web_response)
    completion = validate_body(kind, OpenAIChatCompletion, body)
    content: Optional[str] = completion.choices[0].message.content if completion.choices else None
    return ChatResponse(
        content=content,
        usage=usage_from_openai(completion.usage),
        model_name=completion.model,
        response_id=completion.id,
        raw=body,
    )


class OpenAIAdapter(Adapter):
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
        # Chat and stream share the endpoint; the payload's "stream" flag differs.
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
        ensure_sendable(kind, model, chat_req)
        payload = openai_payload(kind, model, chat_req, service_type)
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

    @classmethod
    def to_chat_response(cls, kind: AdapterKind, web_response: WebResponse) -> ChatResponse:
        return openai_chat_response(kind, web_response)

    @classmethod
    def stream_decoder(cls, kind: AdapterKind) -> StreamDecoder:
        return OpenAIStreamer(kind)


__all__ = [
    "OpenAIAdapter",
    "CHAT_PATH",
    "openai_messages",
    "openai_payload",
    "openai_chat_response",
]
