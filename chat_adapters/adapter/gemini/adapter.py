"""Gemini adapter (Generative Language API, v1beta).

Wire format: ``POST {base_url}models/{model}:generateContent`` (or
``:streamGenerateContent?alt=sse`` for streams) with the key in the
``x-goog-api-key`` header. :meth:`GeminiAdapter.get_service_url` returns the
``models/`` root because the model id is part of the path; request building
appends ``{model}{action}``.

Roles map ``user`` -> ``user`` and ``assistant`` -> ``model``; system text
becomes ``systemInstruction``; sampling params nest under
``generationConfig`` in camelCase.
"""
from __future__ import annotations

from typing import Any, Dict, List, Optional
from urllib.parse import quote

from ...chat import ChatRequest, ChatResponse
from ...config.config_set import ConfigSet
from ...config.defaults import JSON_CONTENT_TYPE
from ...config.provider_config import get_provider_config
from ...errors import MalformedRequestError, ParseError
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
from .streamer import GeminiStreamer, usage_from_gemini
from .wire import GeminiResponse

MODELS_PATH = "models/"

SERVICE_ACTIONS = {
    ServiceType.CHAT: ":generateContent",
    ServiceType.CHAT_STREAM: ":streamGenerateContent?alt=sse",
}

_ROLE_MAP = {"user": "user", "assistant": "model"}


class GeminiAdapter(Adapter):
    @classmethod
    def build_default_config(cls, kind: AdapterKind) -> AdapterConfig:
        cfg = get_provider_config(kind.value)
        return AdapterConfig(
            base_url=normalize_base_url(cfg["base_url"]),
            default_headers=(("Content-Type", JSON_CONTENT_TYPE),),
            auth_header="x-goog-api-key",
            auth_scheme=None,
        )

    @classmethod
    def get_service_url(cls, kind: AdapterKind, service_type: ServiceType) -> str:
        return f"{cls.default_adapter_config(kind).base_url}{MODELS_PATH}"

    @classmethod
    def model_url(cls, kind: AdapterKind, model: str, service_type: ServiceType) -> str:
        # Accept both "gemini-1.5-pro" and "models/gemini-1.5-pro".
        name = model[len(MODELS_PATH):] if model.startswith(MODELS_PATH) else model
        return f"{cls.get_service_url(kind, service_type)}{quote(name, safe='-._')}{SERVICE_ACTIONS[service_type]}"

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
        payload = cls._payload(kind, chat_req)
        api_key = cls.get_api_key(kind, config_set)
        config = cls.default_adapter_config(kind)
        return finish_request(
            kind,
            model,
            service_type,
            cls.model_url(kind, model, service_type),
            request_headers(config, api_key),
            payload,
        )

    @staticmethod
    def _payload(kind: AdapterKind, chat_req: ChatRequest) -> Dict[str, Any]:
        contents: List[Dict[str, Any]] = [
            {"role": _ROLE_MAP[m.role], "parts": [{"text": m.content}]}
            for m in chat_req.messages
            if m.role != "system"
        ]
        if not contents:
            raise MalformedRequestError(
                message="Gemini needs at least one user or assistant message",
                adapter_kind=kind.value,
            )
        payload: Dict[str, Any] = {"contents": contents}
        if system := chat_req.joined_system():
            payload["systemInstruction"] = {"parts": [{"text": system}]}
        generation: Dict[str, Any] = {}
        put_if(generation, "maxOutputTokens", chat_req.max_tokens)
        put_if(generation, "temperature", chat_req.temperature)
        put_if(generation, "topP", chat_req.top_p)
        if chat_req.stop_sequences:
            generation["stopSequences"] = list(chat_req.stop_sequences)
        if generation:
            payload["generationConfig"] = generation
        return payload

    @classmethod
    def to_chat_response(cls, kind: AdapterKind, web_response: WebResponse) -> ChatResponse:
        body = check_web_response(kind, web_response)
        reply = validate_body(kind, GeminiResponse, body)
        if reply.candidates is None and reply.promptFeedback is None:
            raise ParseError(message="Gemini response has no candidates", adapter_kind=kind.value, body=body)
        return ChatResponse(
            content=reply.first_text(),
            usage=usage_from_gemini(reply.usageMetadata),
            model_name=reply.modelVersion,
            response_id=reply.responseId,
            raw=body,
        )

    @classmethod
    def stream_decoder(cls, kind: AdapterKind) -> StreamDecoder:
        return GeminiStreamer(kind)


__all__ = ["GeminiAdapter", "MODELS_PATH", "SERVICE_ACTIONS"]
