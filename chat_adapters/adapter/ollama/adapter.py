"""Ollama adapter: the default for models no other prefix claims.

Talks to the local daemon's OpenAI-compatible endpoint
(``{base_url}chat/completions``, default ``http://localhost:11434/v1/``), so
payloads, responses and stream frames use the OpenAI helpers. The daemon
takes no credential: the config sets ``requires_api_key=False``, so the
inherited ``get_api_key`` returns ``""`` and no auth header is sent.
"""
from __future__ import annotations

from typing import Optional

from ...chat import ChatRequest, ChatResponse
from ...config.config_set import ConfigSet
from ...config.defaults import JSON_CONTENT_TYPE
from ...config.provider_config import get_provider_config
from ...webc import WebResponse
from ..adapter_base import Adapter, StreamDecoder
from ..adapter_config import AdapterConfig, normalize_base_url
from ..adapter_kind import AdapterKind
from ..openai.adapter import CHAT_PATH, openai_chat_response, openai_payload
from ..openai.streamer import OpenAIStreamer
from ..service_type import ServiceType
from ..support import ensure_sendable, finish_request, request_headers
from ..web_request_data import WebRequestData


class OllamaAdapter(Adapter):
    @classmethod
    def build_default_config(cls, kind: AdapterKind) -> AdapterConfig:
        cfg = get_provider_config(kind.value)
        return AdapterConfig(
            base_url=normalize_base_url(cfg["base_url"]),
            default_headers=(("Content-Type", JSON_CONTENT_TYPE),),
            auth_header=None,
            requires_api_key=False,
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
        ensure_sendable(kind, model, chat_req)
        payload = openai_payload(kind, model, chat_req, service_type)
        config = cls.default_adapter_config(kind)
        return finish_request(
            kind,
            model,
            service_type,
            cls.get_service_url(kind, service_type),
            request_headers(config, cls.get_api_key(kind, config_set)),
            payload,
        )

    @classmethod
    def to_chat_response(cls, kind: AdapterKind, web_response: WebResponse) -> ChatResponse:
        return openai_chat_response(kind, web_response)

    @classmethod
    def stream_decoder(cls, kind: AdapterKind) -> StreamDecoder:
        return OpenAIStreamer(kind)


__all__ = ["OllamaAdapter"]
