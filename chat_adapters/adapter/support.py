"""Helpers shared by adapter implementations.

Everything here is a pure function of its arguments apart from log emission.
Failures are mapped to the adapter error taxonomy.
"""
from __future__ import annotations

import json
import logging
from typing import Any, Iterable, List, Optional, Type, TypeVar
from urllib.parse import urlsplit

from pydantic import BaseModel, ValidationError

from ..chat import CHAT_ROLES, ChatRequest
from ..errors import MalformedRequestError, ParseError, ProviderError
from ..logging import LogContext, get_logger, log_event
from ..webc import WebResponse
from .adapter_config import AdapterConfig
from .adapter_kind import AdapterKind
from .service_type import ServiceType
from .web_request_data import Header, WebRequestData

M = TypeVar("M", bound=BaseModel)

_logger = get_logger("chat_adapters.adapter")


def request_headers(config: AdapterConfig, api_key: str) -> List[Header]:
    """Default and version headers followed by the auth header(s) for ``api_key``."""
    headers: List[Header] = list(config.base_headers())
    headers.extend(config.auth_headers(api_key))
    return headers


def ensure_sendable(kind: AdapterKind, model: str, chat_req: ChatRequest, *, unsupported_roles: Iterable[str] = ()) -> None:
    """Reject requests no adapter can send, plus roles ``kind`` cannot represent."""
    if not isinstance(model, str) or not model.strip():
        raise MalformedRequestError(message="model must be a non-empty string", adapter_kind=kind.value)
    if not chat_req.messages:
        raise MalformedRequestError(message="chat request has no messages", adapter_kind=kind.value)
    blocked = set(unsupported_roles)
    for idx, m in enumerate(chat_req.messages):
        if m.role not in CHAT_ROLES:
            raise MalformedRequestError(message=f"message {idx}: unknown role '{m.role}'", adapter_kind=kind.value)
        if not isinstance(m.content, str):
            raise MalformedRequestError(message=f"message {idx}: content must be a string", adapter_kind=kind.value)
        if m.role in blocked:
            raise MalformedRequestError(
                message=f"message {idx}: role '{m.role}' is not supported by {kind.display_name}",
                adapter_kind=kind.value,
            )


def finish_request(
    kind: AdapterKind,
    model: str,
    service_type: ServiceType,
    url: str,
    headers: Iterable[Header],
    payload: dict,
) -> WebRequestData:
    """Freeze the request and emit a ``request.build`` debug event.

    Only the URL host/path and header names are logged, never header values.
    """
    data = WebRequestData.build(url, headers, payload)
    parts = urlsplit(data.url)
    log_event(
        _logger,
        "request.build",
        LogContext(adapter_kind=kind.value, model=model, service_type=service_type.value),
        level=logging.DEBUG,
        host=parts.netloc,
        path=parts.path,
        header_names=list(data.header_names()),
    )
    return data


def check_web_response(kind: AdapterKind, web_response: WebResponse) -> Any:
    """Return the body of a success response or raise :class:`ProviderError`."""
    if not isinstance(web_response, WebResponse):
        raise ParseError(message=f"expected WebResponse, got {type(web_response).__name__}", adapter_kind=kind.value)
    if not web_response.is_success:
        log_event(
            _logger,
            "response.error",
            LogContext(adapter_kind=kind.value),
            level=logging.WARNING,
            status=web_response.status,
        )
        raise ProviderError(
            message=f"{kind.display_name} returned HTTP {web_response.status}",
            adapter_kind=kind.value,
            status=web_response.status,
            body=web_response.body,
        )
    return web_response.body


def validate_body(kind: AdapterKind, model_cls: Type[M], body: Any) -> M:
    """Validate ``body`` against a wire model or raise :class:`ParseError`."""
    if not isinstance(body, dict):
        raise ParseError(
            message=f"expected a JSON object, got {type(body).__name__}",
            adapter_kind=kind.value,
            body=body,
        )
    try:
        return model_cls.model_validate(body)
    except ValidationError as exc:
        raise ParseError(
            message=f"unexpected {kind.display_name} response shape: {exc.error_count()} error(s)",
            adapter_kind=kind.value,
            body=body,
        ) from exc


def load_json_frame(kind: AdapterKind, data: str) -> dict:
    """Decode one streamed JSON frame or raise :class:`ParseError`."""
    try:
        frame = json.loads(data)
    except ValueError as exc:
        raise ParseError(message="undecodable stream frame", adapter_kind=kind.value, body=data) from exc
    if not isinstance(frame, dict):
        raise ParseError(message="stream frame is not a JSON object", adapter_kind=kind.value, body=data)
    return frame


def put_if(payload: dict, key: str, value: Optional[Any]) -> None:
    """Set ``payload[key]`` unless ``value`` is ``None``."""
    if value is not None:
        payload[key] = value


__all__ = [
    "request_headers",
    "ensure_sendable",
    "finish_request",
    "check_web_response",
    "validate_body",
    "load_json_frame",
    "put_if",
]
