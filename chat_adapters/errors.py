"""Adapter error taxonomy.

Every contract operation that can fail raises one of the dataclass exceptions
below instead of returning sentinel values. They share :class:`AdapterError`
so callers can catch the whole family, and each carries a normalized
:class:`ErrorCode` that is stable for logging and analytics.

The split matters to callers:

- ``MissingCredentialError`` / ``MalformedRequestError``: the request could not
  be built; nothing was sent.
- ``ProviderError``: the upstream API rejected or failed the call; ``status``
  and ``body`` are passed through untouched.
- ``ParseError``: a success reply could not be mapped to the uniform shape,
  which usually points at an adapter bug or an API change.
- ``StreamSetupError``: the stream decoder could not be attached to the
  transport handle.

No error here is retried by this package.
"""
from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Dict, Optional, Tuple


class ErrorCode(str, Enum):
    """Normalized error codes, one per exception class."""

    MISSING_CREDENTIAL = "missing_credential"
    MALFORMED_REQUEST = "malformed_request"
    PROVIDER_ERROR = "provider_error"
    PARSE_ERROR = "parse_error"
    STREAM_SETUP = "stream_setup"


# Upstream HTTP status -> coarse category, used for diagnostics only.
_HTTP_STATUS_MAP: Dict[int, str] = {
    400: "validation",
    401: "auth",
    403: "auth",
    404: "not_found",
    408: "timeout",
    409: "conflict",
    413: "validation",
    422: "validation",
    429: "rate_limit",
    500: "server_error",
    502: "transient",
    503: "unavailable",
    504: "timeout",
    529: "unavailable",
}


def classify_status(status: Optional[int]) -> str:
    """Map an HTTP status to a coarse category string.

    Unlisted 4xx statuses map to ``"client_error"``, unlisted 5xx statuses to
    ``"server_error"`` and anything else (including ``None``) to ``"unknown"``.
    """
    if status is None:
        return "unknown"
    if status in _HTTP_STATUS_MAP:
        return _HTTP_STATUS_MAP[status]
    if 400 <= status < 500:
        return "client_error"
    if 500 <= status < 600:
        return "server_error"
    return "unknown"


@dataclass
class AdapterError(Exception):
    """Base class for all adapter failures.

    Attributes:
        code: Normalized :class:`ErrorCode`.
        message: Human-readable message, safe to log (never contains keys).
        adapter_kind: Canonical adapter name where the failure originated.
    """

    code: ErrorCode
    message: str
    adapter_kind: Optional[str] = None

    def __str__(self) -> str:  # pragma: no cover - trivial
        return f"{self.adapter_kind or '-'} {self.code.value}: {self.message}"


@dataclass
class MissingCredentialError(AdapterError):
    """No usable API key was found for an adapter that requires one."""

    code: ErrorCode = ErrorCode.MISSING_CREDENTIAL
    message: str = "no API key found"
    env_names: Tuple[str, ...] = ()


@dataclass
class MalformedRequestError(AdapterError):
    """The chat request cannot be represented in the target wire format."""

    code: ErrorCode = ErrorCode.MALFORMED_REQUEST
    message: str = "malformed request"


@dataclass
class ProviderError(AdapterError):
    """The provider answered with a non-success HTTP status (or an error frame).

    ``body`` is the upstream payload exactly as received (parsed JSON when the
    transport could decode it, text otherwise).
    """

    code: ErrorCode = ErrorCode.PROVIDER_ERROR
    message: str = "provider returned an error"
    status: Optional[int] = None
    body: Any = None
    category: str = field(init=False, default="unknown")

    def __post_init__(self) -> None:
        self.category = classify_status(self.status)


@dataclass
class ParseError(AdapterError):
    """A success response body could not be mapped to the uniform shape."""

    code: ErrorCode = ErrorCode.PARSE_ERROR
    message: str = "could not parse provider response"
    body: Any = None


@dataclass
class StreamSetupError(AdapterError):
    """Incremental decoding could not be attached to the transport handle."""

    code: ErrorCode = ErrorCode.STREAM_SETUP
    message: str = "stream setup failed"


__all__ = [
    "ErrorCode",
    "AdapterError",
    "MissingCredentialError",
    "MalformedRequestError",
    "ProviderError",
    "ParseError",
    "StreamSetupError",
    "classify_status",
]
