"""Per-kind default adapter configuration and its process-wide memo.

Each adapter owns one immutable :class:`AdapterConfig`. It is computed the
first time it is read, by :class:`OnceMap`, and never replaced afterwards.
"""
from __future__ import annotations

import threading
from dataclasses import dataclass
from typing import Callable, Dict, Generic, Hashable, Optional, Tuple, TypeVar

from .web_request_data import Header

K = TypeVar("K", bound=Hashable)
V = TypeVar("V")


@dataclass(frozen=True)
class AdapterConfig:
    """Immutable default configuration for one adapter kind.

    Attributes:
        base_url: API root, always ending with ``/``.
        default_headers: Headers sent on every request, before auth headers.
        auth_header: Header carrying the key, or ``None`` for keyless adapters.
        auth_scheme: Prefix for the key value (``"Bearer"``), or ``None`` to
            send the raw key.
        requires_api_key: Whether the default credential lookup applies.
        api_version: Provider API version, sent in ``version_header``.
        version_header: Header carrying ``api_version``, or ``None``.
        default_max_tokens: Token cap applied when the request sets none and
            the provider requires one.
    """

    base_url: str
    default_headers: Tuple[Header, ...] = ()
    auth_header: Optional[str] = None
    auth_scheme: Optional[str] = None
    requires_api_key: bool = True
    api_version: Optional[str] = None
    version_header: Optional[str] = None
    default_max_tokens: Optional[int] = None

    def base_headers(self) -> Tuple[Header, ...]:
        """Default headers plus the API version header, when configured."""
        if self.version_header and self.api_version:
            return (*self.default_headers, (self.version_header, self.api_version))
        return self.default_headers

    def auth_headers(self, api_key: str) -> Tuple[Header, ...]:
        """Return the auth header pair for ``api_key`` (empty when keyless)."""
        if not self.auth_header or not api_key:
            return ()
        value = f"{self.auth_scheme} {api_key}" if self.auth_scheme else api_key
        return ((self.auth_header, value),)


def normalize_base_url(url: str) -> str:
    url = (url or "").strip()
    return url if url.endswith("/") else url + "/"


class OnceMap(Generic[K, V]):
    """Map whose values are computed exactly once per key, thread-safely.

    Reads after initialization take no lock. The first read of a key takes the
    lock, re-checks, and runs the factory at most once; concurrent first
    readers block until the value is stored and then all see the same object.
    Stored values are never replaced.
    """

    def __init__(self) -> None:
        self._values: Dict[K, V] = {}
        self._lock = threading.Lock()

    def get_or_init(self, key: K, factory: Callable[[], V]) -> V:
        try:
            return self._values[key]
        except KeyError:
            pass
        with self._lock:
            if key in self._values:
                return self._values[key]
            value = factory()
            self._values[key] = value
            return value

    def __contains__(self, key: object) -> bool:
        return key in self._values

    def __len__(self) -> int:
        return len(self._values)


# Process-wide default configs, keyed by (adapter class, AdapterKind).
DEFAULT_CONFIGS: OnceMap = OnceMap()


__all__ = ["AdapterConfig", "OnceMap", "DEFAULT_CONFIGS", "normalize_base_url"]
