"""Adapter kinds, the adapter contract and the per-provider implementations."""

from .adapter_kind import AdapterKind, MODEL_PREFIXES, DEFAULT_ADAPTER_KIND
from .service_type import ServiceType
from .web_request_data import WebRequestData, Header
from .adapter_config import AdapterConfig, OnceMap, DEFAULT_CONFIGS
from .adapter_base import Adapter, StreamDecoder
from .dispatcher import AdapterDispatcher

__all__ = [
    "AdapterKind",
    "MODEL_PREFIXES",
    "DEFAULT_ADAPTER_KIND",
    "ServiceType",
    "WebRequestData",
    "Header",
    "AdapterConfig",
    "OnceMap",
    "DEFAULT_CONFIGS",
    "Adapter",
    "StreamDecoder",
    "AdapterDispatcher",
]
