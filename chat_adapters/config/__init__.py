"""Configuration layer: layered provider config, caller config set, credentials."""

from .config_set import ConfigSet
from .provider_config import (
    DEFAULTS,
    clear_config_cache,
    get_provider_config,
    load_external_config,
)
from .resolver import KeyResolution, resolve_api_key, resolve_key

__all__ = [
    "ConfigSet",
    "DEFAULTS",
    "clear_config_cache",
    "get_provider_config",
    "load_external_config",
    "KeyResolution",
    "resolve_api_key",
    "resolve_key",
]
