"""Credential resolver consumed by the adapters' default ``get_api_key``.

Lookup order for an adapter kind, first usable value wins:

1. ``ConfigSet.api_keys`` (explicit, in-code)
2. ``ConfigSet.api_key_env_names`` (custom env var)
3. Canonical env var, then its aliases (``config.env``)
4. The adapter's section of the external config file, when
   ``ConfigSet.use_config_file`` is set

Empty strings and placeholder-looking values are treated as missing. The
resolver only reads; it never writes env vars or files.
"""
from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Dict, Optional, Tuple

from ..adapter.adapter_kind import AdapterKind
from ..errors import MissingCredentialError
from .config_set import ConfigSet
from .env import get_env_var_candidates, is_placeholder, read_env_key, resolve_env_key
from .provider_config import load_external_config

# Field names accepted for a key inside a config file section, in priority order.
_CONFIG_KEY_FIELDS = ("api_key", "key", "token")


@dataclass
class KeyResolution:
    kind: AdapterKind
    api_key: Optional[str]
    source: str  # "config_set", "env", "config_file", "none"
    extra: Dict[str, Any] = field(default_factory=dict)


def _usable(val: Any) -> Optional[str]:
    if not isinstance(val, str):
        return None
    val = val.strip()
    if not val or is_placeholder(val):
        return None
    return val


def _from_config_file(kind: AdapterKind) -> Tuple[Optional[str], Dict[str, Any]]:
    section = load_external_config().get(kind.value)
    meta: Dict[str, Any] = {"has_section": isinstance(section, dict)}
    if not isinstance(section, dict):
        return None, meta
    for name in _CONFIG_KEY_FIELDS:
        if key := _usable(section.get(name)):
            meta["field"] = name
            return key, meta
    return None, meta


def candidate_env_names(kind: AdapterKind, config_set: Optional[ConfigSet] = None) -> Tuple[str, ...]:
    """Return every env var name consulted for ``kind``, in lookup order."""
    names = []
    if config_set is not None and (custom := config_set.env_name_for(kind)):
        names.append(custom)
    names.extend(n for n in get_env_var_candidates(kind.value) if n not in names)
    return tuple(names)


def resolve_key(kind: AdapterKind, config_set: Optional[ConfigSet] = None) -> KeyResolution:
    """Resolve a key for ``kind`` without raising.

    Returns a :class:`KeyResolution` whose ``source`` is ``"none"`` when no
    lookup produced a usable key.
    """
    kind = AdapterKind(kind)
    config_set = config_set or ConfigSet()

    if key := _usable(config_set.api_key_for(kind)):
        return KeyResolution(kind=kind, api_key=key, source="config_set")

    if (custom := config_set.env_name_for(kind)) and (key := read_env_key(custom)):
        return KeyResolution(kind=kind, api_key=key, source="env", extra={"env_var": custom})

    key, env_var = resolve_env_key(kind.value)
    if key:
        return KeyResolution(kind=kind, api_key=key, source="env", extra={"env_var": env_var})

    extra: Dict[str, Any] = {}
    if config_set.use_config_file:
        key, extra = _from_config_file(kind)
        if key:
            return KeyResolution(kind=kind, api_key=key, source="config_file", extra=extra)

    return KeyResolution(kind=kind, api_key=None, source="none", extra=extra)


def resolve_api_key(kind: AdapterKind, config_set: Optional[ConfigSet] = None) -> str:
    """Return the key for ``kind`` or raise :class:`MissingCredentialError`."""
    resolution = resolve_key(kind, config_set)
    if resolution.api_key:
        return resolution.api_key
    env_names = candidate_env_names(AdapterKind(kind), config_set)
    hint = f" (set {' or '.join(env_names)})" if env_names else ""
    raise MissingCredentialError(
        message=f"no API key found for {AdapterKind(kind).display_name}{hint}",
        adapter_kind=AdapterKind(kind).value,
        env_names=env_names,
    )


__all__ = [
    "KeyResolution",
    "candidate_env_names",
    "resolve_key",
    "resolve_api_key",
]
