"""Layered per-adapter configuration.

Sources are merged in a fixed order, later wins:

1. Built-in defaults (``config.defaults``)
2. Optional external file named by ``CHAT_ADAPTERS_CONFIG_FILE``
3. Environment variables ``<ADAPTER>_<FIELD>`` (e.g. ``OLLAMA_BASE_URL``)
4. In-code overrides passed to :func:`get_provider_config` (``None`` ignored)

External file
-------------
JSON is tried first, then YAML. The top level maps adapter names to sections::

    openai:
      api_key: sk-...
    ollama:
      base_url: http://gpu-box:11434/v1/

A missing, unreadable or non-mapping file counts as empty. Parsed files are
cached per path; :func:`clear_config_cache` drops the cache.
"""
from __future__ import annotations

import json
import os
import threading
from pathlib import Path
from typing import Any, Dict, Optional

import yaml

from ..logging import get_logger, log_event
from .defaults import (
    ANTHROPIC_DEFAULT_BASE_URL,
    COHERE_DEFAULT_BASE_URL,
    CONFIG_FILE_ENV,
    GEMINI_DEFAULT_BASE_URL,
    OLLAMA_DEFAULT_BASE_URL,
    OPENAI_DEFAULT_BASE_URL,
)

_logger = get_logger("chat_adapters.config")

DEFAULTS: Dict[str, Dict[str, Any]] = {
    "openai": {"base_url": OPENAI_DEFAULT_BASE_URL},
    "anthropic": {"base_url": ANTHROPIC_DEFAULT_BASE_URL},
    "cohere": {"base_url": COHERE_DEFAULT_BASE_URL},
    "gemini": {"base_url": GEMINI_DEFAULT_BASE_URL},
    "ollama": {"base_url": OLLAMA_DEFAULT_BASE_URL},
}

ENV_FIELD_MAP = {
    "base_url": "BASE_URL",
}

_FILE_CACHE: Dict[str, Dict[str, Any]] = {}
_FILE_LOCK = threading.Lock()


def _parse_config_text(text: str) -> Any:
    try:
        return json.loads(text)
    except ValueError:
        pass
    try:
        return yaml.safe_load(text)
    except yaml.YAMLError:
        return None


def load_external_config() -> Dict[str, Any]:
    """Return the parsed external config file, or ``{}`` when there is none."""
    path = os.getenv(CONFIG_FILE_ENV)
    if not path:
        return {}
    with _FILE_LOCK:
        if path in _FILE_CACHE:
            return _FILE_CACHE[path]
        p = Path(path).expanduser()
        data: Any = None
        try:
            data = _parse_config_text(p.read_text(encoding="utf-8"))
        except OSError as exc:
            log_event(_logger, "config.file.unreadable", path=str(p), error=str(exc))
        if not isinstance(data, dict):
            data = {}
        _FILE_CACHE[path] = data
        return data


def clear_config_cache() -> None:
    with _FILE_LOCK:
        _FILE_CACHE.clear()


def _env_overrides(adapter: str) -> Dict[str, Any]:
    out: Dict[str, Any] = {}
    prefix = adapter.upper()
    for field, suffix in ENV_FIELD_MAP.items():
        val = os.getenv(f"{prefix}_{suffix}")
        if val:
            out[field] = val
    return out


def get_provider_config(adapter: str, overrides: Optional[Dict[str, Any]] = None) -> Dict[str, Any]:
    """Return the merged configuration for ``adapter``.

    Merge order (later wins): defaults -> external file -> env vars -> overrides.
    """
    name = str(adapter or "").lower().strip()
    cfg: Dict[str, Any] = {}

    cfg |= DEFAULTS.get(name, {})

    file_cfg = load_external_config().get(name)
    if isinstance(file_cfg, dict):
        cfg |= file_cfg

    cfg |= _env_overrides(name)

    if overrides:
        cfg |= {k: v for k, v in overrides.items() if v is not None}

    return cfg


__all__ = [
    "DEFAULTS",
    "ENV_FIELD_MAP",
    "get_provider_config",
    "load_external_config",
    "clear_config_cache",
]
