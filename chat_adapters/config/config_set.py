"""Caller-supplied configuration set passed through every adapter call.

Purpose
-------
Carry per-client credential wiring (explicit keys, custom env var names)
without touching process-wide state. The set is immutable once built.

External dependencies
---------------------
- Pydantic v2 ``BaseModel`` for validation; adapter names given as plain
  strings (``{"openai": "sk-..."}``) are coerced to ``AdapterKind``.
"""
from __future__ import annotations

from typing import Dict, Optional

from pydantic import BaseModel, ConfigDict, Field

from ..adapter.adapter_kind import AdapterKind


class ConfigSet(BaseModel):
    """Per-client configuration consulted by the credential resolver.

    Attributes
    ----------
    api_keys:
        Explicit API keys by adapter kind. Highest precedence.
    api_key_env_names:
        Custom env var to read the key from, by adapter kind. Consulted
        before the canonical env vars.
    use_config_file:
        Whether the external config file may supply keys.
    """

    model_config = ConfigDict(frozen=True)

    api_keys: Dict[AdapterKind, str] = Field(default_factory=dict)
    api_key_env_names: Dict[AdapterKind, str] = Field(default_factory=dict)
    use_config_file: bool = True

    def api_key_for(self, kind: AdapterKind) -> Optional[str]:
        return self.api_keys.get(kind)

    def env_name_for(self, kind: AdapterKind) -> Optional[str]:
        return self.api_key_env_names.get(kind)

    def with_api_key(self, kind: AdapterKind, api_key: str) -> "ConfigSet":
        """Return a copy with an explicit key for ``kind``."""
        return self.model_copy(update={"api_keys": {**self.api_keys, AdapterKind(kind): api_key}})


__all__ = ["ConfigSet"]
