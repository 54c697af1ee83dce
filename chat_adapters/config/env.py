"""chat_adapters.config.env
=======================

Environment variable mapping for adapter credentials.

``ENV_MAP`` holds the canonical variable per adapter; ``ENV_ALIASES`` lists
every accepted name with the canonical one first, which sets precedence.
Adapters without a credential (Ollama) are absent from both maps.

Helpers never raise on unknown adapters or unset variables; they return
``None`` and leave the decision to the caller.
"""
from __future__ import annotations

import os
from typing import Dict, Iterable, Optional, Tuple

ENV_MAP: Dict[str, str] = {
    "openai": "OPENAI_API_KEY",
    "anthropic": "ANTHROPIC_API_KEY",
    "cohere": "COHERE_API_KEY",
    # Gemini keys are also commonly exported as GOOGLE_API_KEY.
    "gemini": "GEMINI_API_KEY",
}

ENV_ALIASES: Dict[str, Tuple[str, ...]] = {
    "cohere": ("COHERE_API_KEY", "CO_API_KEY"),
    "gemini": ("GEMINI_API_KEY", "GOOGLE_API_KEY"),
}


def is_placeholder(val: Optional[str]) -> bool:
    """Return True if ``val`` looks like a placeholder rather than a real key.

    Heuristics (case-insensitive, whitespace-trimmed): contains
    ``placeholder``, ``changeme`` or ``example``, or starts with ``test_``.
    """
    if val is None:
        return False
    v = str(val).strip().lower()
    return (
        "placeholder" in v
        or "changeme" in v
        or "example" in v
        or v.startswith("test_")
    )


def get_env_var_candidates(adapter: str) -> Iterable[str]:
    """Yield accepted env var names for ``adapter``, canonical first."""
    p = str(adapter or "").lower()
    canonical = ENV_MAP.get(p)
    if canonical:
        yield canonical
    for alias in ENV_ALIASES.get(p, ()):
        if alias != canonical:
            yield alias


def read_env_key(name: str) -> Optional[str]:
    """Return the stripped value of env var ``name`` unless empty or a placeholder."""
    val = os.environ.get(name)
    if val is None:
        return None
    val = val.strip()
    if not val or is_placeholder(val):
        return None
    return val


def resolve_env_key(adapter: str) -> Tuple[Optional[str], Optional[str]]:
    """Resolve a key for ``adapter`` from the process environment.

    Returns ``(value, env_var_used)``, or ``(None, None)`` when no candidate
    variable holds a usable value.
    """
    for name in get_env_var_candidates(adapter):
        if val := read_env_key(name):
            return val, name
    return None, None


__all__ = [
    "ENV_MAP",
    "ENV_ALIASES",
    "is_placeholder",
    "get_env_var_candidates",
    "read_env_key",
    "resolve_env_key",
]
