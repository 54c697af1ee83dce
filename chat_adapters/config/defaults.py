"""chat_adapters.config.defaults
============================

Stable default values for each adapter: base URLs, API versions and
token caps. Plain constants only; no I/O and no imports from adapter
packages, so this module can be imported from anywhere without cycles.
"""
from __future__ import annotations

# ---- OpenAI ----
OPENAI_DEFAULT_BASE_URL = "https://api.openai.com/v1/"

# ---- Anthropic ----
ANTHROPIC_DEFAULT_BASE_URL = "https://api.anthropic.com/v1/"
ANTHROPIC_API_VERSION = "2023-06-01"
# Anthropic requires max_tokens on every request.
ANTHROPIC_DEFAULT_MAX_TOKENS = 1024

# ---- Cohere ----
COHERE_DEFAULT_BASE_URL = "https://api.cohere.com/v1/"

# ---- Gemini ----
GEMINI_DEFAULT_BASE_URL = "https://generativelanguage.googleapis.com/v1beta/"

# ---- Ollama (local daemon, OpenAI-compatible endpoint) ----
OLLAMA_DEFAULT_BASE_URL = "http://localhost:11434/v1/"

# ---- Shared ----
JSON_CONTENT_TYPE = "application/json"

# Env var naming the optional external config file (JSON or YAML).
CONFIG_FILE_ENV = "CHAT_ADAPTERS_CONFIG_FILE"


__all__ = [
    "OPENAI_DEFAULT_BASE_URL",
    "ANTHROPIC_DEFAULT_BASE_URL",
    "ANTHROPIC_API_VERSION",
    "ANTHROPIC_DEFAULT_MAX_TOKENS",
    "COHERE_DEFAULT_BASE_URL",
    "GEMINI_DEFAULT_BASE_URL",
    "OLLAMA_DEFAULT_BASE_URL",
    "JSON_CONTENT_TYPE",
    "CONFIG_FILE_ENV",
]
