"""Ollama (local daemon) adapter."""

from .adapter import OllamaAdapter

__all__ = ["OllamaAdapter"]
