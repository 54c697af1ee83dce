"""Anthropic Messages API adapter."""

from .adapter import AnthropicAdapter
from .streamer import AnthropicStreamer

__all__ = ["AnthropicAdapter", "AnthropicStreamer"]
