"""OpenAI chat-completions adapter."""

from .adapter import OpenAIAdapter
from .streamer import OpenAIStreamer

__all__ = ["OpenAIAdapter", "OpenAIStreamer"]
