"""Gemini generateContent adapter."""

from .adapter import GeminiAdapter
from .streamer import GeminiStreamer

__all__ = ["GeminiAdapter", "GeminiStreamer"]
