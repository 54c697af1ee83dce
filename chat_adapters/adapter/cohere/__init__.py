"""Cohere v1 chat adapter."""

from .adapter import CohereAdapter
from .streamer import CohereStreamer

__all__ = ["CohereAdapter", "CohereStreamer"]
