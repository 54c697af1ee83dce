"""Pydantic models for the OpenAI chat-completions wire format.

Only the fields the uniform response uses are declared; everything else is
ignored. Ollama's OpenAI-compatible endpoint returns the same shapes.
"""
from __future__ import annotations

from typing import List, Optional

from pydantic import BaseModel, ConfigDict


class _Wire(BaseModel):
    model_config = ConfigDict(extra="ignore")


class OpenAIUsage(_Wire):
    prompt_tokens: Optional[int] = None
    completion_tokens: Optional[int] = None
    total_tokens: Optional[int] = None


class OpenAIMessage(_Wire):
    role: Optional[str] = None
    content: Optional[str] = None


class OpenAIChoice(_Wire):
    index: int = 0
    message: OpenAIMessage
    finish_reason: Optional[str] = None


class OpenAIChatCompletion(_Wire):
    id: Optional[str] = None
    model: Optional[str] = None
    choices: List[OpenAIChoice]
    usage: Optional[OpenAIUsage] = None


class OpenAIDelta(_Wire):
    content: Optional[str] = None


class OpenAIChunkChoice(_Wire):
    index: int = 0
    delta: OpenAIDelta = OpenAIDelta()
    finish_reason: Optional[str] = None


class OpenAIChatChunk(_Wire):
    choices: List[OpenAIChunkChoice] = []
    usage: Optional[OpenAIUsage] = None


__all__ = [
    "OpenAIUsage",
    "OpenAIMessage",
    "OpenAIChoice",
    "OpenAIChatCompletion",
    "OpenAIDelta",
    "OpenAIChunkChoice",
    "OpenAIChatChunk",
]
