"""Pydantic models for the Anthropic Messages API wire format."""
from __future__ import annotations

from typing import List, Optional

from pydantic import BaseModel, ConfigDict


class _Wire(BaseModel):
    model_config = ConfigDict(extra="ignore")


class AnthropicUsage(_Wire):
    input_tokens: Optional[int] = None
    output_tokens: Optional[int] = None


class AnthropicContentBlock(_Wire):
    type: str
    text: Optional[str] = None


class AnthropicMessage(_Wire):
    id: Optional[str] = None
    model: Optional[str] = None
    content: List[AnthropicContentBlock]
    stop_reason: Optional[str] = None
    usage: Optional[AnthropicUsage] = None


__all__ = [
    "AnthropicUsage",
    "AnthropicContentBlock",
    "AnthropicMessage",
]
