"""Pydantic models for the Cohere v1 chat wire format."""
from __future__ import annotations

from typing import Optional

from pydantic import BaseModel, ConfigDict


class _Wire(BaseModel):
    model_config = ConfigDict(extra="ignore")


class CohereTokens(_Wire):
    input_tokens: Optional[float] = None
    output_tokens: Optional[float] = None


class CohereMeta(_Wire):
    billed_units: Optional[CohereTokens] = None
    tokens: Optional[CohereTokens] = None


class CohereChatResponse(_Wire):
    response_id: Optional[str] = None
    generation_id: Optional[str] = None
    text: str
    finish_reason: Optional[str] = None
    meta: Optional[CohereMeta] = None


__all__ = ["CohereTokens", "CohereMeta", "CohereChatResponse"]
