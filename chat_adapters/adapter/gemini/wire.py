"""Pydantic models for the Gemini ``generateContent`` wire format."""
from __future__ import annotations

from typing import Any, Dict, List, Optional

from pydantic import BaseModel, ConfigDict


class _Wire(BaseModel):
    model_config = ConfigDict(extra="ignore")


class GeminiPart(_Wire):
    text: Optional[str] = None


class GeminiContent(_Wire):
    role: Optional[str] = None
    parts: List[GeminiPart] = []


class GeminiCandidate(_Wire):
    content: Optional[GeminiContent] = None
    finishReason: Optional[str] = None


class GeminiUsageMetadata(_Wire):
    promptTokenCount: Optional[int] = None
    candidatesTokenCount: Optional[int] = None
    totalTokenCount: Optional[int] = None


class GeminiResponse(_Wire):
    candidates: Optional[List[GeminiCandidate]] = None
    promptFeedback: Optional[Dict[str, Any]] = None
    usageMetadata: Optional[GeminiUsageMetadata] = None
    modelVersion: Optional[str] = None
    responseId: Optional[str] = None

    def first_text(self) -> Optional[str]:
        """Concatenated text parts of the first candidate, or ``None``."""
        if not self.candidates:
            return None
        content = self.candidates[0].content
        if content is None:
            return None
        texts = [p.text for p in content.parts if p.text is not None]
        return "".join(texts) if texts else None


__all__ = [
    "GeminiPart",
    "GeminiContent",
    "GeminiCandidate",
    "GeminiUsageMetadata",
    "GeminiResponse",
]
