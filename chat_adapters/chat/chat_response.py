"""ChatResponse DTO: the uniform output of a non-streaming call.

``raw`` keeps the provider body for diagnostics and is left out of
:meth:`ChatResponse.to_dict` so large payloads are not logged or persisted by
accident.
"""
from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Dict, Optional

from .usage import MetaUsage


@dataclass
class ChatResponse:
    """Provider-agnostic chat completion result.

    Attributes:
        content: Assistant text, or ``None`` when the provider returned none.
        usage: Token usage.
        model_name: Model reported by the provider, when present.
        response_id: Provider response identifier, when present.
        raw: Original response body for diagnostics only.
    """

    content: Optional[str]
    usage: MetaUsage = field(default_factory=MetaUsage)
    model_name: Optional[str] = None
    response_id: Optional[str] = None
    raw: Optional[Any] = None

    def to_dict(self) -> Dict[str, Any]:
        return {
            "content": self.content,
            "usage": self.usage.to_dict(),
            "model_name": self.model_name,
            "response_id": self.response_id,
        }


__all__ = ["ChatResponse"]
