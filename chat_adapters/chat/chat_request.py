"""ChatRequest DTO: the provider-agnostic input of every adapter.

The model is deliberately not part of the request; it is supplied alongside
it so one request can be replayed against several models.
"""
from __future__ import annotations

from dataclasses import dataclass, field, replace
from typing import Any, Dict, Iterator, List, Optional, Sequence

from .message import ChatMessage


@dataclass(frozen=True)
class ChatRequest:
    """Normalized chat request.

    Attributes:
        messages: Ordered conversation turns.
        system: Optional top-level system prompt. Adapters merge it with any
            ``system`` role messages, this one first.
        max_tokens: Completion token cap (each adapter maps the param name).
        temperature: Sampling temperature.
        top_p: Nucleus sampling mass.
        stop_sequences: Sequences that end generation.
    """

    messages: List[ChatMessage] = field(default_factory=list)
    system: Optional[str] = None
    max_tokens: Optional[int] = None
    temperature: Optional[float] = None
    top_p: Optional[float] = None
    stop_sequences: Optional[Sequence[str]] = None

    @classmethod
    def from_user(cls, content: str) -> "ChatRequest":
        return cls(messages=[ChatMessage.user(content)])

    def with_system(self, system: str) -> "ChatRequest":
        """Return a copy with ``system`` set."""
        return replace(self, system=system)

    def append_message(self, message: ChatMessage) -> "ChatRequest":
        """Return a copy with ``message`` appended."""
        return replace(self, messages=[*self.messages, message])

    def iter_systems(self) -> Iterator[str]:
        """Yield the top-level system prompt, then each system-role message."""
        if self.system:
            yield self.system
        for m in self.messages:
            if m.role == "system" and m.content:
                yield m.content

    def joined_system(self) -> Optional[str]:
        """Return all system text joined by blank lines, or ``None``."""
        systems = list(self.iter_systems())
        return "\n\n".join(systems) if systems else None

    def to_dict(self) -> Dict[str, Any]:
        return {
            "messages": [{"role": m.role, "content": m.content} for m in self.messages],
            "system": self.system,
            "max_tokens": self.max_tokens,
            "temperature": self.temperature,
            "top_p": self.top_p,
            "stop_sequences": list(self.stop_sequences) if self.stop_sequences else None,
        }


__all__ = ["ChatRequest"]
