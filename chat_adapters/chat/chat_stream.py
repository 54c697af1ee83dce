"""Streaming primitives: events, the one-shot stream handle, accumulation.

A :class:`ChatStream` wraps a zero-argument event source. Nothing is sent
until the stream is iterated, and it can be iterated once.
"""
from __future__ import annotations

import threading
from dataclasses import dataclass
from typing import Callable, Iterable, Iterator, List, Literal, Optional

from ..errors import StreamSetupError
from .chat_response import ChatResponse
from .usage import MetaUsage

StreamEventKind = Literal["start", "chunk", "end"]


@dataclass(frozen=True)
class ChatStreamEvent:
    """One incremental stream event.

    Fields:
      kind: ``start`` (once, first), ``chunk`` (text delta), ``end`` (once, last)
      delta: text delta for ``chunk`` events
      usage: captured token usage on the ``end`` event, when the provider sent any
    """

    kind: StreamEventKind
    delta: Optional[str] = None
    usage: Optional[MetaUsage] = None

    @classmethod
    def start(cls) -> "ChatStreamEvent":
        return cls(kind="start")

    @classmethod
    def chunk(cls, delta: str) -> "ChatStreamEvent":
        return cls(kind="chunk", delta=delta)

    @classmethod
    def end(cls, usage: Optional[MetaUsage] = None) -> "ChatStreamEvent":
        return cls(kind="end", usage=usage)


class ChatStream:
    """One-shot iterable of :class:`ChatStreamEvent`."""

    def __init__(self, source: Callable[[], Iterator[ChatStreamEvent]], *, adapter_kind: Optional[str] = None) -> None:
        self._source = source
        self._adapter_kind = adapter_kind
        self._consumed = False
        self._lock = threading.Lock()

    def __iter__(self) -> Iterator[ChatStreamEvent]:
        with self._lock:
            if self._consumed:
                raise StreamSetupError(message="stream already consumed", adapter_kind=self._adapter_kind)
            self._consumed = True
        return self._source()


@dataclass
class ChatStreamResponse:
    """Handle returned by ``to_chat_stream``; iterate ``stream`` to drive the call."""

    stream: ChatStream

    def __iter__(self) -> Iterator[ChatStreamEvent]:
        return iter(self.stream)


def accumulate_events(events: Iterable[ChatStreamEvent]) -> ChatResponse:
    """Fold a sequence of stream events into a :class:`ChatResponse`.

    Text deltas are concatenated; usage is taken from the ``end`` event.
    ``content`` is ``None`` when no chunk carried text.
    """
    deltas: List[str] = []
    usage: Optional[MetaUsage] = None
    for evt in events:
        if evt.kind == "chunk" and evt.delta:
            deltas.append(evt.delta)
        elif evt.kind == "end" and evt.usage is not None:
            usage = evt.usage
    return ChatResponse(content="".join(deltas) if deltas else None, usage=usage or MetaUsage())


__all__ = [
    "ChatStreamEvent",
    "StreamEventKind",
    "ChatStream",
    "ChatStreamResponse",
    "accumulate_events",
]
