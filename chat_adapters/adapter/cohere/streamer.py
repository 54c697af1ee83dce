"""Stream decoding for Cohere v1 chat.

The body is newline-delimited JSON. ``event_type`` is ``stream-start``,
``text-generation`` (carries ``text``) or ``stream-end`` (carries the final
``response`` with usage). A ``stream-end`` whose ``finish_reason`` is
``ERROR`` is raised as :class:`ProviderError`.
"""
from __future__ import annotations

from typing import Any, Iterable, Iterator, Optional

from ...chat import ChatStreamEvent, MetaUsage
from ...errors import ParseError, ProviderError
from ...webc import iter_ndjson
from ..adapter_kind import AdapterKind
from ..support import load_json_frame
from .wire import CohereMeta

STREAM_ERROR_REASONS = frozenset({"ERROR", "ERROR_TOXIC", "ERROR_LIMIT"})


def usage_from_cohere(meta: Optional[CohereMeta]) -> MetaUsage:
    """Prefer ``meta.tokens``; fall back to ``meta.billed_units``."""
    if meta is None:
        return MetaUsage()
    tokens = meta.tokens or meta.billed_units
    if tokens is None:
        return MetaUsage()
    return MetaUsage(
        input_tokens=int(tokens.input_tokens) if tokens.input_tokens is not None else None,
        output_tokens=int(tokens.output_tokens) if tokens.output_tokens is not None else None,
    )


class CohereStreamer:
    """Stateful decoder; one instance per stream."""

    def __init__(self, kind: AdapterKind) -> None:
        self.kind = kind
        self.usage: Optional[MetaUsage] = None

    def _meta_from_end(self, frame: dict) -> Optional[CohereMeta]:
        response: Any = frame.get("response") or {}
        meta = response.get("meta") if isinstance(response, dict) else None
        if meta is None:
            return None
        try:
            return CohereMeta.model_validate(meta)
        except ValueError as exc:
            raise ParseError(message="unexpected stream-end meta", adapter_kind=self.kind.value, body=frame) from exc

    def __call__(self, lines: Iterable[str]) -> Iterator[ChatStreamEvent]:
        yield ChatStreamEvent.start()
        for line in iter_ndjson(lines):
            frame = load_json_frame(self.kind, line)
            event_type = frame.get("event_type")
            if event_type == "text-generation":
                text = frame.get("text")
                if text is not None and not isinstance(text, str):
                    raise ParseError(message="text-generation frame has non-string text", adapter_kind=self.kind.value, body=frame)
                if text:
                    yield ChatStreamEvent.chunk(text)
            elif event_type == "stream-end":
                if frame.get("finish_reason") in STREAM_ERROR_REASONS:
                    raise ProviderError(
                        message=f"Cohere stream ended with {frame.get('finish_reason')}",
                        adapter_kind=self.kind.value,
                        body=frame,
                    )
                meta = self._meta_from_end(frame)
                if meta is not None:
                    self.usage = usage_from_cohere(meta)
                break
        yield ChatStreamEvent.end(self.usage)


__all__ = ["CohereStreamer", "usage_from_cohere", "STREAM_ERROR_REASONS"]
