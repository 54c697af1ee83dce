"""Stream decoding for Gemini ``streamGenerateContent?alt=sse``.

Every ``data:`` frame is a full ``GenerateContentResponse`` holding the next
text slice; ``usageMetadata`` is cumulative, so the last one seen wins.
"""
from __future__ import annotations

from typing import Iterable, Iterator, Optional

from ...chat import ChatStreamEvent, MetaUsage
from ...errors import ParseError, ProviderError
from ...webc import iter_sse_events
from ..adapter_kind import AdapterKind
from ..support import load_json_frame
from .wire import GeminiResponse, GeminiUsageMetadata


def usage_from_gemini(usage: Optional[GeminiUsageMetadata]) -> MetaUsage:
    if usage is None:
        return MetaUsage()
    return MetaUsage(
        input_tokens=usage.promptTokenCount,
        output_tokens=usage.candidatesTokenCount,
        total_tokens=usage.totalTokenCount,
    )


class GeminiStreamer:
    """Stateful decoder; one instance per stream."""

    def __init__(self, kind: AdapterKind) -> None:
        self.kind = kind
        self.usage: Optional[MetaUsage] = None

    def __call__(self, lines: Iterable[str]) -> Iterator[ChatStreamEvent]:
        yield ChatStreamEvent.start()
        for sse in iter_sse_events(lines):
            frame = load_json_frame(self.kind, sse.data)
            if "error" in frame:
                raise ProviderError(message="Gemini stream error", adapter_kind=self.kind.value, body=frame)
            try:
                chunk = GeminiResponse.model_validate(frame)
            except ValueError as exc:
                raise ParseError(message="unexpected stream chunk shape", adapter_kind=self.kind.value, body=frame) from exc
            if chunk.usageMetadata is not None:
                self.usage = usage_from_gemini(chunk.usageMetadata)
            if text := chunk.first_text():
                yield ChatStreamEvent.chunk(text)
        yield ChatStreamEvent.end(self.usage)


__all__ = ["GeminiStreamer", "usage_from_gemini"]
