"""Stream decoding for OpenAI-style SSE chat completions.

Each ``data:`` frame is a chat-completion chunk; ``[DONE]`` ends the stream.
With ``stream_options.include_usage`` the last chunk before ``[DONE]``
carries usage and no choices. An ``error`` object in a frame is raised as
:class:`ProviderError`.
"""
from __future__ import annotations

from typing import Iterable, Iterator, Optional

from ...chat import ChatStreamEvent, MetaUsage
from ...errors import ParseError, ProviderError
from ...webc import SSE_DONE, iter_sse_events
from ..adapter_kind import AdapterKind
from ..support import load_json_frame
from .wire import OpenAIChatChunk, OpenAIUsage


def usage_from_openai(usage: Optional[OpenAIUsage]) -> MetaUsage:
    if usage is None:
        return MetaUsage()
    return MetaUsage(
        input_tokens=usage.prompt_tokens,
        output_tokens=usage.completion_tokens,
        total_tokens=usage.total_tokens,
    )


class OpenAIStreamer:
    """Stateful decoder; one instance per stream."""

    def __init__(self, kind: AdapterKind) -> None:
        self.kind = kind
        self.usage: Optional[MetaUsage] = None

    def __call__(self, lines: Iterable[str]) -> Iterator[ChatStreamEvent]:
        yield ChatStreamEvent.start()
        for sse in iter_sse_events(lines):
            if sse.data.strip() == SSE_DONE:
                break
            frame = load_json_frame(self.kind, sse.data)
            if "error" in frame:
                raise ProviderError(
                    message=f"{self.kind.display_name} stream error",
                    adapter_kind=self.kind.value,
                    body=frame,
                )
            try:
                chunk = OpenAIChatChunk.model_validate(frame)
            except ValueError as exc:
                raise ParseError(message="unexpected stream chunk shape", adapter_kind=self.kind.value, body=frame) from exc
            if chunk.usage is not None:
                self.usage = usage_from_openai(chunk.usage)
            for choice in chunk.choices:
                if choice.delta.content:
                    yield ChatStreamEvent.chunk(choice.delta.content)
        yield ChatStreamEvent.end(self.usage)


__all__ = ["OpenAIStreamer", "usage_from_openai"]
