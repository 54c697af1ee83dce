"""Stream decoding for Anthropic Messages SSE.

Frames carry a ``type``: ``message_start`` (input usage),
``content_block_delta`` (text), ``message_delta`` (output usage),
``message_stop`` (end), ``ping`` (ignored) and ``error``.
"""
from __future__ import annotations

from typing import Iterable, Iterator, Optional

from ...chat import ChatStreamEvent, MetaUsage
from ...errors import ParseError, ProviderError
from ...webc import iter_sse_events
from ..adapter_kind import AdapterKind
from ..support import load_json_frame


def _int_or_none(value: object) -> Optional[int]:
    return value if isinstance(value, int) else None


def _section(kind: AdapterKind, frame: dict, key: str, body: Optional[dict] = None) -> dict:
    """Return ``frame[key]`` as a dict; absent or null means empty."""
    value = frame.get(key)
    if value is None:
        return {}
    if not isinstance(value, dict):
        raise ParseError(message=f"stream frame field '{key}' is not an object", adapter_kind=kind.value, body=body or frame)
    return value


class AnthropicStreamer:
    """Stateful decoder; one instance per stream."""

    def __init__(self, kind: AdapterKind) -> None:
        self.kind = kind
        self.input_tokens: Optional[int] = None
        self.output_tokens: Optional[int] = None

    def _usage(self) -> Optional[MetaUsage]:
        if self.input_tokens is None and self.output_tokens is None:
            return None
        return MetaUsage(input_tokens=self.input_tokens, output_tokens=self.output_tokens)

    def __call__(self, lines: Iterable[str]) -> Iterator[ChatStreamEvent]:
        yield ChatStreamEvent.start()
        for sse in iter_sse_events(lines):
            frame = load_json_frame(self.kind, sse.data)
            ftype = frame.get("type") or sse.event
            if ftype == "message_start":
                message = _section(self.kind, frame, "message")
                usage = _section(self.kind, message, "usage", body=frame)
                self.input_tokens = _int_or_none(usage.get("input_tokens"))
                self.output_tokens = _int_or_none(usage.get("output_tokens"))
            elif ftype == "content_block_delta":
                delta = _section(self.kind, frame, "delta")
                text = delta.get("text") if delta.get("type") == "text_delta" else None
                if text is not None and not isinstance(text, str):
                    raise ParseError(message="text_delta carries non-string text", adapter_kind=self.kind.value, body=frame)
                if text:
                    yield ChatStreamEvent.chunk(text)
            elif ftype == "message_delta":
                usage = _section(self.kind, frame, "usage")
                if (out := _int_or_none(usage.get("output_tokens"))) is not None:
                    self.output_tokens = out
            elif ftype == "message_stop":
                break
            elif ftype == "error":
                err = frame.get("error")
                etype = err.get("type", "unknown") if isinstance(err, dict) else "unknown"
                raise ProviderError(
                    message=f"Anthropic stream error: {etype}",
                    adapter_kind=self.kind.value,
                    body=frame,
                )
        yield ChatStreamEvent.end(self._usage())


__all__ = ["AnthropicStreamer"]
