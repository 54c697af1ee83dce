"""Line-level decoders for streamed HTTP bodies.

Pure translation helpers: they consume text lines (as produced by
``httpx.Response.iter_lines()``) and yield decoded frames. JSON decoding is
left to the caller so each adapter can map failures to its own error.
"""
from __future__ import annotations

from dataclasses import dataclass
from typing import Iterable, Iterator, Optional

SSE_DONE = "[DONE]"


@dataclass(frozen=True)
class SseEvent:
    """One server-sent event: optional ``event`` name plus joined ``data``."""

    data: str
    event: Optional[str] = None


def iter_sse_events(lines: Iterable[str]) -> Iterator[SseEvent]:
    """Group SSE lines into events.

    Follows the SSE framing rules that matter to chat APIs: ``event:`` and
    ``data:`` fields, multi-line data joined with ``\\n``, blank line as
    dispatch, ``:`` comment lines ignored. A trailing event without a closing
    blank line is still dispatched.
    """
    event: Optional[str] = None
    data: list[str] = []
    for raw in lines:
        line = raw.decode("utf-8") if isinstance(raw, bytes) else raw
        line = line.rstrip("\r\n")
        if not line:
            if data:
                yield SseEvent(data="\n".join(data), event=event)
            event, data = None, []
            continue
        if line.startswith(":"):
            continue
        name, _, value = line.partition(":")
        if value.startswith(" "):
            value = value[1:]
        if name == "data":
            data.append(value)
        elif name == "event":
            event = value
    if data:
        yield SseEvent(data="\n".join(data), event=event)


def iter_ndjson(lines: Iterable[str]) -> Iterator[str]:
    """Yield non-blank lines of a newline-delimited JSON body."""
    for raw in lines:
        line = raw.decode("utf-8") if isinstance(raw, bytes) else raw
        if line := line.strip():
            yield line


__all__ = ["SSE_DONE", "SseEvent", "iter_sse_events", "iter_ndjson"]
