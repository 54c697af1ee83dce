"""Transport boundary: raw responses, pending stream requests, line decoders."""

from .web_response import WebResponse, decode_body
from .pending_request import PendingRequest
from .stream_lines import SSE_DONE, SseEvent, iter_ndjson, iter_sse_events
from .web_client import WebClient, DEFAULT_HTTP_TIMEOUT

__all__ = [
    "WebResponse",
    "decode_body",
    "PendingRequest",
    "SSE_DONE",
    "SseEvent",
    "iter_ndjson",
    "iter_sse_events",
    "WebClient",
    "DEFAULT_HTTP_TIMEOUT",
]
