"""Uniform chat types exchanged with every adapter."""

from .message import ChatMessage, ChatRole, CHAT_ROLES
from .chat_request import ChatRequest
from .usage import MetaUsage
from .chat_response import ChatResponse
from .chat_stream import (
    ChatStream,
    ChatStreamEvent,
    ChatStreamResponse,
    StreamEventKind,
    accumulate_events,
)

__all__ = [
    "ChatMessage",
    "ChatRole",
    "CHAT_ROLES",
    "ChatRequest",
    "MetaUsage",
    "ChatResponse",
    "ChatStream",
    "ChatStreamEvent",
    "ChatStreamResponse",
    "StreamEventKind",
    "accumulate_events",
]
