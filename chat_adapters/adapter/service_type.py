"""Service type selector: one-shot chat vs incremental stream."""
from __future__ import annotations

from enum import Enum


class ServiceType(str, Enum):
    CHAT = "chat"
    CHAT_STREAM = "chat_stream"

    @property
    def is_stream(self) -> bool:
        return self is ServiceType.CHAT_STREAM


__all__ = ["ServiceType"]
