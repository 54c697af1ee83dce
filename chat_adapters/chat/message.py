"""Chat message DTO shared by all adapters.

Roles are the provider-agnostic set; each adapter maps them to its own naming
(``assistant`` becomes ``model`` for Gemini and ``CHATBOT`` for Cohere) or
rejects the ones it cannot represent.
"""
from __future__ import annotations

from dataclasses import dataclass
from typing import Literal, Optional

ChatRole = Literal["system", "user", "assistant", "tool"]

CHAT_ROLES: tuple[str, ...] = ("system", "user", "assistant", "tool")


@dataclass(frozen=True)
class ChatMessage:
    """A single role-tagged chat message with plain text content.

    ``tool_call_id`` links a ``tool`` message to the call it answers.
    """

    role: ChatRole
    content: str
    tool_call_id: Optional[str] = None

    @classmethod
    def system(cls, content: str) -> "ChatMessage":
        return cls(role="system", content=content)

    @classmethod
    def user(cls, content: str) -> "ChatMessage":
        return cls(role="user", content=content)

    @classmethod
    def assistant(cls, content: str) -> "ChatMessage":
        return cls(role="assistant", content=content)

    @classmethod
    def tool(cls, content: str, tool_call_id: str) -> "ChatMessage":
        return cls(role="tool", content=content, tool_call_id=tool_call_id)


__all__ = ["ChatMessage", "ChatRole", "CHAT_ROLES"]
