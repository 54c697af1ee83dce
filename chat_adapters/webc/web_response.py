"""WebResponse: the raw HTTP result handed back to adapters for translation."""
from __future__ import annotations

import json
from dataclasses import dataclass, field
from typing import Any, Dict

import httpx


def decode_body(content: bytes | str) -> Any:
    """Return ``content`` parsed as JSON, or as text when it is not JSON."""
    text = content.decode("utf-8", errors="replace") if isinstance(content, bytes) else content
    if not text:
        return text
    try:
        return json.loads(text)
    except ValueError:
        return text


@dataclass
class WebResponse:
    """Status, headers and body of one completed HTTP call.

    ``body`` is parsed JSON when the payload decodes as JSON, otherwise the
    text as received.
    """

    status: int
    body: Any
    headers: Dict[str, str] = field(default_factory=dict)

    @property
    def is_success(self) -> bool:
        return 200 <= self.status < 300

    @classmethod
    def from_httpx(cls, response: httpx.Response) -> "WebResponse":
        return cls(
            status=response.status_code,
            body=decode_body(response.content),
            headers=dict(response.headers),
        )


__all__ = ["WebResponse", "decode_body"]
