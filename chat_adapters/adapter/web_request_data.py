"""WebRequestData: the provider-agnostic description of one outbound call.

This is the only wire-adjacent artifact adapters emit. It is built fresh per
call and handed to the transport unchanged.
"""
from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Dict, Iterable, Tuple

Header = Tuple[str, str]


@dataclass(frozen=True)
class WebRequestData:
    """Outbound call description.

    Attributes:
        url: Absolute endpoint URL.
        headers: Ordered ``(name, value)`` pairs; order is kept for
            deterministic comparison, not because providers care.
        payload: JSON-like request body.
    """

    url: str
    headers: Tuple[Header, ...]
    payload: Dict[str, Any]

    @classmethod
    def build(cls, url: str, headers: Iterable[Header], payload: Dict[str, Any]) -> "WebRequestData":
        return cls(url=url, headers=tuple((str(k), str(v)) for k, v in headers), payload=payload)

    def header(self, name: str) -> str | None:
        """Return the first header value matching ``name`` (case-insensitive)."""
        lname = name.lower()
        return next((v for k, v in self.headers if k.lower() == lname), None)

    def header_names(self) -> Tuple[str, ...]:
        return tuple(k for k, _ in self.headers)

    def headers_dict(self) -> Dict[str, str]:
        return dict(self.headers)


__all__ = ["WebRequestData", "Header"]
