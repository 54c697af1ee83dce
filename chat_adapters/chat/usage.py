"""Token usage metadata attached to responses and stream end events."""
from __future__ import annotations

from dataclasses import dataclass, asdict
from typing import Any, Dict, Optional


@dataclass(frozen=True)
class MetaUsage:
    """Token counts reported by the provider.

    ``total_tokens`` is derived from the other two when the provider omits it.
    """

    input_tokens: Optional[int] = None
    output_tokens: Optional[int] = None
    total_tokens: Optional[int] = None

    def __post_init__(self) -> None:
        if self.total_tokens is None and self.input_tokens is not None and self.output_tokens is not None:
            object.__setattr__(self, "total_tokens", self.input_tokens + self.output_tokens)

    def is_empty(self) -> bool:
        return self.input_tokens is None and self.output_tokens is None and self.total_tokens is None

    def to_dict(self) -> Dict[str, Any]:
        return asdict(self)


__all__ = ["MetaUsage"]
