"""Auxiliary logging helpers (formatter, context) used by ``chat_adapters.logging``."""

from .json_formatter import JsonFormatter, ISO
from .logging_context import LogContext

__all__ = ["JsonFormatter", "ISO", "LogContext"]
