"""Structured logging utilities for the adapter layer.

All adapter modules obtain loggers through :func:`get_logger`, which hangs them
under one shared ``chat_adapters`` logger. That base logger owns a single
stderr handler (JSON by default) whose level comes from
``CHAT_ADAPTERS_LOG_LEVEL``. Child loggers carry no handlers of their own and
propagate to it, so reconfiguring the base logger affects every adapter.

Events are emitted through :func:`log_event` as one JSON object per line.
Credential values must never be passed as fields.
"""
from __future__ import annotations

import json
import logging
import os
import sys
from typing import Any, Optional

from .log_support import JsonFormatter, LogContext

BASE_LOGGER_NAME = "chat_adapters"
LOG_LEVEL_ENV = "CHAT_ADAPTERS_LOG_LEVEL"

_BASE_LOGGER_ATTR = "_chat_adapters_logger_initialized"
_CONSOLE_HANDLER_ATTR = "_chat_adapters_console_handler"
_PLAIN_FORMAT = "%(asctime)s %(levelname)s %(name)s %(message)s"


def _parse_level(value: Optional[str], default: int = logging.INFO) -> int:
    """Parse a level name (``DEBUG``, ``warn`` ...) into a logging constant.

    Unknown or empty values yield ``default``.
    """
    if not value:
        return default
    mapping = {
        "DEBUG": logging.DEBUG,
        "INFO": logging.INFO,
        "WARN": logging.WARNING,
        "WARNING": logging.WARNING,
        "ERROR": logging.ERROR,
        "CRITICAL": logging.CRITICAL,
    }
    return mapping.get(value.strip().upper(), default)


def _make_console_handler(json_mode: bool, level: int) -> logging.Handler:
    handler = logging.StreamHandler(sys.stderr)
    handler.setLevel(level)
    handler.setFormatter(JsonFormatter() if json_mode else logging.Formatter(_PLAIN_FORMAT))
    setattr(handler, _CONSOLE_HANDLER_ATTR, True)
    return handler


def _ensure_base_logger(json_mode: bool, level: int) -> logging.Logger:
    """Initialize (once) and return the shared ``chat_adapters`` logger."""
    logger = logging.getLogger(BASE_LOGGER_NAME)
    if getattr(logger, _BASE_LOGGER_ATTR, False):
        return logger
    desired_level = _parse_level(os.getenv(LOG_LEVEL_ENV), default=level)
    logger.setLevel(desired_level)
    logger.handlers[:] = [
        h for h in logger.handlers if not getattr(h, _CONSOLE_HANDLER_ATTR, False)
    ]
    logger.addHandler(_make_console_handler(json_mode, desired_level))
    logger.propagate = False
    setattr(logger, _BASE_LOGGER_ATTR, True)
    return logger


def get_logger(
    name: str = BASE_LOGGER_NAME, json_mode: bool = True, level: int = logging.INFO
) -> logging.Logger:
    """Return a logger under the shared ``chat_adapters`` hierarchy.

    Names outside the hierarchy are prefixed so every adapter logger
    propagates to the base handler (``"openai"`` -> ``"chat_adapters.openai"``).
    """
    base_logger = _ensure_base_logger(json_mode=json_mode, level=level)
    if name == BASE_LOGGER_NAME:
        return base_logger
    if not name.startswith(BASE_LOGGER_NAME + "."):
        name = f"{BASE_LOGGER_NAME}.{name}"
    logger = logging.getLogger(name)
    logger.propagate = True
    return logger


def configure_logger(*, level: int | str | None = None, json_mode: Optional[bool] = None) -> logging.Logger:
    """Reconfigure the shared logger's level and/or formatter at runtime.

    ``None`` arguments leave the current setting untouched.
    """
    logger = get_logger()
    if level is not None:
        logger.setLevel(_parse_level(level, default=logger.level) if isinstance(level, str) else level)
    for h in logger.handlers:
        if not getattr(h, _CONSOLE_HANDLER_ATTR, False):
            continue
        h.setLevel(logger.level)
        if json_mode is not None:
            h.setFormatter(JsonFormatter() if json_mode else logging.Formatter(_PLAIN_FORMAT))
    return logger


def log_event(
    logger: logging.Logger,
    event: str,
    ctx: LogContext | None = None,
    *,
    level: int = logging.INFO,
    keep_none: bool = False,
    **fields: Any,
) -> None:
    """Emit a structured log event as a single JSON line.

    Parameters
    ----------
    logger:
        Logger obtained from :func:`get_logger`.
    event:
        Dotted event name (e.g. ``request.build``).
    ctx:
        Optional correlation context, merged shallowly before ``fields``.
    level:
        Logging level for the record.
    keep_none:
        Preserve keys whose value is ``None`` (encoded as ``null``).
    **fields:
        JSON-serializable key/value pairs.
    """
    if not logger.isEnabledFor(level):
        return
    payload: dict[str, Any] = {"event": event}
    if ctx:
        payload |= ctx.to_dict()
    if keep_none:
        payload.update(fields)
    else:
        payload.update({k: v for k, v in fields.items() if v is not None})
    logger.log(level, json.dumps(payload, ensure_ascii=False, default=str))


__all__ = [
    "BASE_LOGGER_NAME",
    "LOG_LEVEL_ENV",
    "LogContext",
    "get_logger",
    "configure_logger",
    "log_event",
]
