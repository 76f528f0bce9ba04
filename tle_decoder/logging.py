"""Structured logging helpers for tle-decoder."""

from __future__ import annotations

import contextlib
import contextvars
import datetime as _dt
import json
import logging
import sys
from typing import Any, Dict, Iterable, Optional

from .config import load_config

_LOGGER_NAME = "tle_decoder"
_CONTEXT: contextvars.ContextVar[Dict[str, Any]] = contextvars.ContextVar(
    "tle_decoder_log_context", default={}
)


def _resolve_level(level: Optional[str | int]) -> int:
    if isinstance(level, int):
        return level
    if level is None:
        level = load_config().log_level
    try:
        return int(level)
    except (TypeError, ValueError):
        numeric = logging.getLevelName(str(level).upper())
        if isinstance(numeric, int):
            return numeric
    return logging.WARNING


class JSONFormatter(logging.Formatter):
    """Render log records as JSON with contextual metadata."""

    _SKIP_FIELDS: Iterable[str] = {
        "args",
        "asctime",
        "created",
        "exc_info",
        "exc_text",
        "filename",
        "funcName",
        "levelname",
        "levelno",
        "lineno",
        "message",
        "module",
        "msecs",
        "msg",
        "name",
        "pathname",
        "process",
        "processName",
        "relativeCreated",
        "stack_info",
        "taskName",
        "thread",
        "threadName",
    }

    def format(self, record: logging.LogRecord) -> str:
        payload: Dict[str, Any] = {
            "timestamp": _dt.datetime.now(_dt.timezone.utc).isoformat(),
            "level": record.levelname,
            "logger": record.name,
            "message": record.getMessage(),
        }

        context = _CONTEXT.get()
        if context:
            payload["context"] = dict(context)

        extras = {k: v for k, v in record.__dict__.items() if k not in self._SKIP_FIELDS}
        if extras:
            payload["extra"] = extras

        if record.exc_info:
            payload["exception"] = self.formatException(record.exc_info)

        return json.dumps(payload, default=_json_fallback, sort_keys=False)


def _json_fallback(value: Any) -> Any:
    try:
        return repr(value)
    except Exception:  # pragma: no cover - defensive
        return "<unserializable>"


def configure_logging(
    level: Optional[str | int] = None,
    stream: Optional[Any] = None,
    force: bool = False,
) -> logging.Logger:
    """Attach a JSON handler to the package logger.

    The library never calls this itself; applications opt in.
    """

    logger = logging.getLogger(_LOGGER_NAME)
    if force:
        logger.handlers.clear()
    if logger.handlers and not force:
        return logger

    handler = logging.StreamHandler(stream or sys.stderr)
    handler.setFormatter(JSONFormatter())

    logger.addHandler(handler)
    logger.setLevel(_resolve_level(level))
    logger.propagate = False

    return logger


def get_logger(name: Optional[str] = None) -> logging.Logger:
    """Return a child logger of the package logger."""

    base = _LOGGER_NAME
    if not name:
        return logging.getLogger(base)
    if name.startswith(base):
        return logging.getLogger(name)
    return logging.getLogger(f"{base}.{name}")


@contextlib.contextmanager
def log_context(**kwargs: Any):
    """Bind metadata to every record emitted inside the block."""

    current = dict(_CONTEXT.get())
    current.update({k: v for k, v in kwargs.items() if v is not None})
    token = _CONTEXT.set(current)
    try:
        yield
    finally:
        _CONTEXT.reset(token)


__all__ = ["JSONFormatter", "configure_logging", "get_logger", "log_context"]
