"""
Logging setup for the warnings client and its read API.

Two output styles share one set of structured fields:

    production   → one JSON object per line
    otherwise    → coloured single line, structured fields appended as k=v

The pipeline attaches its measurements through ``extra=`` (``url``,
``body_chars``, ``warning_count``, ``duration_ms``); the API middleware adds
``status_code``/``endpoint`` and a per-request context (request id, method,
path) held in a ContextVar.

Usage:
    import logging
    from dwd_alerts.core.logging_config import setup_logging

    setup_logging()
    logging.getLogger(__name__).info("Fetched", extra={"warning_count": 42})
"""

from __future__ import annotations

import json
import logging
import sys
from contextvars import ContextVar
from datetime import datetime, timezone
from typing import IO, Any, Dict, Optional

from dwd_alerts.core.config import settings

_request_context: ContextVar[Dict[str, Any]] = ContextVar(
    "request_context", default={}
)

# Record attributes promoted to structured fields, in output order
STRUCTURED_FIELDS = (
    "url", "body_chars", "warning_count", "duration_ms",
    "status_code", "endpoint",
)

# Third-party loggers that only matter when something goes wrong
_QUIET_LOGGERS = ("httpx", "httpcore", "uvicorn.access")


def set_request_context(**kwargs: Any) -> None:
    """Replace the request context; call with no arguments to clear it."""
    _request_context.set(kwargs)


def get_request_context() -> Dict[str, Any]:
    return _request_context.get()


def _structured_fields(record: logging.LogRecord) -> Dict[str, Any]:
    return {
        key: getattr(record, key)
        for key in STRUCTURED_FIELDS
        if hasattr(record, key)
    }


class JSONFormatter(logging.Formatter):
    """One JSON object per record, for log shippers."""

    def format(self, record: logging.LogRecord) -> str:
        entry: Dict[str, Any] = {
            "timestamp": datetime.fromtimestamp(record.created, timezone.utc).isoformat(),
            "level": record.levelname,
            "logger": record.name,
            "message": record.getMessage(),
        }
        entry.update(_structured_fields(record))

        ctx = get_request_context()
        if ctx:
            entry["request"] = ctx

        if record.exc_info and record.exc_info[1]:
            entry["exception"] = {
                "type": type(record.exc_info[1]).__name__,
                "message": str(record.exc_info[1]),
            }

        return json.dumps(entry, default=str)


class ConsoleFormatter(logging.Formatter):
    """``12:00:01 INFO  [req-id] logger: message  key=value ...``"""

    LEVEL_COLORS = {
        "DEBUG": "\033[36m",
        "INFO": "\033[32m",
        "WARNING": "\033[33m",
        "ERROR": "\033[31m",
        "CRITICAL": "\033[35m",
    }
    RESET = "\033[0m"

    def __init__(self, color: bool = True):
        super().__init__()
        self.color = color

    def format(self, record: logging.LogRecord) -> str:
        level = f"{record.levelname:8s}"
        if self.color:
            level = f"{self.LEVEL_COLORS.get(record.levelname, '')}{level}{self.RESET}"

        request_id = get_request_context().get("request_id")
        prefix = f" [{request_id[:8]}]" if request_id else ""

        line = (
            f"{self.formatTime(record, '%H:%M:%S')} {level}{prefix} "
            f"{record.name}: {record.getMessage()}"
        )

        fields = _structured_fields(record)
        if fields:
            line += "  " + " ".join(f"{k}={v}" for k, v in fields.items())

        if record.exc_info and record.exc_info[1]:
            line += f"\n  {type(record.exc_info[1]).__name__}: {record.exc_info[1]}"

        return line


def setup_logging(
    level: Optional[str] = None,
    *,
    json_output: Optional[bool] = None,
    stream: Optional[IO[str]] = None,
) -> logging.Handler:
    """
    Install a single stream handler on the root logger.

    ``level`` defaults to ``settings.LOG_LEVEL``; ``json_output`` defaults to
    ``settings.is_production``. Existing root handlers are replaced. Returns
    the installed handler.
    """
    level_name = (level or settings.LOG_LEVEL).upper()
    if json_output is None:
        json_output = settings.is_production

    handler = logging.StreamHandler(stream if stream is not None else sys.stdout)
    handler.setFormatter(JSONFormatter() if json_output else ConsoleFormatter())

    root = logging.getLogger()
    root.handlers.clear()
    root.addHandler(handler)
    root.setLevel(getattr(logging, level_name, logging.INFO))

    for name in _QUIET_LOGGERS:
        logging.getLogger(name).setLevel(logging.WARNING)

    return handler
