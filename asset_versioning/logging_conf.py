"""Logging configuration for the asset versioning tools.

Emits one JSON object per line so rewrite notices can be grepped out of
deploy logs. setup_logging() is idempotent.
"""
from __future__ import annotations

import json
import logging
import os
import sys
from datetime import UTC, datetime
from logging import Handler, LogRecord
from typing import Any, TextIO

_DEFAULT_LEVEL = os.getenv("LOG_LEVEL", "INFO").upper()

# Attributes every LogRecord carries; anything else came in via `extra=`.
_RECORD_ATTRS = frozenset(vars(logging.makeLogRecord({}))) | {"message", "asctime", "taskName"}


class JsonFormatter(logging.Formatter):
    """Render a record as a single JSON line.

    Structured fields passed with ``logger.info("...", extra={...})`` are
    merged into the payload without overwriting ts/level/logger/message.
    """

    def format(self, record: LogRecord) -> str:  # type: ignore[override]
        payload: dict[str, Any] = {
            "ts": datetime.now(UTC).isoformat(timespec="milliseconds"),
            "level": record.levelname,
            "logger": record.name,
            "message": record.getMessage(),
        }
        for key, value in record.__dict__.items():
            if key in _RECORD_ATTRS or key in payload:
                continue
            payload[key] = value
        if record.exc_info:
            payload["exc_info"] = self.formatException(record.exc_info)
        return json.dumps(payload, ensure_ascii=False, default=str)


def _make_stream_handler(level: int, stream: TextIO | None = None) -> Handler:
    handler = logging.StreamHandler(stream=stream or sys.stderr)
    handler.setLevel(level)
    handler.setFormatter(JsonFormatter())
    return handler


def setup_logging(level: str | int = _DEFAULT_LEVEL, stream: TextIO | None = None) -> None:
    """Attach a JSON handler to the package logger.

    Only the ``asset_versioning`` logger is configured so host applications
    keep control of the root logger. Calling this twice is a no-op.
    """
    if isinstance(level, str):
        level = getattr(logging, level.upper(), logging.INFO)

    pkg = logging.getLogger("asset_versioning")
    if pkg.handlers:
        return
    pkg.setLevel(level)
    pkg.addHandler(_make_stream_handler(level, stream))


def get_logger(name: str | None = None) -> logging.Logger:
    """Return a logger under the package namespace.

    Usage: logger = get_logger("domain.paths")
    """
    if not name:
        return logging.getLogger("asset_versioning")
    if name.startswith("asset_versioning"):
        return logging.getLogger(name)
    return logging.getLogger(f"asset_versioning.{name}")
