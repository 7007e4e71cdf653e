# src/logging/logger.py — v1
"""Logger factory and the two record formatters used by the CLI.

Records carry the current run context (run id, pipeline stage, hub being
built). JSON output nests it under "context"; text output renders it as
``[stage] (u<hub>)`` before the message. Structured values attached with
``extra={"data": {...}}`` are kept in JSON output only.
"""

from __future__ import annotations

import json
import logging
import sys
from datetime import datetime, timezone
from typing import IO, Any

from hubtags.logging.context import LogContext, get_context

ROOT_LOGGER = "hubtags"


def _timestamp(record: logging.LogRecord) -> datetime:
    return datetime.fromtimestamp(record.created, tz=timezone.utc)


class JsonFormatter(logging.Formatter):
    """One JSON object per record."""

    def format(self, record: logging.LogRecord) -> str:
        entry: dict[str, Any] = {
            "timestamp": _timestamp(record).isoformat(),
            "level": record.levelname,
            "logger": record.name,
            "message": record.getMessage(),
        }
        context = get_context().as_dict()
        if context:
            entry["context"] = context

        data = getattr(record, "data", None)
        if data:
            entry["data"] = data

        if record.exc_info and record.exc_info[1] is not None:
            entry["exception"] = self.formatException(record.exc_info)

        return json.dumps(entry, default=str)


class TextFormatter(logging.Formatter):
    """Single-line terminal output."""

    def format(self, record: logging.LogRecord) -> str:
        line = " ".join([
            _timestamp(record).strftime("%Y-%m-%d %H:%M:%S"),
            f"[{record.levelname:8s}]",
            record.name,
            *self._context_tags(get_context()),
            f"- {record.getMessage()}",
        ])
        if record.exc_info and record.exc_info[1] is not None:
            line = f"{line}\n{self.formatException(record.exc_info)}"
        return line

    @staticmethod
    def _context_tags(ctx: LogContext) -> list[str]:
        tags = []
        if ctx.stage:
            tags.append(f"[{ctx.stage}]")
        if ctx.hub is not None:
            tags.append(f"(u{ctx.hub})")
        return tags


_FORMATTERS: dict[str, type[logging.Formatter]] = {
    "json": JsonFormatter,
    "text": TextFormatter,
}


def get_logger(name: str) -> logging.Logger:
    """Get a named logger. Configuration is applied by setup_logging()."""
    return logging.getLogger(f"{ROOT_LOGGER}.{name}")


def setup_logging(
    level: str = "INFO",
    log_format: str = "text",
    log_file: str | None = None,
    rotation: str = "10MB",
    retention: int = 30,
    stream: IO[str] | None = None,
) -> None:
    """Configure the hubtags logger tree.

    Args:
        level: Log level name; unknown names fall back to INFO.
        log_format: "json" or "text".
        log_file: Optional path of a size-rotated log file.
        rotation: Max file size before rotation (e.g. "10MB").
        retention: Number of rotated files to keep.
        stream: Console stream. Defaults to stderr; the report owns stdout.

    Raises:
        ValueError: If log_format is not a known format.
    """
    try:
        formatter = _FORMATTERS[log_format]()
    except KeyError:
        raise ValueError(
            f"Unknown log format {log_format!r}, expected one of {sorted(_FORMATTERS)}"
        ) from None

    root_logger = logging.getLogger(ROOT_LOGGER)
    root_logger.setLevel(getattr(logging, level.upper(), logging.INFO))

    for handler in list(root_logger.handlers):
        root_logger.removeHandler(handler)
        handler.close()

    console_handler = logging.StreamHandler(stream or sys.stderr)
    console_handler.setFormatter(formatter)
    root_logger.addHandler(console_handler)

    if log_file:
        from hubtags.logging.handlers import create_rotating_handler

        file_handler = create_rotating_handler(
            log_file, rotation=rotation, retention=retention
        )
        file_handler.setFormatter(formatter)
        root_logger.addHandler(file_handler)
