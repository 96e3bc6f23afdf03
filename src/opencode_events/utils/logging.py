"""Structured logging setup with JSON format support."""

import json
import logging
import sys
from contextvars import ContextVar
from datetime import datetime, timezone

# Session currently being processed by the consumer, if it sets one
session_id_var: ContextVar[str | None] = ContextVar("session_id", default=None)

# Extra fields copied from log records into JSON output
EXTRA_FIELDS = (
    "event_type",
    "part_type",
    "session_id",
    "error_code",
    "error_type",
    "location",
    "payload",
)


class JsonFormatter(logging.Formatter):
    """JSON log formatter for structured logging."""

    def format(self, record: logging.LogRecord) -> str:
        """Format log record as JSON."""
        log_entry = {
            "timestamp": datetime.now(timezone.utc).isoformat().replace("+00:00", "Z"),
            "level": record.levelname,
            "message": record.getMessage(),
            "logger": record.name,
        }

        session_id = session_id_var.get()
        if session_id:
            log_entry["session_id"] = session_id

        for key in EXTRA_FIELDS:
            if hasattr(record, key):
                value = getattr(record, key)
                if value is not None:
                    log_entry[key] = value

        if record.exc_info:
            log_entry["exception"] = self.formatException(record.exc_info)

        return json.dumps(log_entry)


class TextFormatter(logging.Formatter):
    """Text log formatter for development."""

    def __init__(self):
        super().__init__(
            fmt="%(asctime)s - %(levelname)s - %(name)s - %(message)s",
            datefmt="%Y-%m-%d %H:%M:%S",
        )

    def format(self, record: logging.LogRecord) -> str:
        """Format log record as text with session ID prefix."""
        formatted = super().format(record)
        session_id = session_id_var.get()
        if session_id:
            return f"[{session_id}] {formatted}"
        return formatted


def configure_logging(
    level: str = "INFO",
    format: str = "json",
) -> None:
    """Configure logging.

    Args:
        level: Log level (DEBUG, INFO, WARNING, ERROR).
        format: Output format (json or text).
    """
    root_logger = logging.getLogger()
    root_logger.handlers.clear()

    handler = logging.StreamHandler(sys.stdout)
    handler.setLevel(getattr(logging, level.upper()))

    if format == "json":
        handler.setFormatter(JsonFormatter())
    else:
        handler.setFormatter(TextFormatter())

    root_logger.addHandler(handler)
    root_logger.setLevel(getattr(logging, level.upper()))


def get_logger(name: str) -> logging.Logger:
    """Get a logger with the given name.

    Args:
        name: Logger name, typically __name__.

    Returns:
        Configured logger instance.
    """
    return logging.getLogger(name)
