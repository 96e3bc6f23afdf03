"""Error handling and logging utilities."""

from opencode_events.utils.errors import (
    ParseError,
    ParseErrorCode,
    classify_validation_error,
    log_parse_error,
    truncate_error,
)
from opencode_events.utils.logging import configure_logging, get_logger

__all__ = [
    "ParseError",
    "ParseErrorCode",
    "classify_validation_error",
    "configure_logging",
    "get_logger",
    "log_parse_error",
    "truncate_error",
]
