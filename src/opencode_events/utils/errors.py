"""Error types and helpers for decoding failures."""

import logging
from enum import Enum
from typing import Any

from pydantic import ValidationError

logger = logging.getLogger(__name__)


class ParseErrorCode(str, Enum):
    """Classification of structural decoding failures."""

    INVALID_JSON = "INVALID_JSON"
    INVALID_ENVELOPE = "INVALID_ENVELOPE"
    MISSING_FIELD = "MISSING_FIELD"
    INVALID_FIELD = "INVALID_FIELD"
    UNKNOWN_STATUS = "UNKNOWN_STATUS"


# Maximum length for error details
MAX_ERROR_LENGTH = 500


class ParseError(Exception):
    """A payload could not be decoded into a domain event.

    Raised for invalid JSON and for missing or malformed required fields
    inside a recognized branch. Unknown event and part types never raise.

    Attributes:
        code: Failure classification.
        event_type: Envelope event type, when it was decoded before failing.
        location: Dotted path of the offending field, when known.
    """

    def __init__(
        self,
        message: str,
        code: ParseErrorCode = ParseErrorCode.INVALID_FIELD,
        event_type: str | None = None,
        location: str | None = None,
    ):
        self.code = code
        self.event_type = event_type
        self.location = location
        super().__init__(message)

    def with_event_type(self, event_type: str) -> "ParseError":
        """Attach the envelope event type if none is set yet."""
        if self.event_type is None:
            self.event_type = event_type
        return self


def truncate_error(error: str, max_length: int = MAX_ERROR_LENGTH) -> str:
    """Truncate error message if too long.

    Args:
        error: The error message.
        max_length: Maximum allowed length.

    Returns:
        Truncated error message.
    """
    if len(error) <= max_length:
        return error

    return error[: max_length - 3] + "..."


def _format_location(loc: tuple[Any, ...], prefix: str | None = None) -> str | None:
    parts = [str(p) for p in loc]
    if prefix:
        parts.insert(0, prefix)
    return ".".join(parts) or None


def classify_validation_error(exc: ValidationError) -> ParseErrorCode:
    """Classify a pydantic validation error to a parse error code.

    Only the first reported error is considered.

    Args:
        exc: The validation error to classify.

    Returns:
        Appropriate error code.
    """
    errors = exc.errors()
    if not errors:
        return ParseErrorCode.INVALID_FIELD

    error_type = errors[0]["type"]
    if error_type in ("missing", "union_tag_not_found"):
        return ParseErrorCode.MISSING_FIELD
    if error_type == "json_invalid":
        return ParseErrorCode.INVALID_JSON
    if error_type == "union_tag_invalid":
        return ParseErrorCode.UNKNOWN_STATUS
    return ParseErrorCode.INVALID_FIELD


def parse_error_from_validation(
    exc: ValidationError,
    what: str,
    location_prefix: str | None = None,
    max_length: int = MAX_ERROR_LENGTH,
) -> ParseError:
    """Build a ParseError from a pydantic validation error.

    Args:
        exc: The validation error.
        what: Short description of the object being decoded.
        location_prefix: Dotted path of the object within the envelope.
        max_length: Maximum message length.

    Returns:
        ParseError with code and location filled in. The caller raises it
        ``from exc``.
    """
    errors = exc.errors()
    location = None
    detail = str(exc)
    if errors:
        first = errors[0]
        location = _format_location(first["loc"], location_prefix)
        detail = first["msg"]

    message = f"Invalid {what}: {detail}"
    if location:
        message = f"Invalid {what} at '{location}': {detail}"

    return ParseError(
        truncate_error(message, max_length),
        code=classify_validation_error(exc),
        location=location,
    )


def log_parse_error(
    exc: ParseError,
    max_length: int = MAX_ERROR_LENGTH,
    **context: Any,
) -> None:
    """Log a parse error with context.

    Args:
        exc: The parse error that occurred.
        max_length: Maximum length of the logged message.
        **context: Additional context to include in log.
    """
    log_extra = {
        "error_code": exc.code.value,
        "error_type": type(exc.__cause__ or exc).__name__,
        "event_type": exc.event_type,
        **context,
    }
    logger.warning(
        f"Failed to decode event: {truncate_error(str(exc), max_length)}",
        extra=log_extra,
    )
