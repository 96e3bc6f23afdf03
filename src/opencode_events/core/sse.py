"""Decoding of single Server-Sent Event data lines.

Reading the stream, dropping comment and keepalive lines and joining
multi-line frames belong to the transport. This module only handles one
already-isolated ``data:`` line.
"""

from opencode_events.core.mapper import decode_event
from opencode_events.models.events import Event
from opencode_events.utils.errors import ParseError, ParseErrorCode

# SSE data field prefix
SSE_DATA_PREFIX = "data: "


def strip_data_prefix(line: str) -> str:
    """Remove the ``data:`` field prefix from an SSE line.

    A single optional space after the colon is removed, as the SSE format
    specifies. Trailing line terminators are dropped.

    Args:
        line: One SSE line.

    Returns:
        The JSON payload.

    Raises:
        ParseError: If the line is not a data line.
    """
    line = line.rstrip("\r\n")
    if line.startswith(SSE_DATA_PREFIX):
        return line[len(SSE_DATA_PREFIX) :]
    if line.startswith("data:"):
        return line[len("data:") :]

    raise ParseError(
        f"Expected an SSE data line, got {line[:40]!r}",
        code=ParseErrorCode.INVALID_ENVELOPE,
    )


def decode_sse_line(line: str) -> Event:
    """Decode one SSE data line into a domain event.

    Args:
        line: A line of the form ``data: {...}``.

    Returns:
        The domain event.

    Raises:
        ParseError: If the line is not a data line or its payload is malformed.
    """
    return decode_event(strip_data_prefix(line))
