"""Typed decoder for the OpenCode server event stream."""

__version__ = "0.1.0"

from opencode_events.core import (
    EventDecoder,
    decode_envelope,
    decode_event,
    decode_part,
    decode_sse_line,
    decode_tool_state,
    is_running,
    map_envelope,
)
from opencode_events.utils.errors import ParseError, ParseErrorCode

__all__ = [
    "EventDecoder",
    "ParseError",
    "ParseErrorCode",
    "__version__",
    "decode_envelope",
    "decode_event",
    "decode_part",
    "decode_sse_line",
    "decode_tool_state",
    "is_running",
    "map_envelope",
]
