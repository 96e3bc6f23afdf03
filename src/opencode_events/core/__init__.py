"""Event decoding pipeline: envelope, mapper, parts and tool states."""

from opencode_events.core.decoder import EventDecoder
from opencode_events.core.envelope import decode_envelope
from opencode_events.core.mapper import decode_event, map_envelope
from opencode_events.core.parts import decode_part
from opencode_events.core.sse import decode_sse_line, strip_data_prefix
from opencode_events.core.tool_state import decode_tool_state, is_running

__all__ = [
    "EventDecoder",
    "decode_envelope",
    "decode_event",
    "decode_part",
    "decode_sse_line",
    "decode_tool_state",
    "is_running",
    "map_envelope",
    "strip_data_prefix",
]
