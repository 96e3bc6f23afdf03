"""Tool state decoding, keyed by the ``status`` discriminant."""

from typing import Any

from pydantic import TypeAdapter, ValidationError

from opencode_events.models.tool_state import ToolState
from opencode_events.utils.errors import ParseError, ParseErrorCode, parse_error_from_validation

_TOOL_STATE_ADAPTER: TypeAdapter[ToolState] = TypeAdapter(ToolState)


def decode_tool_state(data: Any) -> ToolState:
    """Decode a tool ``state`` object into its lifecycle variant.

    Args:
        data: The ``state`` sub-object of a tool part.

    Returns:
        ToolPending, ToolRunning, ToolCompleted or ToolError.

    Raises:
        ParseError: If the object is malformed or its status is not one of
            pending, running, completed or error.
    """
    if not isinstance(data, dict):
        raise ParseError(
            f"Expected tool state to be an object, got {type(data).__name__}",
            code=ParseErrorCode.INVALID_FIELD,
            location="state",
        )
    try:
        return _TOOL_STATE_ADAPTER.validate_python(data)
    except ValidationError as e:
        raise parse_error_from_validation(e, "tool state", location_prefix="state") from e


def is_running(state: ToolState | None) -> bool:
    """Check whether a tool call is in flight.

    Args:
        state: Tool state, or None when the part has no state yet.

    Returns:
        True only for ToolRunning.
    """
    return state is not None and state.is_running
