"""Part decoding, keyed by the part ``type`` discriminant."""

import logging
from typing import Any

from pydantic import ValidationError

from opencode_events.core.tool_state import decode_tool_state
from opencode_events.models.parts import (
    OtherPart,
    Part,
    StepFinishPart,
    StepStartPart,
    TextPart,
    ToolPart,
)
from opencode_events.utils.errors import ParseError, ParseErrorCode, parse_error_from_validation

logger = logging.getLogger(__name__)

# Part types with a typed model. Everything else decodes to OtherPart.
PART_MODELS: dict[str, type[TextPart | ToolPart | StepStartPart | StepFinishPart]] = {
    "text": TextPart,
    "tool": ToolPart,
    "step-start": StepStartPart,
    "step-finish": StepFinishPart,
}


def decode_part(data: Any) -> Part:
    """Decode a ``part`` object into its variant.

    Unmodeled part types (for example ``reasoning``) are acknowledged as
    OtherPart without keeping their content.

    Args:
        data: The ``part`` sub-object of a message.part.updated event.

    Returns:
        The decoded part.

    Raises:
        ParseError: If the object is not a JSON object, or a modeled part
            lacks required fields.
    """
    if not isinstance(data, dict):
        raise ParseError(
            f"Expected 'part' to be an object, got {type(data).__name__}",
            code=ParseErrorCode.INVALID_FIELD,
            location="part",
        )

    part_type = data.get("type")
    model = PART_MODELS.get(part_type) if isinstance(part_type, str) else None
    if model is None:
        logger.debug(f"Unmodeled part type: {part_type!r}", extra={"part_type": part_type})
        return OtherPart()

    if model is ToolPart:
        return _decode_tool_part(data)

    try:
        return model.model_validate(data)
    except ValidationError as e:
        raise parse_error_from_validation(e, f"{part_type} part", location_prefix="part") from e


def _decode_tool_part(data: dict[str, Any]) -> ToolPart:
    """Decode a tool part, delegating ``state`` to the tool state decoder."""
    state_data = data.get("state")
    state = None
    if state_data is not None:
        try:
            state = decode_tool_state(state_data)
        except ParseError as e:
            e.location = f"part.{e.location}" if e.location else "part.state"
            raise

    fields = {key: value for key, value in data.items() if key != "state"}
    try:
        part = ToolPart.model_validate(fields)
    except ValidationError as e:
        raise parse_error_from_validation(e, "tool part", location_prefix="part") from e

    return part.model_copy(update={"state": state})
