"""Envelope decoding: JSON text to event type plus property bag."""

from pydantic import ValidationError

from opencode_events.models.envelope import Envelope
from opencode_events.utils.errors import ParseError, ParseErrorCode, parse_error_from_validation


def decode_envelope(payload: str | bytes) -> Envelope:
    """Decode a single JSON payload into an Envelope.

    Args:
        payload: One complete JSON object, already isolated from stream framing.

    Returns:
        Envelope with the event type and the unconsumed properties.

    Raises:
        ParseError: If the payload is not a JSON object with a string ``type``.
    """
    try:
        return Envelope.model_validate_json(payload)
    except ValidationError as e:
        error = parse_error_from_validation(e, "event envelope")
        if error.code != ParseErrorCode.INVALID_JSON:
            error.code = ParseErrorCode.INVALID_ENVELOPE
        raise error from e


def require_properties(envelope: Envelope) -> dict:
    """Return the envelope properties, which must be a JSON object.

    Raises:
        ParseError: If the properties are not an object.
    """
    if not isinstance(envelope.properties, dict):
        raise ParseError(
            f"Expected 'properties' to be an object, "
            f"got {type(envelope.properties).__name__}",
            code=ParseErrorCode.INVALID_ENVELOPE,
            event_type=envelope.event_type,
            location="properties",
        )
    return envelope.properties
