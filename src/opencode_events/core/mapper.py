"""Domain event mapping: dispatch on the envelope event type.

Control flows strictly downward: mapper, then part decoder, then tool state
decoder. Every call is independent; nothing is kept between events.
"""

import logging
from collections.abc import Callable
from typing import Any

from pydantic import ValidationError

from opencode_events.core.envelope import decode_envelope, require_properties
from opencode_events.core.parts import decode_part
from opencode_events.models.envelope import Envelope
from opencode_events.models.events import (
    Event,
    MessagePartUpdated,
    MessageUpdated,
    SessionError,
    SessionIdle,
    SessionStatus,
    UnknownEvent,
)
from opencode_events.models.message import MessageInfo
from opencode_events.utils.errors import ParseError, ParseErrorCode, parse_error_from_validation

logger = logging.getLogger(__name__)


def _map_message_updated(properties: dict[str, Any]) -> MessageUpdated:
    info = properties.get("info")
    if info is None:
        return MessageUpdated()
    if not isinstance(info, dict):
        raise ParseError(
            f"Expected 'info' to be an object, got {type(info).__name__}",
            location="info",
        )
    try:
        return MessageUpdated(info=MessageInfo.model_validate(info))
    except ValidationError as e:
        raise parse_error_from_validation(e, "message info", location_prefix="info") from e


def _map_message_part_updated(properties: dict[str, Any]) -> MessagePartUpdated:
    if "part" not in properties:
        raise ParseError(
            "Missing required field 'part'",
            code=ParseErrorCode.MISSING_FIELD,
            location="part",
        )
    part = decode_part(properties["part"])
    try:
        return MessagePartUpdated(part=part, delta=properties.get("delta"))
    except ValidationError as e:
        raise parse_error_from_validation(e, "message part event") from e


def _validate(
    model: type[SessionStatus | SessionIdle | SessionError], what: str
) -> Callable[[dict[str, Any]], Event]:
    def mapper(properties: dict[str, Any]) -> Event:
        # "type" is the model's own variant tag, never read from properties
        fields = {key: value for key, value in properties.items() if key != "type"}
        try:
            return model.model_validate(fields)
        except ValidationError as e:
            raise parse_error_from_validation(e, what) from e

    return mapper


EVENT_MAPPERS: dict[str, Callable[[dict[str, Any]], Event]] = {
    "message.updated": _map_message_updated,
    "message.part.updated": _map_message_part_updated,
    "session.status": _validate(SessionStatus, "session status"),
    "session.idle": _validate(SessionIdle, "session idle event"),
    "session.error": _validate(SessionError, "session error event"),
}


def map_envelope(
    envelope: Envelope,
    unknown_log_level: int = logging.DEBUG,
) -> Event:
    """Map a decoded envelope to its domain event.

    Args:
        envelope: Decoded envelope.
        unknown_log_level: Log level used when the event type is not modeled.

    Returns:
        The domain event. Unrecognized event types become UnknownEvent.

    Raises:
        ParseError: If a recognized event lacks a required field or has one
            of the wrong shape.
    """
    mapper = EVENT_MAPPERS.get(envelope.event_type)
    if mapper is None:
        logger.log(
            unknown_log_level,
            f"Unknown event type: {envelope.event_type}",
            extra={"event_type": envelope.event_type},
        )
        return UnknownEvent(tag=envelope.event_type)

    try:
        return mapper(require_properties(envelope))
    except ParseError as e:
        e.with_event_type(envelope.event_type)
        raise


def decode_event(payload: str | bytes) -> Event:
    """Decode one JSON payload into a domain event.

    Args:
        payload: One complete JSON object from the event stream.

    Returns:
        The domain event.

    Raises:
        ParseError: If the payload is malformed.
    """
    return map_envelope(decode_envelope(payload))
