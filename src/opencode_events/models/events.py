"""Domain events decoded from the OpenCode event stream.

One model per recognized envelope ``type``, plus ``UnknownEvent`` for
everything else.
"""

from typing import Annotated, Any, Literal, Union

from pydantic import Field

from opencode_events.models._base import WireModel
from opencode_events.models.message import MessageInfo
from opencode_events.models.parts import Part


# =============================================================================
# Session Status Payload
# =============================================================================


class BusyStatus(WireModel):
    """Session is processing a prompt."""

    type: Literal["busy"] = "busy"


class IdleStatus(WireModel):
    """Session is waiting for input."""

    type: Literal["idle"] = "idle"


SessionStatusPayload = Annotated[
    Union[BusyStatus, IdleStatus],
    Field(discriminator="type"),
]


# =============================================================================
# Message Events
# =============================================================================


class MessageUpdated(WireModel):
    """Message metadata changed. ``info`` is None when upstream omits it."""

    type: Literal["message.updated"] = "message.updated"
    info: MessageInfo | None = None


class MessagePartUpdated(WireModel):
    """A message part was created or changed."""

    type: Literal["message.part.updated"] = "message.part.updated"
    part: Part
    delta: str | None = None


# =============================================================================
# Session Events
# =============================================================================


class SessionStatus(WireModel):
    """Session status changed."""

    type: Literal["session.status"] = "session.status"
    session_id: str = Field(alias="sessionID")
    status: SessionStatusPayload


class SessionIdle(WireModel):
    """Session finished processing."""

    type: Literal["session.idle"] = "session.idle"
    session_id: str = Field(alias="sessionID")


class SessionError(WireModel):
    """Session reported an error.

    ``error`` is the raw upstream value; its schema is not stable.
    """

    type: Literal["session.error"] = "session.error"
    session_id: str | None = Field(default=None, alias="sessionID")
    error: Any = None

    @property
    def error_message(self) -> str | None:
        """The ``message`` field of the error value, when it has one."""
        if isinstance(self.error, dict):
            message = self.error.get("message")
            if isinstance(message, str):
                return message
        return None


# =============================================================================
# Catch-all
# =============================================================================


class UnknownEvent(WireModel):
    """Event type that is not modeled. ``tag`` is the type as received."""

    type: Literal["unknown"] = "unknown"
    tag: str


Event = Union[
    MessageUpdated,
    MessagePartUpdated,
    SessionStatus,
    SessionIdle,
    SessionError,
    UnknownEvent,
]
