"""Message part models carried by ``message.part.updated`` events."""

from typing import Any, Literal, Union

from pydantic import Field

from opencode_events.models._base import WireModel
from opencode_events.models.message import TokenUsage
from opencode_events.models.tool_state import ToolState


class PartTime(WireModel):
    """Part timestamps in epoch milliseconds."""

    start: int
    end: int | None = None


class TextPart(WireModel):
    """A span of message text."""

    type: Literal["text"] = "text"
    id: str
    session_id: str | None = Field(default=None, alias="sessionID")
    message_id: str | None = Field(default=None, alias="messageID")
    text: str
    time: PartTime | None = None


class ToolPart(WireModel):
    """A tool invocation and its latest lifecycle snapshot.

    ``metadata`` is the part-level vendor value, a sibling of ``state``. It is
    kept apart from any ``metadata`` inside a completed state.
    """

    type: Literal["tool"] = "tool"
    id: str
    session_id: str = Field(alias="sessionID")
    message_id: str = Field(alias="messageID")
    call_id: str = Field(alias="callID")
    tool: str | None = None
    state: ToolState | None = None
    metadata: Any = None


class StepStartPart(WireModel):
    """Start of an agent reasoning/tool step."""

    type: Literal["step-start"] = "step-start"
    id: str
    session_id: str = Field(alias="sessionID")
    message_id: str = Field(alias="messageID")


class StepFinishPart(WireModel):
    """End of an agent step with its usage summary."""

    type: Literal["step-finish"] = "step-finish"
    id: str | None = None
    session_id: str | None = Field(default=None, alias="sessionID")
    message_id: str | None = Field(default=None, alias="messageID")
    reason: str | None = None
    cost: float | None = None
    tokens: TokenUsage | None = None


class OtherPart(WireModel):
    """Any part type that is not modeled. Carries no data."""

    type: Literal["other"] = "other"


Part = Union[
    TextPart,
    ToolPart,
    StepStartPart,
    StepFinishPart,
    OtherPart,
]
