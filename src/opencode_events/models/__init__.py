"""Domain models for decoded stream events."""

from opencode_events.models.envelope import Envelope
from opencode_events.models.events import (
    BusyStatus,
    Event,
    IdleStatus,
    MessagePartUpdated,
    MessageUpdated,
    SessionError,
    SessionIdle,
    SessionStatus,
    SessionStatusPayload,
    UnknownEvent,
)
from opencode_events.models.message import (
    CacheUsage,
    MessageInfo,
    MessagePath,
    MessageTime,
    TokenUsage,
)
from opencode_events.models.parts import (
    OtherPart,
    Part,
    PartTime,
    StepFinishPart,
    StepStartPart,
    TextPart,
    ToolPart,
)
from opencode_events.models.tool_state import (
    ToolCompleted,
    ToolError,
    ToolPending,
    ToolRunning,
    ToolState,
    ToolTime,
)

__all__ = [
    "BusyStatus",
    "CacheUsage",
    "Envelope",
    "Event",
    "IdleStatus",
    "MessageInfo",
    "MessagePartUpdated",
    "MessagePath",
    "MessageTime",
    "MessageUpdated",
    "OtherPart",
    "Part",
    "PartTime",
    "SessionError",
    "SessionIdle",
    "SessionStatus",
    "SessionStatusPayload",
    "StepFinishPart",
    "StepStartPart",
    "TextPart",
    "TokenUsage",
    "ToolCompleted",
    "ToolError",
    "ToolPart",
    "ToolPending",
    "ToolRunning",
    "ToolState",
    "ToolTime",
    "UnknownEvent",
]
