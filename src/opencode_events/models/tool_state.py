"""Tool call lifecycle states.

A state is a single snapshot classified by its ``status`` discriminant.
Transitions are driven upstream; no ordering between states is enforced here.
"""

from typing import Annotated, Any, Literal, Union

from pydantic import Field

from opencode_events.models._base import WireModel


class ToolTime(WireModel):
    """Tool execution timestamps in epoch milliseconds."""

    start: int
    end: int | None = None

    @property
    def duration_ms(self) -> int | None:
        if self.end is None:
            return None
        return self.end - self.start


class _ToolStateBase(WireModel):
    status: str

    @property
    def is_running(self) -> bool:
        """Whether the tool call is in flight."""
        return self.status == "running"


class ToolPending(_ToolStateBase):
    """Tool call announced; input may still be streaming in."""

    status: Literal["pending"] = "pending"
    input: Any = Field(default_factory=dict)
    raw: str | None = None


class ToolRunning(_ToolStateBase):
    """Tool call executing."""

    status: Literal["running"] = "running"
    input: Any = None
    time: ToolTime


class ToolCompleted(_ToolStateBase):
    """Tool call finished successfully."""

    status: Literal["completed"] = "completed"
    input: Any = None
    output: str | None = None
    title: str | None = None
    metadata: Any = None
    time: ToolTime


class ToolError(_ToolStateBase):
    """Tool call failed."""

    status: Literal["error"] = "error"
    input: Any = None
    error: str | None = None
    time: ToolTime


ToolState = Annotated[
    Union[
        ToolPending,
        ToolRunning,
        ToolCompleted,
        ToolError,
    ],
    Field(discriminator="status"),
]
