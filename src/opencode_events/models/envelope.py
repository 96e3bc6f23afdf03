"""Outer shape of every event on the stream."""

from typing import Any

from pydantic import Field

from opencode_events.models._base import WireModel


class Envelope(WireModel):
    """Event type discriminant plus the unconsumed property bag."""

    event_type: str = Field(alias="type")
    properties: Any = Field(default_factory=dict)
