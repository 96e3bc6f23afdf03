"""Message metadata models carried by ``message.updated`` events."""

from typing import Any, Literal

from pydantic import Field, model_validator

from opencode_events.models._base import WireModel


class CacheUsage(WireModel):
    """Prompt cache token counts."""

    read: int | None = None
    write: int | None = None


class TokenUsage(WireModel):
    """Token usage breakdown reported for assistant messages and steps."""

    input: int | None = None
    output: int | None = None
    reasoning: int | None = None
    cache: CacheUsage | None = None
    total: int | None = None

    @property
    def cache_read(self) -> int | None:
        return self.cache.read if self.cache else None

    @property
    def cache_write(self) -> int | None:
        return self.cache.write if self.cache else None


class MessageTime(WireModel):
    """Message timestamps in epoch milliseconds."""

    created: int
    completed: int | None = None


class MessagePath(WireModel):
    """Working directory pair of an assistant message."""

    cwd: str
    root: str


class MessageInfo(WireModel):
    """Metadata of a user or assistant message.

    User and assistant messages share only ``id``, ``role`` and ``time``;
    everything else is optional. User messages nest the model attribution
    under ``model`` while assistant messages carry ``modelID`` and
    ``providerID`` at the top level; both populate ``model_id`` and
    ``provider_id``.
    """

    id: str
    role: Literal["user", "assistant"]
    time: MessageTime
    session_id: str | None = Field(default=None, alias="sessionID")
    parent_id: str | None = Field(default=None, alias="parentID")
    model_id: str | None = Field(default=None, alias="modelID")
    provider_id: str | None = Field(default=None, alias="providerID")
    agent: str | None = None
    mode: str | None = None
    path: MessagePath | None = None
    cost: float | None = None
    tokens: TokenUsage | None = None
    finish: str | None = None
    error: Any = None

    @model_validator(mode="before")
    @classmethod
    def _lift_nested_model(cls, data: Any) -> Any:
        """Copy ``model.modelID``/``model.providerID`` to the top level."""
        if not isinstance(data, dict):
            return data
        model = data.get("model")
        if not isinstance(model, dict):
            return data

        lifted = dict(data)
        for key in ("modelID", "providerID"):
            if key not in lifted and key in model:
                lifted[key] = model[key]
        return lifted

    @property
    def created_at(self) -> int:
        """Creation timestamp in epoch milliseconds."""
        return self.time.created
