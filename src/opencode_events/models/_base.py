"""Shared base for domain models decoded from the event stream."""

from pydantic import BaseModel, ConfigDict


class WireModel(BaseModel):
    """Immutable model populated from camelCase wire payloads.

    Unknown wire fields are ignored so upstream schema additions never break
    decoding of the fields that are modeled.
    """

    model_config = ConfigDict(
        frozen=True,
        populate_by_name=True,
        extra="ignore",
        protected_namespaces=(),
    )
