"""Models for the Gamma public search endpoint."""

from __future__ import annotations

from typing import Any

from pydantic import BaseModel, ConfigDict, Field, field_validator

from polymarket_toolkit.api.models.event import Event, Tag  # noqa: TC001


class SearchResults(BaseModel):
    """Response from `GET /public-search`."""

    model_config = ConfigDict(frozen=True)

    events: list[Event] = Field(default_factory=list)
    tags: list[Tag] = Field(default_factory=list)

    @field_validator("events", "tags", mode="before")
    @classmethod
    def _null_to_empty(cls, value: Any) -> Any:
        return value or []
