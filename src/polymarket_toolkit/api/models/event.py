"""Event and tag models for the Gamma market-metadata API."""

from __future__ import annotations

from decimal import Decimal
from typing import Any

from pydantic import AliasChoices, BaseModel, ConfigDict, Field, field_validator

from polymarket_toolkit.api.models._parsing import lenient_bool, lenient_decimal, optional_str
from polymarket_toolkit.api.models.market import Market  # noqa: TC001


class Event(BaseModel):
    """An event grouping one or more binary markets (e.g. one per candidate)."""

    model_config = ConfigDict(frozen=True)

    id: str = Field(..., description="Gamma event ID")
    slug: str = Field(..., description="Unique, human-readable URL segment")
    title: str = ""
    subtitle: str | None = None
    description: str | None = None

    active: bool | None = None
    closed: bool | None = None
    featured: bool | None = None
    neg_risk: bool | None = Field(
        default=None, validation_alias=AliasChoices("negRisk", "neg_risk")
    )

    volume: Decimal | None = None
    liquidity: Decimal | None = None
    start_date: str | None = Field(
        default=None, validation_alias=AliasChoices("startDate", "start_date")
    )
    end_date: str | None = Field(default=None, validation_alias=AliasChoices("endDate", "end_date"))

    markets: list[Market] = Field(default_factory=list)

    @field_validator("id", mode="before")
    @classmethod
    def _coerce_id(cls, value: Any) -> Any:
        return optional_str(value) or value

    @field_validator("volume", "liquidity", mode="before")
    @classmethod
    def _parse_decimal(cls, value: Any) -> Decimal | None:
        return lenient_decimal(value)

    @field_validator("active", "closed", "featured", "neg_risk", mode="before")
    @classmethod
    def _parse_bool(cls, value: Any) -> bool | None:
        return lenient_bool(value)

    @field_validator("markets", mode="before")
    @classmethod
    def _null_to_empty(cls, value: Any) -> Any:
        return value or []

    @property
    def status(self) -> str:
        """Display status: closed, active or inactive."""
        if self.closed:
            return "closed"
        return "active" if self.active else "inactive"


class Tag(BaseModel):
    """Category tag used to filter events."""

    model_config = ConfigDict(frozen=True)

    id: str
    label: str | None = None
    slug: str | None = None
    event_count: int | None = None

    @field_validator("id", mode="before")
    @classmethod
    def _coerce_id(cls, value: Any) -> Any:
        return optional_str(value) or value

    @property
    def display_name(self) -> str:
        return self.label or self.slug or self.id
