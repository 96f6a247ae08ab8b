"""Market and token models for the Gamma market-metadata API."""

from __future__ import annotations

from decimal import Decimal
from typing import Any

from pydantic import AliasChoices, BaseModel, ConfigDict, Field, field_validator

from polymarket_toolkit.api.models._parsing import (
    json_string_list,
    lenient_bool,
    lenient_decimal,
    optional_str,
)


class Token(BaseModel):
    """A tradable outcome of a market. `token_id` is the CLOB asset identifier."""

    model_config = ConfigDict(frozen=True)

    outcome: str = ""
    token_id: str = Field(..., validation_alias=AliasChoices("token_id", "tokenId"))
    price: Decimal | None = None
    winner: bool | None = None

    @field_validator("token_id", mode="before")
    @classmethod
    def _coerce_token_id(cls, value: Any) -> Any:
        return optional_str(value) or value

    @field_validator("price", mode="before")
    @classmethod
    def _parse_price(cls, value: Any) -> Decimal | None:
        return lenient_decimal(value)


class EventSummary(BaseModel):
    """Parent event reference embedded in a market detail response."""

    model_config = ConfigDict(frozen=True)

    id: str
    slug: str | None = None
    title: str = ""
    subtitle: str | None = None
    description: str | None = None
    resolution_source: str | None = Field(
        default=None, validation_alias=AliasChoices("resolutionSource", "resolution_source")
    )
    neg_risk: bool | None = Field(
        default=None, validation_alias=AliasChoices("negRisk", "neg_risk")
    )

    @field_validator("id", mode="before")
    @classmethod
    def _coerce_id(cls, value: Any) -> Any:
        return optional_str(value) or value

    @field_validator("neg_risk", mode="before")
    @classmethod
    def _parse_bool(cls, value: Any) -> bool | None:
        return lenient_bool(value)


class Market(BaseModel):
    """A binary market as returned by the Gamma API.

    Trading parameters (tick size, minimum order size) are exchange-imposed and fixed
    for the market's lifetime. Many numeric fields arrive as strings or are missing, so
    every optional field is parsed leniently.
    """

    model_config = ConfigDict(frozen=True)

    id: str = Field(..., description="Gamma market ID")
    question: str = ""
    condition_id: str | None = Field(
        default=None, validation_alias=AliasChoices("conditionId", "condition_id")
    )
    slug: str | None = None
    description: str | None = None
    end_date: str | None = Field(default=None, validation_alias=AliasChoices("endDate", "end_date"))

    active: bool | None = None
    closed: bool | None = None
    accepting_orders: bool | None = Field(
        default=None, validation_alias=AliasChoices("acceptingOrders", "accepting_orders")
    )

    # Trading parameters
    tick_size: Decimal | None = Field(
        default=None, validation_alias=AliasChoices("orderPriceMinTickSize", "tick_size")
    )
    min_order_size: Decimal | None = Field(
        default=None, validation_alias=AliasChoices("orderMinSize", "min_order_size")
    )
    neg_risk: bool | None = Field(
        default=None, validation_alias=AliasChoices("negRisk", "neg_risk")
    )
    spread: Decimal | None = None

    # Pricing & activity
    best_bid: Decimal | None = Field(
        default=None, validation_alias=AliasChoices("bestBid", "best_bid")
    )
    best_ask: Decimal | None = Field(
        default=None, validation_alias=AliasChoices("bestAsk", "best_ask")
    )
    volume: Decimal | None = Field(
        default=None, validation_alias=AliasChoices("volumeNum", "volume")
    )
    volume_24hr: Decimal | None = Field(
        default=None, validation_alias=AliasChoices("volume24hr", "volume_24hr")
    )
    liquidity: Decimal | None = Field(
        default=None, validation_alias=AliasChoices("liquidityNum", "liquidity")
    )

    # Outcomes. Gamma encodes these arrays as JSON strings.
    outcomes: list[str] = Field(default_factory=list)
    outcome_prices: list[Decimal | None] = Field(
        default_factory=list, validation_alias=AliasChoices("outcomePrices", "outcome_prices")
    )
    clob_token_ids: list[str] = Field(
        default_factory=list, validation_alias=AliasChoices("clobTokenIds", "clob_token_ids")
    )
    explicit_tokens: list[Token] = Field(
        default_factory=list, validation_alias=AliasChoices("tokens", "explicit_tokens")
    )

    events: list[EventSummary] = Field(default_factory=list)

    @field_validator("id", mode="before")
    @classmethod
    def _coerce_id(cls, value: Any) -> Any:
        return optional_str(value) or value

    @field_validator(
        "tick_size",
        "min_order_size",
        "spread",
        "best_bid",
        "best_ask",
        "volume",
        "volume_24hr",
        "liquidity",
        mode="before",
    )
    @classmethod
    def _parse_decimal(cls, value: Any) -> Decimal | None:
        return lenient_decimal(value)

    @field_validator("active", "closed", "accepting_orders", "neg_risk", mode="before")
    @classmethod
    def _parse_bool(cls, value: Any) -> bool | None:
        return lenient_bool(value)

    @field_validator("outcomes", mode="before")
    @classmethod
    def _parse_outcomes(cls, value: Any) -> list[str]:
        return [str(v) for v in json_string_list(value)]

    @field_validator("clob_token_ids", mode="before")
    @classmethod
    def _parse_token_ids(cls, value: Any) -> list[str]:
        return [str(v) for v in json_string_list(value)]

    @field_validator("outcome_prices", mode="before")
    @classmethod
    def _parse_outcome_prices(cls, value: Any) -> list[Decimal | None]:
        return [lenient_decimal(v) for v in json_string_list(value)]

    @field_validator("explicit_tokens", "events", mode="before")
    @classmethod
    def _null_to_empty(cls, value: Any) -> Any:
        return value or []

    @property
    def tokens(self) -> list[Token]:
        """Outcome tokens, preferring the explicit `tokens` array over `clobTokenIds`."""
        if self.explicit_tokens:
            return list(self.explicit_tokens)
        tokens: list[Token] = []
        for i, token_id in enumerate(self.clob_token_ids):
            outcome = self.outcomes[i] if i < len(self.outcomes) else f"[{i}]"
            price = self.outcome_prices[i] if i < len(self.outcome_prices) else None
            tokens.append(Token(outcome=outcome, token_id=token_id, price=price))
        return tokens

    @property
    def token_ids(self) -> list[str]:
        """Token IDs in outcome order."""
        return [token.token_id for token in self.tokens]
