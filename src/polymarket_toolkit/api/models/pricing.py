"""Price quote and price history models for the CLOB API."""

from __future__ import annotations

from decimal import Decimal
from typing import Any

from pydantic import BaseModel, ConfigDict, field_validator

from polymarket_toolkit.api.models._parsing import lenient_decimal


class Quote(BaseModel):
    """Point-in-time prices for one token.

    `ask` is the price to buy immediately, `bid` the price to sell immediately.
    """

    model_config = ConfigDict(frozen=True)

    token_id: str
    ask: Decimal
    bid: Decimal
    midpoint: Decimal

    @property
    def spread(self) -> Decimal:
        """Quoted spread (ask - bid)."""
        return self.ask - self.bid


class PricePoint(BaseModel):
    """A single point of a price series (`t` in Unix seconds, `p` a probability)."""

    model_config = ConfigDict(frozen=True)

    t: int
    p: Decimal

    @field_validator("p", mode="before")
    @classmethod
    def _parse_price(cls, value: Any) -> Any:
        parsed = lenient_decimal(value)
        return parsed if parsed is not None else value
