"""Order book models for the CLOB API."""

from __future__ import annotations

from decimal import Decimal
from typing import Any

from pydantic import BaseModel, ConfigDict, Field, field_validator

from polymarket_toolkit.api.models._parsing import lenient_bool, lenient_decimal


class OrderBookLevel(BaseModel):
    """One price level. The CLOB sends both fields as decimal strings."""

    model_config = ConfigDict(frozen=True)

    price: Decimal
    size: Decimal


class OrderBook(BaseModel):
    """
    Order book snapshot for a single token.

    Note: The feed gives no ordering guarantee for either side. Use
    `polymarket_toolkit.analysis.orderbook.analyze_orderbook` before reading best prices.
    """

    model_config = ConfigDict(frozen=True)

    market: str | None = None
    asset_id: str | None = None
    timestamp: str | None = None
    bids: list[OrderBookLevel] = Field(default_factory=list)
    asks: list[OrderBookLevel] = Field(default_factory=list)
    tick_size: Decimal | None = None
    min_order_size: Decimal | None = None
    neg_risk: bool | None = None

    @field_validator("bids", "asks", mode="before")
    @classmethod
    def _null_to_empty(cls, value: Any) -> Any:
        return value or []

    @field_validator("tick_size", "min_order_size", mode="before")
    @classmethod
    def _parse_decimal(cls, value: Any) -> Decimal | None:
        return lenient_decimal(value)

    @field_validator("neg_risk", mode="before")
    @classmethod
    def _parse_bool(cls, value: Any) -> bool | None:
        return lenient_bool(value)
