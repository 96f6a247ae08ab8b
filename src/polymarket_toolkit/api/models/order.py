"""Order models.

MARKET and LIMIT orders interpret "size" differently: a MARKET order spends (or
receives) a dollar notional, a LIMIT order trades a number of shares. The two are
modelled as distinct types so one cannot be passed where the other is expected.
"""

from __future__ import annotations

from decimal import Decimal
from enum import Enum
from typing import Literal

from pydantic import AliasChoices, BaseModel, ConfigDict, Field

from polymarket_toolkit.constants import DEFAULT_TICK_SIZE


class Side(str, Enum):
    """Side of the order."""

    BUY = "BUY"
    SELL = "SELL"


class OrderType(str, Enum):
    """How the order is sized and executed."""

    MARKET = "market"
    LIMIT = "limit"


class TimeInForce(str, Enum):
    """CLOB time-in-force used when posting."""

    FOK = "FOK"  # fill-or-kill: fill completely now or cancel in full
    GTC = "GTC"  # good-till-cancelled: rest on the book


class DollarAmount(BaseModel):
    """Dollar notional (MARKET order size)."""

    model_config = ConfigDict(frozen=True)

    value: Decimal = Field(..., gt=0)

    def __str__(self) -> str:
        return f"${self.value}"


class ShareCount(BaseModel):
    """Number of outcome shares (LIMIT order size)."""

    model_config = ConfigDict(frozen=True)

    value: Decimal = Field(..., gt=0)

    def __str__(self) -> str:
        return f"{self.value} shares"


class MarketOrder(BaseModel):
    """Fill-or-kill order sized by dollar amount."""

    model_config = ConfigDict(frozen=True)

    order_type: Literal[OrderType.MARKET] = OrderType.MARKET
    side: Side
    token_id: str = Field(..., min_length=1)
    price: Decimal = Field(..., gt=0, lt=1)
    amount: DollarAmount

    @property
    def time_in_force(self) -> TimeInForce:
        return TimeInForce.FOK

    @property
    def required_funds(self) -> Decimal:
        """Collateral needed to submit: the dollar amount itself."""
        return self.amount.value


class LimitOrder(BaseModel):
    """Good-till-cancelled order sized by share count."""

    model_config = ConfigDict(frozen=True)

    order_type: Literal[OrderType.LIMIT] = OrderType.LIMIT
    side: Side
    token_id: str = Field(..., min_length=1)
    price: Decimal = Field(..., gt=0, lt=1)
    shares: ShareCount
    tick_size: str = DEFAULT_TICK_SIZE
    neg_risk: bool = False

    @property
    def time_in_force(self) -> TimeInForce:
        return TimeInForce.GTC

    @property
    def required_funds(self) -> Decimal:
        """Collateral needed to submit: price times share count."""
        return self.price * self.shares.value


OrderRequest = MarketOrder | LimitOrder


class OrderResponse(BaseModel):
    """Response from posting an order. Fields are passed through verbatim."""

    model_config = ConfigDict(frozen=True)

    success: bool = True
    order_id: str | None = Field(default=None, validation_alias=AliasChoices("orderID", "order_id"))
    status: str | None = None
    error_msg: str | None = Field(
        default=None, validation_alias=AliasChoices("errorMsg", "error_msg")
    )
