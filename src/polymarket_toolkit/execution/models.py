"""Models for order dispatch results."""

from __future__ import annotations

from decimal import Decimal  # noqa: TC003
from enum import Enum

from pydantic import BaseModel, ConfigDict

from polymarket_toolkit.api.models.order import LimitOrder, MarketOrder, OrderResponse


class OrderState(str, Enum):
    """Lifecycle of a dispatched order.

    CONSTRUCTED -> PREFLIGHT_PASSED (BUY only) -> SUBMITTED -> CONFIRMED | REJECTED
    """

    CONSTRUCTED = "constructed"
    PREFLIGHT_PASSED = "preflight_passed"
    SUBMITTED = "submitted"
    CONFIRMED = "confirmed"
    REJECTED = "rejected"


class PreflightCheck(BaseModel):
    """Outcome of the collateral check run before a BUY."""

    model_config = ConfigDict(frozen=True)

    available: Decimal
    required: Decimal

    @property
    def passed(self) -> bool:
        return self.available >= self.required

    @property
    def shortfall(self) -> Decimal:
        return max(self.required - self.available, Decimal(0))


class DispatchResult(BaseModel):
    """Final state of a submitted order with the exchange's response fields."""

    model_config = ConfigDict(frozen=True)

    order: MarketOrder | LimitOrder
    state: OrderState
    order_id: str | None = None
    status: str | None = None
    error_message: str | None = None
    preflight: PreflightCheck | None = None

    @classmethod
    def from_response(
        cls,
        order: MarketOrder | LimitOrder,
        response: OrderResponse,
        preflight: PreflightCheck | None = None,
    ) -> DispatchResult:
        confirmed = response.success and not response.error_msg
        return cls(
            order=order,
            state=OrderState.CONFIRMED if confirmed else OrderState.REJECTED,
            order_id=response.order_id,
            status=response.status,
            error_message=response.error_msg or None,
            preflight=preflight,
        )

    @property
    def confirmed(self) -> bool:
        return self.state == OrderState.CONFIRMED
