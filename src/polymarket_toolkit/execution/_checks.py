"""Order construction and validation."""

from __future__ import annotations

from decimal import Decimal, InvalidOperation
from typing import TYPE_CHECKING

import pydantic

from polymarket_toolkit.api.exceptions import ValidationError
from polymarket_toolkit.api.models.order import (
    DollarAmount,
    LimitOrder,
    MarketOrder,
    OrderType,
    ShareCount,
    Side,
)
from polymarket_toolkit.constants import ALLOWED_TICK_SIZES, DEFAULT_TICK_SIZE

if TYPE_CHECKING:
    from polymarket_toolkit.api.models.order import OrderRequest


def to_decimal(value: Decimal | float | int | str, name: str) -> Decimal:
    """Convert a user-supplied number without float artefacts (0.65 stays 0.65)."""
    try:
        result = value if isinstance(value, Decimal) else Decimal(str(value))
    except InvalidOperation:
        raise ValidationError(f"{name} must be a number, got {value!r}") from None
    if not result.is_finite():
        raise ValidationError(f"{name} must be a finite number, got {value!r}")
    return result


def validate_tick_size(tick_size: str) -> str:
    normalized = format(to_decimal(tick_size, "Tick size").normalize(), "f")
    if normalized not in ALLOWED_TICK_SIZES:
        allowed = ", ".join(ALLOWED_TICK_SIZES)
        raise ValidationError(f"Tick size must be one of {allowed}, got {tick_size!r}")
    return normalized


def validate_price_on_tick(price: Decimal, tick_size: str) -> None:
    """Reject a limit price the exchange would round or refuse for this tick size."""
    tick = Decimal(tick_size)
    if not tick <= price <= 1 - tick:
        raise ValidationError(
            f"Price must be between {tick} and {1 - tick} for tick size {tick_size}, got {price}"
        )
    if price % tick != 0:
        raise ValidationError(f"Price {price} is not a multiple of tick size {tick_size}")


def build_order(
    *,
    side: Side,
    order_type: OrderType,
    token_id: str,
    price: Decimal | float | str,
    size: Decimal | float | str,
    tick_size: str = DEFAULT_TICK_SIZE,
    neg_risk: bool = False,
) -> OrderRequest:
    """
    Build a validated order request.

    `size` is a dollar amount for MARKET orders and a share count for LIMIT orders.
    Tick size and neg-risk only apply to LIMIT orders.

    Raises:
        ValidationError: On a price outside (0, 1), a non-positive size or an empty
            token ID. LIMIT orders also reject an unsupported tick size and a price
            that is off the tick grid or outside [tick, 1 - tick].
    """
    price_value = to_decimal(price, "Price")
    size_value = to_decimal(size, "Size")

    if not token_id.strip():
        raise ValidationError("Token ID must not be empty")
    if not Decimal(0) < price_value < Decimal(1):
        raise ValidationError(f"Price must be between 0 and 1 (exclusive), got {price_value}")
    if size_value <= 0:
        raise ValidationError(f"Size must be positive, got {size_value}")

    if order_type == OrderType.LIMIT:
        tick_size = validate_tick_size(tick_size)
        validate_price_on_tick(price_value, tick_size)

    try:
        if order_type == OrderType.MARKET:
            return MarketOrder(
                side=side,
                token_id=token_id.strip(),
                price=price_value,
                amount=DollarAmount(value=size_value),
            )
        return LimitOrder(
            side=side,
            token_id=token_id.strip(),
            price=price_value,
            shares=ShareCount(value=size_value),
            tick_size=tick_size,
            neg_risk=neg_risk,
        )
    except pydantic.ValidationError as e:
        raise ValidationError(f"Invalid order: {e.errors()[0]['msg']}") from e
