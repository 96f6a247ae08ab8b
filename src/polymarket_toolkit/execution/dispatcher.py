"""Order dispatch: preflight, submission and cancellation."""

from __future__ import annotations

from decimal import Decimal
from typing import TYPE_CHECKING

import structlog

from polymarket_toolkit.api.exceptions import PolymarketError
from polymarket_toolkit.api.models.order import LimitOrder, MarketOrder, Side
from polymarket_toolkit.api.models.portfolio import CancelResult
from polymarket_toolkit.execution.models import DispatchResult, OrderState, PreflightCheck

if TYPE_CHECKING:
    from collections.abc import Iterable

    from polymarket_toolkit.api.models.order import OrderRequest
    from polymarket_toolkit.execution._protocols import TradingClient

logger = structlog.get_logger()


class InsufficientBalanceError(PolymarketError):
    """Raised when a BUY needs more collateral than the wallet holds."""

    def __init__(self, available: Decimal, required: Decimal) -> None:
        self.available = available
        self.required = required
        self.shortfall = required - available
        super().__init__(
            f"Insufficient balance: available ${available:.2f}, "
            f"required ${required:.2f} (short ${self.shortfall:.2f})"
        )


class OrderDispatcher:
    """
    Submits orders through an authenticated trading client.

    BUY orders are checked against the collateral balance before submission; a
    failed check raises and nothing is posted. SELL orders skip the check (the
    exchange rejects sells without shares). There is no retry: a failed
    submission is reported once.
    """

    def __init__(self, client: TradingClient) -> None:
        self._client = client

    async def preflight(self, order: OrderRequest) -> PreflightCheck:
        """
        Compare required funds with the collateral balance.

        Raises:
            InsufficientBalanceError: If the balance does not cover the order.
        """
        balance = await self._client.get_collateral_balance()
        check = PreflightCheck(available=balance.amount, required=order.required_funds)
        if not check.passed:
            logger.warning(
                "Preflight failed",
                token_id=order.token_id,
                available=str(check.available),
                required=str(check.required),
            )
            raise InsufficientBalanceError(check.available, check.required)
        return check

    async def submit(self, order: OrderRequest) -> DispatchResult:
        """Run preflight (BUY only) and post the order.

        Raises:
            InsufficientBalanceError: If a BUY fails preflight.
            UpstreamError: If the exchange call itself fails.
        """
        log = logger.bind(
            token_id=order.token_id,
            side=order.side.value,
            order_type=order.order_type.value,
            time_in_force=order.time_in_force.value,
        )
        log.info("Order state", state=OrderState.CONSTRUCTED.value, price=str(order.price))

        preflight: PreflightCheck | None = None
        if order.side == Side.BUY:
            preflight = await self.preflight(order)
            log.info("Order state", state=OrderState.PREFLIGHT_PASSED.value)

        log.info("Order state", state=OrderState.SUBMITTED.value)
        if isinstance(order, MarketOrder):
            response = await self._client.post_market_order(order)
        elif isinstance(order, LimitOrder):
            response = await self._client.post_limit_order(order)
        else:
            raise TypeError(f"Unsupported order type: {type(order).__name__}")

        result = DispatchResult.from_response(order, response, preflight)
        log.info(
            "Order state",
            state=result.state.value,
            order_id=result.order_id,
            status=result.status,
            error=result.error_message,
        )
        return result

    async def cancel_one(self, order_id: str) -> CancelResult:
        """Cancel a single order. A `not_canceled` entry is a partial success."""
        result = await self._client.cancel_order(order_id)
        self._log_cancel(result, order_id=order_id)
        return result

    async def cancel_all_for_market(self, market_id: str) -> CancelResult:
        """Cancel every resting order for a market (condition ID).

        A market with no orders yields an empty result rather than an error.
        """
        result = await self._client.cancel_market_orders(market_id)
        self._log_cancel(result, market_id=market_id)
        return result

    async def cancel_all_for_markets(self, market_ids: Iterable[str]) -> CancelResult:
        """Cancel per market in the given order and merge the results."""
        merged = CancelResult()
        for market_id in market_ids:
            merged = merged.merge(await self.cancel_all_for_market(market_id))
        return merged

    @staticmethod
    def _log_cancel(result: CancelResult, **context: str) -> None:
        logger.info(
            "Cancel processed",
            canceled=len(result.canceled),
            not_canceled=len(result.not_canceled),
            **context,
        )
        if result.partial:
            logger.warning("Some orders were not cancelled", reasons=result.not_canceled, **context)
