"""Protocol definitions for order dispatch."""

from __future__ import annotations

from typing import TYPE_CHECKING, Protocol

if TYPE_CHECKING:
    from polymarket_toolkit.api.models.order import LimitOrder, MarketOrder, OrderResponse
    from polymarket_toolkit.api.models.portfolio import BalanceAllowance, CancelResult, OpenOrder


class CollateralProvider(Protocol):
    """Protocol for reading the wallet's collateral balance."""

    async def get_collateral_balance(self) -> BalanceAllowance:
        """Return the USDC.e balance (raw base units) and allowances."""
        ...


class TradingClient(CollateralProvider, Protocol):
    """Protocol for the authenticated order endpoints used by the dispatcher."""

    async def post_market_order(self, order: MarketOrder) -> OrderResponse: ...

    async def post_limit_order(self, order: LimitOrder) -> OrderResponse: ...

    async def get_open_orders(
        self, *, asset_id: str | None = None, market: str | None = None
    ) -> list[OpenOrder]: ...

    async def cancel_order(self, order_id: str) -> CancelResult: ...

    async def cancel_market_orders(self, market_id: str) -> CancelResult: ...
