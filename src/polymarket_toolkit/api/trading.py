"""Authenticated CLOB trading client.

Wraps the official `py-clob-client` library, which owns order signing and API
credential derivation. Its calls are synchronous, so each one runs in a worker
thread to keep the async command code non-blocking.
"""

from __future__ import annotations

import asyncio
from typing import TYPE_CHECKING, Any, TypeVar

import structlog
from py_clob_client.client import ClobClient
from py_clob_client.clob_types import (
    AssetType,
    BalanceAllowanceParams,
    MarketOrderArgs,
    OpenOrderParams,
    OrderArgs,
    PartialCreateOrderOptions,
)
from py_clob_client.clob_types import OrderType as ClobOrderType
from py_clob_client.exceptions import PolyException
from py_clob_client.order_builder.constants import BUY, SELL

from polymarket_toolkit.api.config import APIConfig
from polymarket_toolkit.api.exceptions import UpstreamError
from polymarket_toolkit.api.models.order import OrderResponse, Side
from polymarket_toolkit.api.models.portfolio import BalanceAllowance, CancelResult, OpenOrder

if TYPE_CHECKING:
    from collections.abc import Callable

    from polymarket_toolkit.api.credentials import ClobCredentials
    from polymarket_toolkit.api.models.order import LimitOrder, MarketOrder

logger = structlog.get_logger()

T = TypeVar("T")


def _clob_side(side: Side) -> str:
    return BUY if side == Side.BUY else SELL


def _derive_authenticated_client(credentials: ClobCredentials, config: APIConfig) -> ClobClient:
    client = ClobClient(
        config.clob_host,
        chain_id=config.chain_id,
        key=credentials.private_key.get_secret_value(),
        signature_type=config.signature_type,
        funder=credentials.funder_address,
    )
    client.set_api_creds(client.create_or_derive_api_creds())
    return client


class ClobTradingClient:
    """
    Authenticated handle for balance, order and cancellation endpoints.

    Construct it once per command with `connect()` (which derives the L2 API
    credentials) and pass it to the components that need it.
    """

    def __init__(self, clob: ClobClient) -> None:
        self._clob = clob

    @classmethod
    async def connect(
        cls, credentials: ClobCredentials, config: APIConfig | None = None
    ) -> ClobTradingClient:
        """Derive API credentials from the wallet key and return a ready client."""
        config = config or APIConfig()
        logger.info("Deriving CLOB API credentials", host=config.clob_host)
        clob = await cls._run(
            "derive API credentials", _derive_authenticated_client, credentials, config
        )
        return cls(clob)

    @staticmethod
    async def _run(action: str, fn: Callable[..., T], *args: Any) -> T:
        try:
            return await asyncio.to_thread(fn, *args)
        except PolyException as e:
            status_code = getattr(e, "status_code", None)
            message = getattr(e, "error_msg", None) or getattr(e, "msg", None) or str(e)
            logger.warning("CLOB call failed", action=action, status_code=status_code)
            raise UpstreamError(status_code, f"{action}: {message}") from e
        except Exception as e:
            # py-clob-client signals order-builder failures with a bare Exception
            logger.warning("CLOB call failed", action=action, error=str(e))
            raise UpstreamError(None, f"{action}: {e}") from e

    # ==================== Balances ====================

    async def get_collateral_balance(self) -> BalanceAllowance:
        """USDC.e collateral balance and exchange allowances."""
        params = BalanceAllowanceParams(asset_type=AssetType.COLLATERAL)
        data = await self._run("get collateral balance", self._clob.get_balance_allowance, params)
        return BalanceAllowance.model_validate(data or {})

    async def get_token_balance(self, token_id: str) -> BalanceAllowance:
        """Conditional-token (outcome share) balance for one token."""
        params = BalanceAllowanceParams(asset_type=AssetType.CONDITIONAL, token_id=token_id)
        data = await self._run("get token balance", self._clob.get_balance_allowance, params)
        return BalanceAllowance.model_validate(data or {})

    # ==================== Orders ====================

    async def get_open_orders(
        self, *, asset_id: str | None = None, market: str | None = None
    ) -> list[OpenOrder]:
        """Resting orders, optionally filtered by token (asset) or market (condition ID)."""
        params = OpenOrderParams(market=market, asset_id=asset_id)
        data = await self._run("list open orders", self._clob.get_orders, params)
        return [OpenOrder.model_validate(o) for o in data or []]

    async def post_market_order(self, order: MarketOrder) -> OrderResponse:
        """Sign and post a fill-or-kill order for a dollar amount."""

        def _post() -> Any:
            signed = self._clob.create_market_order(
                MarketOrderArgs(
                    token_id=order.token_id,
                    amount=float(order.amount.value),
                    side=_clob_side(order.side),
                    price=float(order.price),
                )
            )
            return self._clob.post_order(signed, ClobOrderType.FOK)

        data = await self._run("post market order", _post)
        return OrderResponse.model_validate(data or {})

    async def post_limit_order(self, order: LimitOrder) -> OrderResponse:
        """Sign and post a good-till-cancelled order for a share count."""

        def _post() -> Any:
            signed = self._clob.create_order(
                OrderArgs(
                    token_id=order.token_id,
                    price=float(order.price),
                    size=float(order.shares.value),
                    side=_clob_side(order.side),
                ),
                PartialCreateOrderOptions(tick_size=order.tick_size, neg_risk=order.neg_risk),
            )
            return self._clob.post_order(signed, ClobOrderType.GTC)

        data = await self._run("post limit order", _post)
        return OrderResponse.model_validate(data or {})

    # ==================== Cancellation ====================

    async def cancel_order(self, order_id: str) -> CancelResult:
        """Cancel a single order by ID."""
        data = await self._run("cancel order", self._clob.cancel, order_id)
        return CancelResult.model_validate(data or {})

    async def cancel_market_orders(self, market_id: str) -> CancelResult:
        """Cancel every resting order in a market (condition ID)."""

        def _cancel() -> Any:
            return self._clob.cancel_market_orders(market=market_id)

        data = await self._run("cancel market orders", _cancel)
        return CancelResult.model_validate(data or {})
