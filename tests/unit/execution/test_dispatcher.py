"""Tests for OrderDispatcher with an AsyncMock trading client."""

from __future__ import annotations

from decimal import Decimal
from unittest.mock import AsyncMock

import pytest

from polymarket_toolkit.api.exceptions import UpstreamError
from polymarket_toolkit.api.models.order import OrderResponse, OrderType, Side
from polymarket_toolkit.api.models.portfolio import BalanceAllowance, CancelResult
from polymarket_toolkit.execution import (
    InsufficientBalanceError,
    OrderDispatcher,
    OrderState,
    build_order,
)


def _client(balance_usd: str = "100") -> AsyncMock:
    client = AsyncMock()
    raw = Decimal(balance_usd) * 1_000_000
    client.get_collateral_balance.return_value = BalanceAllowance(balance=raw)
    client.post_market_order.return_value = OrderResponse.model_validate(
        {"success": True, "orderID": "0xm", "status": "matched"}
    )
    client.post_limit_order.return_value = OrderResponse.model_validate(
        {"success": True, "orderID": "0xl", "status": "live"}
    )
    return client


def _limit(side: Side = Side.BUY, price: float = 0.65, size: float = 100):
    return build_order(
        side=side, order_type=OrderType.LIMIT, token_id="111", price=price, size=size
    )


def _market(side: Side = Side.BUY, size: float = 50):
    return build_order(
        side=side, order_type=OrderType.MARKET, token_id="111", price=0.65, size=size
    )


class TestPreflight:
    """BUY orders are checked against collateral before anything is posted."""

    @pytest.mark.asyncio
    async def test_insufficient_balance_blocks_submission(self) -> None:
        client = _client(balance_usd="10")

        with pytest.raises(InsufficientBalanceError) as exc_info:
            await OrderDispatcher(client).submit(_limit())

        assert exc_info.value.available == Decimal("10")
        assert exc_info.value.required == Decimal("65")
        assert "short $55.00" in str(exc_info.value)
        client.post_limit_order.assert_not_awaited()
        client.post_market_order.assert_not_awaited()

    @pytest.mark.asyncio
    async def test_exact_balance_passes(self) -> None:
        client = _client(balance_usd="50")

        result = await OrderDispatcher(client).submit(_market(size=50))

        assert result.preflight is not None
        assert result.preflight.required == Decimal("50")
        client.post_market_order.assert_awaited_once()

    @pytest.mark.asyncio
    async def test_sell_skips_preflight(self) -> None:
        client = _client(balance_usd="0")

        result = await OrderDispatcher(client).submit(_limit(side=Side.SELL))

        assert result.confirmed
        assert result.preflight is None
        client.get_collateral_balance.assert_not_awaited()


class TestSubmit:
    @pytest.mark.asyncio
    async def test_market_order_routes_to_fok_endpoint(self) -> None:
        client = _client()

        result = await OrderDispatcher(client).submit(_market())

        assert result.state == OrderState.CONFIRMED
        assert result.order_id == "0xm"
        assert result.status == "matched"
        client.post_limit_order.assert_not_awaited()

    @pytest.mark.asyncio
    async def test_limit_order_routes_to_gtc_endpoint(self) -> None:
        client = _client()

        result = await OrderDispatcher(client).submit(_limit())

        assert result.order_id == "0xl"
        client.post_market_order.assert_not_awaited()

    @pytest.mark.asyncio
    async def test_exchange_rejection_is_surfaced_verbatim(self) -> None:
        client = _client()
        client.post_limit_order.return_value = OrderResponse.model_validate(
            {"success": False, "errorMsg": "not enough balance / allowance"}
        )

        result = await OrderDispatcher(client).submit(_limit())

        assert result.state == OrderState.REJECTED
        assert result.error_message == "not enough balance / allowance"
        assert not result.confirmed

    @pytest.mark.asyncio
    async def test_upstream_failure_propagates(self) -> None:
        client = _client()
        client.post_limit_order.side_effect = UpstreamError(None, "post limit order: boom")

        with pytest.raises(UpstreamError):
            await OrderDispatcher(client).submit(_limit())


class TestCancellation:
    @pytest.mark.asyncio
    async def test_market_with_no_orders_returns_empty(self) -> None:
        client = AsyncMock()
        client.cancel_market_orders.return_value = CancelResult()

        result = await OrderDispatcher(client).cancel_all_for_market("0xc0nd1")

        assert result.canceled == []
        assert result.partial is False

    @pytest.mark.asyncio
    async def test_partial_cancel_is_not_an_error(self) -> None:
        client = AsyncMock()
        client.cancel_order.return_value = CancelResult(
            canceled=[], not_canceled={"0xo1": "order already matched"}
        )

        result = await OrderDispatcher(client).cancel_one("0xo1")

        assert result.partial is True
        assert result.not_canceled == {"0xo1": "order already matched"}

    @pytest.mark.asyncio
    async def test_cancel_many_markets_merges_in_order(self) -> None:
        client = AsyncMock()
        client.cancel_market_orders.side_effect = [
            CancelResult(canceled=["a"]),
            CancelResult(canceled=["b", "c"]),
        ]

        result = await OrderDispatcher(client).cancel_all_for_markets(["0x1", "0x2"])

        assert result.canceled == ["a", "b", "c"]
        assert [c.args[0] for c in client.cancel_market_orders.await_args_list] == ["0x1", "0x2"]
