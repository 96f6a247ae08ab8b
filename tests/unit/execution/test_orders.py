"""Tests for open-order fan-out across tokens."""

from __future__ import annotations

import asyncio
from unittest.mock import AsyncMock

import pytest

from polymarket_toolkit.api.models.portfolio import OpenOrder
from polymarket_toolkit.execution import collect_open_orders


@pytest.mark.asyncio
async def test_results_follow_request_order_not_completion_order() -> None:
    delays = {"111": 0.02, "222": 0.0}

    async def _orders(*, asset_id: str | None = None, market: str | None = None):
        await asyncio.sleep(delays[asset_id])
        return [OpenOrder(id=f"order-{asset_id}", asset_id=asset_id)]

    client = AsyncMock()
    client.get_open_orders.side_effect = _orders

    orders = await collect_open_orders(client, ["111", "222"])

    assert [o.id for o in orders] == ["order-111", "order-222"]


@pytest.mark.asyncio
async def test_duplicate_orders_are_dropped() -> None:
    client = AsyncMock()
    client.get_open_orders.return_value = [OpenOrder(id="same")]

    orders = await collect_open_orders(client, ["111", "222"])

    assert [o.id for o in orders] == ["same"]


@pytest.mark.asyncio
async def test_no_tokens_lists_everything() -> None:
    client = AsyncMock()
    client.get_open_orders.return_value = []

    assert await collect_open_orders(client) == []
    client.get_open_orders.assert_awaited_once_with()
