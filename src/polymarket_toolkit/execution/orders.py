"""Open-order queries across several tokens."""

from __future__ import annotations

import asyncio
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from collections.abc import Sequence

    from polymarket_toolkit.api.models.portfolio import OpenOrder
    from polymarket_toolkit.execution._protocols import TradingClient


async def collect_open_orders(
    client: TradingClient, token_ids: Sequence[str] | None = None
) -> list[OpenOrder]:
    """
    Fetch open orders, optionally restricted to a set of tokens.

    Per-token lookups run concurrently; results are concatenated in the order of
    `token_ids` and duplicates (by order ID) are dropped.
    """
    if not token_ids:
        return await client.get_open_orders()

    batches = await asyncio.gather(
        *(client.get_open_orders(asset_id=token_id) for token_id in token_ids)
    )
    seen: set[str] = set()
    orders: list[OpenOrder] = []
    for batch in batches:
        for order in batch:
            if order.id not in seen:
                seen.add(order.id)
                orders.append(order)
    return orders
