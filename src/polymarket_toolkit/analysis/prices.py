"""Price reference service: quotes and price-history summaries."""

from __future__ import annotations

import asyncio
from dataclasses import dataclass
from decimal import Decimal
from typing import TYPE_CHECKING

from polymarket_toolkit.api.models.order import Side
from polymarket_toolkit.api.models.pricing import Quote

if TYPE_CHECKING:
    from collections.abc import Sequence

    from polymarket_toolkit.api.clob import ClobPublicClient
    from polymarket_toolkit.api.models.pricing import PricePoint

_HUNDRED = Decimal(100)


@dataclass(frozen=True)
class HistorySummary:
    """Open/close/high/low summary of a price series.

    `change_pct` is a percentage (0.40 -> 0.60 gives 50) and is None when the
    opening price is zero.
    """

    points: int
    start_ts: int
    end_ts: int
    open: Decimal
    close: Decimal
    high: Decimal
    low: Decimal
    change: Decimal
    change_pct: Decimal | None


def summarize_history(points: Sequence[PricePoint]) -> HistorySummary | None:
    """Summarize a series in the order given. Returns None for an empty series."""
    if not points:
        return None
    prices = [point.p for point in points]
    open_price = prices[0]
    close_price = prices[-1]
    change = close_price - open_price
    change_pct = None if open_price == 0 else change / open_price * _HUNDRED
    return HistorySummary(
        points=len(points),
        start_ts=points[0].t,
        end_ts=points[-1].t,
        open=open_price,
        close=close_price,
        high=max(prices),
        low=min(prices),
        change=change,
        change_pct=change_pct,
    )


class PriceReferenceService:
    """Reads current and historical prices for a token from the public CLOB."""

    def __init__(self, clob: ClobPublicClient) -> None:
        self._clob = clob

    async def quote(self, token_id: str) -> Quote:
        """
        Fetch ask, bid and midpoint concurrently.

        The CLOB's `side` parameter names the resting side: SELL yields the ask
        and BUY yields the bid. Any failed read fails the whole quote.
        """
        ask, bid, midpoint = await asyncio.gather(
            self._clob.get_price(token_id, Side.SELL),
            self._clob.get_price(token_id, Side.BUY),
            self._clob.get_midpoint(token_id),
        )
        return Quote(token_id=token_id, ask=ask, bid=bid, midpoint=midpoint)

    async def history(
        self,
        token_id: str,
        *,
        interval: str | None = None,
        start_ts: int | None = None,
        end_ts: int | None = None,
        fidelity: int | None = None,
    ) -> tuple[list[PricePoint], HistorySummary | None]:
        points = await self._clob.get_prices_history(
            token_id,
            interval=interval,
            start_ts=start_ts,
            end_ts=end_ts,
            fidelity=fidelity,
        )
        return points, summarize_history(points)
