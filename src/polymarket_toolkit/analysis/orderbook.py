"""Order book analysis.

The CLOB feed does not guarantee level ordering, so best prices are never read
from the first element of a raw side.
"""

from __future__ import annotations

from dataclasses import dataclass
from decimal import Decimal
from typing import TYPE_CHECKING

import structlog

if TYPE_CHECKING:
    from collections.abc import Iterable

    from polymarket_toolkit.api.models.orderbook import OrderBook, OrderBookLevel

logger = structlog.get_logger()

_TWO = Decimal(2)


@dataclass(frozen=True)
class OrderBookAnalysis:
    """Sorted book plus derived top-of-book values."""

    sorted_bids: list[OrderBookLevel]
    sorted_asks: list[OrderBookLevel]
    best_bid: Decimal | None
    best_ask: Decimal | None
    spread: Decimal | None
    midpoint: Decimal | None

    @property
    def crossed(self) -> bool:
        """True when the best bid is above the best ask."""
        return (
            self.best_bid is not None
            and self.best_ask is not None
            and self.best_bid > self.best_ask
        )

    @property
    def bid_depth(self) -> Decimal:
        return sum((level.size for level in self.sorted_bids), Decimal(0))

    @property
    def ask_depth(self) -> Decimal:
        return sum((level.size for level in self.sorted_asks), Decimal(0))


def analyze_orderbook(
    bids: Iterable[OrderBookLevel], asks: Iterable[OrderBookLevel]
) -> OrderBookAnalysis:
    """
    Sort both sides and derive best prices, spread and midpoint.

    Bids are sorted by price descending, asks ascending. Spread and midpoint are
    only set when both sides are non-empty. A crossed book is reported as-is.
    """
    sorted_bids = sorted(bids, key=lambda level: level.price, reverse=True)
    sorted_asks = sorted(asks, key=lambda level: level.price)

    best_bid = sorted_bids[0].price if sorted_bids else None
    best_ask = sorted_asks[0].price if sorted_asks else None

    spread: Decimal | None = None
    midpoint: Decimal | None = None
    if best_bid is not None and best_ask is not None:
        spread = best_ask - best_bid
        midpoint = (best_ask + best_bid) / _TWO

    analysis = OrderBookAnalysis(
        sorted_bids=sorted_bids,
        sorted_asks=sorted_asks,
        best_bid=best_bid,
        best_ask=best_ask,
        spread=spread,
        midpoint=midpoint,
    )
    if analysis.crossed:
        logger.warning("Crossed order book", best_bid=str(best_bid), best_ask=str(best_ask))
    return analysis


def analyze_book(book: OrderBook) -> OrderBookAnalysis:
    return analyze_orderbook(book.bids, book.asks)
