"""Tests for order book sorting and top-of-book statistics."""

from __future__ import annotations

from decimal import Decimal

from polymarket_toolkit.analysis.orderbook import analyze_book, analyze_orderbook
from polymarket_toolkit.api.models.orderbook import OrderBook, OrderBookLevel


def _levels(*pairs: tuple[str, str]) -> list[OrderBookLevel]:
    return [OrderBookLevel(price=Decimal(p), size=Decimal(s)) for p, s in pairs]


def test_sides_are_sorted_best_first() -> None:
    bids = _levels(("0.01", "500"), ("0.48", "20"), ("0.30", "10"))
    asks = _levels(("0.99", "500"), ("0.52", "30"), ("0.60", "5"))

    analysis = analyze_orderbook(bids, asks)

    bid_prices = [level.price for level in analysis.sorted_bids]
    ask_prices = [level.price for level in analysis.sorted_asks]
    assert bid_prices == sorted(bid_prices, reverse=True)
    assert ask_prices == sorted(ask_prices)
    assert len(analysis.sorted_bids) == 3
    assert analysis.best_bid == Decimal("0.48")
    assert analysis.best_ask == Decimal("0.52")
    assert analysis.spread == Decimal("0.04")
    assert analysis.spread >= 0
    assert analysis.midpoint == Decimal("0.5")
    assert analysis.crossed is False


def test_one_sided_book_has_no_spread_or_midpoint() -> None:
    analysis = analyze_orderbook(_levels(("0.40", "1")), [])

    assert analysis.best_bid == Decimal("0.40")
    assert analysis.best_ask is None
    assert analysis.spread is None
    assert analysis.midpoint is None


def test_empty_book() -> None:
    analysis = analyze_orderbook([], [])

    assert analysis.sorted_bids == []
    assert analysis.best_bid is None
    assert analysis.bid_depth == Decimal(0)


def test_crossed_book_is_passed_through_and_flagged() -> None:
    analysis = analyze_orderbook(_levels(("0.55", "1")), _levels(("0.50", "1")))

    assert analysis.crossed is True
    assert analysis.best_bid == Decimal("0.55")
    assert analysis.best_ask == Decimal("0.50")
    assert analysis.spread == Decimal("-0.05")


def test_analyze_book_reads_model_sides() -> None:
    book = OrderBook.model_validate(
        {"bids": [{"price": "0.2", "size": "3"}], "asks": [{"price": "0.3", "size": "4"}]}
    )

    analysis = analyze_book(book)

    assert analysis.bid_depth == Decimal("3")
    assert analysis.ask_depth == Decimal("4")
