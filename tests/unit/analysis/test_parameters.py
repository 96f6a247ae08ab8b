"""Tests for cross-market parameter reconciliation."""

from __future__ import annotations

from decimal import Decimal

from polymarket_toolkit.analysis.parameters import (
    MarketParameter,
    filter_active_markets,
    is_active_market,
    reconcile,
    summarize_parameters,
)


class TestActiveFilter:
    def test_explicit_flags_exclude(self, make_market) -> None:
        assert is_active_market(make_market())
        assert not is_active_market(make_market(closed=True))
        assert not is_active_market(make_market(active=False))
        assert not is_active_market(make_market(accepting_orders=False))

    def test_missing_flags_count_as_active(self, make_market) -> None:
        market = make_market(active=None, closed=None, accepting_orders=None)
        assert is_active_market(market)

    def test_filter_keeps_order(self, make_market) -> None:
        markets = [make_market("1"), make_market("2", closed=True), make_market("3")]
        assert [m.id for m in filter_active_markets(markets)] == ["1", "3"]


class TestReconcile:
    def test_unanimous_tick_size(self, make_market) -> None:
        markets = [make_market(str(i), tick_size="0.01") for i in range(3)]
        assert reconcile(markets, MarketParameter.TICK_SIZE) == Decimal("0.01")

    def test_divergent_tick_size(self, make_market) -> None:
        markets = [
            make_market("1", tick_size="0.01"),
            make_market("2", tick_size="0.01"),
            make_market("3", tick_size="0.001"),
        ]
        assert reconcile(markets, MarketParameter.TICK_SIZE) is None

    def test_string_normalized_equality(self, make_market) -> None:
        markets = [make_market("1", tick_size="0.010"), make_market("2", tick_size=0.01)]
        assert reconcile(markets, MarketParameter.TICK_SIZE) == Decimal("0.010")

    def test_boolean_field(self, make_market) -> None:
        markets = [make_market("1", neg_risk="true"), make_market("2", neg_risk=True)]
        assert reconcile(markets, MarketParameter.NEG_RISK) is True

    def test_empty_input(self) -> None:
        assert reconcile([], MarketParameter.SPREAD) is None


class TestSummary:
    def test_shared_and_varying(self, make_market) -> None:
        markets = [
            make_market("1", spread="0.02"),
            make_market("2", spread="0.05"),
            make_market("3", spread="0.9", closed=True),
        ]

        summary = summarize_parameters(markets)

        assert [m.id for m in summary.markets] == ["1", "2"]
        assert summary.shared[MarketParameter.TICK_SIZE] == Decimal("0.01")
        assert summary.shared[MarketParameter.NEG_RISK] is False
        assert summary.is_shared(MarketParameter.MIN_ORDER_SIZE)
        assert summary.varying == [MarketParameter.SPREAD]

    def test_all_null_is_not_shared(self, make_market) -> None:
        markets = [make_market("1", spread=None), make_market("2", spread=None)]
        assert MarketParameter.SPREAD in summarize_parameters(markets).varying
