"""Pure analysis helpers over market metadata, order books and prices."""

from polymarket_toolkit.analysis.orderbook import (
    OrderBookAnalysis,
    analyze_book,
    analyze_orderbook,
)
from polymarket_toolkit.analysis.parameters import (
    MarketParameter,
    ParameterSummary,
    filter_active_markets,
    is_active_market,
    reconcile,
    summarize_parameters,
)
from polymarket_toolkit.analysis.prices import (
    HistorySummary,
    PriceReferenceService,
    summarize_history,
)

__all__ = [
    "HistorySummary",
    "MarketParameter",
    "OrderBookAnalysis",
    "ParameterSummary",
    "PriceReferenceService",
    "analyze_book",
    "analyze_orderbook",
    "filter_active_markets",
    "is_active_market",
    "reconcile",
    "summarize_history",
    "summarize_parameters",
]
