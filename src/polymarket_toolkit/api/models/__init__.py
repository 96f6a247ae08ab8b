"""Pydantic models for Polymarket Gamma and CLOB API responses."""

from polymarket_toolkit.api.models.event import Event, Tag
from polymarket_toolkit.api.models.market import EventSummary, Market, Token
from polymarket_toolkit.api.models.order import (
    DollarAmount,
    LimitOrder,
    MarketOrder,
    OrderRequest,
    OrderResponse,
    OrderType,
    ShareCount,
    Side,
    TimeInForce,
)
from polymarket_toolkit.api.models.orderbook import OrderBook, OrderBookLevel
from polymarket_toolkit.api.models.portfolio import BalanceAllowance, CancelResult, OpenOrder
from polymarket_toolkit.api.models.pricing import PricePoint, Quote
from polymarket_toolkit.api.models.search import SearchResults

__all__ = [
    "BalanceAllowance",
    "CancelResult",
    "DollarAmount",
    "Event",
    "EventSummary",
    "LimitOrder",
    "Market",
    "MarketOrder",
    "OpenOrder",
    "OrderBook",
    "OrderBookLevel",
    "OrderRequest",
    "OrderResponse",
    "OrderType",
    "PricePoint",
    "Quote",
    "SearchResults",
    "ShareCount",
    "Side",
    "Tag",
    "TimeInForce",
]
