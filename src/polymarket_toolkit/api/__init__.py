"""Polymarket API client module."""

from polymarket_toolkit.api.clob import ClobPublicClient
from polymarket_toolkit.api.exceptions import (
    NotFoundError,
    PolymarketError,
    UpstreamError,
    ValidationError,
)
from polymarket_toolkit.api.gamma import GammaClient
from polymarket_toolkit.api.models import (
    Event,
    Market,
    OrderBook,
    OrderBookLevel,
    PricePoint,
    Quote,
    Tag,
    Token,
)

__all__ = [
    # Clients
    "ClobPublicClient",
    "GammaClient",
    # Exceptions
    "NotFoundError",
    "PolymarketError",
    "UpstreamError",
    "ValidationError",
    # Models
    "Event",
    "Market",
    "OrderBook",
    "OrderBookLevel",
    "PricePoint",
    "Quote",
    "Tag",
    "Token",
]
