"""Typer CLI commands for market lookup and pricing.

This package provides market commands for the Polymarket CLI:
- resolve: Expand an event slug/URL into markets and token IDs
- get: Fetch a single market by ID
- orderbook: Sorted order book for a token
- price: Current ask/bid/midpoint for a token
- history: Price history summary for a token
"""

import typer

from polymarket_toolkit.cli.market.get import market_get
from polymarket_toolkit.cli.market.history import market_history
from polymarket_toolkit.cli.market.orderbook import market_orderbook
from polymarket_toolkit.cli.market.price import market_price
from polymarket_toolkit.cli.market.resolve import market_resolve

app = typer.Typer(help="Market lookup and pricing commands.")

app.command("resolve")(market_resolve)
app.command("get")(market_get)
app.command("orderbook")(market_orderbook)
app.command("price")(market_price)
app.command("history")(market_history)

__all__ = [
    "app",
    "market_get",
    "market_history",
    "market_orderbook",
    "market_price",
    "market_resolve",
]
