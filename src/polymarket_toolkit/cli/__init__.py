"""
CLI application for the Polymarket Toolkit.

Provides commands for market discovery, pricing, order dispatch and balances.
"""

from __future__ import annotations

import typer
from dotenv import find_dotenv, load_dotenv

from polymarket_toolkit.cli.discover import search, tags
from polymarket_toolkit.cli.event import app as event_app
from polymarket_toolkit.cli.market import app as market_app
from polymarket_toolkit.cli.order import app as order_app
from polymarket_toolkit.cli.portfolio import app as portfolio_app
from polymarket_toolkit.cli.utils import console

app = typer.Typer(
    name="pmt",
    help="Polymarket Toolkit CLI - market discovery, pricing and order dispatch.",
    add_completion=False,
)

app.add_typer(market_app, name="market")
app.add_typer(event_app, name="event")
app.add_typer(order_app, name="order")
app.add_typer(portfolio_app, name="portfolio")
app.command("search")(search)
app.command("tags")(tags)


@app.callback()
def main() -> None:
    """Polymarket Toolkit CLI."""
    load_dotenv(find_dotenv(usecwd=True))


@app.command()
def version() -> None:
    """Show version information."""
    from polymarket_toolkit import __version__

    console.print(f"polymarket-toolkit v{__version__}")


if __name__ == "__main__":
    app()
