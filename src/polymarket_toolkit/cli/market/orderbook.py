"""Market orderbook command - sorted book with best prices."""

from __future__ import annotations

from typing import Annotated

import typer
from rich.table import Table

from polymarket_toolkit.cli.utils import (
    console,
    exit_error,
    fmt_cents,
    fmt_decimal,
    print_json,
    run_async,
)
from polymarket_toolkit.constants import DEFAULT_ORDERBOOK_DISPLAY_DEPTH


def market_orderbook(
    token_id: Annotated[str, typer.Argument(help="CLOB token ID.")],
    depth: Annotated[
        int, typer.Option("--depth", "-d", help="Levels to show per side.")
    ] = DEFAULT_ORDERBOOK_DISPLAY_DEPTH,
    output_json: Annotated[bool, typer.Option("--json", help="Output as JSON")] = False,
) -> None:
    """Fetch the order book for a token."""
    from polymarket_toolkit.analysis.orderbook import analyze_book
    from polymarket_toolkit.api.exceptions import PolymarketError
    from polymarket_toolkit.cli.client_factory import clob_client

    if depth <= 0:
        console.print("[red]Error:[/red] --depth must be a positive integer.")
        raise typer.Exit(1)

    async def _orderbook() -> None:
        async with clob_client() as client:
            try:
                book = await client.get_order_book(token_id)
            except PolymarketError as e:
                exit_error(e)

        analysis = analyze_book(book)

        if output_json:
            print_json(
                {
                    "token_id": token_id,
                    "best_bid": analysis.best_bid,
                    "best_ask": analysis.best_ask,
                    "spread": analysis.spread,
                    "midpoint": analysis.midpoint,
                    "crossed": analysis.crossed,
                    "bids": [lvl.model_dump(mode="json") for lvl in analysis.sorted_bids],
                    "asks": [lvl.model_dump(mode="json") for lvl in analysis.sorted_asks],
                }
            )
            return

        if not analysis.sorted_bids and not analysis.sorted_asks:
            console.print(f"[yellow]Order book for {token_id} is empty[/yellow]")
            return

        bids = analysis.sorted_bids[:depth]
        asks = analysis.sorted_asks[:depth]
        table = Table(title="Order Book")
        table.add_column("Bid Price", style="green", justify="right")
        table.add_column("Bid Size", justify="right")
        table.add_column("Ask Price", style="red", justify="right")
        table.add_column("Ask Size", justify="right")
        for i in range(max(len(bids), len(asks))):
            bid = bids[i] if i < len(bids) else None
            ask = asks[i] if i < len(asks) else None
            table.add_row(
                fmt_cents(bid.price) if bid else "",
                fmt_decimal(bid.size) if bid else "",
                fmt_cents(ask.price) if ask else "",
                fmt_decimal(ask.size) if ask else "",
            )
        console.print(table)
        console.print(
            f"[dim]{len(analysis.sorted_bids)} bid / {len(analysis.sorted_asks)} ask levels[/dim]"
        )

        console.print(f"\nBest Bid: {fmt_cents(analysis.best_bid)}")
        console.print(f"Best Ask: {fmt_cents(analysis.best_ask)}")
        if analysis.spread is not None:
            console.print(f"Spread: {fmt_cents(analysis.spread)}")
        if analysis.midpoint is not None:
            console.print(f"Midpoint: {fmt_cents(analysis.midpoint)}")
        if analysis.crossed:
            console.print("[yellow]Warning:[/yellow] Book is crossed (best bid above best ask).")

    run_async(_orderbook())
