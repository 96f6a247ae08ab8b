"""Market get command - fetch a single market by ID."""

from __future__ import annotations

from typing import Annotated

import typer
from rich.table import Table

from polymarket_toolkit.cli.utils import (
    console,
    exit_error,
    fmt_decimal,
    fmt_flag,
    fmt_usd,
    print_json,
    run_async,
)


def market_get(
    market_id: Annotated[str, typer.Argument(help="Gamma market ID.")],
    output_json: Annotated[bool, typer.Option("--json", help="Output as JSON")] = False,
) -> None:
    """Fetch a single market's detail by ID."""
    from polymarket_toolkit.api.exceptions import PolymarketError
    from polymarket_toolkit.cli.client_factory import gamma_client

    async def _get() -> None:
        async with gamma_client() as client:
            try:
                market = await client.get_market(market_id)
            except PolymarketError as e:
                exit_error(e)

        if output_json:
            data = market.model_dump(mode="json", exclude={"explicit_tokens"})
            data["tokens"] = [t.model_dump(mode="json") for t in market.tokens]
            print_json(data)
            return

        table = Table(title=f"Market: {market.id}")
        table.add_column("Field", style="cyan")
        table.add_column("Value", style="green", overflow="fold")

        table.add_row("Question", market.question)
        if market.condition_id:
            table.add_row("Condition ID", market.condition_id)
        if market.slug:
            table.add_row("Slug", market.slug)
        table.add_row("Active", fmt_flag(market.active))
        table.add_row("Closed", fmt_flag(market.closed))
        table.add_row("Accepting Orders", fmt_flag(market.accepting_orders))
        if market.end_date:
            table.add_row("End Date", market.end_date)
        table.add_row("Tick Size", fmt_decimal(market.tick_size))
        table.add_row("Min Order Size", fmt_decimal(market.min_order_size))
        table.add_row("Neg Risk", fmt_flag(market.neg_risk))
        bid_ask = f"{fmt_decimal(market.best_bid)} / {fmt_decimal(market.best_ask)}"
        table.add_row("Best Bid / Ask", bid_ask)
        table.add_row("Spread", fmt_decimal(market.spread))
        table.add_row("Volume", fmt_usd(market.volume))
        table.add_row("Volume (24h)", fmt_usd(market.volume_24hr))
        table.add_row("Liquidity", fmt_usd(market.liquidity))
        console.print(table)

        if market.tokens:
            console.print("\n[bold]Outcomes:[/bold]")
            for token in market.tokens:
                console.print(f"  {token.outcome} ({fmt_decimal(token.price)}): {token.token_id}")

        for event in market.events:
            console.print(f"\n[bold]Event:[/bold] {event.title}")
            if event.slug:
                console.print(f"  Slug: {event.slug}")
            if event.resolution_source:
                console.print(f"  Resolution source: {event.resolution_source}")

    run_async(_get())
