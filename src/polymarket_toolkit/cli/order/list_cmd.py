"""Order list command - show open orders by token, market, slug or URL."""

from __future__ import annotations

from typing import Annotated

import typer

from polymarket_toolkit.cli.order._helpers import print_open_orders
from polymarket_toolkit.cli.utils import console, exit_error, run_async


def order_list(
    token: Annotated[
        str | None, typer.Option("--token", "-t", help="Only orders for this token ID.")
    ] = None,
    market: Annotated[
        str | None,
        typer.Option(
            "--market", "-m", help="Condition ID (0x...), token ID, event slug or event URL."
        ),
    ] = None,
) -> None:
    """List open orders."""
    from polymarket_toolkit.api.exceptions import PolymarketError
    from polymarket_toolkit.cli.client_factory import (
        connect_trading_client,
        gamma_client,
        require_credentials,
    )
    from polymarket_toolkit.execution import collect_open_orders
    from polymarket_toolkit.resolution import IdentifierKind, classify, resolve

    if token and market:
        console.print("[red]Error:[/red] Use either --token or --market, not both.")
        raise typer.Exit(1)

    credentials = require_credentials("Listing orders")

    async def _list() -> None:
        try:
            client = await connect_trading_client(credentials)
            if token:
                orders = await collect_open_orders(client, [token])
            elif market and classify(market) == IdentifierKind.RAW:
                if market.lower().startswith("0x"):
                    orders = await client.get_open_orders(market=market)
                else:
                    orders = await collect_open_orders(client, [market])
            elif market:
                async with gamma_client() as gamma:
                    resolution = await resolve(market, gamma)
                console.print(f"[bold]Event:[/bold] {resolution.title}")
                for resolved in resolution.markets:
                    console.print(f"  {resolved.question} ({len(resolved.token_ids)} tokens)")
                orders = await collect_open_orders(client, resolution.token_ids)
            else:
                orders = await collect_open_orders(client)
        except PolymarketError as e:
            exit_error(e)

        if not orders:
            console.print("[yellow]No open orders[/yellow]")
            return

        console.print(f"\n[bold]Open orders: {len(orders)}[/bold]\n")
        print_open_orders(orders)

    run_async(_list())
