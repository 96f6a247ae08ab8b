"""Order cancel command - cancel one order or every order in a market."""

from __future__ import annotations

from typing import Annotated

import typer

from polymarket_toolkit.cli.order._helpers import print_cancel_result
from polymarket_toolkit.cli.utils import console, exit_error, run_async


def order_cancel(
    order_id: Annotated[
        str | None, typer.Option("--order", "-o", help="Order ID to cancel.")
    ] = None,
    market: Annotated[
        str | None,
        typer.Option(
            "--market",
            "-m",
            help="Cancel all orders in a market: condition ID, event slug or event URL.",
        ),
    ] = None,
) -> None:
    """Cancel a single order, or every resting order in a market."""
    from polymarket_toolkit.api.exceptions import PolymarketError
    from polymarket_toolkit.cli.client_factory import (
        connect_trading_client,
        gamma_client,
        require_credentials,
    )
    from polymarket_toolkit.execution import OrderDispatcher
    from polymarket_toolkit.resolution import IdentifierKind, classify, resolve

    if bool(order_id) == bool(market):
        console.print("[red]Error:[/red] Specify exactly one of --order or --market.")
        console.print("[dim]Usage: pmt order cancel (--order ID | --market ID|slug|URL)[/dim]")
        raise typer.Exit(1)

    credentials = require_credentials("Cancelling orders")

    async def _cancel() -> None:
        try:
            client = await connect_trading_client(credentials)
            dispatcher = OrderDispatcher(client)
            if order_id:
                result = await dispatcher.cancel_one(order_id)
            elif market and classify(market) == IdentifierKind.RAW:
                result = await dispatcher.cancel_all_for_market(market)
            else:
                async with gamma_client() as gamma:
                    resolution = await resolve(market or "", gamma)
                console.print(f"[bold]Event:[/bold] {resolution.title}")
                condition_ids = resolution.condition_ids
                if not condition_ids:
                    console.print("[yellow]Event has no markets with a condition ID[/yellow]")
                    return
                result = await dispatcher.cancel_all_for_markets(condition_ids)
        except PolymarketError as e:
            exit_error(e)

        print_cancel_result(result)

    run_async(_cancel())
