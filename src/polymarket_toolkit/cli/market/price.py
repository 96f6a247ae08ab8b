"""Market price command - current ask/bid/midpoint quote."""

from __future__ import annotations

from typing import Annotated

import typer

from polymarket_toolkit.cli.utils import console, exit_error, fmt_cents, print_json, run_async


def market_price(
    token_id: Annotated[str, typer.Argument(help="CLOB token ID.")],
    output_json: Annotated[bool, typer.Option("--json", help="Output as JSON")] = False,
) -> None:
    """Show the current quote for a token."""
    from polymarket_toolkit.analysis.prices import PriceReferenceService
    from polymarket_toolkit.api.exceptions import PolymarketError
    from polymarket_toolkit.cli.client_factory import clob_client

    async def _price() -> None:
        async with clob_client() as client:
            try:
                quote = await PriceReferenceService(client).quote(token_id)
            except PolymarketError as e:
                exit_error(e)

        if output_json:
            data = quote.model_dump(mode="json")
            data["spread"] = str(quote.spread)
            print_json(data)
            return

        console.print(f"[bold]Price for {token_id}[/bold]")
        console.print(f"  Ask (buy now):  {fmt_cents(quote.ask)}")
        console.print(f"  Bid (sell now): {fmt_cents(quote.bid)}")
        console.print(f"  Midpoint:       {fmt_cents(quote.midpoint)}")
        console.print(f"  Spread:         {fmt_cents(quote.spread)}")

    run_async(_price())
