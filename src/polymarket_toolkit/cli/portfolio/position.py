"""Portfolio position command - outcome-token balance."""

from __future__ import annotations

from typing import Annotated

import typer

from polymarket_toolkit.cli.utils import console, exit_error, fmt_decimal, print_json, run_async


def portfolio_position(
    token_id: Annotated[str, typer.Argument(help="CLOB token ID.")],
    output_json: Annotated[bool, typer.Option("--json", help="Output as JSON")] = False,
) -> None:
    """View how many shares of an outcome token the wallet holds."""
    from polymarket_toolkit.api.exceptions import PolymarketError
    from polymarket_toolkit.cli.client_factory import connect_trading_client, require_credentials

    credentials = require_credentials("Position lookup")

    async def _position() -> None:
        try:
            client = await connect_trading_client(credentials)
            balance = await client.get_token_balance(token_id)
        except PolymarketError as e:
            exit_error(e)

        if output_json:
            print_json({"token_id": token_id, "shares": str(balance.amount)})
            return

        if balance.amount == 0:
            console.print(f"[yellow]No shares held for {token_id}[/yellow]")
            return
        console.print(f"Token: {token_id}")
        console.print(f"Shares: {fmt_decimal(balance.amount)}")

    run_async(_position())
