"""Portfolio balance command - collateral balance and allowances."""

from __future__ import annotations

from typing import Annotated

import typer
from rich.table import Table

from polymarket_toolkit.cli.utils import console, exit_error, fmt_usd, print_json, run_async


def portfolio_balance(
    output_json: Annotated[bool, typer.Option("--json", help="Output as JSON")] = False,
) -> None:
    """View the USDC.e collateral balance available for trading."""
    from polymarket_toolkit.api.exceptions import PolymarketError
    from polymarket_toolkit.cli.client_factory import connect_trading_client, require_credentials

    credentials = require_credentials("Balance")

    async def _balance() -> None:
        try:
            client = await connect_trading_client(credentials)
            balance = await client.get_collateral_balance()
        except PolymarketError as e:
            exit_error(e)

        if output_json:
            print_json(
                {
                    "balance": str(balance.amount),
                    "raw_balance": str(balance.balance),
                    "allowances": balance.allowances,
                }
            )
            return

        table = Table(title="Collateral Balance")
        table.add_column("Field", style="cyan")
        table.add_column("Value", style="green", overflow="fold")
        table.add_row("USDC.e", fmt_usd(balance.amount))
        for spender, allowance in sorted(balance.allowances.items()):
            table.add_row(f"Allowance {spender}", allowance)
        console.print(table)

    run_async(_balance())
