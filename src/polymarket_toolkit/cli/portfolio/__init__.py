"""Typer CLI commands for wallet balances (requires credentials)."""

import typer

from polymarket_toolkit.cli.portfolio.balance import portfolio_balance
from polymarket_toolkit.cli.portfolio.position import portfolio_position

app = typer.Typer(help="Wallet balance commands.")

app.command("balance")(portfolio_balance)
app.command("position")(portfolio_position)

__all__ = ["app", "portfolio_balance", "portfolio_position"]
