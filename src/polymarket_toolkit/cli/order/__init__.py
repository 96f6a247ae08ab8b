"""Typer CLI commands for order dispatch and management."""

import typer

from polymarket_toolkit.cli.order.cancel import order_cancel
from polymarket_toolkit.cli.order.list_cmd import order_list
from polymarket_toolkit.cli.order.place import order_buy, order_sell

app = typer.Typer(help="Order placement and management commands (requires credentials).")

app.command("buy")(order_buy)
app.command("sell")(order_sell)
app.command("list")(order_list)
app.command("cancel")(order_cancel)

__all__ = ["app", "order_buy", "order_cancel", "order_list", "order_sell"]
