"""Shared helpers for order CLI commands."""

from __future__ import annotations

from typing import TYPE_CHECKING

from polymarket_toolkit.cli.utils import console, fmt_cents, fmt_decimal, fmt_timestamp

if TYPE_CHECKING:
    from polymarket_toolkit.api.models.order import OrderRequest
    from polymarket_toolkit.api.models.portfolio import CancelResult, OpenOrder
    from polymarket_toolkit.api.models.pricing import Quote
    from polymarket_toolkit.execution.models import DispatchResult


def describe_order(order: OrderRequest) -> str:
    from polymarket_toolkit.api.models.order import MarketOrder

    side = order.side.value
    if isinstance(order, MarketOrder):
        return (
            f"Market {side}: {order.amount} at price {fmt_decimal(order.price)} "
            f"({order.time_in_force.value})"
        )
    neg_risk = ", neg-risk" if order.neg_risk else ""
    return (
        f"Limit {side}: {order.shares} @ {fmt_decimal(order.price)} "
        f"({order.time_in_force.value}, tick {order.tick_size}{neg_risk})"
    )


def print_quote(quote: Quote) -> None:
    console.print(
        f"[dim]Ask {fmt_cents(quote.ask)} | Bid {fmt_cents(quote.bid)} | "
        f"Mid {fmt_cents(quote.midpoint)} | Spread {fmt_cents(quote.spread)}[/dim]"
    )


def print_dispatch_result(result: DispatchResult) -> None:
    if result.preflight is not None:
        check = result.preflight
        console.print(f"Balance: ${check.available:.2f}, required: ${check.required:.2f}")
    if result.confirmed:
        console.print(f"[green]✓[/green] Order submitted: {result.order_id}")
        if result.status:
            console.print(f"  Status: {result.status}")
    else:
        console.print(f"[red]Order rejected:[/red] {result.error_message or 'no reason given'}")
        if result.status:
            console.print(f"  Status: {result.status}")


def print_open_orders(orders: list[OpenOrder]) -> None:
    for index, order in enumerate(orders, start=1):
        console.print(f"{index}. Order ID: {order.id}")
        console.print(f"   Side: {order.side}, Type: {order.order_type or 'GTC'}")
        console.print(f"   Price: {fmt_cents(order.price)}")
        console.print(
            f"   Size: {fmt_decimal(order.original_size)} shares, "
            f"Matched: {fmt_decimal(order.size_matched) if order.size_matched else '0'}"
        )
        if order.outcome:
            console.print(f"   Outcome: {order.outcome}")
        console.print(f"   Token: {order.asset_id}")
        console.print(f"   Status: {order.status}")
        if order.created_at:
            console.print(f"   Created: {fmt_timestamp(order.created_at)}")
        console.print("")

    buys = sum(1 for o in orders if (o.side or "").upper() == "BUY")
    sells = sum(1 for o in orders if (o.side or "").upper() == "SELL")
    console.print(f"Buy: {buys}, Sell: {sells}")


def print_cancel_result(result: CancelResult) -> None:
    if not result.canceled and not result.not_canceled:
        console.print("[yellow]No orders to cancel[/yellow]")
        return
    console.print(f"[green]✓[/green] Canceled: {len(result.canceled)}")
    for order_id in result.canceled:
        console.print(f"  {order_id}")
    if result.partial:
        console.print(f"[yellow]Not canceled: {len(result.not_canceled)}[/yellow]")
        for order_id, reason in result.not_canceled.items():
            console.print(f"  {order_id}: {reason}")
