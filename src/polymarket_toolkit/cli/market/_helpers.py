"""Shared rendering helpers for market CLI commands."""

from __future__ import annotations

from decimal import Decimal
from typing import TYPE_CHECKING, Any

from polymarket_toolkit.analysis.parameters import MarketParameter
from polymarket_toolkit.cli.utils import console, fmt_decimal, fmt_flag

if TYPE_CHECKING:
    from polymarket_toolkit.analysis.parameters import ParameterSummary
    from polymarket_toolkit.api.models.market import Market


def format_parameter(value: Any) -> str:
    if isinstance(value, bool) or value is None:
        return fmt_flag(value)
    if isinstance(value, Decimal):
        return fmt_decimal(value)
    return str(value)


def print_shared_parameters(summary: ParameterSummary) -> None:
    """Print parameters common to every active market once."""
    if not summary.shared:
        return
    console.print("[bold]Shared parameters:[/bold]")
    for parameter, value in summary.shared.items():
        console.print(f"  {parameter.label}: {format_parameter(value)}")


def print_market_block(index: int, market: Market, summary: ParameterSummary) -> None:
    """Print one market with its tokens and any parameters that differ between markets."""
    console.print(f"\n[bold cyan]{index}. {market.question}[/bold cyan]")
    console.print(f"   Market ID: {market.id}")
    if market.condition_id:
        console.print(f"   Condition ID: {market.condition_id}")
    for parameter in summary.varying:
        value = getattr(market, parameter.value)
        console.print(f"   {parameter.label}: {format_parameter(value)}")
    if not market.tokens:
        console.print("   [yellow]No tokens listed[/yellow]")
    for token in market.tokens:
        price = f" @ {fmt_decimal(token.price)}" if token.price is not None else ""
        console.print(f"   {token.outcome}{price}: {token.token_id}")


def parameters_as_json(summary: ParameterSummary) -> dict[str, Any]:
    return {parameter.value: summary.shared.get(parameter) for parameter in MarketParameter}
