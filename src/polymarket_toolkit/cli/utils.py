"""Shared utilities for CLI commands (console output, formatting, async helpers)."""

from __future__ import annotations

import asyncio
import json
from datetime import UTC, datetime
from typing import TYPE_CHECKING, Any, NoReturn, TypeVar

import typer
from rich.console import Console

from polymarket_toolkit.api.exceptions import UpstreamError

if TYPE_CHECKING:
    from collections.abc import Coroutine
    from decimal import Decimal

console = Console()

T = TypeVar("T")


def run_async(coro: Coroutine[object, object, T]) -> T:
    """Run a coroutine from a sync CLI command.

    Raises:
        typer.Exit: With code 130 on KeyboardInterrupt (standard SIGINT exit code).
    """
    try:
        return asyncio.run(coro)
    except KeyboardInterrupt:
        console.print("\n[yellow]Interrupted.[/yellow]")
        raise typer.Exit(130) from None


def exit_error(error: Exception) -> NoReturn:
    """Print a toolkit error and exit with status 1."""
    if isinstance(error, UpstreamError) and error.status_code is not None:
        console.print(f"[red]API Error {error.status_code}:[/red] {error.message}")
    else:
        console.print(f"[red]Error:[/red] {error}")
    raise typer.Exit(1) from None


def require_option(value: str | None, flag: str, usage: str) -> str:
    """Exit 1 with a usage line when a required option is missing or blank."""
    if value is None or not value.strip():
        console.print(f"[red]Error:[/red] Missing required option {flag}.")
        console.print(f"[dim]Usage: {usage}[/dim]")
        raise typer.Exit(1)
    return value.strip()


def print_json(data: Any) -> None:
    """Write JSON to stdout without console markup processing."""
    typer.echo(json.dumps(data, indent=2, default=str))


def fmt_decimal(value: Decimal | None, places: int | None = None) -> str:
    if value is None:
        return "N/A"
    if places is not None:
        return f"{value:.{places}f}"
    return format(value.normalize(), "f")


def fmt_cents(value: Decimal | None) -> str:
    """Format a probability price as cents (0.655 -> 65.5¢)."""
    if value is None:
        return "N/A"
    return f"{value * 100:.1f}¢"


def fmt_usd(value: Decimal | None) -> str:
    if value is None:
        return "N/A"
    return f"${value:,.2f}"


def fmt_flag(value: bool | None) -> str:
    if value is None:
        return "N/A"
    return "yes" if value else "no"


def fmt_timestamp(ts: int | None) -> str:
    if ts is None:
        return "N/A"
    return datetime.fromtimestamp(ts, tz=UTC).strftime("%Y-%m-%d %H:%M")
