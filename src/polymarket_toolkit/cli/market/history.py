"""Market history command - price series and summary."""

from __future__ import annotations

from dataclasses import asdict
from typing import Annotated

import typer
from rich.table import Table

from polymarket_toolkit.cli.utils import (
    console,
    exit_error,
    fmt_cents,
    fmt_decimal,
    fmt_timestamp,
    print_json,
    run_async,
)
from polymarket_toolkit.constants import HISTORY_BAR_WIDTH, HISTORY_DISPLAY_POINTS


def market_history(
    token_id: Annotated[str, typer.Argument(help="CLOB token ID.")],
    interval: Annotated[
        str | None,
        typer.Option("--interval", "-i", help="Relative window: 1h, 6h, 1d, 1w, max (default 1d)."),
    ] = None,
    fidelity: Annotated[
        int | None, typer.Option("--fidelity", "-f", help="Sampling granularity in minutes.")
    ] = None,
    start_ts: Annotated[
        int | None, typer.Option("--start", help="Range start (Unix seconds).")
    ] = None,
    end_ts: Annotated[int | None, typer.Option("--end", help="Range end (Unix seconds).")] = None,
    output_json: Annotated[bool, typer.Option("--json", help="Output as JSON")] = False,
) -> None:
    """Fetch price history for a token."""
    from polymarket_toolkit.analysis.prices import PriceReferenceService
    from polymarket_toolkit.api.exceptions import PolymarketError
    from polymarket_toolkit.cli.client_factory import clob_client

    async def _history() -> None:
        async with clob_client() as client:
            try:
                points, summary = await PriceReferenceService(client).history(
                    token_id,
                    interval=interval,
                    start_ts=start_ts,
                    end_ts=end_ts,
                    fidelity=fidelity,
                )
            except PolymarketError as e:
                exit_error(e)

        if output_json:
            print_json(
                {
                    "token_id": token_id,
                    "summary": asdict(summary) if summary is not None else None,
                    "history": [p.model_dump(mode="json") for p in points],
                }
            )
            return

        if summary is None:
            console.print(f"[yellow]No price history for {token_id}[/yellow]")
            return

        table = Table(title=f"Price History ({summary.points} points)")
        table.add_column("Field", style="cyan")
        table.add_column("Value", style="green")
        table.add_row("From", fmt_timestamp(summary.start_ts))
        table.add_row("To", fmt_timestamp(summary.end_ts))
        table.add_row("Open", fmt_cents(summary.open))
        table.add_row("Close", fmt_cents(summary.close))
        table.add_row("High", fmt_cents(summary.high))
        table.add_row("Low", fmt_cents(summary.low))
        change_pct = "N/A" if summary.change_pct is None else f"{summary.change_pct:+.1f}%"
        table.add_row("Change", f"{summary.change * 100:+.1f}¢ ({change_pct})")
        console.print(table)

        console.print(f"\n[bold]Last {min(len(points), HISTORY_DISPLAY_POINTS)} points:[/bold]")
        for point in points[-HISTORY_DISPLAY_POINTS:]:
            bar = "█" * int(point.p * HISTORY_BAR_WIDTH)
            console.print(f"  {fmt_timestamp(point.t)}  {fmt_decimal(point.p, 3)}  {bar}")

    run_async(_history())
