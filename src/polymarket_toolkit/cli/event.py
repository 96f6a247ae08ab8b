"""Typer CLI commands for event discovery."""

from __future__ import annotations

from typing import Annotated

import typer
from rich.table import Table

from polymarket_toolkit.cli.utils import console, exit_error, fmt_usd, print_json, run_async
from polymarket_toolkit.constants import DEFAULT_EVENT_LIST_LIMIT

app = typer.Typer(help="Event discovery commands.")


def _closed_filter(*, active: bool, closed: bool, show_all: bool) -> bool | None:
    """Map the status flags to the API's `closed` filter (None means both)."""
    if sum((active, closed, show_all)) > 1:
        console.print("[red]Error:[/red] Use only one of --active, --closed, --all.")
        raise typer.Exit(1)
    if show_all:
        return None
    return closed


@app.command("list")
def event_list(
    limit: Annotated[
        int, typer.Option("--limit", "-n", help="Maximum events to show.")
    ] = DEFAULT_EVENT_LIST_LIMIT,
    offset: Annotated[int, typer.Option("--offset", help="Events to skip (pagination).")] = 0,
    order: Annotated[
        str | None,
        typer.Option(
            "--order",
            "--sort",
            help="Sort field (volume, liquidity, startDate, endDate, createdAt).",
        ),
    ] = None,
    ascending: Annotated[
        bool | None,
        typer.Option("--asc/--desc", help="Sort direction.", show_default=False),
    ] = None,
    tag_slug: Annotated[
        str | None, typer.Option("--tag-slug", help="Filter by tag slug (see `pmt tags`).")
    ] = None,
    tag_id: Annotated[int | None, typer.Option("--tag-id", help="Filter by tag ID.")] = None,
    active: Annotated[bool, typer.Option("--active", help="Open events only (default).")] = False,
    closed: Annotated[bool, typer.Option("--closed", help="Closed events only.")] = False,
    show_all: Annotated[bool, typer.Option("--all", help="Open and closed events.")] = False,
    featured: Annotated[bool, typer.Option("--featured", help="Featured events only.")] = False,
    output_json: Annotated[bool, typer.Option("--json", help="Output as JSON")] = False,
) -> None:
    """List events with optional filters."""
    from polymarket_toolkit.api.exceptions import PolymarketError
    from polymarket_toolkit.cli.client_factory import gamma_client

    if limit <= 0:
        console.print("[red]Error:[/red] --limit must be a positive integer.")
        raise typer.Exit(1)
    if offset < 0:
        console.print("[red]Error:[/red] --offset must be >= 0.")
        raise typer.Exit(1)
    closed_filter = _closed_filter(active=active, closed=closed, show_all=show_all)

    async def _list() -> None:
        async with gamma_client() as client:
            try:
                events = await client.get_events(
                    limit=limit,
                    offset=offset,
                    order=order,
                    ascending=ascending,
                    tag_slug=tag_slug,
                    tag_id=tag_id,
                    closed=closed_filter,
                    featured=True if featured else None,
                )
            except PolymarketError as e:
                exit_error(e)

        if output_json:
            print_json([event.model_dump(mode="json") for event in events])
            return

        if not events:
            console.print("[yellow]No events found[/yellow]")
            return

        table = Table(title="Events")
        table.add_column("Title", style="white", overflow="fold")
        table.add_column("Slug", style="cyan", overflow="fold")
        table.add_column("Markets", justify="right")
        table.add_column("Volume", justify="right")
        table.add_column("Liquidity", justify="right")
        table.add_column("Status", style="green")
        for event in events:
            table.add_row(
                event.title,
                event.slug,
                str(len(event.markets)),
                fmt_usd(event.volume),
                fmt_usd(event.liquidity),
                event.status,
            )
        console.print(table)
        console.print(f"\n[dim]Showing {len(events)} events from offset {offset}.[/dim]")
        if len(events) == limit:
            console.print(f"[dim]Next page: --offset {offset + limit}[/dim]")

    run_async(_list())
