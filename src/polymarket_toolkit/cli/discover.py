"""Discovery commands: full-text search and tag listing."""

from __future__ import annotations

from typing import Annotated

import typer
from rich.table import Table

from polymarket_toolkit.cli.utils import console, exit_error, fmt_usd, print_json, run_async
from polymarket_toolkit.constants import DEFAULT_SEARCH_LIMIT, EVENT_URL_BASE


def search(
    query: Annotated[str, typer.Argument(help="Search text (e.g. 'bitcoin').")],
    limit: Annotated[
        int, typer.Option("--limit", "-n", help="Results per type (events, tags).")
    ] = DEFAULT_SEARCH_LIMIT,
    output_json: Annotated[bool, typer.Option("--json", help="Output as JSON")] = False,
) -> None:
    """Search active events and tags."""
    from polymarket_toolkit.api.exceptions import PolymarketError
    from polymarket_toolkit.cli.client_factory import gamma_client

    if not query.strip():
        console.print("[red]Error:[/red] Search query must not be empty.")
        raise typer.Exit(1)
    if limit <= 0:
        console.print("[red]Error:[/red] --limit must be a positive integer.")
        raise typer.Exit(1)

    async def _search() -> None:
        async with gamma_client() as client:
            try:
                results = await client.search(query.strip(), limit_per_type=limit)
            except PolymarketError as e:
                exit_error(e)

        if output_json:
            print_json(results.model_dump(mode="json"))
            return

        if not results.events and not results.tags:
            console.print(f"[yellow]No results for '{query}'[/yellow]")
            return

        if results.events:
            table = Table(title=f"Events matching '{query}'")
            table.add_column("Title", style="white", overflow="fold")
            table.add_column("Slug", style="cyan", overflow="fold")
            table.add_column("Markets", justify="right")
            table.add_column("Volume", justify="right")
            table.add_column("Status", style="green")
            for event in results.events:
                table.add_row(
                    event.title,
                    event.slug,
                    str(len(event.markets)),
                    fmt_usd(event.volume),
                    event.status,
                )
            console.print(table)
            for event in results.events:
                console.print(f"[dim]{EVENT_URL_BASE}/{event.slug}[/dim]")

        if results.tags:
            tag_list = ", ".join(
                f"{tag.display_name} ({tag.event_count})"
                if tag.event_count is not None
                else tag.display_name
                for tag in results.tags
            )
            console.print(f"\n[bold]Tags:[/bold] {tag_list}")

    run_async(_search())


def tags(
    limit: Annotated[int | None, typer.Option("--limit", "-n", help="Maximum tags.")] = None,
    output_json: Annotated[bool, typer.Option("--json", help="Output as JSON")] = False,
) -> None:
    """List category tags (use a slug with `event list --tag-slug`)."""
    from polymarket_toolkit.api.exceptions import PolymarketError
    from polymarket_toolkit.cli.client_factory import gamma_client

    async def _tags() -> None:
        async with gamma_client() as client:
            try:
                tag_list = await client.get_tags(limit=limit)
            except PolymarketError as e:
                exit_error(e)

        if output_json:
            print_json([tag.model_dump(mode="json") for tag in tag_list])
            return

        if not tag_list:
            console.print("[yellow]No tags found[/yellow]")
            return

        table = Table(title="Tags")
        table.add_column("ID", style="dim")
        table.add_column("Label", style="white")
        table.add_column("Slug", style="cyan")
        for tag in tag_list:
            table.add_row(tag.id, tag.label or "", tag.slug or "")
        console.print(table)

    run_async(_tags())
