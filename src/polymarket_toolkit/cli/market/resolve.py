"""Market resolve command - turn an event slug or URL into token IDs."""

from __future__ import annotations

from typing import Annotated

import typer

from polymarket_toolkit.cli.market._helpers import (
    parameters_as_json,
    print_market_block,
    print_shared_parameters,
)
from polymarket_toolkit.cli.utils import console, exit_error, fmt_flag, print_json, run_async


def market_resolve(
    identifier: Annotated[
        str, typer.Argument(help="Event slug or URL (e.g. bitcoin-up-or-down).")
    ],
    output_json: Annotated[bool, typer.Option("--json", help="Output as JSON")] = False,
) -> None:
    """Resolve an event into its active markets, trading parameters and token IDs."""
    from polymarket_toolkit.analysis.parameters import summarize_parameters
    from polymarket_toolkit.api.exceptions import PolymarketError
    from polymarket_toolkit.cli.client_factory import gamma_client
    from polymarket_toolkit.resolution import IdentifierKind, classify, resolve

    if classify(identifier) == IdentifierKind.RAW:
        console.print(
            f"[yellow]'{identifier}' looks like a raw token or condition ID; "
            "it can be used directly.[/yellow]"
        )
        return

    async def _resolve() -> None:
        async with gamma_client() as client:
            try:
                resolution = await resolve(identifier, client)
            except PolymarketError as e:
                exit_error(e)

        event = resolution.event
        markets = event.markets if event is not None else []
        summary = summarize_parameters(markets)

        if output_json:
            print_json(
                {
                    "title": resolution.title,
                    "slug": resolution.slug,
                    "neg_risk": event.neg_risk if event is not None else None,
                    "token_ids": resolution.token_ids,
                    "shared_parameters": parameters_as_json(summary),
                    "markets": [
                        {
                            "question": m.question,
                            "market_id": m.id,
                            "condition_id": m.condition_id,
                            "tick_size": m.tick_size,
                            "neg_risk": m.neg_risk,
                            "min_order_size": m.min_order_size,
                            "spread": m.spread,
                            "tokens": [t.model_dump(mode="json") for t in m.tokens],
                        }
                        for m in summary.markets
                    ],
                }
            )
            return

        console.print(f"[bold]Event:[/bold] {resolution.title}")
        console.print(f"Slug: {resolution.slug}")
        if event is not None and event.neg_risk is not None:
            console.print(f"Neg Risk: {fmt_flag(event.neg_risk)}")

        if not summary.markets:
            console.print(
                f"[yellow]No active markets ({len(markets)} total, all closed or paused)[/yellow]"
            )
            return

        console.print(f"Active markets: {len(summary.markets)} of {len(markets)}\n")
        print_shared_parameters(summary)
        for index, market in enumerate(summary.markets, start=1):
            print_market_block(index, market, summary)

    run_async(_resolve())
