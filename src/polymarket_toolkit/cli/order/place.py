"""Order buy/sell commands - build, preflight and submit an order."""

from __future__ import annotations

from typing import Annotated

import typer

from polymarket_toolkit.api.models.order import OrderType, Side
from polymarket_toolkit.cli.order._helpers import (
    describe_order,
    print_dispatch_result,
    print_quote,
)
from polymarket_toolkit.cli.utils import console, exit_error, require_option, run_async
from polymarket_toolkit.constants import DEFAULT_TICK_SIZE

TokenOption = Annotated[str | None, typer.Option("--token", "-t", help="CLOB token ID.")]
PriceOption = Annotated[
    str | None, typer.Option("--price", "-p", help="Price as a probability in (0, 1).")
]
SizeOption = Annotated[
    str | None,
    typer.Option(
        "--size",
        "-s",
        help="MARKET: dollar amount to spend/receive. LIMIT: number of shares.",
    ),
]
TypeOption = Annotated[
    str, typer.Option("--type", help="Order type: market (FOK) or limit (GTC).")
]
TickOption = Annotated[
    str, typer.Option("--tick", help="Market tick size (0.1, 0.01, 0.001, 0.0001).")
]
NegRiskOption = Annotated[
    bool, typer.Option("--neg-risk", help="Market belongs to a neg-risk event.")
]


def _parse_order_type(raw: str) -> OrderType:
    try:
        return OrderType(raw.strip().lower())
    except ValueError:
        console.print(f"[red]Error:[/red] Invalid order type '{raw}'. Expected market or limit.")
        raise typer.Exit(1) from None


def _place(
    side: Side,
    token: str | None,
    price: str | None,
    size: str | None,
    order_type: str,
    tick: str,
    neg_risk: bool,
) -> None:
    from polymarket_toolkit.analysis.prices import PriceReferenceService
    from polymarket_toolkit.api.exceptions import PolymarketError, ValidationError
    from polymarket_toolkit.cli.client_factory import (
        clob_client,
        connect_trading_client,
        require_credentials,
    )
    from polymarket_toolkit.execution import OrderDispatcher, build_order

    usage = (
        f"pmt order {side.value.lower()} --token ID --price P --size S "
        "[--type market|limit] [--tick 0.01] [--neg-risk]"
    )
    token_id = require_option(token, "--token", usage)
    price_text = require_option(price, "--price", usage)
    size_text = require_option(size, "--size", usage)

    try:
        order = build_order(
            side=side,
            order_type=_parse_order_type(order_type),
            token_id=token_id,
            price=price_text,
            size=size_text,
            tick_size=tick,
            neg_risk=neg_risk,
        )
    except ValidationError as e:
        exit_error(e)

    credentials = require_credentials("Placing an order")

    async def _submit() -> None:
        try:
            client = await connect_trading_client(credentials)
            async with clob_client() as clob:
                quote = await PriceReferenceService(clob).quote(order.token_id)
            print_quote(quote)
            console.print(describe_order(order))
            result = await OrderDispatcher(client).submit(order)
        except PolymarketError as e:
            exit_error(e)

        print_dispatch_result(result)

    run_async(_submit())


def order_buy(
    token: TokenOption = None,
    price: PriceOption = None,
    size: SizeOption = None,
    order_type: TypeOption = OrderType.LIMIT.value,
    tick: TickOption = DEFAULT_TICK_SIZE,
    neg_risk: NegRiskOption = False,
) -> None:
    """Buy outcome shares (collateral is checked before submitting)."""
    _place(Side.BUY, token, price, size, order_type, tick, neg_risk)


def order_sell(
    token: TokenOption = None,
    price: PriceOption = None,
    size: SizeOption = None,
    order_type: TypeOption = OrderType.LIMIT.value,
    tick: TickOption = DEFAULT_TICK_SIZE,
    neg_risk: NegRiskOption = False,
) -> None:
    """Sell outcome shares."""
    _place(Side.SELL, token, price, size, order_type, tick, neg_risk)
