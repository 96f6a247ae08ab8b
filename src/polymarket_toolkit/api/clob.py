"""Public CLOB client - prices, midpoints, order books and price history."""

from __future__ import annotations

from typing import TYPE_CHECKING, Any

from polymarket_toolkit.api._base import ClientBase
from polymarket_toolkit.api.config import APIConfig
from polymarket_toolkit.api.exceptions import UpstreamError, ValidationError
from polymarket_toolkit.api.models._parsing import lenient_decimal
from polymarket_toolkit.api.models.order import Side
from polymarket_toolkit.api.models.orderbook import OrderBook
from polymarket_toolkit.api.models.pricing import PricePoint
from polymarket_toolkit.constants import DEFAULT_HISTORY_INTERVAL

if TYPE_CHECKING:
    from decimal import Decimal


def _price_field(data: Any, key: str, path: str) -> Decimal:
    value = lenient_decimal(data.get(key)) if isinstance(data, dict) else None
    if value is None:
        raise UpstreamError(None, f"Missing '{key}' in response from {path}: {data!r}")
    return value


class ClobPublicClient(ClientBase):
    """
    Unauthenticated client for read-only CLOB endpoints.

    Every call is a single request; there is no caching between calls.
    """

    def __init__(self, config: APIConfig | None = None, timeout: float = 30.0) -> None:
        config = config or APIConfig()
        super().__init__(config.clob_host, timeout=timeout)

    async def __aenter__(self) -> ClobPublicClient:
        return self

    async def get_price(self, token_id: str, side: Side | str) -> Decimal:
        """
        Fetch the instant price for one side of a token's book.

        Note: `side=SELL` returns the ask (price to buy now) and `side=BUY` returns
        the bid (price to sell now).
        """
        side_value = side.value if isinstance(side, Side) else side.upper()
        data = await self._get("/price", {"side": side_value, "token_id": token_id})
        return _price_field(data, "price", "/price")

    async def get_midpoint(self, token_id: str) -> Decimal:
        """Fetch the midpoint price for a token."""
        data = await self._get("/midpoint", {"token_id": token_id})
        return _price_field(data, "mid", "/midpoint")

    async def get_order_book(self, token_id: str) -> OrderBook:
        """Fetch the full order book for a token (levels are unsorted)."""
        data = await self._get("/book", {"token_id": token_id})
        return OrderBook.model_validate(data)

    async def get_prices_history(
        self,
        token_id: str,
        *,
        interval: str | None = None,
        start_ts: int | None = None,
        end_ts: int | None = None,
        fidelity: int | None = None,
    ) -> list[PricePoint]:
        """
        Fetch a price time series for a token.

        Args:
            token_id: CLOB token ID.
            interval: Relative window (1h, 6h, 1d, 1w, max). Defaults to 1d when no range is set.
            start_ts: Range start (Unix seconds). Requires `end_ts`.
            end_ts: Range end (Unix seconds). Requires `start_ts`.
            fidelity: Sampling granularity in minutes.

        Raises:
            ValidationError: If `interval` is combined with a range, or the range is incomplete.
        """
        has_range = start_ts is not None or end_ts is not None
        if has_range and interval is not None:
            raise ValidationError("Use either an interval or a start/end range, not both.")
        if has_range and (start_ts is None or end_ts is None):
            raise ValidationError("A time range needs both a start and an end timestamp.")
        if start_ts is not None and end_ts is not None and start_ts >= end_ts:
            raise ValidationError("Range start must be before range end.")
        if fidelity is not None and fidelity <= 0:
            raise ValidationError("Fidelity must be a positive number of minutes.")

        params: dict[str, Any] = {"market": token_id}
        if start_ts is not None and end_ts is not None:
            params["startTs"] = start_ts
            params["endTs"] = end_ts
        else:
            params["interval"] = interval or DEFAULT_HISTORY_INTERVAL
        if fidelity is not None:
            params["fidelity"] = fidelity

        data = await self._get("/prices-history", params)
        history = data.get("history") if isinstance(data, dict) else None
        return [PricePoint.model_validate(point) for point in history or []]
