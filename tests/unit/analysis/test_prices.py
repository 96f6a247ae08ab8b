"""Tests for the price reference service and history summaries."""

from __future__ import annotations

from decimal import Decimal

import pytest
import respx
from httpx import Response

from polymarket_toolkit.analysis.prices import PriceReferenceService, summarize_history
from polymarket_toolkit.api import ClobPublicClient
from polymarket_toolkit.api.exceptions import UpstreamError
from polymarket_toolkit.api.models.pricing import PricePoint

CLOB_URL = "https://clob.polymarket.com"


def _points(*prices: str) -> list[PricePoint]:
    return [PricePoint(t=i, p=Decimal(p)) for i, p in enumerate(prices)]


class TestSummarizeHistory:
    def test_three_point_series(self) -> None:
        summary = summarize_history(_points("0.40", "0.50", "0.60"))

        assert summary is not None
        assert summary.open == Decimal("0.40")
        assert summary.close == Decimal("0.60")
        assert summary.high == Decimal("0.60")
        assert summary.low == Decimal("0.40")
        assert summary.change == Decimal("0.20")
        assert summary.change_pct == Decimal("50")
        assert summary.points == 3
        assert (summary.start_ts, summary.end_ts) == (0, 2)

    def test_zero_open_has_no_percentage(self) -> None:
        summary = summarize_history(_points("0", "0.10"))

        assert summary is not None
        assert summary.change == Decimal("0.10")
        assert summary.change_pct is None

    def test_empty_series(self) -> None:
        assert summarize_history([]) is None


class TestQuote:
    @pytest.mark.asyncio
    @respx.mock
    async def test_quote_maps_sides(self) -> None:
        def _price(request):
            side = request.url.params["side"]
            return Response(200, json={"price": "0.66" if side == "SELL" else "0.64"})

        respx.get(f"{CLOB_URL}/price").mock(side_effect=_price)
        respx.get(f"{CLOB_URL}/midpoint").mock(return_value=Response(200, json={"mid": "0.65"}))

        async with ClobPublicClient() as client:
            quote = await PriceReferenceService(client).quote("111")

        assert quote.ask == Decimal("0.66")
        assert quote.bid == Decimal("0.64")
        assert quote.midpoint == Decimal("0.65")
        assert quote.spread == Decimal("0.02")

    @pytest.mark.asyncio
    @respx.mock
    async def test_partial_failure_fails_the_quote(self) -> None:
        respx.get(f"{CLOB_URL}/price").mock(return_value=Response(200, json={"price": "0.5"}))
        respx.get(f"{CLOB_URL}/midpoint").mock(return_value=Response(500, text="boom"))

        async with ClobPublicClient() as client:
            with pytest.raises(UpstreamError) as exc_info:
                await PriceReferenceService(client).quote("111")

        assert exc_info.value.status_code == 500


@pytest.mark.asyncio
@respx.mock
async def test_history_returns_points_and_summary() -> None:
    respx.get(f"{CLOB_URL}/prices-history").mock(
        return_value=Response(
            200,
            json={"history": [{"t": 0, "p": 0.4}, {"t": 1, "p": 0.5}, {"t": 2, "p": 0.6}]},
        )
    )

    async with ClobPublicClient() as client:
        points, summary = await PriceReferenceService(client).history("111", interval="1w")

    assert len(points) == 3
    assert summary is not None
    assert summary.change_pct == Decimal("50")
