"""Tests for slug/URL resolution against a mocked Gamma API."""

from __future__ import annotations

import pytest
import respx
from httpx import Response

from polymarket_toolkit.api import GammaClient
from polymarket_toolkit.api.exceptions import NotFoundError
from polymarket_toolkit.resolution import IdentifierKind, resolve

GAMMA_URL = "https://gamma-api.polymarket.com"


@pytest.mark.asyncio
async def test_raw_identifier_skips_network() -> None:
    with respx.mock(assert_all_called=False) as router:
        route = router.get(f"{GAMMA_URL}/events")
        async with GammaClient() as client:
            resolution = await resolve("0xc0ffee", client)

    assert resolution.kind == IdentifierKind.RAW
    assert resolution.token_ids == ["0xc0ffee"]
    assert resolution.title is None
    assert resolution.markets == []
    assert resolution.condition_ids == ["0xc0ffee"]
    assert not route.called


@pytest.mark.asyncio
@respx.mock
async def test_url_flattens_tokens_in_market_order(event_payload) -> None:
    route = respx.get(f"{GAMMA_URL}/events").mock(
        return_value=Response(200, json=[event_payload])
    )

    async with GammaClient() as client:
        resolution = await resolve("https://polymarket.com/event/bitcoin-up-or-down", client)

    assert route.calls.last.request.url.params["slug"] == "bitcoin-up-or-down"
    assert resolution.kind == IdentifierKind.URL
    assert resolution.title == "Bitcoin Up or Down"
    assert resolution.token_ids == [
        "111111111111",
        "222222222222",
        "333333333333",
        "444444444444",
    ]
    assert [m.token_ids for m in resolution.markets] == [
        ["111111111111", "222222222222"],
        ["333333333333", "444444444444"],
    ]
    assert resolution.condition_ids == ["0xc0nd1", "0xc0nd2"]


@pytest.mark.asyncio
@respx.mock
async def test_slug_with_no_event_raises_not_found() -> None:
    respx.get(f"{GAMMA_URL}/events").mock(return_value=Response(200, json=[]))

    async with GammaClient() as client:
        with pytest.raises(NotFoundError, match="missing-event"):
            await resolve("missing-event", client)
