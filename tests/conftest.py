"""
Shared test fixtures.

PHILOSOPHY: Use REAL objects wherever possible. Only mock at system boundaries.
- Real Pydantic models built from realistic Gamma/CLOB payloads
- respx ONLY for the HTTP boundary
- AsyncMock for the authenticated trading client (py-clob-client is never called)
"""

from __future__ import annotations

import json
from typing import Any

import pytest

GAMMA_URL = "https://gamma-api.polymarket.com"
CLOB_URL = "https://clob.polymarket.com"

_ENV_VARS = (
    "GAMMA_API_HOST",
    "CLOB_HOST",
    "POLYMARKET_CHAIN_ID",
    "POLYMARKET_SIGNATURE_TYPE",
    "POLYMARKET_LOG_LEVEL",
    "PRIVATE_KEY",
    "FUNDER_ADDRESS",
)


@pytest.fixture(autouse=True)
def _isolate_env(monkeypatch: pytest.MonkeyPatch) -> None:
    """Tests never see the developer's hosts or wallet credentials."""
    for name in _ENV_VARS:
        monkeypatch.delenv(name, raising=False)


def make_market_payload(
    market_id: str = "501",
    *,
    question: str = "Will BTC close above $100k?",
    condition_id: str = "0xc0nd1",
    token_ids: tuple[str, str] = ("111111111111", "222222222222"),
    tick_size: Any = "0.01",
    neg_risk: Any = False,
    min_order_size: Any = 5,
    spread: Any = "0.02",
    active: Any = True,
    closed: Any = False,
    accepting_orders: Any = True,
) -> dict[str, Any]:
    """Gamma market payload with JSON-string arrays, as the API sends them."""
    return {
        "id": market_id,
        "question": question,
        "conditionId": condition_id,
        "slug": f"market-{market_id}",
        "active": active,
        "closed": closed,
        "acceptingOrders": accepting_orders,
        "orderPriceMinTickSize": tick_size,
        "orderMinSize": min_order_size,
        "negRisk": neg_risk,
        "spread": spread,
        "bestBid": "0.64",
        "bestAsk": "0.66",
        "volumeNum": 12345.5,
        "liquidity": "2500",
        "outcomes": json.dumps(["Yes", "No"]),
        "outcomePrices": json.dumps(["0.65", "0.35"]),
        "clobTokenIds": json.dumps(list(token_ids)),
    }


def make_event_payload(
    slug: str = "bitcoin-up-or-down",
    *,
    markets: list[dict[str, Any]] | None = None,
    title: str = "Bitcoin Up or Down",
) -> dict[str, Any]:
    return {
        "id": "9001",
        "slug": slug,
        "title": title,
        "active": True,
        "closed": False,
        "negRisk": False,
        "volume": "50000",
        "liquidity": "8000",
        "markets": markets if markets is not None else [make_market_payload()],
    }


@pytest.fixture
def market_payload() -> dict[str, Any]:
    return make_market_payload()


@pytest.fixture
def event_payload() -> dict[str, Any]:
    return make_event_payload(
        markets=[
            make_market_payload("501", token_ids=("111111111111", "222222222222")),
            make_market_payload(
                "502",
                question="Will BTC close above $120k?",
                condition_id="0xc0nd2",
                token_ids=("333333333333", "444444444444"),
            ),
        ]
    )


@pytest.fixture
def make_market():
    """Factory for validated Market models."""
    from polymarket_toolkit.api.models.market import Market

    def _make(market_id: str = "501", **overrides: Any) -> Market:
        return Market.model_validate(make_market_payload(market_id, **overrides))

    return _make


@pytest.fixture
def wallet_env(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("PRIVATE_KEY", "ab" * 32)
    monkeypatch.setenv("FUNDER_ADDRESS", "0xFunder")


@pytest.fixture
def market_payload_factory():
    return make_market_payload


@pytest.fixture
def event_payload_factory():
    return make_event_payload
