"""Resolve slugs and event URLs into tradable token IDs."""

from __future__ import annotations

from typing import TYPE_CHECKING

import structlog
from pydantic import BaseModel, ConfigDict, Field

from polymarket_toolkit.api.exceptions import NotFoundError, ValidationError
from polymarket_toolkit.api.models.event import Event  # noqa: TC001
from polymarket_toolkit.api.models.market import Market, Token  # noqa: TC001
from polymarket_toolkit.resolution.identifiers import IdentifierKind, classify, extract_slug

if TYPE_CHECKING:
    from polymarket_toolkit.api.gamma import GammaClient

logger = structlog.get_logger()


class ResolvedMarket(BaseModel):
    """One sub-market of a resolved event, with its tokens in outcome order."""

    model_config = ConfigDict(frozen=True)

    question: str
    market_id: str
    condition_id: str | None = None
    tokens: list[Token] = Field(default_factory=list)

    @property
    def token_ids(self) -> list[str]:
        return [token.token_id for token in self.tokens]

    @classmethod
    def from_market(cls, market: Market) -> ResolvedMarket:
        return cls(
            question=market.question,
            market_id=market.id,
            condition_id=market.condition_id,
            tokens=market.tokens,
        )


class Resolution(BaseModel):
    """Result of resolving an identifier.

    For RAW input, `token_ids` holds the input itself and `event` is None.
    """

    model_config = ConfigDict(frozen=True)

    identifier: str
    kind: IdentifierKind
    slug: str | None = None
    title: str | None = None
    event: Event | None = None
    token_ids: list[str] = Field(default_factory=list)
    markets: list[ResolvedMarket] = Field(default_factory=list)

    @property
    def condition_ids(self) -> list[str]:
        """Condition IDs of every sub-market (market-scoped order operations use these)."""
        if self.kind == IdentifierKind.RAW:
            return [self.identifier]
        return [m.condition_id for m in self.markets if m.condition_id]


async def fetch_event(identifier: str, gamma: GammaClient) -> Event:
    """
    Fetch the event named by a slug or URL.

    Raises:
        ValidationError: If the identifier is a raw ID rather than a slug/URL.
        NotFoundError: If no event matches the slug.
    """
    slug = extract_slug(identifier)
    if slug is None:
        raise ValidationError(f"{identifier!r} looks like a raw ID, not an event slug or URL")

    logger.info("Resolving event slug", slug=slug)
    event = await gamma.get_event_by_slug(slug)
    if event is None:
        raise NotFoundError(slug, kind="event")
    return event


async def resolve(identifier: str, gamma: GammaClient) -> Resolution:
    """
    Resolve an identifier into token IDs.

    RAW identifiers are returned as-is without a network call. Slugs and URLs are
    expanded into every sub-market's tokens, flattened in market order while the
    per-market grouping is kept for display.

    Raises:
        NotFoundError: If a slug/URL matches no event.
        UpstreamError: If the metadata service fails.
    """
    value = identifier.strip()
    if not value:
        raise ValidationError("Identifier must not be empty")

    kind = classify(value)
    if kind == IdentifierKind.RAW:
        return Resolution(identifier=value, kind=kind, token_ids=[value])

    event = await fetch_event(value, gamma)
    markets = [ResolvedMarket.from_market(m) for m in event.markets]
    token_ids = [token_id for m in markets for token_id in m.token_ids]
    logger.info(
        "Resolved event",
        slug=event.slug,
        markets=len(markets),
        tokens=len(token_ids),
    )
    return Resolution(
        identifier=value,
        kind=kind,
        slug=event.slug,
        title=event.title,
        event=event,
        token_ids=token_ids,
        markets=markets,
    )
