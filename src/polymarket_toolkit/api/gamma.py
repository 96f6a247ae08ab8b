"""Gamma market-metadata client (events, markets, tags, search)."""

from __future__ import annotations

from typing import Any

import structlog

from polymarket_toolkit.api._base import ClientBase
from polymarket_toolkit.api.config import APIConfig
from polymarket_toolkit.api.exceptions import UpstreamError
from polymarket_toolkit.api.models.event import Event, Tag
from polymarket_toolkit.api.models.market import Market
from polymarket_toolkit.api.models.search import SearchResults

logger = structlog.get_logger()


def _as_list(data: Any, path: str) -> list[Any]:
    if not isinstance(data, list):
        raise UpstreamError(None, f"Unexpected response shape from {path} (expected array).")
    return data


class GammaClient(ClientBase):
    """
    Unauthenticated client for the Gamma market-metadata API.

    Use this for discovery and identifier resolution - no credentials required.
    """

    def __init__(self, config: APIConfig | None = None, timeout: float = 30.0) -> None:
        config = config or APIConfig()
        super().__init__(config.gamma_host, timeout=timeout)

    async def __aenter__(self) -> GammaClient:
        return self

    # ==================== Events ====================

    async def get_events(
        self,
        *,
        slug: str | None = None,
        limit: int | None = None,
        offset: int | None = None,
        order: str | None = None,
        ascending: bool | None = None,
        tag_slug: str | None = None,
        tag_id: int | None = None,
        closed: bool | None = None,
        featured: bool | None = None,
    ) -> list[Event]:
        """
        Fetch events with optional filters.

        Args:
            slug: Exact event slug.
            limit: Page size.
            offset: Number of events to skip.
            order: Sort field (volume, liquidity, startDate, endDate, createdAt, ...).
            ascending: Sort direction; None leaves the server default.
            tag_slug: Category tag slug (crypto, politics, sports, ...).
            tag_id: Category tag ID.
            closed: True for closed events only, False for open events only, None for both.
            featured: Only featured events when True.
        """
        params: dict[str, Any] = {}
        if slug:
            params["slug"] = slug
        if limit is not None:
            params["limit"] = limit
        if offset is not None:
            params["offset"] = offset
        if order:
            params["order"] = order
        if ascending is not None:
            params["ascending"] = str(ascending).lower()
        if tag_slug:
            params["tag_slug"] = tag_slug
        if tag_id is not None:
            params["tag_id"] = tag_id
        if closed is not None:
            params["closed"] = str(closed).lower()
        if featured is not None:
            params["featured"] = str(featured).lower()

        data = await self._get("/events", params or None)
        return [Event.model_validate(e) for e in _as_list(data, "/events")]

    async def get_event_by_slug(self, slug: str) -> Event | None:
        """Fetch the event matching `slug`, or None if no event matches."""
        events = await self.get_events(slug=slug)
        if not events:
            return None
        if len(events) > 1:
            logger.warning("Multiple events matched slug; using the first", slug=slug)
        return events[0]

    # ==================== Markets ====================

    async def get_market(self, market_id: str) -> Market:
        """Fetch single market detail by Gamma market ID."""
        data = await self._get(f"/markets/{market_id}")
        return Market.model_validate(data)

    # ==================== Discovery ====================

    async def get_tags(self, limit: int | None = None) -> list[Tag]:
        """List category tags."""
        params = {"limit": limit} if limit is not None else None
        data = await self._get("/tags", params)
        return [Tag.model_validate(t) for t in _as_list(data, "/tags")]

    async def search(
        self,
        query: str,
        *,
        limit_per_type: int = 5,
        events_status: str | None = "active",
    ) -> SearchResults:
        """Full-text search across events and tags."""
        params: dict[str, Any] = {"q": query, "limit_per_type": limit_per_type}
        if events_status:
            params["events_status"] = events_status
        data = await self._get("/public-search", params)
        return SearchResults.model_validate(data or {})
