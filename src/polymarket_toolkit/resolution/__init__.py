"""Identifier classification and slug/URL resolution."""

from polymarket_toolkit.resolution.identifiers import (
    IdentifierKind,
    classify,
    extract_slug,
    slug_from_url,
)
from polymarket_toolkit.resolution.resolver import (
    Resolution,
    ResolvedMarket,
    fetch_event,
    resolve,
)

__all__ = [
    "IdentifierKind",
    "Resolution",
    "ResolvedMarket",
    "classify",
    "extract_slug",
    "fetch_event",
    "resolve",
    "slug_from_url",
]
