"""Classification of user-supplied market identifiers.

Commands accept a raw token/condition ID, an event slug, or a full event URL in
the same `--market` option. Classification order matters: token IDs are long digit
strings and condition IDs are 0x-prefixed hex, and both must win over the slug rule.
"""

from __future__ import annotations

import re
from enum import Enum
from urllib.parse import urlparse

from polymarket_toolkit.api.exceptions import ValidationError

_URI_SCHEME = re.compile(r"^[A-Za-z][A-Za-z0-9+.\-]*://")
_HEX_ID = re.compile(r"^0x[0-9a-fA-F]+$")
_LONG_DIGITS = re.compile(r"^\d{10,}$")
_HAS_LETTER = re.compile(r"[A-Za-z]")


class IdentifierKind(str, Enum):
    """What a user-supplied identifier refers to."""

    RAW = "raw"
    SLUG = "slug"
    URL = "url"


def classify(value: str) -> IdentifierKind:
    """
    Classify an identifier as a URL, raw ID or slug.

    Rules, first match wins:
    1. Starts with a URI scheme (`https://...`) -> URL
    2. `0x`-prefixed hex, or 10+ digits -> RAW
    3. Contains a letter -> SLUG
    4. Anything else -> RAW
    """
    candidate = value.strip()
    if _URI_SCHEME.match(candidate):
        return IdentifierKind.URL
    if _HEX_ID.match(candidate) or _LONG_DIGITS.match(candidate):
        return IdentifierKind.RAW
    if _HAS_LETTER.search(candidate):
        return IdentifierKind.SLUG
    return IdentifierKind.RAW


def slug_from_url(url: str) -> str:
    """Return the final path segment of an event URL.

    Raises:
        ValidationError: If the URL has no path segment to use as a slug.
    """
    path = urlparse(url.strip()).path.rstrip("/")
    slug = path.rsplit("/", 1)[-1] if path else ""
    if not slug:
        raise ValidationError(f"Could not find an event slug in URL {url!r}")
    return slug


def extract_slug(value: str) -> str | None:
    """Return the event slug for a slug or URL identifier, or None for raw IDs."""
    kind = classify(value)
    if kind == IdentifierKind.URL:
        return slug_from_url(value)
    if kind == IdentifierKind.SLUG:
        return value.strip()
    return None
