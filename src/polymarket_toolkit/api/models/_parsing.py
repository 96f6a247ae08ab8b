"""Lenient coercion helpers for loosely-typed Gamma/CLOB payloads.

The metadata service mixes numbers, numeric strings, empty strings and nulls for the
same field, and encodes some arrays as JSON strings (`'["Yes", "No"]'`). These helpers
are used from `mode="before"` validators so the models expose clean optional values.
"""

from __future__ import annotations

import json
from decimal import Decimal, InvalidOperation
from typing import Any


def lenient_decimal(value: Any) -> Decimal | None:
    """Parse a number or numeric string into Decimal; blanks and garbage become None."""
    if value is None or isinstance(value, bool):
        return None
    if isinstance(value, Decimal):
        return value
    if isinstance(value, (int, float)):
        return Decimal(str(value))
    if isinstance(value, str):
        stripped = value.strip()
        if not stripped:
            return None
        try:
            return Decimal(stripped)
        except InvalidOperation:
            return None
    return None


def lenient_bool(value: Any) -> bool | None:
    """Parse booleans that may arrive as `"true"`/`"false"` strings."""
    if value is None or isinstance(value, bool):
        return value
    if isinstance(value, str):
        lowered = value.strip().lower()
        if lowered in ("true", "1"):
            return True
        if lowered in ("false", "0"):
            return False
    return None


def json_string_list(value: Any) -> list[Any]:
    """Decode a list that may be sent as a JSON string or a comma-separated string."""
    if value is None or value == "":
        return []
    if isinstance(value, list):
        return value
    if isinstance(value, str):
        try:
            decoded = json.loads(value)
        except json.JSONDecodeError:
            return [part.strip() for part in value.split(",") if part.strip()]
        if isinstance(decoded, list):
            return decoded
    return []


def optional_str(value: Any) -> str | None:
    """Coerce IDs that may arrive as ints into strings."""
    if value is None or value == "":
        return None
    return str(value)
