"""Custom exceptions for Polymarket API and toolkit errors."""

from __future__ import annotations


class PolymarketError(Exception):
    """Base exception for toolkit errors."""


class ValidationError(PolymarketError):
    """Missing or malformed user input (raised before any network call)."""


class NotFoundError(PolymarketError):
    """An identifier resolved to zero results."""

    def __init__(self, identifier: str, kind: str = "event") -> None:
        self.identifier = identifier
        self.kind = kind
        super().__init__(f"No {kind} found for {identifier!r}")


class UpstreamError(PolymarketError):
    """Network failure, non-2xx response or trading-library error.

    `status_code` is None when no HTTP response was received (timeouts, transport
    errors, signing failures).
    """

    def __init__(self, status_code: int | None, message: str) -> None:
        self.status_code = status_code
        self.message = message
        if status_code is None:
            super().__init__(f"Upstream error: {message}")
        else:
            super().__init__(f"API Error {status_code}: {message}")
