"""Base client infrastructure - HTTP plumbing and error mapping."""

from __future__ import annotations

from typing import Any

import httpx
import structlog

from polymarket_toolkit.api.exceptions import UpstreamError

logger = structlog.get_logger()


class ClientBase:
    """
    Base class for the read-only Polymarket REST clients.

    One GET per call: failures are mapped to `UpstreamError` and never retried.
    """

    _client: httpx.AsyncClient

    def __init__(self, base_url: str, timeout: float = 30.0) -> None:
        self._client = httpx.AsyncClient(
            base_url=base_url,
            timeout=timeout,
            headers={"Accept": "application/json"},
        )

    async def __aenter__(self) -> ClientBase:
        return self

    async def __aexit__(
        self,
        exc_type: type[BaseException] | None,
        exc_val: BaseException | None,
        exc_tb: Any,
    ) -> None:
        await self.aclose()

    async def aclose(self) -> None:
        """Close the underlying HTTP client."""
        await self._client.aclose()

    async def _get(self, path: str, params: dict[str, Any] | None = None) -> Any:
        """
        Make a GET request.

        Returns:
            Decoded JSON body (object or array, depending on the endpoint).

        Raises:
            UpstreamError: On transport errors, timeouts, non-2xx responses or non-JSON bodies.
        """
        try:
            response = await self._client.get(path, params=params)
        except httpx.TimeoutException as e:
            logger.warning("Request timed out", path=path)
            raise UpstreamError(None, f"GET {path} timed out") from e
        except httpx.HTTPError as e:
            logger.warning("Request failed", path=path, error=str(e))
            raise UpstreamError(None, f"GET {path} failed: {e}") from e

        if response.status_code >= 400:
            raise UpstreamError(response.status_code, response.text)

        try:
            return response.json()
        except ValueError as e:
            raise UpstreamError(response.status_code, f"Invalid JSON from {path}") from e
