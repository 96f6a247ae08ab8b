"""Factory functions for constructing Polymarket API clients.

Single place where CLI commands build clients, so tests can patch construction
and every command reads configuration the same way.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

import typer

from polymarket_toolkit.api import ClobPublicClient, GammaClient
from polymarket_toolkit.api.config import APIConfig
from polymarket_toolkit.api.credentials import missing_credential_env_vars, resolve_credentials
from polymarket_toolkit.api.exceptions import ValidationError
from polymarket_toolkit.cli.utils import console, exit_error

if TYPE_CHECKING:
    from polymarket_toolkit.api.credentials import ClobCredentials
    from polymarket_toolkit.api.trading import ClobTradingClient


def _config() -> APIConfig:
    try:
        return APIConfig.from_env()
    except ValidationError as e:
        exit_error(e)


def gamma_client(*, timeout: float = 30.0) -> GammaClient:
    """Create a GammaClient (use as async context manager)."""
    return GammaClient(_config(), timeout=timeout)


def clob_client(*, timeout: float = 30.0) -> ClobPublicClient:
    """Create a ClobPublicClient (use as async context manager)."""
    return ClobPublicClient(_config(), timeout=timeout)


def require_credentials(purpose: str) -> ClobCredentials:
    """Return signing credentials or exit 1 naming the missing variables."""
    credentials = resolve_credentials()
    if credentials is None:
        missing = ", ".join(missing_credential_env_vars())
        console.print(f"[red]Error:[/red] {purpose} requires wallet credentials.")
        console.print(f"[dim]Set {missing} in your environment or .env file.[/dim]")
        raise typer.Exit(1)
    return credentials


async def connect_trading_client(credentials: ClobCredentials) -> ClobTradingClient:
    """Derive API credentials and return the authenticated trading client."""
    from polymarket_toolkit.api.trading import ClobTradingClient

    return await ClobTradingClient.connect(credentials, _config())
