"""
Configuration for Polymarket API clients (hosts and chain parameters).
"""

from __future__ import annotations

import os

from pydantic import BaseModel, ConfigDict

from polymarket_toolkit.api.exceptions import ValidationError
from polymarket_toolkit.constants import (
    DEFAULT_CHAIN_ID,
    DEFAULT_CLOB_HOST,
    DEFAULT_GAMMA_HOST,
    DEFAULT_SIGNATURE_TYPE,
)


def _int_env(name: str, default: int) -> int:
    raw = os.getenv(name)
    if not raw:
        return default
    try:
        return int(raw.strip())
    except ValueError:
        raise ValidationError(f"{name} must be an integer, got {raw!r}") from None


class APIConfig(BaseModel):
    """Hosts and chain settings shared by the Gamma and CLOB clients."""

    model_config = ConfigDict(frozen=True)

    gamma_host: str = DEFAULT_GAMMA_HOST
    clob_host: str = DEFAULT_CLOB_HOST
    chain_id: int = DEFAULT_CHAIN_ID
    signature_type: int = DEFAULT_SIGNATURE_TYPE

    @classmethod
    def from_env(cls) -> APIConfig:
        """Build a config from environment variables, falling back to mainnet defaults.

        Raises:
            ValidationError: If a numeric variable is not an integer.
        """
        return cls(
            gamma_host=os.getenv("GAMMA_API_HOST") or DEFAULT_GAMMA_HOST,
            clob_host=os.getenv("CLOB_HOST") or DEFAULT_CLOB_HOST,
            chain_id=_int_env("POLYMARKET_CHAIN_ID", DEFAULT_CHAIN_ID),
            signature_type=_int_env("POLYMARKET_SIGNATURE_TYPE", DEFAULT_SIGNATURE_TYPE),
        )
