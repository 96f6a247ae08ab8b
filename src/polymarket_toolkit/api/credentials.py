"""Helpers for resolving CLOB signing credentials from environment variables."""

from __future__ import annotations

import os

from pydantic import BaseModel, ConfigDict, SecretStr

PRIVATE_KEY_ENV = "PRIVATE_KEY"
FUNDER_ADDRESS_ENV = "FUNDER_ADDRESS"


class ClobCredentials(BaseModel):
    """Wallet key and proxy-wallet funder used to derive CLOB API credentials."""

    model_config = ConfigDict(frozen=True)

    private_key: SecretStr
    funder_address: str


def missing_credential_env_vars() -> list[str]:
    """Return the names of required credential variables that are unset."""
    return [name for name in (PRIVATE_KEY_ENV, FUNDER_ADDRESS_ENV) if not os.getenv(name)]


def resolve_credentials() -> ClobCredentials | None:
    """Resolve signing credentials, or None when any required variable is missing."""
    private_key = os.getenv(PRIVATE_KEY_ENV)
    funder_address = os.getenv(FUNDER_ADDRESS_ENV)
    if not private_key or not funder_address:
        return None

    private_key = private_key.strip()
    if not private_key.startswith("0x"):
        private_key = "0x" + private_key
    return ClobCredentials(
        private_key=SecretStr(private_key), funder_address=funder_address.strip()
    )
