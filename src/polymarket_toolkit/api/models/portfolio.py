"""Pydantic models for authenticated CLOB account responses."""

from __future__ import annotations

from decimal import Decimal
from typing import Any

from pydantic import AliasChoices, BaseModel, ConfigDict, Field, field_validator

from polymarket_toolkit.api.models._parsing import lenient_decimal, optional_str
from polymarket_toolkit.constants import COLLATERAL_DECIMALS

_SCALE = Decimal(10) ** COLLATERAL_DECIMALS


class BalanceAllowance(BaseModel):
    """Response from `GET /balance-allowance` (collateral or conditional token)."""

    model_config = ConfigDict(frozen=True)

    balance: Decimal = Decimal(0)
    """Raw balance in base units (6 decimals for USDC.e and outcome tokens)."""

    allowances: dict[str, str] = Field(default_factory=dict)

    @field_validator("balance", mode="before")
    @classmethod
    def _parse_balance(cls, value: Any) -> Decimal:
        return lenient_decimal(value) or Decimal(0)

    @field_validator("allowances", mode="before")
    @classmethod
    def _stringify_allowances(cls, value: Any) -> dict[str, str]:
        if not isinstance(value, dict):
            return {}
        return {str(k): str(v) for k, v in value.items()}

    @property
    def amount(self) -> Decimal:
        """Balance in whole units (dollars for collateral, shares for outcome tokens)."""
        return self.balance / _SCALE


class OpenOrder(BaseModel):
    """Resting order from `GET /data/orders`."""

    model_config = ConfigDict(frozen=True)

    id: str
    status: str | None = None
    market: str | None = None
    asset_id: str | None = None
    side: str | None = None
    outcome: str | None = None
    price: Decimal | None = None
    original_size: Decimal | None = None
    size_matched: Decimal | None = None
    order_type: str | None = None
    created_at: int | None = None

    @field_validator("price", "original_size", "size_matched", mode="before")
    @classmethod
    def _parse_decimal(cls, value: Any) -> Decimal | None:
        return lenient_decimal(value)

    @field_validator("created_at", mode="before")
    @classmethod
    def _parse_ts(cls, value: Any) -> int | None:
        parsed = lenient_decimal(value)
        return int(parsed) if parsed is not None else None


class CancelResult(BaseModel):
    """Response from the cancel endpoints.

    A non-empty `not_canceled` is a partial success, not an error.
    """

    model_config = ConfigDict(frozen=True)

    canceled: list[str] = Field(default_factory=list)
    not_canceled: dict[str, str] = Field(
        default_factory=dict, validation_alias=AliasChoices("not_canceled", "notCanceled")
    )

    @field_validator("canceled", mode="before")
    @classmethod
    def _parse_canceled(cls, value: Any) -> list[str]:
        if not value:
            return []
        return [optional_str(v) or "" for v in value]

    @field_validator("not_canceled", mode="before")
    @classmethod
    def _parse_not_canceled(cls, value: Any) -> dict[str, str]:
        if not isinstance(value, dict):
            return {}
        return {str(k): str(v) for k, v in value.items()}

    @property
    def partial(self) -> bool:
        """True when at least one order could not be cancelled."""
        return bool(self.not_canceled)

    def merge(self, other: CancelResult) -> CancelResult:
        """Combine two results, keeping request order."""
        return CancelResult(
            canceled=[*self.canceled, *other.canceled],
            not_canceled={**self.not_canceled, **other.not_canceled},
        )
