"""Cross-market parameter reconciliation for multi-market events.

An event with several sub-markets usually shares tick size, neg-risk flag and
minimum order size across them. `reconcile` reports the common value when every
active market agrees, so the CLI can print it once instead of per market.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from decimal import Decimal
from enum import Enum
from typing import TYPE_CHECKING, Any

if TYPE_CHECKING:
    from collections.abc import Iterable

    from polymarket_toolkit.api.models.market import Market


class MarketParameter(str, Enum):
    """Trading parameters compared across sub-markets."""

    TICK_SIZE = "tick_size"
    NEG_RISK = "neg_risk"
    MIN_ORDER_SIZE = "min_order_size"
    SPREAD = "spread"

    @property
    def label(self) -> str:
        return self.value.replace("_", " ").title()


def is_active_market(market: Market) -> bool:
    """
    Return whether a market is still tradable.

    A market is excluded only on an explicit signal: `closed` is true, `active` is
    false, or `accepting_orders` is false. Missing flags count as active.
    """
    if market.closed is True:
        return False
    if market.active is False:
        return False
    return market.accepting_orders is not False


def filter_active_markets(markets: Iterable[Market]) -> list[Market]:
    return [m for m in markets if is_active_market(m)]


def normalize_value(value: Any) -> str:
    """Canonical string form used for equality (so 0.010 and 0.01 compare equal)."""
    if value is None:
        return "None"
    if isinstance(value, bool):
        return "true" if value else "false"
    if isinstance(value, Decimal):
        return format(value.normalize(), "f")
    if isinstance(value, float):
        return format(Decimal(str(value)).normalize(), "f")
    return str(value)


def reconcile(markets: Iterable[Market], parameter: MarketParameter) -> Any | None:
    """
    Return the shared value of `parameter` across markets, or None if they differ.

    Examples:
        Tick sizes 0.01, 0.01, 0.01 -> Decimal("0.01")
        Tick sizes 0.01, 0.01, 0.001 -> None

    An empty input also yields None.
    """
    values = [getattr(m, parameter.value) for m in markets]
    if not values:
        return None
    first = normalize_value(values[0])
    if all(normalize_value(v) == first for v in values[1:]):
        return values[0]
    return None


@dataclass(frozen=True)
class ParameterSummary:
    """Shared and per-market parameters for a set of active markets."""

    markets: list[Market]
    shared: dict[MarketParameter, Any] = field(default_factory=dict)

    def is_shared(self, parameter: MarketParameter) -> bool:
        return parameter in self.shared

    @property
    def varying(self) -> list[MarketParameter]:
        """Parameters that must be shown per market."""
        return [p for p in MarketParameter if p not in self.shared]


def summarize_parameters(markets: Iterable[Market]) -> ParameterSummary:
    """Filter to active markets and reconcile every parameter across them.

    A parameter counts as shared only when all markets agree on a non-null value.
    """
    active = filter_active_markets(markets)
    shared: dict[MarketParameter, Any] = {}
    if active:
        for parameter in MarketParameter:
            value = reconcile(active, parameter)
            if value is not None:
                shared[parameter] = value
    return ParameterSummary(markets=active, shared=shared)
