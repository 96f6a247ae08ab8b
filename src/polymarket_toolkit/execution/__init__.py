"""Order construction, dispatch and cancellation."""

from polymarket_toolkit.execution._checks import build_order, validate_tick_size
from polymarket_toolkit.execution._protocols import CollateralProvider, TradingClient
from polymarket_toolkit.execution.dispatcher import InsufficientBalanceError, OrderDispatcher
from polymarket_toolkit.execution.models import DispatchResult, OrderState, PreflightCheck
from polymarket_toolkit.execution.orders import collect_open_orders

__all__ = [
    "CollateralProvider",
    "DispatchResult",
    "InsufficientBalanceError",
    "OrderDispatcher",
    "OrderState",
    "PreflightCheck",
    "TradingClient",
    "build_order",
    "collect_open_orders",
    "validate_tick_size",
]
