"""Centralized policy constants for the Polymarket Toolkit.

Named constants for literals shared between the API clients, the analysis helpers
and the CLI. Keeping them in one place prevents the same policy from drifting
between commands.
"""

from __future__ import annotations

# =============================================================================
# Hosts & Chain
# =============================================================================

DEFAULT_GAMMA_HOST: str = "https://gamma-api.polymarket.com"
DEFAULT_CLOB_HOST: str = "https://clob.polymarket.com"

# Polygon mainnet.
DEFAULT_CHAIN_ID: int = 137

# Signature type used by py-clob-client for a proxy (Gnosis Safe) funder wallet.
DEFAULT_SIGNATURE_TYPE: int = 2

# Public event page, used to print shareable links in search results.
EVENT_URL_BASE: str = "https://polymarket.com/event"

# =============================================================================
# Orders
# =============================================================================

# Tick size assumed by `order buy/sell` when `--tick` is not supplied.
DEFAULT_TICK_SIZE: str = "0.01"

# Tick sizes the CLOB accepts (mirrors py-clob-client's TickSize literal).
ALLOWED_TICK_SIZES: tuple[str, ...] = ("0.1", "0.01", "0.001", "0.0001")

# Collateral (USDC.e) balances are reported by the CLOB in base units.
COLLATERAL_DECIMALS: int = 6

# =============================================================================
# Display & Pagination
# =============================================================================

# Levels per side shown by `market orderbook` (the analyzer keeps the full book).
DEFAULT_ORDERBOOK_DISPLAY_DEPTH: int = 10

# Most recent points shown by `market history`.
HISTORY_DISPLAY_POINTS: int = 20

# Width of the ASCII bar drawn next to each history point (price 1.0 = full bar).
HISTORY_BAR_WIDTH: int = 20

DEFAULT_HISTORY_INTERVAL: str = "1d"

DEFAULT_EVENT_LIST_LIMIT: int = 10
DEFAULT_SEARCH_LIMIT: int = 5
