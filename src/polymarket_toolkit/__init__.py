"""
Polymarket Toolkit.

Command-line tooling for Polymarket market discovery, pricing and CLOB order dispatch.
"""

__version__ = "0.1.0"

from polymarket_toolkit.api import ClobPublicClient, GammaClient
from polymarket_toolkit.api.config import APIConfig

# Configure structlog once at import time (quiet by default).
from polymarket_toolkit.logging import configure_structlog

configure_structlog()

__all__ = [
    "APIConfig",
    "ClobPublicClient",
    "GammaClient",
    "__version__",
]
