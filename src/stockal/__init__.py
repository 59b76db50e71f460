"""
Stockal client.

Unofficial async client for Stockal's private REST API: login, account
summary, and portfolio holdings.
"""

__version__ = "0.1.0"

from stockal.api import StockalAPI, StockalClient, build_config

# Configure structlog once at import time (quiet by default).
from stockal.logging import configure_structlog

configure_structlog()

__all__ = [
    "StockalAPI",
    "StockalClient",
    "__version__",
    "build_config",
]
