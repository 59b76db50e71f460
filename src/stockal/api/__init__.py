"""Stockal API client module."""

from stockal.api.client import StockalAPI, StockalClient
from stockal.api.config import (
    ClientConfig,
    build_config,
    with_base_url,
    with_headers,
    with_timeout,
    with_transport,
    with_user_agent,
)
from stockal.api.exceptions import (
    DecodeError,
    EmptyCredentialsError,
    InvalidCredentialsError,
    NotAuthenticatedError,
    StockalAPIError,
    StockalError,
    TransportError,
    UnexpectedStatusError,
)
from stockal.api.models import (
    AccountSummaryResponse,
    Holding,
    LoginData,
    LoginResponse,
    PortfolioDetailResponse,
)

__all__ = [
    # Clients
    "StockalAPI",
    "StockalClient",
    # Configuration
    "ClientConfig",
    "build_config",
    "with_base_url",
    "with_headers",
    "with_timeout",
    "with_transport",
    "with_user_agent",
    # Exceptions
    "DecodeError",
    "EmptyCredentialsError",
    "InvalidCredentialsError",
    "NotAuthenticatedError",
    "StockalAPIError",
    "StockalError",
    "TransportError",
    "UnexpectedStatusError",
    # Models
    "AccountSummaryResponse",
    "Holding",
    "LoginData",
    "LoginResponse",
    "PortfolioDetailResponse",
]
