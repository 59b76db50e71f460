"""
Shared test fixtures.

PHILOSOPHY: Use REAL objects wherever possible. Only mock at system boundaries.
- Real Pydantic models (not dicts pretending to be models)
- respx or httpx.MockTransport ONLY for the HTTP boundary
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Any

import pytest

from tests.stubs import RecordingTransport

if TYPE_CHECKING:
    from collections.abc import Callable


@pytest.fixture(autouse=True)
def _isolate_env(monkeypatch: pytest.MonkeyPatch) -> None:
    """Keep developer credentials and log settings out of tests."""
    for name in ("STOCKAL_USERNAME", "STOCKAL_PASSWORD", "STOCKAL_BASE_URL", "STOCKAL_LOG_LEVEL"):
        monkeypatch.delenv(name, raising=False)


# ============================================================================
# API payload builders (match the real response structure)
# ============================================================================
@pytest.fixture
def login_payload() -> dict[str, Any]:
    return {
        "code": 200,
        "message": "Success",
        "data": {
            "accessToken": "T",
            "refreshToken": "R",
            "expiryAccessToken": "2025-01-01T00:00:00Z",
            "expiryRefreshToken": "2025-01-08T00:00:00Z",
        },
    }


@pytest.fixture
def account_summary_payload() -> dict[str, Any]:
    return {
        "code": 200,
        "message": "Success",
        "data": {
            "utcTime": "2024-06-01T12:00:00Z",
            "accountSummary": {
                "cashAvailableForTrade": 150.25,
                "cashAvailableForWithdrawal": 100.0,
                "cashBalance": 175.5,
                "goodFaithViolations": "0 of 3",
                "restricted": False,
                "cashSettlement": [{"utcTime": "2024-06-03T00:00:00Z", "cash": 25.25}],
            },
            "unsettledAmount": 25.25,
            "portfolioSummary": {
                "stockPortfolio": {"currentValue": 3595.67, "investmentAmount": 2401.6},
                "stackPortfolio": {"currentValue": 0, "investmentAmount": 0},
                "etfPortfolio": {"currentValue": 510.0, "investmentAmount": 500.0},
                "totalCurrentValue": 4105.67,
                "totalInvestmentAmount": 2901.6,
            },
        },
    }


@pytest.fixture
def make_holding() -> Callable[..., dict[str, Any]]:
    """Build a holding dict in wire format; keyword overrides use wire keys."""

    def _make(**overrides: Any) -> dict[str, Any]:
        holding: dict[str, Any] = {
            "symbol": "AAPL",
            "ticker": "AAPL",
            "userID": "user-1",
            "Date": "2024-06-01",
            "__v": 0,
            "category": "stock",
            "status": "successful",
            "timestamp": 1717243200,
            "totalInvestment": 2401.60,
            "totalUnit": 17,
            "type": "stock",
            "code": "AAPL",
            "company": "Apple Inc.",
            "price": 211.51,
            "listed": True,
            "close": 211.51,
            "priorClose": 209.0,
            "logo": "https://example.com/aapl.png",
        }
        holding.update(overrides)
        return holding

    return _make


@pytest.fixture
def portfolio_payload(make_holding: Callable[..., dict[str, Any]]) -> dict[str, Any]:
    return {
        "code": 200,
        "message": "Success",
        "data": {
            "pendingData": [{"orderId": "abc", "amount": 10}],
            "holdings": [
                make_holding(),
                make_holding(
                    symbol="MSFT",
                    ticker="MSFT",
                    code="MSFT",
                    company="Microsoft Corporation",
                    totalInvestment=500.0,
                    totalUnit=1.5,
                    price=300.0,
                    sellOnly=True,
                ),
            ],
            "timestamp": 1717243200,
            "totalRecords": 2,
        },
    }


@pytest.fixture
def recording_transport() -> RecordingTransport:
    """Call-counting stub transport; register handlers in `.routes` by path."""
    return RecordingTransport()
