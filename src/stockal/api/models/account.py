"""Pydantic models for the account summary endpoint."""

from __future__ import annotations

from pydantic import Field

from stockal.api.models._base import StockalModel
from stockal.api.models.envelope import Envelope


class CashSettlement(StockalModel):
    """Scheduled cash settlement."""

    utc_time: str = ""
    """Settlement date and time (UTC, as sent by the API)."""

    cash: float = 0.0


class AccountSummary(StockalModel):
    """Cash balances and trading restrictions."""

    cash_available_for_trade: float = 0.0
    cash_available_for_withdrawal: float = 0.0
    cash_balance: float = 0.0

    good_faith_violations: str = ""
    """Free-form violation counter, e.g. "0 of 3"."""

    restricted: bool = False
    cash_settlement: list[CashSettlement] = Field(default_factory=list)


class PortfolioBucket(StockalModel):
    """Current value and invested amount for one asset class."""

    current_value: float = 0.0
    investment_amount: float = 0.0

    @property
    def gain_loss(self) -> float:
        return self.current_value - self.investment_amount


class PortfolioSummary(StockalModel):
    """Per-asset-class buckets plus totals."""

    stock_portfolio: PortfolioBucket = Field(default_factory=PortfolioBucket)
    stack_portfolio: PortfolioBucket = Field(default_factory=PortfolioBucket)
    etf_portfolio: PortfolioBucket = Field(default_factory=PortfolioBucket)
    total_current_value: float = 0.0
    total_investment_amount: float = 0.0

    @property
    def total_gain_loss(self) -> float:
        return self.total_current_value - self.total_investment_amount


class AccountSummaryData(StockalModel):
    """Payload of GET /v2/users/accountSummary/summary."""

    utc_time: str = ""
    """When the summary was generated."""

    account_summary: AccountSummary = Field(default_factory=AccountSummary)
    unsettled_amount: float = 0.0
    portfolio_summary: PortfolioSummary = Field(default_factory=PortfolioSummary)


class AccountSummaryResponse(Envelope):
    data: AccountSummaryData | None = None
