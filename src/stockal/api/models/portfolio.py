"""Pydantic models for the portfolio detail endpoint."""

from __future__ import annotations

from typing import Any

from pydantic import Field

from stockal.api.models._base import StockalModel
from stockal.api.models.envelope import Envelope


class Holding(StockalModel):
    """One owned position.

    Current value and gain/loss are derived from units, price and invested
    amount; they are not sent by the API.
    """

    symbol: str = ""
    ticker: str = ""
    user_id: str = Field(default="", alias="userID")
    date: str = Field(default="", alias="Date")
    """Last update date for this holding."""

    version: int = Field(default=0, alias="__v")
    category: str = ""
    status: str = ""
    timestamp: int = 0
    """Unix timestamp of the last update."""

    total_investment: float = 0.0
    total_unit: float = 0.0
    type: str = ""
    code: str = ""
    company: str = ""
    price: float = 0.0
    listed: bool = False
    close: float = 0.0
    prior_close: float = 0.0
    logo: str = ""

    sell_only: bool = False
    """Only disposal is permitted upstream."""

    @property
    def current_value(self) -> float:
        return self.total_unit * self.price

    @property
    def gain_loss(self) -> float:
        return self.current_value - self.total_investment

    @property
    def gain_loss_percent(self) -> float | None:
        """Gain/loss as a percentage of the invested amount (None if nothing invested)."""
        if self.total_investment == 0:
            return None
        return self.gain_loss / self.total_investment * 100


class PortfolioDetailData(StockalModel):
    """Payload of GET /v2/users/portfolio/detail."""

    pending_data: list[Any] = Field(default_factory=list)
    """Pending transactions; the API does not document their shape."""

    holdings: list[Holding] = Field(default_factory=list)
    timestamp: int = 0
    total_records: int = 0

    def best_performer(self) -> Holding | None:
        """Return the holding with the highest positive gain/loss %, if any."""
        best: Holding | None = None
        best_pct = 0.0
        for holding in self.holdings:
            pct = holding.gain_loss_percent
            if pct is not None and pct > best_pct:
                best, best_pct = holding, pct
        return best


class PortfolioDetailResponse(Envelope):
    data: PortfolioDetailData | None = None
