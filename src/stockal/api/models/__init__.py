"""Pydantic models for Stockal API requests and responses."""

from stockal.api.models.account import (
    AccountSummary,
    AccountSummaryData,
    AccountSummaryResponse,
    CashSettlement,
    PortfolioBucket,
    PortfolioSummary,
)
from stockal.api.models.auth import Credentials, LoginData, LoginResponse
from stockal.api.models.envelope import APIErrorBody, Envelope
from stockal.api.models.portfolio import Holding, PortfolioDetailData, PortfolioDetailResponse

__all__ = [
    "APIErrorBody",
    "AccountSummary",
    "AccountSummaryData",
    "AccountSummaryResponse",
    "CashSettlement",
    "Credentials",
    "Envelope",
    "Holding",
    "LoginData",
    "LoginResponse",
    "PortfolioBucket",
    "PortfolioDetailData",
    "PortfolioDetailResponse",
    "PortfolioSummary",
]
