"""Pydantic models for authentication."""

from __future__ import annotations

from datetime import UTC, datetime

from pydantic import Field

from stockal.api.models._base import StockalModel
from stockal.api.models.envelope import Envelope


def _parse_timestamp(value: str) -> datetime | None:
    if not value:
        return None
    try:
        parsed = datetime.fromisoformat(value)
    except ValueError:
        return None
    if parsed.tzinfo is None:
        parsed = parsed.replace(tzinfo=UTC)
    return parsed


class Credentials(StockalModel):
    """Login request body. Never persisted."""

    username: str
    password: str = Field(repr=False)


class LoginData(StockalModel):
    """Tokens issued by POST /v3/auth/login.

    The client stores this as its session. Expiry timestamps are exposed for
    callers but never enforced.
    """

    access_token: str = Field(default="", repr=False)
    """Opaque token sent verbatim in the Authorization header."""

    refresh_token: str = Field(default="", repr=False)
    expiry_access_token: str = ""
    expiry_refresh_token: str = ""

    @property
    def access_token_expires_at(self) -> datetime | None:
        """Parsed access-token expiry, or None when blank or unparseable."""
        return _parse_timestamp(self.expiry_access_token)

    @property
    def refresh_token_expires_at(self) -> datetime | None:
        return _parse_timestamp(self.expiry_refresh_token)


class LoginResponse(Envelope):
    """Envelope returned by the login endpoint."""

    data: LoginData | None = None
