"""Response envelope shared by every Stockal endpoint."""

from __future__ import annotations

from stockal.api.models._base import StockalModel


class Envelope(StockalModel):
    """Uniform `{code, message, data, error?}` wrapper.

    Subclasses add a typed `data` payload. Every field has a default so that
    sparse error bodies still decode.
    """

    code: int = 0
    """Application status code (usually mirrors the HTTP status)."""

    message: str = ""
    """Human-readable status, "Success" on the happy path."""

    error: str | None = None
    """Application error string, present only on failures."""


class APIErrorBody(StockalModel):
    """Dedicated error shape used to classify non-200 responses."""

    code: int = 0
    message: str = ""
    error: str | None = None
