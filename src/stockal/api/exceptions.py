"""Custom exceptions for Stockal API errors."""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from stockal.api.models.envelope import Envelope


class StockalError(Exception):
    """Base exception for Stockal client errors."""


class EmptyCredentialsError(StockalError, ValueError):
    """Username or password was blank; raised before any request is made."""

    def __init__(self, field: str) -> None:
        self.field = field
        super().__init__(f"{field} cannot be empty")


class NotAuthenticatedError(StockalError):
    """An authenticated endpoint was called before a successful login."""

    def __init__(self) -> None:
        super().__init__("not authenticated: please login first")


class TransportError(StockalError):
    """Request could not be built, sent, or its body read."""

    def __init__(self, operation: str, message: str) -> None:
        self.operation = operation
        super().__init__(f"{operation} request failed: {message}")


class DecodeError(StockalError):
    """Response body is not valid JSON for the expected envelope."""

    def __init__(self, operation: str, status_code: int, body: str) -> None:
        self.operation = operation
        self.status_code = status_code
        self.body = body
        super().__init__(f"failed to parse {operation} response (status {status_code})")


class StockalAPIError(StockalError):
    """Structured error returned by the Stockal API."""

    def __init__(
        self,
        status_code: int,
        code: int | None,
        message: str,
        error: str | None = None,
        envelope: Envelope | None = None,
    ) -> None:
        self.status_code = status_code
        self.code = code
        self.message = message
        self.error = error
        self.envelope = envelope
        if error:
            super().__init__(f"API error {code}: {message} - {error}")
        else:
            super().__init__(f"API error {code}: {message}")


class UnexpectedStatusError(StockalAPIError):
    """Non-200 response whose body carried no usable API error code."""

    def __init__(
        self,
        operation: str,
        status_code: int,
        envelope: Envelope | None = None,
    ) -> None:
        self.operation = operation
        message = f"{operation} failed with status code: {status_code}"
        super().__init__(status_code, None, message, envelope=envelope)
        self.args = (message,)


class InvalidCredentialsError(StockalError):
    """Login was rejected by the API (the envelope carried an error string)."""

    def __init__(self, envelope: Envelope) -> None:
        self.envelope = envelope
        self.code = envelope.code
        self.message = envelope.message
        self.error = envelope.error
        super().__init__(f"invalid credentials: {envelope.message or envelope.error}")
