"""Response decoding and failure classification."""

from __future__ import annotations

from typing import TYPE_CHECKING, TypeVar

import httpx
import structlog
from pydantic import ValidationError

from stockal.api.exceptions import (
    DecodeError,
    StockalAPIError,
    TransportError,
    UnexpectedStatusError,
)
from stockal.api.models.envelope import APIErrorBody, Envelope

if TYPE_CHECKING:
    from pydantic import BaseModel


logger = structlog.get_logger()

EnvelopeT = TypeVar("EnvelopeT", bound=Envelope)

# Enough of a bad body to diagnose it without dumping whole HTML error pages.
_BODY_EXCERPT = 200


def _try_parse(model: type[BaseModel], body: bytes) -> BaseModel | None:
    try:
        return model.model_validate_json(body)
    except ValidationError:
        return None


async def decode_response(
    response: httpx.Response,
    model: type[EnvelopeT],
    operation: str,
) -> EnvelopeT:
    """
    Read and decode a response into `model`.

    The envelope is decoded before the status code is checked, so a non-200
    response carrying a JSON body still yields a populated envelope; it is
    attached to the raised `StockalAPIError`.

    Raises:
        TransportError: The body could not be read.
        DecodeError: The body is not valid JSON for `model`.
        StockalAPIError: Non-200 status with a structured error (non-zero code).
        UnexpectedStatusError: Non-200 status without a usable error code.
    """
    try:
        body = await response.aread()
    except httpx.HTTPError as e:
        raise TransportError(operation, f"failed to read response body: {e}") from e
    finally:
        await response.aclose()

    try:
        envelope = model.model_validate_json(body)
    except ValidationError as e:
        excerpt = body[:_BODY_EXCERPT].decode("utf-8", errors="replace")
        logger.debug(
            "Undecodable response body",
            operation=operation,
            status_code=response.status_code,
            errors=e.error_count(),
        )
        raise DecodeError(operation, response.status_code, excerpt) from e

    if response.status_code != httpx.codes.OK:
        api_error = _try_parse(APIErrorBody, body)
        if isinstance(api_error, APIErrorBody) and api_error.code != 0:
            raise StockalAPIError(
                status_code=response.status_code,
                code=api_error.code,
                message=api_error.message,
                error=api_error.error,
                envelope=envelope,
            )
        raise UnexpectedStatusError(operation, response.status_code, envelope=envelope)

    return envelope
