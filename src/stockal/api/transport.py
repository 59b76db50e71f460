"""HTTP plumbing: request construction and dispatch."""

from __future__ import annotations

from typing import TYPE_CHECKING, Any

import httpx
import structlog

from stockal.api.exceptions import TransportError

if TYPE_CHECKING:
    from stockal.api.config import ClientConfig


logger = structlog.get_logger()


class Transport:
    """
    Turns (method, path, optional JSON body) into an issued request.

    Returns the raw, still-streaming response; reading and decoding the body
    is left to `decode_response`. Nothing here retries.
    """

    def __init__(self, config: ClientConfig) -> None:
        self._client = httpx.AsyncClient(
            base_url=config.base_url,
            timeout=config.timeout,
            headers={**config.headers, "User-Agent": config.user_agent},
            transport=config.transport,
        )

    async def aclose(self) -> None:
        """Close the underlying HTTP client."""
        await self._client.aclose()

    async def send(
        self,
        method: str,
        path: str,
        *,
        operation: str,
        payload: Any = None,
        token: str | None = None,
    ) -> httpx.Response:
        """
        Build and send a request.

        Args:
            method: HTTP method.
            path: Endpoint path, joined onto the configured base URL.
            operation: Name used in error messages (e.g. "login").
            payload: JSON-serialisable body; None sends no body and no Content-Type.
            token: Access token for the Authorization header; omitted when empty.

        Raises:
            TransportError: The request could not be built or executed.
        """
        headers: dict[str, str] = {}
        if token:
            headers["Authorization"] = token

        try:
            if payload is None:
                request = self._client.build_request(method, path, headers=headers)
            else:
                request = self._client.build_request(method, path, json=payload, headers=headers)
        except (httpx.InvalidURL, TypeError, ValueError) as e:
            raise TransportError(operation, f"failed to create request: {e}") from e

        logger.debug(
            "Sending request",
            operation=operation,
            method=method,
            url=str(request.url),
            authenticated=bool(token),
        )
        try:
            response = await self._client.send(request, stream=True)
        except httpx.HTTPError as e:
            raise TransportError(operation, f"failed to execute request: {e}") from e

        logger.debug(
            "Received response",
            operation=operation,
            status_code=response.status_code,
        )
        return response
