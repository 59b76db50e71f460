"""Stockal API session client: login, account summary, portfolio detail."""

from __future__ import annotations

from typing import TYPE_CHECKING, Any, Protocol

import structlog

from stockal.api.config import ClientConfig, ConfigOverride, build_config
from stockal.api.decoder import decode_response
from stockal.api.exceptions import (
    EmptyCredentialsError,
    InvalidCredentialsError,
    NotAuthenticatedError,
    StockalAPIError,
)
from stockal.api.models.account import AccountSummaryResponse
from stockal.api.models.auth import Credentials, LoginData, LoginResponse
from stockal.api.models.portfolio import PortfolioDetailResponse
from stockal.api.transport import Transport

if TYPE_CHECKING:
    from stockal.api.decoder import EnvelopeT


logger = structlog.get_logger()

LOGIN_PATH = "/v3/auth/login"
ACCOUNT_SUMMARY_PATH = "/v2/users/accountSummary/summary"
PORTFOLIO_DETAIL_PATH = "/v2/users/portfolio/detail"


class StockalAPI(Protocol):
    """The operations a Stockal client offers; implemented by `StockalClient` and test doubles."""

    async def login(self, username: str, password: str) -> LoginResponse: ...

    async def get_account_summary(self) -> AccountSummaryResponse: ...

    async def get_portfolio_detail(self) -> PortfolioDetailResponse: ...


class StockalClient:
    """
    Client for Stockal's private REST API.

    `login()` stores the returned tokens as the client's session; the access
    token is then sent with every authenticated call. Token expiry is not
    tracked: once the upstream rejects an expired token the caller has to log
    in again.

    The session lives in a single attribute that is only ever rebound, so
    coroutines sharing one client on one event loop see last-writer-wins. The
    client is not safe to share across threads or event loops.

    Example:
        ```python
        async with StockalClient(with_timeout(60)) as client:
            await client.login("user", "secret")
            summary = await client.get_account_summary()
        ```
    """

    def __init__(self, *overrides: ConfigOverride, config: ClientConfig | None = None) -> None:
        self._config = config if config is not None else build_config(*overrides)
        self._transport = Transport(self._config)
        self._session: LoginData | None = None

    async def __aenter__(self) -> StockalClient:
        return self

    async def __aexit__(
        self,
        exc_type: type[BaseException] | None,
        exc_val: BaseException | None,
        exc_tb: Any,
    ) -> None:
        await self.aclose()

    async def aclose(self) -> None:
        """Close the underlying HTTP client."""
        await self._transport.aclose()

    @property
    def config(self) -> ClientConfig:
        return self._config

    @property
    def session(self) -> LoginData | None:
        """Tokens from the last successful login, or None."""
        return self._session

    @property
    def is_authenticated(self) -> bool:
        return self._access_token() is not None

    def logout(self) -> None:
        """Forget the stored session. No request is made."""
        self._session = None

    def _access_token(self) -> str | None:
        session = self._session
        if session is None or not session.access_token:
            return None
        return session.access_token

    async def _request(
        self,
        method: str,
        path: str,
        model: type[EnvelopeT],
        operation: str,
        *,
        payload: Any = None,
        token: str | None = None,
    ) -> EnvelopeT:
        response = await self._transport.send(
            method, path, operation=operation, payload=payload, token=token
        )
        return await decode_response(response, model, operation)

    async def _authed_get(
        self, path: str, model: type[EnvelopeT], operation: str
    ) -> EnvelopeT:
        token = self._access_token()
        if token is None:
            raise NotAuthenticatedError()
        return await self._request("GET", path, model, operation, token=token)

    # ==================== Auth ====================

    async def login(self, username: str, password: str) -> LoginResponse:
        """
        Authenticate and store the session for later calls.

        Returns:
            The login envelope. Its `data` holds the tokens and expiry times.

        Raises:
            EmptyCredentialsError: Username or password is blank (no request made).
            InvalidCredentialsError: The API answered with an error string, even
                on HTTP 200. The envelope is attached.
            StockalAPIError: Other API failures (envelope attached).
            TransportError, DecodeError: Network or parsing failures.
        """
        if not username.strip():
            raise EmptyCredentialsError("username")
        if not password.strip():
            raise EmptyCredentialsError("password")

        credentials = Credentials(username=username, password=password)
        try:
            envelope = await self._request(
                "POST",
                LOGIN_PATH,
                LoginResponse,
                "login",
                payload=credentials.model_dump(by_alias=True),
            )
        except StockalAPIError as e:
            if isinstance(e.envelope, LoginResponse) and e.envelope.error:
                raise InvalidCredentialsError(e.envelope) from e
            raise

        if envelope.error:
            raise InvalidCredentialsError(envelope)

        if envelope.data is None or not envelope.data.access_token:
            logger.warning(
                "Login succeeded without an access token; session unchanged",
                code=envelope.code,
                message=envelope.message,
            )
            return envelope

        self._session = envelope.data
        logger.info(
            "Logged in",
            access_token_expires=envelope.data.expiry_access_token or None,
        )
        return envelope

    # ==================== Account ====================

    async def get_account_summary(self) -> AccountSummaryResponse:
        """
        Fetch cash balances, restrictions, and per-asset-class portfolio totals.

        Raises:
            NotAuthenticatedError: Called before a successful login (no request made).
        """
        return await self._authed_get(
            ACCOUNT_SUMMARY_PATH, AccountSummaryResponse, "account summary"
        )

    # ==================== Portfolio ====================

    async def get_portfolio_detail(self) -> PortfolioDetailResponse:
        """
        Fetch every holding in the portfolio.

        Raises:
            NotAuthenticatedError: Called before a successful login (no request made).
        """
        return await self._authed_get(
            PORTFOLIO_DETAIL_PATH, PortfolioDetailResponse, "portfolio detail"
        )
