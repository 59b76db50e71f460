"""Transport tests: request shape, header contract, cancellation, transport failures."""

from __future__ import annotations

import asyncio
import time
from typing import Any

import httpx
import pytest
from httpx import Response

from stockal.api.client import StockalClient
from stockal.api.config import build_config, with_headers, with_transport, with_user_agent
from stockal.api.exceptions import StockalAPIError, TransportError
from stockal.api.transport import Transport
from tests.stubs import (
    ACCOUNT_SUMMARY_PATH,
    LOGIN_PATH,
    PORTFOLIO_DETAIL_PATH,
    RecordingTransport,
    respond,
)

BROWSER_HEADERS = {
    "Accept": "application/json, text/plain, */*",
    "Accept-Language": "en-US,en;q=0.5",
    "Origin": "https://globalinvesting.in",
    "Referer": "https://globalinvesting.in/",
    "Sec-Fetch-Dest": "empty",
    "Sec-Fetch-Mode": "cors",
    "Sec-Fetch-Site": "cross-site",
    "Cache-Control": "no-cache",
    "Pragma": "no-cache",
}


async def _never_responds(request: httpx.Request) -> Response:
    await asyncio.sleep(30)
    return Response(200, json={})


class TestRequestShape:
    @pytest.mark.asyncio
    async def test_fixed_headers_sent_on_every_request(
        self, recording_transport: RecordingTransport
    ) -> None:
        recording_transport.routes[ACCOUNT_SUMMARY_PATH] = respond(200, {"code": 200})
        transport = Transport(build_config(with_transport(recording_transport.transport)))

        response = await transport.send("GET", ACCOUNT_SUMMARY_PATH, operation="account summary")
        await response.aclose()
        await transport.aclose()

        sent = recording_transport.requests[0]
        for name, value in BROWSER_HEADERS.items():
            assert sent.headers[name] == value
        assert sent.headers["User-Agent"] == "unofficial-stockal-api/1.0"
        assert "Authorization" not in sent.headers
        assert "Content-Type" not in sent.headers

    @pytest.mark.asyncio
    async def test_user_agent_and_extra_headers_are_configurable(
        self, recording_transport: RecordingTransport
    ) -> None:
        recording_transport.routes[LOGIN_PATH] = respond(200, {"code": 200})
        config = build_config(
            with_transport(recording_transport.transport),
            with_user_agent("my-app/1.0"),
            with_headers({"X-Trace": "abc"}),
        )
        transport = Transport(config)

        response = await transport.send(
            "POST", LOGIN_PATH, operation="login", payload={"username": "u"}, token="tok"
        )
        await response.aclose()
        await transport.aclose()

        sent = recording_transport.requests[0]
        assert sent.headers["User-Agent"] == "my-app/1.0"
        assert sent.headers["X-Trace"] == "abc"
        assert sent.headers["Origin"] == "https://globalinvesting.in"
        assert sent.headers["Authorization"] == "tok"
        assert sent.headers["Content-Type"] == "application/json"

    @pytest.mark.asyncio
    async def test_empty_token_sends_no_authorization_header(
        self, recording_transport: RecordingTransport
    ) -> None:
        recording_transport.routes[LOGIN_PATH] = respond(200, {"code": 200})
        transport = Transport(build_config(with_transport(recording_transport.transport)))

        response = await transport.send("POST", LOGIN_PATH, operation="login", token="")
        await response.aclose()
        await transport.aclose()

        assert "Authorization" not in recording_transport.requests[0].headers

    @pytest.mark.asyncio
    async def test_unserializable_payload_is_transport_error(
        self, recording_transport: RecordingTransport
    ) -> None:
        transport = Transport(build_config(with_transport(recording_transport.transport)))

        with pytest.raises(TransportError) as exc_info:
            await transport.send("POST", LOGIN_PATH, operation="login", payload={"x": object()})
        await transport.aclose()

        assert exc_info.value.operation == "login"
        assert "failed to create request" in str(exc_info.value)
        assert recording_transport.call_count == 0


class TestTransportFailures:
    @pytest.mark.asyncio
    async def test_connect_error_is_wrapped(self, recording_transport: RecordingTransport) -> None:
        def _refuse(request: httpx.Request) -> Response:
            raise httpx.ConnectError("connection refused", request=request)

        recording_transport.routes[LOGIN_PATH] = _refuse

        async with StockalClient(with_transport(recording_transport.transport)) as client:
            with pytest.raises(TransportError) as exc_info:
                await client.login("user", "secret")

        assert str(exc_info.value).startswith("login request failed: failed to execute request")
        assert isinstance(exc_info.value.__cause__, httpx.ConnectError)
        assert not isinstance(exc_info.value, StockalAPIError)
        assert recording_transport.call_count == 1

    @pytest.mark.asyncio
    async def test_http_timeout_is_transport_error_and_not_retried(
        self, recording_transport: RecordingTransport, login_payload: dict[str, Any]
    ) -> None:
        def _timeout(request: httpx.Request) -> Response:
            raise httpx.ReadTimeout("timed out", request=request)

        recording_transport.routes[LOGIN_PATH] = respond(200, login_payload)
        recording_transport.routes[PORTFOLIO_DETAIL_PATH] = _timeout

        async with StockalClient(with_transport(recording_transport.transport)) as client:
            await client.login("user", "secret")
            with pytest.raises(TransportError) as exc_info:
                await client.get_portfolio_detail()

            assert client.is_authenticated is True

        assert exc_info.value.operation == "portfolio detail"
        assert isinstance(exc_info.value.__cause__, httpx.ReadTimeout)
        assert recording_transport.call_count == 2


class TestCancellation:
    @pytest.mark.asyncio
    async def test_caller_deadline_aborts_in_flight_call(
        self, recording_transport: RecordingTransport, login_payload: dict[str, Any]
    ) -> None:
        recording_transport.routes[LOGIN_PATH] = respond(200, login_payload)
        recording_transport.routes[ACCOUNT_SUMMARY_PATH] = _never_responds

        async with StockalClient(with_transport(recording_transport.transport)) as client:
            await client.login("user", "secret")

            started = time.monotonic()
            with pytest.raises(TimeoutError):
                async with asyncio.timeout(0.05):
                    await client.get_account_summary()
            elapsed = time.monotonic() - started

            assert client.session is not None
            assert client.session.access_token == "T"

        assert elapsed < 5

    @pytest.mark.asyncio
    async def test_cancelled_task_leaves_session_untouched(
        self, recording_transport: RecordingTransport, login_payload: dict[str, Any]
    ) -> None:
        recording_transport.routes[LOGIN_PATH] = respond(200, login_payload)
        recording_transport.routes[PORTFOLIO_DETAIL_PATH] = _never_responds

        async with StockalClient(with_transport(recording_transport.transport)) as client:
            await client.login("user", "secret")
            task = asyncio.create_task(client.get_portfolio_detail())
            await asyncio.sleep(0.01)
            task.cancel()

            with pytest.raises(asyncio.CancelledError):
                await task

            assert client.session is not None
            assert client.session.access_token == "T"

    @pytest.mark.asyncio
    async def test_cancelled_login_does_not_authenticate(
        self, recording_transport: RecordingTransport
    ) -> None:
        recording_transport.routes[LOGIN_PATH] = _never_responds

        async with StockalClient(with_transport(recording_transport.transport)) as client:
            with pytest.raises(TimeoutError):
                async with asyncio.timeout(0.05):
                    await client.login("user", "secret")

            assert client.is_authenticated is False
