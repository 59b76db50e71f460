"""
Configuration for the Stockal API client.

A `ClientConfig` is built from defaults plus zero or more overrides. Each
override is a pure function `ClientConfig -> ClientConfig`; they are applied
left to right, so later overrides win.
"""

from __future__ import annotations

from collections.abc import Callable
from typing import Any

import httpx
from pydantic import BaseModel, ConfigDict, Field, field_validator

BASE_URL = "https://api-v2.stockal.com"
DEFAULT_TIMEOUT = 30.0
DEFAULT_USER_AGENT = "unofficial-stockal-api/1.0"

# Browser-like headers the upstream service expects on every request.
DEFAULT_HEADERS: dict[str, str] = {
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


class ClientConfig(BaseModel):
    """Settings for a `StockalClient`."""

    model_config = ConfigDict(frozen=True, arbitrary_types_allowed=True)

    base_url: str = BASE_URL
    timeout: float = Field(default=DEFAULT_TIMEOUT, gt=0)
    """HTTP timeout in seconds."""

    user_agent: str = DEFAULT_USER_AGENT
    headers: dict[str, str] = Field(default_factory=lambda: dict(DEFAULT_HEADERS))

    transport: httpx.AsyncBaseTransport | None = None
    """Custom httpx transport (tests, proxies). None uses httpx's default."""

    @field_validator("base_url")
    @classmethod
    def _check_base_url(cls, value: str) -> str:
        try:
            url = httpx.URL(value)
        except httpx.InvalidURL as e:
            raise ValueError(f"invalid base URL: {value!r}") from e
        if url.scheme not in ("http", "https") or not url.host:
            raise ValueError(f"base URL must be an absolute http(s) URL: {value!r}")
        return value


ConfigOverride = Callable[[ClientConfig], ClientConfig]


def _replace(config: ClientConfig, **changes: Any) -> ClientConfig:
    # Rebuild instead of model_copy() so field validators run again.
    values = {name: getattr(config, name) for name in ClientConfig.model_fields}
    values.update(changes)
    return ClientConfig(**values)


def with_base_url(base_url: str) -> ConfigOverride:
    """Use a different API host (e.g. a staging or mock server)."""

    def _apply(config: ClientConfig) -> ClientConfig:
        return _replace(config, base_url=base_url)

    return _apply


def with_timeout(seconds: float) -> ConfigOverride:
    """Set the HTTP timeout. Must be positive."""

    def _apply(config: ClientConfig) -> ClientConfig:
        return _replace(config, timeout=seconds)

    return _apply


def with_user_agent(user_agent: str) -> ConfigOverride:
    def _apply(config: ClientConfig) -> ClientConfig:
        return _replace(config, user_agent=user_agent)

    return _apply


def with_headers(headers: dict[str, str]) -> ConfigOverride:
    """Merge extra or replacement headers over the current set."""

    def _apply(config: ClientConfig) -> ClientConfig:
        return _replace(config, headers={**config.headers, **headers})

    return _apply


def with_transport(transport: httpx.AsyncBaseTransport) -> ConfigOverride:
    def _apply(config: ClientConfig) -> ClientConfig:
        return _replace(config, transport=transport)

    return _apply


def build_config(*overrides: ConfigOverride) -> ClientConfig:
    """Apply overrides left to right over the defaults.

    Raises:
        pydantic.ValidationError: If an override produces an invalid value
            (non-positive timeout, relative or non-http base URL).
    """
    config = ClientConfig()
    for override in overrides:
        config = override(config)
    return config
