"""Credential and client resolution shared by CLI commands."""

from __future__ import annotations

import os
from contextlib import asynccontextmanager
from typing import TYPE_CHECKING

import typer

from stockal.api import StockalClient, StockalError, with_base_url, with_timeout
from stockal.cli.utils import console, exit_stockal_error

if TYPE_CHECKING:
    from collections.abc import AsyncIterator

    from stockal.api.config import ConfigOverride

USERNAME_ENV = "STOCKAL_USERNAME"
PASSWORD_ENV = "STOCKAL_PASSWORD"
BASE_URL_ENV = "STOCKAL_BASE_URL"


def require_credentials(username: str | None, password: str | None) -> tuple[str, str]:
    """Resolve credentials from CLI options, falling back to the environment.

    Raises:
        typer.Exit: If either value is missing.
    """
    username = username or os.getenv(USERNAME_ENV)
    password = password or os.getenv(PASSWORD_ENV)
    if not username or not password:
        console.print("[red]Error:[/red] Stockal credentials are required.")
        console.print(
            f"[dim]Pass --username/--password or set {USERNAME_ENV} and {PASSWORD_ENV}.[/dim]"
        )
        raise typer.Exit(1)
    return username, password


def client_overrides(timeout: float | None) -> list[ConfigOverride]:
    overrides: list[ConfigOverride] = []
    base_url = os.getenv(BASE_URL_ENV)
    if base_url:
        overrides.append(with_base_url(base_url))
    if timeout is not None:
        overrides.append(with_timeout(timeout))
    return overrides


@asynccontextmanager
async def logged_in_client(
    username: str, password: str, timeout: float | None = None
) -> AsyncIterator[StockalClient]:
    """Yield a client that has already logged in; exit(1) on any client error."""
    try:
        client = StockalClient(*client_overrides(timeout))
    except ValueError as e:
        console.print(f"[red]Error:[/red] Invalid client configuration: {e}")
        raise typer.Exit(1) from None

    async with client:
        try:
            await client.login(username, password)
        except StockalError as e:
            exit_stockal_error(e)
        yield client
