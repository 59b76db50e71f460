"""Shared utilities for CLI commands (console output, async helpers)."""

from __future__ import annotations

import asyncio
from typing import TYPE_CHECKING, NoReturn, TypeVar

import typer
from rich.console import Console

if TYPE_CHECKING:
    from collections.abc import Coroutine

    from stockal.api.exceptions import StockalError

console = Console()

T = TypeVar("T")


def run_async(coro: Coroutine[object, object, T]) -> T:
    """Run a coroutine from a sync CLI command.

    Raises:
        typer.Exit: With code 130 on KeyboardInterrupt (standard SIGINT exit code).
    """
    try:
        return asyncio.run(coro)
    except KeyboardInterrupt:
        console.print("\n[yellow]Interrupted.[/yellow]")
        raise typer.Exit(130) from None


def exit_stockal_error(error: StockalError) -> NoReturn:
    """Print a client error and exit with code 1."""
    console.print(f"[red]Error:[/red] {error}")
    raise typer.Exit(1) from None


def format_signed_currency(amount: float) -> str:
    """Format a dollar amount as a signed, colored currency string."""
    value = f"${abs(amount):,.2f}"
    if amount > 0:
        return f"[green]+{value}[/green]"
    if amount < 0:
        return f"[red]-{value}[/red]"
    return value


def format_percent(value: float | None) -> str:
    if value is None:
        return "-"
    text = f"{value:.2f}%"
    if value > 0:
        return f"[green]+{text}[/green]"
    if value < 0:
        return f"[red]{text}[/red]"
    return text
