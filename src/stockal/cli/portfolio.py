"""Portfolio holdings command - per-position value and gain/loss."""

from __future__ import annotations

from typing import Annotated

import typer
from rich.table import Table

from stockal.api import StockalError
from stockal.cli._helpers import logged_in_client, require_credentials
from stockal.cli.utils import (
    console,
    exit_stockal_error,
    format_percent,
    format_signed_currency,
    run_async,
)


def portfolio_holdings(
    username: Annotated[
        str | None,
        typer.Option("--username", "-u", help="Stockal username (or STOCKAL_USERNAME)."),
    ] = None,
    password: Annotated[
        str | None,
        typer.Option("--password", "-p", help="Stockal password (or STOCKAL_PASSWORD)."),
    ] = None,
    limit: Annotated[
        int | None,
        typer.Option(
            "--limit", "-n", min=0, help="Show at most N holdings.", show_default=False
        ),
    ] = None,
    timeout: Annotated[
        float | None,
        typer.Option("--timeout", help="HTTP timeout in seconds.", show_default=False),
    ] = None,
) -> None:
    """View holdings with current value and gain/loss."""
    user, secret = require_credentials(username, password)

    async def _holdings() -> None:
        async with logged_in_client(user, secret, timeout) as client:
            try:
                response = await client.get_portfolio_detail()
            except StockalError as e:
                exit_stockal_error(e)

        data = response.data
        if data is None or not data.holdings:
            console.print("[yellow]No holdings found[/yellow]")
            return

        holdings = data.holdings if limit is None else data.holdings[:limit]

        table = Table(title=f"Holdings ({data.total_records} total)", show_header=True)
        table.add_column("Symbol", style="cyan", no_wrap=True)
        table.add_column("Company")
        table.add_column("Units", justify="right")
        table.add_column("Price", justify="right")
        table.add_column("Value", justify="right")
        table.add_column("Invested", justify="right")
        table.add_column("Gain/Loss", justify="right")
        table.add_column("%", justify="right")
        table.add_column("Category")

        for holding in holdings:
            category = f"{holding.category}/{holding.status}"
            if holding.sell_only:
                category += " [yellow]SELL ONLY[/yellow]"
            table.add_row(
                holding.symbol,
                holding.company,
                f"{holding.total_unit:.4f}",
                f"${holding.price:,.2f}",
                f"${holding.current_value:,.2f}",
                f"${holding.total_investment:,.2f}",
                format_signed_currency(holding.gain_loss),
                format_percent(holding.gain_loss_percent),
                category,
            )
        console.print(table)

        if len(holdings) < len(data.holdings):
            console.print(f"[dim]... and {len(data.holdings) - len(holdings)} more holdings[/dim]")
        if data.pending_data:
            console.print(f"[dim]Pending transactions: {len(data.pending_data)}[/dim]")

        best = data.best_performer()
        if best is not None:
            console.print(
                f"Best performer: [cyan]{best.symbol}[/cyan] "
                f"({format_percent(best.gain_loss_percent)})"
            )

    run_async(_holdings())
