"""Account summary command - cash balances and portfolio totals."""

from __future__ import annotations

from typing import Annotated

import typer
from rich.table import Table

from stockal.api import StockalError
from stockal.cli._helpers import logged_in_client, require_credentials
from stockal.cli.utils import console, exit_stockal_error, format_signed_currency, run_async


def account_summary(
    username: Annotated[
        str | None,
        typer.Option("--username", "-u", help="Stockal username (or STOCKAL_USERNAME)."),
    ] = None,
    password: Annotated[
        str | None,
        typer.Option("--password", "-p", help="Stockal password (or STOCKAL_PASSWORD)."),
    ] = None,
    timeout: Annotated[
        float | None,
        typer.Option("--timeout", help="HTTP timeout in seconds.", show_default=False),
    ] = None,
) -> None:
    """View cash balances, restrictions and portfolio totals."""
    user, secret = require_credentials(username, password)

    async def _summary() -> None:
        async with logged_in_client(user, secret, timeout) as client:
            try:
                response = await client.get_account_summary()
            except StockalError as e:
                exit_stockal_error(e)

        data = response.data
        if data is None:
            console.print("[yellow]No account summary returned[/yellow]")
            return

        account = data.account_summary
        cash = Table(title="Account Summary")
        cash.add_column("Field", style="cyan")
        cash.add_column("Value", style="green", justify="right")
        cash.add_row("Cash available for trade", f"${account.cash_available_for_trade:,.2f}")
        cash.add_row(
            "Cash available for withdrawal", f"${account.cash_available_for_withdrawal:,.2f}"
        )
        cash.add_row("Cash balance", f"${account.cash_balance:,.2f}")
        cash.add_row("Unsettled amount", f"${data.unsettled_amount:,.2f}")
        cash.add_row("Good faith violations", account.good_faith_violations or "-")
        cash.add_row("Restricted", "[red]yes[/red]" if account.restricted else "no")
        console.print(cash)

        for settlement in account.cash_settlement:
            console.print(f"[dim]Settlement {settlement.utc_time}: ${settlement.cash:,.2f}[/dim]")

        summary = data.portfolio_summary
        buckets = Table(title="Portfolio Summary")
        buckets.add_column("Portfolio", style="cyan")
        buckets.add_column("Current", justify="right")
        buckets.add_column("Invested", justify="right")
        buckets.add_column("Gain/Loss", justify="right")
        for name, bucket in (
            ("Stocks", summary.stock_portfolio),
            ("Stacks", summary.stack_portfolio),
            ("ETFs", summary.etf_portfolio),
        ):
            buckets.add_row(
                name,
                f"${bucket.current_value:,.2f}",
                f"${bucket.investment_amount:,.2f}",
                format_signed_currency(bucket.gain_loss),
            )
        buckets.add_row(
            "[bold]Total[/bold]",
            f"${summary.total_current_value:,.2f}",
            f"${summary.total_investment_amount:,.2f}",
            format_signed_currency(summary.total_gain_loss),
        )
        console.print(buckets)

    run_async(_summary())
