"""
CLI application for the Stockal client.

Logs in and prints the account summary or portfolio holdings.
"""

from __future__ import annotations

import typer
from dotenv import find_dotenv, load_dotenv

from stockal.cli.account import account_summary
from stockal.cli.portfolio import portfolio_holdings
from stockal.cli.utils import console

app = typer.Typer(
    name="stockal",
    help="Stockal CLI - view your account summary and holdings.",
    add_completion=False,
)

app.command("summary")(account_summary)
app.command("holdings")(portfolio_holdings)


@app.callback()
def main() -> None:
    """Stockal CLI."""
    load_dotenv(find_dotenv(usecwd=True))


@app.command()
def version() -> None:
    """Show version information."""
    from stockal import __version__

    console.print(f"stockal-client v{__version__}")


__all__ = ["app"]
