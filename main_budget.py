"""Mini README: Entry point CLI for the zero-based budgeting tracker.

This script exposes a Typer CLI for recording monthly budgets from the
terminal and for launching the JSON API with uvicorn. Every command reads the
ledger file named by ``--ledger`` (or ``ZEROBUDGET_LEDGER_PATH``), echoes the
resulting status message and exits with code 1 when the action is rejected.
"""

from __future__ import annotations

import os
from pathlib import Path
from typing import Optional

import typer
import uvicorn

from zerobudget.configuration import get_settings
from zerobudget.interface import BudgetCommands, CommandResult
from zerobudget.logging_utils import configure_root_logger

cli = typer.Typer(help="Record monthly incomes, expenses and savings.")

LEDGER_OPTION = typer.Option(None, "--ledger", help="Ledger JSON file to read and update.")


def _commands(ledger: Optional[Path]) -> BudgetCommands:
    settings = get_settings()
    configure_root_logger(settings.log_level)
    return BudgetCommands.from_path(ledger or settings.ledger_path)


def _report(result: CommandResult) -> None:
    if result.ok:
        typer.echo(result.message.rstrip("\n"))
        return
    typer.echo(result.message, err=True)
    raise typer.Exit(code=1)


@cli.command("add-budget")
def add_budget(
    month: str = typer.Argument(..., help="Month in YYYY-MM format."),
    ledger: Optional[Path] = LEDGER_OPTION,
) -> None:
    """Create an empty budget for MONTH (no-op if it already exists)."""

    _report(_commands(ledger).add_budget(month))


@cli.command("add-income")
def add_income(
    month: str = typer.Argument(..., help="Month in YYYY-MM format."),
    source: str = typer.Argument(..., help="Where the income comes from."),
    amount: str = typer.Argument(..., help="Income amount."),
    ledger: Optional[Path] = LEDGER_OPTION,
) -> None:
    """Append an income line to MONTH."""

    _report(_commands(ledger).add_income(month, source, amount))


@cli.command("add-expense")
def add_expense(
    month: str = typer.Argument(..., help="Month in YYYY-MM format."),
    category: str = typer.Argument(..., help="Expense category."),
    budgeted: str = typer.Argument(..., help="Planned amount."),
    actual: str = typer.Argument(..., help="Amount actually spent."),
    ledger: Optional[Path] = LEDGER_OPTION,
) -> None:
    """Append an expense line to MONTH."""

    _report(_commands(ledger).add_expense(month, category, budgeted, actual))


@cli.command("set-savings")
def set_savings(
    month: str = typer.Argument(..., help="Month in YYYY-MM format."),
    amount: str = typer.Argument(..., help="Amount set aside as savings."),
    ledger: Optional[Path] = LEDGER_OPTION,
) -> None:
    """Set the savings figure for MONTH."""

    _report(_commands(ledger).set_savings(month, amount))


@cli.command("view")
def view(
    month: str = typer.Argument(..., help="Month in YYYY-MM format."),
    ledger: Optional[Path] = LEDGER_OPTION,
) -> None:
    """Print incomes, expenses, savings and balance for MONTH."""

    _report(_commands(ledger).view_budget(month))


@cli.command("list")
def list_months(ledger: Optional[Path] = LEDGER_OPTION) -> None:
    """List every month that has a budget."""

    _report(_commands(ledger).list_months())


@cli.command()
def serve(
    host: str = typer.Option(None, help="Host interface to bind."),
    port: int = typer.Option(None, help="Port to listen on."),
    ledger: Optional[Path] = LEDGER_OPTION,
    production: bool = typer.Option(
        False, help="Use production server settings (disable auto-reload)."
    ),
) -> None:
    """Start the JSON API using uvicorn."""

    if ledger is not None:
        # The factory reads settings, including in reloader subprocesses.
        os.environ["ZEROBUDGET_LEDGER_PATH"] = str(ledger)
        get_settings.cache_clear()
    settings = get_settings()
    effective_host = host or settings.interface_host
    effective_port = port or settings.interface_port
    configure_root_logger(settings.log_level)

    typer.echo(
        f"Serving {settings.ledger_path} on http://{effective_host}:{effective_port}"
    )
    uvicorn.run(
        "zerobudget.interface.web_app:create_application",
        host=effective_host,
        port=effective_port,
        factory=True,
        reload=not production,
    )


if __name__ == "__main__":
    cli()
