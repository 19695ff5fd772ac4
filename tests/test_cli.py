"""Mini README: Tests for the Typer command line entry point."""

from __future__ import annotations

from typer.testing import CliRunner

from main_budget import cli
from zerobudget.finance import load_ledger

runner = CliRunner()


def test_cli_records_and_views_budget(tmp_path) -> None:
    ledger = str(tmp_path / "budget.json")

    assert runner.invoke(cli, ["add-budget", "2024-01", "--ledger", ledger]).exit_code == 0
    runner.invoke(cli, ["add-income", "2024-01", "Salary", "3000", "--ledger", ledger])
    runner.invoke(cli, ["add-expense", "2024-01", "Rent", "1200", "1250", "--ledger", ledger])

    result = runner.invoke(cli, ["view", "2024-01", "--ledger", ledger])
    assert result.exit_code == 0
    assert "Balance: 1750.00" in result.output
    assert load_ledger(ledger).list_months() == ["2024-01"]


def test_cli_rejects_unknown_month(tmp_path) -> None:
    ledger = str(tmp_path / "budget.json")
    result = runner.invoke(cli, ["add-income", "2024-02", "Salary", "10", "--ledger", ledger])

    assert result.exit_code == 1
    assert "Budget for this month does not exist" in result.output


def test_cli_list_reads_environment_path(tmp_path, monkeypatch) -> None:
    from zerobudget.configuration import get_settings

    monkeypatch.setenv("ZEROBUDGET_LEDGER_PATH", str(tmp_path / "env.json"))
    get_settings.cache_clear()
    try:
        runner.invoke(cli, ["add-budget", "2024-05"])
        result = runner.invoke(cli, ["list"])
    finally:
        get_settings.cache_clear()

    assert result.output.strip() == "2024-05"
    assert (tmp_path / "env.json").exists()
