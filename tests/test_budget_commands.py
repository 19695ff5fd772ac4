"""Mini README: Tests for the status-message budget commands.

Successful actions must persist the ledger immediately, while rejected
actions report a message and leave both memory and the file untouched.
"""

from __future__ import annotations

import pytest

from zerobudget.finance import load_ledger
from zerobudget.interface import BudgetCommands


@pytest.fixture()
def commands(tmp_path) -> BudgetCommands:
    return BudgetCommands.from_path(tmp_path / "budget.json")


def test_full_flow_persists_each_step(commands: BudgetCommands) -> None:
    assert commands.add_budget("2024-01").message == "Budget added for 2024-01"
    assert commands.add_income("2024-01", "Salary", "3000").message == "Income added to 2024-01"
    result = commands.add_expense("2024-01", "Rent", "1200", "1250")
    assert result.ok and result.message == "Expense added to 2024-01"

    stored = load_ledger(commands.ledger_path)
    assert stored == commands.ledger
    assert stored.get_budget("2024-01").balance == pytest.approx(1750.0)


def test_add_budget_twice_reports_success_once_stored(commands: BudgetCommands) -> None:
    commands.add_budget("2024-01")
    assert commands.add_budget("2024-01").ok
    assert load_ledger(commands.ledger_path).list_months() == ["2024-01"]


@pytest.mark.parametrize(
    ("month", "message"),
    [("", "Month cannot be empty"), ("2024/01", "Month must use the YYYY-MM format")],
)
def test_add_budget_rejects_bad_month(commands: BudgetCommands, month: str, message: str) -> None:
    result = commands.add_budget(month)
    assert not result.ok
    assert result.message == message
    assert not commands.ledger_path.exists()


def test_income_validation_messages(commands: BudgetCommands) -> None:
    commands.add_budget("2024-01")
    saved = commands.ledger_path.read_text(encoding="utf-8")

    assert commands.add_income("2024-01", "", "10").message == "Please fill in all income fields"
    assert commands.add_income("2024-01", "Salary", "ten").message == "Invalid income amount"
    missing = commands.add_income("2024-02", "Salary", "10")
    assert missing.message == "Budget for this month does not exist"
    assert missing.not_found

    assert commands.ledger.get_budget("2024-01").incomes == []
    assert commands.ledger_path.read_text(encoding="utf-8") == saved


def test_expense_validation_messages(commands: BudgetCommands) -> None:
    commands.add_budget("2024-01")

    assert commands.add_expense("2024-01", "Rent", "", "1").message == (
        "Please fill in all expense fields"
    )
    assert commands.add_expense("2024-01", "Rent", "x", "1").message == "Invalid budgeted amount"
    assert commands.add_expense("2024-01", "Rent", "1", "x").message == "Invalid actual amount"
    assert commands.add_expense("2023-12", "Rent", "1", "1").not_found
    assert commands.ledger.get_budget("2024-01").expenses == []


def test_set_savings_updates_balance(commands: BudgetCommands) -> None:
    commands.add_budget("2024-03")
    commands.add_income("2024-03", "Salary", "1000")

    result = commands.set_savings("2024-03", "250")
    assert result.message == "Savings updated for 2024-03"
    budget = load_ledger(commands.ledger_path).get_budget("2024-03")
    assert budget.savings == pytest.approx(250.0)
    assert budget.balance == pytest.approx(750.0)
    assert commands.set_savings("2024-03", "lots").message == "Invalid savings amount"


def test_view_and_list(commands: BudgetCommands) -> None:
    assert commands.list_months().message == "No budgets recorded"
    assert commands.view_budget("2024-01").message == "Budget for this month does not exist"

    commands.add_budget("2024-01")
    commands.add_budget("2024-02")
    commands.add_income("2024-01", "Salary", "10")

    assert commands.list_months().message == "2024-01\n2024-02"
    view = commands.view_budget("2024-01")
    assert view.ok
    assert "  Salary: 10.00\n" in view.message
    assert view.message.endswith("Balance: 10.00\n")
