"""Mini README: User-facing budget actions returning status messages.

Structure:
    * CommandResult - outcome of an action plus the text shown to the user.
    * BudgetCommands - owns one ledger and the file it is saved to.

Each action accepts raw text as typed by the user, validates it, applies the
change to the ledger, saves the file and reports a status message. Validation
problems and unknown months come back as failed results and leave both the
ledger and the file untouched. Read/write failures on the file are raised.
"""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path
from typing import Optional, Union

from ..finance import (
    BudgetNotFoundError,
    InputValidationError,
    Ledger,
    load_ledger,
    parse_amount,
    parse_month,
    require_fields,
    save_ledger,
)
from ..logging_utils import get_logger

LOGGER = get_logger(__name__)

MISSING_BUDGET_MESSAGE = "Budget for this month does not exist"


@dataclass(frozen=True, slots=True)
class CommandResult:
    """Outcome of a budget action."""

    ok: bool
    message: str
    not_found: bool = False

    @classmethod
    def success(cls, message: str) -> "CommandResult":
        return cls(ok=True, message=message)

    @classmethod
    def failure(cls, message: str, *, not_found: bool = False) -> "CommandResult":
        return cls(ok=False, message=message, not_found=not_found)


class BudgetCommands:
    """Validate input, mutate the ledger and persist it after every change."""

    def __init__(self, ledger: Ledger, ledger_path: Union[str, Path]) -> None:
        self.ledger = ledger
        self.ledger_path = Path(ledger_path)

    @classmethod
    def from_path(cls, ledger_path: Union[str, Path]) -> "BudgetCommands":
        """Load the ledger stored at ``ledger_path`` and wrap it."""

        return cls(load_ledger(ledger_path), ledger_path)

    def _save(self) -> None:
        save_ledger(self.ledger_path, self.ledger)

    def add_budget(self, month: Optional[str]) -> CommandResult:
        try:
            month = parse_month(month)
        except InputValidationError as error:
            return CommandResult.failure(str(error))
        self.ledger.add_budget(month)
        self._save()
        return CommandResult.success(f"Budget added for {month}")

    def add_income(
        self, month: Optional[str], source: Optional[str], amount: Optional[str]
    ) -> CommandResult:
        try:
            require_fields("Please fill in all income fields", month, source, amount)
            month = parse_month(month)
            value = parse_amount(amount, "income amount")
        except InputValidationError as error:
            return CommandResult.failure(str(error))

        try:
            self.ledger.append_income(month, source.strip(), value)
        except BudgetNotFoundError:
            LOGGER.warning("Rejected income for unknown month %s", month)
            return CommandResult.failure(MISSING_BUDGET_MESSAGE, not_found=True)
        self._save()
        return CommandResult.success(f"Income added to {month}")

    def add_expense(
        self,
        month: Optional[str],
        category: Optional[str],
        budgeted: Optional[str],
        actual: Optional[str],
    ) -> CommandResult:
        try:
            require_fields(
                "Please fill in all expense fields", month, category, budgeted, actual
            )
            month = parse_month(month)
            budgeted_value = parse_amount(budgeted, "budgeted amount")
            actual_value = parse_amount(actual, "actual amount")
        except InputValidationError as error:
            return CommandResult.failure(str(error))

        try:
            self.ledger.append_expense(month, category.strip(), budgeted_value, actual_value)
        except BudgetNotFoundError:
            LOGGER.warning("Rejected expense for unknown month %s", month)
            return CommandResult.failure(MISSING_BUDGET_MESSAGE, not_found=True)
        self._save()
        return CommandResult.success(f"Expense added to {month}")

    def set_savings(self, month: Optional[str], amount: Optional[str]) -> CommandResult:
        try:
            require_fields("Please fill in all savings fields", month, amount)
            month = parse_month(month)
            value = parse_amount(amount, "savings amount")
        except InputValidationError as error:
            return CommandResult.failure(str(error))

        try:
            self.ledger.set_savings(month, value)
        except BudgetNotFoundError:
            LOGGER.warning("Rejected savings for unknown month %s", month)
            return CommandResult.failure(MISSING_BUDGET_MESSAGE, not_found=True)
        self._save()
        return CommandResult.success(f"Savings updated for {month}")

    def view_budget(self, month: Optional[str]) -> CommandResult:
        """Return the month's summary text as the status message."""

        try:
            month = parse_month(month)
            return CommandResult.success(self.ledger.describe(month))
        except InputValidationError as error:
            return CommandResult.failure(str(error))
        except BudgetNotFoundError:
            return CommandResult.failure(MISSING_BUDGET_MESSAGE, not_found=True)

    def list_months(self) -> CommandResult:
        months = self.ledger.list_months()
        if not months:
            return CommandResult.success("No budgets recorded")
        return CommandResult.success("\n".join(months))
