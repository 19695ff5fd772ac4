"""Mini README: In-memory monthly budget ledger.

Structure:
    * BudgetNotFoundError - raised when an operation targets an unknown month.
    * Income / Expense - line items owned by a monthly budget.
    * Budget - one month's incomes, expenses, savings and derived balance.
    * Ledger - ordered collection of budgets keyed by month.

The balance of a budget is always derived as total income minus actual
expenses minus savings. It is recomputed whenever a line item or the savings
figure changes rather than being adjusted incrementally. Persistence lives in
``storage`` so this module stays free of file handling.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Dict, Iterator, List, Optional, Tuple

from ..logging_utils import get_logger

LOGGER = get_logger(__name__)


class BudgetNotFoundError(KeyError):
    """Raised when no budget has been recorded for the requested month."""

    def __init__(self, month: str) -> None:
        super().__init__(f"Budget for {month} does not exist")
        self.month = month


@dataclass(frozen=True, slots=True)
class Income:
    """A single source of income for the month."""

    source: str
    amount: float

    def as_dict(self) -> Dict[str, object]:
        return {"source": self.source, "amount": self.amount}


@dataclass(slots=True)
class Expense:
    """A spending category with its planned and actual amounts."""

    category: str
    budgeted_amount: float
    actual_amount: float

    def as_dict(self) -> Dict[str, object]:
        return {
            "category": self.category,
            "budgeted_amount": self.budgeted_amount,
            "actual_amount": self.actual_amount,
        }


@dataclass(slots=True)
class Budget:
    """Income, expenses and savings recorded against a ``YYYY-MM`` month."""

    month: str
    incomes: List[Income] = field(default_factory=list)
    expenses: List[Expense] = field(default_factory=list)
    savings: float = 0.0
    balance: float = 0.0

    @property
    def total_income(self) -> float:
        return sum(income.amount for income in self.incomes)

    @property
    def total_actual_expenses(self) -> float:
        return sum(expense.actual_amount for expense in self.expenses)

    def recalculate(self) -> float:
        """Refresh ``balance`` from the line items and return it."""

        self.balance = self.total_income - self.total_actual_expenses - self.savings
        return self.balance

    def describe(self) -> str:
        """Render the budget as the multi-line summary shown to users."""

        lines = ["Incomes:"]
        lines.extend(f"  {income.source}: {income.amount:.2f}" for income in self.incomes)
        lines.append("Expenses:")
        lines.extend(
            f"  {expense.category} (Budgeted: {expense.budgeted_amount:.2f}, "
            f"Actual: {expense.actual_amount:.2f})"
            for expense in self.expenses
        )
        lines.append(f"Savings: {self.savings:.2f}")
        lines.append(f"Balance: {self.balance:.2f}")
        return "\n".join(lines) + "\n"

    def as_dict(self) -> Dict[str, object]:
        """Export the budget using the persisted field names."""

        return {
            "month": self.month,
            "incomes": [income.as_dict() for income in self.incomes],
            "expenses": [expense.as_dict() for expense in self.expenses],
            "savings": self.savings,
            "balance": self.balance,
        }


class Ledger:
    """Own the ordered set of monthly budgets and the operations on them."""

    def __init__(self, budgets: Optional[List[Budget]] = None) -> None:
        self._budgets: List[Budget] = []
        for budget in budgets or []:
            if self._find(budget.month) is not None:
                raise ValueError(f"Budget for {budget.month} is recorded more than once.")
            self._budgets.append(budget)
        LOGGER.debug("Ledger initialised with %s budgets", len(self._budgets))

    def __len__(self) -> int:
        return len(self._budgets)

    def __iter__(self) -> Iterator[Budget]:
        return iter(self._budgets)

    def __contains__(self, month: object) -> bool:
        return isinstance(month, str) and self._find(month) is not None

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Ledger):
            return NotImplemented
        return self._budgets == other._budgets

    def __repr__(self) -> str:
        return f"Ledger(months={self.list_months()!r})"

    @property
    def budgets(self) -> Tuple[Budget, ...]:
        """Budgets in insertion order."""

        return tuple(self._budgets)

    def _find(self, month: str) -> Optional[Budget]:
        for budget in self._budgets:
            if budget.month == month:
                return budget
        return None

    def get_budget(self, month: str) -> Budget:
        """Retrieve a budget, raising ``BudgetNotFoundError`` when missing."""

        budget = self._find(month)
        if budget is None:
            raise BudgetNotFoundError(month)
        return budget

    def list_months(self) -> List[str]:
        return [budget.month for budget in self._budgets]

    def add_budget(self, month: str) -> Budget:
        """Append an empty budget for ``month`` unless one already exists."""

        existing = self._find(month)
        if existing is not None:
            LOGGER.debug("Budget for %s already exists; nothing to add", month)
            return existing
        budget = Budget(month=month)
        self._budgets.append(budget)
        LOGGER.info("Added budget for %s", month)
        return budget

    def append_income(self, month: str, source: str, amount: float) -> Income:
        """Record an income line and refresh the month's balance."""

        budget = self.get_budget(month)
        income = Income(source=source, amount=float(amount))
        budget.incomes.append(income)
        budget.recalculate()
        LOGGER.info("Recorded income %s=%.2f for %s", source, income.amount, month)
        return income

    def append_expense(
        self, month: str, category: str, budgeted: float, actual: float
    ) -> Expense:
        """Record an expense line and refresh the month's balance."""

        budget = self.get_budget(month)
        expense = Expense(
            category=category,
            budgeted_amount=float(budgeted),
            actual_amount=float(actual),
        )
        budget.expenses.append(expense)
        budget.recalculate()
        LOGGER.info(
            "Recorded expense %s budgeted=%.2f actual=%.2f for %s",
            category,
            expense.budgeted_amount,
            expense.actual_amount,
            month,
        )
        return expense

    def set_savings(self, month: str, amount: float) -> Budget:
        """Replace the month's savings figure and refresh its balance."""

        budget = self.get_budget(month)
        budget.savings = float(amount)
        budget.recalculate()
        LOGGER.info("Set savings for %s to %.2f", month, budget.savings)
        return budget

    def recalculate(self, month: str) -> Optional[float]:
        """Recompute the balance for ``month``; unknown months are ignored."""

        budget = self._find(month)
        if budget is None:
            LOGGER.debug("Skipping recalculation for unknown month %s", month)
            return None
        return budget.recalculate()

    def describe(self, month: str) -> str:
        return self.get_budget(month).describe()

    def export_snapshot(self) -> List[Dict[str, object]]:
        """Export every budget in the persisted JSON shape."""

        return [budget.as_dict() for budget in self._budgets]
