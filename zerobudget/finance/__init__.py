"""Mini README: Budget ledger domain for the tracker.

This package groups the monthly budget model, its JSON persistence and the
helpers that validate raw user input. Callers own a ``Ledger`` instance and
pass it to whichever layer drives it; nothing here keeps global state.
"""

from .ledger import Budget, BudgetNotFoundError, Expense, Income, Ledger
from .storage import LedgerFormatError, dump_ledger, load_ledger, parse_ledger, save_ledger
from .validation import InputValidationError, parse_amount, parse_month, require_fields

__all__ = [
    "Budget",
    "BudgetNotFoundError",
    "Expense",
    "Income",
    "InputValidationError",
    "Ledger",
    "LedgerFormatError",
    "dump_ledger",
    "load_ledger",
    "parse_amount",
    "parse_ledger",
    "parse_month",
    "require_fields",
    "save_ledger",
]
