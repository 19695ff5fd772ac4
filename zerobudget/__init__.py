"""Mini README: Core package initializer for the zero-based budgeting tracker.

This module exposes convenience imports so callers can reach the ledger and
logging helpers without knowing the exact module structure. Interface layers
(CLI and web) are imported explicitly by their entry points to keep the core
free of framework dependencies.
"""

from .finance import Budget, BudgetNotFoundError, Expense, Income, Ledger
from .logging_utils import get_logger

__all__ = [
    "Budget",
    "BudgetNotFoundError",
    "Expense",
    "Income",
    "Ledger",
    "get_logger",
]
