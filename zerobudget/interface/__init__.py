"""Mini README: Interfaces that drive the budget ledger.

``commands`` holds the toolkit-free actions used by every front end and
``web_app`` exposes them as a FastAPI JSON API. The Typer CLI lives in
``main_budget.py`` at the repository root.
"""

from .commands import BudgetCommands, CommandResult
from .web_app import create_application

__all__ = ["BudgetCommands", "CommandResult", "create_application"]
