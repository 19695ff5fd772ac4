"""Mini README: FastAPI JSON API over the budget commands.

Structure:
    * create_application - application factory wiring routes to one
      ``BudgetCommands`` instance.

Form fields are accepted as plain text so the command layer performs all
validation and produces the same status messages as the CLI. Failed actions
become HTTP 400 responses, or 404 when the month has no budget.
"""

from __future__ import annotations

from typing import Optional

from fastapi import FastAPI, Form, HTTPException
from fastapi.responses import JSONResponse

from ..configuration import get_settings
from ..logging_utils import get_logger
from .commands import BudgetCommands, CommandResult

LOGGER = get_logger(__name__)


def _respond(result: CommandResult) -> JSONResponse:
    """Translate a command result into a JSON response or HTTP error."""

    if not result.ok:
        raise HTTPException(status_code=404 if result.not_found else 400, detail=result.message)
    return JSONResponse({"message": result.message})


def create_application(commands: Optional[BudgetCommands] = None) -> FastAPI:
    """Create the FastAPI application with routes bound to ``commands``."""

    if commands is None:
        commands = BudgetCommands.from_path(get_settings().ledger_path)
    LOGGER.info("Serving ledger stored at %s", commands.ledger_path)

    app = FastAPI(title="Zero-Based Budgeting", version="0.1.0")

    @app.get("/budgets")
    async def list_budgets() -> JSONResponse:
        """Return every month alongside the full ledger snapshot."""

        return JSONResponse(
            {
                "months": commands.ledger.list_months(),
                "budgets": commands.ledger.export_snapshot(),
            }
        )

    @app.get("/budgets/{month}")
    async def view_budget(month: str) -> JSONResponse:
        """Return the month's summary text."""

        return _respond(commands.view_budget(month))

    @app.post("/budgets")
    async def add_budget(month: Optional[str] = Form(None)) -> JSONResponse:
        result = commands.add_budget(month)
        LOGGER.debug("add_budget month=%s ok=%s", month, result.ok)
        return _respond(result)

    @app.post("/budgets/{month}/incomes")
    async def add_income(
        month: str,
        source: Optional[str] = Form(None),
        amount: Optional[str] = Form(None),
    ) -> JSONResponse:
        result = commands.add_income(month, source, amount)
        LOGGER.debug("add_income month=%s ok=%s", month, result.ok)
        return _respond(result)

    @app.post("/budgets/{month}/expenses")
    async def add_expense(
        month: str,
        category: Optional[str] = Form(None),
        budgeted_amount: Optional[str] = Form(None),
        actual_amount: Optional[str] = Form(None),
    ) -> JSONResponse:
        result = commands.add_expense(month, category, budgeted_amount, actual_amount)
        LOGGER.debug("add_expense month=%s ok=%s", month, result.ok)
        return _respond(result)

    @app.post("/budgets/{month}/savings")
    async def set_savings(month: str, amount: Optional[str] = Form(None)) -> JSONResponse:
        result = commands.set_savings(month, amount)
        LOGGER.debug("set_savings month=%s ok=%s", month, result.ok)
        return _respond(result)

    return app
