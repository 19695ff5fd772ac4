"""Mini README: JSON persistence for the budget ledger.

Structure:
    * LedgerFormatError - raised when the ledger file cannot be interpreted.
    * load_ledger - read a ledger file, treating a missing file as empty.
    * save_ledger - overwrite the ledger file with the full current state.

The file holds a JSON array of budget objects pretty-printed with two-space
indentation. Absent list or number fields fall back to empty/zero values, but
a value of the wrong type aborts the load. I/O errors other than a missing
file are not handled here and reach the caller unchanged.
"""

from __future__ import annotations

import json
import math
from pathlib import Path
from typing import Any, List, Mapping, Union

from ..logging_utils import get_logger
from .ledger import Budget, Expense, Income, Ledger

LOGGER = get_logger(__name__)

PathLike = Union[str, Path]


class LedgerFormatError(ValueError):
    """Raised when persisted ledger content is malformed."""


def _number(payload: Mapping[str, Any], key: str, where: str) -> float:
    value = payload.get(key, 0.0)
    if value is None:
        return 0.0
    # bool is an int subclass but never a valid amount
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        raise LedgerFormatError(f"{where}: field '{key}' must be a number, got {value!r}")
    try:
        number = float(value)
    except OverflowError as error:
        raise LedgerFormatError(f"{where}: field '{key}' is out of range") from error
    if not math.isfinite(number):
        raise LedgerFormatError(f"{where}: field '{key}' must be finite")
    return number


def _text(payload: Mapping[str, Any], key: str, where: str, *, required: bool = False) -> str:
    if key not in payload or payload[key] is None:
        if required:
            raise LedgerFormatError(f"{where}: field '{key}' is required")
        return ""
    value = payload[key]
    if not isinstance(value, str):
        raise LedgerFormatError(f"{where}: field '{key}' must be a string, got {value!r}")
    return value


def _objects(payload: Mapping[str, Any], key: str, where: str) -> List[Mapping[str, Any]]:
    items = payload.get(key)
    if items is None:
        return []
    if not isinstance(items, list):
        raise LedgerFormatError(f"{where}: field '{key}' must be a list")
    for index, item in enumerate(items):
        if not isinstance(item, dict):
            raise LedgerFormatError(f"{where}: {key}[{index}] must be an object")
    return items


def _budget_from_dict(payload: Any, index: int) -> Budget:
    where = f"budget[{index}]"
    if not isinstance(payload, dict):
        raise LedgerFormatError(f"{where} must be an object")
    month = _text(payload, "month", where, required=True)
    where = f"budget '{month}'"
    incomes = [
        Income(
            source=_text(item, "source", f"{where} income"),
            amount=_number(item, "amount", f"{where} income"),
        )
        for item in _objects(payload, "incomes", where)
    ]
    expenses = [
        Expense(
            category=_text(item, "category", f"{where} expense"),
            budgeted_amount=_number(item, "budgeted_amount", f"{where} expense"),
            actual_amount=_number(item, "actual_amount", f"{where} expense"),
        )
        for item in _objects(payload, "expenses", where)
    ]
    return Budget(
        month=month,
        incomes=incomes,
        expenses=expenses,
        savings=_number(payload, "savings", where),
        balance=_number(payload, "balance", where),
    )


def parse_ledger(document: str) -> Ledger:
    """Build a ledger from the text of a ledger file."""

    try:
        payload = json.loads(document)
    except json.JSONDecodeError as error:
        raise LedgerFormatError(f"Ledger file is not valid JSON: {error}") from error

    if payload is None:
        return Ledger()
    if not isinstance(payload, list):
        raise LedgerFormatError("Ledger file must contain a JSON array of budgets")
    budgets = [_budget_from_dict(item, index) for index, item in enumerate(payload)]
    try:
        return Ledger(budgets)
    except ValueError as error:
        raise LedgerFormatError(str(error)) from error


def load_ledger(path: PathLike) -> Ledger:
    """Read the ledger stored at ``path``; a missing file yields an empty ledger."""

    ledger_path = Path(path)
    try:
        document = ledger_path.read_text(encoding="utf-8")
    except FileNotFoundError:
        LOGGER.info("No ledger found at %s; starting empty", ledger_path)
        return Ledger()
    except UnicodeDecodeError as error:
        raise LedgerFormatError(f"Ledger file is not valid UTF-8: {error}") from error
    except OSError:
        LOGGER.exception("Unable to read ledger at %s", ledger_path)
        raise

    ledger = parse_ledger(document)
    LOGGER.debug("Loaded %s budgets from %s", len(ledger), ledger_path)
    return ledger


def dump_ledger(ledger: Ledger) -> str:
    """Serialise the ledger as two-space indented JSON."""

    return json.dumps(ledger.export_snapshot(), indent=2, ensure_ascii=False)


def save_ledger(path: PathLike, ledger: Ledger) -> None:
    """Overwrite ``path`` with the full ledger state."""

    ledger_path = Path(path)
    try:
        ledger_path.write_text(dump_ledger(ledger), encoding="utf-8")
    except OSError:
        LOGGER.exception("Unable to write ledger to %s", ledger_path)
        raise
    LOGGER.debug("Saved %s budgets to %s", len(ledger), ledger_path)
