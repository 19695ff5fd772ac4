"""Mini README: Helpers turning raw user input into ledger values.

Structure:
    * InputValidationError - carries the status message shown to the user.
    * require_fields - rejects blank entries.
    * parse_amount - converts decimal text into a finite float.
    * parse_month - checks the ``YYYY-MM`` month key.

The helpers raise before any ledger state is touched, so a rejected entry
never leaves a partial change behind.
"""

from __future__ import annotations

import math
import re
from typing import Optional

_MONTH_PATTERN = re.compile(r"([0-9]{4})-([0-9]{2})")
_AMOUNT_PATTERN = re.compile(r"[+-]?([0-9]+(\.[0-9]*)?|\.[0-9]+)([eE][+-]?[0-9]+)?")


class InputValidationError(ValueError):
    """Raised when user supplied input is missing or cannot be parsed."""


def _is_blank(value: Optional[str]) -> bool:
    return value is None or not str(value).strip()


def require_fields(message: str, *values: Optional[str]) -> None:
    """Raise ``InputValidationError(message)`` if any value is empty."""

    if any(_is_blank(value) for value in values):
        raise InputValidationError(message)


def parse_amount(raw: str, label: str) -> float:
    """Parse ``raw`` as a decimal amount, naming ``label`` in the error."""

    text = "" if raw is None else str(raw).strip()
    # plain ASCII decimals only; float() alone also takes "1_000" and non-ASCII digits
    if not _AMOUNT_PATTERN.fullmatch(text):
        raise InputValidationError(f"Invalid {label}")
    value = float(text)
    if not math.isfinite(value):
        raise InputValidationError(f"Invalid {label}")
    return value


def parse_month(raw: Optional[str]) -> str:
    """Return the trimmed month key after checking its ``YYYY-MM`` shape."""

    require_fields("Month cannot be empty", raw)
    month = str(raw).strip()
    match = _MONTH_PATTERN.fullmatch(month)
    if not match or not 1 <= int(match.group(2)) <= 12:
        raise InputValidationError("Month must use the YYYY-MM format")
    return month
