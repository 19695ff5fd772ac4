"""Mini README: Tests for user input validation helpers."""

from __future__ import annotations

import pytest

from zerobudget.finance import InputValidationError, parse_amount, parse_month, require_fields


def test_parse_amount_accepts_decimals() -> None:
    assert parse_amount(" 12.50 ", "income amount") == pytest.approx(12.5)
    assert parse_amount("-3", "actual amount") == pytest.approx(-3.0)
    assert parse_amount("1e3", "savings amount") == pytest.approx(1000.0)
    assert parse_amount(".5", "savings amount") == pytest.approx(0.5)


@pytest.mark.parametrize("raw", ["abc", "", "nan", "inf", "1e999", "1,000", "1_000", "１２"])
def test_parse_amount_rejects_bad_input(raw: str) -> None:
    with pytest.raises(InputValidationError, match="Invalid budgeted amount"):
        parse_amount(raw, "budgeted amount")


def test_parse_month_checks_format() -> None:
    assert parse_month(" 2024-07 ") == "2024-07"
    with pytest.raises(InputValidationError, match="Month cannot be empty"):
        parse_month("  ")
    for raw in ("2024-13", "2024-7", "July 2024", "2024-00", "２０２４-０１", "٢٠٢٤-٠١"):
        with pytest.raises(InputValidationError, match="YYYY-MM"):
            parse_month(raw)


def test_require_fields_uses_given_message() -> None:
    require_fields("unused", "a", "b")
    with pytest.raises(InputValidationError, match="Please fill in all income fields"):
        require_fields("Please fill in all income fields", "2024-01", "", "10")
    with pytest.raises(InputValidationError):
        require_fields("missing", None)
