"""Mini README: Tests for the FastAPI JSON API.

Requests go through ``TestClient`` against an application bound to a ledger
file inside ``tmp_path``.
"""

from __future__ import annotations

import pytest
from fastapi.testclient import TestClient

from zerobudget.finance import load_ledger
from zerobudget.interface import BudgetCommands, create_application


@pytest.fixture()
def client(tmp_path) -> TestClient:
    commands = BudgetCommands.from_path(tmp_path / "budget.json")
    return TestClient(create_application(commands))


def test_record_month_over_http(client: TestClient, tmp_path) -> None:
    assert client.post("/budgets", data={"month": "2024-01"}).json() == {
        "message": "Budget added for 2024-01"
    }
    client.post("/budgets/2024-01/incomes", data={"source": "Salary", "amount": "3000"})
    response = client.post(
        "/budgets/2024-01/expenses",
        data={"category": "Rent", "budgeted_amount": "1200", "actual_amount": "1250"},
    )
    assert response.status_code == 200

    summary = client.get("/budgets/2024-01").json()["message"]
    assert "Balance: 1750.00" in summary

    listing = client.get("/budgets").json()
    assert listing["months"] == ["2024-01"]
    assert listing["budgets"][0]["balance"] == pytest.approx(1750.0)
    assert load_ledger(tmp_path / "budget.json").get_budget("2024-01").balance == pytest.approx(1750.0)


def test_errors_map_to_status_codes(client: TestClient) -> None:
    missing = client.post("/budgets/2024-09/incomes", data={"source": "Pay", "amount": "1"})
    assert missing.status_code == 404
    assert missing.json()["detail"] == "Budget for this month does not exist"

    client.post("/budgets", data={"month": "2024-09"})
    invalid = client.post("/budgets/2024-09/savings", data={"amount": "abc"})
    assert invalid.status_code == 400
    assert invalid.json()["detail"] == "Invalid savings amount"

    empty = client.post("/budgets", data={})
    assert empty.status_code == 400
    assert empty.json()["detail"] == "Month cannot be empty"

    unknown = client.get("/budgets/2031-02")
    assert unknown.status_code == 404
    assert unknown.json()["detail"] == "Budget for this month does not exist"

    malformed = client.get("/budgets/not-a-month")
    assert malformed.status_code == 400
    assert malformed.json()["detail"] == "Month must use the YYYY-MM format"
