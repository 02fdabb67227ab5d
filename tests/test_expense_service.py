from __future__ import annotations

from datetime import date

import pytest

from expense_log.core.errors import NotFoundError, ValidationError
from expense_log.models.expense import ExpenseCreateIn, ExpenseUpdateIn
from expense_log.services.expense_service import ExpenseService


@pytest.fixture
def service(store):
    return ExpenseService(store, base_path="/api/expenses/")


def _create(service, **fields):
    payload = {"amount": "10", "style": "Food", "description": "Snacks", **fields}
    return service.create_expense(ExpenseCreateIn(**payload), today=date(2026, 5, 1))


def test_create_returns_record_and_location(service):
    created = _create(service)
    assert created.record == {
        "id": 1,
        "amount": "10.00",
        "style": "Food",
        "description": "Snacks",
        "date": "2026-05-01",
    }
    assert created.location == "/api/expenses/1"
    assert service.get_expense(1) == created.record


def test_create_reports_first_missing_field_in_order(service):
    with pytest.raises(ValidationError) as excinfo:
        service.create_expense(ExpenseCreateIn(description="only this"))
    assert excinfo.value.message == "Missing 'amount' in request body"

    with pytest.raises(ValidationError) as excinfo:
        service.create_expense(ExpenseCreateIn(amount="1", description="x"))
    assert excinfo.value.message == "Missing 'style' in request body"
    assert service.list_expenses() == []


def test_get_missing_raises_not_found(service):
    with pytest.raises(NotFoundError) as excinfo:
        service.get_expense(42)
    assert excinfo.value.message == "Expense doesn't exist"
    assert excinfo.value.status_code == 404


def test_update_checks_existence_before_fields(service):
    with pytest.raises(NotFoundError):
        service.update_expense(42, ExpenseUpdateIn())


def test_update_merges_supplied_fields_only(service):
    _create(service)
    service.update_expense(1, ExpenseUpdateIn(style="Groceries", description=""))
    assert service.get_expense(1) == {
        "id": 1,
        "amount": "10.00",
        "style": "Groceries",
        "description": "Snacks",
        "date": "2026-05-01",
    }


def test_update_rejects_date_only(service):
    _create(service)
    with pytest.raises(ValidationError) as excinfo:
        service.update_expense(1, ExpenseUpdateIn(date="2026-06-01"))
    assert excinfo.value.message == (
        "Request body must contain either 'amount', 'style', or 'description'"
    )
    assert service.get_expense(1)["date"] == "2026-05-01"


def test_invalid_value_does_not_write(service):
    _create(service)
    with pytest.raises(ValidationError):
        service.update_expense(1, ExpenseUpdateIn(style="Rent", amount="ten"))
    assert service.get_expense(1)["style"] == "Food"


def test_delete_then_delete_again(service):
    _create(service)
    _create(service, style="Bills")
    service.delete_expense(1)
    assert [e["id"] for e in service.list_expenses()] == [2]
    with pytest.raises(NotFoundError):
        service.delete_expense(1)
