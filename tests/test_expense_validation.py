from __future__ import annotations

from datetime import date

import pytest

from expense_log.core.errors import ValidationError
from expense_log.models.expense import ExpenseFields
from expense_log.services.expense_validation import (
    normalize_amount,
    normalize_date,
    present_fields,
    validate_expense_changes,
    validate_new_expense,
)


def test_present_fields_skips_null_and_empty():
    payload = ExpenseFields(amount="", style=None, description="kept", date="2026-01-01")
    assert present_fields(payload) == {"description": "kept", "date": "2026-01-01"}


def test_unknown_keys_are_dropped():
    payload = ExpenseFields.model_validate({"style": "Food", "irrelevantField": "foo"})
    assert present_fields(payload) == {"style": "Food"}


def test_whitespace_text_is_present_and_untouched():
    payload = ExpenseFields(style="  Food  ")
    assert validate_expense_changes(payload) == {"style": "  Food  "}


def test_new_expense_defaults_date():
    values = validate_new_expense(
        ExpenseFields(amount="1.5", style="Food", description="Tea"),
        today=date(2026, 2, 3),
    )
    assert values == {
        "amount": "1.50",
        "style": "Food",
        "description": "Tea",
        "date": "2026-02-03",
    }


@pytest.mark.parametrize(
    "raw, expected",
    [
        ("5", "5.00"),
        ("99.99", "99.99"),
        ("1.005", "1.01"),
        (" 12.3 ", "12.30"),
        ("-4.2", "-4.20"),
    ],
)
def test_normalize_amount(raw, expected):
    assert normalize_amount(raw) == expected


@pytest.mark.parametrize("raw", ["abc", "NaN", "Infinity", "1e100", "1,50"])
def test_normalize_amount_rejects(raw):
    with pytest.raises(ValidationError) as excinfo:
        normalize_amount(raw)
    assert excinfo.value.message == "'amount' must be a decimal number"


@pytest.mark.parametrize(
    "raw, expected",
    [
        ("2026-10-19", "2026-10-19"),
        ("2026-10-19T08:15:00", "2026-10-19"),
        ("2026-10-19T08:15:00.000Z", "2026-10-19"),
        ("Mon Oct 19 2026", "2026-10-19"),
    ],
)
def test_normalize_date(raw, expected):
    assert normalize_date(raw) == expected


def test_normalize_date_rejects_garbage():
    with pytest.raises(ValidationError) as excinfo:
        normalize_date("next tuesday")
    assert excinfo.value.message == "'date' must be a calendar date"
