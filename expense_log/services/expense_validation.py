"""Domain-level expense validation utilities.

Pydantic only shapes the request body (strings or nothing per field, unknown
keys dropped). The rules callers see live here:

- create requires ``amount``, ``style`` and ``description``, checked in that
  order, reporting the first one missing;
- update requires at least one of those three (``date`` alone is not enough);
- a field counts as supplied when it is neither absent, ``null`` nor ``""``;
- ``amount`` is normalised to two decimal places and ``date`` to ISO format.

Text fields are passed through untouched.
"""

from __future__ import annotations
from datetime import date, datetime
from typing import Dict, Optional

from expense_log.core.errors import ValidationError
from expense_log.models.constants import (
    EMPTY_UPDATE_MESSAGE,
    INVALID_AMOUNT_MESSAGE,
    INVALID_DATE_MESSAGE,
    MISSING_FIELD_MESSAGE,
    REQUIRED_FIELDS,
    UPDATABLE_FIELDS,
)
from expense_log.models.expense import ExpenseFields
from expense_log.services.money import format_amount, quantize_amount

# Formats tried after ISO parsing fails; the first is JavaScript's Date.toDateString().
EXTRA_DATE_FORMATS = ("%a %b %d %Y",)


def present_fields(payload: ExpenseFields) -> Dict[str, str]:
    """Return the recognised fields that were actually supplied."""
    supplied = {}
    for field in UPDATABLE_FIELDS:
        value = getattr(payload, field)
        if value is None or value == "":
            continue
        supplied[field] = value
    return supplied


def validate_new_expense(
    payload: ExpenseFields, today: Optional[date] = None
) -> Dict[str, str]:
    supplied = present_fields(payload)
    for field in REQUIRED_FIELDS:
        if field not in supplied:
            raise ValidationError(MISSING_FIELD_MESSAGE.format(field=field))

    values = _normalize(supplied)
    if "date" not in values:
        values["date"] = (today or date.today()).isoformat()
    return values


def validate_expense_changes(payload: ExpenseFields) -> Dict[str, str]:
    supplied = present_fields(payload)
    if not any(field in supplied for field in REQUIRED_FIELDS):
        raise ValidationError(EMPTY_UPDATE_MESSAGE)
    return _normalize(supplied)


def normalize_amount(raw: str) -> str:
    try:
        return format_amount(quantize_amount(raw))
    except ValueError as exc:
        raise ValidationError(INVALID_AMOUNT_MESSAGE) from exc


def normalize_date(raw: str) -> str:
    """Return ``raw`` as an ISO calendar date (YYYY-MM-DD)."""
    text = raw.strip()
    try:
        return date.fromisoformat(text).isoformat()
    except ValueError:
        pass
    # Datetimes keep their own calendar date; no timezone conversion.
    candidate = text[:-1] + "+00:00" if text.endswith("Z") else text
    try:
        return datetime.fromisoformat(candidate).date().isoformat()
    except ValueError:
        pass
    for fmt in EXTRA_DATE_FORMATS:
        try:
            return datetime.strptime(text, fmt).date().isoformat()
        except ValueError:
            continue
    raise ValidationError(INVALID_DATE_MESSAGE)


def _normalize(supplied: Dict[str, str]) -> Dict[str, str]:
    values = dict(supplied)
    if "amount" in values:
        values["amount"] = normalize_amount(values["amount"])
    if "date" in values:
        values["date"] = normalize_date(values["date"])
    return values
