"""Field names and fixed client-facing messages for expense validation."""

from typing import Tuple

# Checked in this order on create; the first missing one is reported.
REQUIRED_FIELDS: Tuple[str, ...] = ("amount", "style", "description")
UPDATABLE_FIELDS: Tuple[str, ...] = REQUIRED_FIELDS + ("date",)

MISSING_FIELD_MESSAGE = "Missing '{field}' in request body"
EMPTY_UPDATE_MESSAGE = (
    "Request body must contain either 'amount', 'style', or 'description'"
)
NOT_FOUND_MESSAGE = "Expense doesn't exist"
INVALID_AMOUNT_MESSAGE = "'amount' must be a decimal number"
INVALID_DATE_MESSAGE = "'date' must be a calendar date"
