"""Pydantic request/response models for the Expense Log API."""

from .constants import (
    REQUIRED_FIELDS,
    UPDATABLE_FIELDS,
    MISSING_FIELD_MESSAGE,
    EMPTY_UPDATE_MESSAGE,
    NOT_FOUND_MESSAGE,
)  # re-export
from .expense import ExpenseFields, ExpenseCreateIn, ExpenseUpdateIn, ExpenseOut

__all__ = [
    "REQUIRED_FIELDS",
    "UPDATABLE_FIELDS",
    "MISSING_FIELD_MESSAGE",
    "EMPTY_UPDATE_MESSAGE",
    "NOT_FOUND_MESSAGE",
    "ExpenseFields",
    "ExpenseCreateIn",
    "ExpenseUpdateIn",
    "ExpenseOut",
]
