"""Expense resource handler.

Sits between the HTTP routes and the data access layer: validates payloads,
maps missing rows to :class:`NotFoundError` and builds the location of newly
created records. Every call reads current state from the store; nothing is
cached between requests.

Text is returned exactly as stored. Escaping markup in ``style`` or
``description`` is left to whatever renders the data.
"""

from __future__ import annotations

import logging
from datetime import date
from typing import Any, Dict, List, NamedTuple, Optional

from expense_log.core.errors import NotFoundError
from expense_log.db.dal import Database
from expense_log.models.constants import NOT_FOUND_MESSAGE
from expense_log.models.expense import ExpenseCreateIn, ExpenseUpdateIn
from expense_log.services.expense_validation import (
    validate_expense_changes,
    validate_new_expense,
)

logger = logging.getLogger("expense_log.expenses")


class CreatedExpense(NamedTuple):
    record: Dict[str, Any]
    location: str


class ExpenseService:
    def __init__(self, db: Database, base_path: str = "/api/expenses"):
        self.db = db
        self.base_path = base_path.rstrip("/")

    def list_expenses(self) -> List[Dict[str, Any]]:
        return self.db.list_expenses()

    def get_expense(self, expense_id: int) -> Dict[str, Any]:
        row = self.db.get_expense(expense_id)
        if row is None:
            raise NotFoundError(NOT_FOUND_MESSAGE)
        return row

    def create_expense(
        self, payload: ExpenseCreateIn, today: Optional[date] = None
    ) -> CreatedExpense:
        values = validate_new_expense(payload, today=today)
        row = self.db.insert_expense(values)
        logger.info("expense created", extra={"expense_id": row["id"]})
        return CreatedExpense(record=row, location=self.location_for(row["id"]))

    def delete_expense(self, expense_id: int) -> None:
        self.get_expense(expense_id)
        # A concurrent delete may win between the check and this call.
        if self.db.delete_expense(expense_id) == 0:
            raise NotFoundError(NOT_FOUND_MESSAGE)
        logger.info("expense deleted", extra={"expense_id": expense_id})

    def update_expense(self, expense_id: int, payload: ExpenseUpdateIn) -> None:
        self.get_expense(expense_id)
        changes = validate_expense_changes(payload)
        if self.db.update_expense(expense_id, changes) == 0:
            raise NotFoundError(NOT_FOUND_MESSAGE)
        logger.info(
            "expense updated: %s",
            ", ".join(sorted(changes)),
            extra={"expense_id": expense_id},
        )

    def location_for(self, expense_id: int) -> str:
        return f"{self.base_path}/{expense_id}"
