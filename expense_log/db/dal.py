"""Data Access Layer for the expense log table.

Responsibilities
----------------
- Provide key-based CRUD helpers over ``expense_logs``.
- Open one short-lived connection per call so every helper is atomic on its
  own; concurrent writers to the same row are last-write-wins.
- Translate ``sqlite3`` failures into :class:`StoreError`.
"""

from __future__ import annotations

from contextlib import closing, contextmanager
from pathlib import Path
import sqlite3
from typing import Any, Dict, Iterator, List, Mapping, Optional

from expense_log.core.errors import StoreError
from .schema import EXPENSES_TABLE

EXPENSE_COLUMNS = ("amount", "style", "description", "date")

# SQLite INTEGER bounds; ids outside them can never be stored.
SQLITE_MIN_INT = -(2**63)
SQLITE_MAX_INT = 2**63 - 1


class Database:
    def __init__(self, db_path: Path):
        self.db_path = db_path

    # ------------------------------------------------------------------
    # Connection helpers
    def _connect(self) -> sqlite3.Connection:
        conn = sqlite3.connect(self.db_path)
        conn.row_factory = sqlite3.Row
        return conn

    @contextmanager
    def _cursor(self) -> Iterator[sqlite3.Cursor]:
        """Yield a cursor inside a transaction that commits on success."""
        try:
            with closing(self._connect()) as conn:
                with conn:
                    yield conn.cursor()
        except sqlite3.Error as exc:
            raise StoreError(f"{type(exc).__name__}: {exc}") from exc

    # ------------------------------------------------------------------
    # Expense CRUD
    def list_expenses(self) -> List[Dict[str, Any]]:
        with self._cursor() as cur:
            cur.execute(f"SELECT * FROM {EXPENSES_TABLE} ORDER BY id ASC")
            return [dict(r) for r in cur.fetchall()]

    def get_expense(self, expense_id: int) -> Optional[Dict[str, Any]]:
        if not _storable_id(expense_id):
            return None
        with self._cursor() as cur:
            cur.execute(f"SELECT * FROM {EXPENSES_TABLE} WHERE id = ?", (expense_id,))
            row = cur.fetchone()
            return dict(row) if row else None

    def insert_expense(self, fields: Mapping[str, Any]) -> Dict[str, Any]:
        """Insert a new expense and return the stored row (with its id)."""
        values = _pick_columns(fields)
        columns = ", ".join(values)
        placeholders = ", ".join("?" for _ in values)
        with self._cursor() as cur:
            cur.execute(
                f"INSERT INTO {EXPENSES_TABLE} ({columns}) VALUES ({placeholders})",
                tuple(values.values()),
            )
            expense_id = int(cur.lastrowid)
            cur.execute(f"SELECT * FROM {EXPENSES_TABLE} WHERE id = ?", (expense_id,))
            return dict(cur.fetchone())

    def delete_expense(self, expense_id: int) -> int:
        if not _storable_id(expense_id):
            return 0
        with self._cursor() as cur:
            cur.execute(f"DELETE FROM {EXPENSES_TABLE} WHERE id = ?", (expense_id,))
            return cur.rowcount

    def update_expense(self, expense_id: int, changes: Mapping[str, Any]) -> int:
        """Write only the supplied columns; returns the number of rows touched."""
        values = _pick_columns(changes)
        if not values or not _storable_id(expense_id):
            return 0
        assignments = ", ".join(f"{column} = ?" for column in values)
        with self._cursor() as cur:
            cur.execute(
                f"UPDATE {EXPENSES_TABLE} SET {assignments} WHERE id = ?",
                (*values.values(), expense_id),
            )
            return cur.rowcount


def _storable_id(expense_id: int) -> bool:
    return SQLITE_MIN_INT <= expense_id <= SQLITE_MAX_INT


def _pick_columns(fields: Mapping[str, Any]) -> Dict[str, Any]:
    # Column names are interpolated into SQL, so only known columns pass.
    return {column: fields[column] for column in EXPENSE_COLUMNS if column in fields}
