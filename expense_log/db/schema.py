"""Database schema DDL definitions and initialization utilities.

Tables:
  - expense_logs: individual expense records
"""

from __future__ import annotations
import sqlite3
from typing import Sequence
from pathlib import Path

EXPENSES_TABLE = "expense_logs"

EXPENSE_LOGS_DDL = f"""
CREATE TABLE IF NOT EXISTS {EXPENSES_TABLE} (
    id INTEGER PRIMARY KEY AUTOINCREMENT,
    amount TEXT NOT NULL CHECK (length(amount) > 0), -- decimal string, two places
    style TEXT NOT NULL CHECK (length(style) > 0),
    description TEXT NOT NULL CHECK (length(description) > 0),
    date TEXT NOT NULL -- ISO date (YYYY-MM-DD)
);
"""

EXPENSE_LOGS_DATE_INDEX_DDL = (
    f"CREATE INDEX IF NOT EXISTS idx_expense_logs_date ON {EXPENSES_TABLE}(date);"
)

DDL_ORDER: Sequence[str] = (
    EXPENSE_LOGS_DDL,
    EXPENSE_LOGS_DATE_INDEX_DDL,
)


def init_db(path: Path) -> None:
    """Create all tables idempotently.

    Parameters
    ----------
    path: Path to SQLite database file.
    """
    conn = sqlite3.connect(path)
    try:
        cur = conn.cursor()
        for ddl in DDL_ORDER:
            cur.execute(ddl)
        conn.commit()
    finally:
        conn.close()
