"""Seeding helpers for expense fixtures.

`seed_expenses` inserts records exactly as given, ids included, so callers
can refer to known identifiers afterwards. `clear_expenses` empties the
table and resets the id sequence.
"""

from __future__ import annotations
from contextlib import closing
from pathlib import Path
import sqlite3
from typing import Any, Iterable, Mapping

from .schema import EXPENSES_TABLE, init_db

SEED_COLUMNS = ("id", "amount", "style", "description", "date")


def seed_expenses(db_path: Path, records: Iterable[Mapping[str, Any]]) -> int:
    """Insert fixture records; returns the number of rows written."""
    init_db(db_path)  # ensure tables exist
    rows = [
        tuple(record.get(column) for column in SEED_COLUMNS) for record in records
    ]
    with closing(sqlite3.connect(db_path)) as conn:
        cur = conn.cursor()
        cur.executemany(
            f"INSERT INTO {EXPENSES_TABLE} ({', '.join(SEED_COLUMNS)}) "
            f"VALUES ({', '.join('?' for _ in SEED_COLUMNS)})",
            rows,
        )
        conn.commit()
    return len(rows)


def clear_expenses(db_path: Path) -> None:
    init_db(db_path)
    with closing(sqlite3.connect(db_path)) as conn:
        cur = conn.cursor()
        cur.execute(f"DELETE FROM {EXPENSES_TABLE}")
        # sqlite_sequence only exists once an AUTOINCREMENT row was written
        cur.execute(
            "SELECT name FROM sqlite_master WHERE type='table' AND name='sqlite_sequence'"
        )
        if cur.fetchone() is not None:
            cur.execute("DELETE FROM sqlite_sequence WHERE name = ?", (EXPENSES_TABLE,))
        conn.commit()
