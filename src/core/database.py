"""
SQLite storage for clock records.

The `records` table is append-only: rows are inserted by `append_event` and
never updated or deleted.
"""

import logging
import sqlite3
from datetime import datetime
from pathlib import Path

from core.config import DB_PATH, TIME_FORMAT
from core.errors import StoreError
from models.events import ClockAction, Event

logger = logging.getLogger(__name__)


def get_connection(db_path: Path = DB_PATH) -> sqlite3.Connection:
    """Open the database, creating its directory and table if needed."""
    db_path = Path(db_path)
    try:
        db_path.parent.mkdir(parents=True, exist_ok=True)
    except OSError as e:
        raise StoreError(f"error creating directory {db_path.parent}: {e}") from e

    try:
        conn = sqlite3.connect(db_path)
    except sqlite3.Error as e:
        raise StoreError(f"error opening database: {e}") from e

    try:
        ensure_table(conn)
    except StoreError:
        conn.close()
        raise
    logger.debug("Opened database at %s", db_path)
    return conn


def ensure_table(conn: sqlite3.Connection):
    """Create the records table if it doesn't exist. Safe to call repeatedly."""
    try:
        conn.execute(
            """
            CREATE TABLE IF NOT EXISTS records (
                id INTEGER NOT NULL PRIMARY KEY,
                time TEXT,
                action TEXT,
                category TEXT
            )
            """
        )
        conn.commit()
    except sqlite3.Error as e:
        raise StoreError(f"error creating table: {e}") from e


def _row_to_event(row: tuple) -> Event:
    record_id, time_str, action, category = row
    try:
        return Event(
            id=record_id,
            time=datetime.strptime(time_str, TIME_FORMAT),
            action=ClockAction(action),
            category=category,
        )
    except (TypeError, ValueError) as e:
        raise StoreError(f"error scanning record {record_id}: {e}") from e


def append_event(conn: sqlite3.Connection, action: ClockAction, category: str) -> Event:
    """Insert a record stamped with the current local time and return it."""
    if not category:
        raise StoreError("error inserting record: category must not be empty")
    try:
        cursor = conn.cursor()
        cursor.execute(
            "INSERT INTO records (time, action, category) "
            "VALUES (datetime('now', 'localtime'), ?, ?)",
            (ClockAction(action).value, category),
        )
        conn.commit()
        record_id = cursor.lastrowid
        cursor.execute(
            "SELECT id, time, action, category FROM records WHERE id = ?",
            (record_id,),
        )
        row = cursor.fetchone()
    except sqlite3.Error as e:
        raise StoreError(f"error inserting record: {e}") from e

    event = _row_to_event(row)
    logger.debug("Appended record %d: %s %s", event.id, event.action, event.category)
    return event


def recent_events(conn: sqlite3.Connection, n: int) -> list[Event]:
    """
    Return up to `n` most recent records, newest first.

    An empty list is returned when the table holds no records or when `n`
    is not positive.
    """
    if n <= 0:
        return []
    try:
        cursor = conn.cursor()
        cursor.execute(
            "SELECT id, time, action, category FROM records ORDER BY id DESC LIMIT ?",
            (n,),
        )
        rows = cursor.fetchall()
    except sqlite3.Error as e:
        raise StoreError(f"error getting last {n} records: {e}") from e

    return [_row_to_event(row) for row in rows]
