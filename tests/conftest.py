"""
Pytest configuration and shared fixtures.
"""

import sys
from datetime import datetime
from pathlib import Path

import pytest

# Add src to path for imports
sys.path.insert(0, str(Path(__file__).parent.parent / "src"))

from core.config import TIME_FORMAT
from core.database import get_connection
from models.events import ClockAction, Event


@pytest.fixture
def db_path(tmp_path):
    """Database file inside a directory that doesn't exist yet."""
    return tmp_path / "clock" / "test.db"


@pytest.fixture
def conn(db_path):
    """Open connection to a fresh database."""
    connection = get_connection(db_path)
    yield connection
    connection.close()


@pytest.fixture
def make_event():
    """Build an Event without touching the database."""

    def _make(id=1, time="2025-11-01 09:00:00", action=ClockAction.IN, category="work"):
        return Event(
            id=id,
            time=datetime.strptime(time, TIME_FORMAT),
            action=action,
            category=category,
        )

    return _make


@pytest.fixture
def seed_events(conn):
    """Insert records with explicit timestamps, oldest first."""

    def _seed(rows: list[tuple[str, str, str]]):
        conn.executemany(
            "INSERT INTO records (time, action, category) VALUES (?, ?, ?)", rows
        )
        conn.commit()

    return _seed
