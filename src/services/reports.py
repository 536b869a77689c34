"""
Read-side reporting: elapsed time, current status and the log table.
"""

import math
from datetime import datetime, timedelta

from core.config import LOG_HEADERS
from core.errors import InsufficientHistory, NoRecords
from models.events import ClockAction, Event


def format_duration(elapsed: timedelta) -> str:
    """Format a duration as H:MM:SS, rounded to the nearest second."""
    total = elapsed.total_seconds()
    # Halves round away from zero
    seconds = math.floor(abs(total) + 0.5)
    sign = "-" if total < 0 and seconds else ""
    hours, rem = divmod(seconds, 3600)
    minutes, secs = divmod(rem, 60)
    return f"{sign}{hours}:{minutes:02d}:{secs:02d}"


# =============================================================================
# ELAPSED TIME
# =============================================================================


def elapsed_between_last_two(events: list[Event]) -> timedelta:
    """
    Time between the two most recent records.

    Args:
        events: Records ordered newest first.

    Raises:
        InsufficientHistory: if fewer than two records are given
    """
    if len(events) < 2:
        raise InsufficientHistory("not enough records to calculate time elapsed")
    end, start = events[0], events[1]
    return end.time - start.time


def time_elapsed(events: list[Event]) -> str:
    """Describe the time between the last two records."""
    elapsed = elapsed_between_last_two(events)
    end, start = events[0], events[1]
    if end.action is ClockAction.IN:
        return (
            f"Last clock in was from {start.time_display} to {end.time_display} "
            f"({format_duration(elapsed)})"
        )
    return f"Last clock out was {end.time_display} ({format_duration(elapsed)} ago)"


# =============================================================================
# STATUS
# =============================================================================


def clock_status(events: list[Event], now: datetime | None = None) -> str:
    """
    Describe the latest record and how long ago it was made.

    Raises:
        NoRecords: if there are no records at all
    """
    if not events:
        raise NoRecords("no records found")
    latest = events[0]
    now = now or datetime.now()
    elapsed = format_duration(now - latest.time)

    if latest.action is ClockAction.IN:
        return f"Clocked in ({latest.category}) since {latest.time_display} ({elapsed})"
    return f"Clocked out ({latest.category}) since {latest.time_display} ({elapsed} ago)"


# =============================================================================
# LOG TABLE
# =============================================================================


def format_log_table(events: list[Event]) -> str:
    """
    Render records as a fixed-column table in chronological order.

    `events` come newest first, as returned by the store.
    """
    rows = [LOG_HEADERS]
    for event in reversed(events):
        rows.append(
            [f"{event.id}:", event.action.value, event.category, event.time_display]
        )

    widths = [max(len(row[col]) for row in rows) for col in range(len(LOG_HEADERS))]
    lines = []
    for row in rows:
        # Last column is not padded
        cells = [cell.ljust(width) for cell, width in zip(row[:-1], widths)]
        lines.append(" ".join(cells + [row[-1]]))
    return "\n".join(lines)
