"""
Data models for clock records and derived state.

Records are frozen Pydantic models; the clock state is a small union of
dataclasses recomputed from the latest record on every decision.
"""

from dataclasses import dataclass
from datetime import datetime
from enum import Enum
from typing import Annotated

from pydantic import BaseModel, ConfigDict, Field

from core.config import DEFAULT_CATEGORY, TIME_FORMAT

Category = Annotated[str, Field(min_length=1)]


class ClockAction(str, Enum):
    """Direction of a clock record, stored as its value."""

    IN = "in"
    OUT = "out"

    def __str__(self) -> str:
        return self.value


class Event(BaseModel):
    """One row of the `records` table."""

    model_config = ConfigDict(frozen=True)

    id: int
    time: datetime
    action: ClockAction
    category: Category

    @property
    def time_display(self) -> str:
        return self.time.strftime(TIME_FORMAT)


@dataclass(frozen=True)
class OpenSession:
    """An unmatched clock-in is the latest record."""

    event: Event

    @property
    def category(self) -> str:
        return self.event.category


@dataclass(frozen=True)
class Closed:
    """Clocked out, or never clocked in when `event` is None."""

    event: Event | None = None


ClockState = OpenSession | Closed


def resolve_category(requested: str | None, fallback: str = DEFAULT_CATEGORY) -> str:
    """Return the requested category, or `fallback` when it is empty."""
    if requested:
        return requested
    return fallback


def derive_state(recent: list[Event]) -> ClockState:
    """
    Derive the clock state from records ordered newest first.

    Only the first record matters; an empty list means nothing was ever
    recorded.
    """
    if not recent:
        return Closed()
    latest = recent[0]
    if latest.action is ClockAction.IN:
        return OpenSession(latest)
    return Closed(latest)
