"""
Clock transition validation.

Decides whether an `in`/`out` request is legal given the latest record and
appends the new record when it is. There is a single open/closed timeline;
categories only label which session is open.
"""

import logging
import sqlite3

from core.database import append_event, recent_events
from core.errors import InvalidTransition
from models.events import (
    ClockAction,
    ClockState,
    Event,
    OpenSession,
    derive_state,
    resolve_category,
)

logger = logging.getLogger(__name__)


def validate_transition(state: ClockState, action: ClockAction, requested: str) -> str:
    """
    Check a transition and return the category to record.

    Raises:
        InvalidTransition: if the action is not allowed from `state`
    """
    if isinstance(state, OpenSession):
        prev = state.event
        if action is ClockAction.IN:
            raise InvalidTransition(
                f"already clocked in ({prev.category} @ {prev.time_display})"
            )
        # Clocking out: an empty category inherits the open one
        if requested and requested != prev.category:
            raise InvalidTransition(
                f"cannot clock out of a different category ({prev.category})"
            )
        return resolve_category(requested, fallback=prev.category)

    if state.event is None:
        if action is ClockAction.OUT:
            raise InvalidTransition("cannot clock out without clocking in first")
        return resolve_category(requested)

    prev = state.event
    if action is ClockAction.OUT:
        raise InvalidTransition(
            f"already clocked out ({prev.category} @ {prev.time_display})"
        )
    return resolve_category(requested)


def clock_in_out(conn: sqlite3.Connection, action: ClockAction, category: str = "") -> Event:
    """Record a clock-in or clock-out if the latest record allows it."""
    action = ClockAction(action)
    state = derive_state(recent_events(conn, 1))
    try:
        resolved = validate_transition(state, action, category)
    except InvalidTransition as e:
        logger.info("Rejected clock %s: %s", action, e)
        raise
    return append_event(conn, action, resolved)

