"""
Error types raised by the store, the state machine and the reports.
"""


class ClockError(Exception):
    """Base class for every error the clock reports to the user."""


class StoreError(ClockError):
    """The database could not be opened, read or written."""


class InvalidTransition(ClockError):
    """The requested clock action is not allowed from the current state."""


class InsufficientHistory(ClockError):
    """Fewer than two records exist, so no elapsed time can be computed."""


class NoRecords(ClockError):
    """The log is empty."""
