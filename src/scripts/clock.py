#!/usr/bin/env python3
"""
Clock in and out of categories and review the record log.

Usage:
    clock in [category]
    clock out [category]
    clock log [-n N]
    clock status
    clock elapsed

Example:
    uv run python src/scripts/clock.py in work
"""

import argparse
import logging
import sys
from pathlib import Path

# Add src to path for imports
sys.path.insert(0, str(Path(__file__).parent.parent))

from core.config import DB_PATH, DEFAULT_LOG_COUNT, LOG_FORMAT, LOG_LEVEL
from core.database import get_connection, recent_events
from core.errors import ClockError
from core.validation import clock_in_out
from models.events import ClockAction
from services.reports import clock_status, format_log_table, time_elapsed


def parse_category(args: list[str]) -> str:
    """
    Pick the category from positional arguments.

    More than one argument is treated like none; the default applies later.
    """
    if len(args) == 1:
        return args[0]
    return ""


# =============================================================================
# COMMANDS
# =============================================================================


def cmd_clock(args, action: ClockAction):
    conn = get_connection(args.db)
    try:
        event = clock_in_out(conn, action, parse_category(args.category))
    finally:
        conn.close()
    print(f"Clocked {event.action} ({event.category}) @ {event.time_display}")


def cmd_log(args):
    conn = get_connection(args.db)
    try:
        events = recent_events(conn, args.number)
    finally:
        conn.close()
    print(format_log_table(events))


def cmd_status(args):
    conn = get_connection(args.db)
    try:
        events = recent_events(conn, 1)
    finally:
        conn.close()
    print(clock_status(events))


def cmd_elapsed(args):
    conn = get_connection(args.db)
    try:
        events = recent_events(conn, 2)
    finally:
        conn.close()
    print(time_elapsed(events))


# =============================================================================
# MAIN
# =============================================================================


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="clock", description="Track time by clocking in and out"
    )
    parser.add_argument(
        "--db",
        type=Path,
        default=DB_PATH,
        help=f"Path to the SQLite database (default: {DB_PATH})",
    )
    parser.add_argument(
        "-v", "--verbose", action="store_true", help="Show debug logging"
    )
    subparsers = parser.add_subparsers(dest="command", required=True)

    clock_in = subparsers.add_parser("in", help="Clock in")
    clock_in.add_argument("category", nargs="*", help="Category to clock into")
    clock_in.set_defaults(func=lambda args: cmd_clock(args, ClockAction.IN))

    clock_out = subparsers.add_parser("out", help="Clock out")
    clock_out.add_argument(
        "category", nargs="*", help="Category to clock out of (default: the open one)"
    )
    clock_out.set_defaults(func=lambda args: cmd_clock(args, ClockAction.OUT))

    log = subparsers.add_parser("log", help="Show the log of recent clock actions")
    log.add_argument(
        "-n",
        "--number",
        type=int,
        default=DEFAULT_LOG_COUNT,
        help=f"Number of records to show (default: {DEFAULT_LOG_COUNT})",
    )
    log.set_defaults(func=cmd_log)

    status = subparsers.add_parser("status", help="Show whether you are clocked in")
    status.set_defaults(func=cmd_status)

    elapsed = subparsers.add_parser(
        "elapsed", help="Show the time between the last two clock actions"
    )
    elapsed.set_defaults(func=cmd_elapsed)

    return parser


def main(argv: list[str] | None = None) -> int:
    args = build_parser().parse_args(argv)
    logging.basicConfig(
        level=logging.DEBUG if args.verbose else LOG_LEVEL, format=LOG_FORMAT
    )

    try:
        args.func(args)
    except ClockError as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())
