"""
Configuration constants and environment setup.
"""

import os
from pathlib import Path

from dotenv import load_dotenv

load_dotenv()


def env_int(name: str, default: int) -> int:
    """Read an integer from the environment, falling back to `default` if unset or invalid."""
    try:
        return int(os.environ.get(name, default))
    except ValueError:
        return default


# =============================================================================
# PATHS
# =============================================================================

CLOCK_HOME = Path(os.environ.get("CLOCK_HOME", Path.home() / ".clock")).expanduser()
DB_PATH = Path(os.environ.get("CLOCK_DB_PATH", CLOCK_HOME / "clock.db")).expanduser()

# =============================================================================
# RECORDS
# =============================================================================

DEFAULT_CATEGORY = "default"

# Format of the `time` column; SQLite's datetime() produces exactly this
TIME_FORMAT = "%Y-%m-%d %H:%M:%S"

# =============================================================================
# LOG LISTING
# =============================================================================

DEFAULT_LOG_COUNT = env_int("CLOCK_LOG_COUNT", 10)
LOG_HEADERS = ["ID", "Action", "Category", "Time"]

# =============================================================================
# LOGGING
# =============================================================================

LOG_LEVEL = os.environ.get("CLOCK_LOG_LEVEL", "WARNING").upper()
LOG_FORMAT = "%(levelname)s %(name)s: %(message)s"
