"""Internal constants for Timepoint.

These constants define the limits, sentinels and magic numbers used
throughout the library. This module is not part of the public API.
"""

from __future__ import annotations

# Time unit conversions
MS_PER_SECOND: int = 1_000
MS_PER_MINUTE: int = 60 * MS_PER_SECOND
MS_PER_HOUR: int = 60 * MS_PER_MINUTE
MS_PER_DAY: int = 24 * MS_PER_HOUR  # 86_400_000

MINUTES_PER_HOUR: int = 60
MINUTES_PER_DAY: int = 24 * MINUTES_PER_HOUR

# Representable wall-clock range: years 0000 through 9999, the years the
# canonical text can carry
MIN_TIME_MS: int = -719_528 * MS_PER_DAY  # 0000-01-01T00:00:00.000
MAX_TIME_MS: int = 2_932_897 * MS_PER_DAY - 1  # 9999-12-31T23:59:59.999

# Length guards, checked before any pattern matching
MAX_INPUT_LENGTH: int = 30
MAX_MASK_LENGTH: int = 100

# Sentinel output
INVALID_DATE: str = "Invalid Date"
MISSING_LOCALE: str = "[missing locale]"

# Configuration defaults
DEFAULT_DAY_STARTS_AT: int = 0
DEFAULT_NIGHT_STARTS_AT: int = 18
DEFAULT_PARSE_KEYS: frozenset[str] = frozenset(
    {
        "created",
        "end",
        "from",
        "middle",
        "nominalStart",
        "rise",
        "set",
        "start",
        "times",
        "to",
        "update",
    }
)

# Days in each month (non-leap year)
DAYS_IN_MONTH: tuple[int, ...] = (
    0,   # Placeholder for 1-indexed access
    31,  # January
    28,  # February (non-leap)
    31,  # March
    30,  # April
    31,  # May
    30,  # June
    31,  # July
    31,  # August
    30,  # September
    31,  # October
    30,  # November
    31,  # December
)


__all__ = [
    "MS_PER_SECOND",
    "MS_PER_MINUTE",
    "MS_PER_HOUR",
    "MS_PER_DAY",
    "MINUTES_PER_HOUR",
    "MINUTES_PER_DAY",
    "MIN_TIME_MS",
    "MAX_TIME_MS",
    "MAX_INPUT_LENGTH",
    "MAX_MASK_LENGTH",
    "INVALID_DATE",
    "MISSING_LOCALE",
    "DEFAULT_DAY_STARTS_AT",
    "DEFAULT_NIGHT_STARTS_AT",
    "DEFAULT_PARSE_KEYS",
    "DAYS_IN_MONTH",
]
