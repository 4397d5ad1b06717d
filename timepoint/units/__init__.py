"""Units for Timepoint.

This module provides:
    - TimeUnit: Units for arithmetic and comparison (YEAR ... MILLISECOND)
    - UtcOffset: Fixed UTC offset in minutes
"""

from __future__ import annotations

from timepoint.units.offset import UtcOffset
from timepoint.units.timeunit import TimeUnit

__all__: list[str] = [
    "TimeUnit",
    "UtcOffset",
]
