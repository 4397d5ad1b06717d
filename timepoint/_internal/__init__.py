"""Internal utilities for Timepoint.

This module contains private implementation details:
    - Constants, length guards and sentinel strings
    - Proleptic Gregorian field composition
    - Argument validation

Note: This module is not part of the public API.
"""

from __future__ import annotations

from timepoint._internal.validation import (
    coerce_int,
    validate_day,
    validate_field,
    validate_hour,
    validate_month,
)

__all__: list[str] = [
    "coerce_int",
    "validate_day",
    "validate_field",
    "validate_hour",
    "validate_month",
]
