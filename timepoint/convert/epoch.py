"""Epoch conversion utilities for Time values.

Functions:
    to_unix_millis: Convert a Time to Unix milliseconds.
    from_unix_millis: Create a Time from Unix milliseconds.
    to_unix_seconds: Convert a Time to whole Unix seconds.
    from_unix_seconds: Create a Time from Unix seconds.

Conversions use the true instant: the wall-clock fields minus the
display offset. The Unix epoch is 1970-01-01T00:00:00+00:00.

Examples:
    >>> from timepoint import Time
    >>> to_unix_millis(Time("1970-01-01T01:00:00+01:00"))
    0
    >>> from_unix_seconds(0, offset_minutes=-60).time_string
    '1969-12-31T23:00:00.000-01:00'
"""

from __future__ import annotations

import math
from typing import TYPE_CHECKING

from timepoint._internal.constants import MS_PER_SECOND
from timepoint._internal.validation import coerce_int
from timepoint.errors import ValidationError

if TYPE_CHECKING:
    from timepoint.config import TimeConfig
    from timepoint.core.time import Time
    from timepoint.locale import Locale


def to_unix_millis(value: Time) -> float:
    """Return the Unix timestamp in milliseconds; NaN if invalid."""
    return value.timestamp_ms


def from_unix_millis(
    millis: int,
    *,
    offset_minutes: int = 0,
    locale: Locale | None = None,
    config: TimeConfig | None = None,
) -> Time:
    """Create a Time from Unix milliseconds, displayed at ``offset_minutes``."""
    from timepoint.core.time import Time

    return Time.from_unix_millis(
        millis, offset_minutes=offset_minutes, locale=locale, config=config
    )


def to_unix_seconds(value: Time) -> float:
    """Return the Unix timestamp in whole seconds, floored; NaN if invalid.

    Examples:
        >>> from timepoint import Time
        >>> to_unix_seconds(Time("1969-12-31T23:59:59.500"))
        -1
    """
    millis = value.timestamp_ms
    if math.isnan(millis):
        return millis
    return millis // MS_PER_SECOND


def from_unix_seconds(
    seconds: int,
    *,
    offset_minutes: int = 0,
    locale: Locale | None = None,
    config: TimeConfig | None = None,
) -> Time:
    """Create a Time from Unix seconds, displayed at ``offset_minutes``."""
    from timepoint.core.time import Time

    try:
        millis = coerce_int("seconds", seconds) * MS_PER_SECOND
    except ValidationError:
        return Time.invalid(locale=locale, config=config)
    return Time.from_unix_millis(
        millis, offset_minutes=offset_minutes, locale=locale, config=config
    )


__all__ = [
    "to_unix_millis",
    "from_unix_millis",
    "to_unix_seconds",
    "from_unix_seconds",
]
