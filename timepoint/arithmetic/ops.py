"""Unit arithmetic on Time values.

This module provides the canonical implementations of the arithmetic
operations; the ``Time`` methods delegate to these functions.

Supported operations:
    - add: Add an integral amount of a unit
    - subtract: Subtract an integral amount of a unit
    - start_of: Floor to the start of a unit
    - end_of: Ceil to the last millisecond of a unit

Calendar units (year, month, day) bump a single calendar field and let
field composition normalize overflow, so 2016-01-31 plus one month is
2016-03-02. Fixed units (hour and below) add milliseconds.

Invalid values pass through unchanged. An unknown unit returns a clone.
A non-integral amount returns an invalid value.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Union

from timepoint._internal.calendar import compose_millis
from timepoint._internal.validation import coerce_int
from timepoint.errors import ValidationError
from timepoint.units.timeunit import CLEAR_FIELDS, Field, TimeUnit

if TYPE_CHECKING:
    from timepoint.core.time import Time

logger = logging.getLogger(__name__)

UnitLike = Union[TimeUnit, str]


def add(value: Time, amount: int, unit: UnitLike) -> Time:
    """Add ``amount`` of ``unit`` to ``value``.

    Args:
        value: The Time to shift.
        amount: Integral number of units; may be negative.
        unit: A TimeUnit or one of its aliases.

    Returns:
        A new Time, or ``value`` itself if it is invalid.

    Examples:
        >>> from timepoint import Time
        >>> add(Time("2015-12-31T23:59:59"), 1, "second").time_string
        '2016-01-01T00:00:00.000+00:00'
        >>> add(Time("2015-12-31T23:15:00"), 1, "M").time_string
        '2016-01-31T23:15:00.000+00:00'
    """
    return _shift(value, amount, unit, 1)


def subtract(value: Time, amount: int, unit: UnitLike) -> Time:
    """Subtract ``amount`` of ``unit`` from ``value``.

    Equivalent to ``add(value, -amount, unit)``.
    """
    return _shift(value, amount, unit, -1)


def _shift(value: Time, amount: int, unit: UnitLike, sign: int) -> Time:
    if not value.is_valid:
        return value

    time_unit = TimeUnit.parse(unit)
    if time_unit is None:
        logger.debug(f"Unknown unit {unit!r}, value unchanged")
        return value.clone()

    try:
        count = sign * coerce_int("amount", amount)
    except ValidationError as exc:
        logger.debug(f"Invalid amount: {exc}")
        return value._invalidate()

    return value._with_millis(_shifted_millis(value, count, time_unit))


def _shifted_millis(value: Time, count: int, time_unit: TimeUnit) -> int:
    """Return the stored millis of a valid ``value`` moved by ``count`` units."""
    if time_unit.millis is not None:
        return value._millis + count * time_unit.millis

    year, month, day, hour, minute, second, millisecond = value._fields[:7]
    if time_unit is TimeUnit.YEAR:
        year += count
    elif time_unit is TimeUnit.MONTH:
        month += count
    return compose_millis(year, month, day, hour, minute, second, millisecond)


def start_of(value: Time, unit: UnitLike) -> Time:
    """Floor ``value`` to the start of ``unit``.

    Every field finer than ``unit`` is reset. Flooring to a day uses the
    value's ``config.day_starts_at``: a time earlier than the day-start
    hour belongs to the previous day.

    Args:
        value: The Time to floor.
        unit: A TimeUnit or one of its aliases.

    Returns:
        A new Time, or ``value`` itself if it is invalid.

    Examples:
        >>> from timepoint import Time, TimeConfig
        >>> start_of(Time("2015-12-31T23:59:59"), "year").time_string
        '2015-01-01T00:00:00.000+00:00'
        >>> late = Time("2015-12-31T05:00:00", config=TimeConfig(day_starts_at=6))
        >>> start_of(late, "day").time_string
        '2015-12-30T06:00:00.000+00:00'
    """
    if not value.is_valid:
        return value

    time_unit = TimeUnit.parse(unit)
    if time_unit is None:
        logger.debug(f"Unknown unit {unit!r}, value unchanged")
        return value.clone()

    clear = CLEAR_FIELDS[time_unit]
    year, month, day, hour, minute, second, millisecond = value._fields[:7]

    if Field.MONTH in clear:
        month = 1
    if Field.DAY in clear:
        day = 1
    if Field.HOUR in clear:
        if time_unit is TimeUnit.DAY:
            day_start = value.config.day_starts_at
            if hour < day_start:
                day -= 1
            hour = day_start
        else:
            hour = 0
    if Field.MINUTE in clear:
        minute = 0
    if Field.SECOND in clear:
        second = 0
    if Field.MILLISECOND in clear:
        millisecond = 0

    return value._with_millis(
        compose_millis(year, month, day, hour, minute, second, millisecond)
    )


def end_of(value: Time, unit: UnitLike = TimeUnit.MILLISECOND) -> Time:
    """Return the last millisecond of the ``unit`` containing ``value``.

    Computed as ``start_of(unit)`` plus one unit minus one millisecond.
    Millisecond precision returns a clone.

    Examples:
        >>> from timepoint import Time
        >>> end_of(Time("2016-01-01T01:00:01.123+01:21"), "day").time_string
        '2016-01-01T23:59:59.999+01:21'
    """
    if not value.is_valid:
        return value

    time_unit = TimeUnit.parse(unit)
    if time_unit is None:
        logger.debug(f"Unknown unit {unit!r}, value unchanged")
        return value.clone()
    if time_unit is TimeUnit.MILLISECOND:
        return value.clone()

    floored = start_of(value, time_unit)
    if not floored.is_valid:
        return floored
    # The next unit start may lie past 9999; only the result is range checked
    return floored._with_millis(_shifted_millis(floored, 1, time_unit) - 1)


__all__ = ["add", "subtract", "start_of", "end_of"]
