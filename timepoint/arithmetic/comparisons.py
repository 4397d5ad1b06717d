"""Differences and unit-granular comparisons between Time values.

This module provides the canonical implementations of ``diff``,
``is_same`` and ``is_before``; the ``Time`` methods delegate here.

Comparison Rules:
    - Day, month and year comparisons first floor both values with
      ``start_of(DAY)``, so the configured day-start hour decides which
      calendar day a value belongs to.
    - ``is_same`` and ``is_before`` compare calendar fields, year first,
      down to the requested unit. With no unit they compare the stored
      wall-clock milliseconds.
    - ``diff`` works on true instants for fixed units and on calendar
      months for years and months.
    - Invalid operands make comparisons False and ``diff`` NaN.
"""

from __future__ import annotations

import logging
import math
from typing import TYPE_CHECKING, Union

from timepoint._internal.constants import MS_PER_MINUTE
from timepoint.arithmetic.ops import add, start_of
from timepoint.units.timeunit import TimeUnit

if TYPE_CHECKING:
    from timepoint.core.time import Time

logger = logging.getLogger(__name__)

UnitLike = Union[TimeUnit, str]

_CALENDAR_UNITS = (TimeUnit.YEAR, TimeUnit.MONTH, TimeUnit.DAY)


def _both_valid(left: Time, right: object) -> bool:
    from timepoint.core.time import Time

    return isinstance(right, Time) and left.is_valid and right.is_valid


def month_diff(left: Time, right: Time) -> float:
    """Return the number of months from ``right`` to ``left``.

    The whole-month delta comes from the calendar year and month fields.
    The remainder is interpolated against the neighbouring whole-month
    anchor that brackets ``right``, so month length is accounted for.
    At the edges of the representable range, where that neighbour does
    not exist, the month on the other side of the anchor is used.

    Returns:
        The month count, or NaN if either value is invalid.

    Examples:
        >>> from timepoint import Time
        >>> month_diff(Time("2016-01-01"), Time("2015-07-01"))
        6.0
    """
    if not _both_valid(left, right):
        return math.nan

    whole = (right.year - left.year) * 12 + (right.month - left.month)
    anchor = add(left, whole, TimeUnit.MONTH)
    if not anchor.is_valid:
        return math.nan

    offset = right._millis - anchor._millis
    step = -1 if offset < 0 else 1
    neighbour = add(left, whole + step, TimeUnit.MONTH)
    if not neighbour.is_valid:
        neighbour = add(left, whole - step, TimeUnit.MONTH)
    if not neighbour.is_valid:
        return math.nan

    span = abs(neighbour._millis - anchor._millis)
    return -(whole + offset / span)


def diff(
    left: Time,
    right: Time,
    unit: UnitLike | None = None,
    as_float: bool = False,
) -> float:
    """Return ``left - right`` measured in ``unit``.

    Args:
        left: The value to measure from.
        right: The value to measure to.
        unit: A TimeUnit or alias; milliseconds when None.
        as_float: Return the exact fraction instead of truncating
            toward zero.

    Returns:
        The difference, or NaN if either value is invalid.

    Calculation:
        - YEAR/MONTH: ``month_diff``; years are months / 12.
        - DAY: both values floored with ``start_of(DAY)`` unless
          ``as_float``; the offset difference is folded back in so the
          result counts recorded wall-clock days.
        - HOUR and finer: true-instant delta / unit size.

    Examples:
        >>> from timepoint import Time
        >>> diff(Time("2016-01-01T00:00"), Time("2015-12-31T06:00"), "day", as_float=True)
        0.75
        >>> diff(Time("2016-01-01"), Time("2015-07-01"), "year", as_float=True)
        0.5
    """
    if not _both_valid(left, right):
        return math.nan

    time_unit = TimeUnit.parse(unit) if unit is not None else TimeUnit.MILLISECOND
    if time_unit is None:
        logger.debug(f"Unknown unit {unit!r}, measuring milliseconds")
        time_unit = TimeUnit.MILLISECOND

    if time_unit in (TimeUnit.YEAR, TimeUnit.MONTH):
        result = month_diff(left, right)
        if time_unit is TimeUnit.YEAR:
            result /= 12
    else:
        if time_unit is TimeUnit.DAY and not as_float:
            left = start_of(left, TimeUnit.DAY)
            right = start_of(right, TimeUnit.DAY)

        delta = left.timestamp_ms - right.timestamp_ms
        if time_unit is TimeUnit.DAY:
            delta += MS_PER_MINUTE * (left.offset_minutes - right.offset_minutes)
        result = delta / time_unit.millis

    if as_float or math.isnan(result):
        return result
    # int() truncates toward zero
    return int(result)


def _granular_fields(
    left: Time, right: Time, time_unit: TimeUnit
) -> tuple[tuple[int, ...], tuple[int, ...]]:
    if time_unit in _CALENDAR_UNITS:
        left = start_of(left, TimeUnit.DAY)
        right = start_of(right, TimeUnit.DAY)
    depth = time_unit.depth
    return left._fields[:depth], right._fields[:depth]


def is_same(left: Time, right: Time, unit: UnitLike | None = None) -> bool:
    """Return True if both values fall in the same ``unit``.

    Args:
        left: First value.
        right: Second value.
        unit: A TimeUnit or alias; exact match when None.

    Returns:
        True if the calendar fields down to ``unit`` are equal. False if
        either value is invalid or the unit is unknown.

    Examples:
        >>> from timepoint import Time
        >>> is_same(Time("2016-01-01T10:00"), Time("2016-01-01T23:00"), "day")
        True
    """
    if not _both_valid(left, right):
        return False

    time_unit = TimeUnit.parse(unit)
    if time_unit is None and unit is not None:
        logger.debug(f"Unknown unit {unit!r} in is_same")
        return False
    if time_unit is None or time_unit is TimeUnit.MILLISECOND:
        return left._millis == right._millis

    left_fields, right_fields = _granular_fields(left, right, time_unit)
    return left_fields == right_fields


def is_before(left: Time, right: Time, unit: UnitLike | None = None) -> bool:
    """Return True if ``right`` lies before ``left`` at ``unit`` granularity.

    Fields are compared year first, stopping at the first difference,
    after the same day flooring ``is_same`` applies. Values that are
    the same at ``unit`` are never before one another.

    Args:
        left: The reference value.
        right: The value tested for lying earlier.
        unit: A TimeUnit or alias; exact comparison when None.

    Returns:
        True if ``right`` is earlier than ``left`` at ``unit``. False if
        either value is invalid or the unit is unknown.

    Examples:
        >>> from timepoint import Time
        >>> t = Time("2016-01-01T12:00")
        >>> is_before(add(t, 1, "day"), t, "day")
        True
        >>> is_before(t, add(t, 1, "day"), "day")
        False
    """
    if not _both_valid(left, right):
        return False

    time_unit = TimeUnit.parse(unit)
    if time_unit is None and unit is not None:
        logger.debug(f"Unknown unit {unit!r} in is_before")
        return False
    if time_unit is None or time_unit is TimeUnit.MILLISECOND:
        return left._millis > right._millis

    left_fields, right_fields = _granular_fields(left, right, time_unit)
    return left_fields > right_fields


__all__ = ["diff", "month_diff", "is_same", "is_before"]
