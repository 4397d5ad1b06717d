"""Calendar utilities for Timepoint.

This module provides internal functions for proleptic Gregorian
calendar calculations: leap years, month lengths, and the conversion
between calendar fields and a millisecond count.

Day 0 = 1970-01-01. Field composition follows UTC semantics only and
normalizes overflow in every field (month 13 rolls into the next year,
day 0 is the last day of the previous month, hour -1 is 23:00 of the
previous day), so arithmetic can bump a single field and compose.

This module is not part of the public API.
"""

from __future__ import annotations

from timepoint._internal.constants import (
    DAYS_IN_MONTH,
    MS_PER_DAY,
    MS_PER_HOUR,
    MS_PER_MINUTE,
    MS_PER_SECOND,
)

# Ordinal (days since 0001-01-01 = 1) of 1970-01-01
_EPOCH_ORDINAL = 719_163

# Days before each month (cumulative), for non-leap years
# Index 0 is unused, months are 1-indexed
_DAYS_BEFORE_MONTH = (0, 0, 31, 59, 90, 120, 151, 181, 212, 243, 273, 304, 334)


def is_leap_year(year: int) -> bool:
    """Check if a year is a leap year in the proleptic Gregorian calendar.

    Args:
        year: The year to check (can be zero or negative).

    Returns:
        True if the year is a leap year.

    Examples:
        >>> is_leap_year(2000)
        True
        >>> is_leap_year(1900)
        False
        >>> is_leap_year(2016)
        True
    """
    return year % 4 == 0 and (year % 100 != 0 or year % 400 == 0)


def days_in_month(year: int, month: int) -> int:
    """Return the number of days in a given month.

    Args:
        year: The year (needed for February in leap years).
        month: The month (1-12).

    Returns:
        Number of days in the month.

    Raises:
        ValueError: If month is not in 1-12.
    """
    if month < 1 or month > 12:
        raise ValueError(f"month must be 1-12, got {month}")

    if month == 2 and is_leap_year(year):
        return 29
    return DAYS_IN_MONTH[month]


def days_from_civil(year: int, month: int, day: int) -> int:
    """Convert a calendar date to days since 1970-01-01.

    Args:
        year: The year (astronomical, can be 0 or negative).
        month: The month (1-12).
        day: The day of the month; values past the month end roll over.

    Returns:
        Day number, negative before the epoch.

    Examples:
        >>> days_from_civil(1970, 1, 1)
        0
        >>> days_from_civil(2016, 1, 1)
        16801
    """
    y = year - 1
    # Floor division keeps this exact for years before 1
    days_before_year = y * 365 + y // 4 - y // 100 + y // 400
    days_before_month = _DAYS_BEFORE_MONTH[month]
    if month > 2 and is_leap_year(year):
        days_before_month += 1
    return days_before_year + days_before_month + day - _EPOCH_ORDINAL


def civil_from_days(days: int) -> tuple[int, int, int]:
    """Convert days since 1970-01-01 to a calendar date.

    Uses 400-year eras shifted to start on March 1, so the leap day is
    the last day of each computed year.

    Args:
        days: Day number relative to 1970-01-01.

    Returns:
        Tuple of (year, month, day).

    Examples:
        >>> civil_from_days(0)
        (1970, 1, 1)
        >>> civil_from_days(16801)
        (2016, 1, 1)
    """
    z = days + 719_468
    era = z // 146_097
    doe = z - era * 146_097
    yoe = (doe - doe // 1460 + doe // 36_524 - doe // 146_096) // 365
    doy = doe - (365 * yoe + yoe // 4 - yoe // 100)
    mp = (5 * doy + 2) // 153
    day = doy - (153 * mp + 2) // 5 + 1
    month = mp + 3 if mp < 10 else mp - 9
    year = yoe + era * 400 + (1 if month <= 2 else 0)
    return (year, month, day)


def weekday_from_days(days: int) -> int:
    """Return the day of week for a day number (Sunday=0, Saturday=6).

    1970-01-01 was a Thursday.
    """
    return (days + 4) % 7


def compose_millis(
    year: int,
    month: int,
    day: int,
    hour: int = 0,
    minute: int = 0,
    second: int = 0,
    millisecond: int = 0,
) -> int:
    """Compose calendar fields into milliseconds since 1970-01-01T00:00.

    Every field may lie outside its normal range; the excess carries
    into the next coarser field.

    Args:
        year: The year.
        month: The month, 1-based; 0 and 13 are December of the previous
            year and January of the next.
        day: The day of the month, 1-based.
        hour: Hours.
        minute: Minutes.
        second: Seconds.
        millisecond: Milliseconds.

    Returns:
        The composed millisecond count.

    Examples:
        >>> compose_millis(2016, 1, 1)
        1451606400000
        >>> compose_millis(2015, 13, 1) == compose_millis(2016, 1, 1)
        True
    """
    year += (month - 1) // 12
    month = (month - 1) % 12 + 1
    days = days_from_civil(year, month, 1) + day - 1
    return (
        days * MS_PER_DAY
        + hour * MS_PER_HOUR
        + minute * MS_PER_MINUTE
        + second * MS_PER_SECOND
        + millisecond
    )


def decompose_millis(millis: int) -> tuple[int, int, int, int, int, int, int, int]:
    """Split a millisecond count into calendar fields.

    Args:
        millis: Milliseconds since 1970-01-01T00:00.

    Returns:
        Tuple of (year, month, day, hour, minute, second, millisecond,
        weekday), with month 1-based and weekday Sunday=0.
    """
    days, rem = divmod(millis, MS_PER_DAY)
    year, month, day = civil_from_days(days)
    hour, rem = divmod(rem, MS_PER_HOUR)
    minute, rem = divmod(rem, MS_PER_MINUTE)
    second, millisecond = divmod(rem, MS_PER_SECOND)
    return (
        year,
        month,
        day,
        hour,
        minute,
        second,
        millisecond,
        weekday_from_days(days),
    )


__all__ = [
    "is_leap_year",
    "days_in_month",
    "days_from_civil",
    "civil_from_days",
    "weekday_from_days",
    "compose_millis",
    "decompose_millis",
]
