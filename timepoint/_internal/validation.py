"""Validation utilities for Timepoint.

This module provides the argument checks shared by field setters,
offset conversion and configuration. Every check raises
ValidationError; callers on the value API turn that into an invalid
instance.

This module is not part of the public API.
"""

from __future__ import annotations

import math

from timepoint.errors import ValidationError


def coerce_int(name: str, value: object) -> int:
    """Return ``value`` as an int, accepting only integral numbers.

    Floats with an integral value (``3.0``) are accepted; booleans,
    NaN, infinities, fractional floats and non-numbers are not.

    Args:
        name: Argument name used in the error message.
        value: The value to coerce.

    Returns:
        The value as an int.

    Raises:
        ValidationError: If the value is not an integral number.

    Examples:
        >>> coerce_int("hour", 5.0)
        5
        >>> coerce_int("hour", "5")
        Traceback (most recent call last):
        ...
        timepoint.errors.ValidationError: hour must be an integer, got str
    """
    if isinstance(value, bool):
        raise ValidationError(f"{name} must be an integer, got bool")
    if isinstance(value, int):
        return value
    if isinstance(value, float):
        if not math.isfinite(value) or not value.is_integer():
            raise ValidationError(f"{name} must be an integer, got {value!r}")
        return int(value)
    raise ValidationError(f"{name} must be an integer, got {type(value).__name__}")


def validate_field(name: str, value: object, low: int, high: int) -> int:
    """Coerce ``value`` and check it lies within ``low``-``high`` inclusive.

    Args:
        name: Argument name used in the error message.
        value: The value to validate.
        low: Smallest accepted value.
        high: Largest accepted value.

    Returns:
        The validated value as an int.

    Raises:
        ValidationError: If the value is not integral or out of range.
    """
    number = coerce_int(name, value)
    if number < low or number > high:
        raise ValidationError(
            f"{name} must be between {low} and {high}, got {number}"
        )
    return number


def validate_month(month: object) -> int:
    """Validate that a month is within 1-12.

    Raises:
        ValidationError: If month is outside 1-12.
    """
    return validate_field("month", month, 1, 12)


def validate_day(year: int, month: int, day: object) -> int:
    """Validate that a day is valid for the given year and month.

    Args:
        year: The year.
        month: The month (1-12).
        day: The day to validate.

    Returns:
        The validated day.

    Raises:
        ValidationError: If day is invalid for the month.
    """
    from timepoint._internal.calendar import days_in_month

    max_day = days_in_month(year, month)
    number = coerce_int("day", day)
    if number < 1 or number > max_day:
        raise ValidationError(
            f"day must be between 1 and {max_day} for {year}-{month:02d}, got {number}"
        )
    return number


def validate_hour(name: str, hour: object) -> int:
    """Validate an hour-of-day value (0-23)."""
    return validate_field(name, hour, 0, 23)


__all__ = [
    "coerce_int",
    "validate_field",
    "validate_month",
    "validate_day",
    "validate_hour",
]
