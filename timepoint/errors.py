"""Timepoint exception hierarchy.

All Timepoint-specific exceptions inherit from TimepointError.

None of these escape the value API: ``Time`` catches them and turns the
failure into an invalid instance. They are raised by the lower-level
helpers (recognizer, offsets, validation, configuration) that callers
may also use directly.
"""

from __future__ import annotations


class TimepointError(Exception):
    """Base exception for all Timepoint errors."""

    pass


class ValidationError(TimepointError):
    """Invalid input values.

    Raised when a field or configuration value is out of range or of
    the wrong type.

    Examples:
        - Month value outside 1-12
        - Day value outside valid range for month
        - A non-integral hour passed to a setter
        - ``day_starts_at`` outside 0-23
    """

    pass


class ParseError(TimepointError):
    """Failed to parse string representation.

    Raised when a string cannot be recognized as a point in time.

    Examples:
        - Input longer than the recognizer accepts
        - Text not matching ``YYYY[-MM[-DD[THH[:mm[:ss[.SSS]]]]]][offset]``
        - A recognized field outside its valid range
    """

    pass


class OffsetError(TimepointError):
    """Invalid UTC offset.

    Raised when an offset is malformed or out of range.

    Examples:
        - Offset text that is not ``Z`` or ``+HH:MM``
        - An offset of 24 hours or more
    """

    pass


__all__ = [
    "TimepointError",
    "ValidationError",
    "ParseError",
    "OffsetError",
]
