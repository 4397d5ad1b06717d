"""Recognizer for the constrained ISO 8601 text form.

This module turns text into validated calendar fields and formats fields
back into the canonical text.

Accepted grammar (every part after the year is optional and the text may
be truncated from the right, leaving a dangling separator)::

    YYYY[-MM[-DD[THH[:mm[:ss[.SSS]]]]]][Z | +HH:MM | -HH:MM | +HHMM | -HHMM]

Missing month and day default to 1; missing time fields default to 0.
The offset is metadata: the fields are not shifted by it.

Canonical form::

    YYYY-MM-DDTHH:mm:ss.SSS+HH:MM

Examples:
    >>> fields = parse_fields("2016-01-01T10:30+01:00")
    >>> (fields.year, fields.month, fields.hour, fields.offset_minutes)
    (2016, 1, 10, 60)

    >>> format_canonical(2016, 1, 1, 10, 30, 0, 0, 60)
    '2016-01-01T10:30:00.000+01:00'
"""

from __future__ import annotations

import logging
import re
from dataclasses import dataclass

from timepoint._internal.constants import MAX_INPUT_LENGTH
from timepoint._internal.validation import validate_day, validate_field, validate_month
from timepoint.errors import OffsetError, ParseError, ValidationError
from timepoint.units.offset import UtcOffset

logger = logging.getLogger(__name__)

_PATTERN = re.compile(
    r"""
    ^
    (?P<year>\d{4})
    (?:-(?P<month>\d{1,2})
      (?:-(?P<day>\d{1,2})
        (?:T(?P<hour>\d{1,2})
          (?::(?P<minute>\d{1,2})
            (?::(?P<second>\d{1,2})
              (?:\.(?P<millisecond>\d{3}))?
            )?
          )?
        )?
      )?
    )?
    [-T:]?
    (?P<offset>Z|[+-]\d{2}:?\d{2})?
    \Z
    """,
    re.VERBOSE | re.ASCII,
)


@dataclass(frozen=True)
class ParsedFields:
    """Validated calendar fields recognized from text.

    Attributes:
        year: Four-digit year.
        month: Month, 1-12.
        day: Day of month, valid for the month.
        hour: Hour, 0-23.
        minute: Minute, 0-59.
        second: Second, 0-59.
        millisecond: Millisecond, 0-999.
        offset_minutes: Signed offset in minutes; 0 for ``Z`` or no suffix.
    """

    year: int
    month: int = 1
    day: int = 1
    hour: int = 0
    minute: int = 0
    second: int = 0
    millisecond: int = 0
    offset_minutes: int = 0

    @property
    def offset_string(self) -> str:
        """Return the offset in ``+HH:MM`` form."""
        return str(UtcOffset.from_minutes(self.offset_minutes))


def parse_fields(text: str) -> ParsedFields:
    """Recognize ``text`` as calendar fields plus offset.

    Inputs longer than 30 characters are rejected before any pattern
    matching is attempted.

    Args:
        text: The text to recognize.

    Returns:
        The validated fields.

    Raises:
        ParseError: If the text is not a string, is too long, does not
            match the grammar, or holds an out-of-range field.

    Examples:
        >>> parse_fields("2016").month
        1
        >>> parse_fields("2016-02-30")
        Traceback (most recent call last):
        ...
        timepoint.errors.ParseError: day must be between 1 and 29 for 2016-02, got 30
    """
    if not isinstance(text, str):
        raise ParseError(f"expected str, got {type(text).__name__}")

    if len(text) > MAX_INPUT_LENGTH:
        logger.debug(f"Rejected input of length {len(text)} without matching")
        raise ParseError(
            f"input longer than {MAX_INPUT_LENGTH} characters: {len(text)}"
        )

    match = _PATTERN.match(text)
    if not match:
        logger.debug(f"No match for {text!r}")
        raise ParseError(f"cannot recognize time string: {text!r}")

    groups = match.groupdict()

    def number(name: str) -> int:
        value = groups[name]
        return int(value) if value else 0

    try:
        year = number("year")
        month = validate_month(int(groups["month"]) if groups["month"] else 1)
        day = validate_day(year, month, int(groups["day"]) if groups["day"] else 1)
        hour = validate_field("hour", number("hour"), 0, 23)
        minute = validate_field("minute", number("minute"), 0, 59)
        second = validate_field("second", number("second"), 0, 59)
        offset = UtcOffset.from_string(groups["offset"]) if groups["offset"] else None
    except (ValidationError, OffsetError) as exc:
        logger.debug(f"Out-of-range field in {text!r}: {exc}")
        raise ParseError(str(exc)) from exc

    return ParsedFields(
        year=year,
        month=month,
        day=day,
        hour=hour,
        minute=minute,
        second=second,
        millisecond=number("millisecond"),
        offset_minutes=offset.minutes if offset is not None else 0,
    )


def format_canonical(
    year: int,
    month: int,
    day: int,
    hour: int,
    minute: int,
    second: int,
    millisecond: int,
    offset_minutes: int = 0,
) -> str:
    """Format calendar fields as the canonical text.

    Args:
        year: The year, 0-9999.
        month: Month, 1-12.
        day: Day of month.
        hour: Hour, 0-23.
        minute: Minute, 0-59.
        second: Second, 0-59.
        millisecond: Millisecond, 0-999.
        offset_minutes: Signed offset in minutes.

    Returns:
        Text of the form ``YYYY-MM-DDTHH:mm:ss.SSS+HH:MM``.
    """
    offset = UtcOffset.from_minutes(offset_minutes)
    return (
        f"{year:04d}-{month:02d}-{day:02d}"
        f"T{hour:02d}:{minute:02d}:{second:02d}.{millisecond:03d}{offset}"
    )


__all__ = ["ParsedFields", "parse_fields", "format_canonical"]
