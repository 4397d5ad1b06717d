"""UTC offset representation.

This module provides the UtcOffset class: a fixed, signed minute count
with its ``+HH:MM`` display form. There is no time zone database and no
DST; an offset is display metadata attached to a point in time.
"""

from __future__ import annotations

import re
from typing import ClassVar

from timepoint._internal.constants import MINUTES_PER_DAY, MINUTES_PER_HOUR
from timepoint._internal.validation import coerce_int
from timepoint.errors import OffsetError, ValidationError

_OFFSET_RE = re.compile(r"^([+-])(\d{2}):?(\d{2})\Z", re.ASCII)


class UtcOffset:
    """A UTC offset in whole minutes.

    Positive values are east of UTC (ahead in time), negative values
    are west of UTC. The absolute value must stay below 24 hours.

    Attributes:
        minutes: The signed offset in minutes.

    Examples:
        >>> UtcOffset.from_string("+01:00").minutes
        60

        >>> str(UtcOffset.from_minutes(-90))
        '-01:30'

        >>> UtcOffset.from_string("Z") == UtcOffset.utc()
        True
    """

    __slots__ = ("_minutes",)

    _utc_instance: ClassVar[UtcOffset | None] = None

    def __init__(self, minutes: int) -> None:
        """Create a UtcOffset.

        Args:
            minutes: Signed offset in minutes.

        Raises:
            OffsetError: If minutes is not integral or 24 hours or more.
        """
        try:
            value = coerce_int("offset", minutes)
        except ValidationError as exc:
            raise OffsetError(str(exc)) from exc

        if abs(value) >= MINUTES_PER_DAY:
            raise OffsetError(
                f"offset {value} is outside valid range "
                f"(-{MINUTES_PER_DAY}, {MINUTES_PER_DAY}) minutes"
            )

        self._minutes: int = value

    @classmethod
    def utc(cls) -> UtcOffset:
        """Return the zero offset.

        All calls return the same instance.
        """
        if cls._utc_instance is None:
            cls._utc_instance = cls(0)
        return cls._utc_instance

    @classmethod
    def from_minutes(cls, minutes: int) -> UtcOffset:
        """Create a UtcOffset from a signed minute count.

        Raises:
            OffsetError: If the value is not a valid offset.
        """
        if minutes == 0 and not isinstance(minutes, bool):
            return cls.utc()
        return cls(minutes)

    @classmethod
    def from_string(cls, s: str) -> UtcOffset:
        """Parse an offset suffix.

        Supported formats:
            - "Z": UTC
            - "+HH:MM" or "-HH:MM"
            - "+HHMM" or "-HHMM"

        Args:
            s: Offset text.

        Returns:
            A UtcOffset instance.

        Raises:
            OffsetError: If the text cannot be parsed or is out of range.

        Examples:
            >>> UtcOffset.from_string("-0230").minutes
            -150
        """
        if not isinstance(s, str):
            raise OffsetError(f"Expected string, got {type(s).__name__}")

        if s == "Z":
            return cls.utc()

        match = _OFFSET_RE.match(s)
        if not match:
            raise OffsetError(f"Cannot parse offset string: {s!r}")

        sign_str, hours_str, minutes_str = match.groups()
        hours = int(hours_str)
        minutes = int(minutes_str)

        if hours > 23:
            raise OffsetError(f"Offset hours out of range: {s!r}")
        if minutes > 59:
            raise OffsetError(f"Offset minutes out of range: {s!r}")

        sign = 1 if sign_str == "+" else -1
        return cls.from_minutes(sign * (hours * MINUTES_PER_HOUR + minutes))

    @property
    def minutes(self) -> int:
        """Return the signed offset in minutes."""
        return self._minutes

    @property
    def is_utc(self) -> bool:
        """Return True if this is the zero offset."""
        return self._minutes == 0

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, UtcOffset):
            return NotImplemented
        return self._minutes == other._minutes

    def __hash__(self) -> int:
        return hash(self._minutes)

    def __repr__(self) -> str:
        return f"UtcOffset(minutes={self._minutes})"

    def __str__(self) -> str:
        """Return the fixed-width display form, e.g. "+00:00" or "-05:30"."""
        hours, minutes = divmod(abs(self._minutes), MINUTES_PER_HOUR)
        sign = "-" if self._minutes < 0 else "+"
        return f"{sign}{hours:02d}:{minutes:02d}"


__all__ = ["UtcOffset"]
