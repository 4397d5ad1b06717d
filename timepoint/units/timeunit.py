"""TimeUnit enumeration for the units arithmetic operates in.

This module provides the TimeUnit enum, the alias table that normalizes
the accepted unit spellings, and the Field flags used to describe which
calendar fields a flooring operation clears.
"""

from __future__ import annotations

from enum import Enum, Flag

from timepoint._internal.constants import (
    MS_PER_DAY,
    MS_PER_HOUR,
    MS_PER_MINUTE,
    MS_PER_SECOND,
)


class TimeUnit(Enum):
    """Units for add/subtract/start_of/end_of/diff and comparisons.

    Values are the canonical one-letter tags. Use ``TimeUnit.parse`` to
    normalize any accepted spelling ("years", "y", "ms", ...).

    Note:
        YEAR and MONTH do not have fixed millisecond sizes. The
        ``millis`` property returns None for these units.

    Examples:
        >>> TimeUnit.parse("hours")
        <TimeUnit.HOUR: 'H'>

        >>> TimeUnit.parse("fortnight") is None
        True

        >>> TimeUnit.MINUTE.millis
        60000
    """

    YEAR = "Y"
    MONTH = "M"
    DAY = "D"
    HOUR = "H"
    MINUTE = "m"
    SECOND = "s"
    MILLISECOND = "S"

    @classmethod
    def parse(cls, unit: TimeUnit | str | None) -> TimeUnit | None:
        """Normalize a unit spelling to a TimeUnit.

        Args:
            unit: A TimeUnit, one of its aliases, or None.

        Returns:
            The matching TimeUnit, or None if unit is None or unknown.
        """
        if unit is None or isinstance(unit, TimeUnit):
            return unit
        if not isinstance(unit, str):
            return None
        return _ALIASES.get(unit)

    @property
    def millis(self) -> int | None:
        """Return the fixed size of one unit in milliseconds.

        Returns:
            Milliseconds per unit, or None for YEAR and MONTH.
        """
        return _MILLIS[self]

    @property
    def depth(self) -> int:
        """Return how many calendar fields (year first) this unit spans.

        YEAR is 1, MONTH is 2 and so on down to MILLISECOND at 7.
        """
        return _DEPTH[self]


class Field(Flag):
    """Calendar fields below the year, as clearable flags."""

    MONTH = 1
    DAY = 2
    HOUR = 4
    MINUTE = 8
    SECOND = 16
    MILLISECOND = 32


_NONE = Field(0)

# Fields cleared when flooring to each unit
CLEAR_FIELDS: dict[TimeUnit, Field] = {
    TimeUnit.YEAR: Field.MONTH
    | Field.DAY
    | Field.HOUR
    | Field.MINUTE
    | Field.SECOND
    | Field.MILLISECOND,
    TimeUnit.MONTH: Field.DAY
    | Field.HOUR
    | Field.MINUTE
    | Field.SECOND
    | Field.MILLISECOND,
    TimeUnit.DAY: Field.HOUR | Field.MINUTE | Field.SECOND | Field.MILLISECOND,
    TimeUnit.HOUR: Field.MINUTE | Field.SECOND | Field.MILLISECOND,
    TimeUnit.MINUTE: Field.SECOND | Field.MILLISECOND,
    TimeUnit.SECOND: Field.MILLISECOND,
    TimeUnit.MILLISECOND: _NONE,
}

_ALIASES: dict[str, TimeUnit] = {
    "year": TimeUnit.YEAR,
    "years": TimeUnit.YEAR,
    "Y": TimeUnit.YEAR,
    "y": TimeUnit.YEAR,
    "month": TimeUnit.MONTH,
    "months": TimeUnit.MONTH,
    "M": TimeUnit.MONTH,
    "day": TimeUnit.DAY,
    "days": TimeUnit.DAY,
    "date": TimeUnit.DAY,
    "dates": TimeUnit.DAY,
    "D": TimeUnit.DAY,
    "d": TimeUnit.DAY,
    "hour": TimeUnit.HOUR,
    "hours": TimeUnit.HOUR,
    "H": TimeUnit.HOUR,
    "h": TimeUnit.HOUR,
    "minute": TimeUnit.MINUTE,
    "minutes": TimeUnit.MINUTE,
    "m": TimeUnit.MINUTE,
    "second": TimeUnit.SECOND,
    "seconds": TimeUnit.SECOND,
    "s": TimeUnit.SECOND,
    "millisecond": TimeUnit.MILLISECOND,
    "milliseconds": TimeUnit.MILLISECOND,
    "ms": TimeUnit.MILLISECOND,
    "S": TimeUnit.MILLISECOND,
}

_MILLIS: dict[TimeUnit, int | None] = {
    TimeUnit.YEAR: None,  # Variable length (leap years)
    TimeUnit.MONTH: None,  # Variable length
    TimeUnit.DAY: MS_PER_DAY,
    TimeUnit.HOUR: MS_PER_HOUR,
    TimeUnit.MINUTE: MS_PER_MINUTE,
    TimeUnit.SECOND: MS_PER_SECOND,
    TimeUnit.MILLISECOND: 1,
}

_DEPTH: dict[TimeUnit, int] = {
    TimeUnit.YEAR: 1,
    TimeUnit.MONTH: 2,
    TimeUnit.DAY: 3,
    TimeUnit.HOUR: 4,
    TimeUnit.MINUTE: 5,
    TimeUnit.SECOND: 6,
    TimeUnit.MILLISECOND: 7,
}


__all__ = ["TimeUnit", "Field", "CLEAR_FIELDS"]
