"""Locale data consumed by the formatter.

A Locale is a read-only, fixed-shape record. Every field is optional;
the formatter checks presence per token and emits ``[missing locale]``
for anything absent instead of failing.
"""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass
from typing import Any

# Keys of the composite format table
FORMAT_KEYS: tuple[str, ...] = ("LT", "LTS", "L", "LL", "LLL", "LLLL")

# Keys of the day-slot table
DAY_SLOT_KEYS: tuple[str, ...] = ("night", "morning", "afternoon", "evening")


@dataclass(frozen=True)
class Locale:
    """Names, composite masks and relative-day words for one language.

    Attributes:
        days: Full weekday names, index 0 = Sunday.
        days_short: Short weekday names, index 0 = Sunday.
        months: Full month names, index 0 = January.
        months_short: Short month names, index 0 = January.
        formats: Composite masks keyed by ``LT``, ``LTS``, ``L``, ``LL``,
            ``LLL`` and ``LLLL``.
        day_slots: Period labels keyed by ``night``, ``morning``,
            ``afternoon`` and ``evening``.
        today: Word for a "today" relative-day hint.
        tomorrow: Word for a "tomorrow" relative-day hint.
        tonight: Word for a "today" hint falling in the night window.
    """

    days: tuple[str, ...] | None = None
    days_short: tuple[str, ...] | None = None
    months: tuple[str, ...] | None = None
    months_short: tuple[str, ...] | None = None
    formats: Mapping[str, str] | None = None
    day_slots: Mapping[str, str] | None = None
    today: str | None = None
    tomorrow: str | None = None
    tonight: str | None = None

    @classmethod
    def from_mapping(cls, data: Mapping[str, Any]) -> Locale:
        """Build a Locale from its external camelCase shape.

        Reads ``days``, ``daysShort``, ``months``, ``monthsShort``,
        ``format``, ``daySlots``, ``today``, ``tomorrow`` and ``tonight``.
        Missing keys become None.

        Examples:
            >>> Locale.from_mapping({"today": "Today"}).today
            'Today'
        """

        def names(key: str) -> tuple[str, ...] | None:
            value = data.get(key)
            return tuple(value) if value is not None else None

        def table(key: str) -> Mapping[str, str] | None:
            value = data.get(key)
            return dict(value) if value is not None else None

        return cls(
            days=names("days"),
            days_short=names("daysShort"),
            months=names("months"),
            months_short=names("monthsShort"),
            formats=table("format"),
            day_slots=table("daySlots"),
            today=data.get("today"),
            tomorrow=data.get("tomorrow"),
            tonight=data.get("tonight"),
        )

    def relative_day(self, key: str) -> str | None:
        """Return the word for ``today``, ``tomorrow`` or ``tonight``."""
        if key == "today":
            return self.today
        if key == "tomorrow":
            return self.tomorrow
        if key == "tonight":
            return self.tonight
        return None


__all__ = ["Locale", "FORMAT_KEYS", "DAY_SLOT_KEYS"]
