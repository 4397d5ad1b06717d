"""Time class representing a point in time with a display offset.

This module provides the Time class: an immutable value holding
calendar fields (composed with UTC semantics into a millisecond count),
a fixed UTC offset for display and offset-aware diffs, and shared
references to a Locale and a TimeConfig.

Construction never raises. Text that cannot be recognized, or a setter
argument out of range, produces an invalid Time; invalidity carries
through every derived value.
"""

from __future__ import annotations

import datetime as _datetime
import logging
from typing import TYPE_CHECKING, Any, Union

from timepoint._internal.calendar import (
    compose_millis,
    decompose_millis,
    weekday_from_days,
)
from timepoint._internal.constants import (
    INVALID_DATE,
    MAX_TIME_MS,
    MIN_TIME_MS,
    MS_PER_DAY,
    MS_PER_MINUTE,
)
from timepoint._internal.validation import (
    coerce_int,
    validate_day,
    validate_field,
    validate_month,
)
from timepoint.config import DEFAULT_CONFIG, TimeConfig
from timepoint.errors import OffsetError, ParseError, ValidationError
from timepoint.format.recognizer import format_canonical, parse_fields
from timepoint.units.offset import UtcOffset
from timepoint.units.timeunit import TimeUnit

if TYPE_CHECKING:
    from timepoint.locale import Locale

logger = logging.getLogger(__name__)

UnitLike = Union[TimeUnit, str]

# Marks a replace() argument that was not supplied
_UNSET: Any = object()


class Time:
    """A point in time with a fixed UTC offset.

    Time stores the wall-clock fields as a millisecond count composed
    with UTC semantics; the offset is display metadata and is only
    applied by ``to_offset``/``to_utc`` and by ``diff``. All
    operations return new instances.

    Attributes:
        is_valid: False if the value could not be constructed.
        year, month, day, weekday, hour, minute, second, millisecond:
            Calendar fields (month 1-12, weekday 0=Sunday); None when
            invalid.
        offset_minutes: Signed display offset in minutes.
        offset_string: Display offset as ``+HH:MM``.
        time_string: Canonical text, or ``"Invalid Date"``.
        locale: Attached Locale, or None.
        config: Attached TimeConfig.

    Examples:
        >>> t = Time("2016-01-01T00:00:00+01:00")
        >>> t.offset_minutes
        60
        >>> t.time_string
        '2016-01-01T00:00:00.000+01:00'

        >>> Time("2015-12-31T23:59:59").add(1, "second").time_string
        '2016-01-01T00:00:00.000+00:00'

        >>> Time("not a time").is_valid
        False
    """

    __slots__ = ("_millis", "_offset", "_locale", "_config", "_fields", "_time_string")

    def __init__(
        self,
        text: str,
        *,
        locale: Locale | None = None,
        config: TimeConfig | None = None,
    ) -> None:
        """Create a Time by recognizing ``text``.

        Args:
            text: Text of the form ``YYYY[-MM[-DD[THH[:mm[:ss[.SSS]]]]]]``
                with an optional ``Z`` or ``+HH:MM`` suffix.
            locale: Optional Locale for name tokens.
            config: Day boundaries; the default config when None.
        """
        if config is None:
            config = DEFAULT_CONFIG

        try:
            fields = parse_fields(text)
        except ParseError:
            self._init_state(None, UtcOffset.utc(), locale, config)
            return

        millis = compose_millis(
            fields.year,
            fields.month,
            fields.day,
            fields.hour,
            fields.minute,
            fields.second,
            fields.millisecond,
        )
        offset = UtcOffset.from_minutes(fields.offset_minutes)
        self._init_state(millis, offset, locale, config)

    def _init_state(
        self,
        millis: int | None,
        offset: UtcOffset,
        locale: Locale | None,
        config: TimeConfig,
    ) -> None:
        # Years outside 0000-9999 have no canonical text
        if millis is not None and not MIN_TIME_MS <= millis <= MAX_TIME_MS:
            logger.debug(f"Wall clock {millis} ms is outside years 0000-9999")
            millis = None

        self._millis: int | None = millis
        self._offset: UtcOffset = offset
        self._locale: Locale | None = locale
        self._config: TimeConfig = config

        if millis is None:
            self._fields: tuple[int, ...] | None = None
            self._time_string: str = INVALID_DATE
        else:
            self._fields = decompose_millis(millis)
            self._time_string = format_canonical(*self._fields[:7], offset.minutes)

    @classmethod
    def _from_internal(
        cls,
        millis: int | None,
        offset: UtcOffset,
        locale: Locale | None,
        config: TimeConfig,
    ) -> Time:
        """Create a Time from a stored millisecond count.

        This is an internal factory method that bypasses recognition.
        The range check still applies.

        Args:
            millis: Wall-clock milliseconds, or None for an invalid value.
            offset: Display offset.
            locale: Locale reference.
            config: Configuration reference.

        Returns:
            A new Time instance.
        """
        instance = object.__new__(cls)
        instance._init_state(millis, offset, locale, config)
        return instance

    @classmethod
    def invalid(
        cls,
        *,
        locale: Locale | None = None,
        config: TimeConfig | None = None,
    ) -> Time:
        """Return an invalid Time."""
        return cls._from_internal(
            None, UtcOffset.utc(), locale, config if config is not None else DEFAULT_CONFIG
        )

    @classmethod
    def from_fields(
        cls,
        year: int,
        month: int = 1,
        day: int = 1,
        hour: int = 0,
        minute: int = 0,
        second: int = 0,
        millisecond: int = 0,
        *,
        offset_minutes: int = 0,
        locale: Locale | None = None,
        config: TimeConfig | None = None,
    ) -> Time:
        """Create a Time from calendar fields.

        Out-of-range or non-integral fields produce an invalid Time.

        Examples:
            >>> Time.from_fields(2016, 2, 29, 12).time_string
            '2016-02-29T12:00:00.000+00:00'
            >>> Time.from_fields(2015, 2, 29).is_valid
            False
        """
        if config is None:
            config = DEFAULT_CONFIG

        try:
            year = coerce_int("year", year)
            month = validate_month(month)
            day = validate_day(year, month, day)
            hour = validate_field("hour", hour, 0, 23)
            minute = validate_field("minute", minute, 0, 59)
            second = validate_field("second", second, 0, 59)
            millisecond = validate_field("millisecond", millisecond, 0, 999)
            offset = UtcOffset.from_minutes(offset_minutes)
        except (ValidationError, OffsetError) as exc:
            logger.debug(f"Invalid fields: {exc}")
            return cls.invalid(locale=locale, config=config)

        millis = compose_millis(year, month, day, hour, minute, second, millisecond)
        return cls._from_internal(millis, offset, locale, config)

    @classmethod
    def from_unix_millis(
        cls,
        millis: int,
        *,
        offset_minutes: int = 0,
        locale: Locale | None = None,
        config: TimeConfig | None = None,
    ) -> Time:
        """Create a Time from Unix milliseconds and a display offset.

        The wall-clock fields are the instant shifted by the offset.

        Examples:
            >>> Time.from_unix_millis(0, offset_minutes=60).time_string
            '1970-01-01T01:00:00.000+01:00'
        """
        if config is None:
            config = DEFAULT_CONFIG

        try:
            instant = coerce_int("millis", millis)
            offset = UtcOffset.from_minutes(offset_minutes)
        except (ValidationError, OffsetError) as exc:
            logger.debug(f"Invalid instant: {exc}")
            return cls.invalid(locale=locale, config=config)

        return cls._from_internal(
            instant + offset.minutes * MS_PER_MINUTE, offset, locale, config
        )

    @classmethod
    def local_now(
        cls,
        *,
        locale: Locale | None = None,
        config: TimeConfig | None = None,
    ) -> Time:
        """Return the current local time with the host's current offset."""
        now = _datetime.datetime.now().astimezone()
        utc_offset = now.utcoffset()
        offset_minutes = int(utc_offset.total_seconds() // 60) if utc_offset else 0
        return cls.from_fields(
            now.year,
            now.month,
            now.day,
            now.hour,
            now.minute,
            now.second,
            now.microsecond // 1000,
            offset_minutes=offset_minutes,
            locale=locale,
            config=config,
        )

    # --- Internal derivation ---

    def _with_millis(self, millis: int) -> Time:
        return Time._from_internal(millis, self._offset, self._locale, self._config)

    def _invalidate(self) -> Time:
        return Time._from_internal(None, self._offset, self._locale, self._config)

    def _field(self, index: int) -> int | None:
        if self._fields is None:
            return None
        return self._fields[index]

    # --- Properties ---

    @property
    def is_valid(self) -> bool:
        """Return False if this value could not be constructed."""
        return self._millis is not None

    @property
    def year(self) -> int | None:
        """Return the year."""
        return self._field(0)

    @property
    def month(self) -> int | None:
        """Return the month (1-12)."""
        return self._field(1)

    @property
    def day(self) -> int | None:
        """Return the day of the month."""
        return self._field(2)

    @property
    def hour(self) -> int | None:
        """Return the hour (0-23)."""
        return self._field(3)

    @property
    def minute(self) -> int | None:
        """Return the minute (0-59)."""
        return self._field(4)

    @property
    def second(self) -> int | None:
        """Return the second (0-59)."""
        return self._field(5)

    @property
    def millisecond(self) -> int | None:
        """Return the millisecond (0-999)."""
        return self._field(6)

    @property
    def weekday(self) -> int | None:
        """Return the day of the week (Sunday=0, Saturday=6)."""
        return self._field(7)

    @property
    def offset_minutes(self) -> int:
        """Return the display offset in minutes."""
        return self._offset.minutes

    @property
    def offset_string(self) -> str:
        """Return the display offset as ``+HH:MM``."""
        return str(self._offset)

    @property
    def time_string(self) -> str:
        """Return the canonical text, or ``"Invalid Date"``."""
        return self._time_string

    @property
    def locale(self) -> Locale | None:
        """Return the attached Locale, or None."""
        return self._locale

    @property
    def config(self) -> TimeConfig:
        """Return the attached TimeConfig."""
        return self._config

    @property
    def timestamp_ms(self) -> float:
        """Return the true instant in Unix milliseconds (NaN if invalid).

        This is the wall-clock value minus the offset.
        """
        if self._millis is None:
            return float("nan")
        return self._millis - self._offset.minutes * MS_PER_MINUTE

    # --- Derived values ---

    def clone(self) -> Time:
        """Return an equal but distinct Time sharing locale and config."""
        return Time._from_internal(self._millis, self._offset, self._locale, self._config)

    def replace(
        self,
        *,
        year: int = _UNSET,
        month: int = _UNSET,
        day: int = _UNSET,
        weekday: int = _UNSET,
        hour: int = _UNSET,
        minute: int = _UNSET,
        second: int = _UNSET,
        millisecond: int = _UNSET,
    ) -> Time:
        """Return a new Time with the given fields replaced.

        Each argument must be integral and within its field's range (the
        day is checked against the target month). A bad argument yields
        an invalid Time. Changing the month alone keeps the current day
        and lets it overflow (January 31 set to February is March 2 or
        3). ``weekday`` moves the date within its Sunday-based week.

        Examples:
            >>> Time("2016-01-31T10:00").replace(month=2).time_string
            '2016-03-02T10:00:00.000+00:00'
            >>> Time("2016-01-01").replace(weekday=0).time_string
            '2015-12-27T00:00:00.000+00:00'
            >>> Time("2016-01-01").replace(hour=24).is_valid
            False
        """
        if self._fields is None:
            return self.clone()

        new_year, new_month, new_day, new_hour, new_minute, new_second, new_ms = self._fields[:7]

        try:
            if year is not _UNSET:
                new_year = coerce_int("year", year)
            if month is not _UNSET:
                new_month = validate_month(month)
            if day is not _UNSET:
                new_day = validate_day(new_year, new_month, day)
            if hour is not _UNSET:
                new_hour = validate_field("hour", hour, 0, 23)
            if minute is not _UNSET:
                new_minute = validate_field("minute", minute, 0, 59)
            if second is not _UNSET:
                new_second = validate_field("second", second, 0, 59)
            if millisecond is not _UNSET:
                new_ms = validate_field("millisecond", millisecond, 0, 999)
            new_weekday = (
                validate_field("weekday", weekday, 0, 6) if weekday is not _UNSET else None
            )
        except ValidationError as exc:
            logger.debug(f"Invalid setter argument: {exc}")
            return self._invalidate()

        millis = compose_millis(
            new_year, new_month, new_day, new_hour, new_minute, new_second, new_ms
        )
        if new_weekday is not None:
            current = weekday_from_days(millis // MS_PER_DAY)
            millis += (new_weekday - current) * MS_PER_DAY
        return self._with_millis(millis)

    def to_offset(self, minutes: int) -> Time:
        """Return this instant re-expressed at a new display offset.

        Returns ``self`` if the offset is unchanged. Otherwise the
        wall-clock fields move so the true instant stays the same. An
        offset that is not integral or not below 24 hours gives an
        invalid Time.

        Examples:
            >>> Time("2016-01-01T00:00:00+01:00").to_offset(-60).time_string
            '2015-12-31T22:00:00.000-01:00'
        """
        if self._millis is None:
            return self

        try:
            offset = UtcOffset.from_minutes(minutes)
        except OffsetError as exc:
            logger.debug(f"Invalid offset: {exc}")
            return self._invalidate()

        if offset == self._offset:
            return self

        instant = self._millis - self._offset.minutes * MS_PER_MINUTE
        return Time._from_internal(
            instant + offset.minutes * MS_PER_MINUTE, offset, self._locale, self._config
        )

    def to_utc(self) -> Time:
        """Return this instant at offset zero; always a new instance.

        Examples:
            >>> Time("2016-01-01T00:00:00-02:00").to_utc().time_string
            '2016-01-01T02:00:00.000+00:00'
        """
        if self._offset.is_utc:
            return self.clone()
        return self.to_offset(0)

    def with_locale(self, locale: Locale | None) -> Time:
        """Return a copy with ``locale`` attached."""
        return Time._from_internal(self._millis, self._offset, locale, self._config)

    def with_config(self, config: TimeConfig) -> Time:
        """Return a copy carrying ``config``."""
        return Time._from_internal(self._millis, self._offset, self._locale, config)

    def now(self) -> Time:
        """Return the current time at this value's offset, locale and config."""
        current = Time.local_now(locale=self._locale, config=self._config)
        return current.to_offset(self._offset.minutes)

    # --- Arithmetic (delegates to timepoint.arithmetic) ---

    def add(self, amount: int, unit: UnitLike) -> Time:
        """Return this value plus ``amount`` of ``unit``."""
        from timepoint.arithmetic.ops import add

        return add(self, amount, unit)

    def subtract(self, amount: int, unit: UnitLike) -> Time:
        """Return this value minus ``amount`` of ``unit``."""
        from timepoint.arithmetic.ops import subtract

        return subtract(self, amount, unit)

    def start_of(self, unit: UnitLike) -> Time:
        """Return the start of the ``unit`` containing this value."""
        from timepoint.arithmetic.ops import start_of

        return start_of(self, unit)

    def end_of(self, unit: UnitLike = TimeUnit.MILLISECOND) -> Time:
        """Return the last millisecond of the ``unit`` containing this value."""
        from timepoint.arithmetic.ops import end_of

        return end_of(self, unit)

    def diff(
        self, other: Time, unit: UnitLike | None = None, as_float: bool = False
    ) -> float:
        """Return ``self - other`` in ``unit``; NaN if either is invalid."""
        from timepoint.arithmetic.comparisons import diff

        return diff(self, other, unit, as_float)

    def is_same(self, other: Time, unit: UnitLike | None = None) -> bool:
        """Return True if ``other`` falls in the same ``unit`` as this value."""
        from timepoint.arithmetic.comparisons import is_same

        return is_same(self, other, unit)

    def is_before(self, other: Time, unit: UnitLike | None = None) -> bool:
        """Return True if ``other`` lies before this value at ``unit`` granularity."""
        from timepoint.arithmetic.comparisons import is_before

        return is_before(self, other, unit)

    # --- Formatting ---

    def format(self, mask: str | None = None, days_from_now: int | None = None) -> str:
        """Format this value with a token mask.

        See ``timepoint.format.mask`` for the tokens.
        """
        from timepoint.format.mask import format_time

        return format_time(self, mask, days_from_now)

    def to_string(self) -> str:
        """Return the canonical text."""
        return self._time_string

    def to_json(self) -> str:
        """Return the canonical text for JSON serialization."""
        return self._time_string

    # --- Comparison and hashing ---

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Time):
            return NotImplemented
        return self._millis == other._millis and self._offset == other._offset

    def __hash__(self) -> int:
        return hash((self._millis, self._offset))

    def __repr__(self) -> str:
        return f"Time({self._time_string!r})"

    def __str__(self) -> str:
        return self._time_string


def create(
    value: Time | str | None = None,
    *,
    locale: Locale | None = None,
    config: TimeConfig | None = None,
) -> Time:
    """Return a Time for ``value``.

    Args:
        value: None for the current local time at the host's offset, an
            existing Time (returned as is), or text to recognize.
        locale: Locale for new instances.
        config: Configuration for new instances.

    Returns:
        A Time; invalid if ``value`` could not be recognized.
    """
    if value is None:
        return Time.local_now(locale=locale, config=config)
    if isinstance(value, Time):
        return value
    return Time(value, locale=locale, config=config)


def parse(
    text: str,
    *,
    locale: Locale | None = None,
    config: TimeConfig | None = None,
) -> Time:
    """Recognize ``text`` as a Time; invalid on failure."""
    return Time(text, locale=locale, config=config)


def now(
    *,
    locale: Locale | None = None,
    config: TimeConfig | None = None,
) -> Time:
    """Return the current instant at offset zero."""
    return Time.local_now(locale=locale, config=config).to_utc()


def is_time(value: object) -> bool:
    """Return True if ``value`` is a Time."""
    return isinstance(value, Time)


__all__ = ["Time", "create", "parse", "now", "is_time"]
