"""Timepoint: immutable points in time with fixed UTC offsets.

Timepoint recognizes a constrained ISO 8601 text form, stores the
wall-clock fields with UTC semantics plus a display offset, and provides
unit arithmetic, unit-granular comparisons and locale-aware token
formatting. Every operation returns a new value; failures produce an
invalid value rather than an exception.

Core Types:
    Time: Point in time with offset, locale and configuration
    TimeConfig: Day-start/night-start hours and bulk-parse keys
    Locale: Names, composite masks and relative-day words

Units:
    TimeUnit: Arithmetic units (YEAR ... MILLISECOND)
    UtcOffset: Fixed UTC offset in minutes

Functions:
    create: Time from text, an existing Time, or the current local time
    parse: Time from text
    now: Current instant at offset zero
    is_time: Check for a Time value
    parse_tree: Convert allow-listed time strings in nested data
    get_locale: Bundled locale by code (en, nb, nn)

Exceptions:
    TimepointError: Base exception
    ValidationError: Invalid field or configuration value
    ParseError: Text not recognized
    OffsetError: Invalid UTC offset

Example:
    >>> from timepoint import create, get_locale
    >>> t = create("2016-01-01T07:00:00+01:00").with_locale(get_locale("en"))
    >>> t.add(1, "day").format("dddd D MMMM")
    'Saturday 2 January'
    >>> t.to_utc().time_string
    '2016-01-01T06:00:00.000+00:00'
"""

from __future__ import annotations

__version__ = "0.1.0"

# Core types
from timepoint.config import DEFAULT_CONFIG, TimeConfig
from timepoint.core.time import Time, create, is_time, now, parse
from timepoint.locale import Locale
from timepoint.locales import LOCALES, get_locale

# Units
from timepoint.units.offset import UtcOffset
from timepoint.units.timeunit import TimeUnit

# Exceptions
from timepoint.errors import (
    OffsetError,
    ParseError,
    TimepointError,
    ValidationError,
)

# Text and conversion
from timepoint.convert import TimeEncoder, parse_tree
from timepoint.format import ParsedFields, parse_fields

__all__: list[str] = [
    "__version__",
    # Core types
    "Time",
    "TimeConfig",
    "DEFAULT_CONFIG",
    "Locale",
    "LOCALES",
    "get_locale",
    # Units
    "TimeUnit",
    "UtcOffset",
    # Functions
    "create",
    "parse",
    "now",
    "is_time",
    "parse_tree",
    "parse_fields",
    "ParsedFields",
    "TimeEncoder",
    # Exceptions
    "TimepointError",
    "ValidationError",
    "ParseError",
    "OffsetError",
]
