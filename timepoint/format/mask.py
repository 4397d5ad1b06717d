"""Token-mask formatting.

This module formats a ``Time`` using a mask of tokens. Text inside
square brackets is copied through verbatim and never scanned for
tokens. Tokens are matched longest first.

Supported Tokens:
    YYYY, YY       - 4-digit / 2-digit year
    M, MM          - month number / zero-padded
    MMM, MMMM      - short / full month name (locale)
    D, DD          - day of month / zero-padded
    d              - weekday number (Sunday=0)
    ddd, dddd      - short / full weekday name (locale)
    ddr, dddr      - relative day word or short / full weekday name (locale)
    H, HH          - 24-hour clock / zero-padded
    h, hh          - 12-hour clock / zero-padded
    Hr             - period of the day: night, morning, afternoon, evening (locale)
    m, mm          - minute / zero-padded
    s, ss          - second / zero-padded
    S, SS, SSS     - fraction of a second, 1 / 2 / 3 digits
    ZZ             - UTC offset, e.g. +01:00
    LT, LTS, L, LL, LLL, LLLL - composite masks from the locale

Locale tokens emit ``[missing locale]`` when the value has no locale or
the locale lacks the entry.

Examples:
    >>> from timepoint import Time, get_locale
    >>> t = Time("2016-01-01T07:05:00", locale=get_locale("en"))
    >>> format_time(t, "YYYY-MM-DD [at] HH:mm")
    '2016-01-01 at 07:05'
    >>> format_time(t, "dddr", days_from_now=1)
    'Tomorrow'
    >>> format_time(t.with_locale(None), "MMM")
    '[missing locale]'
"""

from __future__ import annotations

import logging
import re
from typing import TYPE_CHECKING

from timepoint._internal.constants import (
    INVALID_DATE,
    MAX_MASK_LENGTH,
    MISSING_LOCALE,
)
from timepoint.locale import DAY_SLOT_KEYS, FORMAT_KEYS

if TYPE_CHECKING:
    from timepoint.core.time import Time

logger = logging.getLogger(__name__)

_ESCAPE_RE = re.compile(r"(\[[^\]]+\])")

_TOKEN_RE = re.compile(
    r"LTS|LT|LLLL|LLL|LL|L"
    r"|YYYY|YY"
    r"|MMMM|MMM|MM|M"
    r"|DD|D"
    r"|dddr|ddr|dddd|ddd|d"
    r"|Hr|HH|H|hh|h"
    r"|mm|m"
    r"|ss|s"
    r"|SSS|SS|S"
    r"|ZZ"
)

# Composite masks may reference other composites; stop expanding past this
_MAX_COMPOSITE_DEPTH = 4


def format_time(
    value: Time,
    mask: str | None = None,
    days_from_now: int | None = None,
    *,
    _depth: int = 0,
) -> str:
    """Format ``value`` using ``mask``.

    Args:
        value: The Time to format.
        mask: Token mask. None or empty returns the canonical text.
        days_from_now: Relative-day hint for ``ddr``/``dddr``: 0 for a
            value on today's date, 1 for tomorrow. Other values, or None,
            render the weekday name.

    Returns:
        The formatted text; ``"Invalid Date"`` for an invalid value and
        ``""`` for a mask longer than 100 characters.
    """
    if not value.is_valid:
        return INVALID_DATE
    if not mask:
        return value.time_string
    if len(mask) > MAX_MASK_LENGTH:
        logger.debug(f"Rejected mask of length {len(mask)}")
        return ""

    relative_day = _relative_day(value, days_from_now)

    # Odd segments are bracket escapes
    parts = []
    for index, segment in enumerate(_ESCAPE_RE.split(mask)):
        if index % 2:
            parts.append(segment[1:-1])
        else:
            parts.append(
                _TOKEN_RE.sub(
                    lambda match: _format_token(
                        value, match.group(0), days_from_now, relative_day, _depth
                    ),
                    segment,
                )
            )
    return "".join(parts)


def _relative_day(value: Time, days_from_now: int | None) -> str | None:
    """Return ``today``, ``tomorrow`` or ``tonight`` for a hint, else None."""
    if days_from_now is None or isinstance(days_from_now, bool):
        return None
    if days_from_now == 1:
        return "tomorrow"
    if days_from_now == 0:
        config = value.config
        hour = value.hour
        if hour >= config.night_starts_at or hour < config.day_starts_at:
            return "tonight"
        return "today"
    return None


def _name(names: tuple[str, ...] | None, index: int, token: str) -> str:
    if names is None or not 0 <= index < len(names):
        logger.debug(f"No locale entry for token {token!r}")
        return MISSING_LOCALE
    return names[index]


def _format_token(
    value: Time,
    token: str,
    days_from_now: int | None,
    relative_day: str | None,
    depth: int,
) -> str:
    """Format a single token.

    Args:
        value: The Time being formatted.
        token: The matched token.
        days_from_now: Hint passed through to composite masks.
        relative_day: Resolved relative-day key, or None.
        depth: Current composite nesting depth.

    Returns:
        Text for this token.
    """
    locale = value.locale

    if token in FORMAT_KEYS:
        submask = locale.formats.get(token) if locale and locale.formats else None
        if not submask:
            logger.debug(f"No locale entry for token {token!r}")
            return MISSING_LOCALE
        if depth >= _MAX_COMPOSITE_DEPTH:
            logger.debug(f"Composite token {token!r} nested too deeply")
            return ""
        return format_time(value, submask, days_from_now, _depth=depth + 1)

    elif token == "YYYY":
        return f"{value.year:04d}"
    elif token == "YY":
        return f"{value.year % 100:02d}"

    elif token == "M":
        return str(value.month)
    elif token == "MM":
        return f"{value.month:02d}"
    elif token == "MMM":
        return _name(locale.months_short if locale else None, value.month - 1, token)
    elif token == "MMMM":
        return _name(locale.months if locale else None, value.month - 1, token)

    elif token == "D":
        return str(value.day)
    elif token == "DD":
        return f"{value.day:02d}"

    elif token in ("ddr", "dddr"):
        if relative_day is not None:
            word = locale.relative_day(relative_day) if locale else None
            if word is None:
                logger.debug(f"No locale entry for {relative_day!r}")
                return MISSING_LOCALE
            return word
        names = None
        if locale:
            names = locale.days_short if token == "ddr" else locale.days
        return _name(names, value.weekday, token)
    elif token == "d":
        return str(value.weekday)
    elif token == "ddd":
        return _name(locale.days_short if locale else None, value.weekday, token)
    elif token == "dddd":
        return _name(locale.days if locale else None, value.weekday, token)

    elif token == "Hr":
        slot = DAY_SLOT_KEYS[value.hour // 6]
        label = locale.day_slots.get(slot) if locale and locale.day_slots else None
        if label is None:
            logger.debug(f"No locale entry for day slot {slot!r}")
            return MISSING_LOCALE
        return label
    elif token == "H":
        return str(value.hour)
    elif token == "HH":
        return f"{value.hour:02d}"
    elif token == "h":
        return str(value.hour % 12 or 12)
    elif token == "hh":
        return f"{value.hour % 12 or 12:02d}"

    elif token == "m":
        return str(value.minute)
    elif token == "mm":
        return f"{value.minute:02d}"

    elif token == "s":
        return str(value.second)
    elif token == "ss":
        return f"{value.second:02d}"

    elif token == "S":
        return str(value.millisecond // 100)
    elif token == "SS":
        return f"{value.millisecond // 10:02d}"
    elif token == "SSS":
        return f"{value.millisecond:03d}"

    elif token == "ZZ":
        return value.offset_string

    return ""


__all__ = ["format_time"]
