"""Bundled locale tables.

Provides English (``en``), Norwegian Bokmål (``nb``) and Norwegian
Nynorsk (``nn``). Look them up with ``get_locale``; any other Locale can
be built with ``Locale.from_mapping``.
"""

from __future__ import annotations

from timepoint.locale import Locale

_NORWEGIAN_FORMATS: dict[str, str] = {
    "LT": "HH:mm",
    "LTS": "HH:mm:ss",
    "L": "DD.MM.YYYY",
    "LL": "D. MMMM YYYY",
    "LLL": "D. MMMM YYYY [kl.] HH:mm",
    "LLLL": "dddd D. MMMM YYYY [kl.] HH:mm",
}

_NORWEGIAN_MONTHS_SHORT: tuple[str, ...] = (
    "jan.", "feb.", "mars", "apr.", "mai", "juni",
    "juli", "aug.", "sep.", "okt.", "nov.", "des.",
)

_NORWEGIAN_MONTHS: tuple[str, ...] = (
    "januar", "februar", "mars", "april", "mai", "juni",
    "juli", "august", "september", "oktober", "november", "desember",
)

EN = Locale(
    days_short=("Sun.", "Mon.", "Tue.", "Wed.", "Thur.", "Fri.", "Sat."),
    days=("Sunday", "Monday", "Tuesday", "Wednesday", "Thursday", "Friday", "Saturday"),
    day_slots={
        "night": "night",
        "morning": "morning",
        "afternoon": "afternoon",
        "evening": "evening",
    },
    formats={
        "LT": "HH:mm",
        "LTS": "HH:mm:ss",
        "L": "DD/MM/YYYY",
        "LL": "D MMMM YYYY",
        "LLL": "D MMMM YYYY HH:mm",
        "LLLL": "dddd, D MMMM YYYY HH:mm",
    },
    months_short=(
        "Jan.", "Feb.", "Mar.", "Apr.", "May", "June",
        "July", "Aug.", "Sep.", "Oct.", "Nov.", "Dec.",
    ),
    months=(
        "January", "February", "March", "April", "May", "June",
        "July", "August", "September", "October", "November", "December",
    ),
    today="Today",
    tomorrow="Tomorrow",
    tonight="Tonight",
)

NB = Locale(
    days_short=("sø.", "ma.", "ti.", "on.", "to.", "fr.", "lø."),
    days=("søndag", "mandag", "tirsdag", "onsdag", "torsdag", "fredag", "lørdag"),
    day_slots={
        "night": "natt",
        "morning": "morgen",
        "afternoon": "ettermiddag",
        "evening": "kveld",
    },
    formats=_NORWEGIAN_FORMATS,
    months_short=_NORWEGIAN_MONTHS_SHORT,
    months=_NORWEGIAN_MONTHS,
    today="i dag",
    tomorrow="i morgen",
    tonight="i natt",
)

NN = Locale(
    days_short=("su.", "må.", "ty.", "on.", "to.", "fr.", "lau."),
    days=("sundag", "måndag", "tysdag", "onsdag", "torsdag", "fredag", "laurdag"),
    day_slots={
        "night": "natt",
        "morning": "morgon",
        "afternoon": "ettermiddag",
        "evening": "kveld",
    },
    formats=_NORWEGIAN_FORMATS,
    months_short=_NORWEGIAN_MONTHS_SHORT,
    months=_NORWEGIAN_MONTHS,
    today="i dag",
    tomorrow="i morgon",
    tonight="i natt",
)

LOCALES: dict[str, Locale] = {
    "en": EN,
    "nb": NB,
    "nn": NN,
}


def get_locale(code: str) -> Locale | None:
    """Return the bundled locale for ``code``, or None if there is none.

    Examples:
        >>> get_locale("nb").today
        'i dag'
        >>> get_locale("sv") is None
        True
    """
    return LOCALES.get(code)


__all__ = ["EN", "NB", "NN", "LOCALES", "get_locale"]
