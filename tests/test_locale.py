"""Tests for Locale and the bundled locale tables."""

from __future__ import annotations

import dataclasses

import pytest

from timepoint import LOCALES, Locale, Time, get_locale


class TestLocale:
    """Tests for the Locale record."""

    def test_defaults_are_empty(self) -> None:
        """Every field defaults to None."""
        locale = Locale()
        assert locale.days is None
        assert locale.formats is None
        assert locale.relative_day("today") is None

    def test_frozen(self, en: Locale) -> None:
        """Locales are read-only."""
        with pytest.raises(dataclasses.FrozenInstanceError):
            en.today = "Now"  # type: ignore[misc]

    def test_from_mapping(self) -> None:
        """The camelCase shape maps onto fields."""
        locale = Locale.from_mapping(
            {
                "days": ["S", "M", "T", "W", "T", "F", "S"],
                "daysShort": ["s", "m", "t", "w", "t", "f", "s"],
                "monthsShort": ["jan"] * 12,
                "format": {"LT": "HH.mm"},
                "daySlots": {"night": "n"},
                "tonight": "tonight!",
                "unused": 1,
            }
        )
        assert locale.days == ("S", "M", "T", "W", "T", "F", "S")
        assert locale.days_short[5] == "f"
        assert locale.months is None
        assert locale.months_short[0] == "jan"
        assert locale.formats == {"LT": "HH.mm"}
        assert locale.day_slots == {"night": "n"}
        assert locale.tonight == "tonight!"
        assert locale.today is None

    def test_from_mapping_copies(self) -> None:
        """Later changes to the source do not leak into the locale."""
        source = {"days": ["a"] * 7, "format": {"LT": "HH"}}
        locale = Locale.from_mapping(source)
        source["days"][0] = "changed"
        source["format"]["LT"] = "mm"
        assert locale.days[0] == "a"
        assert locale.formats["LT"] == "HH"

    def test_custom_locale_formats(self) -> None:
        """A mapping-built locale drives the formatter."""
        locale = Locale.from_mapping({"format": {"LT": "HH.mm"}, "today": "idag"})
        t = Time("2016-01-01T09:30", locale=locale)
        assert t.format("LT") == "09.30"
        assert t.format("dddr", 0) == "idag"

    @pytest.mark.parametrize(
        "key,expected",
        [("today", "Today"), ("tomorrow", "Tomorrow"), ("tonight", "Tonight"), ("yesterday", None)],
    )
    def test_relative_day(self, en: Locale, key: str, expected: str | None) -> None:
        """Relative-day words by key."""
        assert en.relative_day(key) == expected


class TestBundledLocales:
    """Tests for the en, nb and nn tables."""

    def test_lookup(self) -> None:
        """Bundled locales are found by code."""
        assert set(LOCALES) == {"en", "nb", "nn"}
        assert get_locale("en") is LOCALES["en"]
        assert get_locale("de") is None

    @pytest.mark.parametrize("code", ["en", "nb", "nn"])
    def test_complete(self, code: str) -> None:
        """Bundled locales have every entry."""
        locale = get_locale(code)
        assert len(locale.days) == 7
        assert len(locale.days_short) == 7
        assert len(locale.months) == 12
        assert len(locale.months_short) == 12
        assert set(locale.formats) == {"LT", "LTS", "L", "LL", "LLL", "LLLL"}
        assert set(locale.day_slots) == {"night", "morning", "afternoon", "evening"}
        assert locale.today and locale.tomorrow and locale.tonight

    def test_nynorsk(self) -> None:
        """Nynorsk differs from Bokmål in its words."""
        t = Time("2016-01-02T07:00", locale=get_locale("nn"))
        assert t.format("dddd") == "laurdag"
        assert t.format("Hr") == "morgon"
        assert t.format("dddr", 1) == "i morgon"
        assert t.format("LLLL") == "laurdag 2. januar 2016 kl. 07:00"

    def test_bokmal_short_names(self, nb: Locale) -> None:
        """Short names come from the Bokmål table."""
        t = Time("2016-03-06", locale=nb)
        assert t.format("ddd D. MMM") == "sø. 6. mars"
