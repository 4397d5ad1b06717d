"""Tests for internal calendar and validation helpers."""

from __future__ import annotations

import pytest

from timepoint._internal.calendar import (
    civil_from_days,
    compose_millis,
    days_from_civil,
    days_in_month,
    decompose_millis,
    is_leap_year,
    weekday_from_days,
)
from timepoint._internal.validation import coerce_int, validate_day, validate_field
from timepoint.errors import ValidationError


class TestLeapYears:
    """Tests for is_leap_year and days_in_month."""

    def test_leap_rules(self) -> None:
        """Gregorian leap rules."""
        assert is_leap_year(2016)
        assert is_leap_year(2000)
        assert not is_leap_year(1900)
        assert not is_leap_year(2015)
        assert is_leap_year(0)

    def test_february(self) -> None:
        """February has 29 days in leap years."""
        assert days_in_month(2016, 2) == 29
        assert days_in_month(2015, 2) == 28

    def test_invalid_month(self) -> None:
        """Month outside 1-12 raises."""
        with pytest.raises(ValueError):
            days_in_month(2016, 13)


class TestDayNumbers:
    """Tests for conversions between dates and day numbers."""

    def test_epoch(self) -> None:
        """1970-01-01 is day 0."""
        assert days_from_civil(1970, 1, 1) == 0
        assert civil_from_days(0) == (1970, 1, 1)

    def test_known_dates(self) -> None:
        """Known day numbers convert both ways."""
        assert days_from_civil(2016, 1, 1) == 16801
        assert civil_from_days(16801) == (2016, 1, 1)
        assert civil_from_days(-1) == (1969, 12, 31)
        assert civil_from_days(days_from_civil(2000, 2, 29)) == (2000, 2, 29)

    def test_round_trip_range(self) -> None:
        """Every day across several leap cycles round-trips."""
        for days in range(-800, 800, 7):
            year, month, day = civil_from_days(days * 53)
            assert days_from_civil(year, month, day) == days * 53

    def test_weekday(self) -> None:
        """Weekdays count from Sunday=0."""
        assert weekday_from_days(0) == 4  # Thursday
        assert weekday_from_days(16801) == 5  # Friday
        assert weekday_from_days(-4) == 0  # Sunday


class TestCompose:
    """Tests for compose_millis and decompose_millis."""

    def test_compose(self) -> None:
        """Fields compose to Unix milliseconds."""
        assert compose_millis(2016, 1, 1) == 1_451_606_400_000
        assert compose_millis(1970, 1, 1, 0, 0, 1, 5) == 1005

    def test_month_overflow(self) -> None:
        """Month 13 and month 0 roll into neighbouring years."""
        assert compose_millis(2015, 13, 1) == compose_millis(2016, 1, 1)
        assert compose_millis(2016, 0, 1) == compose_millis(2015, 12, 1)
        assert compose_millis(2016, -11, 1) == compose_millis(2015, 1, 1)

    def test_day_overflow(self) -> None:
        """Days beyond the month end roll forward; day 0 rolls back."""
        assert compose_millis(2016, 1, 32) == compose_millis(2016, 2, 1)
        assert compose_millis(2016, 3, 0) == compose_millis(2016, 2, 29)
        assert compose_millis(2016, 2, 31) == compose_millis(2016, 3, 2)

    def test_time_overflow(self) -> None:
        """Negative and oversized time fields carry."""
        assert compose_millis(2016, 1, 1, -1) == compose_millis(2015, 12, 31, 23)
        assert compose_millis(2016, 1, 1, 0, 0, 0, 1000) == compose_millis(2016, 1, 1, 0, 0, 1)

    def test_decompose(self) -> None:
        """Decomposition returns fields plus weekday."""
        millis = compose_millis(2016, 1, 1, 7, 8, 9, 123)
        assert decompose_millis(millis) == (2016, 1, 1, 7, 8, 9, 123, 5)

    def test_decompose_before_epoch(self) -> None:
        """Negative counts floor into the previous day."""
        assert decompose_millis(-1) == (1969, 12, 31, 23, 59, 59, 999, 3)


class TestValidation:
    """Tests for argument validation helpers."""

    def test_coerce_int(self) -> None:
        """Integral numbers are accepted."""
        assert coerce_int("x", 3) == 3
        assert coerce_int("x", 3.0) == 3

    @pytest.mark.parametrize("value", [True, 3.5, float("nan"), float("inf"), "3", None])
    def test_coerce_int_rejects(self, value: object) -> None:
        """Non-integral values raise ValidationError."""
        with pytest.raises(ValidationError):
            coerce_int("x", value)

    def test_validate_field(self) -> None:
        """Range bounds are inclusive."""
        assert validate_field("hour", 23, 0, 23) == 23
        with pytest.raises(ValidationError, match="hour must be between 0 and 23, got 24"):
            validate_field("hour", 24, 0, 23)

    def test_validate_day(self) -> None:
        """Days are checked against the month length."""
        assert validate_day(2016, 2, 29) == 29
        with pytest.raises(ValidationError):
            validate_day(2015, 2, 29)
