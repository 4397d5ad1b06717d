"""Tests for diff, is_same and is_before."""

from __future__ import annotations

import math

import pytest

from timepoint import Time, TimeConfig
from timepoint.arithmetic import diff, is_before, is_same, month_diff


class TestDiff:
    """Test diff."""

    def test_default_unit_is_milliseconds(self) -> None:
        """With no unit the result is in milliseconds."""
        assert Time("2016-01-01T00:00:01").diff(Time("2016-01-01T00:00:00")) == 1000

    def test_years_as_float(self) -> None:
        """Half a year between January and July."""
        assert diff(Time("2016-01-01T00:00:00"), Time("2015-07-01T00:00:00"), "Y", as_float=True) == 0.5

    def test_years_truncated(self) -> None:
        """Truncated year difference."""
        assert Time("2016-01-01").diff(Time("2015-07-01"), "year") == 0
        assert Time("2017-01-01").diff(Time("2015-07-01"), "year") == 1

    def test_months_as_float(self) -> None:
        """Month fractions account for the month length."""
        result = Time("2016-01-01").diff(Time("2015-12-16"), "M", as_float=True)
        assert result == pytest.approx(16 / 31)

    def test_months_whole(self) -> None:
        """Whole months between month starts."""
        assert Time("2016-03-01").diff(Time("2016-01-01"), "months") == 2
        assert Time("2016-01-01").diff(Time("2016-03-01"), "months") == -2

    def test_month_diff_function(self) -> None:
        """month_diff gives the exact month count."""
        assert month_diff(Time("2016-01-01"), Time("2015-07-01")) == 6

    def test_days_floored(self) -> None:
        """Day diffs floor both values to the day first."""
        assert Time("2016-01-01T00:00").diff(Time("2015-12-31T06:00"), "day") == 1

    def test_days_as_float(self) -> None:
        """As a float, day diffs use the exact delta."""
        assert Time("2016-01-01T00:00").diff(Time("2015-12-31T06:00"), "day", as_float=True) == 0.75

    def test_days_with_day_start(self) -> None:
        """The day-start hour decides which day a value belongs to."""
        config = TimeConfig(day_starts_at=6)
        later = Time("2016-01-01T07:00", config=config)
        earlier = Time("2016-01-01T05:00", config=config)
        assert later.diff(earlier, "day") == 1
        assert later.diff(earlier, "day", as_float=True) == pytest.approx(2 / 24)

    def test_days_across_offsets(self) -> None:
        """Day diffs count recorded wall-clock days."""
        t = Time("2016-10-31T00:00+01:00")
        assert t.diff(Time("2016-10-30T23:00+02:00"), "D") == 1
        assert t.diff(Time("2016-10-30T12:00+02:00"), "D", as_float=True) == 0.5

    def test_hours_across_offsets(self) -> None:
        """Hour diffs use true instants."""
        t = Time("2016-10-30T02:00+01:00")
        assert t.diff(Time("2016-10-30T02:00+02:00"), "H", as_float=True) == 1

    @pytest.mark.parametrize(
        "unit,expected",
        [("H", 25), ("m", 25 * 60), ("s", 25 * 3600), ("S", 25 * 3_600_000)],
    )
    def test_fixed_units(self, unit: str, expected: int) -> None:
        """Fixed units divide the instant delta."""
        assert Time("2016-01-02T01:00").diff(Time("2016-01-01T00:00"), unit) == expected

    def test_truncates_toward_zero(self) -> None:
        """Negative fractions truncate toward zero."""
        a = Time("2016-01-01T00:00")
        b = Time("2016-01-01T01:30")
        assert a.diff(b, "H") == -1
        assert a.diff(b, "H", as_float=True) == -1.5
        assert Time("2016-01-01T00:00").diff(Time("2016-01-01T00:20"), "H") == 0

    def test_invalid_is_nan(self) -> None:
        """Invalid operands give NaN."""
        valid = Time("2016-01-01")
        assert math.isnan(Time("foo").diff(valid, "D"))
        assert math.isnan(valid.diff(Time("foo"), "D"))
        assert math.isnan(valid.diff("2016-01-01", "D"))  # type: ignore[arg-type]


class TestIsSame:
    """Test is_same."""

    def test_exact(self) -> None:
        """Without a unit the stored values must match."""
        assert Time("2016-01-01T00:00:00").is_same(Time("2016-01-01T00:00:00"))
        assert not Time("2016-01-01T00:00:00").is_same(Time("2016-01-01T00:00:00.001"))

    @pytest.mark.parametrize(
        "other,unit,expected",
        [
            ("2016-12-31T23:59", "Y", True),
            ("2017-01-01T00:00", "Y", False),
            ("2016-02-29T10:00", "M", True),
            ("2016-03-01T00:00", "M", False),
            ("2016-02-10T23:59", "D", True),
            ("2016-02-11T00:00", "D", False),
            ("2016-02-10T10:59", "H", True),
            ("2016-02-10T11:00", "H", False),
            ("2016-02-10T10:30:59", "m", True),
            ("2016-02-10T10:31:00", "m", False),
            ("2016-02-10T10:30:20.999", "s", True),
            ("2016-02-10T10:30:21", "s", False),
        ],
    )
    def test_units(self, other: str, unit: str, expected: bool) -> None:
        """Fields are compared down to the unit."""
        t = Time("2016-02-10T10:30:20.500")
        assert t.is_same(Time(other), unit) is expected

    def test_day_start(self) -> None:
        """Day comparisons respect the day-start hour."""
        config = TimeConfig(day_starts_at=6)
        early = Time("2016-01-01T05:00", config=config)
        assert not early.is_same(Time("2016-01-01T07:00", config=config), "D")
        assert Time("2016-01-01T05:59", config=config).is_same(
            Time("2015-12-31T12:00", config=config), "D"
        )

    def test_invalid(self) -> None:
        """Invalid operands are never the same."""
        valid = Time("2016-01-01")
        assert not Time("foo").is_same(valid)
        assert not valid.is_same(Time("foo"))
        assert not Time("foo").is_same(Time("foo"))

    def test_unknown_unit(self) -> None:
        """An unknown unit is never the same."""
        assert not is_same(Time("2016"), Time("2016"), "fortnight")


class TestIsBefore:
    """Test is_before.

    ``a.is_before(b, unit)`` is True when ``b`` lies before ``a`` at
    ``unit`` granularity.
    """

    def test_day_ordering(self) -> None:
        """The later day has the earlier one before it."""
        t = Time("2016-01-01T12:00")
        assert t.add(1, "day").is_before(t, "day")
        assert not t.is_before(t.add(1, "day"), "day")

    def test_same_is_not_before(self) -> None:
        """Equal values are not before one another."""
        t = Time("2016-01-01T00:00:00")
        assert not t.is_before(Time("2016-01-01T00:00:00"))
        assert not t.is_before(t.clone())

    @pytest.mark.parametrize("unit", ["Y", "M", "D", "H", "m"])
    def test_year_apart(self, unit: str) -> None:
        """A year apart is before at every unit."""
        assert Time("2016-01-01T00:00:00").is_before(Time("2015-01-01T00:00:00"), unit)

    @pytest.mark.parametrize(
        "earlier,unit",
        [
            ("2016-01-01T00:00", "M"),
            ("2016-01-01T00:00", "D"),
            ("2016-02-01T23:00", "H"),
            ("2016-02-02T00:59", "m"),
        ],
    )
    def test_field_cascade(self, earlier: str, unit: str) -> None:
        """The first differing field decides."""
        assert Time("2016-02-02T01:00").is_before(Time(earlier), unit)

    def test_same_unit_is_not_before(self) -> None:
        """Values within the same unit are not before one another."""
        a = Time("2016-01-01T23:00")
        b = Time("2016-01-01T01:00")
        assert a.is_before(b, "H")
        assert not a.is_before(b, "D")

    def test_offsets_compare_wall_clocks(self) -> None:
        """Fields are compared as recorded, whatever the offset."""
        a = Time("2016-01-01T01:00:00+01:00")
        b = Time("2016-01-01T00:00:00+00:00")
        assert a.is_before(b, "H")
        assert not a.is_before(b, "D")

    def test_day_start(self) -> None:
        """Day ordering respects the day-start hour."""
        config = TimeConfig(day_starts_at=6)
        a = Time("2016-01-01T05:00", config=config)
        b = Time("2015-12-31T07:00", config=config)
        assert not a.is_before(b, "D")
        assert Time("2016-01-01T06:00", config=config).is_before(b, "D")

    def test_consistent_with_is_same(self) -> None:
        """Exactly one of before, same or after holds at a unit."""
        values = [Time(text) for text in ("2016-01-01T10:00", "2016-01-01T23:00", "2016-01-02T01:00")]
        for a in values:
            for b in values:
                outcomes = [a.is_before(b, "D"), a.is_same(b, "D"), b.is_before(a, "D")]
                assert outcomes.count(True) == 1

    def test_invalid(self) -> None:
        """Invalid operands are never before."""
        valid = Time("2016-01-01")
        assert not Time("foo").is_before(valid)
        assert not valid.is_before(Time("foo"))
        assert not is_before(valid, Time("foo"), "D")
