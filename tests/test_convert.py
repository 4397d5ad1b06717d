"""Tests for bulk parsing, JSON and epoch conversion."""

from __future__ import annotations

import json
import math

import pytest

from timepoint import Locale, Time, TimeConfig, is_time, parse_tree
from timepoint.convert import (
    TimeEncoder,
    dumps,
    from_unix_millis,
    from_unix_seconds,
    loads,
    to_unix_millis,
    to_unix_seconds,
)


class TestParseTree:
    """Tests for parse_tree."""

    def test_nested_mappings(self) -> None:
        """Allow-listed keys are converted at any depth."""
        data = {
            "id": 7,
            "name": "2016-01-01",
            "interval": {"from": "2016-01-01T00:00:00+01:00", "to": "2016-01-02"},
        }
        result = parse_tree(data)
        assert result["id"] == 7
        assert result["name"] == "2016-01-01"
        assert is_time(result["interval"]["from"])
        assert result["interval"]["from"].offset_minutes == 60
        assert result["interval"]["to"].day == 2

    def test_input_not_modified(self) -> None:
        """The input tree is left as it was."""
        data = {"start": "2016-01-01", "items": [{"end": "2016-01-02"}]}
        parse_tree(data)
        assert data == {"start": "2016-01-01", "items": [{"end": "2016-01-02"}]}

    def test_lists_under_allowed_key(self) -> None:
        """Lists under an allowed key convert each string."""
        result = parse_tree({"times": ["2016-01-01", "2016-01-02", 3]})
        assert [t.day for t in result["times"][:2]] == [1, 2]
        assert result["times"][2] == 3

    def test_lists_of_mappings(self) -> None:
        """Mappings inside lists are walked."""
        result = parse_tree({"rows": [{"start": "2016-01-01"}, {"start": "2016-02-01"}]})
        assert [row["start"].month for row in result["rows"]] == [1, 2]

    def test_tuples_stay_tuples(self) -> None:
        """Tuples are rebuilt as tuples."""
        result = parse_tree({"set": ("2016-01-01",)})
        assert isinstance(result["set"], tuple)
        assert is_time(result["set"][0])

    def test_strings_elsewhere_untouched(self) -> None:
        """Strings under other keys and at the top level stay strings."""
        assert parse_tree({"note": ["2016-01-01"]}) == {"note": ["2016-01-01"]}
        assert parse_tree("2016-01-01") == "2016-01-01"
        assert parse_tree(["2016-01-01"]) == ["2016-01-01"]

    def test_unparseable_becomes_invalid(self) -> None:
        """Bad text under an allowed key becomes an invalid Time."""
        result = parse_tree({"from": "soon"})
        assert is_time(result["from"])
        assert not result["from"].is_valid

    def test_custom_keys(self) -> None:
        """An explicit key list replaces the default."""
        result = parse_tree({"when": "2016-01-01", "from": "2016-01-01"}, keys=["when"])
        assert is_time(result["when"])
        assert result["from"] == "2016-01-01"

    def test_config_keys(self) -> None:
        """Without keys the config's parse keys are used."""
        config = TimeConfig(parse_keys=["at"])
        result = parse_tree({"at": "2016-01-01", "from": "2016-01-01"}, config=config)
        assert is_time(result["at"])
        assert result["at"].config is config
        assert result["from"] == "2016-01-01"

    def test_locale_attached(self, en: Locale) -> None:
        """New values carry the given locale."""
        result = parse_tree({"start": "2016-01-01"}, locale=en)
        assert result["start"].format("dddd") == "Friday"

    @pytest.mark.parametrize("value", [None, 5, 2.5, True])
    def test_scalars_pass_through(self, value: object) -> None:
        """Non-string leaves pass through."""
        assert parse_tree({"from": value}) == {"from": value}


class TestJson:
    """Tests for dumps, loads and TimeEncoder."""

    def test_dumps(self) -> None:
        """Time values serialize as canonical text."""
        text = dumps({"from": Time("2016-01-01T00:00:00+01:00"), "n": 1})
        assert json.loads(text) == {"from": "2016-01-01T00:00:00.000+01:00", "n": 1}

    def test_encoder_with_json_module(self) -> None:
        """TimeEncoder plugs into json.dumps."""
        assert json.dumps([Time("2016-01-01")], cls=TimeEncoder) == '["2016-01-01T00:00:00.000+00:00"]'

    def test_encoder_rejects_other_objects(self) -> None:
        """Unknown objects still fail to serialize."""
        with pytest.raises(TypeError):
            dumps({"x": object()})

    def test_invalid_serializes_as_sentinel(self) -> None:
        """An invalid Time serializes as its text."""
        assert dumps(Time("foo")) == '"Invalid Date"'

    def test_loads(self) -> None:
        """loads converts allow-listed keys."""
        result = loads('{"start": "2016-01-01T10:00:00.000-05:00", "label": "x"}')
        assert result["start"].hour == 10
        assert result["start"].offset_minutes == -300
        assert result["label"] == "x"

    def test_loads_custom_keys(self) -> None:
        """loads accepts a key list."""
        result = loads('{"due": "2016-01-01"}', keys={"due"})
        assert is_time(result["due"])

    def test_loads_rejects_bad_json(self) -> None:
        """Malformed JSON raises the json module's error."""
        with pytest.raises(json.JSONDecodeError):
            loads("{")

    def test_round_trip(self) -> None:
        """Serialized values load back equal."""
        original = {"from": Time("2016-02-29T23:59:59.999-01:30")}
        assert loads(dumps(original)) == original


class TestEpoch:
    """Tests for Unix epoch conversion."""

    def test_to_unix_millis(self) -> None:
        """The instant accounts for the offset."""
        assert to_unix_millis(Time("1970-01-01T01:00:00+01:00")) == 0
        assert to_unix_millis(Time("2016-01-01")) == 1_451_606_400_000

    def test_from_unix_millis(self) -> None:
        """Milliseconds become a Time at the requested offset."""
        t = from_unix_millis(1_451_606_400_000, offset_minutes=-60)
        assert t.time_string == "2015-12-31T23:00:00.000-01:00"

    def test_to_unix_seconds_floors(self) -> None:
        """Seconds are floored."""
        assert to_unix_seconds(Time("1970-01-01T00:00:01.999")) == 1
        assert to_unix_seconds(Time("1969-12-31T23:59:59.500")) == -1

    def test_from_unix_seconds(self) -> None:
        """Seconds become a Time."""
        assert from_unix_seconds(86_400).time_string == "1970-01-02T00:00:00.000+00:00"

    def test_invalid(self) -> None:
        """Invalid input gives NaN or an invalid Time."""
        assert math.isnan(to_unix_millis(Time("foo")))
        assert math.isnan(to_unix_seconds(Time("foo")))
        assert not from_unix_seconds(1.5).is_valid
        assert not from_unix_millis("0").is_valid  # type: ignore[arg-type]
        assert not from_unix_millis(0, offset_minutes=2000).is_valid
