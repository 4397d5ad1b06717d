"""Configuration for day boundaries and bulk parsing.

A TimeConfig is an immutable value carried by every ``Time``. Day
flooring, day diffs and relative-day formatting read the boundaries from
the instance's config, so two callers with different settings never
affect each other.

Examples:
    >>> from timepoint import Time, TimeConfig
    >>> config = TimeConfig(day_starts_at=6)
    >>> Time("2015-12-31T00:00:00", config=config).start_of("day").time_string
    '2015-12-30T06:00:00.000+00:00'
"""

from __future__ import annotations

from collections.abc import Iterable, Mapping
from dataclasses import dataclass, field, replace
from typing import Any

from timepoint._internal.constants import (
    DEFAULT_DAY_STARTS_AT,
    DEFAULT_NIGHT_STARTS_AT,
    DEFAULT_PARSE_KEYS,
)
from timepoint._internal.validation import validate_hour
from timepoint.errors import ValidationError

# Option names accepted by from_options, mapped to field names
_OPTION_NAMES: dict[str, str] = {
    "dayStartsAt": "day_starts_at",
    "day_starts_at": "day_starts_at",
    "nightStartsAt": "night_starts_at",
    "night_starts_at": "night_starts_at",
    "parseKeys": "parse_keys",
    "parse_keys": "parse_keys",
}


@dataclass(frozen=True)
class TimeConfig:
    """Day-start/night-start boundaries and the bulk-parse key allow-list.

    Attributes:
        day_starts_at: Hour (0-23) at which a day begins for day flooring
            and day diffs.
        night_starts_at: Hour (0-23) from which a "today" hint is rendered
            as "tonight".
        parse_keys: Mapping keys whose string values ``parse_tree``
            converts.

    Raises:
        ValidationError: If an hour is not an integer in 0-23.
    """

    day_starts_at: int = DEFAULT_DAY_STARTS_AT
    night_starts_at: int = DEFAULT_NIGHT_STARTS_AT
    parse_keys: frozenset[str] = field(default=DEFAULT_PARSE_KEYS)

    def __post_init__(self) -> None:
        # Frozen dataclass: normalize through object.__setattr__
        object.__setattr__(
            self, "day_starts_at", validate_hour("day_starts_at", self.day_starts_at)
        )
        object.__setattr__(
            self,
            "night_starts_at",
            validate_hour("night_starts_at", self.night_starts_at),
        )
        keys = self.parse_keys
        if isinstance(keys, str) or not isinstance(keys, Iterable):
            raise ValidationError(
                f"parse_keys must be a collection of strings, got {type(keys).__name__}"
            )
        object.__setattr__(self, "parse_keys", frozenset(keys))

    @classmethod
    def from_options(cls, options: Mapping[str, Any] | None = None) -> TimeConfig:
        """Build a config from an options mapping.

        Accepts ``dayStartsAt``/``nightStartsAt``/``parseKeys`` as well as
        the snake_case field names. Missing or falsy values fall back to
        the defaults; unknown keys are ignored.

        Args:
            options: Options mapping, or None for all defaults.

        Returns:
            A new TimeConfig.

        Raises:
            ValidationError: If a supplied hour is out of range.

        Examples:
            >>> TimeConfig.from_options({"dayStartsAt": 6}).day_starts_at
            6
            >>> TimeConfig.from_options({"nightStartsAt": 0}).night_starts_at
            18
        """
        values: dict[str, Any] = {}
        for key, value in (options or {}).items():
            name = _OPTION_NAMES.get(key)
            if name is not None and value:
                values[name] = value
        return cls(**values)

    def replace(self, **changes: Any) -> TimeConfig:
        """Return a copy with the given fields replaced."""
        return replace(self, **changes)


DEFAULT_CONFIG = TimeConfig()


__all__ = ["TimeConfig", "DEFAULT_CONFIG"]
