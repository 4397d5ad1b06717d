"""Conversion utilities for Time values.

This module provides functions for converting Time values to and from
other representations:
    - Bulk conversion of time strings inside nested data
    - JSON serialization and deserialization
    - Unix epoch conversions (seconds, milliseconds)

Examples:
    >>> from timepoint.convert import dumps, loads
    >>> restored = loads(dumps({"start": "2016-01-01"}))
    >>> restored["start"].year
    2016
"""

from __future__ import annotations

from timepoint.convert.epoch import (
    from_unix_millis,
    from_unix_seconds,
    to_unix_millis,
    to_unix_seconds,
)
from timepoint.convert.json import TimeEncoder, dumps, loads
from timepoint.convert.traverse import parse_tree

__all__ = [
    # Traversal
    "parse_tree",
    # JSON
    "TimeEncoder",
    "dumps",
    "loads",
    # Epoch
    "to_unix_millis",
    "from_unix_millis",
    "to_unix_seconds",
    "from_unix_seconds",
]
