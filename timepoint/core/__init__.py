"""Core point-in-time type.

This module provides:
    - Time: Immutable point in time with a fixed UTC offset
    - create, parse, now, is_time: Module-level constructors and checks
"""

from __future__ import annotations

from timepoint.core.time import Time, create, is_time, now, parse

__all__: list[str] = [
    "Time",
    "create",
    "parse",
    "now",
    "is_time",
]
