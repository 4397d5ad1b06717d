"""Unit arithmetic and comparisons.

The functions in this module serve as the canonical implementations for
Time arithmetic. The methods on ``Time`` delegate to them.

Arithmetic Operations (from timepoint.arithmetic.ops):
    - add: Add an integral amount of a unit
    - subtract: Subtract an integral amount of a unit
    - start_of: Floor to the start of a unit
    - end_of: Ceil to the last millisecond of a unit

Comparison Operations (from timepoint.arithmetic.comparisons):
    - diff: Difference in a unit, truncated or as a float
    - month_diff: Fractional month difference
    - is_same: Equality down to a unit
    - is_before: Ordering down to a unit
"""

from __future__ import annotations

from timepoint.arithmetic.comparisons import diff, is_before, is_same, month_diff
from timepoint.arithmetic.ops import add, end_of, start_of, subtract

__all__ = [
    # Arithmetic operations
    "add",
    "subtract",
    "start_of",
    "end_of",
    # Comparison operations
    "diff",
    "month_diff",
    "is_same",
    "is_before",
]
