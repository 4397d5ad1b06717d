"""Text recognition and formatting.

This module provides functions for converting point-in-time values to
and from text:
    - Recognizing the constrained ISO 8601 input form
    - Formatting the canonical ``YYYY-MM-DDTHH:mm:ss.SSS+HH:MM`` form
    - Token-mask formatting with locale substitution

Functions:
    parse_fields: Recognize text as validated calendar fields.
    format_canonical: Format calendar fields as canonical text.
    format_time: Format a Time using a token mask.
"""

from __future__ import annotations

from timepoint.format.mask import format_time
from timepoint.format.recognizer import ParsedFields, format_canonical, parse_fields

__all__: list[str] = [
    "ParsedFields",
    "parse_fields",
    "format_canonical",
    "format_time",
]
