"""JSON serialization and deserialization for Time values.

Time values serialize as their canonical text. Decoding runs
``parse_tree`` so allow-listed keys come back as Time values.

Functions:
    dumps: Serialize data containing Time values.
    loads: Deserialize JSON text, parsing allow-listed time strings.

Classes:
    TimeEncoder: ``json.JSONEncoder`` that understands Time.

Examples:
    >>> from timepoint import Time
    >>> dumps({"from": Time("2016-01-01T00:00:00+01:00")})
    '{"from": "2016-01-01T00:00:00.000+01:00"}'
    >>> loads('{"from": "2016-01-01T00:00:00.000+01:00"}')["from"].offset_minutes
    60
"""

from __future__ import annotations

import json
from collections.abc import Iterable
from typing import TYPE_CHECKING, Any

from timepoint.convert.traverse import parse_tree

if TYPE_CHECKING:
    from timepoint.config import TimeConfig
    from timepoint.locale import Locale


class TimeEncoder(json.JSONEncoder):
    """JSON encoder writing Time values as canonical text."""

    def default(self, o: Any) -> Any:
        from timepoint.core.time import Time

        if isinstance(o, Time):
            return o.to_json()
        return super().default(o)


def dumps(obj: Any, **kwargs: Any) -> str:
    """Serialize ``obj`` to JSON, writing Time values as canonical text.

    Keyword arguments are passed to ``json.dumps``.
    """
    kwargs.setdefault("cls", TimeEncoder)
    return json.dumps(obj, **kwargs)


def loads(
    text: str | bytes,
    keys: Iterable[str] | None = None,
    *,
    locale: Locale | None = None,
    config: TimeConfig | None = None,
) -> Any:
    """Deserialize JSON text and parse allow-listed time strings.

    Args:
        text: JSON document.
        keys: Keys to convert; defaults to ``config.parse_keys``.
        locale: Locale attached to each new Time.
        config: Configuration attached to each new Time.

    Returns:
        The decoded data with Time values in place of allow-listed strings.

    Raises:
        json.JSONDecodeError: If the text is not valid JSON.
    """
    return parse_tree(json.loads(text), keys, locale=locale, config=config)


__all__ = ["TimeEncoder", "dumps", "loads"]
