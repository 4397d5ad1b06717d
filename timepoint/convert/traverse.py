"""Bulk conversion of time strings inside nested data.

``parse_tree`` walks mappings and sequences depth first and returns a
converted copy. String values found under an allow-listed key, at any
depth, become ``Time`` values; a list or tuple under such a key is
converted element by element. Values under other keys are walked but
never converted themselves. Other leaves pass through unchanged.

Examples:
    >>> data = {"id": 1, "interval": {"from": "2016-01-01", "to": "2016-01-02"}}
    >>> parsed = parse_tree(data)
    >>> parsed["interval"]["from"].time_string
    '2016-01-01T00:00:00.000+00:00'
    >>> parsed["id"]
    1
"""

from __future__ import annotations

from collections.abc import Iterable, Mapping
from typing import TYPE_CHECKING, Any

from timepoint.config import DEFAULT_CONFIG, TimeConfig

if TYPE_CHECKING:
    from timepoint.locale import Locale


def parse_tree(
    data: Any,
    keys: Iterable[str] | None = None,
    *,
    locale: Locale | None = None,
    config: TimeConfig | None = None,
) -> Any:
    """Return a copy of ``data`` with allow-listed time strings parsed.

    Args:
        data: Nested mappings, lists and tuples.
        keys: Keys whose string values are converted. Defaults to
            ``config.parse_keys``.
        locale: Locale attached to each new Time.
        config: Configuration attached to each new Time.

    Returns:
        The converted copy. The input is not modified.
    """
    if config is None:
        config = DEFAULT_CONFIG
    allowed = frozenset(keys) if keys is not None else config.parse_keys
    return _walk(data, allowed, False, locale, config)


def _walk(
    node: Any,
    allowed: frozenset[str],
    convert: bool,
    locale: Locale | None,
    config: TimeConfig,
) -> Any:
    from timepoint.core.time import Time

    if isinstance(node, str):
        return Time(node, locale=locale, config=config) if convert else node

    if isinstance(node, Mapping):
        return {
            key: _walk(value, allowed, key in allowed, locale, config)
            for key, value in node.items()
        }

    if isinstance(node, (list, tuple)):
        items = [_walk(item, allowed, convert, locale, config) for item in node]
        return items if isinstance(node, list) else tuple(items)

    return node


__all__ = ["parse_tree"]
