"""Coercion helpers shared by fields and widgets."""

from __future__ import annotations

import json
from collections.abc import Mapping
from typing import Any, Iterable, List, Tuple


def to_list(value: Any, filter_empty: bool = True) -> List[Any]:
    """Normalise a field value into a list.

    ``None`` and empty strings become ``[]``. Strings are decoded as JSON
    when they hold an array and are otherwise split on commas. Mappings
    contribute their values. Empty strings and ``None`` entries are
    dropped unless ``filter_empty`` is false.
    """
    if value is None or value == "" or value == [] or value == ():
        return []

    if callable(value):
        value = value()

    if isinstance(value, str):
        decoded = None
        try:
            decoded = json.loads(value)
        except ValueError:
            pass
        items = list(decoded) if isinstance(decoded, list) else value.split(",")
    elif isinstance(value, Mapping):
        items = list(value.values())
    elif isinstance(value, (list, tuple, set, frozenset)):
        items = list(value)
    else:
        items = [value]

    if filter_empty:
        items = [item for item in items if item is not None and item != ""]
    return items


def to_pairs(options: Any) -> List[Tuple[Any, Any]]:
    """Return ``(id, label)`` pairs from a mapping or an iterable of pairs."""
    if options is None:
        return []
    if isinstance(options, Mapping):
        return list(options.items())
    pairs: List[Tuple[Any, Any]] = []
    for entry in _iterate(options):
        if isinstance(entry, Mapping):
            pairs.append((entry.get("id"), entry.get("label")))
        else:
            key, label = entry
            pairs.append((key, label))
    return pairs


def loosely_equal(left: Any, right: Any) -> bool:
    """Compare identifiers the way form posts see them: ``1`` matches ``"1"``."""
    if left == right:
        return True
    if left is None or right is None:
        return False
    return str(left) == str(right)


def _iterate(value: Any) -> Iterable[Any]:
    if isinstance(value, (str, bytes)):
        raise TypeError(f"options must be a mapping or an iterable of pairs, got {type(value).__name__}")
    return iter(value)
