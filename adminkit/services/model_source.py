"""Lookup protocol used by ``SelectTableField.model``."""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any, Dict, Iterable, List, Protocol, runtime_checkable


@runtime_checkable
class ModelSource(Protocol):
    """Anything that can return the rows for a list of identifiers."""

    def find(self, ids: List[Any]) -> Iterable[Any]: ...


def pluck(rows: Iterable[Any], text: str, key: str = "id") -> Dict[Any, Any]:
    """Map ``row[key]`` to ``row[text]`` for mapping or attribute rows."""
    result: Dict[Any, Any] = {}
    for row in rows:
        result[read_attribute(row, key)] = read_attribute(row, text)
    return result


def read_attribute(row: Any, name: str) -> Any:
    if isinstance(row, Mapping):
        return row.get(name)
    return getattr(row, name, None)
