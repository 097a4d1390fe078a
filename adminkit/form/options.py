"""Option providers: a fixed mapping, or a callback resolved at render time."""

from __future__ import annotations

from collections.abc import Mapping
from typing import TYPE_CHECKING, Any, Callable, List

from ..helpers.arrays import loosely_equal, to_pairs

if TYPE_CHECKING:  # pragma: no cover - imported for type checking only
    from .field import Field

OptionsCallback = Callable[[List[Any], "Field"], Any]


class OptionsProvider:
    def resolve(self, values: List[Any], field: "Field") -> Any:
        raise NotImplementedError


class StaticOptions(OptionsProvider):
    def __init__(self, options: Any):
        self.options = options if options is not None else {}

    def resolve(self, values, field):
        return self.options


class CallbackOptions(OptionsProvider):
    """Calls ``callback(values, field)`` with the normalised current values."""

    def __init__(self, callback: OptionsCallback):
        self.callback = callback

    def resolve(self, values, field):
        return self.callback(values, field)


def make_provider(options: Any) -> OptionsProvider:
    if isinstance(options, OptionsProvider):
        return options
    if callable(options) and not isinstance(options, Mapping):
        return CallbackOptions(options)
    return StaticOptions(options)


def select_options(options: Any, values: List[Any]) -> List[dict]:
    """Return ``{"id", "label"}`` entries for the options whose id is among ``values``.

    Entries follow the order of ``options``; ``None`` values never match.
    """
    selected = []
    for option_id, label in to_pairs(options):
        for value in values:
            if value is not None and loosely_equal(value, option_id):
                selected.append({"id": value, "label": label})
    return selected
