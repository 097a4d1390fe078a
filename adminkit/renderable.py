"""Lazily rendered content fetched by the browser after the page loads."""

from __future__ import annotations

import json
import logging
from collections.abc import Mapping
from typing import Any, Callable, Dict, List, Optional, Sequence, Type, TypeVar

from markupsafe import Markup

from .context import get_admin_context
from .exceptions import InvalidPayloadError, RenderableNotFoundError
from .services.model_source import read_attribute
from .templating import render_template

logger = logging.getLogger(__name__)

RENDER_ROUTE = "api/render"

R = TypeVar("R", bound="LazyRenderable")


class RenderableRegistry:
    """Name to class mapping used by the render endpoint."""

    def __init__(self):
        self._renderables: Dict[str, Type["LazyRenderable"]] = {}

    def register(self, name: Optional[str] = None) -> Callable[[Type[R]], Type[R]]:
        def decorator(cls: Type[R]) -> Type[R]:
            key = name or cls.renderable_name()
            if key in self._renderables and self._renderables[key] is not cls:
                logger.warning("Renderable '%s' re-registered by %s", key, cls.__qualname__)
            cls.name = key
            self._renderables[key] = cls
            return cls

        return decorator

    def get(self, name: str) -> Type["LazyRenderable"]:
        try:
            return self._renderables[name]
        except KeyError:
            raise RenderableNotFoundError(name) from None

    def unregister(self, name: str) -> None:
        self._renderables.pop(name, None)

    def __contains__(self, name: str) -> bool:
        return name in self._renderables


registry = RenderableRegistry()


class LazyRenderable:
    """Content rendered by a separate request carrying a JSON payload."""

    ROW_SELECTOR_COLUMN_NAME = "_row_"

    name: Optional[str] = None

    def __init__(self, payload: Optional[Mapping[str, Any]] = None):
        self._payload: Dict[str, Any] = dict(payload or {})

    @classmethod
    def renderable_name(cls) -> str:
        return cls.name or f"{cls.__module__}.{cls.__qualname__}"

    def payload(self, payload: Mapping[str, Any]) -> "LazyRenderable":
        self._payload.update(payload)
        return self

    def get_payload(self) -> Dict[str, Any]:
        return dict(self._payload)

    def get_url(self) -> str:
        query = {"renderable": self.renderable_name()}
        if self._payload:
            query["payload"] = json.dumps(self._payload, separators=(",", ":"), default=str)
        return get_admin_context().urls.url(RENDER_ROUTE, query)

    def render(self) -> Markup:
        raise NotImplementedError


class TableRenderable(LazyRenderable):
    """Renders ``rows()`` as a table whose rows can be picked in a dialog.

    When the row selector payload is present every row is tagged with
    ``data-id`` and ``data-label`` read from the requested key and visible
    columns, which is what the dialog reports back on submit.
    """

    multiple = False

    def columns(self) -> Sequence[str]:
        raise NotImplementedError

    def rows(self) -> List[Any]:
        raise NotImplementedError

    def column_label(self, column: str) -> str:
        return column.replace("_", " ").title()

    def row_selector(self) -> Optional[List[Any]]:
        selector = self._payload.get(self.ROW_SELECTOR_COLUMN_NAME)
        if not selector:
            return None
        if (
            not isinstance(selector, (list, tuple))
            or len(selector) != 2
            or not all(part is None or isinstance(part, str) for part in selector)
        ):
            raise InvalidPayloadError(
                "Row selector must be a [key, label] pair of column names",
                details={self.ROW_SELECTOR_COLUMN_NAME: selector},
            )
        key, visible = selector
        return [key or "id", visible]

    def render(self) -> Markup:
        columns = list(self.columns())
        selector = self.row_selector()
        rows = []
        for row in self.rows():
            cells = [read_attribute(row, column) for column in columns]
            entry: Dict[str, Any] = {"cells": cells}
            if selector:
                key, visible = selector
                entry["id"] = read_attribute(row, key)
                entry["label"] = read_attribute(row, visible) if visible else entry["id"]
            rows.append(entry)

        translator = get_admin_context().translator
        return render_template(
            "widgets/table.html",
            {
                "headers": [self.column_label(column) for column in columns],
                "rows": rows,
                "selectable": selector is not None,
                "multiple": self.multiple,
                "no_data": translator.trans("admin.no_data"),
            },
        )
