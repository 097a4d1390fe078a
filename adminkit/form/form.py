"""Ordered collection of fields rendered as one HTML form."""

from __future__ import annotations

import logging
from typing import Any, Dict, List, Mapping, Optional

from markupsafe import Markup

from ..templating import render_template
from .field import Field

logger = logging.getLogger(__name__)


class Form:
    template = "form/form.html"

    def __init__(self, action: str = "", method: str = "POST"):
        self.action = action
        self.method = method
        self._fields: List[Field] = []
        self._data: Dict[str, Any] = {}

    def push_field(self, field: Field) -> Field:
        field.form = self
        self._fields.append(field)
        return field

    def fields(self) -> List[Field]:
        return list(self._fields)

    def field(self, column: str) -> Optional[Field]:
        for field in self._fields:
            if field.column == column:
                return field
        return None

    def fill(self, data: Mapping[str, Any]) -> "Form":
        self._data = dict(data)
        for field in self._fields:
            field.fill(self._data)
        return self

    def values(self) -> Dict[str, Any]:
        return dict(self._data)

    def render(self) -> Markup:
        logger.debug("Rendering form with %d fields", len(self._fields))
        return render_template(
            self.template,
            {
                "action": self.action,
                "method": self.method,
                "fields": [field.render() for field in self._fields],
            },
        )
