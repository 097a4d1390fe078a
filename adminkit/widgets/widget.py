"""Base class for template-backed widgets."""

from __future__ import annotations

import secrets
from typing import Any, Dict, Optional

from markupsafe import Markup

from ..templating import render_template


class Widget:
    """A template plus the variables it renders with."""

    template: str = ""
    id_prefix: str = "widget"

    def __init__(self):
        self._id = f"{self.id_prefix}-{secrets.token_hex(4)}"
        self._variables: Dict[str, Any] = {}

    def id(self, value: Optional[str] = None):
        """Get the element id, or set it when ``value`` is given."""
        if value is None:
            return self._id
        self._id = value
        return self

    def get_element_selector(self) -> str:
        return f"#{self._id}"

    def add_variables(self, variables: Dict[str, Any]) -> "Widget":
        self._variables.update(variables)
        return self

    def variables(self) -> Dict[str, Any]:
        return {**self._variables, "id": self._id}

    def render(self) -> Markup:
        return render_template(self.template, self.variables())
