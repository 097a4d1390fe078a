"""Base form field.

A field owns one column of the form data. It tracks the column's value,
the HTML attributes of its control and any extra template variables, and
renders itself through a Jinja2 template.
"""

from __future__ import annotations

import logging
from collections.abc import Mapping
from typing import TYPE_CHECKING, Any, Dict, List, Optional

from markupsafe import Markup

from ..context import get_admin_context
from ..templating import render_template

if TYPE_CHECKING:  # pragma: no cover - imported for type checking only
    from .form import Form

logger = logging.getLogger(__name__)

_UNSET = object()


class Field:
    """Single input of an admin form."""

    template = "form/input.html"

    def __init__(self, column: str, label: Optional[str] = None):
        self.column = column
        self.label = label if label is not None else self.format_label(column)
        self.form: Optional["Form"] = None
        self._options: Any = {}
        self._value: Any = None
        self._default: Any = None
        self._attributes: Dict[str, Any] = {}
        self._variables: Dict[str, Any] = {}
        self._prepend: Optional[Markup] = None
        self._append: Optional[Markup] = None
        self._placeholder: Optional[str] = None
        self._help: Optional[str] = None
        self._required = False
        self._errors: List[str] = []
        self._element_name: Optional[str] = None

    @staticmethod
    def format_label(column: str) -> str:
        return column.replace("->", " ").replace(".", " ").replace("_", " ").strip().title()

    # Values

    def fill(self, data: Mapping[str, Any]) -> "Field":
        """Read this field's value from ``data``, following dotted columns into nested mappings."""
        current: Any = data
        for piece in self.column.replace("->", ".").split("."):
            if not isinstance(current, Mapping) or piece not in current:
                current = None
                break
            current = current[piece]
        self._value = current
        return self

    def value(self, value: Any = _UNSET):
        """Return the current value (falling back to the default), or set it."""
        if value is _UNSET:
            return self._default if self._value is None else self._value
        self._value = value
        return self

    def default(self, value: Any) -> "Field":
        self._default = value
        return self

    def values(self) -> Dict[str, Any]:
        """The data of the owning form, or an empty mapping for standalone fields."""
        return self.form.values() if self.form is not None else {}

    # Attributes

    def attribute(self, name: str, value: Any) -> "Field":
        self._attributes[name] = value
        return self

    def default_attribute(self, name: str, value: Any) -> "Field":
        if name not in self._attributes:
            self._attributes[name] = value
        return self

    def get_attribute(self, name: str, default: Any = None) -> Any:
        return self._attributes.get(name, default)

    def prepend(self, html) -> "Field":
        if self._prepend is None:
            self._prepend = Markup(html)
        return self

    def append(self, html) -> "Field":
        if self._append is None:
            self._append = Markup(html)
        return self

    def placeholder(self, text: Optional[str] = None):
        """Set the placeholder, or return it (localised ``Input <label>`` by default)."""
        if text is not None:
            self._placeholder = text
            return self
        if self._placeholder is None:
            return f"{get_admin_context().translator.trans('admin.input')} {self.label}"
        return self._placeholder

    def help(self, text: str) -> "Field":
        self._help = text
        return self

    def required(self, value: bool = True) -> "Field":
        self._required = value
        return self

    def set_errors(self, messages: List[str]) -> "Field":
        self._errors = list(messages)
        return self

    # Naming

    @staticmethod
    def format_name(column: str) -> str:
        """Turn ``a.b.c`` (or ``a->b``) into the form-post name ``a[b][c]``."""
        separator = "->" if "->" in column else "."
        pieces = column.split(separator)
        if len(pieces) == 1:
            return pieces[0]
        return pieces[0] + "".join(f"[{piece}]" for piece in pieces[1:])

    @staticmethod
    def normalize_element_class(text: str) -> str:
        for token in ("[", "]", "->", "."):
            text = text.replace(token, "_")
        return text

    def set_element_name(self, name: str) -> "Field":
        self._element_name = name
        return self

    def get_element_name(self) -> str:
        return self._element_name or self.format_name(self.column)

    def get_element_class(self) -> List[str]:
        name = self._element_name or self.format_name(self.column)
        return [name.replace("[", "_").replace("]", "_")]

    def get_element_class_string(self) -> str:
        return " ".join(self.get_element_class())

    def get_element_class_selector(self) -> str:
        return "." + ".".join(self.get_element_class())

    def get_element_id(self) -> str:
        return "_".join(self.get_element_class()).strip("_") or self.column

    # Rendering

    def add_variables(self, variables: Dict[str, Any]) -> "Field":
        self._variables.update(variables)
        return self

    def default_variables(self) -> Dict[str, Any]:
        return {
            "id": self.get_element_id(),
            "name": self.get_element_name(),
            "column": self.column,
            "label": self.label,
            "value": self.value(),
            "attributes": dict(self._attributes),
            "help": self._help,
            "errors": list(self._errors),
            "required": self._required,
            "options": self._options,
            "selector": self.get_element_class_selector(),
        }

    def variables(self) -> Dict[str, Any]:
        return {**self.default_variables(), **self._variables}

    def render(self) -> Markup:
        logger.debug("Rendering %s for column '%s'", type(self).__name__, self.column)
        return render_template(self.template, self.variables())
