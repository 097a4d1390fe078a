"""Form field that picks rows from a table shown in a modal dialog."""

from __future__ import annotations

import logging
from typing import Any, Dict, Iterable, List, Optional, Tuple

from markupsafe import Markup

from ..context import get_admin_context
from ..exceptions import ConfigurationError
from ..helpers.arrays import to_list
from ..renderable import LazyRenderable
from ..services.model_source import ModelSource
from ..services.model_source import pluck as pluck_rows
from ..templating import render_template
from ..widgets.dialog_table import DialogTable
from .field import Field
from .options import OptionsProvider, StaticOptions, make_provider, select_options

logger = logging.getLogger(__name__)

# Separator for the batched cascading-load transport strings.
LOADS_SEPARATOR = "^"

ICON = Markup('<i class="feather icon-arrow-up"></i>')


class SelectTableField(Field):
    """Read-only text control whose value is chosen from a dialog table.

    The dialog is created with the field and is never shared. Selected
    ids are posted in a hidden input; their labels are looked up through
    ``options`` (or ``model``) so a pre-filled form shows readable text.

    Example::

        SelectTableField("user_id", "User")
            .title("Pick a user")
            .from_(UserTable())
            .model(users, id="id", text="name")
            .load("team_id", "api/teams")
    """

    template = "form/select_table.html"

    DEFAULT_STYLE = "primary"

    def __init__(self, column: str, label: Optional[str] = None):
        super().__init__(column, label)
        self.dialog = DialogTable.make(self.label)
        self._style = self.DEFAULT_STYLE
        self.visible_column: Optional[str] = None
        self.key: Optional[str] = None
        self._provider: OptionsProvider = StaticOptions({})
        self._resolved: Optional[Tuple[Tuple[str, ...], List[Dict[str, Any]]]] = None

    # Dialog configuration

    def title(self, title: str) -> "SelectTableField":
        self.dialog.title(title)
        return self

    def dialog_width(self, width: str) -> "SelectTableField":
        """Set the dialog width, e.g. ``"500px"`` or ``"50%"``."""
        self.dialog.width(width)
        return self

    def from_(self, renderable: LazyRenderable) -> "SelectTableField":
        self.dialog.from_(renderable)
        return self

    def style(self, style: str) -> "SelectTableField":
        self._style = style
        return self

    # Selection

    def pluck(self, visible_column: Optional[str], key: Optional[str] = "id") -> "SelectTableField":
        self.visible_column = visible_column
        self.key = key
        return self

    def options(self, options: Any = None) -> "SelectTableField":
        """Set a static ``{id: label}`` mapping or a ``callback(values, field)``."""
        self._provider = make_provider(options if options is not None else {})
        self._resolved = None
        return self

    def model(self, source: ModelSource, id: str = "id", text: str = "title") -> "SelectTableField":
        def resolve(values, field):
            if not values:
                return {}
            return pluck_rows(source.find(values), text, id)

        return self.pluck(text, id).options(resolve)

    # Cascading loads

    def load(self, field: str, source_url: str, id_field: str = "id", text_field: str = "text") -> "SelectTableField":
        """Reload ``field`` from ``source_url`` whenever the selection changes."""
        if "." in field:
            field = self.format_name(field)

        self.add_variables(
            {
                "load": {
                    "url": get_admin_context().urls.url(source_url),
                    "class": self.normalize_element_class(field),
                    "idField": id_field,
                    "textField": text_field,
                }
            }
        )
        return self

    def loads(
        self,
        fields: Iterable[str] = (),
        source_urls: Iterable[str] = (),
        id_field: str = "id",
        text_field: str = "text",
    ) -> "SelectTableField":
        fields = [fields] if isinstance(fields, str) else list(fields)
        source_urls = [source_urls] if isinstance(source_urls, str) else list(source_urls)
        urls = get_admin_context().urls

        classes = []
        for field in fields:
            css_class = self.normalize_element_class(field)
            # nested fields carry the trailing "_" their element class ends with
            classes.append(css_class + "_" if "." in field else css_class)

        self.add_variables(
            {
                "loads": {
                    "fields": LOADS_SEPARATOR.join(classes),
                    "urls": LOADS_SEPARATOR.join(urls.url(url) for url in source_urls),
                    "idField": id_field,
                    "textField": text_field,
                }
            }
        )
        return self

    # Rendering

    def format_options(self) -> List[Dict[str, Any]]:
        """Resolve the options once per value and keep those matching it."""
        values = to_list(self.value())
        cache_key = tuple(str(value) for value in values)
        if self._resolved is None or self._resolved[0] != cache_key:
            options = self._provider.resolve(values, self)
            selected = select_options(options, values)
            self._resolved = (cache_key, selected)
            logger.debug("Resolved %d selected option(s) for '%s'", len(selected), self.column)
        self._options = self._resolved[1]
        return self._options

    def render_button(self) -> Markup:
        return render_template("widgets/dialog_table_button.html", {"style": self._style, "icon": ICON})

    def render_footer(self) -> Markup:
        translator = get_admin_context().translator
        return render_template(
            "widgets/dialog_table_footer.html",
            {"submit": translator.trans("admin.submit"), "cancel": translator.trans("admin.cancel")},
        )

    def set_up_table(self) -> None:
        self.dialog.footer(self.render_footer()).button(self.render_button())

        table = self.dialog.get_table()
        if table is None:
            raise ConfigurationError(
                f"SelectTableField '{self.column}' has no table source; call from_() before rendering",
                details={"column": self.column},
            )
        # tells the table which row fields to report back on selection
        table.get_renderable().payload({LazyRenderable.ROW_SELECTOR_COLUMN_NAME: [self.key, self.visible_column]})

    def render(self) -> Markup:
        self.set_up_table()
        self.format_options()

        self.prepend(ICON)
        self.default_attribute("class", f"form-control {self.get_element_class_string()}")
        self.default_attribute("type", "text")
        self.default_attribute("name", self.get_element_name())

        self.add_variables(
            {
                "prepend": self._prepend,
                "append": self._append,
                "style": self._style,
                "dialog": self.dialog.render(),
                "placeholder": self.placeholder(),
                "dialogSelector": self.dialog.get_element_selector(),
                "hidden_value": ",".join(str(value) for value in to_list(self.value())),
            }
        )
        return super().render()
