"""Modal dialog wrapping an asynchronously loaded table."""

from __future__ import annotations

import logging
from typing import Optional

from markupsafe import Markup

from ..renderable import LazyRenderable
from .async_table import AsyncTable
from .widget import Widget

logger = logging.getLogger(__name__)


class DialogTable(Widget):
    """A trigger button that opens a modal containing an ``AsyncTable``.

    The table is not loaded with the page; it is fetched the first time
    the dialog is shown.
    """

    template = "widgets/dialog_table.html"
    id_prefix = "dialog-table"

    DEFAULT_WIDTH = "825px"

    def __init__(self, title: Optional[str] = None, table: Optional[LazyRenderable] = None):
        super().__init__()
        self._title = title or ""
        self._width = self.DEFAULT_WIDTH
        self._button: Markup = Markup("")
        self._footer: Markup = Markup("")
        self._table: Optional[AsyncTable] = None
        self.from_(table)

    @classmethod
    def make(cls, title: Optional[str] = None, table: Optional[LazyRenderable] = None) -> "DialogTable":
        return cls(title, table)

    def title(self, title: str) -> "DialogTable":
        self._title = title
        return self

    def width(self, width: str) -> "DialogTable":
        self._width = width
        return self

    def button(self, html) -> "DialogTable":
        self._button = Markup(html)
        return self

    def footer(self, html) -> "DialogTable":
        self._footer = Markup(html)
        return self

    def from_(self, renderable: Optional[LazyRenderable]) -> "DialogTable":
        if renderable is None:
            return self
        self._table = AsyncTable.make(renderable).simple().load(False)
        logger.debug("Dialog %s bound to renderable %s", self.id(), renderable.renderable_name())
        return self

    def get_table(self) -> Optional[AsyncTable]:
        return self._table

    def render(self) -> Markup:
        self.add_variables(
            {
                "title": self._title,
                "width": self._width,
                "button": self._button,
                "footer": self._footer,
                "table": self._table.render() if self._table else Markup(""),
            }
        )
        return super().render()
