"""Table whose body is fetched from a lazy renderable."""

from __future__ import annotations

from markupsafe import Markup

from ..context import get_admin_context
from ..renderable import LazyRenderable
from .widget import Widget


class AsyncTable(Widget):
    template = "widgets/async_table.html"
    id_prefix = "async-table"

    # Fired by the dialog when it opens; deferred tables load on this event.
    SHOWN_EVENT = "dialog-table:shown"

    def __init__(self, renderable: LazyRenderable):
        super().__init__()
        self._renderable = renderable
        self._simple = False
        self._load_on_render = True

    @classmethod
    def make(cls, renderable: LazyRenderable) -> "AsyncTable":
        return cls(renderable)

    def get_renderable(self) -> LazyRenderable:
        return self._renderable

    def simple(self, value: bool = True) -> "AsyncTable":
        self._simple = value
        return self

    def load(self, value: bool = True) -> "AsyncTable":
        """Load with the page when true, otherwise wait for the dialog to open."""
        self._load_on_render = value
        return self

    def trigger(self) -> str:
        if self._load_on_render:
            return "load"
        return f"{self.SHOWN_EVENT} from:closest .modal once"

    def render(self) -> Markup:
        self.add_variables(
            {
                "url": self._renderable.get_url(),
                "trigger": self.trigger(),
                "simple": self._simple,
                "loading": get_admin_context().translator.trans("admin.loading"),
            }
        )
        return super().render()
