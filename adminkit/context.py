"""Process-wide defaults for the services fields and widgets depend on."""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import Optional

from .config import AdminSettings
from .services.translation_service import Translator
from .services.url_service import AdminUrlBuilder

logger = logging.getLogger(__name__)


@dataclass
class AdminContext:
    settings: AdminSettings = field(default_factory=AdminSettings)
    urls: Optional[AdminUrlBuilder] = None
    translator: Optional[Translator] = None

    def __post_init__(self):
        if self.urls is None:
            self.urls = AdminUrlBuilder(self.settings.route_prefix, self.settings.base_url)
        if self.translator is None:
            self.translator = Translator(self.settings.locale)


_context: Optional[AdminContext] = None


def get_admin_context() -> AdminContext:
    global _context
    if _context is None:
        _context = AdminContext(settings=AdminSettings.from_env())
        logger.debug("Admin context initialised with prefix '%s'", _context.settings.route_prefix)
    return _context


def set_admin_context(context: Optional[AdminContext]) -> None:
    """Replace the process context; ``None`` re-reads the environment on next use."""
    global _context
    _context = context
    from .templating import reset_environment

    reset_environment()
