"""Services injected into fields and widgets at render time."""

from .model_source import ModelSource, pluck
from .translation_service import Translator
from .url_service import AdminUrlBuilder

__all__ = ["AdminUrlBuilder", "ModelSource", "Translator", "pluck"]
