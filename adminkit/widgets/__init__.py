"""Reusable widgets composed by form fields."""

from .async_table import AsyncTable
from .dialog_table import DialogTable
from .widget import Widget

__all__ = ["AsyncTable", "DialogTable", "Widget"]
