"""Form and field classes."""

from .field import Field
from .form import Form
from .select_table import SelectTableField

__all__ = ["Field", "Form", "SelectTableField"]
