"""adminkit - server-rendered admin form widgets."""

from __future__ import annotations

__version__ = "0.3.0"
