"""Path utilities for adminkit."""

from __future__ import annotations

from pathlib import Path
from typing import Optional, Union


def get_package_root() -> Path:
    """Return the directory of the installed ``adminkit`` package."""
    import adminkit

    return Path(adminkit.__file__).parent


def get_template_directory(override: Optional[Union[str, Path]] = None) -> Path:
    """Get the template directory.

    Args:
        override: Optional directory that takes precedence over the packaged templates

    Returns:
        Path to the templates directory
    """
    if override:
        return Path(override).expanduser()
    return get_package_root() / "templates"
