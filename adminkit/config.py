"""Runtime settings read from the environment."""

from __future__ import annotations

import os
from dataclasses import dataclass
from typing import Optional


def _env_flag(name: str, default: str = "false") -> bool:
    return os.getenv(name, default).strip().lower() in ("1", "true", "yes", "on")


@dataclass
class AdminSettings:
    """Settings shared by URL building, translation and the render server."""

    route_prefix: str = "admin"
    base_url: str = ""
    locale: str = "en"
    template_dir: Optional[str] = None
    debug: bool = False
    log_level: str = "INFO"

    @classmethod
    def from_env(cls) -> "AdminSettings":
        return cls(
            route_prefix=os.getenv("ADMINKIT_ROUTE_PREFIX", "admin"),
            base_url=os.getenv("ADMINKIT_BASE_URL", "").rstrip("/"),
            locale=os.getenv("ADMINKIT_LOCALE", "en"),
            template_dir=os.getenv("ADMINKIT_TEMPLATE_DIR") or None,
            debug=_env_flag("ADMINKIT_DEBUG"),
            log_level=os.getenv("ADMINKIT_LOG_LEVEL", "INFO").upper(),
        )
