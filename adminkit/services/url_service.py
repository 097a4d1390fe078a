"""Admin route URL builder."""

from __future__ import annotations

from typing import Any, Mapping, Optional
from urllib.parse import urlencode


class AdminUrlBuilder:
    """Build URLs beneath the admin route prefix."""

    _ABSOLUTE_PREFIXES = ("http://", "https://", "//")

    def __init__(self, prefix: str = "admin", base_url: str = ""):
        prefix = "/" + prefix.strip("/")
        self.prefix = "" if prefix == "/" else prefix
        self.base_url = base_url.rstrip("/")

    def base_path(self, path: str = "") -> str:
        """Return ``path`` joined onto the route prefix, without host."""
        path = (path or "").strip("/")
        if not path:
            return self.prefix or "/"
        return f"{self.prefix}/{path}"

    def url(self, path: str = "", query: Optional[Mapping[str, Any]] = None) -> str:
        """Return the admin URL for ``path``.

        Absolute URLs are returned untouched. Relative paths are placed
        under the route prefix and, when configured, the public base URL.
        """
        if path and path.startswith(self._ABSOLUTE_PREFIXES):
            url = path
        else:
            url = f"{self.base_url}{self.base_path(path)}"
        if query:
            separator = "&" if "?" in url else "?"
            url = f"{url}{separator}{urlencode(query)}"
        return url
