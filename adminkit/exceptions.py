"""Exception hierarchy for adminkit.

Each error maps to an HTTP status code so the render endpoint can turn it
into a response without per-route handling.
"""

from __future__ import annotations

from typing import Any, Dict, Optional


class AdminKitError(Exception):
    """Base exception for adminkit errors.

    Subclasses should set:
    - status_code: HTTP status code to return
    - error_code: Machine-readable error identifier
    """

    status_code: int = 500
    error_code: str = "adminkit_error"

    def __init__(
        self,
        message: str,
        *,
        details: Optional[Dict[str, Any]] = None,
        cause: Optional[Exception] = None,
    ):
        super().__init__(message)
        self.message = message
        self.details = details or {}
        self.cause = cause

    def to_dict(self) -> Dict[str, Any]:
        """Convert exception to a dictionary for JSON response."""
        result = {
            "error": self.error_code,
            "message": self.message,
        }
        if self.details:
            result["details"] = self.details
        return result


class RenderableNotFoundError(AdminKitError):
    """No lazy renderable is registered under the requested name."""

    status_code = 404
    error_code = "renderable_not_found"

    def __init__(self, name: str):
        super().__init__(f"Renderable '{name}' is not registered", details={"renderable": name})
        self.name = name


class InvalidPayloadError(AdminKitError):
    """The render payload could not be decoded."""

    status_code = 400
    error_code = "invalid_payload"


class TemplateRenderError(AdminKitError):
    """A widget template failed to load or render."""

    status_code = 500
    error_code = "template_render_error"


class ConfigurationError(AdminKitError):
    """A field or widget was rendered before it was fully configured."""

    status_code = 500
    error_code = "configuration_error"
