"""Error handling for the adminkit render server.

Errors are returned as JSON for API callers and as an alert fragment for
HTMX requests, which swap the response straight into the dialog body.
"""

from __future__ import annotations

import logging
import uuid
from typing import Any, Dict, List

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.responses import HTMLResponse, JSONResponse, Response
from markupsafe import escape
from starlette.exceptions import HTTPException as StarletteHTTPException
from starlette.middleware.base import BaseHTTPMiddleware

from ...exceptions import AdminKitError

logger = logging.getLogger(__name__)

UNPROCESSABLE_STATUS = 422


class RequestIdMiddleware(BaseHTTPMiddleware):
    """Attach a correlation id to every request and response."""

    async def dispatch(self, request: Request, call_next):
        request_id = request.headers.get("X-Request-ID", str(uuid.uuid4()))
        request.state.request_id = request_id
        response = await call_next(request)
        response.headers["X-Request-ID"] = request_id
        return response


def _is_htmx(request: Request) -> bool:
    return request.headers.get("HX-Request") == "true"


def _request_id(request: Request) -> str:
    return getattr(request.state, "request_id", None) or str(uuid.uuid4())


def setup_error_handlers(app: FastAPI) -> None:
    """Setup error handlers for the FastAPI application.

    Args:
        app: FastAPI application instance
    """

    @app.exception_handler(AdminKitError)
    async def adminkit_exception_handler(request: Request, exc: AdminKitError) -> Response:
        request_id = _request_id(request)
        log = logger.error if exc.status_code >= 500 else logger.warning
        log(
            f"{type(exc).__name__} in request {request_id}: {exc.message}",
            extra={"request_id": request_id, "path": request.url.path, "status_code": exc.status_code},
        )

        if _is_htmx(request):
            return HTMLResponse(content=_get_htmx_error_html(exc.status_code, exc.message), status_code=exc.status_code)

        content = exc.to_dict()
        content["request_id"] = request_id
        return JSONResponse(status_code=exc.status_code, content=content)

    @app.exception_handler(StarletteHTTPException)
    async def http_exception_handler(request: Request, exc: StarletteHTTPException) -> Response:
        """Handle HTTP exceptions."""
        request_id = _request_id(request)

        logger.warning(
            f"HTTP exception in request {request_id}: {exc.status_code} - {exc.detail}",
            extra={"request_id": request_id, "path": request.url.path, "status_code": exc.status_code},
        )

        if _is_htmx(request):
            return HTMLResponse(content=_get_htmx_error_html(exc.status_code, str(exc.detail)), status_code=exc.status_code)
        return JSONResponse(
            status_code=exc.status_code,
            content={"error": exc.detail, "status_code": exc.status_code, "request_id": request_id},
        )

    @app.exception_handler(RequestValidationError)
    async def validation_exception_handler(request: Request, exc: RequestValidationError) -> Response:
        """Handle validation errors."""
        request_id = _request_id(request)

        errors = []
        for error in exc.errors():
            field_name = ".".join(str(loc) for loc in error["loc"])
            errors.append({"field": field_name, "message": error["msg"], "type": error["type"]})

        logger.warning(
            f"Validation error in request {request_id}: {errors}", extra={"request_id": request_id, "path": request.url.path}
        )

        if _is_htmx(request):
            return HTMLResponse(content=_get_validation_error_html(errors), status_code=UNPROCESSABLE_STATUS)
        return JSONResponse(
            status_code=UNPROCESSABLE_STATUS,
            content={"error": "Validation failed", "errors": errors, "request_id": request_id},
        )


def _get_htmx_error_html(status_code: int, message: str) -> str:
    severity = "danger" if status_code >= 500 else "warning"
    return (
        f'<div class="alert alert-{severity}" role="alert">'
        f"<strong>Error {status_code}:</strong> {escape(message)}"
        "</div>"
    )


def _get_validation_error_html(errors: List[Dict[str, Any]]) -> str:
    items = "".join(f"<li><strong>{escape(error['field'])}:</strong> {escape(error['message'])}</li>" for error in errors)
    return (
        '<div class="alert alert-danger" role="alert">'
        f'<strong>Validation Error:</strong><ul class="mb-0">{items}</ul>'
        "</div>"
    )


def setup_error_middleware(app: FastAPI) -> None:
    """Setup error handling middleware for the application.

    Args:
        app: FastAPI application instance
    """
    app.add_middleware(RequestIdMiddleware)
    setup_error_handlers(app)
    logger.debug("Error handling middleware configured")
