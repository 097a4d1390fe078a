"""
FastAPI application factory for the adminkit render server.
"""

from __future__ import annotations

import logging
from typing import Optional

from fastapi import FastAPI

from ..config import AdminSettings
from ..context import AdminContext, get_admin_context, set_admin_context
from ..helpers.log_format import configure_logging
from .middleware.error_middleware import setup_error_middleware
from .routes.render import create_router

logger = logging.getLogger(__name__)


def create_app(settings: Optional[AdminSettings] = None) -> FastAPI:
    """
    Create the FastAPI application.

    Args:
        settings: Explicit settings; when omitted the current admin context
            (built from the environment) is used.

    Returns:
        Configured FastAPI application
    """
    if settings is not None:
        set_admin_context(AdminContext(settings=settings))
    settings = get_admin_context().settings

    configure_logging(settings.log_level)

    app = FastAPI(
        title="adminkit",
        debug=settings.debug,
        docs_url="/api/docs" if settings.debug else None,
        redoc_url=None,
    )
    app.state.settings = settings

    setup_error_middleware(app)
    app.include_router(create_router(settings.route_prefix))

    @app.get("/health")
    async def health():
        return {"status": "ok"}

    logger.info("adminkit server ready under '/%s'", settings.route_prefix.strip("/"))
    return app
