"""Endpoint that renders lazy renderables for dialog tables."""

from __future__ import annotations

import json
import logging
from typing import Optional

from fastapi import APIRouter, Query
from fastapi.responses import HTMLResponse

from ...exceptions import InvalidPayloadError
from ...renderable import registry

logger = logging.getLogger(__name__)


def create_router(prefix: str) -> APIRouter:
    """Build the render router beneath the admin route prefix."""
    prefix = "/" + prefix.strip("/")
    router = APIRouter(prefix="" if prefix == "/" else prefix, tags=["render"])

    @router.get("/api/render", response_class=HTMLResponse)
    async def render_renderable(
        renderable: str = Query(..., description="Registered renderable name"),
        payload: Optional[str] = Query(None, description="JSON object applied as the renderable payload"),
    ) -> HTMLResponse:
        renderable_cls = registry.get(renderable)

        data = {}
        if payload:
            try:
                data = json.loads(payload)
            except ValueError as exc:
                raise InvalidPayloadError("Payload is not valid JSON", cause=exc) from exc
            if not isinstance(data, dict):
                raise InvalidPayloadError("Payload must be a JSON object", details={"type": type(data).__name__})

        logger.debug("Rendering %s with payload keys %s", renderable, sorted(data))
        instance = renderable_cls()
        instance.payload(data)
        return HTMLResponse(content=str(instance.render()))

    return router
