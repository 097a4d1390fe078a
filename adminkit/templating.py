"""Shared Jinja2 environment for fields and widgets."""

from __future__ import annotations

import logging
from typing import Any, Dict, Optional

from jinja2 import Environment, FileSystemLoader, TemplateNotFound, select_autoescape
from markupsafe import Markup

from .exceptions import TemplateRenderError
from .utils.paths import get_template_directory

logger = logging.getLogger(__name__)

_environment: Optional[Environment] = None


def create_environment(template_dir: Optional[str] = None) -> Environment:
    """Build an environment over the package templates (plus an optional override directory)."""
    search_path = [get_template_directory()]
    if template_dir:
        search_path.insert(0, get_template_directory(template_dir))
    env = Environment(
        loader=FileSystemLoader([str(path) for path in search_path]),
        autoescape=select_autoescape(["html", "xml"]),
        trim_blocks=True,
        lstrip_blocks=True,
    )
    # ids and labels from model sources may be UUIDs or Decimals
    env.policies["json.dumps_kwargs"] = {"sort_keys": True, "default": str}
    logger.debug("Template search path: %s", search_path)
    return env


def get_environment() -> Environment:
    global _environment
    if _environment is None:
        from .context import get_admin_context

        _environment = create_environment(get_admin_context().settings.template_dir)
    return _environment


def reset_environment() -> None:
    global _environment
    _environment = None


def render_template(name: str, context: Dict[str, Any], env: Optional[Environment] = None) -> Markup:
    """Render ``name`` and mark the output safe for embedding in other templates."""
    env = env or get_environment()
    try:
        template = env.get_template(name)
    except TemplateNotFound as exc:
        raise TemplateRenderError(f"Template '{name}' not found", details={"template": name}, cause=exc) from exc
    return Markup(template.render(**context))
