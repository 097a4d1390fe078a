"""
adminkit server module - FastAPI application serving lazy renderables.
"""

from .app import create_app

__all__ = ["create_app"]
