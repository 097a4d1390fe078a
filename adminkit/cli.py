"""Command line entry point for the adminkit render server."""

from __future__ import annotations

import argparse
import logging
import os
from typing import List, Optional

import uvicorn

from .config import AdminSettings

logger = logging.getLogger(__name__)

# Import string uvicorn needs to rebuild the app in its reload worker.
APP_FACTORY = "adminkit.server:create_app"


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="adminkit-server", description="Serve adminkit dialog tables")
    parser.add_argument("--host", default="127.0.0.1", help="Interface to bind (default: %(default)s)")
    parser.add_argument("--port", type=int, default=8000, help="Port to bind (default: %(default)s)")
    parser.add_argument("--prefix", default=None, help="Admin route prefix (overrides ADMINKIT_ROUTE_PREFIX)")
    parser.add_argument("--log-level", default=None, help="Log level (overrides ADMINKIT_LOG_LEVEL)")
    parser.add_argument("--reload", action="store_true", help="Restart the server when source files change")
    return parser


def main(argv: Optional[List[str]] = None) -> int:
    args = build_parser().parse_args(argv)

    settings = AdminSettings.from_env()
    if args.prefix is not None:
        settings.route_prefix = args.prefix
    if args.log_level is not None:
        settings.log_level = args.log_level.upper()

    logger.info("Starting adminkit server on %s:%s", args.host, args.port)
    if args.reload:
        # the reload worker builds its own app, so overrides travel through the environment
        os.environ["ADMINKIT_ROUTE_PREFIX"] = settings.route_prefix
        os.environ["ADMINKIT_LOG_LEVEL"] = settings.log_level
        uvicorn.run(
            APP_FACTORY,
            factory=True,
            reload=True,
            host=args.host,
            port=args.port,
            log_level=settings.log_level.lower(),
        )
        return 0

    from .server import create_app

    app = create_app(settings)
    uvicorn.run(app, host=args.host, port=args.port, log_level=settings.log_level.lower())
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
