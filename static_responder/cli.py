"""
Run the static route responder.

Usage:
    python -m static_responder              # FastAPI/uvicorn
    python -m static_responder --stdlib     # stdlib http.server
"""
from __future__ import annotations

import argparse
import logging
import sys
from typing import Optional, Sequence

import uvicorn
from pydantic import ValidationError

from . import server
from .config import Settings, load_settings, setup_logging
from .main import create_app
from .routes import build_route_table
from .table import DuplicateRouteError

logger = logging.getLogger(__name__)


def parse_args(argv: Optional[Sequence[str]] = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(prog="static-responder", description=__doc__.splitlines()[1])
    parser.add_argument("--stdlib", action="store_true", help="serve with http.server instead of uvicorn")
    parser.add_argument("--host", help="bind address (overrides HOST)")
    parser.add_argument("--port", type=int, help="listen port (overrides PORT)")
    return parser.parse_args(argv)


def serve(settings: Settings) -> None:
    table = build_route_table()
    logger.info("Loaded %d routes", len(table))
    if settings.server == "stdlib":
        server.run(table, settings.host, settings.port)
        return
    logger.info("Server is running on port %s", settings.port)
    uvicorn.run(
        create_app(table),
        host=settings.host,
        port=settings.port,
        log_level=settings.log_level.lower(),
    )


def main(argv: Optional[Sequence[str]] = None) -> int:
    args = parse_args(argv)
    try:
        settings = load_settings()
        overrides = {}
        if args.stdlib:
            overrides["server"] = "stdlib"
        if args.host:
            overrides["host"] = args.host
        if args.port is not None:
            overrides["port"] = args.port
        if overrides:
            settings = Settings(**{**settings.model_dump(), **overrides})
    except ValidationError as exc:
        setup_logging()
        logger.error("Invalid configuration: %s", exc)
        return 1

    setup_logging(settings.log_level)
    try:
        serve(settings)
    except DuplicateRouteError as exc:
        logger.error("Route table is invalid: %s", exc)
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())
