"""
HTTP server entry point.

Run with:
    python -m src.codewave.server                       # 0.0.0.0:3000
    python -m src.codewave.server --port 8080 --reload  # Development mode
"""

import argparse
import os

import uvicorn

from src.codewave.core.config import get_settings
from src.codewave.core.logging import get_logger, setup_logging

logger = get_logger(__name__)

DEFAULT_PORT = 3000


def parse_args(argv: list[str] | None = None) -> argparse.Namespace:
    """Parse CLI arguments for the HTTP server."""
    parser = argparse.ArgumentParser(description="Codewave static site hosting server")
    parser.add_argument("--host", default="0.0.0.0", help="Interface to bind (default: 0.0.0.0)")
    parser.add_argument(
        "--port",
        type=int,
        default=int(os.environ.get("PORT", DEFAULT_PORT)),
        help=f"Port to listen on (default: $PORT or {DEFAULT_PORT})",
    )
    parser.add_argument("--reload", action="store_true", help="Reload on code changes")
    return parser.parse_args(argv)


def main(argv: list[str] | None = None) -> None:
    args = parse_args(argv)
    settings = get_settings()
    setup_logging(settings.debug)

    logger.info(f"Starting HTTP server on {args.host}:{args.port}")
    uvicorn.run(
        "src.codewave.main:app",
        host=args.host,
        port=args.port,
        reload=args.reload,
        log_level="debug" if settings.debug else "info",
    )


if __name__ == "__main__":
    main()
