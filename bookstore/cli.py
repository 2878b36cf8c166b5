"""
CLI entry point for the bookstore service.

Usage:
    # Start the HTTP server (port from PORT unless overridden)
    python -m bookstore.cli serve --port 8080

    # Create the tables and exit
    python -m bookstore.cli init-db
"""

import argparse
import logging
import sys

from bookstore.core.config import get_settings
from bookstore.domain.errors import PersistenceError
from bookstore.infrastructure.database import build_engine, init_schema
from bookstore.shared.logging import configure_logging

logger = logging.getLogger(__name__)


def cmd_serve(args: argparse.Namespace) -> None:
    """Run the API under uvicorn.

    On SIGINT/SIGTERM uvicorn stops accepting connections and gives
    in-flight requests ``shutdown_timeout_seconds`` to finish.
    """
    import uvicorn

    settings = get_settings()
    port = args.port or settings.port
    host = args.host or settings.host
    logger.info("Server starts on port %d", port)
    uvicorn.run(
        "bookstore.main:create_app",
        factory=True,
        host=host,
        port=port,
        timeout_graceful_shutdown=settings.shutdown_timeout_seconds,
        log_config=None,
    )


def cmd_init_db(args: argparse.Namespace) -> None:
    """Create the books and users tables if they are missing."""
    settings = get_settings()
    engine = build_engine(settings)
    try:
        init_schema(engine)
    except PersistenceError:
        logger.error("Error Database Init Failed")
        sys.exit(1)
    finally:
        engine.dispose()


def main(argv: list[str] | None = None) -> None:
    parser = argparse.ArgumentParser(description="Bookstore API CLI")
    subparsers = parser.add_subparsers(dest="command", required=True)

    serve_parser = subparsers.add_parser("serve", help="Start the HTTP server")
    serve_parser.add_argument(
        "--port", type=int, default=None,
        help="Port to listen on (default: PORT setting)",
    )
    serve_parser.add_argument(
        "--host", default=None,
        help="Interface to bind (default: HOST setting)",
    )
    serve_parser.set_defaults(func=cmd_serve)

    init_parser = subparsers.add_parser("init-db", help="Create database tables")
    init_parser.set_defaults(func=cmd_init_db)

    args = parser.parse_args(argv)
    configure_logging(level=get_settings().log_level)
    args.func(args)


if __name__ == "__main__":
    main()
