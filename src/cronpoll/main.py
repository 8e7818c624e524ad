"""Main entry point for cronpoll."""

import argparse
import logging
import sys
from typing import List, Optional

import uvicorn
from fastapi import FastAPI

from .api.http_server import create_app
from .config import Settings, settings as default_settings
from .scheduler import InvalidScheduleError

logger = logging.getLogger(__name__)


def configure_logging(settings: Settings):
    """Log to stderr, and to ``settings.log_file`` when one is set."""
    logging.basicConfig(
        level=getattr(logging, settings.log_level.upper()),
        format='%(asctime)s - %(name)s - %(levelname)s - %(message)s',
        handlers=[
            logging.StreamHandler(),
            logging.FileHandler(settings.log_file) if settings.log_file else logging.NullHandler()
        ]
    )


def run_http_server(app: FastAPI, settings: Settings):
    """Serve the app until the process is stopped."""
    logger.info(f"Starting HTTP server on {settings.api_host}:{settings.api_port}")

    uvicorn.run(
        app,
        host=settings.api_host,
        port=settings.api_port,
        log_level=settings.log_level.lower()
    )


def _build_parser(settings: Settings) -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="cronpoll",
        description="Poll an IP echo service on a cron schedule and serve /hello."
    )
    parser.add_argument(
        "--host",
        default=settings.api_host,
        help=f"HTTP server host (default: {settings.api_host})"
    )
    parser.add_argument(
        "--port",
        type=int,
        default=settings.api_port,
        help=f"HTTP server port (default: {settings.api_port})"
    )
    parser.add_argument(
        "--schedule",
        default=settings.schedule_expression,
        help=f"Cron expression, seconds first (default: '{settings.schedule_expression}')"
    )
    return parser


def main(argv: Optional[List[str]] = None) -> int:
    """Main entry point."""
    args = _build_parser(default_settings).parse_args(argv)

    settings = default_settings.model_copy(update={
        "api_host": args.host,
        "api_port": args.port,
        "schedule_expression": args.schedule
    })

    configure_logging(settings)

    try:
        app = create_app(settings)
    except InvalidScheduleError as e:
        logger.error(f"Fatal error: {e}")
        return 1

    try:
        run_http_server(app, settings)
    except KeyboardInterrupt:
        logger.info("Shutting down cronpoll...")
    except SystemExit as e:
        # uvicorn exits when it cannot bind or start the app
        if not e.code:
            raise
        logger.error(f"Fatal error: HTTP server failed to start on {settings.api_host}:{settings.api_port}")
        return 1

    return 0


if __name__ == "__main__":
    sys.exit(main())
