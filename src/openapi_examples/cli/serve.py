"""CLI entry point for running the API under uvicorn."""

import argparse
import logging
import sys
from datetime import datetime, timezone
from pathlib import Path
from typing import Optional

import uvicorn
from dotenv import load_dotenv

from openapi_examples.config import get_settings
from openapi_examples.docs import DocumentationSourceError
from openapi_examples.main import create_app


def setup_logging(level: str = "INFO", log_dir: Optional[Path] = None) -> None:
    """Configure logging for the server.

    Args:
        level: Logging level (DEBUG, INFO, WARNING, ERROR)
        log_dir: Directory for a timestamped log file; stdout only when omitted
    """
    handlers: list[logging.Handler] = [logging.StreamHandler(sys.stdout)]
    log_file = None
    if log_dir is not None:
        log_dir.mkdir(parents=True, exist_ok=True)
        timestamp = datetime.now(timezone.utc).strftime("%Y%m%d_%H%M%S")
        log_file = log_dir / f"openapi_examples_{timestamp}.log"
        handlers.append(logging.FileHandler(log_file))

    logging.basicConfig(
        level=getattr(logging, level.upper()),
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
        handlers=handlers,
    )

    if log_file is not None:
        logging.getLogger(__name__).info("Logging initialised. Log file: %s", log_file)


def parse_args(argv: Optional[list[str]] = None) -> argparse.Namespace:
    settings = get_settings()
    parser = argparse.ArgumentParser(description="Run the OpenAPI examples web API")
    parser.add_argument("--host", default=settings.host, help=f"Host to bind to (default: {settings.host})")
    parser.add_argument("--port", type=int, default=settings.port, help=f"Port to bind to (default: {settings.port})")
    parser.add_argument("--reload", action="store_true", help="Enable auto-reload for development")
    parser.add_argument("--log-level", default=settings.log_level, help="Logging level (default: INFO)")
    parser.add_argument("--log-dir", type=Path, default=None, help="Also write logs to a file in this directory")
    return parser.parse_args(argv)


def main(argv: Optional[list[str]] = None) -> int:
    load_dotenv()
    args = parse_args(argv)
    setup_logging(args.log_level, args.log_dir)
    logger = logging.getLogger(__name__)

    # Throwaway build: a broken documentation source fails here, before binding.
    # uvicorn builds its own instance through the factory below.
    try:
        create_app()
    except DocumentationSourceError as exc:
        logger.error("Startup failed: %s", exc)
        return 1

    logger.info("Starting server on %s:%s", args.host, args.port)
    uvicorn.run(
        "openapi_examples.main:create_app",
        factory=True,
        host=args.host,
        port=args.port,
        reload=args.reload,
        log_level=args.log_level.lower(),
    )
    return 0


if __name__ == "__main__":
    sys.exit(main())
