"""
Run the message board server.

Usage:
    python -m messageboard.main --host 0.0.0.0 --port 3000
"""

import argparse
from typing import Optional, Sequence

import uvicorn

from .api.app import create_app
from .utils.config import LOG_LEVELS, Settings, load_settings
from .utils.logging import LOG_FORMATS, configure_logging, get_logger

logger = get_logger(__name__)


def parse_args(argv: Optional[Sequence[str]] = None, defaults: Optional[Settings] = None) -> Settings:
    """Parse command-line flags on top of environment settings."""
    defaults = defaults or load_settings()
    parser = argparse.ArgumentParser(description="In-memory message board server")
    parser.add_argument("--host", default=defaults.host,
                        help=f"Address to bind to (default: {defaults.host})")
    parser.add_argument("--port", type=int, default=defaults.port,
                        help=f"Port to listen on (default: {defaults.port})")
    parser.add_argument("--static-dir", default=defaults.static_dir,
                        help=f"Built client directory to serve (default: {defaults.static_dir})")
    parser.add_argument("--log-level", default=defaults.log_level, choices=LOG_LEVELS,
                        type=str.upper, help=f"Logging level (default: {defaults.log_level})")
    parser.add_argument("--log-format", default=defaults.log_format, choices=LOG_FORMATS,
                        help=f"Log output format (default: {defaults.log_format})")
    args = parser.parse_args(argv)
    return Settings(
        host=args.host,
        port=args.port,
        static_dir=args.static_dir,
        log_level=args.log_level,
        log_format=args.log_format,
    )


def main(argv: Optional[Sequence[str]] = None) -> None:
    settings = parse_args(argv)
    configure_logging(settings.log_level, settings.log_format)
    logger.info("server_starting", host=settings.host, port=settings.port,
                static_dir=settings.static_dir)
    app = create_app(static_dir=settings.static_dir)
    uvicorn.run(app, host=settings.host, port=settings.port, log_config=None)


if __name__ == "__main__":
    main()
