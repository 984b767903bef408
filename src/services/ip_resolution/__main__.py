"""
IP Resolution Service - CLI Entry Point

Usage:
    python -m src.services.ip_resolution [--transport http|cli] [options]

Examples:
    # Start HTTP server (default)
    python -m src.services.ip_resolution --port 8086

    # Print the addresses once, forcing an external lookup
    python -m src.services.ip_resolution --transport cli --force

    # Refresh the console view every 10 seconds using one adapter
    python -m src.services.ip_resolution --transport cli --watch 10 --adapter Wi-Fi
"""

from __future__ import annotations

import argparse
import asyncio
import logging
import sys

from src.common.logging import configure_sanitized_logging

from .config import IpResolutionConfig
from .core.models import CacheStrategy


def setup_logging(level: str) -> None:
    """Configure logging."""
    configure_sanitized_logging(level=getattr(logging, level.upper()))


def parse_args(argv: list[str] | None = None) -> argparse.Namespace:
    """Parse command line arguments."""
    parser = argparse.ArgumentParser(
        description="IP Resolution Service",
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )

    parser.add_argument(
        "--transport",
        choices=["http", "cli"],
        default=None,
        help="Transport type (default: from config or http)",
    )

    # HTTP options
    parser.add_argument(
        "--host",
        default=None,
        help="Host to bind (default: from config or 127.0.0.1)",
    )
    parser.add_argument(
        "--port",
        type=int,
        default=None,
        help="Port to bind (default: from config or 8086)",
    )

    # Resolution options
    parser.add_argument(
        "--adapter",
        default=None,
        help="Preferred adapter (friendly or stable name)",
    )
    parser.add_argument(
        "--strategy",
        choices=[s.value for s in CacheStrategy],
        default=None,
        help="External refresh strategy",
    )
    parser.add_argument(
        "--separator",
        default=None,
        help="Separator between local and external address",
    )

    # Console options
    parser.add_argument(
        "--force",
        action="store_true",
        help="Force the first external lookup (cli transport)",
    )
    parser.add_argument(
        "--watch",
        type=float,
        default=0,
        help="Refresh every N seconds (cli transport)",
    )

    # Logging
    parser.add_argument(
        "--log-level",
        choices=["debug", "info", "warning", "error"],
        default="info",
        help="Log level (default: info)",
    )

    return parser.parse_args(argv)


def build_config(args: argparse.Namespace) -> IpResolutionConfig:
    """Build configuration from args and environment."""
    overrides = {}

    if args.transport:
        overrides["transport"] = args.transport
    if args.host:
        overrides["host"] = args.host
    if args.port:
        overrides["port"] = args.port
    if args.adapter is not None:
        overrides["preferred_adapter"] = args.adapter
    if args.strategy:
        overrides["cache_strategy"] = args.strategy
    if args.separator is not None:
        overrides["separator"] = args.separator
    if args.log_level:
        overrides["log_level"] = args.log_level.upper()

    return IpResolutionConfig(**overrides)


async def run_http(config: IpResolutionConfig) -> None:
    """Run HTTP server."""
    from .transports.http import run_http_server

    await run_http_server(config)


def run_cli(config: IpResolutionConfig, force: bool, watch: float) -> None:
    """Run console transport."""
    from .transports.console import run_console

    run_console(config, force_refresh=force, watch_seconds=watch)


def main(argv: list[str] | None = None) -> None:
    """Main entry point."""
    args = parse_args(argv)
    setup_logging(args.log_level)

    config = build_config(args)
    logger = logging.getLogger(__name__)

    logger.info(f"Starting IP Resolution Service ({config.transport} transport)")

    try:
        if config.transport == "http":
            asyncio.run(run_http(config))
        else:
            run_cli(config, args.force, args.watch)
    except KeyboardInterrupt:
        logger.info("Shutting down...")
    except Exception as e:
        logger.exception(f"Fatal error: {e}")
        sys.exit(1)


if __name__ == "__main__":
    main()
