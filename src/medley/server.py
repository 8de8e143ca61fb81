#!/usr/bin/env python3
"""
Entry point for the Medley MCP Server.

Parses the command line, checks the optional YAML config before the
server is built, then runs the tools over stdio or http.
"""

import argparse
import asyncio
import logging
import os
from pathlib import Path

from medley import __version__
from medley.config import CONFIG_ENV, load_config

logging.basicConfig(level=logging.INFO)
logger = logging.getLogger(__name__)


def build_parser() -> argparse.ArgumentParser:
    """Command line for the medley server."""
    parser = argparse.ArgumentParser(
        prog="medley",
        description="Medley MCP Server - note parsing, frequency math and durations",
    )
    parser.add_argument(
        "--transport",
        choices=["stdio", "http"],
        default="stdio",
        help="Transport mode (default: stdio)",
    )
    parser.add_argument(
        "--port",
        type=int,
        default=8000,
        help="HTTP port (only for http transport)",
    )
    parser.add_argument(
        "--config",
        type=Path,
        default=None,
        help=f"YAML file overriding library defaults (or set {CONFIG_ENV})",
    )
    parser.add_argument(
        "--debug",
        action="store_true",
        help="Enable debug logging",
    )
    parser.add_argument("--version", action="version", version=f"%(prog)s {__version__}")
    return parser


def main(argv: list[str] | None = None) -> None:
    """Main entry point with transport detection."""
    parser = build_parser()
    args = parser.parse_args(argv)

    if args.debug:
        logging.getLogger().setLevel(logging.DEBUG)

    if args.config is not None:
        # Fail on the command line rather than while the server is being built
        try:
            config = load_config(args.config)
        except (OSError, ValueError) as e:
            parser.error(f"cannot load config {args.config}: {e}")
        logger.info(f"Config {args.config}: reference pitch {config.reference_pitch} Hz")
        os.environ[CONFIG_ENV] = str(args.config)

    # The server reads CONFIG_ENV when it is imported
    from medley.async_server import mcp

    if args.transport == "stdio":
        logger.info("Starting Medley MCP Server (stdio)")
        asyncio.run(mcp.run_stdio())
    else:
        logger.info(f"Starting Medley MCP Server (http:{args.port})")
        asyncio.run(mcp.run_http(port=args.port))


if __name__ == "__main__":
    main()
