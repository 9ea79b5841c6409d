#!/usr/bin/env python3
"""
Entry point for the CHUK Theory MCP Server.

Parses the command line, points the server at a project preset
directory, and runs it over stdio or http.
"""

import argparse
import asyncio
import logging
import os

logging.basicConfig(level=logging.INFO)
logger = logging.getLogger(__name__)

PRESETS_DIR_ENV = "CHUK_THEORY_PRESETS_DIR"


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="CHUK Theory MCP Server")
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
        "--presets",
        metavar="DIR",
        help="Project preset directory (default: ./presets)",
    )
    parser.add_argument(
        "--debug",
        action="store_true",
        help="Enable debug logging (includes note parse fallbacks)",
    )
    return parser


def main(argv: list[str] | None = None) -> None:
    """Main entry point with transport detection."""
    args = build_parser().parse_args(argv)

    if args.debug:
        logging.getLogger().setLevel(logging.DEBUG)

    if args.presets:
        os.environ[PRESETS_DIR_ENV] = args.presets

    # The server module builds the preset loader at import time
    from chuk_mcp_theory.async_server import mcp

    if args.transport == "stdio":
        logger.info("Starting CHUK Theory MCP Server (stdio)")
        asyncio.run(mcp.run_stdio())
    else:
        logger.info(f"Starting CHUK Theory MCP Server (http:{args.port})")
        asyncio.run(mcp.run_http(port=args.port))


if __name__ == "__main__":
    main()
