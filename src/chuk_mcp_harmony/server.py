#!/usr/bin/env python3
"""
Entry point for the CHUK Harmony MCP Server.

Runs the server over stdio (default) or http, or lists the registered
harmony tools and exits.
"""

import argparse
import asyncio
import logging

logging.basicConfig(level=logging.INFO)
logger = logging.getLogger(__name__)


def build_parser() -> argparse.ArgumentParser:
    """Command-line options for the server."""
    parser = argparse.ArgumentParser(description="CHUK Harmony MCP Server")
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
        "--debug",
        action="store_true",
        help="Enable debug logging (shows proximity and chromatic analysis details)",
    )
    parser.add_argument(
        "--list-tools",
        action="store_true",
        help="Print the registered harmony tools and exit",
    )
    return parser


def main() -> None:
    """Parse options, register the harmony tools and start the transport."""
    args = build_parser().parse_args()

    if args.debug:
        logging.getLogger().setLevel(logging.DEBUG)

    # Tools register on import, so this follows the log level change
    from chuk_mcp_harmony import async_server

    if args.list_tools:
        for group in (
            async_server.chord_tools,
            async_server.analysis_tools,
            async_server.toolkit_tools,
            async_server.progression_tools,
        ):
            for name in group:
                print(name)
        return

    mcp = async_server.mcp
    if args.transport == "stdio":
        logger.info("Starting CHUK Harmony MCP Server (stdio)")
        asyncio.run(mcp.run_stdio())
    else:
        logger.info("Starting CHUK Harmony MCP Server (http:%d)", args.port)
        asyncio.run(mcp.run_http(port=args.port))


if __name__ == "__main__":
    main()
