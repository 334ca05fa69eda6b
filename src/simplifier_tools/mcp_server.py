#!/usr/bin/env python3
"""
Simplifier MCP Server

Exposes the Simplifier login method tools and resources via Model Context
Protocol using FastMCP.

Usage:
    # Run with HTTP transport (default)
    python -m simplifier_tools.mcp_server

    # Run with custom port
    python -m simplifier_tools.mcp_server --port 8001

    # Run with STDIO transport (for local agents)
    python -m simplifier_tools.mcp_server --stdio

Environment Variables:
    MCP_PORT              - Server port (default: 4001)
    SIMPLIFIER_BASE_URL   - Required at startup, base URL of the Simplifier instance
    SIMPLIFIER_TOKEN      - SimplifierToken used by tools and resources
"""

import argparse
import asyncio
import logging
import os
import sys

logger = logging.getLogger(__name__)


def setup_logger():
    """Configure logger for MCP server."""
    if not logger.handlers:
        # stdout belongs to JSON-RPC in STDIO mode
        stream = sys.stderr if "--stdio" in sys.argv else sys.stdout
        handler = logging.StreamHandler(stream)
        formatter = logging.Formatter("[MCP] %(message)s")
        handler.setFormatter(formatter)
        logger.addHandler(handler)
        logger.setLevel(logging.INFO)


setup_logger()

from fastmcp import FastMCP  # noqa: E402
from starlette.requests import Request  # noqa: E402
from starlette.responses import PlainTextResponse  # noqa: E402

from simplifier_tools.client import create_client_from_credentials  # noqa: E402
from simplifier_tools.credentials import CredentialError, CredentialManager  # noqa: E402
from simplifier_tools.resources import register_all_resources  # noqa: E402
from simplifier_tools.tools import register_all_tools  # noqa: E402
from simplifier_tools.utils import configure_logging  # noqa: E402

configure_logging()

credentials = CredentialManager()

try:
    credentials.validate_startup()
    logger.info("Startup configuration validated")
except CredentialError as e:
    logger.warning(str(e))

mcp = FastMCP("simplifier")

tools = register_all_tools(mcp, credentials=credentials)
resources = register_all_resources(mcp, credentials=credentials)
if "--stdio" not in sys.argv:
    logger.info(f"Registered {len(tools)} tools: {tools}")
    logger.info(f"Registered {len(resources)} resources: {resources}")


@mcp.custom_route("/health", methods=["GET"])
async def health_check(request: Request) -> PlainTextResponse:
    """Health check endpoint for container orchestration."""
    return PlainTextResponse("OK")


@mcp.custom_route("/", methods=["GET"])
async def index(request: Request) -> PlainTextResponse:
    """Landing page for browser visits."""
    return PlainTextResponse("Welcome to the Simplifier MCP Server")


async def check_connection(manager: CredentialManager) -> bool:
    """Ping the configured Simplifier instance; log the outcome instead of failing."""
    try:
        client = create_client_from_credentials(manager)
        if await client.ping():
            logger.info("Connection to Simplifier successful")
            return True
        logger.warning(
            "Server at %s responded without the expected 'pong'. "
            "This URL might not point to a Simplifier instance.",
            client.base_url,
        )
    except Exception as e:
        logger.warning(f"Failed to connect to Simplifier: {e}")
    return False


def main() -> None:
    """Entry point for the MCP server."""
    parser = argparse.ArgumentParser(description="Simplifier MCP Server")
    parser.add_argument(
        "--port",
        type=int,
        default=int(os.getenv("MCP_PORT", "4001")),
        help="HTTP server port (default: 4001)",
    )
    parser.add_argument(
        "--host",
        default="0.0.0.0",
        help="HTTP server host (default: 0.0.0.0)",
    )
    parser.add_argument(
        "--stdio",
        action="store_true",
        help="Use STDIO transport instead of HTTP",
    )
    args = parser.parse_args()

    asyncio.run(check_connection(credentials))

    if args.stdio:
        mcp.run(transport="stdio")
    else:
        logger.info(f"Starting HTTP server on {args.host}:{args.port}")
        mcp.run(transport="http", host=args.host, port=args.port)


if __name__ == "__main__":
    main()
