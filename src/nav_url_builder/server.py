"""MCP server for nav-url-builder.

Registers all tools and runs via stdio transport.
"""

import logging
import os
import sys

from mcp.server.fastmcp import FastMCP

from .tools.apps import register_app_tools
from .tools.urls import register_url_tools

LOG_LEVEL_ENV = "NAV_URL_BUILDER_LOG_LEVEL"

mcp = FastMCP(
    "nav-url-builder",
    instructions="Build URLs that open a destination or route in third-party navigation apps",
)

# Register all tool groups
register_app_tools(mcp)
register_url_tools(mcp)


def configure_logging() -> None:
    # stdout carries the MCP protocol, so logs go to stderr
    level = os.environ.get(LOG_LEVEL_ENV, "WARNING").upper()
    logging.basicConfig(
        stream=sys.stderr,
        level=getattr(logging, level, logging.WARNING),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )


def main():
    configure_logging()
    mcp.run(transport="stdio")


if __name__ == "__main__":
    main()
