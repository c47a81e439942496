"""App catalog tools: list_navigation_apps, get_app_capabilities."""

import json

from mcp.server.fastmcp import FastMCP
from mcp.types import ToolAnnotations

from ..core.apps import NavigationApp
from ..core.capabilities import capabilities


def _catalog() -> str:
    return json.dumps(
        [capabilities(app).model_dump(mode="json") for app in NavigationApp],
        indent=2,
    )


def register_app_tools(mcp: FastMCP):

    @mcp.tool(annotations=ToolAnnotations(readOnlyHint=True))
    def list_navigation_apps() -> str:
        """List every supported navigation app with what it can do.

        Each entry has the app key (used by the other tools), display name,
        whether it supports routing and a start location in routes, and its
        available travel modes.
        **Next:** build_navigation_url or build_all_navigation_urls.
        """
        return _catalog()

    @mcp.tool(annotations=ToolAnnotations(readOnlyHint=True))
    def get_app_capabilities(app: str) -> str:
        """Return the capabilities of one navigation app.

        Args:
            app: App key, e.g. 'google_maps', 'organic_maps', 'waze', 'here_we_go'.
        """
        try:
            navigation_app = NavigationApp.from_key(app)
        except ValueError as e:
            return f"Error: {e}"
        return json.dumps(capabilities(navigation_app).model_dump(mode="json"), indent=2)

    @mcp.resource("navigation://apps")
    def app_catalog() -> str:
        """All navigation apps and their capabilities as JSON."""
        return _catalog()
