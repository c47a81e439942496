"""URL tools: build_navigation_url, build_all_navigation_urls."""

import json
import logging

from mcp.server.fastmcp import FastMCP
from mcp.types import ToolAnnotations

from ..core.apps import NavigationApp
from ..core.builders import build_url
from ._requests import make_request

logger = logging.getLogger(__name__)


def register_url_tools(mcp: FastMCP):

    @mcp.tool(annotations=ToolAnnotations(readOnlyHint=True))
    def build_navigation_url(
        app: str,
        lat: float,
        lon: float,
        mode: str = "show_on_map",
        travel_mode: str | None = None,
        start_lat: float | None = None,
        start_lon: float | None = None,
        location_name: str | None = None,
    ) -> str:
        """Build the URL that opens a navigation app at a destination.

        Apps that cannot express the request (e.g. a start location in Waze,
        routing in maps.me) return an error instead of a degraded URL.
        **Prior:** list_navigation_apps to see what each app supports.

        Args:
            app: App key, e.g. 'google_maps', 'organic_maps', 'waze'.
            lat: Destination latitude (degrees).
            lon: Destination longitude (degrees).
            mode: 'show_on_map' (default) or 'route'.
            travel_mode: Route only. 'driving', 'walking', 'transit' or 'bicycling'.
                Default: the app's default (driving).
            start_lat/start_lon: Route only. Start location. Default: current location.
            location_name: Optional display name for the destination.
        """
        try:
            navigation_app = NavigationApp.from_key(app)
            request = make_request(
                lat, lon, mode, travel_mode, start_lat, start_lon, location_name,
            )
            url = build_url(navigation_app, request)
        except ValueError as e:
            return f"Error: {e}"

        if url is None:
            return f"{navigation_app.display_name} is opened natively; no URL is needed."
        return url

    @mcp.tool(annotations=ToolAnnotations(readOnlyHint=True))
    def build_all_navigation_urls(
        lat: float,
        lon: float,
        mode: str = "show_on_map",
        travel_mode: str | None = None,
        start_lat: float | None = None,
        start_lon: float | None = None,
        location_name: str | None = None,
    ) -> str:
        """Build the URL for every navigation app at once.

        Returns a JSON object keyed by app key. Each value is {"url": ...}
        (null for apps opened natively) or {"error": ...} when the app cannot
        express the request. Takes the same arguments as build_navigation_url
        minus app.
        """
        try:
            request = make_request(
                lat, lon, mode, travel_mode, start_lat, start_lon, location_name,
            )
        except ValueError as e:
            return f"Error: {e}"

        results: dict[str, dict] = {}
        for navigation_app in NavigationApp:
            try:
                results[navigation_app.key] = {"url": build_url(navigation_app, request)}
            except ValueError as e:
                results[navigation_app.key] = {"error": str(e)}

        failed = [key for key, r in results.items() if "error" in r]
        if failed:
            logger.debug("Apps unable to express request: %s", failed)
        return json.dumps(results, indent=2)
