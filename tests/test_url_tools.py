"""Tests for build_navigation_url and build_all_navigation_urls tools."""
import json
from unittest.mock import MagicMock


def _register_and_get(tool_name: str):
    """Register URL tools against a mock MCP and extract the named tool."""
    from nav_url_builder.tools.urls import register_url_tools
    tools = {}
    mock_mcp = MagicMock()
    def capture(**kwargs):
        def decorator(fn):
            tools[fn.__name__] = fn
            return fn
        return decorator
    mock_mcp.tool = capture
    register_url_tools(mock_mcp)
    return tools[tool_name]


def test_build_show_on_map_url():
    build = _register_and_get("build_navigation_url")
    assert build("google_maps", 50.586206, 8.674230) == "comgooglemaps://?q=50.586206,8.674230"


def test_build_route_url_with_start_and_mode():
    build = _register_and_get("build_navigation_url")
    result = build(
        "here_we_go", 50.586206, 8.674230, mode="route", travel_mode="walking",
        start_lat=50.579869, start_lon=8.662212,
    )
    assert result == "here-route://50.579869,8.662212/50.586206,8.674230?m=w"


def test_build_with_name_is_encoded():
    build = _register_and_get("build_navigation_url")
    result = build("organic_maps", 50.586206, 8.674230, location_name="My test location")
    assert result == "om://map?v=1&ll=50.586206,8.674230&n=My%20test%20location"


def test_build_native_app_needs_no_url():
    build = _register_and_get("build_navigation_url")
    result = build("apple_maps", 50.586206, 8.674230)
    assert "no url" in result.lower()
    assert not result.startswith("Error")


def test_build_unsupported_combination_returns_error():
    build = _register_and_get("build_navigation_url")
    result = build("maps_me", 50.586206, 8.674230, mode="route")
    assert result.startswith("Error:")
    assert "routing" in result


def test_build_unknown_app():
    build = _register_and_get("build_navigation_url")
    assert build("mapquest", 1.0, 2.0).startswith("Error: Unknown navigation app")


def test_build_unknown_travel_mode():
    build = _register_and_get("build_navigation_url")
    result = build("google_maps", 1.0, 2.0, mode="route", travel_mode="flying")
    assert result.startswith("Error: Unknown travel_mode")


def test_build_route_fields_on_show_request_rejected():
    build = _register_and_get("build_navigation_url")
    result = build("google_maps", 1.0, 2.0, travel_mode="walking")
    assert result.startswith("Error:")


def test_build_half_start_location_rejected():
    build = _register_and_get("build_navigation_url")
    result = build("google_maps", 1.0, 2.0, mode="route", start_lat=1.5)
    assert "start_lon" in result


def test_build_unknown_mode():
    build = _register_and_get("build_navigation_url")
    assert build("waze", 1.0, 2.0, mode="teleport").startswith("Error: Unknown mode")


def test_build_all_reports_urls_and_errors():
    build_all = _register_and_get("build_all_navigation_urls")
    result = json.loads(build_all(
        50.586206, 8.674230, mode="route", travel_mode="walking",
        start_lat=50.579869, start_lon=8.662212,
    ))
    assert len(result) == 8
    assert result["apple_maps"] == {"url": None}
    assert result["organic_maps"]["url"].endswith("&type=pedestrian")
    assert "error" in result["maps_me"]
    assert "error" in result["waze"]
    assert "error" in result["sygic"]
    assert result["navigon"] == {"url": "navigon://%7C%7C%7C%7C%7C%7C50.586206%7C8.674230"}


def test_build_all_invalid_request():
    build_all = _register_and_get("build_all_navigation_urls")
    assert build_all(1.0, 2.0, mode="nope").startswith("Error:")
