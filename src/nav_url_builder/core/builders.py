"""Per-app URL builders.

Each renderer turns a NavigationRequest into the exact URL its app parses.
Parameter order is part of several apps' contracts and must not change.
"""

import logging
import re
from typing import Callable, Optional
from urllib.parse import urlsplit

from ..errors import (
    InvalidAppUrlError,
    RoutingNotSupportedError,
    StartLocationNotSupportedError,
    StartLocationRequiredError,
    UnsupportedTravelModeError,
)
from ..models import NavigationRequest, Route, TravelMode
from .apps import ROUTING_UNSUPPORTED, START_LOCATION_IN_ROUTE, NavigationApp, url_scheme
from .coords import format_coordinate, format_degrees
from .params import Parameter, render_parameters
from .travel_modes import key_for

logger = logging.getLogger(__name__)

# Encoded "|" for the pipe-delimited schemes (Sygic, Navigon)
PIPE = "%7C"

_URL_CHARS = re.compile(r"^(?:[A-Za-z0-9\-._~:/?#\[\]@!$&'()*+,;=]|%[0-9A-Fa-f]{2})+$")


def _mode_key(app: NavigationApp, mode: Optional[TravelMode]) -> str:
    """Keyword for ``mode``, defaulting to driving. Never substitutes on a miss."""
    mode = mode or TravelMode.DRIVING
    key = key_for(app, mode)
    if key is None:
        raise UnsupportedTravelModeError(app, mode)
    return key


def _check_start_location(app: NavigationApp, route: Route) -> None:
    if route.start_location is not None and app not in START_LOCATION_IN_ROUTE:
        raise StartLocationNotSupportedError(app)


def _apple_maps(request: NavigationRequest) -> None:
    # Opened through the native map display, no URL involved.
    return None


def _google_maps(request: NavigationRequest) -> str:
    app = NavigationApp.GOOGLE_MAPS
    scheme = url_scheme(app, request.navigation_mode)
    mode = request.navigation_mode
    if not isinstance(mode, Route):
        return f"{scheme}?q={format_coordinate(request.destination)}"

    parameters = []
    if mode.travel_mode is not None:
        parameters.append(Parameter("directionsmode", _mode_key(app, mode.travel_mode)))
    if mode.start_location is not None:
        parameters.append(Parameter("saddr", format_coordinate(mode.start_location)))
    parameters.append(Parameter("daddr", format_coordinate(request.destination)))
    return f"{scheme}?{render_parameters(parameters)}"


def _show_map_parameters(request: NavigationRequest) -> list[Parameter]:
    """Organic Maps / maps.me point parameters: version, coordinates, name."""
    parameters = [
        Parameter("v", "1"),
        Parameter("ll", format_coordinate(request.destination)),
    ]
    if request.encoded_location_name is not None:
        parameters.append(Parameter("n", request.encoded_location_name))
    return parameters


def _organic_maps(request: NavigationRequest) -> str:
    app = NavigationApp.ORGANIC_MAPS
    scheme = url_scheme(app, request.navigation_mode)
    mode = request.navigation_mode
    if not isinstance(mode, Route):
        return f"{scheme}map?{render_parameters(_show_map_parameters(request))}"

    if mode.start_location is None:
        raise StartLocationRequiredError(app)
    parameters = [
        Parameter("sll", format_coordinate(mode.start_location)),
        Parameter("saddr", "Start"),
        Parameter("dll", format_coordinate(request.destination)),
        Parameter("daddr", request.encoded_location_name or "End"),
        Parameter("type", _mode_key(app, mode.travel_mode)),
    ]
    return f"{scheme}route?{render_parameters(parameters)}"


def _maps_me(request: NavigationRequest) -> str:
    app = NavigationApp.MAPS_ME
    # maps.me documents route URLs in the Organic Maps shape, but the app
    # does not act on them.
    if isinstance(request.navigation_mode, Route) and app in ROUTING_UNSUPPORTED:
        raise RoutingNotSupportedError(app)
    scheme = url_scheme(app, request.navigation_mode)
    return f"{scheme}map?{render_parameters(_show_map_parameters(request))}"


def _waze(request: NavigationRequest) -> str:
    app = NavigationApp.WAZE
    scheme = url_scheme(app, request.navigation_mode)
    mode = request.navigation_mode
    if not isinstance(mode, Route):
        return f"{scheme}?ll={format_coordinate(request.destination)}"

    if mode.travel_mode not in (None, TravelMode.DRIVING):
        raise UnsupportedTravelModeError(app, mode.travel_mode)
    _check_start_location(app, mode)
    parameters = [
        Parameter("ll", format_coordinate(request.destination)),
        Parameter("navigate", "yes"),
    ]
    return f"{scheme}?{render_parameters(parameters)}"


def _sygic(request: NavigationRequest) -> str:
    app = NavigationApp.SYGIC
    scheme = url_scheme(app, request.navigation_mode)
    mode = request.navigation_mode
    if isinstance(mode, Route):
        _check_start_location(app, mode)
        action = _mode_key(app, mode.travel_mode)
    else:
        action = "show"

    fields = ["coordinate", format_degrees(request.destination.lon), format_degrees(request.destination.lat)]
    if request.encoded_location_name is not None:
        fields.append(request.encoded_location_name)
    fields.append(action)
    return scheme + PIPE.join(fields)


def _here_we_go(request: NavigationRequest) -> str:
    app = NavigationApp.HERE_WE_GO
    # The start location (or "mylocation") is already part of the scheme.
    scheme = url_scheme(app, request.navigation_mode)
    target = format_coordinate(request.destination)
    if request.encoded_location_name is not None:
        target = f"{target},{request.encoded_location_name}"

    mode = request.navigation_mode
    if not isinstance(mode, Route):
        return f"{scheme}{target}"
    parameters = [Parameter("m", _mode_key(app, mode.travel_mode))]
    return f"{scheme}{target}?{render_parameters(parameters)}"


def _navigon(request: NavigationRequest) -> str:
    # Fixed layout: six empty leading fields, then latitude and longitude.
    # Start location, travel mode and name have no slot and are ignored.
    scheme = url_scheme(NavigationApp.NAVIGON, request.navigation_mode)
    lat = format_degrees(request.destination.lat)
    lon = format_degrees(request.destination.lon)
    return f"{scheme}{PIPE * 6}{lat}{PIPE}{lon}"


_BUILDERS: dict[NavigationApp, Callable[[NavigationRequest], Optional[str]]] = {
    NavigationApp.APPLE_MAPS: _apple_maps,
    NavigationApp.GOOGLE_MAPS: _google_maps,
    NavigationApp.ORGANIC_MAPS: _organic_maps,
    NavigationApp.MAPS_ME: _maps_me,
    NavigationApp.WAZE: _waze,
    NavigationApp.SYGIC: _sygic,
    NavigationApp.HERE_WE_GO: _here_we_go,
    NavigationApp.NAVIGON: _navigon,
}


def check_url(app: NavigationApp, url: str) -> str:
    """Raise InvalidAppUrlError unless ``url`` has a scheme and only URL-legal characters."""
    try:
        scheme = urlsplit(url).scheme
    except ValueError as e:
        raise InvalidAppUrlError(app, url) from e
    if not scheme or not _URL_CHARS.match(url):
        raise InvalidAppUrlError(app, url)
    return url


def build_url(app: NavigationApp, request: NavigationRequest) -> Optional[str]:
    """Build the URL that opens ``app`` for ``request``.

    Returns None for apps that are opened without a URL (Apple Maps).
    Raises a NavigationAppError subclass when ``app`` cannot express the
    request; unsupported fields are never silently dropped, except by
    Navigon whose fixed layout has no place for them.
    """
    url = _BUILDERS[app](request)
    if url is None:
        return None
    url = check_url(app, url)
    logger.debug("Built %s URL: %s", app.display_name, url)
    return url
