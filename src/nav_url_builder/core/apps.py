"""The fixed set of navigation apps and their URL schemes."""

from enum import IntEnum

from ..models import NavigationMode, Route
from .coords import format_coordinate


class NavigationApp(IntEnum):
    """Navigation apps reachable by URL scheme (or the native map display).

    Values are stable and may be used as list keys.
    """
    APPLE_MAPS = 0
    GOOGLE_MAPS = 1  # https://developers.google.com/maps/documentation/ios/urlscheme
    ORGANIC_MAPS = 2  # https://omaps.app/api
    MAPS_ME = 3  # https://github.com/mapsme/api-ios
    WAZE = 4  # https://developers.google.com/waze/deeplinks
    SYGIC = 5
    HERE_WE_GO = 6
    NAVIGON = 7

    @property
    def display_name(self) -> str:
        return _DISPLAY_NAMES[self]

    @property
    def key(self) -> str:
        """Lowercase identifier used by the tool surface, e.g. ``google_maps``."""
        return self.name.lower()

    @classmethod
    def from_key(cls, key: str) -> "NavigationApp":
        normalized = key.strip().lower().replace("-", "_").replace(" ", "_")
        for app in cls:
            if normalized in (app.key, app.display_name.lower().replace(" ", "_")):
                return app
        valid = ", ".join(app.key for app in cls)
        raise ValueError(f"Unknown navigation app '{key}'. Valid apps: {valid}")

    def __str__(self) -> str:
        return self.display_name


_DISPLAY_NAMES = {
    NavigationApp.APPLE_MAPS: "Maps",
    NavigationApp.GOOGLE_MAPS: "Google Maps",
    NavigationApp.ORGANIC_MAPS: "Organic Maps",
    NavigationApp.MAPS_ME: "maps.me",
    NavigationApp.WAZE: "Waze",
    NavigationApp.SYGIC: "Sygic",
    NavigationApp.HERE_WE_GO: "HERE WeGo",
    NavigationApp.NAVIGON: "Navigon",
}

# Apple Maps is opened through the native map display; this scheme only
# documents the equivalent web URL.
_SCHEMES = {
    NavigationApp.APPLE_MAPS: "https://maps.apple.com/",
    NavigationApp.GOOGLE_MAPS: "comgooglemaps://",
    NavigationApp.ORGANIC_MAPS: "om://",
    NavigationApp.MAPS_ME: "mapswithme://",
    NavigationApp.WAZE: "waze://",
    NavigationApp.SYGIC: "com.sygic.aura://",
    NavigationApp.NAVIGON: "navigon://",
}

HERE_LOCATION_SCHEME = "here-location://"
HERE_ROUTE_SCHEME = "here-route://"
HERE_CURRENT_LOCATION = "mylocation"


def url_scheme(app: NavigationApp, navigation_mode: NavigationMode) -> str:
    """Return the URL prefix ``app`` uses for ``navigation_mode``.

    HERE WeGo is the odd one out: it has separate schemes for showing and
    routing, and the route origin is part of the prefix.
    """
    if app is not NavigationApp.HERE_WE_GO:
        return _SCHEMES[app]
    if not isinstance(navigation_mode, Route):
        return HERE_LOCATION_SCHEME
    start = navigation_mode.start_location
    origin = format_coordinate(start) if start is not None else HERE_CURRENT_LOCATION
    return f"{HERE_ROUTE_SCHEME}{origin}/"


def query_schemes() -> list[str]:
    """Bare scheme names an installed-app check has to be allowed to query."""
    schemes = [
        scheme.split("://", 1)[0]
        for app, scheme in _SCHEMES.items()
        if app is not NavigationApp.APPLE_MAPS
    ]
    schemes += [HERE_LOCATION_SCHEME[:-3], HERE_ROUTE_SCHEME[:-3]]
    return schemes


# Support matrix consulted by both the builders and the capability queries.
ROUTING_UNSUPPORTED = frozenset({NavigationApp.MAPS_ME})

# Apps whose route URL has a slot for an explicit start location. Apple Maps
# and Navigon accept a start location without error but never encode it.
START_LOCATION_IN_ROUTE = frozenset({
    NavigationApp.GOOGLE_MAPS,
    NavigationApp.ORGANIC_MAPS,
    NavigationApp.HERE_WE_GO,
})
