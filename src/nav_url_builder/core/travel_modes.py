"""Per-app travel mode keywords.

Waze (driving only) and Navigon (no modes) have no column here.
"""

from typing import Optional

from ..models import TravelMode
from .apps import NavigationApp

_KEYS: dict[TravelMode, dict[NavigationApp, str]] = {
    TravelMode.DRIVING: {
        NavigationApp.APPLE_MAPS: "MKDirectionsModeDriving",
        NavigationApp.GOOGLE_MAPS: "driving",
        NavigationApp.ORGANIC_MAPS: "vehicle",
        NavigationApp.MAPS_ME: "vehicle",
        NavigationApp.SYGIC: "drive",
        NavigationApp.HERE_WE_GO: "d",
    },
    TravelMode.WALKING: {
        NavigationApp.APPLE_MAPS: "MKDirectionsModeWalking",
        NavigationApp.GOOGLE_MAPS: "walking",
        NavigationApp.ORGANIC_MAPS: "pedestrian",
        NavigationApp.MAPS_ME: "pedestrian",
        NavigationApp.SYGIC: "walk",
        NavigationApp.HERE_WE_GO: "w",
    },
    TravelMode.TRANSIT: {
        NavigationApp.APPLE_MAPS: "MKDirectionsModeTransit",
        NavigationApp.GOOGLE_MAPS: "transit",
        NavigationApp.ORGANIC_MAPS: "transit",
        NavigationApp.HERE_WE_GO: "a",
    },
    TravelMode.BICYCLING: {
        NavigationApp.GOOGLE_MAPS: "bicycling",
        NavigationApp.ORGANIC_MAPS: "bicycle",
        NavigationApp.MAPS_ME: "bicycle",
        # HERE also knows "t" (taxi/ride share), which has no TravelMode
        NavigationApp.HERE_WE_GO: "b",
    },
}


def key_for(app: NavigationApp, mode: TravelMode) -> Optional[str]:
    """Return the keyword ``app`` uses for ``mode``, or None if unsupported."""
    return _KEYS[mode].get(app)


def available_modes(app: NavigationApp) -> list[TravelMode]:
    return [mode for mode in TravelMode if key_for(app, mode) is not None]
