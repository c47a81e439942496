"""Capability queries answered from the same tables the builders use."""

from ..models import AppCapabilities, TravelMode
from .apps import ROUTING_UNSUPPORTED, START_LOCATION_IN_ROUTE, NavigationApp
from .travel_modes import available_modes


def supports_routing(app: NavigationApp) -> bool:
    return app not in ROUTING_UNSUPPORTED


def supports_start_location_in_route(app: NavigationApp) -> bool:
    """Whether a Route may carry an explicit start location for ``app``.

    Navigon accepts one but drops it, since its URL has no slot for it.
    """
    return app in START_LOCATION_IN_ROUTE


def available_directions_modes(app: NavigationApp) -> list[TravelMode]:
    return available_modes(app)


def capabilities(app: NavigationApp) -> AppCapabilities:
    return AppCapabilities(
        id=int(app),
        key=app.key,
        name=app.display_name,
        supports_routing=supports_routing(app),
        supports_start_location_in_route=supports_start_location_in_route(app),
        available_directions_modes=available_directions_modes(app),
    )
