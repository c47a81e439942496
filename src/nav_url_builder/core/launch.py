"""Opening navigation apps through a platform launcher.

The platform side (installed-app checks, URL opening, the native map
display) is supplied by the caller as a Launcher.
"""

import logging
from typing import Optional, Protocol

from ..errors import InvalidAppUrlError, NativeLaunchError, StartLocationNotSupportedError
from ..models import Coordinate, NavigationRequest, Route
from .apps import NavigationApp
from .builders import build_url
from .travel_modes import key_for

logger = logging.getLogger(__name__)


class Launcher(Protocol):
    def is_installed(self, app: NavigationApp) -> bool: ...

    def open_url(self, url: str) -> bool: ...

    def open_native_map_display(
        self,
        coordinate: Coordinate,
        name: Optional[str],
        directions_mode_key: Optional[str],
    ) -> bool: ...


def can_open(app: NavigationApp, launcher: Launcher) -> bool:
    """The native maps app is always available; others must be installed."""
    if app is NavigationApp.APPLE_MAPS:
        return True
    return launcher.is_installed(app)


def installed_apps(launcher: Launcher) -> list[NavigationApp]:
    return [app for app in NavigationApp if can_open(app, launcher)]


def _open_native(request: NavigationRequest, launcher: Launcher) -> bool:
    app = NavigationApp.APPLE_MAPS
    directions_mode_key = None
    mode = request.navigation_mode
    if isinstance(mode, Route):
        if mode.start_location is not None:
            raise StartLocationNotSupportedError(app)
        if mode.travel_mode is not None:
            directions_mode_key = key_for(app, mode.travel_mode)

    if not launcher.open_native_map_display(
        request.destination, request.location_name, directions_mode_key
    ):
        raise NativeLaunchError(app)
    return True


def open_app(app: NavigationApp, request: NavigationRequest, launcher: Launcher) -> bool:
    """Open ``app`` for ``request``.

    Raises the same errors as build_url, plus NativeLaunchError when the
    native map display refuses. Returns whatever the launcher reports for
    URL-based apps.
    """
    if app is NavigationApp.APPLE_MAPS:
        return _open_native(request, launcher)

    url = build_url(app, request)
    if url is None:
        raise InvalidAppUrlError(app)
    opened = launcher.open_url(url)
    if not opened:
        logger.warning("Launcher refused to open %s URL %s", app.display_name, url)
    return opened
