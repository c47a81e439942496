"""Errors raised while building or opening navigation app URLs.

All errors are ValueError subclasses so tool handlers can report them
the same way as validation failures.
"""

from typing import Optional

from .core.apps import NavigationApp
from .models import TravelMode


class NavigationAppError(ValueError):
    """Base exception for request/app mismatches."""

    def __init__(self, app: NavigationApp, message: str):
        self.app = app
        super().__init__(message)


class StartLocationNotSupportedError(NavigationAppError):
    """The app cannot encode a start location for a route."""

    def __init__(self, app: NavigationApp):
        super().__init__(app, f"{app.display_name} does not support a start location in routes")


class StartLocationRequiredError(NavigationAppError):
    """The app can only route from an explicit start location."""

    def __init__(self, app: NavigationApp):
        super().__init__(app, f"{app.display_name} requires a start location for routes")


class RoutingNotSupportedError(NavigationAppError):
    def __init__(self, app: NavigationApp):
        super().__init__(app, f"{app.display_name} does not support routing")


class UnsupportedTravelModeError(NavigationAppError):
    """The requested travel mode has no keyword for this app. Driving usually works."""

    def __init__(self, app: NavigationApp, mode: TravelMode):
        self.mode = mode
        super().__init__(app, f"{app.display_name} does not support travel mode '{mode.value}'")


class InvalidAppUrlError(NavigationAppError):
    def __init__(self, app: NavigationApp, url: Optional[str] = None):
        self.url = url
        if url is None:
            msg = f"No URL available for {app.display_name}"
        else:
            msg = f"Invalid URL for {app.display_name}: {url!r}"
        super().__init__(app, msg)


class NativeLaunchError(NavigationAppError):
    """The native map display refused to open."""

    def __init__(self, app: NavigationApp):
        super().__init__(app, f"Could not open {app.display_name} via the native map display")
