"""Tests for opening apps through an injected launcher."""
import logging

import pytest

from nav_url_builder.core.apps import NavigationApp
from nav_url_builder.core.launch import can_open, installed_apps, open_app
from nav_url_builder.errors import (
    NativeLaunchError,
    RoutingNotSupportedError,
    StartLocationNotSupportedError,
)
from nav_url_builder.models import Coordinate, NavigationRequest, Route, TravelMode

DESTINATION = Coordinate(lat=50.586206, lon=8.674230)


class FakeLauncher:
    def __init__(self, installed=(), opens=True, native_opens=True):
        self.installed = set(installed)
        self.opens = opens
        self.native_opens = native_opens
        self.opened_urls = []
        self.native_calls = []

    def is_installed(self, app):
        return app in self.installed

    def open_url(self, url):
        self.opened_urls.append(url)
        return self.opens

    def open_native_map_display(self, coordinate, name, directions_mode_key):
        self.native_calls.append((coordinate, name, directions_mode_key))
        return self.native_opens


def test_native_maps_always_openable():
    assert can_open(NavigationApp.APPLE_MAPS, FakeLauncher())


def test_installed_apps_filters_by_launcher():
    launcher = FakeLauncher(installed={NavigationApp.WAZE, NavigationApp.NAVIGON})
    assert installed_apps(launcher) == [
        NavigationApp.APPLE_MAPS, NavigationApp.WAZE, NavigationApp.NAVIGON,
    ]


def test_open_url_app_passes_built_url():
    launcher = FakeLauncher()
    request = NavigationRequest(destination=DESTINATION)
    assert open_app(NavigationApp.WAZE, request, launcher) is True
    assert launcher.opened_urls == ["waze://?ll=50.586206,8.674230"]


def test_open_url_refusal_is_reported_and_logged(caplog):
    launcher = FakeLauncher(opens=False)
    request = NavigationRequest(destination=DESTINATION)
    with caplog.at_level(logging.WARNING, logger="nav_url_builder.core.launch"):
        assert open_app(NavigationApp.GOOGLE_MAPS, request, launcher) is False
    assert "Google Maps" in caplog.text


def test_open_propagates_builder_errors():
    launcher = FakeLauncher()
    request = NavigationRequest(destination=DESTINATION, navigation_mode=Route())
    with pytest.raises(RoutingNotSupportedError):
        open_app(NavigationApp.MAPS_ME, request, launcher)
    assert launcher.opened_urls == []


def test_native_open_passes_raw_name_and_mode_key():
    launcher = FakeLauncher()
    request = NavigationRequest(
        destination=DESTINATION,
        navigation_mode=Route(travel_mode=TravelMode.WALKING),
        location_name="My test location",
    )
    assert open_app(NavigationApp.APPLE_MAPS, request, launcher) is True
    assert launcher.native_calls == [(DESTINATION, "My test location", "MKDirectionsModeWalking")]
    assert launcher.opened_urls == []


def test_native_open_unknown_mode_key_is_omitted():
    launcher = FakeLauncher()
    request = NavigationRequest(
        destination=DESTINATION, navigation_mode=Route(travel_mode=TravelMode.BICYCLING),
    )
    open_app(NavigationApp.APPLE_MAPS, request, launcher)
    assert launcher.native_calls[0][2] is None


def test_native_open_rejects_start_location():
    launcher = FakeLauncher()
    request = NavigationRequest(
        destination=DESTINATION,
        navigation_mode=Route(start_location=Coordinate(lat=50.579869, lon=8.662212)),
    )
    with pytest.raises(StartLocationNotSupportedError):
        open_app(NavigationApp.APPLE_MAPS, request, launcher)
    assert launcher.native_calls == []


def test_native_open_failure_raises():
    launcher = FakeLauncher(native_opens=False)
    with pytest.raises(NativeLaunchError):
        open_app(NavigationApp.APPLE_MAPS, NavigationRequest(destination=DESTINATION), launcher)
