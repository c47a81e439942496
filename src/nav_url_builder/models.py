"""Pydantic request models for navigation app URLs."""

from enum import Enum
from typing import Annotated, Literal, Optional, Union
from urllib.parse import quote

from pydantic import BaseModel, ConfigDict, Field

# RFC 3986 query characters that stay unescaped in a location name
_QUERY_SAFE = "!$&'()*+,;=:@/?"


class Coordinate(BaseModel):
    """A latitude/longitude pair in degrees. Range is the caller's concern."""
    model_config = ConfigDict(frozen=True)

    lat: float
    lon: float


class TravelMode(str, Enum):
    DRIVING = "driving"
    WALKING = "walking"
    TRANSIT = "transit"
    BICYCLING = "bicycling"


class ShowOnMap(BaseModel):
    """Show the destination on the map without directions."""
    model_config = ConfigDict(frozen=True, extra="forbid")

    kind: Literal["show_on_map"] = "show_on_map"


class Route(BaseModel):
    """Route to the destination.

    A missing travel mode means the app's default (usually driving).
    A missing start location means the device's current location.
    """
    model_config = ConfigDict(frozen=True, extra="forbid")

    kind: Literal["route"] = "route"
    travel_mode: Optional[TravelMode] = None
    start_location: Optional[Coordinate] = None


NavigationMode = Annotated[Union[ShowOnMap, Route], Field(discriminator="kind")]


def encode_location_name(name: str) -> str:
    """Percent-encode a display name for use inside a URL query."""
    return quote(name, safe=_QUERY_SAFE)


class NavigationRequest(BaseModel):
    """What to show or route to, independent of the target app."""
    model_config = ConfigDict(frozen=True)

    destination: Coordinate
    navigation_mode: NavigationMode = Field(default_factory=ShowOnMap)
    location_name: Optional[str] = None

    @property
    def encoded_location_name(self) -> Optional[str]:
        """The location name as it goes into a URL. Always follows location_name."""
        if self.location_name is None:
            return None
        return encode_location_name(self.location_name)

    @property
    def is_route(self) -> bool:
        return isinstance(self.navigation_mode, Route)


class AppCapabilities(BaseModel):
    """Serializable answer to the per-app capability queries."""
    id: int
    key: str
    name: str
    supports_routing: bool
    supports_start_location_in_route: bool
    available_directions_modes: list[TravelMode] = []
