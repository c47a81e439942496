"""Turn flat tool arguments into a NavigationRequest."""

from ..models import Coordinate, NavigationRequest, Route, ShowOnMap, TravelMode


def make_request(
    lat: float,
    lon: float,
    mode: str = "show_on_map",
    travel_mode: str | None = None,
    start_lat: float | None = None,
    start_lon: float | None = None,
    location_name: str | None = None,
) -> NavigationRequest:
    """Raise ValueError with a descriptive message if the arguments don't form a request.

    Usage in a tool:
        try:
            request = make_request(lat, lon, mode, ...)
        except ValueError as e:
            return f"Error: {e}"
    """
    if (start_lat is None) != (start_lon is None):
        raise ValueError("Provide both start_lat and start_lon, or neither.")

    if mode == "show_on_map":
        if travel_mode is not None or start_lat is not None:
            raise ValueError(
                "travel_mode and start_lat/start_lon only apply when mode is 'route'."
            )
        navigation_mode = ShowOnMap()
    elif mode == "route":
        if travel_mode is not None:
            try:
                travel = TravelMode(travel_mode.strip().lower())
            except ValueError:
                valid = ", ".join(m.value for m in TravelMode)
                raise ValueError(f"Unknown travel_mode '{travel_mode}'. Valid modes: {valid}")
        else:
            travel = None
        start = Coordinate(lat=start_lat, lon=start_lon) if start_lat is not None else None
        navigation_mode = Route(travel_mode=travel, start_location=start)
    else:
        raise ValueError(f"Unknown mode '{mode}'. Use 'show_on_map' or 'route'.")

    return NavigationRequest(
        destination=Coordinate(lat=lat, lon=lon),
        navigation_mode=navigation_mode,
        location_name=location_name,
    )
