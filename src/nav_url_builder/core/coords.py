"""Coordinate formatting shared by every URL scheme."""

from ..models import Coordinate


def format_degrees(value: float) -> str:
    """Format a single angle with exactly 6 fractional digits."""
    return f"{value:.6f}"


def format_coordinate(coordinate: Coordinate) -> str:
    """Format as ``lat,lon``, e.g. ``50.586206,8.674230``."""
    return f"{format_degrees(coordinate.lat)},{format_degrees(coordinate.lon)}"
