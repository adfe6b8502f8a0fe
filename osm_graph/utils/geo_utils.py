"""Great-circle distances on a spherical Earth.

All points are (lon, lat) in degrees, the order used by the exported
node coordinates and by GeoJSON.
"""
import math
from typing import Sequence, Tuple

# Mean Earth radius in meters
EARTH_RADIUS_M = 6371008.8


def haversine_distance(lon1: float, lat1: float, lon2: float, lat2: float) -> float:
    """Distance in meters between two (lon, lat) points.

    Examples:
        >>> round(haversine_distance(0.0, 0.0, 0.0, 1.0))
        111195
    """
    phi1, phi2 = math.radians(lat1), math.radians(lat2)
    half_dphi = (phi2 - phi1) / 2
    half_dlambda = math.radians(lon2 - lon1) / 2

    h = math.sin(half_dphi) ** 2 + math.cos(phi1) * math.cos(phi2) * math.sin(half_dlambda) ** 2
    # Rounding can push h slightly above 1 for antipodal points
    return 2 * EARTH_RADIUS_M * math.asin(math.sqrt(min(1.0, h)))


def calculate_line_length(coordinates: Sequence[Tuple[float, float]]) -> float:
    """Length of a polyline in meters.

    Sums the great-circle distance of every consecutive vertex pair, so a
    bent line is longer than the chord between its ends. Fewer than two
    vertices give 0.

    Args:
        coordinates: Sequence of (lon, lat) pairs
    """
    return sum((
        haversine_distance(start[0], start[1], end[0], end[1])
        for start, end in zip(coordinates, coordinates[1:])
    ), 0.0)
