"""
Geographic utility functions for QuietRoute scoring.

Provides great-circle distance and bounding-box helpers using the Haversine formula.
Coordinates are (latitude, longitude) pairs in degrees throughout.
"""
import math
from typing import Sequence, Tuple

from quietroute.services.scoring_config import EARTH_RADIUS_M


def haversine_distance(
    lat1: float, lon1: float, lat2: float, lon2: float
) -> float:
    """
    Calculate the great-circle distance between two points on Earth.

    Uses the Haversine formula to compute distance along Earth's surface.
    Inputs are not validated; out-of-range degrees are used as given.

    Args:
        lat1: Latitude of first point (degrees)
        lon1: Longitude of first point (degrees)
        lat2: Latitude of second point (degrees)
        lon2: Longitude of second point (degrees)

    Returns:
        Distance in meters

    Example:
        >>> distance = haversine_distance(22.5726, 88.3639, 22.5726, 88.3649)
        >>> print(f"{distance:.0f} m")
        103 m
    """
    # Convert degrees to radians
    lat1_rad = math.radians(lat1)
    lon1_rad = math.radians(lon1)
    lat2_rad = math.radians(lat2)
    lon2_rad = math.radians(lon2)

    # Haversine formula
    dlat = lat2_rad - lat1_rad
    dlon = lon2_rad - lon1_rad

    a = (
        math.sin(dlat / 2) ** 2
        + math.cos(lat1_rad) * math.cos(lat2_rad) * math.sin(dlon / 2) ** 2
    )
    # Rounding can push a just past 1.0 for near-antipodal points
    a = min(1.0, max(0.0, a))
    c = 2 * math.atan2(math.sqrt(a), math.sqrt(1 - a))

    return EARTH_RADIUS_M * c


def distance_to_endpoints(
    lat: float,
    lon: float,
    coordinates: Sequence[Tuple[float, float]],
) -> float:
    """
    Distance from a point to the nearer endpoint of a polyline.

    Only the first and last coordinates are checked. This is an approximation
    of point-to-segment distance, adequate for the short segments returned by
    the road-attribute store.

    Args:
        lat: Point latitude (degrees)
        lon: Point longitude (degrees)
        coordinates: Ordered (lat, lon) pairs of the segment

    Returns:
        Distance in meters, or infinity if the segment has no coordinates
    """
    if not coordinates:
        return math.inf

    start_lat, start_lon = coordinates[0]
    end_lat, end_lon = coordinates[-1]

    return min(
        haversine_distance(lat, lon, start_lat, start_lon),
        haversine_distance(lat, lon, end_lat, end_lon),
    )


def get_bounding_box(
    coordinates: Sequence[Tuple[float, float]],
    padding_m: float = 0.0,
) -> Tuple[float, float, float, float]:
    """
    Calculate the bounding box of a set of coordinates.

    Returns (south, north, west, east) padded by at least padding_m on every
    side. Longitude padding is sized at the padded box edge farthest from the
    equator, so every point within padding_m of a coordinate falls inside.

    Args:
        coordinates: (lat, lon) pairs; must not be empty
        padding_m: Padding in meters added on each side

    Returns:
        Tuple of (south, north, west, east)

    Example:
        >>> bbox = get_bounding_box([(22.57, 88.36), (22.58, 88.37)], padding_m=50)
        >>> south, north, west, east = bbox
    """
    lats = [lat for lat, _ in coordinates]
    lons = [lon for _, lon in coordinates]

    # 1 degree latitude ≈ 111 km; longitude shrinks with cos(latitude)
    lat_delta = padding_m / 111000.0
    extreme_lat = min(90.0, max(abs(min(lats)), abs(max(lats))) + lat_delta)
    lon_delta = padding_m / (111000.0 * max(math.cos(math.radians(extreme_lat)), 1e-6))

    return (
        min(lats) - lat_delta,
        max(lats) + lat_delta,
        min(lons) - lon_delta,
        max(lons) + lon_delta,
    )
