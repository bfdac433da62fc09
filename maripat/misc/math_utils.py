"""
Mathematical utility functions for the maripat library.

Great-circle distance, unit conversion and coordinate helpers shared by the
area matching engine, the waypoint generator and the briefing formatter.
"""
import math
import numpy as np
from typing import Iterable, Tuple

# Type definitions for positions
LatLon = Tuple[float, float]

EARTH_RADIUS_KM = 6371.0
KM_PER_NM = 1.852


def distance_km(a: LatLon, b: LatLon) -> float:
    """
    Haversine great-circle distance between two coordinates.

    Args:
        a: First position (lat, lon) in degrees
        b: Second position (lat, lon) in degrees

    Returns:
        Distance in kilometres (full precision, never negative)

    Examples:
        >>> distance_km((0.0, 0.0), (0.0, 0.0))
        0.0
        >>> round(distance_km((38.286, -76.412), (50.0, -37.5)))
        3321
    """
    lat1, lon1 = a
    lat2, lon2 = b
    d_lat = math.radians(lat2 - lat1)
    d_lon = math.radians(lon2 - lon1)

    h = (math.sin(d_lat / 2) * math.sin(d_lat / 2) +
         math.cos(math.radians(lat1)) * math.cos(math.radians(lat2)) *
         math.sin(d_lon / 2) * math.sin(d_lon / 2))

    h = min(1.0, max(0.0, h))
    c = 2 * math.atan2(math.sqrt(h), math.sqrt(1 - h))
    return EARTH_RADIUS_KM * c


def distances_km(origin: LatLon, points: Iterable[LatLon]) -> np.ndarray:
    """
    Vectorized haversine distance from one origin to many points.

    Args:
        origin: (lat, lon) in degrees
        points: Iterable of (lat, lon) pairs

    Returns:
        1-D float array of distances in kilometres, same order as ``points``
    """
    pts = np.asarray([tuple(p) for p in points], dtype=float).reshape(-1, 2)
    lat1, lon1 = np.radians(float(origin[0])), np.radians(float(origin[1]))
    lat2 = np.radians(pts[:, 0])
    lon2 = np.radians(pts[:, 1])

    h = (np.sin((lat2 - lat1) / 2) ** 2 +
         np.cos(lat1) * np.cos(lat2) * np.sin((lon2 - lon1) / 2) ** 2)
    h = np.clip(h, 0.0, 1.0)
    return EARTH_RADIUS_KM * 2 * np.arctan2(np.sqrt(h), np.sqrt(1 - h))


def km_to_nm(km: float) -> float:
    """Convert kilometres to nautical miles."""
    return km / KM_PER_NM


def normalize_longitude(lon: float) -> float:
    """
    Wrap a longitude into [-180, 180].

    Examples:
        >>> normalize_longitude(216.0)
        -144.0
        >>> normalize_longitude(180.0)
        180.0
    """
    if -180.0 <= lon <= 180.0:
        return lon
    return ((lon + 180.0) % 360.0) - 180.0


def format_coordinate(coord: LatLon, decimals: int = 3) -> str:
    """
    Format a coordinate with hemisphere letters.

    Examples:
        >>> format_coordinate((38.286, -76.412))
        '38.286°N 76.412°W'
        >>> format_coordinate((-10.0, 75.0), decimals=1)
        '10.0°S 75.0°E'
    """
    lat, lon = coord
    ns = 'N' if lat >= 0 else 'S'
    ew = 'E' if lon >= 0 else 'W'
    return f"{abs(lat):.{decimals}f}°{ns} {abs(lon):.{decimals}f}°{ew}"
