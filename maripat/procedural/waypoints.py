"""
Patrol waypoint generation.

Waypoints lie on the perimeter of the rectangle inset to the 20 % / 80 %
fractions of the patrol area's bounds, walked clockwise from the north-west
corner. Each side counts as one unit of perimeter whatever its length, and
waypoint ``i`` of ``n`` sits at perimeter parameter ``4 * i / n``. Four
waypoints therefore land exactly on the four inset corners (NW, NE, SE, SW);
eight add the side midpoints; one is the NW corner alone.
"""
from __future__ import annotations

from typing import Tuple

import numpy as np

from ..classes.mission_objects import Coordinate, PatrolArea, Waypoint
from ..misc.math_utils import normalize_longitude
from .validation import InvalidParameters

INSET_LOW = 0.2
INSET_HIGH = 0.8

# (lat fraction, lon fraction) of each inset corner, clockwise from NW
_CORNERS = np.array([
    [INSET_HIGH, INSET_LOW],   # NW
    [INSET_HIGH, INSET_HIGH],  # NE
    [INSET_LOW, INSET_HIGH],   # SE
    [INSET_LOW, INSET_LOW],    # SW
])


def perimeter_fractions(count: int) -> np.ndarray:
    """
    Fractional (lat, lon) positions of ``count`` points on the inset rectangle.

    Returns:
        Array of shape (count, 2) with values in [INSET_LOW, INSET_HIGH]
    """
    t = np.arange(count) * 4.0 / count
    side = np.floor(t).astype(int) % 4
    frac = (t - np.floor(t))[:, None]
    start = _CORNERS[side]
    end = _CORNERS[(side + 1) % 4]
    return start + frac * (end - start)


def generate_waypoints(area: PatrolArea, count: int = 4) -> Tuple[Waypoint, ...]:
    """
    Generate a rectangular patrol pattern inside a patrol area.

    Args:
        area: Patrol area whose bounds frame the pattern
        count: Number of waypoints (>= 1)

    Returns:
        Tuple of waypoints labeled PATROL_1..PATROL_<count>, coordinates
        rounded to 3 decimals, all inside ``area.bounds``
    """
    if not isinstance(count, int) or count < 1:
        raise InvalidParameters(f"Waypoint count must be a positive integer, got {count!r}",
                                field="count", value=count)

    bounds = area.bounds
    waypoints = []
    for i, (f_lat, f_lon) in enumerate(perimeter_fractions(count), start=1):
        lat = bounds.south + bounds.lat_span * float(f_lat)
        lon = normalize_longitude(bounds.west + bounds.lon_span * float(f_lon))
        waypoints.append(Waypoint(
            name=f"PATROL_{i}",
            coordinate=Coordinate(round(lat, 3), round(lon, 3)),
            description=f"Patrol waypoint {i}",
        ))
    return tuple(waypoints)
