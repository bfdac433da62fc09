"""
Patrol area matching: which zones suit a given base.

Every base declares one region; that region is its primary patrol area.
Secondary areas come from a declarative rule table keyed by region. Each rule
names an area to append and an optional condition on the base's coordinates.
The thresholds are geographic heuristics, kept as data so a new region only
needs new table rows.
"""
from __future__ import annotations

from dataclasses import dataclass
from typing import Callable, Dict, List, Mapping, Optional, Sequence, Tuple

from ..classes.mission_objects import Base, Coordinate, PatrolArea
from ..misc.math_utils import distances_km

CoordinateCondition = Callable[[Coordinate], bool]


@dataclass(frozen=True)
class AreaRule:
    """Append ``area_id`` to the secondary list when ``condition`` holds (always if None)."""
    area_id: str
    condition: Optional[CoordinateCondition] = None
    note: str = ""

    def applies(self, coord: Coordinate) -> bool:
        return self.condition is None or self.condition(coord)


@dataclass(frozen=True)
class AreaSelection:
    """Candidate patrol areas for a base, in preference order."""
    primary: Tuple[str, ...]
    secondary: Tuple[str, ...]

    @property
    def all(self) -> Tuple[str, ...]:
        return self.primary + self.secondary


def _lat_above(threshold: float) -> CoordinateCondition:
    return lambda c: c.lat > threshold


def _lat_below(threshold: float) -> CoordinateCondition:
    return lambda c: c.lat < threshold


def _lon_above(threshold: float) -> CoordinateCondition:
    return lambda c: c.lon > threshold


def _lon_below(threshold: float) -> CoordinateCondition:
    return lambda c: c.lon < threshold


# Order matters: secondary areas are listed in the order their rules fire.
SECONDARY_AREA_RULES: Dict[str, Tuple[AreaRule, ...]] = {
    "North_Sea": (
        AreaRule("Arctic", _lat_above(55), "lat > 55"),
        AreaRule("Atlantic", _lon_below(0), "lon < 0"),
        AreaRule("English_Channel"),
    ),
    "English_Channel": (
        AreaRule("North_Sea"),
        AreaRule("Atlantic"),
        AreaRule("Mediterranean", _lat_below(50), "lat < 50"),
    ),
    "Atlantic": (
        AreaRule("Arctic", _lat_above(55), "lat > 55"),
        AreaRule("Mediterranean", _lat_below(45), "lat < 45"),
        AreaRule("North_Sea", _lon_above(-20), "lon > -20"),
        AreaRule("Gulf_of_Mexico", _lon_below(-60), "lon < -60"),
    ),
    "Mediterranean": (
        AreaRule("Atlantic"),
        AreaRule("English_Channel", _lat_above(42), "lat > 42"),
    ),
    "Pacific": (
        AreaRule("Arctic", _lat_above(45), "lat > 45"),
        AreaRule("Gulf_of_Mexico", lambda c: c.lon > -130 and c.lat < 35, "lon > -130 and lat < 35"),
    ),
    "Gulf_of_Mexico": (
        AreaRule("Atlantic"),
        AreaRule("Pacific", _lon_below(-90), "lon < -90"),
    ),
    "Arctic": (
        AreaRule("North_Sea", lambda c: -30 < c.lon < 30, "-30 < lon < 30"),
        AreaRule("Atlantic"),
        AreaRule("Pacific"),
    ),
    "Indian_Ocean": (
        AreaRule("Mediterranean", _lat_above(20), "lat > 20"),
        AreaRule("Pacific", _lon_above(100), "lon > 100"),
        AreaRule("Atlantic", _lon_below(50), "lon < 50"),
    ),
}


def resolve_patrol_areas(base: Base, rules: Mapping[str, Sequence[AreaRule]] = SECONDARY_AREA_RULES) -> AreaSelection:
    """
    Compute primary and secondary patrol areas for a base.

    Args:
        base: Departure base; only ``region`` and ``coordinates`` are used
        rules: Region rule table (defaults to SECONDARY_AREA_RULES)

    Returns:
        AreaSelection whose primary is ``(base.region,)`` and whose secondary
        never repeats a primary entry. An unknown region yields no secondary
        areas.
    """
    primary = (base.region,)
    secondary: List[str] = []
    for rule in rules.get(base.region, ()):
        if rule.area_id in primary or rule.area_id in secondary:
            continue
        if rule.applies(base.coordinates):
            secondary.append(rule.area_id)
    return AreaSelection(primary=primary, secondary=tuple(secondary))


def rank_patrol_areas_by_distance(base: Base, areas: Mapping[str, PatrolArea]) -> List[Tuple[str, float]]:
    """
    Order every patrol area by great-circle distance from the base to the area centre.

    Returns:
        List of (area_id, distance_km), nearest first
    """
    if not areas:
        return []
    ids = list(areas)
    dists = distances_km(tuple(base.coordinates), [tuple(areas[i].center) for i in ids])
    order = sorted(range(len(ids)), key=lambda k: (float(dists[k]), ids[k]))
    return [(ids[k], float(dists[k])) for k in order]


def area_options(base: Base, areas: Mapping[str, PatrolArea],
                 rules: Mapping[str, Sequence[AreaRule]] = SECONDARY_AREA_RULES) -> List[Tuple[str, str, str]]:
    """
    Patrol area choices for a selection widget.

    Returns:
        (area_id, display name, group) tuples, group being "primary" or
        "secondary"; ids missing from ``areas`` are skipped.
    """
    selection = resolve_patrol_areas(base, rules)
    options = []
    for group, ids in (("primary", selection.primary), ("secondary", selection.secondary)):
        for area_id in ids:
            area = areas.get(area_id)
            if area is not None:
                options.append((area_id, area.name, group))
    return options
