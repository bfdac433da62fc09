# maripat/classes/mission_objects.py
from __future__ import annotations

from dataclasses import dataclass, field, fields
from datetime import datetime, timezone
from typing import Any, Dict, Iterator, Optional, Tuple

from ..misc.math_utils import km_to_nm


def _to_primitive(value: Any) -> Any:
    if isinstance(value, BaseMaripatObject):
        return value.to_dict()
    if isinstance(value, datetime):
        return value.isoformat()
    if isinstance(value, (list, tuple)):
        return [_to_primitive(v) for v in value]
    if isinstance(value, dict):
        return {k: _to_primitive(v) for k, v in value.items()}
    return value


def as_utc(moment: datetime) -> datetime:
    """Convert an aware datetime to UTC; naive datetimes are taken as UTC already."""
    if moment.tzinfo is None:
        return moment
    return moment.astimezone(timezone.utc)


@dataclass(frozen=True)
class BaseMaripatObject:
    """Base class for immutable maripat records."""
    def to_dict(self) -> Dict[str, Any]:
        """Converts the object to JSON-friendly primitives, dropping None fields."""
        out = {}
        for f in fields(self):
            val = getattr(self, f.name)
            if val is not None:
                out[f.name] = _to_primitive(val)
        return out


# --- Geography ---
@dataclass(frozen=True)
class Coordinate(BaseMaripatObject):
    """Latitude / longitude pair in decimal degrees."""
    lat: float
    lon: float

    def __iter__(self) -> Iterator[float]:
        yield self.lat
        yield self.lon

    @classmethod
    def from_pair(cls, pair) -> "Coordinate":
        lat, lon = pair
        return cls(float(lat), float(lon))


@dataclass(frozen=True)
class Bounds(BaseMaripatObject):
    """
    Bounding rectangle in degrees.

    When ``west > east`` the rectangle crosses the antimeridian and spans
    ``east + 360 - west`` degrees of longitude.
    """
    north: float
    south: float
    east: float
    west: float

    @property
    def crosses_antimeridian(self) -> bool:
        return self.west > self.east

    @property
    def lat_span(self) -> float:
        return self.north - self.south

    @property
    def lon_span(self) -> float:
        if self.crosses_antimeridian:
            return self.east + 360.0 - self.west
        return self.east - self.west

    def contains(self, coord, tolerance: float = 1e-9) -> bool:
        """Inclusive containment test, antimeridian-aware."""
        lat, lon = coord
        if not (self.south - tolerance <= lat <= self.north + tolerance):
            return False
        if self.crosses_antimeridian:
            return lon >= self.west - tolerance or lon <= self.east + tolerance
        return self.west - tolerance <= lon <= self.east + tolerance


# --- Reference records ---
@dataclass(frozen=True)
class Base(BaseMaripatObject):
    """Airbase, naval air station or naval base a patrol departs from."""
    id: str
    name: str
    country: str
    region: str
    coordinates: Coordinate
    aircraft: Tuple[str, ...] = ()
    description: str = ""

    # Optional tactical details (not every base carries them)
    icao: Optional[str] = None
    base_type: Optional[str] = None
    runway: Optional[str] = None
    frequency: Optional[str] = None
    elevation: Optional[str] = None
    capabilities: Tuple[str, ...] = ()

    @property
    def display_code(self) -> str:
        return self.icao or self.id


@dataclass(frozen=True)
class PatrolArea(BaseMaripatObject):
    """Named maritime zone a mission patrols."""
    id: str
    name: str
    bounds: Bounds
    center: Coordinate
    description: str = ""
    key_areas: Tuple[str, ...] = ()
    threats: Tuple[str, ...] = ()


@dataclass(frozen=True)
class MissionTypeDefinition(BaseMaripatObject):
    """Static definition of a mission type (objectives, equipment, aircraft preference)."""
    id: str
    name: str
    description: str
    objectives: Tuple[str, ...]
    equipment: Tuple[str, ...]
    min_duration_hours: float
    max_duration_hours: float
    min_altitude_ft: int
    max_altitude_ft: int
    preferred_aircraft: Tuple[str, ...] = ()

    @property
    def duration_range(self) -> str:
        return f"{self.min_duration_hours:g}-{self.max_duration_hours:g} hours"

    @property
    def planned_duration_hours(self) -> float:
        """Duration used to schedule the mission end: midpoint of the range."""
        return (self.min_duration_hours + self.max_duration_hours) / 2.0


# --- Generated records ---
@dataclass(frozen=True)
class Waypoint(BaseMaripatObject):
    """Labeled patrol waypoint."""
    name: str
    coordinate: Coordinate
    description: str = ""


@dataclass(frozen=True)
class AircraftAssignment(BaseMaripatObject):
    """Aircraft tasked for a mission with its derived operational detail."""
    type: str
    tail_number: str
    crew: int
    fuel_lbs: int
    weapons: Tuple[str, ...] = ()


@dataclass(frozen=True)
class Communications(BaseMaripatObject):
    """Radio plan, authentication and IFF codes."""
    callsign: str
    primary_mhz: str
    secondary_mhz: str
    maritime_mhz: str
    sar_mhz: str
    guard_mhz: str
    emergency_mhz: str
    satcom_channel: str
    authentication: str
    iff_mode1: str
    iff_mode3: str


@dataclass(frozen=True)
class WeatherSnapshot(BaseMaripatObject):
    """Weather sampled at generation time."""
    condition: str
    wind_direction_deg: int
    wind_speed_kt: int
    visibility_sm: int
    ceiling_ft: int
    temperature_c: int
    pressure_inhg: float

    @property
    def wind(self) -> str:
        return f"{self.wind_direction_deg:03d}°/{self.wind_speed_kt}KT"

    @property
    def visibility(self) -> str:
        return f"{self.visibility_sm}SM"

    @property
    def ceiling(self) -> str:
        return f"{self.ceiling_ft}FT"

    @property
    def temperature(self) -> str:
        return f"{self.temperature_c}°C"

    @property
    def pressure(self) -> str:
        return f"{self.pressure_inhg:.2f} inHg"


@dataclass(frozen=True)
class MissionTiming(BaseMaripatObject):
    """Scheduled mission window (UTC)."""
    start: datetime
    end: datetime
    duration_hours: float

    @property
    def duration(self) -> str:
        total_minutes = int(round(self.duration_hours * 60))
        return f"{total_minutes // 60}:{total_minutes % 60:02d}"

    @property
    def start_zulu(self) -> str:
        return as_utc(self.start).strftime("%H:%M") + " ZULU"


@dataclass(frozen=True)
class Mission(BaseMaripatObject):
    """A single generated patrol sortie. Read-only once assembled."""
    id: str
    sequence: int
    codename: str
    mission_type: MissionTypeDefinition
    base: Base
    patrol_area: PatrolArea
    aircraft: AircraftAssignment
    distance_km: float
    waypoints: Tuple[Waypoint, ...]
    communications: Communications
    weather: WeatherSnapshot
    timing: MissionTiming
    threat_level: str
    classification: str = "NATO RESTRICTED"
    created_at: Optional[datetime] = field(default=None, compare=False)

    @property
    def callsign(self) -> str:
        return self.communications.callsign

    @property
    def distance_nm(self) -> float:
        return km_to_nm(self.distance_km)

    @property
    def export_filename(self) -> str:
        return f"Mission_{self.id}_{self.codename.replace(' ', '_')}.txt"
