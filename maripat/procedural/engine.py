from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime
from pathlib import Path
from typing import Any, Callable, Dict, List, Optional

from ..classes.mission_objects import Mission
from ..misc.logger import create_logger
from ..misc.math_utils import distance_km
from ..resources.reference_data import ReferenceCatalog, get_catalog
from .aircraft import assign_aircraft, select_aircraft
from .area_matching import resolve_patrol_areas
from .briefing import export_briefing, mission_summary, render_briefing
from .environment_controller import EnvironmentController
from .radio import RadioCommsHelper
from .randomizer import Randomizer
from .sequence import MissionCounter, default_counter
from .spec import GeneratorSettings, MissionRequest
from .threat_assessment import sample_threat_level
from .timing_model import TimingModel, utc_now
from .validation import NoActiveMission, ReferenceDataGap, RequestValidator
from .waypoints import generate_waypoints

CODENAME_ADJECTIVES = [
    "NORTHERN", "SOUTHERN", "EASTERN", "WESTERN", "CENTRAL",
    "BLUE", "GREEN", "RED", "GOLD", "SILVER",
    "SWIFT", "SILENT", "DEEP", "HIGH", "LONG",
    "SHARP", "BRIGHT", "DARK", "CLEAR", "STORM",
]

CODENAME_NOUNS = [
    "SENTINEL", "GUARDIAN", "WATCHER", "HUNTER", "SEEKER",
    "FALCON", "EAGLE", "HAWK", "RAVEN", "ALBATROSS",
    "TRIDENT", "ANCHOR", "COMPASS", "BEACON", "LIGHTHOUSE",
    "WAVE", "TIDE", "CURRENT", "REEF", "DEPTH",
]


def generate_codename(rng: Randomizer) -> str:
    return f"{rng.choice(CODENAME_ADJECTIVES)} {rng.choice(CODENAME_NOUNS)}"


@dataclass
class MissionGenerator:
    """
    Assembles a complete Mission from a base, a mission type and an optional
    patrol area.

    Reference data, randomness, the clock and the mission counter are all
    injectable; by default the shared catalog, an unseeded Randomizer, the
    UTC wall clock and the process-wide counter are used.
    """
    catalog: Optional[ReferenceCatalog] = None
    randomizer: Optional[Randomizer] = None
    counter: Optional[MissionCounter] = None
    clock: Optional[Callable[[], datetime]] = None
    settings: Optional[GeneratorSettings] = None
    verbose: bool = False
    logger: Any = field(init=False, repr=False)
    last_gaps: List[ReferenceDataGap] = field(init=False, default_factory=list, repr=False)

    def __post_init__(self):
        self.logger = create_logger(verbose=self.verbose, name="MissionGenerator")
        if self.catalog is None:
            self.catalog = get_catalog()
        if self.randomizer is None:
            self.randomizer = Randomizer()
        if self.counter is None:
            self.counter = default_counter()
        if self.clock is None:
            self.clock = utc_now
        if self.settings is None:
            self.settings = GeneratorSettings()
        self._validator = RequestValidator(self.catalog)

    def select_aircraft(self, base_id: str, mission_type: str) -> str:
        """
        Aircraft type a mission of ``mission_type`` from ``base_id`` would fly.

        Raises:
            InvalidParameters: unknown base id or mission type.
        """
        self._validator.validate_base(base_id).raise_if_invalid()
        self._validator.validate_mission_type(mission_type).raise_if_invalid()
        base = self.catalog.get_base(base_id)
        definition = self.catalog.get_mission_type(mission_type)
        return select_aircraft(base.aircraft, definition.preferred_aircraft)

    def generate(self, request: MissionRequest) -> Mission:
        """Build a Mission from a MissionRequest."""
        return self.generate_mission(request.base_id, request.mission_type, request.patrol_area_id)

    def generate_mission(self, base_id: str, mission_type: str, patrol_area_id: Optional[str] = None) -> Mission:
        """
        Build and return a Mission.

        Raises:
            InvalidParameters: unknown base id, mission type or explicit patrol
                area. Nothing is sampled and the counter is untouched.
        """
        check = self._validator.validate_request(base_id, mission_type, patrol_area_id)
        if not check.valid:
            self.logger.warning(f"Mission generation rejected: {check.message}")
        check.raise_if_invalid()

        base = self.catalog.get_base(base_id)
        definition = self.catalog.get_mission_type(mission_type)

        if patrol_area_id is None:
            patrol_area_id = resolve_patrol_areas(base).primary[0]
            self.logger.debug(f"Auto-selected patrol area {patrol_area_id} for {base_id}")
        area = self.catalog.get_patrol_area(patrol_area_id)
        if area is None:
            # Base declares a region with no patrol area entry
            check = self._validator.validate_patrol_area(patrol_area_id)
            self.logger.warning(f"Mission generation rejected: {check.message}")
            check.raise_if_invalid()

        rng = self.randomizer
        gaps: List[ReferenceDataGap] = []

        aircraft_type = select_aircraft(base.aircraft, definition.preferred_aircraft)
        if not base.aircraft:
            gaps.append(ReferenceDataGap("base_aircraft", base.id, aircraft_type))
        aircraft = assign_aircraft(aircraft_type, mission_type, rng, self.settings.fuel_load_range, gaps)

        distance = distance_km(tuple(base.coordinates), tuple(area.center))
        waypoints = generate_waypoints(area, self.settings.waypoint_count)

        codename = generate_codename(rng)
        comms = RadioCommsHelper(rng).build(base.country, base.base_type)
        weather = EnvironmentController(rng).sample_weather()
        threat_level = sample_threat_level(rng)

        now = self.clock()
        timing = TimingModel(
            rng,
            start_offset_hours=self.settings.start_offset_hours,
            rounding_minutes=self.settings.start_rounding_minutes,
        ).schedule(now, definition.planned_duration_hours)

        sequence = self.counter.next()
        mission_id = f"{self.settings.id_prefix}-{now.strftime('%y%m%d')}-{sequence:04d}"

        for gap in gaps:
            self.logger.debug(f"Reference data gap in {gap.table} for {gap.key}; using {gap.fallback}")
        self.last_gaps = gaps

        mission = Mission(
            id=mission_id,
            sequence=sequence,
            codename=codename,
            mission_type=definition,
            base=base,
            patrol_area=area,
            aircraft=aircraft,
            distance_km=distance,
            waypoints=waypoints,
            communications=comms,
            weather=weather,
            timing=timing,
            threat_level=threat_level,
            classification=self.settings.classification,
            created_at=now,
        )
        self.logger.info(
            f"Generated {mission.id} OPERATION {codename}: {definition.name} from {base.name} "
            f"to {area.name} ({round(distance)} km) with {aircraft_type}"
        )
        return mission


class PlanningSession:
    """
    Holds the one mission a planning UI is working on.

    Generating a new mission replaces the previous one; there is no history.
    """

    def __init__(self, generator: Optional[MissionGenerator] = None):
        self.generator = generator or MissionGenerator()
        self.current_mission: Optional[Mission] = None

    def generate(self, base_id: str, mission_type: str, patrol_area_id: Optional[str] = None) -> Mission:
        # A failed generation leaves the previous mission in place.
        mission = self.generator.generate_mission(base_id, mission_type, patrol_area_id)
        self.current_mission = mission
        return mission

    def _require_mission(self) -> Mission:
        if self.current_mission is None:
            raise NoActiveMission("No mission has been generated in this session")
        return self.current_mission

    def briefing(self, generated_at: Optional[datetime] = None) -> str:
        return render_briefing(self._require_mission(), generated_at)

    def export(self, directory, generated_at: Optional[datetime] = None) -> Path:
        return export_briefing(self._require_mission(), directory, generated_at)

    def summary(self) -> Dict[str, Any]:
        return mission_summary(self._require_mission())

    def clear(self) -> None:
        self.current_mission = None
