__version__ = "0.1.0"

import logging

# Library default: stay silent unless the application configures logging.
logging.getLogger("maripat").addHandler(logging.NullHandler())

# --- Records ---
from .classes.mission_objects import (
    Coordinate,
    Bounds,
    Base,
    PatrolArea,
    MissionTypeDefinition,
    Waypoint,
    AircraftAssignment,
    Communications,
    WeatherSnapshot,
    MissionTiming,
    Mission,
)

# --- Reference Data ---
from .resources.reference_data import ReferenceCatalog, get_catalog

# --- Geometry ---
from .misc.math_utils import distance_km, distances_km, km_to_nm, format_coordinate

# --- Mission Generation ---
from .procedural import (
    MissionRequest,
    GeneratorSettings,
    MissionGenerator,
    PlanningSession,
    Randomizer,
    MissionCounter,
    resolve_patrol_areas,
    generate_waypoints,
    select_aircraft,
    render_briefing,
    export_briefing,
    mission_summary,
    MissionGenerationError,
    InvalidParameters,
    NoActiveMission,
)

# --- Logging ---
from .misc.logging_config import setup_logger, get_logger

from .misc.logger import create_logger
_logger = create_logger(verbose=False, name="maripat")
_logger.info(f"Maripat {__version__} loaded.")
