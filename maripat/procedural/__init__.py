"""
Maritime patrol mission generation for maripat.

This package turns a (base, mission type, patrol area) request into an
immutable Mission record and renders that record as a plain-text briefing.

All sampled fields are drawn from one injectable Randomizer and the mission
sequence comes from an injectable MissionCounter, so a fixed seed, clock and
counter reproduce a mission exactly.
"""

from .spec import MissionRequest, GeneratorSettings
from .engine import MissionGenerator, PlanningSession, generate_codename
from .area_matching import AreaSelection, resolve_patrol_areas, area_options
from .waypoints import generate_waypoints
from .aircraft import select_aircraft, DEFAULT_AIRCRAFT
from .briefing import render_briefing, export_briefing, briefing_filename, mission_summary
from .randomizer import Randomizer
from .sequence import MissionCounter
from .validation import (
    MissionGenerationError,
    InvalidParameters,
    NoActiveMission,
    ReferenceDataGap,
)

__all__ = [
    "MissionRequest",
    "GeneratorSettings",
    "MissionGenerator",
    "PlanningSession",
    "generate_codename",
    "AreaSelection",
    "resolve_patrol_areas",
    "area_options",
    "generate_waypoints",
    "select_aircraft",
    "DEFAULT_AIRCRAFT",
    "render_briefing",
    "export_briefing",
    "briefing_filename",
    "mission_summary",
    "Randomizer",
    "MissionCounter",
    "MissionGenerationError",
    "InvalidParameters",
    "NoActiveMission",
    "ReferenceDataGap",
]
