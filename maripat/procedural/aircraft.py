"""
Aircraft selection and loadout derivation.

Selection order is fixed: the first type in the mission's preference list
that the base actually operates, then the base's first listed aircraft, then
DEFAULT_AIRCRAFT for bases that list none. Every table lookup below falls
back to a documented default and reports the miss as a ReferenceDataGap.
"""
from __future__ import annotations

from typing import Dict, List, Optional, Sequence, Tuple

from ..classes.mission_objects import AircraftAssignment
from .randomizer import Randomizer
from .validation import ReferenceDataGap

DEFAULT_AIRCRAFT = "P-8A Poseidon"
DEFAULT_KEY = "Default"

CREW_SIZES: Dict[str, int] = {
    "P-8A Poseidon": 9,
    "P-3C Orion": 11,
    "P-3AM Orion": 11,
    "CP-140 Aurora": 10,
    "Atlantique 2": 12,
    "EP-3E Aries": 22,
    "ATR 72MP": 7,
    "C-295M": 6,
    "Falcon 50M": 5,
    "C-130J Super Hercules": 4,
    "C-130J Hercules": 4,
    "F-16 Fighting Falcon": 1,
    "F-35B Lightning II": 1,
    "MQ-4C Triton": 0,  # unmanned
    DEFAULT_KEY: 2,
}

FUEL_CAPACITIES_LBS: Dict[str, int] = {
    "P-8A Poseidon": 34000,
    "P-3C Orion": 18000,
    "P-3AM Orion": 18000,
    "CP-140 Aurora": 18000,
    "Atlantique 2": 40000,
    "EP-3E Aries": 18000,
    "ATR 72MP": 11000,
    "C-295M": 13500,
    "Falcon 50M": 9000,
    "C-130J Super Hercules": 19000,
    "C-130J Hercules": 19000,
    "F-16 Fighting Falcon": 3200,
    "F-35B Lightning II": 6100,
    DEFAULT_KEY: 8000,
}

WEAPON_LOADOUTS: Dict[str, Dict[str, List[str]]] = {
    "P-8A Poseidon": {
        "MARITIME_PATROL": ["Harpoon Missiles", "Sonobuoys", "Camera Systems"],
        "SAR": ["SAR Kits", "Sonobuoys", "Flares"],
        "RECON": ["Camera Systems", "ESM Pods"],
        "ASW": ["Mk 54 Torpedoes", "Sonobuoys", "Harpoon Missiles"],
        "FISHERY_PATROL": ["Camera Systems", "Flares"],
        DEFAULT_KEY: ["Standard Sensors"],
    },
    "P-3C Orion": {
        "MARITIME_PATROL": ["Harpoon Missiles", "Sonobuoys"],
        "SAR": ["SAR Kits", "Smoke Markers"],
        "ASW": ["Mk 46 Torpedoes", "Sonobuoys", "Depth Charges"],
        "FISHERY_PATROL": ["Camera Systems", "Smoke Markers"],
        DEFAULT_KEY: ["Sonobuoys", "Camera Systems"],
    },
    "CP-140 Aurora": {
        "ASW": ["Mk 46 Torpedoes", "Sonobuoys"],
        "MARITIME_PATROL": ["Sonobuoys", "Camera Systems"],
        DEFAULT_KEY: ["Sonobuoys", "Camera Systems"],
    },
    "Atlantique 2": {
        "ASW": ["MU90 Torpedoes", "Sonobuoys"],
        "MARITIME_PATROL": ["Exocet AM39", "Sonobuoys"],
        "RECON": ["Camera Systems", "ESM Pods"],
        DEFAULT_KEY: ["Sonobuoys", "Camera Systems"],
    },
    "ATR 72MP": {
        "SAR": ["SAR Kits", "Life Rafts"],
        DEFAULT_KEY: ["Camera Systems", "Flares"],
    },
    "F-16 Fighting Falcon": {
        "RECON": ["Recce Pod", "AIM-9 Sidewinder"],
        DEFAULT_KEY: ["20mm Cannon", "AIM-120 AMRAAM"],
    },
    DEFAULT_KEY: {
        DEFAULT_KEY: ["Standard Equipment"],
    },
}


def select_aircraft(base_aircraft: Sequence[str], preferred: Sequence[str]) -> str:
    """
    Pick the aircraft type for a mission.

    Args:
        base_aircraft: Types stationed at the departure base, in listed order
        preferred: Mission type's ranked preference list

    Returns:
        First preferred type present at the base; otherwise the base's first
        aircraft; otherwise DEFAULT_AIRCRAFT.

    Examples:
        >>> select_aircraft(["P-3C Orion", "C-295M"], ["P-3C Orion", "ATR 72MP"])
        'P-3C Orion'
        >>> select_aircraft(["Typhoon"], ["P-8A Poseidon"])
        'Typhoon'
        >>> select_aircraft([], ["P-8A Poseidon"])
        'P-8A Poseidon'
    """
    available = set(base_aircraft)
    for aircraft in preferred:
        if aircraft in available:
            return aircraft
    if base_aircraft:
        return base_aircraft[0]
    return DEFAULT_AIRCRAFT


def generate_tail_number(rng: Randomizer) -> str:
    """Two uppercase letters, a hyphen and three digits, e.g. ``KX-402``."""
    return f"{rng.letters(2)}-{rng.digits(3)}"


def crew_size(aircraft: str, gaps: Optional[List[ReferenceDataGap]] = None) -> int:
    if aircraft in CREW_SIZES:
        return CREW_SIZES[aircraft]
    if gaps is not None:
        gaps.append(ReferenceDataGap("crew_sizes", aircraft, str(CREW_SIZES[DEFAULT_KEY])))
    return CREW_SIZES[DEFAULT_KEY]


def fuel_load(aircraft: str, rng: Randomizer, load_range: Tuple[float, float] = (0.75, 0.95),
              gaps: Optional[List[ReferenceDataGap]] = None) -> int:
    """Max capacity times a uniformly sampled load factor, rounded to whole pounds."""
    capacity = FUEL_CAPACITIES_LBS.get(aircraft)
    if capacity is None:
        capacity = FUEL_CAPACITIES_LBS[DEFAULT_KEY]
        if gaps is not None:
            gaps.append(ReferenceDataGap("fuel_capacities", aircraft, str(capacity)))
    return int(round(capacity * rng.uniform(*load_range)))


def weapons_loadout(aircraft: str, mission_type: str,
                    gaps: Optional[List[ReferenceDataGap]] = None) -> Tuple[str, ...]:
    """
    Weapons for an aircraft/mission pair.

    Falls back to the aircraft's own default, then to the global default when
    the aircraft is not in the table at all.
    """
    table = WEAPON_LOADOUTS.get(aircraft)
    if table is None:
        table = WEAPON_LOADOUTS[DEFAULT_KEY]
        if gaps is not None:
            gaps.append(ReferenceDataGap("weapon_loadouts", aircraft, "global default"))
    if mission_type in table:
        return tuple(table[mission_type])
    if gaps is not None and table is not WEAPON_LOADOUTS[DEFAULT_KEY]:
        gaps.append(ReferenceDataGap("weapon_loadouts", f"{aircraft}/{mission_type}", "aircraft default"))
    return tuple(table[DEFAULT_KEY])


def assign_aircraft(aircraft: str, mission_type: str, rng: Randomizer,
                    load_range: Tuple[float, float] = (0.75, 0.95),
                    gaps: Optional[List[ReferenceDataGap]] = None) -> AircraftAssignment:
    """Derive tail number, crew, fuel and weapons for the selected type."""
    return AircraftAssignment(
        type=aircraft,
        tail_number=generate_tail_number(rng),
        crew=crew_size(aircraft, gaps),
        fuel_lbs=fuel_load(aircraft, rng, load_range, gaps),
        weapons=weapons_loadout(aircraft, mission_type, gaps),
    )
