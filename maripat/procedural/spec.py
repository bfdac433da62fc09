from __future__ import annotations

from dataclasses import dataclass
from typing import Optional, Tuple


@dataclass(frozen=True)
class MissionRequest:
    """
    Contract for the mission generator input. This is the surface a UI or
    service calls with.

    ``patrol_area_id`` is optional; when omitted the generator picks the base's
    primary patrol area.
    """
    base_id: str
    mission_type: str = "MARITIME_PATROL"  # MARITIME_PATROL|SAR|RECON|ASW|FISHERY_PATROL
    patrol_area_id: Optional[str] = None


@dataclass(frozen=True)
class GeneratorSettings:
    """
    Tunables for the generator. Defaults reproduce the reference planning tool.
    """
    classification: str = "NATO RESTRICTED"
    waypoint_count: int = 4
    fuel_load_range: Tuple[float, float] = (0.75, 0.95)
    start_offset_hours: Tuple[float, float] = (1.0, 4.0)
    start_rounding_minutes: int = 15
    id_prefix: str = "MP"  # Maritime Patrol

    def __post_init__(self):
        lo, hi = self.fuel_load_range
        if not 0.0 < lo <= hi <= 1.0:
            raise ValueError(f"fuel_load_range must satisfy 0 < low <= high <= 1, got {self.fuel_load_range}")
        lo, hi = self.start_offset_hours
        if not 0.0 <= lo <= hi:
            raise ValueError(f"start_offset_hours must satisfy 0 <= low <= high, got {self.start_offset_hours}")
        if self.start_rounding_minutes <= 0 or 60 % self.start_rounding_minutes:
            raise ValueError("start_rounding_minutes must be a positive divisor of 60")
        if self.waypoint_count < 1:
            raise ValueError("waypoint_count must be at least 1")
