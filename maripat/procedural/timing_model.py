from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime, timedelta, timezone
from typing import Tuple

from ..classes.mission_objects import MissionTiming
from .randomizer import Randomizer


def utc_now() -> datetime:
    return datetime.now(timezone.utc)


def round_to_minutes(moment: datetime, minutes: int = 15) -> datetime:
    """
    Round to the nearest multiple of ``minutes`` past the hour, zeroing seconds.

    Halfway values round up (07:37:30 -> 07:45 with 15-minute steps).
    """
    floored = moment.replace(second=0, microsecond=0, minute=(moment.minute // minutes) * minutes)
    remainder = moment - floored
    if remainder >= timedelta(minutes=minutes) / 2:
        floored += timedelta(minutes=minutes)
    return floored


@dataclass
class TimingModel:
    """Schedules a mission window: start offset from now, fixed duration per mission type."""
    rng: Randomizer
    start_offset_hours: Tuple[float, float] = (1.0, 4.0)
    rounding_minutes: int = 15

    def schedule(self, now: datetime, duration_hours: float) -> MissionTiming:
        offset = timedelta(hours=self.rng.uniform(*self.start_offset_hours))
        start = round_to_minutes(now + offset, self.rounding_minutes)
        end = start + timedelta(hours=duration_hours)
        return MissionTiming(start=start, end=end, duration_hours=duration_hours)
