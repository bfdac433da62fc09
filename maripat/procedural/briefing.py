"""
Plain-text mission briefing.

Everything here is a pure function of a Mission. The only value not taken from
the Mission is the briefing's own timestamp, which callers may pin via
``generated_at``.
"""
from __future__ import annotations

from datetime import datetime
from pathlib import Path
from typing import Any, Dict, List, Optional, Union

from ..classes.mission_objects import Mission, as_utc
from ..misc.math_utils import format_coordinate
from .threat_assessment import describe_threat
from .timing_model import utc_now

RULE_WIDTH = 63
RULE = "═" * RULE_WIDTH

SPECIAL_INSTRUCTIONS = [
    "Monitor GUARD frequency at all times",
    "Report all surface contacts via tactical data link",
    "Maintain positive aircraft control in controlled airspace",
    "Execute EMCON procedures as directed",
    "Weather updates every 30 minutes",
    "Emergency procedures per SOP-MAR-001",
]


def _heading(title: str) -> List[str]:
    return [RULE, title.center(RULE_WIDTH).rstrip(), RULE, ""]


def _zulu(moment: datetime) -> str:
    return as_utc(moment).strftime("%Y-%m-%dT%H:%M:%SZ")


def render_briefing(mission: Mission, generated_at: Optional[datetime] = None) -> str:
    """
    Render the full briefing document for a mission.

    Args:
        mission: The assembled mission.
        generated_at: Timestamp printed in the header and footer. Defaults to
            the current UTC time.

    Returns:
        The briefing text, sections separated by ``═`` rules.
    """
    if generated_at is None:
        generated_at = utc_now()

    mtype = mission.mission_type
    area = mission.patrol_area
    base = mission.base
    aircraft = mission.aircraft
    comms = mission.communications
    weather = mission.weather
    timing = mission.timing

    lines: List[str] = [
        RULE,
        "MARITIME PATROL MISSION".center(RULE_WIDTH).rstrip(),
        f"OPERATION {mission.codename}".center(RULE_WIDTH).rstrip(),
        RULE,
        "",
        f"CLASSIFICATION: {mission.classification}",
        f"MISSION ID: {mission.id}",
        f"TIME OF BRIEFING: {_zulu(generated_at)}",
        "",
    ]

    lines += _heading("SITUATION")
    lines += [
        f"MISSION TYPE: {mtype.name}",
        f"OPERATING AREA: {area.name}",
        area.description,
        "",
        f"WEATHER: {weather.condition}, Winds {weather.wind}",
        f"VISIBILITY: {weather.visibility}, Ceiling {weather.ceiling}",
        f"TEMPERATURE: {weather.temperature}, Altimeter {weather.pressure}",
        "",
    ]

    lines += _heading("MISSION PARAMETERS")
    lines += [
        f"CALLSIGN: {mission.callsign}",
        f"AIRCRAFT: {aircraft.type} ({aircraft.tail_number})",
        f"CREW: {aircraft.crew} Personnel",
        f"FUEL LOAD: {aircraft.fuel_lbs:,} lbs",
        "",
        f"DEPARTURE: {base.name} ({base.display_code})",
        f"BASE POSITION: {format_coordinate(base.coordinates)}",
        f"PATROL AREA: {area.name}",
        f"AREA CENTRE: {format_coordinate(area.center)}",
        f"DISTANCE TO AREA: {round(mission.distance_km)} km ({round(mission.distance_nm)} nm)",
        f"PATROL ALTITUDE: {mtype.min_altitude_ft}-{mtype.max_altitude_ft} ft",
        "",
        f"MISSION START: {_zulu(timing.start)}",
        f"MISSION END: {_zulu(timing.end)}",
        f"ESTIMATED DURATION: {timing.duration} ({mtype.duration_range})",
        "",
    ]

    lines += _heading("OBJECTIVES")
    lines += [f"{i}. {objective}" for i, objective in enumerate(mtype.objectives, start=1)]
    lines.append("")
    if area.key_areas:
        lines.append("KEY PATROL AREAS:")
        lines += [f"• {key_area}" for key_area in area.key_areas]
    else:
        lines.append("KEY PATROL AREAS: Standard patrol pattern")
    lines.append("")

    lines += _heading("PATROL WAYPOINTS")
    lines += [
        f"{i}. {wp.name}: {format_coordinate(wp.coordinate)}"
        for i, wp in enumerate(mission.waypoints, start=1)
    ]
    lines.append("")

    lines += _heading("EQUIPMENT")
    lines += [f"▶ {item}" for item in mtype.equipment]
    lines.append("")
    lines.append("WEAPONS / STORES:")
    lines += [f"• {weapon}" for weapon in aircraft.weapons]
    lines.append("")

    lines += _heading("COMMUNICATIONS")
    lines += [
        f"PRIMARY FREQ: {comms.primary_mhz}",
        f"SECONDARY FREQ: {comms.secondary_mhz}",
        f"MARITIME OPS: {comms.maritime_mhz}",
        f"SAR COORDINATION: {comms.sar_mhz}",
        f"GUARD: {comms.guard_mhz}",
        f"EMERGENCY: {comms.emergency_mhz}",
        f"SATCOM: {comms.satcom_channel}",
        "",
        "IFF CODES:",
        f"MODE 1: {comms.iff_mode1}",
        f"MODE 3: {comms.iff_mode3}",
        "",
        f"AUTHENTICATION: {comms.authentication}",
        "",
    ]

    lines += _heading("THREAT ASSESSMENT")
    lines += [
        f"THREAT LEVEL: {mission.threat_level}",
        describe_threat(mission.threat_level),
        "",
        "POTENTIAL HAZARDS:",
    ]
    if area.threats:
        lines += [f"⚠ {threat}" for threat in area.threats]
    else:
        lines.append("⚠ Standard maritime hazards")
    lines.append("")

    lines += _heading("SPECIAL INSTRUCTIONS")
    lines += [f"▶ {instruction}" for instruction in SPECIAL_INSTRUCTIONS]
    lines.append(f"▶ Maintain minimum altitude {mtype.min_altitude_ft}ft AGL")
    lines.append("")

    lines += _heading("SIGNATURES")
    lines += [
        "MISSION COMMANDER: _________________________",
        "",
        "PILOT IN COMMAND: __________________________",
        "",
        "BRIEFED BY: Duty Operations Officer",
        "",
        RULE,
        "GOOD HUNTING - STAY VIGILANT".center(RULE_WIDTH).rstrip(),
        RULE,
        "",
        f"Generated: {_zulu(generated_at)}",
    ]
    return "\n".join(lines)


def briefing_filename(mission: Mission) -> str:
    return mission.export_filename


def export_briefing(mission: Mission, directory: Union[str, Path],
                    generated_at: Optional[datetime] = None) -> Path:
    """
    Write the rendered briefing to ``directory`` as UTF-8 text.

    The directory is created if needed. Returns the path of the written file.
    """
    target_dir = Path(directory)
    target_dir.mkdir(parents=True, exist_ok=True)
    path = target_dir / briefing_filename(mission)
    path.write_text(render_briefing(mission, generated_at), encoding="utf-8")
    return path


def mission_summary(mission: Mission) -> Dict[str, Any]:
    """Compact status record for list views."""
    return {
        "id": mission.id,
        "codename": mission.codename,
        "callsign": mission.callsign,
        "type": mission.mission_type.name,
        "aircraft": mission.aircraft.type,
        "area": mission.patrol_area.name,
        "threat_level": mission.threat_level,
        "status": "BRIEFED",
        "start": mission.timing.start_zulu,
        "duration": mission.timing.duration,
    }
