"""Tests for the plain-text briefing."""

from datetime import datetime, timedelta, timezone

from maripat.classes.mission_objects import MissionTiming
from maripat.procedural.briefing import (
    RULE,
    briefing_filename,
    export_briefing,
    mission_summary,
    render_briefing,
)

from conftest import FIXED_NOW

LATER = datetime(2025, 10, 19, 12, 30, 5, tzinfo=timezone.utc)
TIMESTAMP_PREFIXES = ("TIME OF BRIEFING:", "Generated:")


def without_timestamps(text):
    return [line for line in text.splitlines() if not line.startswith(TIMESTAMP_PREFIXES)]


class TestRenderBriefing:
    def test_deterministic_for_fixed_time(self, mission):
        assert render_briefing(mission, FIXED_NOW) == render_briefing(mission, FIXED_NOW)

    def test_only_timestamp_lines_depend_on_now(self, mission):
        first = render_briefing(mission, FIXED_NOW)
        second = render_briefing(mission, LATER)
        assert first != second
        assert without_timestamps(first) == without_timestamps(second)
        assert "TIME OF BRIEFING: 2025-10-19T12:30:05Z" in second

    def test_timestamps_printed_in_utc(self, mission):
        local = LATER.astimezone(timezone(timedelta(hours=-5)))
        text = render_briefing(mission, local)
        assert "TIME OF BRIEFING: 2025-10-19T12:30:05Z" in text
        assert "Generated: 2025-10-19T12:30:05Z" in text

    def test_default_timestamp(self, mission):
        assert without_timestamps(render_briefing(mission)) == without_timestamps(
            render_briefing(mission, FIXED_NOW))

    def test_draws_no_randomness(self, generator, mission):
        state = generator.randomizer.rng.getstate()
        render_briefing(mission, FIXED_NOW)
        assert generator.randomizer.rng.getstate() == state

    def test_sections_in_order(self, mission):
        text = render_briefing(mission, FIXED_NOW)
        headings = [
            "CLASSIFICATION:",
            "SITUATION",
            "MISSION PARAMETERS",
            "OBJECTIVES",
            "PATROL WAYPOINTS",
            "EQUIPMENT",
            "COMMUNICATIONS",
            "THREAT ASSESSMENT",
            "SPECIAL INSTRUCTIONS",
            "SIGNATURES",
        ]
        positions = [text.index(heading) for heading in headings]
        assert positions == sorted(positions)
        assert text.startswith(RULE)
        assert RULE == "═" * 63

    def test_template_fields(self, mission):
        text = render_briefing(mission, FIXED_NOW)
        assert f"OPERATION {mission.codename}" in text
        assert f"CLASSIFICATION: {mission.classification}" in text
        assert f"CALLSIGN: {mission.callsign}" in text
        assert f"AIRCRAFT: P-8A Poseidon ({mission.aircraft.tail_number})" in text
        assert "DEPARTURE: NAS Patuxent River (KNHK)" in text
        assert "BASE POSITION: 38.286°N 76.412°W" in text
        assert "DISTANCE TO AREA: 3321 km (1793 nm)" in text
        assert "1. PATROL_1: 59.000°N 57.000°W" in text
        assert "4. PATROL_4: 41.000°N 57.000°W" in text
        assert f"THREAT LEVEL: {mission.threat_level}" in text
        assert f"AUTHENTICATION: {mission.communications.authentication}" in text
        for objective in mission.mission_type.objectives:
            assert objective in text
        for weapon in mission.aircraft.weapons:
            assert f"• {weapon}" in text

    def test_fuel_uses_thousands_separator(self, mission):
        assert f"FUEL LOAD: {mission.aircraft.fuel_lbs:,} lbs" in render_briefing(mission, FIXED_NOW)


class TestExport:
    def test_filename(self, mission):
        expected = f"Mission_{mission.id}_{mission.codename.replace(' ', '_')}.txt"
        assert briefing_filename(mission) == expected

    def test_export_writes_utf8_text(self, mission, tmp_path):
        target = tmp_path / "briefings" / "today"
        path = export_briefing(mission, target, FIXED_NOW)
        assert path.parent == target
        assert path.read_text(encoding="utf-8") == render_briefing(mission, FIXED_NOW)

    def test_summary(self, mission):
        summary = mission_summary(mission)
        assert summary["id"] == mission.id
        assert summary["callsign"] == mission.callsign
        assert summary["type"] == "Maritime Patrol"
        assert summary["area"] == mission.patrol_area.name
        assert summary["status"] == "BRIEFED"
        assert summary["start"].endswith(" ZULU")

    def test_summary_start_in_utc(self):
        offset = timezone(timedelta(hours=2))
        start = datetime(2025, 10, 18, 9, 15, tzinfo=offset)
        timing = MissionTiming(start=start, end=start + timedelta(hours=6), duration_hours=6.0)
        assert timing.start_zulu == "07:15 ZULU"
