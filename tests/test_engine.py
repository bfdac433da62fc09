"""Tests for mission assembly and the planning session."""

import json
import re

import pytest

from maripat.misc.math_utils import distance_km
from maripat.procedural import (
    DEFAULT_AIRCRAFT,
    GeneratorSettings,
    InvalidParameters,
    MissionCounter,
    MissionGenerator,
    MissionRequest,
    NoActiveMission,
    PlanningSession,
    Randomizer,
)
from maripat.procedural.engine import CODENAME_ADJECTIVES, CODENAME_NOUNS
from maripat.procedural.sequence import default_counter

from conftest import FIXED_NOW, fixed_clock


class TestGenerateMission:
    def test_basic_mission(self, mission, catalog):
        assert mission.id == "MP-251018-0001"
        assert mission.sequence == 1
        assert mission.base is catalog.get_base("KNHK")
        assert mission.patrol_area.id == "Atlantic"
        assert mission.aircraft.type == "P-8A Poseidon"
        assert mission.mission_type.id == "MARITIME_PATROL"
        assert mission.classification == "NATO RESTRICTED"
        assert mission.created_at == FIXED_NOW
        assert mission.distance_km == pytest.approx(3320.58, abs=0.05)

    def test_codename_and_callsign(self, mission):
        adjective, noun = mission.codename.split(" ")
        assert adjective in CODENAME_ADJECTIVES
        assert noun in CODENAME_NOUNS
        assert re.fullmatch(r"(POSEIDON|CLIPPER|SEAHAWK|NEPTUNE|MARINER) \d{2}", mission.callsign)
        assert mission.callsign.split(" ")[1] != "00"

    def test_communications(self, mission):
        comms = mission.communications
        for freq in (comms.primary_mhz, comms.secondary_mhz, comms.maritime_mhz, comms.sar_mhz):
            assert re.fullmatch(r"\d{3}\.\d{3}", freq)
            assert 250.0 <= float(freq) <= 400.0
        assert comms.guard_mhz == "121.500"
        assert comms.emergency_mhz == "243.000"
        assert re.fullmatch(r"[A-Z]+-[A-Z]+-\d{2}", comms.authentication)
        assert re.fullmatch(r"\d{2}", comms.iff_mode1)
        assert re.fullmatch(r"\d{4}", comms.iff_mode3)
        assert re.fullmatch(r"SATCOM-[1-9]", comms.satcom_channel)

    def test_weather_ranges(self, mission):
        weather = mission.weather
        assert 0 <= weather.wind_direction_deg <= 359
        assert 5 <= weather.wind_speed_kt <= 29
        assert 3 <= weather.visibility_sm <= 10
        assert 5000 <= weather.ceiling_ft <= 24999
        assert 29.50 <= weather.pressure_inhg <= 30.50
        assert re.fullmatch(r"\d{3}°/\d+KT", weather.wind)

    def test_timing_uses_midpoint_duration(self, mission):
        assert mission.timing.duration_hours == 6.0
        assert mission.timing.duration == "6:00"
        assert mission.timing.start > FIXED_NOW
        assert mission.timing.start.minute % 15 == 0

    def test_explicit_patrol_area(self, generator):
        mission = generator.generate_mission("KNHK", "SAR", "Gulf_of_Mexico")
        assert mission.patrol_area.id == "Gulf_of_Mexico"
        assert mission.timing.duration_hours == 8.0

    def test_generate_from_request(self, generator):
        mission = generator.generate(MissionRequest(base_id="EDXF", mission_type="ASW"))
        assert mission.patrol_area.id == "North_Sea"
        assert mission.aircraft.type == "P-3C Orion"
        assert mission.callsign.split(" ")[0] in ("ORION", "SEAKING", "HURRICANE", "VIKING", "MARITIME")

    def test_base_without_aircraft_uses_default(self, generator):
        mission = generator.generate_mission("NAVAL_NORFOLK", "MARITIME_PATROL")
        assert mission.aircraft.type == DEFAULT_AIRCRAFT
        assert ("base_aircraft", "NAVAL_NORFOLK") in [(g.table, g.key) for g in generator.last_gaps]

    def test_custom_settings(self, catalog):
        generator = MissionGenerator(
            catalog=catalog,
            randomizer=Randomizer(seed=5),
            counter=MissionCounter(),
            clock=fixed_clock,
            settings=GeneratorSettings(classification="UNCLASSIFIED", waypoint_count=8, id_prefix="EX"),
        )
        mission = generator.generate_mission("KNHK", "RECON")
        assert mission.id == "EX-251018-0001"
        assert mission.classification == "UNCLASSIFIED"
        assert len(mission.waypoints) == 8

    def test_mission_is_json_serializable(self, mission):
        data = mission.to_dict()
        encoded = json.loads(json.dumps(data))
        assert encoded["id"] == mission.id
        assert encoded["base"]["coordinates"] == {"lat": 38.286, "lon": -76.412}
        assert encoded["created_at"] == FIXED_NOW.isoformat()
        assert len(encoded["waypoints"]) == 4


class TestInvalidRequests:
    @pytest.mark.parametrize("base_id,mission_type,area_id,field", [
        ("ZZZZ", "MARITIME_PATROL", None, "base_id"),
        ("", "MARITIME_PATROL", None, "base_id"),
        ("KNHK", "BOMBING_RUN", None, "mission_type"),
        ("KNHK", "SAR", "Caspian", "patrol_area_id"),
    ])
    def test_rejected_without_counter_increment(self, generator, counter, base_id, mission_type, area_id, field):
        before = counter.peek()
        with pytest.raises(InvalidParameters) as excinfo:
            generator.generate_mission(base_id, mission_type, area_id)
        assert excinfo.value.field == field
        assert counter.peek() == before

    def test_failure_does_not_consume_randomness(self, catalog):
        rng = Randomizer(seed=99)
        generator = MissionGenerator(catalog=catalog, randomizer=rng, clock=fixed_clock)
        state = rng.rng.getstate()
        with pytest.raises(InvalidParameters):
            generator.generate_mission("ZZZZ", "SAR")
        assert rng.rng.getstate() == state

    def test_failure_is_logged(self, generator, caplog):
        with caplog.at_level("WARNING", logger="maripat"):
            with pytest.raises(InvalidParameters):
                generator.generate_mission("ZZZZ", "SAR")
        assert any("ZZZZ" in record.getMessage() for record in caplog.records)


class TestSequencing:
    def test_ids_strictly_increasing_over_1000_generations(self, generator):
        ids = [generator.generate_mission("EDXF", "MARITIME_PATROL").id for _ in range(1000)]
        assert ids == sorted(ids)
        assert len(set(ids)) == 1000
        assert ids[-1] == "MP-251018-1000"

    def test_shared_counter_across_generators(self, catalog):
        counter = MissionCounter()
        first = MissionGenerator(catalog=catalog, randomizer=Randomizer(1), counter=counter, clock=fixed_clock)
        second = MissionGenerator(catalog=catalog, randomizer=Randomizer(2), counter=counter, clock=fixed_clock)
        assert first.generate_mission("KNHK", "SAR").sequence == 1
        assert second.generate_mission("KNHK", "SAR").sequence == 2
        assert first.generate_mission("KNHK", "SAR").sequence == 3

    def test_same_seed_same_mission(self, catalog):
        def build():
            generator = MissionGenerator(catalog=catalog, randomizer=Randomizer(seed=42),
                                         counter=MissionCounter(), clock=fixed_clock)
            return generator.generate_mission("LPMT", "FISHERY_PATROL")

        assert build() == build()

    def test_default_generators_share_one_counter(self, catalog):
        first = MissionGenerator(catalog=catalog, clock=fixed_clock)
        second = MissionGenerator(catalog=catalog, clock=fixed_clock)
        assert first.counter is second.counter is default_counter()

    def test_default_sessions_get_distinct_ids(self):
        ids = [PlanningSession().generate("KNHK", "SAR").id for _ in range(2)]
        assert ids[0] != ids[1]
        assert int(ids[1].rsplit("-", 1)[1]) == int(ids[0].rsplit("-", 1)[1]) + 1


class TestMissionInvariants:
    def test_every_base_and_mission_type(self, catalog):
        generator = MissionGenerator(catalog=catalog, randomizer=Randomizer(seed=3), clock=fixed_clock)
        for base in catalog.bases.values():
            for type_id in catalog.mission_types:
                mission = generator.generate_mission(base.id, type_id)
                area = mission.patrol_area
                assert area.id in catalog.patrol_areas
                assert len(mission.waypoints) == 4
                for wp in mission.waypoints:
                    assert area.bounds.contains(wp.coordinate)
                assert mission.distance_km >= 0
                assert mission.distance_km == pytest.approx(
                    distance_km(tuple(base.coordinates), tuple(area.center)))
                assert mission.aircraft.type in base.aircraft or (
                    not base.aircraft and mission.aircraft.type == DEFAULT_AIRCRAFT)
                assert mission.threat_level in ("LOW", "MODERATE", "ELEVATED", "HIGH")


class TestPlanningSession:
    def test_empty_session(self, generator, tmp_path):
        session = PlanningSession(generator)
        assert session.current_mission is None
        with pytest.raises(NoActiveMission):
            session.briefing()
        with pytest.raises(NoActiveMission):
            session.summary()
        with pytest.raises(NoActiveMission):
            session.export(tmp_path)

    def test_generate_replaces_current(self, generator):
        session = PlanningSession(generator)
        first = session.generate("KNHK", "SAR")
        second = session.generate("EDXF", "ASW")
        assert session.current_mission is second
        assert second.sequence == first.sequence + 1

    def test_failed_generation_keeps_previous(self, generator):
        session = PlanningSession(generator)
        mission = session.generate("KNHK", "SAR")
        with pytest.raises(InvalidParameters):
            session.generate("ZZZZ", "SAR")
        assert session.current_mission is mission

    def test_summary_briefing_export_and_clear(self, generator, tmp_path):
        session = PlanningSession(generator)
        mission = session.generate("KNHK", "MARITIME_PATROL")
        summary = session.summary()
        assert summary["id"] == mission.id
        assert summary["status"] == "BRIEFED"
        assert summary["aircraft"] == "P-8A Poseidon"
        assert summary["duration"] == "6:00"
        assert f"OPERATION {mission.codename}" in session.briefing(FIXED_NOW)
        path = session.export(tmp_path, FIXED_NOW)
        assert path.name == mission.export_filename
        session.clear()
        assert session.current_mission is None
