"""Shared fixtures: the packaged catalog, a seeded randomizer and a fixed clock."""

from datetime import datetime, timezone

import pytest

from maripat.procedural import MissionCounter, MissionGenerator, Randomizer
from maripat.resources.reference_data import get_catalog

FIXED_NOW = datetime(2025, 10, 18, 6, 0, tzinfo=timezone.utc)


def fixed_clock():
    return FIXED_NOW


@pytest.fixture(scope="session")
def catalog():
    return get_catalog()


@pytest.fixture
def rng():
    return Randomizer(seed=1234)


@pytest.fixture
def counter():
    return MissionCounter()


@pytest.fixture
def generator(catalog, rng, counter):
    return MissionGenerator(catalog=catalog, randomizer=rng, counter=counter, clock=fixed_clock)


@pytest.fixture
def mission(generator):
    return generator.generate_mission("KNHK", "MARITIME_PATROL")
