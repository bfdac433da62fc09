"""Tests for great-circle distance and coordinate helpers."""

import math

import pytest

from maripat.misc.math_utils import (
    distance_km,
    distances_km,
    format_coordinate,
    km_to_nm,
    normalize_longitude,
)

PATUXENT = (38.286, -76.412)
ATLANTIC_CENTRE = (50.0, -37.5)


class TestDistance:
    """Haversine distance on a 6371 km sphere."""

    def test_zero_for_identical_points(self):
        assert distance_km(PATUXENT, PATUXENT) == 0.0

    @pytest.mark.parametrize("a,b", [
        (PATUXENT, ATLANTIC_CENTRE),
        ((53.768, 8.658), (56.5, 2.0)),
        ((21.45, -157.768), (35.0, -180.0)),
        ((-33.9, 18.4), (-10.0, 75.0)),
        ((82.0, 0.0), (-82.0, 180.0)),
        ((45.0, -30.0), (-45.0, 150.0)),
    ])
    def test_symmetric_and_non_negative(self, a, b):
        assert distance_km(a, b) == pytest.approx(distance_km(b, a))
        assert distance_km(a, b) > 0

    def test_patuxent_to_north_atlantic_golden_value(self):
        d = distance_km(PATUXENT, ATLANTIC_CENTRE)
        assert math.isfinite(d)
        assert d == pytest.approx(3320.58, abs=0.05)

    def test_quarter_meridian(self):
        # Equator to pole is a quarter of the circumference
        assert distance_km((0.0, 0.0), (90.0, 0.0)) == pytest.approx(math.pi * 6371.0 / 2)

    def test_antimeridian_is_short_way_round(self):
        assert distance_km((0.0, 179.5), (0.0, -179.5)) == pytest.approx(111.19, abs=0.01)

    @pytest.mark.parametrize("lat", [-90, -61, -17, 0, 13, 45, 82, 90])
    def test_antipodal_pairs_are_half_circumference(self, lat):
        for lon in (-180.0, -45.0, 0.0, 90.0):
            antipode = (-float(lat), lon + 180.0 if lon < 0 else lon - 180.0)
            d = distance_km((float(lat), lon), antipode)
            assert d == pytest.approx(math.pi * 6371.0, rel=1e-6)

    def test_vectorized_matches_scalar(self):
        points = [ATLANTIC_CENTRE, (56.5, 2.0), (24.5, -89.0), PATUXENT]
        vector = distances_km(PATUXENT, points)
        assert vector.shape == (4,)
        for got, point in zip(vector, points):
            assert float(got) == pytest.approx(distance_km(PATUXENT, point))


class TestHelpers:
    def test_km_to_nm(self):
        assert km_to_nm(1.852) == pytest.approx(1.0)

    @pytest.mark.parametrize("lon,expected", [
        (0.0, 0.0),
        (180.0, 180.0),
        (-180.0, -180.0),
        (216.0, -144.0),
        (-190.0, 170.0),
    ])
    def test_normalize_longitude(self, lon, expected):
        assert normalize_longitude(lon) == pytest.approx(expected)

    def test_format_coordinate(self):
        assert format_coordinate(PATUXENT) == "38.286°N 76.412°W"
        assert format_coordinate((-10.0, 75.0), decimals=1) == "10.0°S 75.0°E"
