"""Tests for the inset-rectangle patrol pattern."""

import pytest

from maripat.procedural.validation import InvalidParameters
from maripat.procedural.waypoints import generate_waypoints, perimeter_fractions


def coords(waypoints):
    return [(wp.coordinate.lat, wp.coordinate.lon) for wp in waypoints]


class TestFourPointPattern:
    def test_corners_clockwise_from_north_west(self, catalog):
        waypoints = generate_waypoints(catalog.get_patrol_area("Atlantic"))
        assert [wp.name for wp in waypoints] == ["PATROL_1", "PATROL_2", "PATROL_3", "PATROL_4"]
        assert coords(waypoints) == [
            pytest.approx((59.0, -57.0)),
            pytest.approx((59.0, -18.0)),
            pytest.approx((41.0, -18.0)),
            pytest.approx((41.0, -57.0)),
        ]

    def test_rounded_to_three_decimals(self, catalog):
        for wp in generate_waypoints(catalog.get_patrol_area("English_Channel")):
            assert round(wp.coordinate.lat, 3) == wp.coordinate.lat
            assert round(wp.coordinate.lon, 3) == wp.coordinate.lon

    def test_pacific_wraps_across_antimeridian(self, catalog):
        area = catalog.get_patrol_area("Pacific")
        waypoints = generate_waypoints(area)
        assert coords(waypoints) == [
            pytest.approx((44.0, 144.0)),
            pytest.approx((44.0, -144.0)),
            pytest.approx((26.0, -144.0)),
            pytest.approx((26.0, 144.0)),
        ]


class TestGeneralCounts:
    @pytest.mark.parametrize("count", [1, 2, 3, 4, 5, 8, 12])
    def test_inside_bounds_for_every_area(self, catalog, count):
        for area in catalog.patrol_areas.values():
            waypoints = generate_waypoints(area, count)
            assert len(waypoints) == count
            for wp in waypoints:
                assert area.bounds.contains(wp.coordinate), (area.id, wp)
                assert -180.0 <= wp.coordinate.lon <= 180.0

    def test_single_point_is_north_west_corner(self):
        assert perimeter_fractions(1).tolist() == [pytest.approx([0.8, 0.2])]

    def test_eight_points_add_side_midpoints(self):
        fractions = perimeter_fractions(8)
        assert fractions[1].tolist() == pytest.approx([0.8, 0.5])
        assert fractions[3].tolist() == pytest.approx([0.5, 0.8])
        assert fractions[5].tolist() == pytest.approx([0.2, 0.5])
        assert fractions[7].tolist() == pytest.approx([0.5, 0.2])

    @pytest.mark.parametrize("count", [0, -3, 2.5])
    def test_invalid_count(self, catalog, count):
        with pytest.raises(InvalidParameters) as excinfo:
            generate_waypoints(catalog.get_patrol_area("Atlantic"), count)
        assert excinfo.value.field == "count"
