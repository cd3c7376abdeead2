#!/usr/bin/env python3
"""
Unit tests for the distance calculator.
"""
import pytest

from core.geo import GeoPoint, haversine_m, bounding_box
from tests import SEATTLE, BELLEVUE, NEW_YORK

POINTS = [
    SEATTLE,
    BELLEVUE,
    NEW_YORK,
    GeoPoint(0.0, 0.0),
    GeoPoint(-33.8688, 151.2093),
    GeoPoint(89.9, 10.0),
    GeoPoint(0.0, 179.9),
    GeoPoint(0.0, -179.9),
]


class TestHaversine:

    @pytest.mark.parametrize("point", POINTS)
    def test_distance_to_self_is_zero(self, point):
        assert haversine_m(point, point) == 0.0

    @pytest.mark.parametrize("a", POINTS)
    @pytest.mark.parametrize("b", POINTS)
    def test_symmetric(self, a, b):
        assert haversine_m(a, b) == haversine_m(b, a)

    @pytest.mark.parametrize("a", POINTS)
    @pytest.mark.parametrize("b", POINTS)
    def test_non_negative(self, a, b):
        assert haversine_m(a, b) >= 0.0

    def test_seattle_to_new_york(self):
        # ~3,866 km great-circle
        assert haversine_m(SEATTLE, NEW_YORK) == pytest.approx(3_866_000, rel=0.01)

    def test_seattle_to_bellevue(self):
        assert haversine_m(SEATTLE, BELLEVUE) == pytest.approx(9_800, rel=0.05)

    def test_one_degree_of_latitude(self):
        assert haversine_m(GeoPoint(0.0, 0.0), GeoPoint(1.0, 0.0)) == pytest.approx(111_195, rel=0.001)

    def test_monotonic_along_meridian(self):
        origin = GeoPoint(10.0, 20.0)
        distances = [haversine_m(origin, GeoPoint(10.0 + step * 0.5, 20.0)) for step in range(1, 10)]
        assert distances == sorted(distances)
        assert len(set(distances)) == len(distances)

    def test_across_antimeridian(self):
        a = GeoPoint(0.0, 179.9)
        b = GeoPoint(0.0, -179.9)
        # 0.2 degrees of longitude at the equator
        assert haversine_m(a, b) == pytest.approx(22_239, rel=0.001)

    def test_antipodal_points(self):
        assert haversine_m(GeoPoint(0.0, 0.0), GeoPoint(0.0, 180.0)) == pytest.approx(20_015_087, rel=0.001)


class TestBoundingBox:

    def test_contains_points_within_radius(self):
        radius = 50_000
        min_lat, max_lat, min_lon, max_lon = bounding_box(SEATTLE, radius)
        assert min_lat < BELLEVUE.lat < max_lat
        assert min_lon < BELLEVUE.lon < max_lon

    def test_box_edges_are_at_least_radius_away(self):
        radius = 10_000
        min_lat, max_lat, min_lon, max_lon = bounding_box(SEATTLE, radius)
        assert haversine_m(SEATTLE, GeoPoint(max_lat, SEATTLE.lon)) >= radius
        assert haversine_m(SEATTLE, GeoPoint(min_lat, SEATTLE.lon)) >= radius
        assert haversine_m(SEATTLE, GeoPoint(SEATTLE.lat, max_lon)) >= radius
        assert haversine_m(SEATTLE, GeoPoint(SEATTLE.lat, min_lon)) >= radius

    def test_near_pole_uses_full_longitude_range(self):
        _, max_lat, min_lon, max_lon = bounding_box(GeoPoint(89.99, 0.0), 5_000)
        assert max_lat == 90.0
        assert (min_lon, max_lon) == (-180.0, 180.0)
