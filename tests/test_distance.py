"""Unit tests for the haversine calculator."""

import math
import random
import sys

import pytest

from src.domain.distance import EARTH_RADIUS_KM, distance, haversine_km
from src.domain.entities import Coordinate


class TestHaversine:
    def test_same_point_is_zero(self):
        assert haversine_km(19.0, 72.0, 19.0, 72.0) == 0.0

    @pytest.mark.parametrize(
        "point",
        [(0.0, 0.0), (90.0, 180.0), (-45.5, -120.25), (51.5007, 0.1246)],
    )
    def test_identical_points_are_zero(self, point):
        p = Coordinate(*point)
        assert distance(p, p) == 0.0

    def test_symmetric(self):
        d1 = haversine_km(19.0, 72.0, 20.0, 73.0)
        d2 = haversine_km(20.0, 73.0, 19.0, 72.0)
        assert abs(d1 - d2) < 1e-6

    def test_non_negative(self):
        for lat1, lon1, lat2, lon2 in [
            (-90, -180, 90, 180),
            (10, 20, -10, -20),
            (0.001, 0, 0, 0),
            (-33.86, 151.21, 40.71, -74.0),
        ]:
            assert haversine_km(lat1, lon1, lat2, lon2) >= 0

    def test_quarter_circumference(self):
        d = distance(Coordinate(0, 0), Coordinate(0, 90))
        assert d == pytest.approx(10007.54, abs=0.5)

    def test_antipodal_is_half_circumference(self):
        d = haversine_km(0, 0, 0, 180)
        assert d == pytest.approx(math.pi * EARTH_RADIUS_KM)

    def test_london_new_york(self):
        d = distance(Coordinate(51.5007, 0.1246), Coordinate(40.6892, 74.0445))
        assert d == pytest.approx(5574, abs=5)

    def test_one_degree_of_latitude(self):
        d = haversine_km(37.0, -122.0, 38.0, -122.0)
        assert d == pytest.approx(111.19, abs=0.01)


class TestNumericalEdges:
    @pytest.mark.parametrize(
        "lat1, lon1, lat2, lon2",
        [
            (53.47756127438933, -168.31471277007358, -53.47756127438833, 11.685287229926416),
            (45.0, 10.0, -45.0, -170.0),
            (12.345678901234, 98.7654321, -12.345678901233, -81.2345679),
            (-89.999999999999, 0.0, 89.999999999999, 180.0),
            (0.0, 0.0, 1e-13, 180.0),
        ],
    )
    def test_near_antipodal_is_half_circumference(self, lat1, lon1, lat2, lon2):
        d = haversine_km(lat1, lon1, lat2, lon2)
        assert d == pytest.approx(math.pi * EARTH_RADIUS_KM, abs=0.01)

    def test_perturbed_antipodes_never_fail(self):
        rng = random.Random(20260919)
        half = math.pi * EARTH_RADIUS_KM
        for _ in range(2000):
            lat = rng.uniform(-90, 90)
            lon = rng.uniform(-180, 0)
            eps = rng.uniform(-1e-12, 1e-12)
            d = haversine_km(lat, lon, -lat + eps, lon + 180)
            assert 0 <= d <= half * (1 + 1e-12)

    @pytest.mark.parametrize(
        "lat1, lon1, lat2, lon2",
        [
            (1e308, 0, 0, 0),
            (0, -1e308, 0, 1e308),
            (sys.float_info.max, -sys.float_info.max, -sys.float_info.max, sys.float_info.max),
            (123.0, 400.0, -95.0, -721.5),
        ],
    )
    def test_large_finite_inputs_stay_finite(self, lat1, lon1, lat2, lon2):
        d = haversine_km(lat1, lon1, lat2, lon2)
        assert math.isfinite(d)
        assert 0 <= d <= math.pi * EARTH_RADIUS_KM * (1 + 1e-12)


class TestCoordinate:
    def test_is_frozen(self):
        c = Coordinate(1.0, 2.0)
        with pytest.raises(AttributeError):
            c.latitude = 3.0
