import math

import pytest

from src.geo_attendance.geo_attendance.geo.distance import distance_meters
from src.geo_attendance.geo_attendance.geo.model import Coordinate
from src.geo_attendance.geo_attendance.office.model import OfficeGeofence

POINTS = [
    Coordinate(0, 0),
    Coordinate(-7.446754, 109.241404),
    Coordinate(51.5007, -0.1246),
    Coordinate(90, 0),
    Coordinate(-33.8568, 151.2153),
]


@pytest.mark.parametrize("point", POINTS)
def test_distance_to_self_is_zero(point):
    assert distance_meters(point, point) == 0


def test_distance_is_symmetric():
    for a in POINTS:
        for b in POINTS:
            assert distance_meters(a, b) == pytest.approx(distance_meters(b, a))


def test_one_degree_of_latitude_at_equator():
    expected = 6_371_000 * math.pi / 180
    assert distance_meters(Coordinate(0, 0), Coordinate(1, 0)) == pytest.approx(expected)


def test_antipodal_points_are_half_circumference_apart():
    assert distance_meters(Coordinate(0, 0), Coordinate(0, 180)) == pytest.approx(6_371_000 * math.pi)


def test_known_city_distance():
    paris = Coordinate(48.8566, 2.3522)
    london = Coordinate(51.5074, -0.1278)
    assert distance_meters(paris, london) == pytest.approx(343_500, rel=0.01)


def _meters_north(meters):
    return Coordinate(math.degrees(meters / 6_371_000), 0)


def test_geofence_radius_boundaries():
    office = OfficeGeofence(center=Coordinate(0, 0), radius_meters=100)

    assert office.contains(_meters_north(99))
    assert not office.contains(_meters_north(101))


def test_point_exactly_on_radius_is_inside():
    office = OfficeGeofence(center=Coordinate(0, 0), radius_meters=100)
    edge = _meters_north(100)

    assert office.distance_to(edge) == pytest.approx(100)
    assert office.contains(edge)


def test_geofence_boundary_is_inclusive_at_measured_distance():
    edge = Coordinate(0.0005, 0.0007)
    office = OfficeGeofence(center=Coordinate(0, 0), radius_meters=distance_meters(Coordinate(0, 0), edge))

    assert office.contains(edge)
