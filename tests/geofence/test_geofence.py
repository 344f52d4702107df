import pytest

from src.attendance_bot.attendance_bot.core.exceptions import ValidationError
from src.attendance_bot.attendance_bot.geofence.model import Office
from src.attendance_bot.attendance_bot.geofence.service import GeofenceEvaluator, haversine_m, office_from_config


def test_haversine_one_degree_of_latitude():
    # 2 * pi * 6371000 / 360
    assert haversine_m(0.0, 0.0, 1.0, 0.0) == pytest.approx(111_194.93, abs=0.5)


def test_haversine_is_symmetric():
    a = haversine_m(57.1521, 65.5921, 57.1600, 65.6000)
    b = haversine_m(57.1600, 65.6000, 57.1521, 65.5921)
    assert a == pytest.approx(b)


@pytest.mark.parametrize("radius", [0, 1, 100])
def test_identical_point_is_inside_for_any_non_negative_radius(radius):
    evaluator = GeofenceEvaluator(Office(name="O", lat=57.1521, lon=65.5921, radius_m=radius))
    assert evaluator.is_in_office(57.1521, 65.5921) is True


def test_boundary_is_inclusive(geofence):
    distance = geofence.distance_m(57.1530, 65.5921)
    on_edge = GeofenceEvaluator(Office(name="O", lat=57.1521, lon=65.5921, radius_m=distance))
    assert on_edge.is_in_office(57.1530, 65.5921) is True


def test_membership_is_monotone_in_radius():
    point = (57.1566, 65.5921)  # ~500 m north
    results = [
        GeofenceEvaluator(Office(name="O", lat=57.1521, lon=65.5921, radius_m=r)).is_in_office(*point)
        for r in (100, 400, 499, 501, 1000)
    ]
    assert results == [False, False, False, True, True]


def test_far_point_is_outside(geofence):
    assert geofence.is_in_office(57.1566, 65.5921) is False


def test_coordinates_as_strings_are_accepted(geofence):
    assert geofence.is_in_office("57.1521", "65.5921") is True


@pytest.mark.parametrize(
    "lat,lon",
    [(91, 0), (-90.5, 0), (0, 180.1), (0, -181), (None, 0), ("north", 0), (float("nan"), 0), (True, 0)],
)
def test_invalid_coordinates_raise(geofence, lat, lon):
    with pytest.raises(ValidationError):
        geofence.is_in_office(lat, lon)


def test_negative_radius_is_rejected():
    with pytest.raises(ValidationError):
        GeofenceEvaluator(Office(name="O", lat=0, lon=0, radius_m=-1))


def test_office_from_config_coerces_values():
    office = office_from_config({"name": "HQ", "lat": "57.1521", "lon": "65.5921", "radius_m": "150"})
    assert office == Office(name="HQ", lat=57.1521, lon=65.5921, radius_m=150.0)


def test_office_from_config_uses_default_radius():
    assert office_from_config({"lat": 1, "lon": 2}).radius_m == 100


@pytest.mark.parametrize("config", [{"lat": 1, "lon": 2, "radius_m": -5}, {"lat": 1, "lon": 2, "radius_m": "x"}, {"lat": 100, "lon": 2}])
def test_office_from_config_rejects_bad_values(config):
    with pytest.raises(ValidationError):
        office_from_config(config)
