"""
Tests for UTM forward and inverse conversion
"""

import math

import numpy as np
import pytest

from geoconvert.domains.coordinates.models.coordinate_model import Hemisphere
from geoconvert.domains.coordinates.services.meridian_arc import arc_length
from geoconvert.domains.coordinates.services.utm_converter import (
    deg_to_rad,
    from_utm,
    rad_to_deg,
    to_utm,
    utm_central_meridian,
    utm_zone,
)


def test_known_vector():
    utm = to_utm(15, 15)
    assert utm.easting == pytest.approx(500000.0, abs=1e-6)
    assert utm.northing == pytest.approx(1658325.9934411813, abs=1e-6)
    assert utm.zone == 33
    assert utm.hemisphere == Hemisphere.NORTH


def test_inverse_of_known_vector():
    geo = from_utm(500000, 1658325.9934411813, 33, Hemisphere.NORTH)
    assert geo.latitude == pytest.approx(15.0, abs=1e-8)
    assert geo.longitude == pytest.approx(15.0, abs=1e-8)


def test_from_utm_accepts_hemisphere_letter():
    geo = from_utm(500000, 1658325.9934411813, 33, "N")
    assert geo.latitude == pytest.approx(15.0, abs=1e-8)


def test_equator_on_central_meridian():
    utm = to_utm(0, 3)
    assert utm.zone == 31
    assert utm.easting == pytest.approx(500000.0, abs=1e-9)
    assert utm.northing == 0.0
    assert utm.hemisphere == Hemisphere.NORTH


def test_degree_radian_conversion():
    assert deg_to_rad(180.0) == pytest.approx(math.pi, rel=1e-14)
    assert rad_to_deg(deg_to_rad(-123.456)) == pytest.approx(-123.456, rel=1e-13)


@pytest.mark.parametrize(
    "lon,zone",
    [(-180.0, 1), (-174.0, 2), (-0.5, 30), (0.0, 31), (14.999, 33), (179.999, 60)],
)
def test_zone_selection(lon, zone):
    assert utm_zone(lon) == zone
    assert to_utm(10.0, lon).zone == zone


def test_zone_range():
    for lon in np.arange(-180.0, 180.0, 0.25):
        zone = to_utm(45.0, float(lon)).zone
        assert zone == math.floor((lon + 180) / 6) + 1
        assert 1 <= zone <= 60


def test_central_meridian():
    assert rad_to_deg(utm_central_meridian(1)) == pytest.approx(-177.0)
    assert rad_to_deg(utm_central_meridian(33)) == pytest.approx(15.0)
    assert rad_to_deg(utm_central_meridian(60)) == pytest.approx(177.0)


def test_explicit_zone_override():
    utm = to_utm(15, 15, zone=34)
    assert utm.zone == 34
    # 15E lies west of the zone 34 central meridian (21E)
    assert utm.easting < 500000.0


def test_explicit_zone_out_of_range_falls_back():
    assert to_utm(15, 15, zone=0).zone == 33
    assert to_utm(15, 15, zone=61).zone == 33


def test_southern_hemisphere():
    utm = to_utm(-33.8688, 151.2093)
    assert utm.zone == 56
    assert utm.hemisphere == Hemisphere.SOUTH
    assert 0.0 <= utm.northing < 10000000.0
    assert utm.easting < 500000.0


def test_southern_hemisphere_northing_is_non_negative():
    for lat in np.linspace(-80.0, -1e-6, 40):
        for lon in (-179.0, -45.5, 0.0, 2.9, 119.0):
            utm = to_utm(float(lat), lon)
            assert utm.hemisphere == Hemisphere.SOUTH
            assert utm.northing >= 0.0


def test_northern_hemisphere_has_no_false_northing():
    utm = to_utm(1.0, 3.0)
    assert utm.northing == arc_length(deg_to_rad(1.0)) * 0.9996
    assert utm.northing == pytest.approx(110530.0, abs=5.0)


def test_round_trip_over_utm_band():
    for lat in np.linspace(-80.0, 84.0, 42):
        for lon in np.linspace(-180.0, 180.0, 97):
            utm = to_utm(float(lat), float(lon))
            geo = from_utm(utm.easting, utm.northing, utm.zone, utm.hemisphere)
            assert geo.latitude == pytest.approx(lat, abs=1e-7)
            assert geo.longitude == pytest.approx(lon, abs=1e-7)


def test_round_trip_at_zone_edges():
    for zone in (1, 17, 31, 60):
        west_edge = -180.0 + (zone - 1) * 6
        for lon in (west_edge, west_edge + 5.999999):
            utm = to_utm(-45.0, lon)
            geo = from_utm(utm.easting, utm.northing, utm.zone, utm.hemisphere)
            assert geo.latitude == pytest.approx(-45.0, abs=1e-7)
            assert geo.longitude == pytest.approx(lon, abs=1e-7)


def test_from_utm_accepts_lowercase_hemisphere():
    utm = to_utm(-33.8688, 151.2093)
    upper = from_utm(utm.easting, utm.northing, utm.zone, "S")
    lower = from_utm(utm.easting, utm.northing, utm.zone, "s")
    assert lower == upper
    assert lower.latitude == pytest.approx(-33.8688, abs=1e-7)
