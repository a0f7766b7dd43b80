"""
Tests for DMS / decimal degree conversion and UTM formatting
"""

import pytest

from geoconvert.domains.coordinates.models.coordinate_errors import (
    CoordinateRangeError,
    LatitudeRangeError,
    LongitudeRangeError,
)
from geoconvert.domains.coordinates.models.coordinate_model import (
    CardinalDirection,
    Hemisphere,
)
from geoconvert.domains.coordinates.services.degree_format import (
    decimal_to_dms,
    dms_to_decimal,
    format_utm,
)


def test_dms_to_decimal_whole_degrees():
    assert dms_to_decimal(CardinalDirection.NORTH, 15, 0, 0) == 15


def test_dms_to_decimal_minutes_and_seconds():
    assert dms_to_decimal("E", 151, 12, 33.48) == pytest.approx(151.2093)


def test_dms_to_decimal_south_and_west_are_negative():
    assert dms_to_decimal("S", 33, 52, 7.68) == pytest.approx(-33.8688)
    assert dms_to_decimal(CardinalDirection.WEST, 74, 0, 36) == pytest.approx(-74.01)


def test_dms_to_decimal_accepts_lowercase_direction():
    assert dms_to_decimal("s", 10, 30) == pytest.approx(-10.5)


def test_dms_to_decimal_without_direction_is_longitude():
    assert dms_to_decimal(None, 180, 0, 0) == 180
    with pytest.raises(LongitudeRangeError):
        dms_to_decimal(None, 181, 0, 0)


def test_latitude_out_of_range():
    with pytest.raises(LatitudeRangeError) as exc_info:
        dms_to_decimal(CardinalDirection.NORTH, 91, 0, 0)
    assert exc_info.value.value == 91
    assert exc_info.value.bound == 90


def test_latitude_range_is_checked_before_longitude_range():
    with pytest.raises(LatitudeRangeError):
        dms_to_decimal("S", -200, 0, 0)


def test_longitude_out_of_range():
    with pytest.raises(LongitudeRangeError) as exc_info:
        dms_to_decimal(CardinalDirection.WEST, -181, 0, 0)
    assert exc_info.value.value == -181
    assert exc_info.value.bound == 180


def test_range_errors_are_value_errors():
    with pytest.raises(ValueError):
        dms_to_decimal("E", 500, 0, 0)
    assert issubclass(LatitudeRangeError, CoordinateRangeError)


def test_range_error_to_error():
    error = LatitudeRangeError(91).to_error()
    assert error.code == "LATITUDE_OUT_OF_RANGE"
    assert error.details == {"value": 91, "bound": 90.0}
    assert "Latitude out of range" in error.message


def test_decimal_to_dms_whole_degrees():
    assert decimal_to_dms(15, 8) == "15°0'0\""


def test_decimal_to_dms_drops_sign():
    assert decimal_to_dms(-15.5) == "15°30'0\""


def test_decimal_to_dms_keeps_seconds_residue():
    assert decimal_to_dms(10.51) == "10°30'35.9999994\""


def test_decimal_to_dms_precision_rounds_seconds():
    assert decimal_to_dms(10.51, 2) == "10°30'36\""


def test_format_utm_default_precision():
    result = format_utm(15, 15)
    assert result.easting == "500000"
    assert result.northing == "1658326"
    assert result.zone == 33
    assert result.hemisphere == Hemisphere.NORTH


def test_format_utm_fixed_decimals():
    result = format_utm(15, 15, precision=3)
    assert result.easting == "500000.000"
    assert result.northing == "1658325.993"


def test_dms_to_decimal_unknown_direction_is_longitude():
    assert dms_to_decimal("X", 120, 30) == pytest.approx(120.5)
    with pytest.raises(LongitudeRangeError):
        dms_to_decimal("X", 181, 0, 0)


def test_decimal_to_dms_tiny_seconds_without_exponent():
    assert decimal_to_dms(1e-8) == "0°0'0.000036\""
    assert decimal_to_dms(10.0000000166) == "10°0'0.0000606\""


def test_decimal_to_dms_tiny_seconds_with_precision():
    assert decimal_to_dms(1e-8, 8) == "0°0'0.000036\""


def test_decimal_to_dms_precision_rounds_half_up():
    # 1/64 degree is exactly 56.25 seconds, 1/128 degree exactly 28.125
    assert decimal_to_dms(0.015625) == "0°0'56.25\""
    assert decimal_to_dms(0.015625, 1) == "0°0'56.3\""
    assert decimal_to_dms(0.0078125, 2) == "0°0'28.13\""


def test_decimal_to_dms_precision_zero_rounds_to_whole_seconds():
    assert decimal_to_dms(0.015625, 0) == "0°0'56\""
    assert decimal_to_dms(10.51, 0) == "10°30'36\""
