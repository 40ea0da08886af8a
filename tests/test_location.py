"""
Tests for the fixed-point Location encoding.
"""

import math

import pytest

from geomag.exceptions import ValidationError
from geomag.models.location import Location


def test_from_degrees_encodes_1e7_units():
    location = Location.from_degrees(52.52, 13.405)
    assert location == Location(525200000, 134050000)
    assert location.lat_deg == 52.52
    assert location.lng_deg == 13.405


def test_negative_coordinates():
    location = Location.from_degrees(-33.8688, 151.2093)
    assert location == Location(-338688000, 1512093000)
    assert location.lat_deg == -33.8688


def test_resolution_is_better_than_1e5_degree():
    location = Location.from_degrees(0.1807123, -78.4678456)
    assert abs(location.lat_deg - 0.1807123) < 1e-5
    assert abs(location.lng_deg + 78.4678456) < 1e-5


@pytest.mark.parametrize("lat,lon", [(math.nan, 0.0), (0.0, math.inf)])
def test_non_finite_rejected(lat, lon):
    with pytest.raises(ValidationError, match="finite"):
        Location.from_degrees(lat, lon)


def test_int32_overflow_rejected():
    with pytest.raises(ValidationError, match="int32"):
        Location.from_degrees(0.0, 300.0)
