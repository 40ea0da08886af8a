"""
Tests for the geomagnetic grid and table containers.
"""

import numpy as np
import pytest

from geomag.exceptions import TableError
from geomag.models.grid import GeomagneticGrid, GeomagneticTable


def test_global_grid_dimensions(global_table):
    grid = global_table.axes
    assert grid.shape == (19, 37)
    assert grid.rows == 19
    assert grid.cols == 37
    assert grid.is_periodic
    assert grid.period_cols == 36
    assert grid.lat_of(0) == -90.0
    assert grid.lat_of(18) == 90.0
    assert grid.lon_of(36) == 180.0


def test_regional_grid_is_not_periodic(regional_table):
    assert regional_table.axes.shape == (5, 7)
    assert not regional_table.axes.is_periodic


def test_values_are_read_only(global_table):
    with pytest.raises(ValueError):
        global_table.intensity.values[0, 0] = 1.0


def test_values_are_copied_on_construction():
    source = np.zeros((19, 37))
    grid = GeomagneticGrid(-90.0, 90.0, -180.0, 180.0, 10.0, source)
    source[0, 0] = 5.0
    assert grid[0, 0] == 0.0


def test_shape_mismatch_raises():
    with pytest.raises(TableError, match="Expected shape"):
        GeomagneticGrid(-90.0, 90.0, -180.0, 180.0, 10.0, np.zeros((18, 37)))


def test_span_not_multiple_of_step_raises():
    with pytest.raises(TableError, match="not a multiple"):
        GeomagneticGrid(0.0, 25.0, 0.0, 20.0, 10.0, np.zeros((3, 3)))


def test_non_finite_samples_raise():
    values = np.zeros((19, 37))
    values[3, 4] = np.nan
    with pytest.raises(TableError, match="non-finite"):
        GeomagneticGrid(-90.0, 90.0, -180.0, 180.0, 10.0, values, name="intensity")


@pytest.mark.parametrize("step", [0.0, -10.0, float("nan")])
def test_invalid_step_raises(step):
    with pytest.raises(TableError):
        GeomagneticGrid(-90.0, 90.0, -180.0, 180.0, step, np.zeros((19, 37)))


def test_table_requires_shared_axes():
    full = GeomagneticGrid(-90.0, 90.0, -180.0, 180.0, 10.0, np.zeros((19, 37)))
    half = GeomagneticGrid(0.0, 90.0, -180.0, 180.0, 10.0, np.zeros((10, 37)),
                           name="declination")
    with pytest.raises(TableError, match="declination"):
        GeomagneticTable(intensity=full, declination=half, inclination=full)
