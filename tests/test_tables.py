"""
Tests for the IGRF table source and table files.
"""

from datetime import date

import numpy as np
import pytest

from geomag import config as geomag_config
from geomag.config import TableConfig
from geomag.exceptions import TableError
from geomag.models.tables import (
    build_igrf_table,
    default_table,
    load_table,
    magnetic_elements,
    save_table,
)


def test_magnetic_elements_from_components():
    intensity, declination, inclination = magnetic_elements(
        np.array([0.0, 30000.0]), np.array([30000.0, 0.0]), np.array([-40000.0, 40000.0]))
    assert intensity == pytest.approx([0.5, 0.5])
    assert declination == pytest.approx([0.0, 90.0])
    assert inclination == pytest.approx([53.130102, -53.130102])


def test_igrf_table_covers_globe(igrf_table):
    grid = igrf_table.axes
    assert grid.shape == (19, 37)
    assert (grid.lat_min, grid.lat_max, grid.lon_min, grid.lon_max, grid.step) == \
        (-90.0, 90.0, -180.0, 180.0, 10.0)


def test_igrf_table_values_in_physical_range(igrf_table):
    intensity = igrf_table.intensity.values
    assert intensity.min() > 0.2
    assert intensity.max() < 0.7
    assert np.all(np.abs(igrf_table.declination.values) <= 180.0)
    assert np.all(np.abs(igrf_table.inclination.values) <= 90.0)
    # Northern hemisphere dips down, southern up
    assert np.all(igrf_table.inclination.values[-1] > 0.0)
    assert np.all(igrf_table.inclination.values[0] < 0.0)


def test_igrf_table_seam_is_duplicated(igrf_table):
    for grid in igrf_table.grids:
        assert np.array_equal(grid.values[:, -1], grid.values[:, 0])


def test_igrf_table_regional_coarse_grid():
    config = TableConfig(lat_min=30.0, lat_max=60.0, lon_min=0.0, lon_max=30.0,
                         step_deg=15.0, epoch=date(2015, 1, 1))
    table = build_igrf_table(config)
    assert table.axes.shape == (3, 3)
    assert not table.axes.is_periodic


def test_save_and_load_table(tmp_path, global_table):
    path = save_table(global_table, tmp_path / "tables.npz")
    loaded = load_table(path)
    for original, restored in zip(global_table.grids, loaded.grids):
        assert restored.same_axes(original)
        assert np.array_equal(restored.values, original.values)


def test_load_missing_file_raises(tmp_path):
    with pytest.raises(TableError, match="Cannot read"):
        load_table(tmp_path / "missing.npz")


def test_load_incomplete_file_raises(tmp_path):
    path = tmp_path / "partial.npz"
    np.savez(path, intensity=np.zeros((19, 37)))
    with pytest.raises(TableError, match="Missing entries"):
        load_table(path)


def test_default_table_prefers_configured_file(tmp_path, global_table):
    path = save_table(global_table, tmp_path / "tables.npz")
    geomag_config.set_table_file(path)

    table = default_table()
    assert table is default_table()
    assert np.array_equal(table.declination.values, global_table.declination.values)
