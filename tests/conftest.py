"""
Pytest configuration and shared fixtures.
"""

from dataclasses import replace

import numpy as np
import pytest

from geomag import config as geomag_config
from geomag.api import reset_default_model
from geomag.config import TableConfig
from geomag.models.grid import GeomagneticTable
from geomag.models.tables import build_igrf_table, reset_default_table


@pytest.fixture(autouse=True)
def restore_config():
    """Undo changes a test makes to the process-wide configuration."""
    saved = geomag_config.DEFAULT_CONFIG
    sections = (replace(saved.table), replace(saved.sampler), replace(saved.logging))
    yield
    saved.table, saved.sampler, saved.logging = sections
    reset_default_table()
    reset_default_model()


def _periodic_values(rng, low, high):
    values = rng.uniform(low, high, size=(19, 37))
    values[:, -1] = values[:, 0]
    return values


@pytest.fixture
def global_table():
    """Random global 10 degree table with a consistent antimeridian seam."""
    rng = np.random.default_rng(1234)
    return GeomagneticTable.from_arrays(
        _periodic_values(rng, 0.2, 0.7),
        _periodic_values(rng, -30.0, 30.0),
        _periodic_values(rng, -90.0, 90.0),
    )


@pytest.fixture
def regional_table():
    """Non-periodic table over 0..40N, 0..60E holding planar functions."""
    lats = np.arange(0.0, 41.0, 10.0)[:, np.newaxis]
    lons = np.arange(0.0, 61.0, 10.0)[np.newaxis, :]
    return GeomagneticTable.from_arrays(
        0.3 + 0.002 * lats + 0.001 * lons + 0 * lats * lons,
        -5.0 + 0.1 * lons + 0 * lats,
        10.0 + 1.5 * lats + 0 * lons,
        lat_min=0.0, lat_max=40.0, lon_min=0.0, lon_max=60.0, step=10.0,
    )


@pytest.fixture(scope="session")
def igrf_table():
    """Default IGRF table, evaluated once per test session."""
    return build_igrf_table(TableConfig())
