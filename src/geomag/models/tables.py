"""
Geomagnetic table sources.

Tables are evaluated once from the IGRF reference model at a fixed epoch,
or loaded from a ``.npz`` file written by ``save_table``. Either way the
result is an immutable ``GeomagneticTable``.
"""

from datetime import datetime, time
from dataclasses import astuple
from functools import lru_cache
from pathlib import Path
from typing import Optional, Union
import logging

import numpy as np
import ppigrf

from ..config import TableConfig, get_config
from ..exceptions import TableError
from ..utils.validation import validate_dict_keys
from .grid import GeomagneticTable

logger = logging.getLogger(__name__)

# Pole rows are evaluated this far inside the pole [deg]
POLE_OFFSET_DEG = 1e-6

NT_PER_GAUSS = 1e5

TABLE_KEYS = ('intensity', 'declination', 'inclination',
              'lat_min', 'lat_max', 'lon_min', 'lon_max', 'step')

def magnetic_elements(Be: np.ndarray, Bn: np.ndarray, Bu: np.ndarray):
    """
    Intensity [Gauss], declination [deg] and inclination [deg] from
    east/north/up components in nT.
    """
    horizontal = np.hypot(Be, Bn)
    intensity = np.sqrt(horizontal**2 + Bu**2) / NT_PER_GAUSS
    declination = np.degrees(np.arctan2(Be, Bn))
    inclination = np.degrees(np.arctan2(-Bu, horizontal))
    return intensity, declination, inclination

def build_igrf_table(config: Optional[TableConfig] = None) -> GeomagneticTable:
    """
    Evaluate IGRF on a regular latitude/longitude grid.

    Args:
        config: Grid coverage, step, epoch and altitude (defaults to the
            global configuration)

    Returns:
        GeomagneticTable at the configured epoch
    """
    config = config or get_config().table
    step = config.step_deg
    rows = int(round((config.lat_max - config.lat_min) / step)) + 1
    cols = int(round((config.lon_max - config.lon_min) / step)) + 1

    lats = config.lat_min + step * np.arange(rows)
    lons = config.lon_min + step * np.arange(cols)
    eval_lats = np.clip(lats, -90.0 + POLE_OFFSET_DEG, 90.0 - POLE_OFFSET_DEG)
    lon_grid, lat_grid = np.meshgrid(lons, eval_lats)

    logger.info(f"Evaluating IGRF on {rows}x{cols} grid at {config.epoch}")
    epoch = datetime.combine(config.epoch, time())
    Be, Bn, Bu = ppigrf.igrf(lon_grid, lat_grid, config.altitude_km, epoch)
    intensity, declination, inclination = magnetic_elements(Be[0], Bn[0], Bu[0])

    # A full-circle grid stores the seam twice; make both copies identical
    if abs((config.lon_max - config.lon_min) - 360.0) < 1e-9:
        for values in (intensity, declination, inclination):
            values[:, -1] = values[:, 0]

    if not all(np.all(np.isfinite(v)) for v in (intensity, declination, inclination)):
        raise TableError("igrf", "Reference model returned non-finite samples")

    return GeomagneticTable.from_arrays(
        intensity, declination, inclination,
        lat_min=config.lat_min, lat_max=config.lat_max,
        lon_min=config.lon_min, lon_max=config.lon_max, step=step
    )

def save_table(table: GeomagneticTable, path: Union[str, Path]) -> Path:
    """Write a table to a compressed ``.npz`` file."""
    path = Path(path)
    axes = table.axes
    np.savez_compressed(
        path,
        intensity=table.intensity.values,
        declination=table.declination.values,
        inclination=table.inclination.values,
        lat_min=axes.lat_min, lat_max=axes.lat_max,
        lon_min=axes.lon_min, lon_max=axes.lon_max,
        step=axes.step
    )
    logger.info(f"Saved {axes.rows}x{axes.cols} table to {path}")
    return path

def load_table(path: Union[str, Path]) -> GeomagneticTable:
    """
    Read a table written by ``save_table``.

    Raises:
        TableError: if the file is unreadable, incomplete or malformed
    """
    path = Path(path)
    try:
        with np.load(path, allow_pickle=False) as data:
            entries = dict.fromkeys(data.files)
            if not validate_dict_keys(entries, list(TABLE_KEYS)):
                missing = [key for key in TABLE_KEYS if key not in entries]
                raise TableError(str(path), f"Missing entries: {', '.join(missing)}")
            arrays = {key: data[key] for key in TABLE_KEYS}
    except (OSError, ValueError) as e:
        raise TableError(str(path), f"Cannot read table: {e}") from e

    table = GeomagneticTable.from_arrays(
        arrays['intensity'], arrays['declination'], arrays['inclination'],
        lat_min=float(arrays['lat_min']), lat_max=float(arrays['lat_max']),
        lon_min=float(arrays['lon_min']), lon_max=float(arrays['lon_max']),
        step=float(arrays['step'])
    )
    logger.info(f"Loaded {table.axes.rows}x{table.axes.cols} table from {path}")
    return table

@lru_cache(maxsize=4)
def _table_for(settings: tuple) -> GeomagneticTable:
    config = TableConfig(*settings)
    if config.table_file:
        return load_table(config.table_file)
    return build_igrf_table(config)

def default_table() -> GeomagneticTable:
    """
    Process-wide table: the configured file, else built from IGRF.

    Tables are cached per table configuration, so changing the
    configuration selects (or builds) the matching table on the next call.
    """
    return _table_for(astuple(get_config().table))

def reset_default_table():
    """Drop every cached default table."""
    _table_for.cache_clear()
