"""
Bilinear sampling of the geomagnetic tables.

Queries go through two stages: ``normalize_coordinate`` wraps longitude
and clamps latitude into the table domain (deciding validity), then
``cell_weights`` locates the surrounding cell and ``interpolate`` blends
its four corners for each element independently.
"""

from typing import Optional, Tuple
import logging
import math

from ..config import get_config
from .field import FieldSample
from .grid import GeomagneticGrid, GeomagneticTable

logger = logging.getLogger(__name__)

CellWeights = Tuple[int, int, int, int, float, float]

def wrap_longitude(longitude_deg: float, lon_min: float = -180.0) -> float:
    """Wrap a longitude into ``[lon_min, lon_min + 360)``."""
    offset = (longitude_deg - lon_min) % 360.0
    # Tiny negative offsets round up to exactly 360
    if offset >= 360.0:
        offset = 0.0
    return lon_min + offset

def normalize_coordinate(grid: GeomagneticGrid, latitude_deg: float,
                         longitude_deg: float,
                         epsilon: float = 1e-3) -> Tuple[float, float, bool]:
    """
    Map a query coordinate onto the table domain.

    Longitude is shifted by whole turns before it is checked, so any
    finite longitude reaches a grid covering the full circle. Latitude is
    accepted within ``epsilon`` of the grid bounds and then clamped.
    Coordinates that cannot be placed are clamped to the nearest edge and
    reported invalid; NaN falls back to the grid's lower-left corner.

    Args:
        grid: Grid providing the axis definition
        latitude_deg: Query latitude [deg]
        longitude_deg: Query longitude [deg]
        epsilon: Tolerance on the bounds checks [deg]

    Returns:
        (latitude, longitude, valid) with the coordinate inside the grid
    """
    valid = True
    lat = float(latitude_deg)
    lon = float(longitude_deg)

    # Latitude: validate, then clamp
    if math.isnan(lat):
        lat = grid.lat_min
        valid = False
    elif lat < grid.lat_min - epsilon or lat > grid.lat_max + epsilon:
        valid = False
    lat = min(max(lat, grid.lat_min), grid.lat_max)

    # Longitude: wrap, then validate/clamp
    if not math.isfinite(lon):
        return lat, grid.lon_min, False

    offset = wrap_longitude(lon, grid.lon_min) - grid.lon_min
    if grid.is_periodic:
        return lat, grid.lon_min + offset, valid

    span = grid.lon_max - grid.lon_min
    if offset <= span + epsilon:
        lon = min(grid.lon_min + offset, grid.lon_max)
    elif offset >= 360.0 - epsilon:
        lon = grid.lon_min
    else:
        valid = False
        # Clamp to whichever edge is closer around the circle
        lon = grid.lon_max if offset - span < 360.0 - offset else grid.lon_min

    return lat, lon, valid

def cell_weights(grid: GeomagneticGrid, latitude_deg: float,
                 longitude_deg: float) -> CellWeights:
    """
    Locate the cell containing a normalized coordinate.

    Returns:
        (row, next_row, col, next_col, tlat, tlon). The next row is clamped
        to the last row; the next column wraps around a periodic grid and
        is clamped otherwise.
    """
    x = (latitude_deg - grid.lat_min) / grid.step
    row = min(int(math.floor(x)), grid.rows - 1)
    tlat = min(max(x - row, 0.0), 1.0)
    next_row = min(row + 1, grid.rows - 1)

    y = (longitude_deg - grid.lon_min) / grid.step
    col = min(int(math.floor(y)), grid.cols - 1)
    tlon = min(max(y - col, 0.0), 1.0)
    if grid.is_periodic:
        next_col = (col + 1) % grid.period_cols
    else:
        next_col = min(col + 1, grid.cols - 1)

    return row, next_row, col, next_col, tlat, tlon

def interpolate(grid: GeomagneticGrid, weights: CellWeights) -> float:
    """Bilinear interpolation of one grid over a located cell."""
    row, next_row, col, next_col, tlat, tlon = weights
    v = grid.values
    return float((1.0 - tlat) * (1.0 - tlon) * v[row, col] +
                 (1.0 - tlat) * tlon * v[row, next_col] +
                 tlat * (1.0 - tlon) * v[next_row, col] +
                 tlat * tlon * v[next_row, next_col])

def sample(table: GeomagneticTable, latitude_deg: float, longitude_deg: float,
           epsilon: Optional[float] = None) -> FieldSample:
    """
    Interpolate intensity, declination and inclination at a coordinate.

    Out-of-range coordinates are not an error: the result is the
    interpolation at the clamped coordinate with ``valid`` set to False.

    Args:
        table: Geomagnetic table to sample
        latitude_deg: Latitude [deg]
        longitude_deg: Longitude [deg], any multiple of 360 apart is equivalent
        epsilon: Bounds tolerance [deg]; configured default if None

    Returns:
        FieldSample with intensity [Gauss], declination and inclination [deg]
    """
    if epsilon is None:
        epsilon = get_config().sampler.boundary_epsilon_deg

    lat, lon, valid = normalize_coordinate(
        table.axes, latitude_deg, longitude_deg, epsilon)
    if not valid:
        logger.debug(
            f"Coordinate ({latitude_deg}, {longitude_deg}) outside table, "
            f"using clamped ({lat}, {lon})")

    weights = cell_weights(table.axes, lat, lon)
    return FieldSample(
        intensity=interpolate(table.intensity, weights),
        declination=interpolate(table.declination, weights),
        inclination=interpolate(table.inclination, weights),
        valid=valid
    )
