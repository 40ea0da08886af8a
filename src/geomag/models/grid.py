from dataclasses import dataclass
from typing import Tuple
import numpy as np

from ..exceptions import TableError
from ..utils.validation import validate_finite

# Tolerance when checking that a span is a whole number of steps
SPAN_TOLERANCE = 1e-9

def _sample_count(span: float, step: float, axis: str, name: str) -> int:
    steps = span / step
    if abs(steps - round(steps)) > SPAN_TOLERANCE:
        raise TableError(name, f"{axis} span {span} is not a multiple of step {step}")
    return int(round(steps)) + 1

@dataclass(frozen=True, eq=False)
class GeomagneticGrid:
    """
    Regularly sampled grid of one magnetic element.

    Rows run from ``lat_min`` to ``lat_max`` and columns from ``lon_min``
    to ``lon_max``, both at ``step`` degrees. The sample array is copied
    and made read-only on construction.
    """
    lat_min: float
    lat_max: float
    lon_min: float
    lon_max: float
    step: float
    values: np.ndarray
    name: str = "grid"

    def __post_init__(self):
        if not validate_finite(self.lat_min, self.lat_max, self.lon_min,
                               self.lon_max, self.step):
            raise TableError(self.name, "Grid bounds and step must be finite")
        if self.step <= 0:
            raise TableError(self.name, "Grid step must be positive")
        if self.lat_min > self.lat_max or self.lon_min > self.lon_max:
            raise TableError(self.name, "Grid minimum exceeds maximum")
        if self.lon_max - self.lon_min > 360.0 + SPAN_TOLERANCE:
            raise TableError(self.name, "Grid longitude span exceeds 360 degrees")

        rows = _sample_count(self.lat_max - self.lat_min, self.step, "latitude", self.name)
        cols = _sample_count(self.lon_max - self.lon_min, self.step, "longitude", self.name)

        values = np.array(self.values, dtype=np.float64)
        if values.shape != (rows, cols):
            raise TableError(
                self.name, f"Expected shape {(rows, cols)}, got {values.shape}")
        if not np.all(np.isfinite(values)):
            raise TableError(self.name, "Grid contains non-finite samples")

        values.flags.writeable = False
        object.__setattr__(self, "values", values)

    @property
    def rows(self) -> int:
        return self.values.shape[0]

    @property
    def cols(self) -> int:
        return self.values.shape[1]

    @property
    def shape(self) -> Tuple[int, int]:
        return self.values.shape

    @property
    def is_periodic(self) -> bool:
        """True if the longitude axis covers the full 360 degree circle."""
        return abs((self.lon_max - self.lon_min) - 360.0) <= SPAN_TOLERANCE

    @property
    def period_cols(self) -> int:
        """Number of distinct longitude columns around the circle."""
        return int(round(360.0 / self.step))

    def lat_of(self, row: int) -> float:
        return self.lat_min + row * self.step

    def lon_of(self, col: int) -> float:
        return self.lon_min + col * self.step

    def same_axes(self, other: "GeomagneticGrid") -> bool:
        return (self.shape == other.shape and
                (self.lat_min, self.lat_max, self.lon_min, self.lon_max, self.step) ==
                (other.lat_min, other.lat_max, other.lon_min, other.lon_max, other.step))

    def __getitem__(self, index):
        return self.values[index]

@dataclass(frozen=True, eq=False)
class GeomagneticTable:
    """Intensity [Gauss], declination [deg] and inclination [deg] grids."""
    intensity: GeomagneticGrid
    declination: GeomagneticGrid
    inclination: GeomagneticGrid

    def __post_init__(self):
        for grid in (self.declination, self.inclination):
            if not self.intensity.same_axes(grid):
                raise TableError(
                    grid.name, "Grid axes differ from the intensity grid")

    @classmethod
    def from_arrays(cls, intensity: np.ndarray, declination: np.ndarray,
                    inclination: np.ndarray, *, lat_min: float = -90.0,
                    lat_max: float = 90.0, lon_min: float = -180.0,
                    lon_max: float = 180.0, step: float = 10.0) -> "GeomagneticTable":
        """Build the three grids over one shared axis definition."""
        axes = dict(lat_min=lat_min, lat_max=lat_max, lon_min=lon_min,
                    lon_max=lon_max, step=step)
        return cls(
            intensity=GeomagneticGrid(values=intensity, name="intensity", **axes),
            declination=GeomagneticGrid(values=declination, name="declination", **axes),
            inclination=GeomagneticGrid(values=inclination, name="inclination", **axes),
        )

    @property
    def axes(self) -> GeomagneticGrid:
        """Grid whose axis definition is shared by all three fields."""
        return self.intensity

    @property
    def grids(self) -> Tuple[GeomagneticGrid, GeomagneticGrid, GeomagneticGrid]:
        return self.intensity, self.declination, self.inclination
