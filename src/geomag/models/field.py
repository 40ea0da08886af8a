from typing import NamedTuple
import numpy as np

class FieldSample(NamedTuple):
    """Interpolated magnetic elements at one coordinate."""
    intensity: float    # Gauss
    declination: float  # deg, positive east of true north
    inclination: float  # deg, positive down
    valid: bool         # False if the coordinate was outside the table

class FieldVector(NamedTuple):
    """Magnetic field vector in the North-East-Down frame [Gauss]."""
    north: float
    east: float
    down: float

    def as_array(self) -> np.ndarray:
        return np.array([self.north, self.east, self.down])

    @property
    def magnitude(self) -> float:
        return float(np.linalg.norm(self.as_array()))
