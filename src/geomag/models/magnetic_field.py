from typing import Optional

from ..config import get_config
from .field import FieldSample, FieldVector
from .grid import GeomagneticTable
from .location import Location
from .sampler import sample
from .tables import default_table
from .vector import to_vector

class MagneticFieldModel:
    def __init__(self, table: Optional[GeomagneticTable] = None,
                 boundary_epsilon_deg: Optional[float] = None):
        """
        Initialize magnetic field model.

        Args:
            table: Geomagnetic table (defaults to the process-wide table,
                looked up on every query)
            boundary_epsilon_deg: Bounds tolerance [deg] (defaults to the
                configured value at query time)
        """
        self._table = table
        self._boundary_epsilon_deg = boundary_epsilon_deg

    @property
    def table(self) -> GeomagneticTable:
        return self._table if self._table is not None else default_table()

    @property
    def boundary_epsilon_deg(self) -> float:
        if self._boundary_epsilon_deg is not None:
            return self._boundary_epsilon_deg
        return get_config().sampler.boundary_epsilon_deg

    def get_mag_field(self, latitude_deg: float, longitude_deg: float) -> FieldSample:
        """
        Magnetic elements at zero altitude.

        Returns:
            (intensity [Gauss], declination [deg], inclination [deg], valid)
        """
        return sample(self.table, latitude_deg, longitude_deg,
                      self.boundary_epsilon_deg)

    def get_declination(self, latitude_deg: float, longitude_deg: float) -> float:
        """Magnetic declination [deg] at a coordinate."""
        return self.get_mag_field(latitude_deg, longitude_deg).declination

    def field_vector(self, latitude_deg: float, longitude_deg: float) -> FieldVector:
        """Earth field vector [Gauss, NED] at a coordinate in degrees."""
        intensity, declination, inclination, _ = self.get_mag_field(
            latitude_deg, longitude_deg)
        return to_vector(intensity, declination, inclination)

    def get_earth_field_vector(self, location: Location) -> FieldVector:
        """Earth field vector [Gauss, NED] at a fixed-point Location."""
        return self.field_vector(location.lat_deg, location.lng_deg)
