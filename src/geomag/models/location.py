from typing import NamedTuple

from ..exceptions import ValidationError
from ..utils.validation import validate_finite, validate_range

# Fixed-point scale of Location coordinates (1e-7 degree units)
DEGREES_TO_FIXED = 1e7

INT32_MIN = -2**31
INT32_MAX = 2**31 - 1

class Location(NamedTuple):
    """WGS-84 position with latitude/longitude in 1e-7 degree units."""
    lat: int
    lng: int

    @classmethod
    def from_degrees(cls, latitude_deg: float, longitude_deg: float) -> "Location":
        """
        Encode a position given in degrees.

        Raises:
            ValidationError: if a coordinate is not finite or does not fit
                the 32-bit fixed-point encoding
        """
        if not validate_finite(latitude_deg, longitude_deg):
            raise ValidationError(
                f"Location must be finite, got ({latitude_deg}, {longitude_deg})")

        lat = int(round(latitude_deg * DEGREES_TO_FIXED))
        lng = int(round(longitude_deg * DEGREES_TO_FIXED))
        for value in (lat, lng):
            if not validate_range(value, INT32_MIN, INT32_MAX):
                raise ValidationError(
                    f"Location ({latitude_deg}, {longitude_deg}) exceeds the int32 encoding")
        return cls(lat, lng)

    @property
    def lat_deg(self) -> float:
        """Latitude in degrees."""
        return self.lat / DEGREES_TO_FIXED

    @property
    def lng_deg(self) -> float:
        """Longitude in degrees."""
        return self.lng / DEGREES_TO_FIXED
