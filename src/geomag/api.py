"""
Module-level query functions backed by a shared MagneticFieldModel.
"""

from typing import Optional

from .models.field import FieldSample, FieldVector
from .models.location import Location
from .models.magnetic_field import MagneticFieldModel

_default_model: Optional[MagneticFieldModel] = None

def get_default_model() -> MagneticFieldModel:
    """Get the shared model, creating it on first use."""
    global _default_model
    if _default_model is None:
        _default_model = MagneticFieldModel()
    return _default_model

def reset_default_model():
    """Forget the shared model so the next query picks up new settings."""
    global _default_model
    _default_model = None

def get_mag_field(latitude_deg: float, longitude_deg: float) -> FieldSample:
    return get_default_model().get_mag_field(latitude_deg, longitude_deg)

def get_earth_field_vector(location: Location) -> FieldVector:
    return get_default_model().get_earth_field_vector(location)

def get_declination(latitude_deg: float, longitude_deg: float) -> float:
    return get_default_model().get_declination(latitude_deg, longitude_deg)
