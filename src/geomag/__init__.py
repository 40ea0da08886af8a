"""
geomag: Earth magnetic field lookup from coarse geomagnetic tables.
"""

from .api import (
    get_mag_field,
    get_earth_field_vector,
    get_declination,
    get_default_model,
    reset_default_model
)
from .exceptions import GeomagError, TableError, ValidationError, ConfigurationError
from .models import (
    FieldSample,
    FieldVector,
    GeomagneticGrid,
    GeomagneticTable,
    Location,
    MagneticFieldModel
)

__version__ = "0.1.0"

__all__ = [
    'get_mag_field',
    'get_earth_field_vector',
    'get_declination',
    'get_default_model',
    'reset_default_model',
    'GeomagError',
    'TableError',
    'ValidationError',
    'ConfigurationError',
    'FieldSample',
    'FieldVector',
    'GeomagneticGrid',
    'GeomagneticTable',
    'Location',
    'MagneticFieldModel'
]
