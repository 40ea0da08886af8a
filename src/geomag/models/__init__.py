"""
Geomagnetic table and field models.
"""

from .field import FieldSample, FieldVector
from .grid import GeomagneticGrid, GeomagneticTable
from .location import Location
from .magnetic_field import MagneticFieldModel
from .sampler import sample, normalize_coordinate, wrap_longitude
from .tables import build_igrf_table, load_table, save_table, default_table
from .vector import to_vector

__all__ = [
    'FieldSample',
    'FieldVector',
    'GeomagneticGrid',
    'GeomagneticTable',
    'Location',
    'MagneticFieldModel',
    'sample',
    'normalize_coordinate',
    'wrap_longitude',
    'build_igrf_table',
    'load_table',
    'save_table',
    'default_table',
    'to_vector'
]
