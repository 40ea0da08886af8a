"""
Utility functions and helpers for the geomagnetic field lookup.
"""

from .logging import setup_logging
from .validation import (
    validate_range,
    validate_finite,
    validate_dict_keys
)

__all__ = [
    'setup_logging',
    'validate_range',
    'validate_finite',
    'validate_dict_keys'
]
