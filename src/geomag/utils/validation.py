from typing import Dict, List
import math

def validate_range(value: float, min_val: float = None, max_val: float = None) -> bool:
    """Validate numeric value is within range."""
    if min_val is not None and value < min_val:
        return False
    if max_val is not None and value > max_val:
        return False
    return True

def validate_finite(*values: float) -> bool:
    """Validate every value is a finite real number (no NaN or infinity)."""
    try:
        return all(math.isfinite(v) for v in values)
    except TypeError:
        return False

def validate_dict_keys(data: Dict, required_keys: List[str]) -> bool:
    """Validate dictionary contains all required keys."""
    return all(key in data for key in required_keys)
