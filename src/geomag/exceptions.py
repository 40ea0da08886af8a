"""
Custom exceptions for geomagnetic table operations.
"""

class GeomagError(Exception):
    """Base exception for all geomag errors."""
    pass

class TableError(GeomagError):
    """Exception for malformed or unreadable geomagnetic tables."""
    def __init__(self, table: str, message: str):
        self.table = table
        self.message = message
        super().__init__(f"[{table}] {message}")

class ValidationError(GeomagError):
    """Exception for input data validation errors."""
    pass

class ConfigurationError(GeomagError):
    """Exception for invalid configuration."""
    def __init__(self, errors):
        self.errors = list(errors)
        super().__init__("Configuration validation failed:\n" +
                         "\n".join(f"- {error}" for error in self.errors))
