from dataclasses import dataclass, field, fields, replace
from datetime import date
from pathlib import Path
from typing import Any, Dict, List, Optional, Union
import yaml

from .exceptions import ConfigurationError
from .utils.validation import validate_finite, validate_range

@dataclass
class TableConfig:
    # Grid coverage (defaults to the full globe)
    lat_min: float = -90.0
    lat_max: float = 90.0
    lon_min: float = -180.0
    lon_max: float = 180.0
    step_deg: float = 10.0  # 19 x 37 samples

    # Reference model evaluation
    epoch: date = date(2020, 1, 1)  # Tables are pinned to a single epoch
    altitude_km: float = 0.0  # Height above the WGS-84 ellipsoid

    # Pre-generated table (.npz); built from IGRF when unset
    table_file: Optional[str] = None

@dataclass
class SamplerConfig:
    # Tolerance on the latitude/longitude bounds checks (degrees)
    boundary_epsilon_deg: float = 1e-3

@dataclass
class LoggingConfig:
    level: str = "WARNING"
    log_file: Optional[str] = None

@dataclass
class Config:
    """Main configuration class."""
    table: TableConfig = field(default_factory=TableConfig)
    sampler: SamplerConfig = field(default_factory=SamplerConfig)
    logging: LoggingConfig = field(default_factory=LoggingConfig)

# Create default configuration instance
DEFAULT_CONFIG = Config()

_SECTIONS = {
    'table': TableConfig,
    'sampler': SamplerConfig,
    'logging': LoggingConfig,
}

_LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")

def get_config() -> Config:
    """Get configuration instance."""
    return DEFAULT_CONFIG

def set_boundary_epsilon(epsilon_deg: float):
    """Set the bounds-check tolerance used by the sampler."""
    if not validate_finite(epsilon_deg) or epsilon_deg < 0:
        raise ValueError("Boundary epsilon must be a non-negative finite number")
    DEFAULT_CONFIG.sampler.boundary_epsilon_deg = epsilon_deg

def set_table_file(path: Optional[Union[str, Path]]):
    """Set the pre-generated table file (None rebuilds from IGRF)."""
    DEFAULT_CONFIG.table.table_file = str(path) if path is not None else None

def validate_config(config: Config) -> List[str]:
    """
    Validate configuration values.
    Returns list of validation errors, empty if valid.
    """
    errors = []

    # Validate table configuration
    table = config.table
    if not validate_finite(table.lat_min, table.lat_max, table.lon_min,
                           table.lon_max, table.step_deg, table.altitude_km):
        errors.append("Table bounds, step and altitude must be finite numbers")
    else:
        if table.step_deg <= 0:
            errors.append("Table step must be positive")
        if not (validate_range(table.lat_min, -90.0, 90.0) and
                validate_range(table.lat_max, -90.0, 90.0)):
            errors.append("Table latitude bounds must lie within [-90, 90]")
        if table.lat_min > table.lat_max:
            errors.append("Table lat_min must not exceed lat_max")
        if table.lon_min > table.lon_max:
            errors.append("Table lon_min must not exceed lon_max")
        if table.lon_max - table.lon_min > 360.0:
            errors.append("Table longitude span must not exceed 360 degrees")
        if table.step_deg > 0:
            for name, span in (("latitude", table.lat_max - table.lat_min),
                               ("longitude", table.lon_max - table.lon_min)):
                steps = span / table.step_deg
                if abs(steps - round(steps)) > 1e-9:
                    errors.append(f"Table {name} span must be a multiple of the step")

    if not isinstance(table.epoch, date):
        errors.append("Table epoch must be a date")

    # Validate sampler configuration
    epsilon = config.sampler.boundary_epsilon_deg
    if not validate_finite(epsilon) or epsilon < 0:
        errors.append("Boundary epsilon must be a non-negative finite number")

    # Validate logging configuration
    if str(config.logging.level).upper() not in _LOG_LEVELS:
        errors.append(f"Unknown logging level: {config.logging.level}")

    return errors

def _parse_section(name: str, cls, values: Any, errors: List[str]):
    """Build one config section from its YAML mapping."""
    if values is None:
        return cls()
    if not isinstance(values, dict):
        errors.append(f"Section '{name}' must be a mapping")
        return cls()

    known = {f.name for f in fields(cls)}
    for key in values:
        if key not in known:
            errors.append(f"Unknown option '{name}.{key}'")

    section = cls()
    kwargs = {k: v for k, v in values.items() if k in known}
    if name == 'table' and isinstance(kwargs.get('epoch'), str):
        try:
            kwargs['epoch'] = date.fromisoformat(kwargs['epoch'])
        except ValueError:
            errors.append(f"Invalid table epoch: {kwargs['epoch']}")
            del kwargs['epoch']
    return replace(section, **kwargs)

def config_from_dict(data: Dict[str, Any]) -> Config:
    """Build and validate a configuration from a plain dictionary."""
    errors = []
    if not isinstance(data, dict):
        raise ConfigurationError(["Configuration root must be a mapping"])

    for key in data:
        if key not in _SECTIONS:
            errors.append(f"Unknown section '{key}'")

    sections = {name: _parse_section(name, cls, data.get(name), errors)
                for name, cls in _SECTIONS.items()}
    config = Config(**sections)

    errors.extend(validate_config(config))
    if errors:
        raise ConfigurationError(errors)

    return config

def load_config(config_file: Union[str, Path]) -> Config:
    """Load and validate configuration from a YAML file."""
    try:
        with open(config_file, "r", encoding="utf-8") as fh:
            data = yaml.safe_load(fh)
    except OSError as e:
        raise ConfigurationError([f"Cannot read {config_file}: {e}"]) from e
    except yaml.YAMLError as e:
        raise ConfigurationError([f"Invalid YAML in {config_file}: {e}"]) from e

    return config_from_dict(data or {})
