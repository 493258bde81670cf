"""Configuration loader for calculator defaults.

Provides a Config dataclass and a loader that reads from YAML files,
falling back to default values if no config file is specified or found.

Exports
-------
Config
load_config
get_config
get_cached_config
reload_config
set_config_path
"""

from dataclasses import dataclass, field
from pathlib import Path
from typing import Any

import yaml

from constants import (
    BATCH_DISTRIBUTIONS,
    DEFAULT_AIR_FACTOR,
    DEFAULT_BAKING_TEMP,
    DEFAULT_BAKING_TIME,
    DEFAULT_BATCH_COUNT,
    DEFAULT_FILLING_THICKNESS_MM,
    DEFAULT_LAYER_THICKNESS_MM,
    DEFAULT_TEMPER_TARGET,
    PAN_DIMENSION_MAX_CM,
    PAN_DIMENSION_MIN_CM,
)

# Default config file path (next to this module)
_DEFAULT_CONFIG_PATH = Path(__file__).parent / "config.default.yml"

# Global config path override (set via CLI)
_config_path_override: Path | None = None


@dataclass
class BakingConfig:
    """Oven defaults for ``bake`` and chemistry estimates."""

    temp: float = DEFAULT_BAKING_TEMP
    time: float = DEFAULT_BAKING_TIME
    thickness_mm: float = DEFAULT_LAYER_THICKNESS_MM


@dataclass
class TemperingConfig:
    """Egg tempering defaults."""

    batch_count: int = DEFAULT_BATCH_COUNT
    target_temp: float = DEFAULT_TEMPER_TARGET


@dataclass
class ScalingConfig:
    """Pan and layer defaults."""

    air_factor: float = DEFAULT_AIR_FACTOR
    layer_thickness_mm: float = DEFAULT_LAYER_THICKNESS_MM
    filling_thickness_mm: float = DEFAULT_FILLING_THICKNESS_MM
    default_pan_diameter_cm: float = 24.0


@dataclass
class StorageConfig:
    """Where saved recipes and comparisons live."""

    recipes_path: str = "saved_recipes.json"
    comparisons_path: str = "comparisons.json"


@dataclass
class Config:
    """Root configuration container."""

    baking: BakingConfig = field(default_factory=BakingConfig)
    tempering: TemperingConfig = field(default_factory=TemperingConfig)
    scaling: ScalingConfig = field(default_factory=ScalingConfig)
    storage: StorageConfig = field(default_factory=StorageConfig)


_SECTIONS = ("baking", "tempering", "scaling", "storage")


def _merge_dict_into_dataclass(data: dict[str, Any], dc_instance: Any) -> None:
    """Merge dictionary values into a dataclass instance."""
    for key, value in data.items():
        if hasattr(dc_instance, key):
            setattr(dc_instance, key, value)


def _validate_config(config: Config) -> list[str]:
    """Validate config values and return list of errors."""
    errors: list[str] = []

    # Baking validations
    if config.baking.temp <= 0:
        errors.append("baking.temp must be > 0")
    if config.baking.time <= 0:
        errors.append("baking.time must be > 0")
    if config.baking.thickness_mm <= 0:
        errors.append("baking.thickness_mm must be > 0")

    # Tempering validations
    if config.tempering.batch_count not in BATCH_DISTRIBUTIONS:
        errors.append(
            "tempering.batch_count must be one of "
            + ", ".join(str(n) for n in BATCH_DISTRIBUTIONS)
        )
    if not (0.0 < config.tempering.target_temp < 100.0):
        errors.append("tempering.target_temp must be in (0, 100)")

    # Scaling validations
    if not (0.0 <= config.scaling.air_factor < 1.0):
        errors.append("scaling.air_factor must be in [0, 1)")
    if config.scaling.layer_thickness_mm <= 0:
        errors.append("scaling.layer_thickness_mm must be > 0")
    if config.scaling.filling_thickness_mm <= 0:
        errors.append("scaling.filling_thickness_mm must be > 0")
    if not (
        PAN_DIMENSION_MIN_CM
        <= config.scaling.default_pan_diameter_cm
        <= PAN_DIMENSION_MAX_CM
    ):
        errors.append(
            f"scaling.default_pan_diameter_cm must be in "
            f"[{PAN_DIMENSION_MIN_CM:g}, {PAN_DIMENSION_MAX_CM:g}]"
        )

    # Storage validations
    if not config.storage.recipes_path:
        errors.append("storage.recipes_path must not be empty")
    if not config.storage.comparisons_path:
        errors.append("storage.comparisons_path must not be empty")

    return errors


def load_config(path: str | Path | None = None) -> Config:
    """Load configuration from YAML file.

    Parameters
    ----------
    path : str | Path | None
        Path to config file. If None, uses the global override
        (set via set_config_path) or falls back to config.default.yml.

    Returns
    -------
    Config
        Loaded and validated configuration.

    Raises
    ------
    FileNotFoundError
        If specified path doesn't exist.
    ValueError
        If config validation fails.
    """
    # Determine which path to use
    if path is not None:
        config_path = Path(path)
    elif _config_path_override is not None:
        config_path = _config_path_override
    else:
        config_path = _DEFAULT_CONFIG_PATH

    if not config_path.exists():
        if path is not None:
            raise FileNotFoundError(f"Config file not found: {config_path}")
        # Fall back to defaults if the default (or override) file is missing
        return Config()

    with open(config_path, encoding="utf-8") as f:
        data = yaml.safe_load(f) or {}

    # Build config from defaults, then overlay loaded values
    config = Config()
    for section in _SECTIONS:
        if isinstance(data.get(section), dict):
            _merge_dict_into_dataclass(data[section], getattr(config, section))

    errors = _validate_config(config)
    if errors:
        raise ValueError(
            "Config validation failed:\n" + "\n".join(f"  - {e}" for e in errors)
        )

    return config


def set_config_path(path: str | Path | None) -> None:
    """Set global config path override.

    Call this early (e.g., from CLI parsing) so later lookups see it.

    Parameters
    ----------
    path : str | Path | None
        Path to config file, or None to reset to default.
    """
    global _config_path_override, _cached_config
    _config_path_override = Path(path) if path is not None else None
    _cached_config = None


def get_config() -> Config:
    """Load the configuration using the current global path override."""
    return load_config()


# Singleton instance for lazy loading
_cached_config: Config | None = None


def get_cached_config() -> Config:
    """Get cached configuration (loads once).

    Returns
    -------
    Config
        Cached configuration instance.
    """
    global _cached_config
    if _cached_config is None:
        _cached_config = load_config()
    return _cached_config


def reload_config() -> Config:
    """Reload and cache configuration."""
    global _cached_config
    _cached_config = load_config()
    return _cached_config
