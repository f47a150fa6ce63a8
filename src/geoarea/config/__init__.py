"""Configuration management for geoarea.

This module provides configuration management using Pydantic models.
Every setting has a default, so an empty GeoAreaSettings() is valid.

Key classes:
- GeodesyConfig: Sphere radius used for areas
- ProcessingConfig: Batch measurement settings
- LoggingConfig: Logging settings
- GeoAreaSettings: Main library settings
"""

from geoarea.config.settings import (
    WGS84_RADIUS,
    GeoAreaSettings,
    GeodesyConfig,
    LoggingConfig,
    ProcessingConfig,
    get_default_settings,
)

__all__ = [
    "WGS84_RADIUS",
    "GeoAreaSettings",
    "GeodesyConfig",
    "LoggingConfig",
    "ProcessingConfig",
    "get_default_settings",
]
