"""Configuration settings for geoarea."""

from pathlib import Path

from pydantic import BaseModel, Field

WGS84_RADIUS = 6378137


class GeodesyConfig(BaseModel):
    """Configuration for the sphere areas are measured on."""

    radius: float = Field(
        default=WGS84_RADIUS,
        gt=0.0,
        description="Sphere radius in meters (WGS-84 equatorial radius by default)",
    )


class ProcessingConfig(BaseModel):
    """Configuration for batch measurement."""

    max_workers: int | None = Field(
        default=None,
        ge=1,
        description="Max worker processes (None or 1 = measure in-process)",
    )
    chunksize: int = Field(
        default=1,
        ge=1,
        le=10_000,
        description="Geometries sent to a worker per task",
    )


class LoggingConfig(BaseModel):
    """Logging configuration."""

    log_file: Path | None = Field(
        default=None,
        description="Path to log file",
    )
    log_level: str = Field(
        default="WARNING",
        description="Lowest level a calculator emits (file output may be more verbose)",
    )
    file_log_level: str = Field(
        default="DEBUG",
        description="File log level (more verbose)",
    )


class GeoAreaSettings(BaseModel):
    """Main library settings."""

    geodesy: GeodesyConfig = Field(default_factory=GeodesyConfig)
    processing: ProcessingConfig = Field(default_factory=ProcessingConfig)
    logging: LoggingConfig = Field(default_factory=LoggingConfig)


def get_default_settings() -> GeoAreaSettings:
    """Get default library settings."""
    return GeoAreaSettings()
