"""Utility functions for geoarea.

This module provides:

- Structured logging setup and configuration
- Per-instance loggers for library components
- Batch measurement statistics
"""

from geoarea.utils.logging import (
    MeasurementLogger,
    MeasurementStats,
    configure_logging,
    instance_logger,
    release_instance_logger,
)

__all__ = [
    "MeasurementLogger",
    "MeasurementStats",
    "configure_logging",
    "instance_logger",
    "release_instance_logger",
]
