"""Settings-driven area measurement with optional parallel batches.

Key components:
- measure_geometry: Top-level picklable function for worker processes
- AreaCalculator: Facade applying settings, logging and batch processing
"""

import time
from collections.abc import Callable, Iterable
from concurrent.futures import ProcessPoolExecutor
from itertools import repeat
from typing import Any

from geoarea.config import GeoAreaSettings, get_default_settings
from geoarea.core.area import geometry_area
from geoarea.exceptions import GeoAreaError
from geoarea.utils import (
    MeasurementLogger,
    MeasurementStats,
    instance_logger,
    release_instance_logger,
)


def measure_geometry(geometry: Any, radius: float) -> dict[str, Any]:
    """Measure a single geometry.

    Top-level function designed to be picklable for use with
    ProcessPoolExecutor. Input errors are returned rather than raised so
    one bad geometry does not abort a batch.

    Args:
        geometry: Geometry input (domain value, mapping or __geo_interface__)
        radius: Sphere radius in meters

    Returns:
        Dictionary containing either:
        - Success: {"area": float, "duration_ms": float}
        - Error: {"error": str, "error_type": str, "duration_ms": float}
    """
    start_time = time.time()

    try:
        area = geometry_area(geometry, radius=radius)
    except GeoAreaError as e:
        return {
            "error": str(e),
            "error_type": type(e).__name__,
            "duration_ms": (time.time() - start_time) * 1000,
        }

    return {
        "area": area,
        "duration_ms": (time.time() - start_time) * 1000,
    }


class AreaCalculator:
    """Measures geometries with the configured radius and logging.

    Example:
        calculator = AreaCalculator(GeoAreaSettings())
        area = calculator.geometry_area({"type": "Polygon", "coordinates": rings})
        stats = calculator.measure_many(geometries, max_workers=4)
    """

    def __init__(self, config: GeoAreaSettings | None = None) -> None:
        """Initialize the calculator.

        Logging is not configured globally here. When the settings name a
        log file, this calculator writes to it through its own logger until
        close() is called.

        Args:
            config: Settings (library defaults if None)
        """
        self.config = config if config is not None else get_default_settings()
        self.logger, self._stdlib_logger = instance_logger(
            "calculator",
            log_file=self.config.logging.log_file,
            level=self.config.logging.log_level,
            file_level=self.config.logging.file_log_level,
        )

    def close(self) -> None:
        """Release the calculator's log file."""
        release_instance_logger(self._stdlib_logger)

    def __enter__(self) -> "AreaCalculator":
        return self

    def __exit__(self, *exc_info: object) -> None:
        self.close()

    @property
    def radius(self) -> float:
        """Sphere radius in meters."""
        return self.config.geodesy.radius

    def geometry_area(self, geometry: Any) -> float:
        """Calculate the area of one geometry.

        Args:
            geometry: Geometry input

        Returns:
            Area in square meters

        Raises:
            GeometryError: If the geometry cannot be measured
        """
        area = geometry_area(geometry, radius=self.radius)
        self.logger.debug("Geometry area computed", area=area)
        return area

    def measure_many(
        self,
        geometries: Iterable[Any],
        max_workers: int | None = None,
        progress_callback: Callable[[int, int, int, bool], None] | None = None,
    ) -> MeasurementStats:
        """Measure a batch of geometries.

        Results are recorded in input order and the total is summed left to
        right, so it does not depend on the number of workers.

        Args:
            geometries: Geometry inputs
            max_workers: Maximum worker processes (None = use settings;
                None or 1 there means in-process)
            progress_callback: Optional callback(completed, total, index, success)

        Returns:
            MeasurementStats with per-geometry areas (None where measurement
            failed), total area, error details and timing
        """
        items = list(geometries)
        total = len(items)

        if max_workers is None:
            max_workers = self.config.processing.max_workers

        measurement_logger = MeasurementLogger(self.logger)
        stats = measurement_logger.stats
        stats.start_time = time.time()

        self.logger.info("Starting batch measurement", geometries=total, max_workers=max_workers)

        if max_workers is not None and max_workers > 1 and total > 1:
            with ProcessPoolExecutor(max_workers=max_workers) as executor:
                results = executor.map(
                    measure_geometry,
                    items,
                    repeat(self.radius),
                    chunksize=self.config.processing.chunksize,
                )
                self._collect(results, total, measurement_logger, progress_callback)
        else:
            results = (measure_geometry(item, self.radius) for item in items)
            self._collect(results, total, measurement_logger, progress_callback)

        stats.end_time = time.time()
        measurement_logger.log_batch_complete()
        return stats

    def _collect(
        self,
        results: Iterable[dict[str, Any]],
        total: int,
        measurement_logger: MeasurementLogger,
        progress_callback: Callable[[int, int, int, bool], None] | None,
    ) -> None:
        for index, result in enumerate(results):
            success = "error" not in result
            if success:
                measurement_logger.log_geometry_measured(
                    index, result["area"], result["duration_ms"]
                )
            else:
                measurement_logger.log_geometry_error(
                    index, result["error"], result["error_type"]
                )
            if progress_callback:
                progress_callback(index + 1, total, index, success)
