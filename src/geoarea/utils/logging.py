"""Logging utilities for geoarea."""

import logging
from dataclasses import dataclass, field
from itertools import count
from pathlib import Path
from typing import Any

import structlog

LOGGER_NAME = "geoarea"

_instance_ids = count()


@dataclass
class MeasurementStats:
    """Statistics and results from a batch measurement."""

    measured_count: int = 0
    error_count: int = 0
    total_area: float = 0.0
    areas: list[float | None] = field(default_factory=list)
    errors: list[tuple[int, str]] = field(default_factory=list)
    start_time: float | None = None
    end_time: float | None = None

    @property
    def duration_seconds(self) -> float:
        """Calculate measurement duration."""
        if self.start_time and self.end_time:
            return self.end_time - self.start_time
        return 0.0


def _processors() -> list[Any]:
    return [
        structlog.stdlib.filter_by_level,
        structlog.stdlib.add_logger_name,
        structlog.stdlib.add_log_level,
        structlog.stdlib.PositionalArgumentsFormatter(),
        structlog.processors.TimeStamper(fmt="iso"),
        structlog.processors.StackInfoRenderer(),
        structlog.processors.format_exc_info,
        structlog.processors.UnicodeDecoder(),
        structlog.processors.JSONRenderer(),
    ]


def _file_handler(log_file: Path, level: str) -> logging.FileHandler:
    file_handler = logging.FileHandler(log_file, encoding="utf-8")
    file_handler.setLevel(getattr(logging, level.upper()))
    file_handler.setFormatter(
        logging.Formatter("%(asctime)s | %(levelname)-8s | %(name)s | %(message)s")
    )
    return file_handler


def configure_logging(
    log_file: Path | None = None,
    console_level: str = "WARNING",
    file_level: str = "DEBUG",
    quiet: bool = False,
) -> structlog.stdlib.BoundLogger:
    """Configure structured logging for the geoarea logger.

    Called by applications that want geoarea output; the library itself
    never calls it. Handlers are attached to the "geoarea" logger only and
    replaced on every call, so configuring twice does not duplicate output.

    Args:
        log_file: Path to log file (no file output if None)
        console_level: Logging level for console output
        file_level: Logging level for file output
        quiet: If True, suppress console output except errors

    Returns:
        Configured structlog logger
    """
    stdlib_logger = logging.getLogger(LOGGER_NAME)
    for handler in list(stdlib_logger.handlers):
        stdlib_logger.removeHandler(handler)
        handler.close()

    levels = []

    if log_file is not None:
        file_handler = _file_handler(log_file, file_level)
        stdlib_logger.addHandler(file_handler)
        levels.append(file_handler.level)

    console_handler = logging.StreamHandler()
    console_handler.setLevel(logging.ERROR if quiet else getattr(logging, console_level.upper()))
    console_handler.setFormatter(logging.Formatter("%(message)s"))
    stdlib_logger.addHandler(console_handler)
    levels.append(console_handler.level)

    stdlib_logger.setLevel(min(levels))

    structlog.configure(
        processors=_processors(),
        wrapper_class=structlog.stdlib.BoundLogger,
        context_class=dict,
        logger_factory=structlog.stdlib.LoggerFactory(),
        cache_logger_on_first_use=True,
    )

    logger = structlog.get_logger(LOGGER_NAME)
    logger.debug("Logging initialized", log_file=str(log_file) if log_file else None)

    return logger


def instance_logger(
    component: str,
    log_file: Path | None = None,
    level: str = "WARNING",
    file_level: str = "DEBUG",
) -> tuple[structlog.stdlib.BoundLogger, logging.Logger]:
    """Create a structured logger private to one component instance.

    Each call gets its own child of the "geoarea" logger, so a log file
    given here only receives this instance's events. Events still
    propagate to whatever the application set up with configure_logging.
    Global structlog configuration is left untouched.

    Args:
        component: Component name used in the logger name
        log_file: Path to a log file for this instance only
        level: Lowest level the instance emits
        file_level: Logging level for the instance log file

    Returns:
        Tuple of (bound logger, underlying stdlib logger). Pass the stdlib
        logger to release_instance_logger when the instance is done.
    """
    stdlib_logger = logging.getLogger(f"{LOGGER_NAME}.{component}.{next(_instance_ids)}")
    levels = [getattr(logging, level.upper())]

    if log_file is not None:
        file_handler = _file_handler(log_file, file_level)
        stdlib_logger.addHandler(file_handler)
        levels.append(file_handler.level)

    stdlib_logger.setLevel(min(levels))

    logger = structlog.wrap_logger(
        stdlib_logger,
        processors=_processors(),
        wrapper_class=structlog.stdlib.BoundLogger,
        context_class=dict,
    )
    return logger, stdlib_logger


def release_instance_logger(stdlib_logger: logging.Logger) -> None:
    """Detach and close the handlers of an instance logger."""
    for handler in list(stdlib_logger.handlers):
        stdlib_logger.removeHandler(handler)
        handler.close()


class MeasurementLogger:
    """Logger for tracking batch measurement progress and statistics."""

    def __init__(self, logger: structlog.stdlib.BoundLogger) -> None:
        self._logger = logger
        self._stats = MeasurementStats()

    def log_geometry_measured(self, index: int, area: float, duration_ms: float) -> None:
        """Log a successful measurement."""
        self._logger.debug(
            "Geometry measured",
            index=index,
            area=area,
            duration_ms=round(duration_ms, 3),
        )
        self._stats.measured_count += 1
        self._stats.total_area += area
        self._stats.areas.append(area)

    def log_geometry_error(self, index: int, error: str, error_type: str) -> None:
        """Log a geometry that could not be measured."""
        self._logger.warning(
            "Geometry measurement failed",
            index=index,
            error=error,
            error_type=error_type,
        )
        self._stats.error_count += 1
        self._stats.errors.append((index, error))
        self._stats.areas.append(None)

    def log_batch_complete(self) -> None:
        """Log batch summary."""
        self._logger.info(
            "Batch measured",
            measured=self._stats.measured_count,
            errors=self._stats.error_count,
            total_area=self._stats.total_area,
            duration_s=round(self._stats.duration_seconds, 3),
        )

    @property
    def stats(self) -> MeasurementStats:
        """Get current measurement statistics."""
        return self._stats
