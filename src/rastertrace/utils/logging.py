"""Logging utilities for rastertrace."""

import logging
from dataclasses import dataclass
from pathlib import Path

import structlog

from rastertrace.domain import Polygon


@dataclass
class TraceStats:
    """Statistics from a tracing run."""

    boundary_cells: int = 0
    polygon_count: int = 0
    filled_count: int = 0
    hole_count: int = 0
    vertex_count: int = 0
    start_time: float | None = None
    end_time: float | None = None

    @property
    def duration_seconds(self) -> float:
        """Calculate tracing duration."""
        if self.start_time and self.end_time:
            return self.end_time - self.start_time
        return 0.0


def configure_logging(
    log_file: Path | None = None,
    console_level: str = "WARNING",
    file_level: str = "DEBUG",
    quiet: bool = False,
) -> structlog.stdlib.BoundLogger:
    """Configure structured logging.

    Args:
        log_file: Path to log file (no file output if None)
        console_level: Logging level for console output
        file_level: Logging level for file output
        quiet: If True, suppress console output

    Returns:
        Configured structlog logger
    """
    root_logger = logging.getLogger()
    root_logger.setLevel(logging.DEBUG)

    if log_file is not None:
        file_handler = logging.FileHandler(log_file, encoding="utf-8")
        file_handler.setLevel(getattr(logging, file_level.upper()))
        file_handler.setFormatter(
            logging.Formatter("%(asctime)s | %(levelname)-8s | %(name)s | %(message)s")
        )
        root_logger.addHandler(file_handler)

    if not quiet:
        console_handler = logging.StreamHandler()
        console_handler.setLevel(getattr(logging, console_level.upper()))
        console_handler.setFormatter(logging.Formatter("%(message)s"))
        root_logger.addHandler(console_handler)

    structlog.configure(
        processors=[
            structlog.stdlib.filter_by_level,
            structlog.stdlib.add_logger_name,
            structlog.stdlib.add_log_level,
            structlog.stdlib.PositionalArgumentsFormatter(),
            structlog.processors.TimeStamper(fmt="iso"),
            structlog.processors.StackInfoRenderer(),
            structlog.processors.format_exc_info,
            structlog.processors.UnicodeDecoder(),
            structlog.processors.JSONRenderer(),
        ],
        wrapper_class=structlog.stdlib.BoundLogger,
        context_class=dict,
        logger_factory=structlog.stdlib.LoggerFactory(),
        cache_logger_on_first_use=True,
    )

    logger = structlog.get_logger("rastertrace")
    logger.info(
        "Logging initialized",
        log_file=str(log_file) if log_file else None,
        level=file_level,
    )

    return logger


class TraceLogger:
    """Logger for tracking tracing progress and statistics."""

    def __init__(self, logger: structlog.stdlib.BoundLogger) -> None:
        self._logger = logger
        self._stats = TraceStats()

    def log_scan_complete(self, width: int, height: int, boundary_cells: int) -> None:
        """Log the boundary cell scan."""
        self._logger.debug(
            "Boundary cells scanned",
            width=width,
            height=height,
            cells=boundary_cells,
        )
        self._stats.boundary_cells += boundary_cells

    def log_polygon(self, index: int, polygon: Polygon) -> None:
        """Log one traced polygon."""
        self._logger.debug(
            "Polygon traced",
            index=index,
            vertices=len(polygon),
            area=round(polygon.signed_area(), 3),
            filled=polygon.is_filled,
        )
        self._stats.polygon_count += 1
        self._stats.vertex_count += len(polygon)
        if polygon.is_filled:
            self._stats.filled_count += 1
        else:
            self._stats.hole_count += 1

    def log_trace_error(self, error: Exception, remaining_cells: int) -> None:
        """Log an aborted trace."""
        self._logger.error(
            "Trace aborted",
            error=str(error),
            error_type=type(error).__name__,
            remaining_cells=remaining_cells,
        )

    def log_complete(self, duration_ms: float) -> None:
        """Log the end of a tracing run."""
        self._logger.info(
            "Trace complete",
            polygons=self._stats.polygon_count,
            filled=self._stats.filled_count,
            holes=self._stats.hole_count,
            vertices=self._stats.vertex_count,
            duration_ms=round(duration_ms, 2),
        )

    @property
    def stats(self) -> TraceStats:
        """Get current tracing statistics."""
        return self._stats
