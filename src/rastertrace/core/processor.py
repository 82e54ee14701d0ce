"""Orchestration of the full raster-to-polygon pipeline.

Key components:
- trace_polygons: The driver loop, tracing until the cell map is empty
- RasterTracer: Pipeline class with settings, logging and statistics
- trace_mask / trace_field: One-call entry points
"""

import time
from collections.abc import Callable
from typing import Any

import structlog

from rastertrace.config import RasterTraceSettings, get_default_settings
from rastertrace.core.cell_map import BoundaryCellMap
from rastertrace.core.tracer import ContourTracer
from rastertrace.core.transitions import DEFAULT_TRANSITIONS, TransitionTable
from rastertrace.domain import Polygon
from rastertrace.exceptions import InvariantViolationError
from rastertrace.raster.field import FilledMask, PixelField
from rastertrace.raster.predicates import make_fill_predicate
from rastertrace.utils import TraceLogger, TraceStats, configure_logging


def trace_polygons(
    cell_map: BoundaryCellMap,
    tracer: ContourTracer | None = None,
    on_polygon: Callable[[int, Polygon], None] | None = None,
) -> list[Polygon]:
    """Trace every polygon in a boundary cell map.

    The map is consumed: it is empty when this returns normally.

    Args:
        cell_map: Boundary cells to trace
        tracer: Tracer to use (default settings if None)
        on_polygon: Optional callback invoked with (index, polygon) per trace

    Returns:
        Polygons in tracing order; empty for a map without cells
    """
    tracer = tracer or ContourTracer()
    polygons: list[Polygon] = []

    while (start := cell_map.first()) is not None:
        polygon = tracer.trace(cell_map, start)
        if on_polygon is not None:
            on_polygon(len(polygons), polygon)
        polygons.append(polygon)

    return polygons


class RasterTracer:
    """Runs the scan and trace pipeline for filled masks and pixel fields.

    Manages the workflow:
    1. Classify pixels into a FilledMask (pixel fields only)
    2. Scan the mask into a BoundaryCellMap
    3. Trace polygons until the map is exhausted
    4. Record statistics and log the outcome

    Example:
        tracer = RasterTracer()
        polygons = tracer.trace_field(image)
        print(tracer.stats.polygon_count)
    """

    def __init__(
        self,
        settings: RasterTraceSettings | None = None,
        logger: Any = None,
        transitions: TransitionTable = DEFAULT_TRANSITIONS,
    ) -> None:
        """Initialize the pipeline.

        Args:
            settings: Trace, fill and logging settings (defaults if None)
            logger: structlog logger; when None, logging is configured from
                settings if a log file is set, else the default logger is used
            transitions: Marching squares table shared by every trace
        """
        self.settings = settings or get_default_settings()
        if logger is None:
            if self.settings.logging.log_file is not None:
                logger = configure_logging(
                    log_file=self.settings.logging.log_file,
                    console_level=self.settings.logging.log_level,
                    file_level=self.settings.logging.file_log_level,
                )
            else:
                logger = structlog.get_logger("rastertrace")
        self.logger = logger
        self.trace_logger = TraceLogger(logger)
        self.tracer = ContourTracer(transitions=transitions, config=self.settings.trace)

    @property
    def stats(self) -> TraceStats:
        return self.trace_logger.stats

    def build_cell_map(self, mask: FilledMask) -> BoundaryCellMap:
        """Scan a mask into boundary cells using the configured border policy."""
        cell_map = BoundaryCellMap.from_mask(mask, pad_border=self.settings.trace.pad_border)
        self.trace_logger.log_scan_complete(
            mask.bounds.width, mask.bounds.height, len(cell_map)
        )
        return cell_map

    def trace_mask(self, mask: FilledMask) -> list[Polygon]:
        """Trace every contour of a filled mask.

        Raises:
            InvariantViolationError: If tracing hits an inconsistent cell map
        """
        start_time = time.time()
        self.stats.start_time = start_time

        cell_map = self.build_cell_map(mask)
        try:
            polygons = trace_polygons(cell_map, self.tracer, self.trace_logger.log_polygon)
        except InvariantViolationError as e:
            self.trace_logger.log_trace_error(e, len(cell_map))
            raise

        self.stats.end_time = time.time()
        self.trace_logger.log_complete((self.stats.end_time - start_time) * 1000)
        return polygons

    def trace_field(
        self,
        field: PixelField,
        is_filled: Callable[[Any], bool] | None = None,
    ) -> list[Polygon]:
        """Classify a pixel field and trace its contours.

        Args:
            field: Pixel source
            is_filled: Fill predicate; defaults to the one selected by the
                fill settings

        Returns:
            Traced polygons
        """
        predicate = is_filled or make_fill_predicate(self.settings.fill)
        return self.trace_mask(FilledMask.from_field(field, predicate))


def trace_mask(mask: FilledMask, settings: RasterTraceSettings | None = None) -> list[Polygon]:
    """Trace every contour of a filled mask with the given settings."""
    return RasterTracer(settings).trace_mask(mask)


def trace_field(
    field: PixelField,
    is_filled: Callable[[Any], bool] | None = None,
    settings: RasterTraceSettings | None = None,
) -> list[Polygon]:
    """Classify a pixel field and trace its contours.

    Defaults to the dark-pixel predicate.
    """
    return RasterTracer(settings).trace_field(field, is_filled)
