"""Core tracing algorithms for rastertrace.

This module contains:

- Geometry operations (corner squeezing, segment frames, ray/edge intersection)
- The marching squares transition table
- The sparse boundary cell map built from a filled mask
- The contour tracer and its wedge-based segment simplification
- The pipeline driver

Key functions:
- build_transition_table: Build the immutable marching squares table
- trace_polygons: Trace every polygon out of a cell map
- trace_mask / trace_field: One-call entry points
- signed_area: Shoelace area of a vertex list

Key classes:
- TransitionTable: Lookup of outgoing directions
- BoundaryCellMap: Sparse, mutable map of boundary cells
- ContourTracer: Traces one closed polygon at a time
- RasterTracer: Pipeline with settings, logging and statistics
"""

from rastertrace.core.cell_map import BoundaryCellMap, corner_mask_at
from rastertrace.core.geometry import (
    intersect_ray_with_edge,
    rotated_unit_vector,
    signed_area,
    squeeze_corners,
    wedge_bisector,
)
from rastertrace.core.processor import RasterTracer, trace_field, trace_mask, trace_polygons
from rastertrace.core.tracer import ContourTracer, SegmentWedge
from rastertrace.core.transitions import (
    DEFAULT_TRANSITIONS,
    TransitionTable,
    build_transition_table,
)

__all__ = [
    # Cell map
    "BoundaryCellMap",
    "corner_mask_at",
    # Tracer classes
    "ContourTracer",
    "SegmentWedge",
    # Transition table
    "DEFAULT_TRANSITIONS",
    "TransitionTable",
    "build_transition_table",
    # Processor
    "RasterTracer",
    "trace_field",
    "trace_mask",
    "trace_polygons",
    # Geometry functions
    "intersect_ray_with_edge",
    "rotated_unit_vector",
    "signed_area",
    "squeeze_corners",
    "wedge_bisector",
]
