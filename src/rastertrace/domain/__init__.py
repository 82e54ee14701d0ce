"""Domain models for rastertrace.

This module contains the value types shared by the scan and the tracer:

- Immutable geometry (frozen dataclasses) for points, coordinates and rotations
- A mutable BoundaryCell whose corner mask is consumed while tracing
- The Polygon result type with its winding classification

Key classes:
- Point: A real-valued 2D point or vector
- GridCoordinate: Integer key of a grid cell
- Direction: Grid direction with an INVALID sentinel
- RotationMatrix: Rotation into a segment's local frame
- CornerMask: Filled corners of a cell
- BoundaryCell: A cell the boundary passes through
- Polygon: A closed traced contour
"""

from rastertrace.domain.cell import SADDLE_MASKS, BoundaryCell, CornerMask
from rastertrace.domain.geometry import Direction, GridCoordinate, Point, RotationMatrix
from rastertrace.domain.polygon import Polygon, WindingDirection, signed_area

__all__: list[str] = [
    # Enums
    "CornerMask",
    "Direction",
    "WindingDirection",
    # Core types
    "BoundaryCell",
    "GridCoordinate",
    "Point",
    "Polygon",
    "RotationMatrix",
    # Constants and helpers
    "SADDLE_MASKS",
    "signed_area",
]
