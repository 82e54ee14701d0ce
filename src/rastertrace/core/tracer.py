"""Contour tracing with wedge-based segment simplification.

One trace walks the marching squares path from a starting cell until it comes
back around, emitting a closed polygon. Rather than one vertex per crossed
cell, consecutive cells are merged into the longest straight segment that
still passes between the (squeezed) corners of every exit edge it crosses.

Angles are never handled directly. Each segment gets a local frame whose
x-axis points from the segment start toward the first exit edge; in that
frame, every corner seen from the start becomes a unit vector and the y
component alone orders them by angle. The admissible directions for the
segment form a wedge [min_y, max_y] that narrows with each crossed cell. A
cell whose exit midpoint falls outside the wedge ends the segment at that
cell's entrance.

Orientation is decided from the leftmost cell of the contour: its top-left
corner lies outside the contour, so a clear corner there means the contour
encloses a filled region and a set one means it bounds a hole.
"""

from dataclasses import dataclass

from rastertrace.config.settings import TraceConfig
from rastertrace.core.cell_map import BoundaryCellMap
from rastertrace.core.geometry import (
    intersect_ray_with_edge,
    rotated_unit_vector,
    squeeze_corners,
    wedge_bisector,
)
from rastertrace.core.transitions import DEFAULT_TRANSITIONS, TransitionTable
from rastertrace.domain import (
    BoundaryCell,
    CornerMask,
    Direction,
    Point,
    Polygon,
    RotationMatrix,
)
from rastertrace.exceptions import MissingEntryDirectionError


@dataclass
class SegmentWedge:
    """Constraint state of the segment currently being extended.

    Attributes:
        start: Segment start point in grid space
        rotation: Rotation from grid space into the segment frame
        inverse: Rotation from the segment frame back to grid space
        min_y: Lower bound of admissible unit-vector y values
        max_y: Upper bound of admissible unit-vector y values
    """

    start: Point
    rotation: RotationMatrix
    inverse: RotationMatrix
    min_y: float
    max_y: float

    def admits(self, target: Point) -> bool:
        """Check whether the segment may end at target."""
        y = rotated_unit_vector(self.start, target, self.rotation).y
        return self.min_y <= y <= self.max_y

    def narrow(self, a: Point, b: Point) -> None:
        """Intersect the wedge with the directions between two corners."""
        ya = rotated_unit_vector(self.start, a, self.rotation).y
        yb = rotated_unit_vector(self.start, b, self.rotation).y
        self.min_y = max(self.min_y, min(ya, yb))
        self.max_y = min(self.max_y, max(ya, yb))


class ContourTracer:
    """Traces closed polygons out of a boundary cell map.

    The tracer holds no per-trace state; the cell map passed to ``trace`` is
    mutated as paths are consumed.

    Example:
        tracer = ContourTracer()
        polygon = tracer.trace(cell_map, cell_map.first())
    """

    def __init__(
        self,
        transitions: TransitionTable = DEFAULT_TRANSITIONS,
        config: TraceConfig | None = None,
    ) -> None:
        self.transitions = transitions
        self.config = config or TraceConfig()

    def trace(self, cell_map: BoundaryCellMap, start: BoundaryCell) -> Polygon:
        """Trace the polygon passing through a starting cell.

        Every path walked is removed from the map; cells left without a
        boundary are discarded.

        Args:
            cell_map: Map holding the remaining boundary cells
            start: Cell to start from; must be stored in cell_map

        Returns:
            The closed polygon, wound positive for filled regions and
            negative for holes

        Raises:
            MissingEntryDirectionError: If the start cell has no path
            MissingNeighborError: If the walk leaves the stored cells
            InvalidDirectionError: If a crossed cell has no exit for the walk
        """
        entry = self.transitions.entry_direction(start.mask)
        if entry is None:
            raise MissingEntryDirectionError(start.coordinate, start.mask)
        entry_direction, direction = entry

        polygon_start = start.edge_midpoint(entry_direction.reverse())
        points = [polygon_start]
        wedge = self._open_segment(polygon_start, start, direction)

        leftmost = start.snapshot()
        leftmost_non_saddle = None if start.mask.is_saddle() else start.snapshot()

        last_cell = start
        last_incoming = entry_direction
        last_direction = direction
        while True:
            last_direction = direction
            coordinate = last_cell.coordinate.step(direction)

            # A saddle start cell may be crossed again by its other path
            if coordinate == start.coordinate and direction is entry_direction:
                break

            cell = cell_map.require(coordinate)

            if coordinate < leftmost.coordinate:
                leftmost = cell.snapshot()
            if not cell.mask.is_saddle() and (
                leftmost_non_saddle is None or coordinate < leftmost_non_saddle.coordinate
            ):
                leftmost_non_saddle = cell.snapshot()

            direction = self.transitions.transition(cell.mask, last_direction)
            exit_a, exit_b = cell.corner_points(direction)

            if wedge.admits(exit_a.midpoint(exit_b)):
                wedge.narrow(*self._squeeze(exit_a, exit_b))
            else:
                entrance = cell.edge_midpoint(last_direction.reverse())
                points.append(entrance)
                wedge = self._open_segment(entrance, cell, direction)

            last_cell.remove_path(last_incoming, last_direction)
            cell_map.discard_if_exhausted(last_cell)
            last_cell = cell
            last_incoming = last_direction

        last_cell.remove_path(last_incoming, last_direction)
        cell_map.discard_if_exhausted(last_cell)

        # The start point is the midpoint of the last exit edge, so the wedge
        # normally admits it; a closing vertex is only needed on rounding at
        # the wedge bounds
        if not wedge.admits(polygon_start):
            closing = self._segment_end(wedge, last_cell, last_direction)
            if not self._coincides(closing, points[0]) and not self._coincides(
                closing, points[-1]
            ):
                points.append(closing)

        if leftmost_non_saddle is None:
            # Only saddles: a lone pixel, filled iff the corner it surrounds is
            is_filled = bool(leftmost.mask & CornerMask.BOTTOM_RIGHT)
        else:
            is_filled = not leftmost_non_saddle.mask & CornerMask.TOP_LEFT

        polygon = Polygon(points=points)
        if (polygon.signed_area() > 0) != is_filled:
            polygon.reverse()
        return polygon

    def _squeeze(self, a: Point, b: Point) -> tuple[Point, Point]:
        return squeeze_corners(a, b, self.config.squeeze_factor)

    def _open_segment(self, start: Point, cell: BoundaryCell, direction: Direction) -> SegmentWedge:
        """Start a segment at ``start`` constrained by the cell's exit edge."""
        a, b = self._squeeze(*cell.corner_points(direction))
        rotation = RotationMatrix.to_x_axis(start.unit_vector_to(a.midpoint(b)))
        ya = rotated_unit_vector(start, a, rotation).y
        yb = rotated_unit_vector(start, b, rotation).y
        return SegmentWedge(
            start=start,
            rotation=rotation,
            inverse=rotation.invert(),
            min_y=min(ya, yb),
            max_y=max(ya, yb),
        )

    def _segment_end(
        self, wedge: SegmentWedge, cell: BoundaryCell, direction: Direction
    ) -> Point:
        """End the current segment on the cell's exit edge, along the wedge bisector."""
        ray = wedge_bisector(wedge.min_y, wedge.max_y, wedge.inverse)
        edge_a, edge_b = cell.corner_points(direction)
        return intersect_ray_with_edge(
            wedge.start, ray, edge_a, edge_b, self.config.same_line_tolerance
        )

    def _coincides(self, a: Point, b: Point) -> bool:
        return a.distance_to(b) < self.config.same_line_tolerance
