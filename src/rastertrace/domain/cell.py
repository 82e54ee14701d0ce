"""Boundary cells for the marching squares scan.

A cell is the unit square between four neighbouring pixel centres. Its corner
mask records which of those four pixels are filled. Cells whose corners are all
filled or all clear have no boundary through them and are never stored.
"""

from dataclasses import dataclass, replace
from enum import IntFlag
from textwrap import dedent

from rastertrace.domain.geometry import Direction, GridCoordinate, Point
from rastertrace.exceptions import InvalidDirectionError


class CornerMask(IntFlag):
    """Which corners of a cell lie in the filled region."""

    NONE = 0
    TOP_LEFT = 1
    TOP_RIGHT = 2
    BOTTOM_LEFT = 4
    BOTTOM_RIGHT = 8
    ALL = 15

    @classmethod
    def for_offset(cls, dx: int, dy: int) -> "CornerMask":
        """Return the corner bit for a pixel offset within a 2x2 window.

        (0, 0) is the top-left pixel and (1, 1) the bottom-right one.
        """
        return cls(1 << (dy * 2 + dx))

    def has_boundary(self) -> bool:
        """True unless every corner is filled or every corner is clear."""
        return self not in (CornerMask.NONE, CornerMask.ALL)

    def is_saddle(self) -> bool:
        """True for the two diagonal configurations."""
        return self in SADDLE_MASKS


TOP_CORNERS = CornerMask.TOP_LEFT | CornerMask.TOP_RIGHT
BOTTOM_CORNERS = CornerMask.BOTTOM_LEFT | CornerMask.BOTTOM_RIGHT

SADDLE_MASKS: tuple[CornerMask, CornerMask] = (
    CornerMask.TOP_LEFT | CornerMask.BOTTOM_RIGHT,
    CornerMask.TOP_RIGHT | CornerMask.BOTTOM_LEFT,
)


@dataclass(slots=True)
class BoundaryCell:
    """A grid cell the filled/unfilled boundary passes through.

    The mask is mutable: as the tracer consumes paths through the cell it
    clears corners. A saddle cell carries two independent paths and loses
    one pair of corners per path, so it outlives the first trace through it.

    Attributes:
        coordinate: Grid coordinate of the cell's top-left corner
        mask: Filled corners that still have an unconsumed path
    """

    coordinate: GridCoordinate
    mask: CornerMask

    def corner_points(self, direction: Direction) -> tuple[Point, Point]:
        """Return the two corners bounding the cell edge on the given side.

        Corners are listed clockwise around the cell (in image space).

        Raises:
            InvalidDirectionError: If direction is INVALID
        """
        x, y = self.coordinate.x, self.coordinate.y
        if direction is Direction.UP:
            return Point.from_ints(x, y), Point.from_ints(x + 1, y)
        if direction is Direction.RIGHT:
            return Point.from_ints(x + 1, y), Point.from_ints(x + 1, y + 1)
        if direction is Direction.DOWN:
            return Point.from_ints(x + 1, y + 1), Point.from_ints(x, y + 1)
        if direction is Direction.LEFT:
            return Point.from_ints(x, y + 1), Point.from_ints(x, y)
        raise InvalidDirectionError(direction, f"corner points of cell {self.coordinate}")

    def edge_midpoint(self, direction: Direction) -> Point:
        """Return the midpoint of the cell edge on the given side."""
        a, b = self.corner_points(direction)
        return a.midpoint(b)

    def remove_path(self, incoming: Direction, outgoing: Direction) -> None:
        """Clear the corners of the path that was just walked through this cell.

        A non-saddle cell has a single path, so all corners are cleared. A
        saddle cell keeps the corners of its other path: the path touching the
        bottom edge owns the bottom corners, the other one the top corners.

        Args:
            incoming: Direction of travel when entering the cell
            outgoing: Direction of travel when leaving the cell
        """
        if not self.mask.is_saddle():
            self.mask = CornerMask.NONE
            return

        if outgoing is Direction.DOWN or incoming is Direction.UP:
            self.mask &= TOP_CORNERS
        else:
            self.mask &= BOTTOM_CORNERS

    def is_exhausted(self) -> bool:
        """True once no boundary path remains through the cell."""
        return not self.mask.has_boundary()

    def snapshot(self) -> "BoundaryCell":
        """Return a detached copy that later path removal will not touch."""
        return replace(self)

    def inspect(self) -> str:
        """Render the cell as a small multi-line diagram for debugging."""
        marks = [
            "X" if self.mask & corner else " "
            for corner in (
                CornerMask.TOP_LEFT,
                CornerMask.TOP_RIGHT,
                CornerMask.BOTTOM_LEFT,
                CornerMask.BOTTOM_RIGHT,
            )
        ]
        return dedent(
            f"""
            Cell:
                Point: ({self.coordinate.x}, {self.coordinate.y})
                Corners:
                    |{marks[0]} {marks[1]}|
                    |{marks[2]} {marks[3]}|
            """
        )
