"""Traced polygon contours and their winding.

Polygons are produced in pixel space where y grows downward. The library's
convention is that a filled region's outer boundary has a positive shoelace
area and a hole has a negative one; in the usual y-up frame these read as
counter-clockwise and clockwise respectively.
"""

from collections.abc import Iterator, Sequence
from dataclasses import dataclass
from enum import Enum, auto
from typing import Any

from rastertrace.domain.geometry import Point


class WindingDirection(Enum):
    """Polygon winding, named for the y-up frame.

    - COUNTER_CLOCKWISE: positive signed area, outer boundary of a filled region
    - CLOCKWISE: negative signed area, boundary of a hole
    """

    CLOCKWISE = auto()
    COUNTER_CLOCKWISE = auto()


def signed_area(points: Sequence[Point]) -> float:
    """Calculate signed area of a polygon using the shoelace formula.

    The vertex list is treated as cyclic; the first point is not repeated.

    Args:
        points: Polygon vertices

    Returns:
        Signed area. Returns 0.0 for fewer than three points.

    Examples:
        >>> signed_area([Point(0, 0), Point(1, 0), Point(1, 1), Point(0, 1)])
        1.0
    """
    n = len(points)
    if n < 3:
        return 0.0

    area = 0.0
    for i in range(n):
        j = (i + 1) % n
        area += points[i].x * points[j].y
        area -= points[j].x * points[i].y

    return area / 2.0


@dataclass
class Polygon:
    """A closed contour traced from the raster.

    Attributes:
        points: Vertices in order; the closing edge back to the first point
            is implicit
    """

    points: list[Point]

    def __len__(self) -> int:
        return len(self.points)

    def __iter__(self) -> Iterator[Point]:
        return iter(self.points)

    def signed_area(self) -> float:
        """Signed area; positive for filled regions, negative for holes."""
        return signed_area(self.points)

    @property
    def winding(self) -> WindingDirection:
        if self.signed_area() > 0:
            return WindingDirection.COUNTER_CLOCKWISE
        return WindingDirection.CLOCKWISE

    @property
    def is_filled(self) -> bool:
        """True for the outer boundary of a filled region, False for a hole."""
        return self.winding is WindingDirection.COUNTER_CLOCKWISE

    def reverse(self) -> None:
        """Reverse the vertex order in place, flipping the winding."""
        self.points.reverse()

    def reversed(self) -> "Polygon":
        return Polygon(points=list(reversed(self.points)))

    def bounding_box(self) -> tuple[float, float, float, float]:
        """Calculate bounding box of the polygon.

        Returns:
            Tuple of (min_x, min_y, max_x, max_y)
        """
        if not self.points:
            return (0.0, 0.0, 0.0, 0.0)

        xs = [p.x for p in self.points]
        ys = [p.y for p in self.points]
        return (min(xs), min(ys), max(xs), max(ys))

    def edges(self) -> Iterator[tuple[Point, Point]]:
        """Yield each edge, including the closing edge back to the start."""
        n = len(self.points)
        for i in range(n):
            yield self.points[i], self.points[(i + 1) % n]

    def to_tuples(self) -> list[tuple[float, float]]:
        return [p.to_tuple() for p in self.points]

    def to_dict(self) -> dict[str, Any]:
        """Serialize to dictionary.

        Returns:
            Dictionary with the vertex list and the fill classification
        """
        return {
            "points": [p.to_dict() for p in self.points],
            "filled": self.is_filled,
        }

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "Polygon":
        """Deserialize from dictionary.

        The winding stored in the vertex order is authoritative; the
        ``filled`` field is informational.
        """
        return cls(points=[Point.from_dict(p) for p in data["points"]])
