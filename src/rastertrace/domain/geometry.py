"""Geometric primitives for boundary tracing.

This module defines the small value types the tracer is built from:
- Point: A real-valued 2D point (polygon vertices, cell corners, vectors)
- GridCoordinate: An integer cell coordinate, keyed by the cell's top-left corner
- Direction: One of the four grid directions plus an INVALID sentinel
- RotationMatrix: A 2x2 rotation used to move vectors into a segment's frame

Coordinates follow image conventions: x grows to the right and y grows
downward, so UP means decreasing y.
"""

import math
from dataclasses import dataclass
from enum import IntEnum
from typing import Any

from rastertrace.exceptions import InvalidDirectionError, InvariantViolationError


class Direction(IntEnum):
    """Direction of travel between edge-adjacent grid cells.

    The enumeration order (UP, RIGHT, DOWN, LEFT) is also the order in which
    the tracer probes a starting cell for an entry direction.
    """

    UP = 0
    RIGHT = 1
    DOWN = 2
    LEFT = 3
    INVALID = 4

    @classmethod
    def cardinal(cls) -> tuple["Direction", ...]:
        """Return the four valid directions in probing order."""
        return (cls.UP, cls.RIGHT, cls.DOWN, cls.LEFT)

    def reverse(self) -> "Direction":
        """Return the opposite direction. INVALID stays INVALID."""
        if self is Direction.INVALID:
            return Direction.INVALID
        return Direction((self + 2) % 4)

    def is_vertical(self) -> bool:
        """True for UP and DOWN."""
        return self is Direction.UP or self is Direction.DOWN

    def is_valid(self) -> bool:
        return self is not Direction.INVALID

    def __str__(self) -> str:
        return self.name.capitalize() if self.is_valid() else self.name


@dataclass(frozen=True, slots=True)
class Point:
    """A point (or vector) in continuous grid space.

    Attributes:
        x: X coordinate in pixel units
        y: Y coordinate in pixel units
    """

    x: float
    y: float

    @classmethod
    def from_ints(cls, x: int, y: int) -> "Point":
        return cls(float(x), float(y))

    def to_tuple(self) -> tuple[float, float]:
        """Convert to simple (x, y) tuple."""
        return (self.x, self.y)

    def midpoint(self, other: "Point") -> "Point":
        """Return the point halfway between this point and other."""
        return Point((self.x + other.x) / 2, (self.y + other.y) / 2)

    def unit_vector_to(self, other: "Point") -> "Point":
        """Return the unit vector pointing from this point toward other.

        Coincident points have no direction; the zero vector is returned
        instead of dividing by zero.
        """
        dx = other.x - self.x
        dy = other.y - self.y
        length = math.hypot(dx, dy)
        if length == 0.0:
            return Point(0.0, 0.0)
        return Point(dx / length, dy / length)

    def distance_to(self, other: "Point") -> float:
        return math.hypot(other.x - self.x, other.y - self.y)

    def to_dict(self) -> dict[str, Any]:
        """Serialize to dictionary."""
        return {"x": self.x, "y": self.y}

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "Point":
        """Deserialize from dictionary."""
        return cls(x=data["x"], y=data["y"])


@dataclass(frozen=True, slots=True, order=True)
class GridCoordinate:
    """Integer coordinate of a grid cell, identified by its top-left corner.

    Ordering is by x, then y, which is also the tie-break the tracer uses to
    find the leftmost cell of a contour.
    """

    x: int
    y: int

    def step(self, direction: Direction) -> "GridCoordinate":
        """Return the edge-adjacent coordinate in the given direction.

        Raises:
            InvalidDirectionError: If direction is INVALID
        """
        if direction is Direction.UP:
            return GridCoordinate(self.x, self.y - 1)
        if direction is Direction.RIGHT:
            return GridCoordinate(self.x + 1, self.y)
        if direction is Direction.DOWN:
            return GridCoordinate(self.x, self.y + 1)
        if direction is Direction.LEFT:
            return GridCoordinate(self.x - 1, self.y)
        raise InvalidDirectionError(direction, f"stepping from {self}")

    def direction_to(self, neighbor: "GridCoordinate") -> Direction:
        """Return the direction leading from this coordinate to a neighbor.

        Raises:
            InvariantViolationError: If neighbor is not edge-adjacent
        """
        dx = neighbor.x - self.x
        dy = neighbor.y - self.y
        if abs(dx) + abs(dy) != 1:
            raise InvariantViolationError(f"{neighbor} is not a neighbor of {self}")
        if dx == 0:
            return Direction.UP if dy < 0 else Direction.DOWN
        return Direction.LEFT if dx < 0 else Direction.RIGHT

    def __str__(self) -> str:
        return f"({self.x}, {self.y})"


@dataclass(frozen=True, slots=True)
class RotationMatrix:
    """A 2x2 rotation matrix [[a, b], [c, d]]."""

    a: float
    b: float
    c: float
    d: float

    @classmethod
    def identity(cls) -> "RotationMatrix":
        return cls(1.0, 0.0, 0.0, 1.0)

    @classmethod
    def to_x_axis(cls, baseline: Point) -> "RotationMatrix":
        """Build the rotation that maps baseline onto the positive x-axis.

        A zero baseline has no angle and yields the identity rotation.

        Args:
            baseline: Vector to align with the x-axis

        Returns:
            Rotation such that ``rotation.multiply(baseline)`` is ``(|baseline|, 0)``
        """
        if baseline.x == 0.0 and baseline.y == 0.0:
            return cls.identity()
        angle = math.atan2(baseline.y, baseline.x)
        cos_a = math.cos(angle)
        sin_a = math.sin(angle)
        return cls(cos_a, sin_a, -sin_a, cos_a)

    def multiply(self, point: Point) -> Point:
        """Apply the rotation to a vector."""
        return Point(
            self.a * point.x + self.b * point.y,
            self.c * point.x + self.d * point.y,
        )

    def invert(self) -> "RotationMatrix":
        """Return the inverse rotation.

        Rotations have unit determinant, so the adjugate is the inverse.
        """
        return RotationMatrix(self.d, -self.b, -self.c, self.a)
