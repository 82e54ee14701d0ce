"""Geometric operations used by the contour tracer.

This module provides the small analytic pieces of the segment simplifier:
- Corner squeezing (pulling an edge's corners toward each other)
- Rotation of unit vectors into a segment's local frame
- Ray/edge intersection for the closing vertex
- Signed area of vertex lists

All functions are pure.
"""

import math

from rastertrace.config.settings import DEFAULT_SAME_LINE_TOLERANCE, DEFAULT_SQUEEZE_FACTOR
from rastertrace.domain import Point, RotationMatrix
from rastertrace.domain.polygon import signed_area

__all__ = [
    "intersect_ray_with_edge",
    "rotated_unit_vector",
    "signed_area",
    "squeeze_corners",
    "wedge_bisector",
]


def squeeze_corners(
    a: Point, b: Point, factor: float = DEFAULT_SQUEEZE_FACTOR
) -> tuple[Point, Point]:
    """Nudge two corner points toward each other.

    Each point moves by ``factor`` of the distance to the other one, so two
    contours constrained by the same edge can never meet on it.

    Args:
        a: First corner
        b: Second corner
        factor: Fraction of the edge length each corner moves (0 leaves them)

    Returns:
        Tuple of the squeezed (a, b)

    Examples:
        >>> squeeze_corners(Point(0.0, 0.0), Point(8.0, 0.0))
        (Point(x=1.0, y=0.0), Point(x=7.0, y=0.0))
    """
    keep = 1 - factor
    squeezed_a = Point(a.x * keep + b.x * factor, a.y * keep + b.y * factor)
    squeezed_b = Point(b.x * keep + a.x * factor, b.y * keep + a.y * factor)
    return squeezed_a, squeezed_b


def rotated_unit_vector(origin: Point, target: Point, rotation: RotationMatrix) -> Point:
    """Unit vector from origin to target, expressed in a rotated frame."""
    return rotation.multiply(origin.unit_vector_to(target))


def wedge_bisector(min_y: float, max_y: float, inverse_rotation: RotationMatrix) -> Point:
    """Direction halfway between the two wedge bounds, in grid space.

    Wedge bounds are the y components of unit vectors in the segment frame,
    i.e. sines of angles measured from the baseline.

    Args:
        min_y: Lower wedge bound
        max_y: Upper wedge bound
        inverse_rotation: Rotation from the segment frame back to grid space

    Returns:
        Unit vector along the bisected angle
    """
    mid_y = max(-1.0, min(1.0, (min_y + max_y) / 2))
    angle = math.asin(mid_y)
    return inverse_rotation.multiply(Point(math.cos(angle), math.sin(angle)))


def intersect_ray_with_edge(
    origin: Point,
    direction: Point,
    edge_a: Point,
    edge_b: Point,
    tolerance: float = DEFAULT_SAME_LINE_TOLERANCE,
) -> Point:
    """Intersect a ray with the line through an axis-aligned cell edge.

    The edge orientation decides which axis is solved: a horizontal edge fixes
    y and solves for x, a vertical edge fixes x and solves for y. When the ray
    runs parallel to the edge the edge midpoint is returned instead.

    Args:
        origin: Ray origin
        direction: Ray direction (need not be normalized)
        edge_a: First corner of the edge
        edge_b: Second corner of the edge
        tolerance: Component magnitude below which the ray counts as parallel

    Returns:
        Intersection point, or the edge midpoint for a parallel ray
    """
    if abs(edge_a.y - edge_b.y) < tolerance:
        if abs(direction.y) < tolerance:
            return edge_a.midpoint(edge_b)
        y = edge_a.y
        length = (y - origin.y) / direction.y
        return Point(origin.x + direction.x * length, y)

    if abs(direction.x) < tolerance:
        return edge_a.midpoint(edge_b)
    x = edge_a.x
    length = (x - origin.x) / direction.x
    return Point(x, origin.y + direction.y * length)
