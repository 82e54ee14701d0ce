"""Tests for domain models to verify they work correctly."""

import math

import pytest

from rastertrace.domain import (
    SADDLE_MASKS,
    BoundaryCell,
    CornerMask,
    Direction,
    GridCoordinate,
    Point,
    Polygon,
    RotationMatrix,
    WindingDirection,
)
from rastertrace.exceptions import InvalidDirectionError, InvariantViolationError


class TestPoint:
    """Tests for Point class."""

    def test_point_creation(self) -> None:
        """Test basic point creation."""
        p = Point(1.5, 2.5)
        assert p.x == 1.5
        assert p.y == 2.5

    def test_from_ints(self) -> None:
        """Integer coordinates are stored as floats."""
        p = Point.from_ints(3, 4)
        assert p == Point(3.0, 4.0)
        assert isinstance(p.x, float)

    def test_point_to_tuple(self) -> None:
        """Test point to tuple conversion."""
        assert Point(1.0, 2.0).to_tuple() == (1.0, 2.0)

    def test_point_serialization(self) -> None:
        """Test point serialization and deserialization."""
        p1 = Point(0.5, 1.25)
        assert Point.from_dict(p1.to_dict()) == p1

    def test_point_immutable(self) -> None:
        """Test that point is immutable."""
        p = Point(1.0, 2.0)
        with pytest.raises(AttributeError):
            p.x = 3.0  # type: ignore

    def test_midpoint(self) -> None:
        assert Point(0, 0).midpoint(Point(1, 2)) == Point(0.5, 1.0)

    def test_unit_vector(self) -> None:
        """Unit vector has length one and points at the target."""
        v = Point(1.0, 1.0).unit_vector_to(Point(4.0, 5.0))
        assert v.x == pytest.approx(0.6)
        assert v.y == pytest.approx(0.8)

    def test_unit_vector_of_coincident_points(self) -> None:
        """Coincident points yield the zero vector instead of dividing by zero."""
        assert Point(2.0, 2.0).unit_vector_to(Point(2.0, 2.0)) == Point(0.0, 0.0)


class TestDirection:
    """Tests for Direction enum."""

    def test_reverse(self) -> None:
        assert Direction.UP.reverse() is Direction.DOWN
        assert Direction.DOWN.reverse() is Direction.UP
        assert Direction.LEFT.reverse() is Direction.RIGHT
        assert Direction.RIGHT.reverse() is Direction.LEFT

    def test_reverse_invalid(self) -> None:
        """INVALID has no opposite."""
        assert Direction.INVALID.reverse() is Direction.INVALID

    def test_is_vertical(self) -> None:
        assert Direction.UP.is_vertical()
        assert Direction.DOWN.is_vertical()
        assert not Direction.LEFT.is_vertical()
        assert not Direction.RIGHT.is_vertical()

    def test_cardinal_order(self) -> None:
        """Probing order is up, right, down, left."""
        assert Direction.cardinal() == (
            Direction.UP,
            Direction.RIGHT,
            Direction.DOWN,
            Direction.LEFT,
        )

    def test_str(self) -> None:
        assert str(Direction.UP) == "Up"
        assert str(Direction.INVALID) == "INVALID"


class TestGridCoordinate:
    """Tests for GridCoordinate class."""

    def test_step(self) -> None:
        origin = GridCoordinate(5, 5)
        assert origin.step(Direction.UP) == GridCoordinate(5, 4)
        assert origin.step(Direction.RIGHT) == GridCoordinate(6, 5)
        assert origin.step(Direction.DOWN) == GridCoordinate(5, 6)
        assert origin.step(Direction.LEFT) == GridCoordinate(4, 5)

    def test_step_invalid(self) -> None:
        with pytest.raises(InvalidDirectionError):
            GridCoordinate(0, 0).step(Direction.INVALID)

    def test_direction_to(self) -> None:
        origin = GridCoordinate(2, 2)
        for direction in Direction.cardinal():
            assert origin.direction_to(origin.step(direction)) is direction

    def test_direction_to_non_neighbor(self) -> None:
        """Diagonal or distant cells are not neighbors."""
        with pytest.raises(InvariantViolationError):
            GridCoordinate(0, 0).direction_to(GridCoordinate(1, 1))

    def test_ordering(self) -> None:
        """Coordinates order by x first, then y."""
        assert GridCoordinate(0, 9) < GridCoordinate(1, 0)
        assert GridCoordinate(1, 0) < GridCoordinate(1, 1)

    def test_hashable(self) -> None:
        assert {GridCoordinate(1, 2): "a"}[GridCoordinate(1, 2)] == "a"


class TestRotationMatrix:
    """Tests for RotationMatrix class."""

    @pytest.mark.parametrize(
        "vector",
        [
            Point(0.3, 0.5),
            Point(-0.3, 0.8),
            Point(7, -5),
            Point(0, -5),
            Point(0, 2),
            Point(3, 0),
            Point(-10, 0),
        ],
    )
    def test_rotation_round_trip(self, vector: Point) -> None:
        """Rotation lands on the positive x-axis and the inverse restores the vector."""
        rotation = RotationMatrix.to_x_axis(vector)
        rotated = rotation.multiply(vector)
        assert rotated.y == pytest.approx(0.0, abs=1e-5)
        assert rotated.x > 0

        restored = rotation.invert().multiply(rotated)
        assert restored.x == pytest.approx(vector.x, abs=1e-5)
        assert restored.y == pytest.approx(vector.y, abs=1e-5)

    def test_rotation_preserves_length(self) -> None:
        rotated = RotationMatrix.to_x_axis(Point(3, 4)).multiply(Point(3, 4))
        assert rotated.x == pytest.approx(5.0)

    def test_zero_baseline_is_identity(self) -> None:
        """A zero baseline has no angle; nothing is rotated."""
        rotation = RotationMatrix.to_x_axis(Point(0.0, 0.0))
        assert rotation == RotationMatrix.identity()
        assert rotation.multiply(Point(1.0, 2.0)) == Point(1.0, 2.0)

    def test_identity(self) -> None:
        assert RotationMatrix.identity().multiply(Point(1.0, -2.0)) == Point(1.0, -2.0)


class TestCornerMask:
    """Tests for CornerMask flags."""

    def test_offsets(self) -> None:
        assert CornerMask.for_offset(0, 0) == CornerMask.TOP_LEFT
        assert CornerMask.for_offset(1, 0) == CornerMask.TOP_RIGHT
        assert CornerMask.for_offset(0, 1) == CornerMask.BOTTOM_LEFT
        assert CornerMask.for_offset(1, 1) == CornerMask.BOTTOM_RIGHT

    def test_has_boundary(self) -> None:
        assert not CornerMask.NONE.has_boundary()
        assert not CornerMask.ALL.has_boundary()
        for value in range(1, 15):
            assert CornerMask(value).has_boundary()

    def test_saddles(self) -> None:
        saddles = [CornerMask(v) for v in range(16) if CornerMask(v).is_saddle()]
        assert sorted(saddles) == sorted(SADDLE_MASKS)
        assert (CornerMask.TOP_LEFT | CornerMask.BOTTOM_RIGHT).is_saddle()
        assert (CornerMask.TOP_RIGHT | CornerMask.BOTTOM_LEFT).is_saddle()
        assert not (CornerMask.TOP_LEFT | CornerMask.TOP_RIGHT).is_saddle()


class TestBoundaryCell:
    """Tests for BoundaryCell class."""

    def test_corner_points(self) -> None:
        """Edges are bounded by the expected integer corners."""
        cell = BoundaryCell(GridCoordinate(2, 3), CornerMask.TOP_LEFT)
        assert cell.corner_points(Direction.UP) == (Point(2, 3), Point(3, 3))
        assert cell.corner_points(Direction.RIGHT) == (Point(3, 3), Point(3, 4))
        assert cell.corner_points(Direction.DOWN) == (Point(3, 4), Point(2, 4))
        assert cell.corner_points(Direction.LEFT) == (Point(2, 4), Point(2, 3))

    def test_corner_points_invalid(self) -> None:
        cell = BoundaryCell(GridCoordinate(0, 0), CornerMask.TOP_LEFT)
        with pytest.raises(InvalidDirectionError):
            cell.corner_points(Direction.INVALID)

    def test_edge_midpoint(self) -> None:
        cell = BoundaryCell(GridCoordinate(0, 0), CornerMask.TOP_LEFT)
        assert cell.edge_midpoint(Direction.RIGHT) == Point(1.0, 0.5)

    def test_remove_path_non_saddle(self) -> None:
        """A single-path cell is fully consumed."""
        cell = BoundaryCell(GridCoordinate(0, 0), CornerMask.TOP_LEFT | CornerMask.TOP_RIGHT)
        cell.remove_path(Direction.LEFT, Direction.LEFT)
        assert cell.mask == CornerMask.NONE
        assert cell.is_exhausted()

    def test_remove_path_saddle_bottom(self) -> None:
        """Walking the path through the bottom edge leaves the top corners."""
        cell = BoundaryCell(
            GridCoordinate(0, 0), CornerMask.TOP_LEFT | CornerMask.BOTTOM_RIGHT
        )
        cell.remove_path(Direction.LEFT, Direction.DOWN)
        assert cell.mask == CornerMask.TOP_LEFT
        assert not cell.is_exhausted()

    def test_remove_path_saddle_bottom_entered_upward(self) -> None:
        """Entering through the bottom edge also identifies the bottom path."""
        cell = BoundaryCell(
            GridCoordinate(0, 0), CornerMask.TOP_RIGHT | CornerMask.BOTTOM_LEFT
        )
        cell.remove_path(Direction.UP, Direction.LEFT)
        assert cell.mask == CornerMask.TOP_RIGHT

    def test_remove_path_saddle_top(self) -> None:
        """Walking the path through the top edge leaves the bottom corners."""
        cell = BoundaryCell(
            GridCoordinate(0, 0), CornerMask.TOP_LEFT | CornerMask.BOTTOM_RIGHT
        )
        cell.remove_path(Direction.RIGHT, Direction.UP)
        assert cell.mask == CornerMask.BOTTOM_RIGHT

    def test_saddle_exhausted_after_both_paths(self) -> None:
        cell = BoundaryCell(
            GridCoordinate(0, 0), CornerMask.TOP_RIGHT | CornerMask.BOTTOM_LEFT
        )
        cell.remove_path(Direction.LEFT, Direction.UP)
        assert not cell.is_exhausted()
        cell.remove_path(Direction.RIGHT, Direction.DOWN)
        assert cell.is_exhausted()

    def test_snapshot_is_detached(self) -> None:
        cell = BoundaryCell(GridCoordinate(0, 0), CornerMask.BOTTOM_RIGHT)
        copy = cell.snapshot()
        cell.remove_path(Direction.UP, Direction.RIGHT)
        assert copy.mask == CornerMask.BOTTOM_RIGHT
        assert cell.mask == CornerMask.NONE

    def test_inspect(self) -> None:
        cell = BoundaryCell(
            GridCoordinate(4, 7), CornerMask.TOP_LEFT | CornerMask.BOTTOM_RIGHT
        )
        text = cell.inspect()
        assert "Point: (4, 7)" in text
        assert "|X  |" in text
        assert "|  X|" in text


class TestPolygon:
    """Tests for Polygon class."""

    def test_signed_area_positive(self) -> None:
        polygon = Polygon(points=[Point(0, 0), Point(2, 0), Point(2, 2), Point(0, 2)])
        assert polygon.signed_area() == 4.0
        assert polygon.winding is WindingDirection.COUNTER_CLOCKWISE
        assert polygon.is_filled

    def test_signed_area_negative(self) -> None:
        polygon = Polygon(points=[Point(0, 0), Point(0, 2), Point(2, 2), Point(2, 0)])
        assert polygon.signed_area() == -4.0
        assert polygon.winding is WindingDirection.CLOCKWISE
        assert not polygon.is_filled

    def test_degenerate_area(self) -> None:
        assert Polygon(points=[Point(0, 0), Point(1, 1)]).signed_area() == 0.0

    def test_reverse_flips_winding(self) -> None:
        polygon = Polygon(points=[Point(0, 0), Point(1, 0), Point(0, 1)])
        area = polygon.signed_area()
        polygon.reverse()
        assert polygon.signed_area() == pytest.approx(-area)
        assert polygon.points[0] == Point(0, 1)

    def test_reversed_copy(self) -> None:
        polygon = Polygon(points=[Point(0, 0), Point(1, 0), Point(0, 1)])
        flipped = polygon.reversed()
        assert flipped.points == list(reversed(polygon.points))
        assert polygon.points[0] == Point(0, 0)

    def test_bounding_box(self) -> None:
        polygon = Polygon(points=[Point(1, 5), Point(3, 2), Point(0, 4)])
        assert polygon.bounding_box() == (0, 2, 3, 5)
        assert Polygon(points=[]).bounding_box() == (0.0, 0.0, 0.0, 0.0)

    def test_edges_close_the_loop(self) -> None:
        points = [Point(0, 0), Point(1, 0), Point(0, 1)]
        edges = list(Polygon(points=points).edges())
        assert len(edges) == 3
        assert edges[-1] == (Point(0, 1), Point(0, 0))

    def test_serialization(self) -> None:
        polygon = Polygon(points=[Point(0, 0), Point(1, 0), Point(0, 1)])
        data = polygon.to_dict()
        assert data["filled"] is True
        restored = Polygon.from_dict(data)
        assert restored.points == polygon.points

    def test_len_and_iter(self) -> None:
        polygon = Polygon(points=[Point(0, 0), Point(1, 0), Point(0, 1)])
        assert len(polygon) == 3
        assert [p.x for p in polygon] == [0, 1, 0]
        assert polygon.to_tuples() == [(0, 0), (1, 0), (0, 1)]

    def test_area_of_unit_diamond(self) -> None:
        diamond = Polygon(
            points=[Point(0.5, 1), Point(1, 0.5), Point(1.5, 1), Point(1, 1.5)]
        )
        assert diamond.signed_area() == pytest.approx(0.5)
        assert math.isclose(abs(diamond.reversed().signed_area()), 0.5)
