"""Sparse map of boundary cells built by the marching squares scan.

Every 2x2 window of pixels becomes a cell whose corner mask packs the four
filled flags. Only cells with a boundary through them are stored, so the map
is proportional to the contour length rather than the image area.
"""

from collections.abc import Iterator

from rastertrace.domain import BoundaryCell, CornerMask, GridCoordinate
from rastertrace.exceptions import MissingNeighborError
from rastertrace.raster.field import FilledMask

_WINDOW_OFFSETS = ((0, 0), (1, 0), (0, 1), (1, 1))


def corner_mask_at(mask: FilledMask, x: int, y: int) -> CornerMask:
    """Pack the filled flags of the 2x2 window with top-left pixel (x, y)."""
    corners = CornerMask.NONE
    for dx, dy in _WINDOW_OFFSETS:
        if mask.is_filled(x + dx, y + dy):
            corners |= CornerMask.for_offset(dx, dy)
    return corners


class BoundaryCellMap:
    """Boundary cells keyed by grid coordinate.

    The map is the only shared mutable state of a trace: the tracer clears
    paths from cells and discards the ones left without a boundary. Iteration
    follows insertion order, which is scan order (row by row, left to right).

    Invariant: no stored cell has an all-clear or all-set mask.
    """

    def __init__(self, cells: dict[GridCoordinate, BoundaryCell] | None = None) -> None:
        self._cells: dict[GridCoordinate, BoundaryCell] = {}
        for cell in (cells or {}).values():
            self.add(cell)

    @classmethod
    def from_mask(cls, mask: FilledMask, pad_border: bool = True) -> "BoundaryCellMap":
        """Scan a filled mask into boundary cells.

        Args:
            mask: Per-pixel filled flags
            pad_border: Also scan the windows that hang one pixel over the
                field edges, treating outside pixels as unfilled, so that
                shapes touching the border produce closed contours. When
                False only windows lying fully inside the field are scanned.

        Returns:
            A new map holding every boundary cell of the mask
        """
        bounds = mask.bounds
        cell_map = cls()
        if bounds.is_empty():
            return cell_map

        if pad_border:
            xs = range(bounds.min_x - 1, bounds.max_x)
            ys = range(bounds.min_y - 1, bounds.max_y)
        else:
            xs = range(bounds.min_x, bounds.max_x - 1)
            ys = range(bounds.min_y, bounds.max_y - 1)

        for y in ys:
            for x in xs:
                corners = corner_mask_at(mask, x, y)
                if not corners.has_boundary():
                    continue
                cell_map.add(BoundaryCell(GridCoordinate(x, y), corners))
        return cell_map

    def __len__(self) -> int:
        return len(self._cells)

    def __contains__(self, coordinate: object) -> bool:
        return coordinate in self._cells

    def __iter__(self) -> Iterator[BoundaryCell]:
        return iter(self._cells.values())

    def is_empty(self) -> bool:
        return not self._cells

    def add(self, cell: BoundaryCell) -> None:
        """Store a cell. Cells without a boundary are ignored."""
        if cell.mask.has_boundary():
            self._cells[cell.coordinate] = cell

    def get(self, coordinate: GridCoordinate) -> BoundaryCell | None:
        return self._cells.get(coordinate)

    def require(self, coordinate: GridCoordinate) -> BoundaryCell:
        """Return the cell at a coordinate the walk expects to find.

        Raises:
            MissingNeighborError: If no cell is stored there
        """
        cell = self._cells.get(coordinate)
        if cell is None:
            raise MissingNeighborError(coordinate)
        return cell

    def first(self) -> BoundaryCell | None:
        """Return the earliest remaining cell in scan order, if any."""
        return next(iter(self._cells.values()), None)

    def remove(self, coordinate: GridCoordinate) -> None:
        self._cells.pop(coordinate, None)

    def discard_if_exhausted(self, cell: BoundaryCell) -> bool:
        """Remove a cell once no boundary path remains through it.

        Returns:
            True if the cell was removed
        """
        if cell.is_exhausted():
            self.remove(cell.coordinate)
            return True
        return False

    def inspect(self) -> str:
        """Render every remaining cell for debugging."""
        return "".join(cell.inspect() for cell in self._cells.values())
