"""Rectangular pixel fields and the boolean mask the tracer consumes.

Decoding images is left to the caller; anything that can report its bounds
and return a pixel for an (x, y) position can be traced. The tracer itself
only ever sees a FilledMask.
"""

from collections.abc import Callable, Sequence
from dataclasses import dataclass
from textwrap import dedent
from typing import Any, Protocol, runtime_checkable

from rastertrace.exceptions import FieldShapeError

Pixel = Any


@dataclass(frozen=True, slots=True)
class Bounds:
    """Half-open pixel rectangle [min_x, max_x) x [min_y, max_y)."""

    min_x: int
    min_y: int
    max_x: int
    max_y: int

    @classmethod
    def from_size(cls, width: int, height: int, origin: tuple[int, int] = (0, 0)) -> "Bounds":
        ox, oy = origin
        return cls(ox, oy, ox + width, oy + height)

    @property
    def width(self) -> int:
        return max(0, self.max_x - self.min_x)

    @property
    def height(self) -> int:
        return max(0, self.max_y - self.min_y)

    def is_empty(self) -> bool:
        return self.width == 0 or self.height == 0

    def contains(self, x: int, y: int) -> bool:
        return self.min_x <= x < self.max_x and self.min_y <= y < self.max_y


@runtime_checkable
class PixelField(Protocol):
    """Anything with pixel bounds and per-pixel access."""

    @property
    def bounds(self) -> Bounds: ...

    def pixel(self, x: int, y: int) -> Pixel: ...


def _check_rows(rows: Sequence[Sequence[Any]]) -> int:
    """Validate row data and return the common row width."""
    if len(rows) == 0:
        return 0
    width = len(rows[0])
    for index, row in enumerate(rows):
        if len(row) != width:
            raise FieldShapeError(
                f"row {index} has {len(row)} pixels, expected {width}"
            )
    return width


class RGBAImage:
    """An in-memory pixel field stored as row-major rows.

    Pixels may be RGBA, RGB or gray values; the fill predicates normalize
    them. Positions outside the bounds read as fully transparent.

    Example:
        image = RGBAImage([[(0, 0, 0, 255), (255, 255, 255, 255)]])
        image.pixel(0, 0)  # (0, 0, 0, 255)
    """

    TRANSPARENT: tuple[int, int, int, int] = (0, 0, 0, 0)

    def __init__(self, rows: Sequence[Sequence[Pixel]], origin: tuple[int, int] = (0, 0)) -> None:
        width = _check_rows(rows)
        self._rows = [list(row) for row in rows]
        self._bounds = Bounds.from_size(width, len(rows), origin)

    @property
    def bounds(self) -> Bounds:
        return self._bounds

    def pixel(self, x: int, y: int) -> Pixel:
        if not self._bounds.contains(x, y):
            return self.TRANSPARENT
        return self._rows[y - self._bounds.min_y][x - self._bounds.min_x]


class FilledMask:
    """Per-pixel filled flags over a rectangular field.

    Positions outside the bounds are never filled.
    """

    def __init__(self, bounds: Bounds, filled: Sequence[Sequence[bool]]) -> None:
        width = _check_rows(filled)
        if len(filled) != bounds.height or (len(filled) > 0 and width != bounds.width):
            raise FieldShapeError(
                f"mask data does not match bounds {bounds.width}x{bounds.height}"
            )
        self._bounds = bounds
        self._filled = tuple(tuple(bool(v) for v in row) for row in filled)

    @classmethod
    def from_rows(
        cls, rows: Sequence[Sequence[bool]], origin: tuple[int, int] = (0, 0)
    ) -> "FilledMask":
        """Build a mask from row-major booleans."""
        width = _check_rows(rows)
        return cls(Bounds.from_size(width, len(rows), origin), rows)

    @classmethod
    def from_text(cls, text: str, filled_chars: str = "#X") -> "FilledMask":
        """Build a mask from ASCII art, one text line per pixel row.

        Common indentation and blank leading/trailing lines are ignored; any
        character in ``filled_chars`` marks a filled pixel.
        """
        lines = dedent(text).strip("\n").splitlines()
        return cls.from_rows([[ch in filled_chars for ch in line] for line in lines])

    @classmethod
    def from_field(cls, field: PixelField, is_filled: Callable[[Pixel], bool]) -> "FilledMask":
        """Classify every pixel of a field with a fill predicate."""
        bounds = field.bounds
        rows = [
            [is_filled(field.pixel(x, y)) for x in range(bounds.min_x, bounds.max_x)]
            for y in range(bounds.min_y, bounds.max_y)
        ]
        return cls(bounds, rows)

    @property
    def bounds(self) -> Bounds:
        return self._bounds

    def is_filled(self, x: int, y: int) -> bool:
        if not self._bounds.contains(x, y):
            return False
        return self._filled[y - self._bounds.min_y][x - self._bounds.min_x]

    def filled_count(self) -> int:
        return sum(sum(row) for row in self._filled)
