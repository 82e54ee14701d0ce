"""Pixel field input for rastertrace.

Key classes and functions:
- Bounds: Half-open pixel rectangle
- PixelField: Protocol for caller-supplied images
- RGBAImage: In-memory pixel field
- FilledMask: Boolean field consumed by the tracer
- is_opaque, is_dark, is_light: Standard fill predicates
"""

from rastertrace.raster.field import Bounds, FilledMask, PixelField, RGBAImage
from rastertrace.raster.predicates import (
    FillPredicate,
    is_dark,
    is_light,
    is_opaque,
    luma,
    make_fill_predicate,
    to_rgba,
)

__all__ = [
    "Bounds",
    "FillPredicate",
    "FilledMask",
    "PixelField",
    "RGBAImage",
    "is_dark",
    "is_light",
    "is_opaque",
    "luma",
    "make_fill_predicate",
    "to_rgba",
]
