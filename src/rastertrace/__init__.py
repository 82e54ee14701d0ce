"""rastertrace - Trace binary rasters into polygon contours.

rastertrace converts a field of filled/unfilled pixels into closed polygons
that follow the boundary between the two. It runs a marching squares scan,
merges runs of boundary steps into long straight segments, and winds each
polygon so that filled regions have a positive signed area and holes a
negative one.

Example:
    >>> from rastertrace import FilledMask, trace_mask
    >>> mask = FilledMask.from_text('''
    ... ...
    ... .#.
    ... ...
    ... ''')
    >>> [len(p) for p in trace_mask(mask)]
    [4]
"""

from rastertrace.core import RasterTracer, trace_field, trace_mask
from rastertrace.domain import Point, Polygon, WindingDirection
from rastertrace.raster import FilledMask, RGBAImage, is_dark, is_light, is_opaque

__version__ = "0.1.0"

__all__ = [
    "FilledMask",
    "Point",
    "Polygon",
    "RGBAImage",
    "RasterTracer",
    "WindingDirection",
    "__version__",
    "is_dark",
    "is_light",
    "is_opaque",
    "trace_field",
    "trace_mask",
]
