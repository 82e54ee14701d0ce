"""Exception hierarchy for rastertrace."""

from typing import Any


class RasterTraceError(Exception):
    """Base exception for all rastertrace errors."""

    pass


class FieldError(RasterTraceError):
    """Errors related to the input pixel field."""

    pass


class FieldShapeError(FieldError):
    """Pixel rows are empty or not rectangular."""

    def __init__(self, reason: str) -> None:
        self.reason = reason
        super().__init__(f"Invalid pixel field: {reason}")


class PixelFormatError(FieldError):
    """A pixel value is not an 8-bit gray, RGB or RGBA value."""

    def __init__(self, pixel: Any) -> None:
        self.pixel = pixel
        super().__init__(f"Unsupported pixel value: {pixel!r}")


class TraceError(RasterTraceError):
    """Errors raised while tracing contours."""

    pass


class InvariantViolationError(TraceError):
    """The boundary cell map or transition table is inconsistent.

    These errors indicate a program defect rather than bad input. Any polygon
    produced after one of them would be geometrically wrong, so the trace is
    aborted.
    """

    pass


class MissingEntryDirectionError(InvariantViolationError):
    """A stored boundary cell has no valid path through it."""

    def __init__(self, coordinate: Any, mask: Any) -> None:
        self.coordinate = coordinate
        self.mask = mask
        super().__init__(
            f"No valid entry direction for cell at {coordinate} with corners {mask!r}"
        )


class MissingNeighborError(InvariantViolationError):
    """The walk stepped onto a coordinate that is not in the boundary cell map."""

    def __init__(self, coordinate: Any) -> None:
        self.coordinate = coordinate
        super().__init__(f"Expected boundary cell at {coordinate} is missing")


class InvalidDirectionError(InvariantViolationError):
    """An invalid direction reached a computation that needs a real one."""

    def __init__(self, direction: Any, context: str = "") -> None:
        self.direction = direction
        self.context = context
        message = f"Invalid direction: {direction!r}"
        if context:
            message = f"{message} ({context})"
        super().__init__(message)
