"""Configuration settings for rastertrace."""

from enum import Enum
from pathlib import Path

from pydantic import BaseModel, Field

# Fraction by which exit-edge corners are pulled toward each other when
# building a segment's constraint wedge. Keeps neighbouring contours apart.
DEFAULT_SQUEEZE_FACTOR = 1 / 8

# Below this magnitude a ray component counts as zero, i.e. the closing ray
# runs along the same row or column as the edge it should cross.
DEFAULT_SAME_LINE_TOLERANCE = 1e-6


class FillPolicy(str, Enum):
    """Which pixels count as filled."""

    OPACITY = "opacity"
    DARK = "dark"
    LIGHT = "light"


class TraceConfig(BaseModel):
    """Configuration for the contour tracer."""

    squeeze_factor: float = Field(
        default=DEFAULT_SQUEEZE_FACTOR,
        gt=0.0,
        lt=0.5,
        description="Fraction by which exit corners are nudged toward each other",
    )
    same_line_tolerance: float = Field(
        default=DEFAULT_SAME_LINE_TOLERANCE,
        gt=0.0,
        le=1e-2,
        description="Epsilon for treating the closing ray as parallel to an edge",
    )
    pad_border: bool = Field(
        default=True,
        description="Treat pixels outside the field as unfilled so border shapes close",
    )


class FillConfig(BaseModel):
    """Configuration for pixel classification."""

    policy: FillPolicy = Field(
        default=FillPolicy.DARK,
        description="Predicate used to decide whether a pixel is filled",
    )
    alpha_threshold: int = Field(
        default=128,
        ge=1,
        le=255,
        description="Minimum 8-bit alpha for a pixel to count as opaque",
    )
    luma_threshold: int = Field(
        default=128,
        ge=0,
        le=255,
        description="Luma split point between dark and light pixels",
    )


class LoggingConfig(BaseModel):
    """Logging configuration."""

    log_file: Path | None = Field(
        default=None,
        description="Path to log file (no file logging when unset)",
    )
    log_level: str = Field(
        default="WARNING",
        description="Console log level",
    )
    file_log_level: str = Field(
        default="DEBUG",
        description="File log level (more verbose)",
    )


class RasterTraceSettings(BaseModel):
    """Main application settings."""

    trace: TraceConfig = Field(default_factory=TraceConfig)
    fill: FillConfig = Field(default_factory=FillConfig)
    logging: LoggingConfig = Field(default_factory=LoggingConfig)


def get_default_settings() -> RasterTraceSettings:
    """Get default application settings."""
    return RasterTraceSettings()
