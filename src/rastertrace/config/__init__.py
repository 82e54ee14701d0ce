"""Configuration management for rastertrace.

This module provides configuration management using Pydantic models.

Key classes:
- TraceConfig: Tracer geometry settings
- FillConfig: Pixel classification settings
- LoggingConfig: Logging settings
- RasterTraceSettings: Main application settings
"""

from rastertrace.config.settings import (
    DEFAULT_SAME_LINE_TOLERANCE,
    DEFAULT_SQUEEZE_FACTOR,
    FillConfig,
    FillPolicy,
    LoggingConfig,
    RasterTraceSettings,
    TraceConfig,
    get_default_settings,
)

__all__ = [
    "DEFAULT_SAME_LINE_TOLERANCE",
    "DEFAULT_SQUEEZE_FACTOR",
    "FillConfig",
    "FillPolicy",
    "LoggingConfig",
    "RasterTraceSettings",
    "TraceConfig",
    "get_default_settings",
]
