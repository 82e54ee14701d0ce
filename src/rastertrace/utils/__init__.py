"""Utility functions for rastertrace.

This module provides:

- Logging setup and configuration
- Tracing statistics
"""

from rastertrace.utils.logging import (
    TraceLogger,
    TraceStats,
    configure_logging,
)

__all__ = [
    "TraceLogger",
    "TraceStats",
    "configure_logging",
]
