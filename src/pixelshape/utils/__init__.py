"""Utility functions for pixelshape.

This module provides utility functions including:

- Logging setup and configuration
- Redraw statistics
"""

from pixelshape.utils.logging import (
    RenderLogger,
    RenderStats,
    configure_logging,
    get_library_logger,
)

__all__ = [
    "RenderLogger",
    "RenderStats",
    "configure_logging",
    "get_library_logger",
]
