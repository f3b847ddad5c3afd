"""Configuration management for pixelshape.

This module provides configuration management using Pydantic models.
Configuration can be provided via CLI arguments or defaults. The grid
dimensions are fixed constants and are not configurable.

Key classes:
- ParameterBounds: Allowed range of each shape parameter
- ParameterDefaults: Starting values of each shape parameter
- OutputConfig: Preview image output settings
- LoggingConfig: Logging settings
- PreviewSettings: Main application settings
"""

from pixelshape.config.settings import (
    LOG_LEVELS,
    O_SIZE,
    PARAMETER_NAMES,
    S_SIZE,
    SCALE,
    LoggingConfig,
    OutputConfig,
    ParameterBounds,
    ParameterDefaults,
    PreviewSettings,
    Range,
    get_default_settings,
)

__all__ = [
    "LOG_LEVELS",
    "O_SIZE",
    "PARAMETER_NAMES",
    "SCALE",
    "S_SIZE",
    "LoggingConfig",
    "OutputConfig",
    "ParameterBounds",
    "ParameterDefaults",
    "PreviewSettings",
    "Range",
    "get_default_settings",
]
