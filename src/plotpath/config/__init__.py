"""Configuration management for plotpath.

This module provides configuration management using Pydantic models.
Configuration can be provided via CLI arguments or defaults.

Key classes:
- GeometryConfig: Flattening tolerance and polishing threshold
- GenerateConfig: SVG to svgcom conversion settings
- RenderConfig: svgcom to SVG rendering settings
- LoggingConfig: Logging settings
- PlotPathSettings: Main application settings
"""

from plotpath.config.settings import (
    GenerateConfig,
    GeometryConfig,
    LoggingConfig,
    PlotPathSettings,
    RenderConfig,
    get_default_settings,
)

__all__ = [
    "GenerateConfig",
    "GeometryConfig",
    "LoggingConfig",
    "PlotPathSettings",
    "RenderConfig",
    "get_default_settings",
]
