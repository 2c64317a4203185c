"""Configuration settings for plotpath."""

from pathlib import Path

from pydantic import BaseModel, Field


class GeometryConfig(BaseModel):
    """Configuration for geometry operations.

    Tolerances are in document units (SVG user units after transforms).
    """

    flatten_tolerance: float = Field(
        default=0.25,
        gt=0.0,
        le=100.0,
        description="Maximum deviation of a flattened curve from the true curve",
    )
    polish_epsilon: float = Field(
        default=1e-6,
        ge=0.0,
        description="Segments shorter than this are dropped when polishing",
    )


class GenerateConfig(BaseModel):
    """Configuration for SVG to svgcom conversion."""

    autocut: bool = Field(
        default=False,
        description="Remove stroke parts hidden under later filled shapes",
    )
    polish: bool = Field(
        default=False,
        description="Drop degenerate segments and rejoin adjacent fragments",
    )
    only_stroked: bool = Field(
        default=False,
        description="Skip shapes without a stroke",
    )


class RenderConfig(BaseModel):
    """Configuration for svgcom to SVG rendering."""

    stroke: str = Field(
        default="#000000",
        min_length=1,
        description="Stroke colour of the rendered path",
    )
    stroke_width: float = Field(
        default=1.0,
        gt=0.0,
        description="Stroke width of the rendered path",
    )


class LoggingConfig(BaseModel):
    """Logging configuration."""

    log_file: Path | None = Field(
        default=None,
        description="Path to log file",
    )
    log_level: str = Field(
        default="WARNING",
        description="Console log level",
    )
    file_log_level: str = Field(
        default="DEBUG",
        description="File log level (more verbose)",
    )
    quiet: bool = Field(
        default=False,
        description="Suppress console log output except errors",
    )


class PlotPathSettings(BaseModel):
    """Main application settings."""

    geometry: GeometryConfig = Field(default_factory=GeometryConfig)
    generate: GenerateConfig = Field(default_factory=GenerateConfig)
    render: RenderConfig = Field(default_factory=RenderConfig)
    logging: LoggingConfig = Field(default_factory=LoggingConfig)


def get_default_settings() -> PlotPathSettings:
    """Get default application settings."""
    return PlotPathSettings()
