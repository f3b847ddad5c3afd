"""Configuration settings for Pixelshape."""

from pathlib import Path

from pydantic import BaseModel, Field, field_validator, model_validator

# Native grid side length in cells
O_SIZE = 50
# Magnification factor of the scaled view
SCALE = 10
# Scaled grid side length in pixels
S_SIZE = O_SIZE * SCALE

PARAMETER_NAMES: tuple[str, ...] = ("x", "y", "width", "height", "radius", "thickness")

LOG_LEVELS: tuple[str, ...] = ("DEBUG", "INFO", "WARNING", "ERROR")


class Range(BaseModel):
    """Inclusive integer range for one preview parameter."""

    min: int = Field(default=0, ge=0)
    max: int

    @model_validator(mode="after")
    def _check_order(self) -> "Range":
        if self.max < self.min:
            raise ValueError(f"max ({self.max}) is below min ({self.min})")
        return self

    def contains(self, value: int) -> bool:
        """Check whether value lies within the range."""
        return self.min <= value <= self.max


class ParameterBounds(BaseModel):
    """Bounds for the adjustable shape parameters."""

    x: Range = Field(default_factory=lambda: Range(max=O_SIZE - 1))
    y: Range = Field(default_factory=lambda: Range(max=O_SIZE - 1))
    width: Range = Field(default_factory=lambda: Range(max=O_SIZE))
    height: Range = Field(default_factory=lambda: Range(max=O_SIZE))
    radius: Range = Field(default_factory=lambda: Range(max=O_SIZE // 2))
    thickness: Range = Field(default_factory=lambda: Range(max=O_SIZE // 2))

    def get(self, name: str) -> Range:
        """Get the range for a parameter by name.

        Args:
            name: One of PARAMETER_NAMES

        Returns:
            The parameter's range

        Raises:
            KeyError: If name is not a known parameter
        """
        if name not in PARAMETER_NAMES:
            raise KeyError(name)
        return getattr(self, name)


class ParameterDefaults(BaseModel):
    """Starting values for the adjustable shape parameters."""

    x: int = Field(default=10, ge=0)
    y: int = Field(default=10, ge=0)
    width: int = Field(default=20, ge=0)
    height: int = Field(default=20, ge=0)
    radius: int = Field(default=5, ge=0)
    thickness: int = Field(default=2, ge=0)


class OutputConfig(BaseModel):
    """Configuration for preview image output."""

    output_dir: Path = Field(
        default=Path("."),
        description="Directory the preview images are written to",
    )
    stem: str = Field(
        default="shape",
        min_length=1,
        description="File name stem for {stem}-native.png and {stem}-magnified.png",
    )
    grid_overlay: bool = Field(
        default=True,
        description="Draw the cell grid over the magnified preview",
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

    @field_validator("log_level", "file_log_level")
    @classmethod
    def _check_level(cls, value: str) -> str:
        level = value.upper()
        if level not in LOG_LEVELS:
            raise ValueError(f"must be one of {', '.join(LOG_LEVELS)}")
        return level


class PreviewSettings(BaseModel):
    """Main application settings."""

    bounds: ParameterBounds = Field(default_factory=ParameterBounds)
    defaults: ParameterDefaults = Field(default_factory=ParameterDefaults)
    output: OutputConfig = Field(default_factory=OutputConfig)
    logging: LoggingConfig = Field(default_factory=LoggingConfig)


def get_default_settings() -> PreviewSettings:
    """Get default application settings."""
    return PreviewSettings()
