"""Configuration settings for svgdxf."""

from enum import Enum
from pathlib import Path

from pydantic import BaseModel, Field, field_validator

LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR")


class PathErrorPolicy(str, Enum):
    """What a conversion does when one path's data cannot be parsed."""

    SKIP = "skip"
    ABORT = "abort"


class FlattenConfig(BaseModel):
    """Configuration for curve flattening."""

    curve_samples: int = Field(
        default=100,
        ge=1,
        le=10000,
        description="Parametric intervals per cubic curve (100 = step of 0.01)",
    )


class CleanupConfig(BaseModel):
    """Configuration for near-duplicate point removal."""

    tolerance: float = Field(
        default=0.001,
        ge=0.0,
        description="Points closer than this to the last kept point are dropped",
    )


class DxfConfig(BaseModel):
    """Configuration for DXF output."""

    layer: str = Field(
        default="symbols",
        min_length=1,
        description="Layer name for every entity",
    )
    color: int = Field(
        default=7,
        ge=0,
        le=256,
        description="AutoCAD color index for every polyline",
    )

    @field_validator("layer")
    @classmethod
    def _single_line(cls, value: str) -> str:
        if "\n" in value or "\r" in value:
            raise ValueError("layer name must be a single line")
        return value


class ProcessingConfig(BaseModel):
    """Configuration for conversion runs."""

    on_path_error: PathErrorPolicy = Field(
        default=PathErrorPolicy.SKIP,
        description="Skip unparseable paths or abort the conversion",
    )
    require_entities: bool = Field(
        default=False,
        description="Treat markup without convertible geometry as an error",
    )
    max_workers: int | None = Field(
        default=None,
        ge=1,
        description="Max worker processes for batch conversion (None = auto)",
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
    def _known_level(cls, value: str) -> str:
        level = value.upper()
        if level not in LOG_LEVELS:
            raise ValueError(f"log level must be one of {', '.join(LOG_LEVELS)}")
        return level


class ConverterSettings(BaseModel):
    """Main application settings."""

    flatten: FlattenConfig = Field(default_factory=FlattenConfig)
    cleanup: CleanupConfig = Field(default_factory=CleanupConfig)
    dxf: DxfConfig = Field(default_factory=DxfConfig)
    processing: ProcessingConfig = Field(default_factory=ProcessingConfig)
    logging: LoggingConfig = Field(default_factory=LoggingConfig)


def get_default_settings() -> ConverterSettings:
    """Get default application settings."""
    return ConverterSettings()
