"""Logging configuration models for sitedeps."""

from pathlib import Path

from pydantic import BaseModel, Field, field_validator

VALID_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")


def _validate_level(v: str) -> str:
    if v.upper() not in VALID_LEVELS:
        raise ValueError(
            f"Invalid log level '{v}'. Must be one of: {', '.join(VALID_LEVELS)}"
        )
    return v.upper()


class FileLoggingConfig(BaseModel):
    """Configuration for file-based logging."""

    enabled: bool = Field(
        default=False,
        description="Write sitedeps diagnostics next to the host build tool's logs",
    )
    path: str = Field(
        default="sitedeps.log",
        description="Log file path, relative to the build working directory",
    )
    level: str = Field(
        default="INFO",
        description="File log level; DEBUG records each extension chain lookup",
    )
    rotation: str = Field(
        default="10 MB",
        description="loguru rotation (size or interval); watch-mode rebuilds append on every change",
    )
    retention: str = Field(
        default="1 week",
        description="How long rotated files from earlier build runs are kept",
    )
    format: str = Field(
        default="{time:YYYY-MM-DD HH:mm:ss} | {level: <8} | {name}:{function}:{line} - {message}",
        description="loguru format string for file records",
    )

    @field_validator("level")
    @classmethod
    def validate_level(cls, v: str) -> str:
        """Validate logging level."""
        return _validate_level(v)

    @field_validator("path")
    @classmethod
    def validate_path(cls, v: str) -> str:
        """Validate log file path."""
        if not v.strip():
            raise ValueError("Log file path cannot be empty")
        return str(Path(v))


class LoggingConfig(BaseModel):
    """Top-level logging configuration."""

    file: FileLoggingConfig = Field(default_factory=FileLoggingConfig)
    console_level: str = Field(default="WARNING", description="Console logging level (DEBUG, INFO, WARNING, ERROR)")

    @field_validator("console_level")
    @classmethod
    def validate_console_level(cls, v: str) -> str:
        """Validate console logging level."""
        return _validate_level(v)

    def is_enabled(self) -> bool:
        """Check if file logging is enabled."""
        return self.file.enabled
