"""Configuration models for sitedeps."""

from .config import Config
from .hashing_config import HashingConfig
from .logging_config import FileLoggingConfig, LoggingConfig

__all__ = [
    "Config",
    "FileLoggingConfig",
    "HashingConfig",
    "LoggingConfig",
]
