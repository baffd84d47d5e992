"""Top-level sitedeps configuration."""

from pydantic import BaseModel, Field

from .hashing_config import HashingConfig
from .logging_config import LoggingConfig


class Config(BaseModel):
    """Configuration bundle handed to sitedeps by the surrounding build tool.

    Hashing settings are read from ``SITEDEPS_HASHING_*`` environment variables
    when not passed explicitly.
    """

    hashing: HashingConfig = Field(default_factory=HashingConfig)
    logging: LoggingConfig = Field(default_factory=LoggingConfig)
