"""
Content hashing configuration for sitedeps.

Selects between the local SHA-1 digest and a delegated version-control hashing
command. The delegated backend is chosen through the environment rather than a
command-line flag so that the surrounding build tool decides it once per run.

Environment Variables:
    SITEDEPS_HASHING_BACKEND=delegated
    SITEDEPS_HASHING_COMMAND="git hash-object"
    SITEDEPS_HASHING_TIMEOUT=30
"""

import shlex
from typing import Literal

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from sitedeps.core.constants import DEFAULT_HASH_CHUNK_SIZE, DEFAULT_HASH_COMMAND


class HashingConfig(BaseSettings):
    """Configuration for content fingerprinting."""

    model_config = SettingsConfigDict(
        env_prefix="SITEDEPS_HASHING_",
        case_sensitive=False,
        validate_default=True,
        extra="ignore",
    )

    backend: Literal["local", "delegated"] = Field(
        default="local",
        description="Hashing backend: 'local' (SHA-1 in process) or 'delegated' (external command)",
    )

    command: str = Field(
        default=DEFAULT_HASH_COMMAND,
        description="Command used by the delegated backend; the file path is appended as its last argument",
    )

    timeout: float | None = Field(
        default=None,
        description="Seconds to wait for the delegated command (no limit if unset)",
    )

    chunk_size: int = Field(
        default=DEFAULT_HASH_CHUNK_SIZE,
        ge=1024,
        description="Read size in bytes used by the local backend",
    )

    @field_validator("backend", mode="before")
    @classmethod
    def normalize_backend(cls, v: str) -> str:
        """Accept backend names in any case."""
        if isinstance(v, str):
            return v.strip().lower()
        return v

    @field_validator("timeout")
    @classmethod
    def validate_timeout(cls, v: float | None) -> float | None:
        """Validate timeout is positive."""
        if v is not None and v <= 0:
            raise ValueError("timeout must be positive")
        return v

    @field_validator("command")
    @classmethod
    def validate_command(cls, v: str) -> str:
        """Validate that the delegated command parses to at least one word."""
        try:
            argv = shlex.split(v)
        except ValueError as e:
            raise ValueError(f"Invalid hashing command '{v}': {e}")
        if not argv:
            raise ValueError("Hashing command cannot be empty")
        return v

    def command_argv(self) -> list[str]:
        """Return the delegated command split into arguments."""
        return shlex.split(self.command)

    def is_delegated(self) -> bool:
        """Check whether hashing is delegated to an external command."""
        return self.backend == "delegated"

    def __repr__(self) -> str:
        """String representation of hashing configuration."""
        return (
            f"HashingConfig("
            f"backend={self.backend!r}, "
            f"command={self.command!r}, "
            f"timeout={self.timeout})"
        )
