"""Content fingerprints for change detection.

Fingerprints depend only on file bytes, never on metadata such as mtime, so a
file that was touched but not edited keeps its fingerprint. Files can be hashed
in process (SHA-1) or by delegating to a version-control hashing command such
as ``git hash-object``; strings are always hashed in process.
"""

import hashlib
import os
import subprocess
from pathlib import Path
from typing import Protocol

from loguru import logger

from sitedeps.core.config.hashing_config import HashingConfig
from sitedeps.core.constants import DEFAULT_HASH_CHUNK_SIZE, DEFAULT_HASH_COMMAND
from sitedeps.core.exceptions import HashDelegationError


class HashBackend(Protocol):
    """Strategy for fingerprinting a file."""

    def hash_file(self, path: str | Path) -> str:
        """Return the fingerprint of the file at ``path``."""
        ...


class LocalHashBackend:
    """SHA-1 of the file contents, computed in process."""

    def __init__(self, chunk_size: int = DEFAULT_HASH_CHUNK_SIZE):
        self.chunk_size = chunk_size

    def hash_file(self, path: str | Path) -> str:
        digest = hashlib.sha1()
        with open(path, "rb") as f:
            while chunk := f.read(self.chunk_size):
                digest.update(chunk)
        return digest.hexdigest()


class DelegatedHashBackend:
    """Fingerprint computed by an external hashing command.

    The absolute file path is appended to ``command`` as a single argument,
    and output bytes that are not valid UTF-8 are replaced. Failures raise
    :class:`HashDelegationError` and are never retried or replaced by a local
    hash; retry policy belongs to the caller.
    """

    def __init__(
        self,
        command: list[str] | None = None,
        timeout: float | None = None,
    ):
        self.command = list(command) if command else DEFAULT_HASH_COMMAND.split()
        self.timeout = timeout

    def hash_file(self, path: str | Path) -> str:
        # Absolute so a leading "-" in a relative name is never read as an option
        argv = [*self.command, os.path.abspath(path)]
        try:
            result = subprocess.run(
                argv,
                stdout=subprocess.PIPE,
                stderr=subprocess.STDOUT,
                text=True,
                errors="replace",
                timeout=self.timeout,
                check=False,
            )
        except subprocess.TimeoutExpired as e:
            raise HashDelegationError(
                path, reason=f"timed out after {self.timeout}s"
            ) from e
        except OSError as e:
            raise HashDelegationError(path, reason=str(e)) from e

        output = result.stdout or ""
        if result.returncode != 0 or not output:
            logger.error(
                f"Delegated hash failed for {path} "
                f"(exit {result.returncode}): {output.strip()}"
            )
            raise HashDelegationError(
                path, returncode=result.returncode, output=output
            )

        return output.strip()


class ContentHasher:
    """Computes content fingerprints for files and in-memory payloads.

    Example:
        >>> hasher = ContentHasher()
        >>> hasher.hash_string("hello")
        'aaf4c61ddcc5e8a2dabede0f3b482cd9aea9434e'
    """

    def __init__(self, backend: HashBackend | None = None):
        self.backend = backend if backend is not None else LocalHashBackend()

    def hash_file(self, path: str | Path) -> str:
        """Fingerprint a file with the configured backend.

        Raises:
            HashDelegationError: If the delegated command fails
            OSError: If the local backend cannot read the file
        """
        return self.backend.hash_file(path)

    @staticmethod
    def hash_string(data: bytes | str) -> str:
        """SHA-1 of ``data`` (UTF-8 encoded if a string); never delegated."""
        if isinstance(data, str):
            data = data.encode("utf-8")
        return hashlib.sha1(data).hexdigest()


def create_content_hasher(config: HashingConfig | None = None) -> ContentHasher:
    """Create a content hasher with the backend selected by configuration."""
    if config is None:
        config = HashingConfig()

    backend: HashBackend
    if config.is_delegated():
        backend = DelegatedHashBackend(config.command_argv(), config.timeout)
    else:
        backend = LocalHashBackend(config.chunk_size)

    logger.debug(f"Using {type(backend).__name__} for content hashing")
    return ContentHasher(backend)
