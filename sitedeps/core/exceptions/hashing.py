"""Hashing exceptions.

Enumeration and extension resolution never raise for inputs in their domain,
so content hashing is the only place sitedeps reports failures of its own.
"""

from pathlib import Path


class SiteDepsError(Exception):
    """Base exception for sitedeps errors."""

    pass


class HashingError(SiteDepsError):
    """Base exception for content hashing errors."""

    pass


class HashDelegationError(HashingError):
    """Raised when the delegated hashing tool cannot produce a fingerprint.

    This occurs when:
    - The hashing command exits with a non-zero status
    - The hashing command produces no output
    - The hashing command cannot be launched or exceeds its timeout
    """

    def __init__(
        self,
        path: str | Path,
        returncode: int | None = None,
        output: str = "",
        reason: str | None = None,
    ):
        self.path = str(path)
        self.returncode = returncode
        self.output = output

        message = f"Failed to get hash for '{self.path}' from delegated command"
        if reason:
            message += f": {reason}"
        elif returncode:
            message += f" (exit status {returncode})"
        else:
            message += " (empty output)"
        super().__init__(message)
