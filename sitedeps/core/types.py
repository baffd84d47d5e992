"""Shared types for sitedeps.

File references are plain ``pathlib.Path`` objects; ``FileKind`` is the
discriminator computed from the file system when it is needed.
"""

from enum import Enum
from pathlib import Path
from typing import Protocol, runtime_checkable

# Template layers outer-most first, then the residual extension.
ExtensionChain = tuple[str, ...]


class FileKind(Enum):
    """What a path refers to on disk."""

    FILE = "file"
    DIRECTORY = "directory"
    ABSENT = "absent"


def classify_path(path: Path) -> FileKind:
    """Classify a path, following symlinks.

    Nonexistent paths, broken symlinks and special files (sockets, FIFOs,
    devices) are all reported as ``ABSENT``.
    """
    try:
        if path.is_dir():
            return FileKind.DIRECTORY
        if path.is_file():
            return FileKind.FILE
    except OSError:
        return FileKind.ABSENT
    return FileKind.ABSENT


@runtime_checkable
class TemplateRegistry(Protocol):
    """Capability provided by the template engine registry."""

    def is_template_extension(self, ext: str) -> bool:
        """Return True if ``ext`` (leading period included) is a template layer."""
        ...


@runtime_checkable
class ResourceRef(Protocol):
    """A site map resource, optionally backed by a source file."""

    @property
    def source_file(self) -> Path | None: ...
