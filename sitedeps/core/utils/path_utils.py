"""Path utility functions for sitedeps."""

import glob
import os
import sys
import unicodedata
from collections.abc import Callable, Iterable
from fnmatch import fnmatch
from pathlib import Path

from loguru import logger

from sitedeps.core.types import FileKind, classify_path

IgnorePredicate = Callable[[Path], bool]


def all_files_under(
    path: str | Path, ignore: IgnorePredicate | None = None
) -> list[Path]:
    """Get a recursive list of files inside a path.

    Symlinks are followed. If ``ignore`` returns True for a path, nothing below
    it is searched either. Directories themselves are never returned, and paths
    that are neither a file nor a directory (missing, broken symlink, special
    file) yield nothing.

    Children are visited in sorted order, depth first, so the result is stable
    for a fixed directory snapshot.

    Args:
        path: Root file or directory
        ignore: Optional predicate returning True for paths to skip

    Returns:
        List of file paths (no directories)
    """
    root = Path(path)
    files: list[Path] = []

    # Each entry carries the real paths of the directories above it so that
    # symlink cycles can be detected without forbidding repeated aliases.
    stack: list[tuple[Path, tuple[str, ...]]] = [(root, ())]

    while stack:
        current, ancestors = stack.pop()

        if ignore is not None and ignore(current):
            continue

        kind = classify_path(current)
        if kind is FileKind.FILE:
            files.append(current)
            continue
        if kind is not FileKind.DIRECTORY:
            continue

        real_path = os.path.realpath(current)
        if real_path in ancestors:
            logger.warning(f"Skipping symlink cycle at {current} -> {real_path}")
            continue

        try:
            children = sorted(current.iterdir())
        except OSError as e:
            logger.debug(f"Cannot list directory {current}: {e}")
            continue

        chain = ancestors + (real_path,)
        stack.extend((child, chain) for child in reversed(children))

    return files


def ignore_names(patterns: Iterable[str]) -> IgnorePredicate:
    """Build an ignore predicate matching a path's final name against patterns.

    Args:
        patterns: fnmatch-style patterns such as ``".git"`` or ``"*.tmp"``

    Returns:
        Predicate suitable for :func:`all_files_under`
    """
    pattern_list = tuple(patterns)

    def _ignored(path: Path) -> bool:
        return any(fnmatch(path.name, pattern) for pattern in pattern_list)

    return _ignored


def _normalize_encoding(value: str) -> str:
    # macOS file systems hand back decomposed (NFD) unicode names
    if sys.platform != "darwin":
        return value
    return unicodedata.normalize("NFC", value)


def glob_directory(pattern: str | Path) -> list[str]:
    """Glob a directory and try to keep path encoding consistent.

    Args:
        pattern: The glob pattern

    Returns:
        Matching paths, NFC-normalized on macOS
    """
    return [_normalize_encoding(result) for result in glob.glob(str(pattern))]


def current_directory() -> str:
    """Get the current working directory with consistent path encoding."""
    return _normalize_encoding(os.getcwd())


def read_file(path: str | Path, size: int | None = None) -> str:
    """Read a text file, optionally only its first ``size`` characters."""
    with open(path, encoding="utf-8") as f:
        if size is None:
            return f.read()
        return f.read(size)
