"""Core utilities package."""

from .logging_utils import setup_logging
from .path_utils import (
    all_files_under,
    current_directory,
    glob_directory,
    ignore_names,
    read_file,
)

__all__ = [
    "all_files_under",
    "current_directory",
    "glob_directory",
    "ignore_names",
    "read_file",
    "setup_logging",
]
