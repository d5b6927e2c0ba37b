"""Filesystem operations and utilities."""

from .listing import (
    get_files,
    get_files_contains,
    get_files_contains_recursive,
)
from .operations import (
    copy_directory,
    copy_file,
    write_or_update_file,
)

__all__ = [
    "copy_directory",
    "copy_file",
    "write_or_update_file",
    "get_files",
    "get_files_contains",
    "get_files_contains_recursive",
]
