"""Small, synchronous utilities over the local filesystem.

This package wraps primitive filesystem calls with a consistent error model
and structured logging. Every operation is stateless and independent.

Key Features:
    - Path normalization with home-directory expansion
    - File and recursive directory copies that preserve permission bits
    - File listings, optionally recursive or filtered by name
    - Writes that create missing parent directories
    - CLI interface

Recommended Usage:
    >>> from fs_tools import copy_directory, get_files_contains
    >>> copy_directory("/data/project", "/backup/project")
    >>> reports = get_files_contains("/data/project", "report")

Errors are raised as subclasses of ``fs_tools.FSToolsError``.
"""

__version__ = "0.1.0"

from .core.exceptions import (
    DirectoryCopyError,
    DirectoryCreationError,
    FSToolsError,
    NotADirectoryPathError,
    PathNotFoundError,
    ReadFailureError,
    WriteFailureError,
    WrongTypeError,
)
from .filesystem import (
    copy_directory,
    copy_file,
    get_files,
    get_files_contains,
    get_files_contains_recursive,
    write_or_update_file,
)
from .paths import abs_path, is_dir
from .schemas import FileListing, ListingRequest, WriteRequest

__all__ = [
    "__version__",
    # Path resolution
    "abs_path",
    "is_dir",
    # Copy and write
    "copy_directory",
    "copy_file",
    "write_or_update_file",
    # Listing
    "get_files",
    "get_files_contains",
    "get_files_contains_recursive",
    # Schemas
    "FileListing",
    "ListingRequest",
    "WriteRequest",
    # Exceptions
    "DirectoryCopyError",
    "DirectoryCreationError",
    "FSToolsError",
    "NotADirectoryPathError",
    "PathNotFoundError",
    "ReadFailureError",
    "WriteFailureError",
    "WrongTypeError",
]
