"""Directory listing and name filtering.

Listings contain files only; directories are descended into when recursive
but never returned. Order follows the directory enumeration order of the
host filesystem and is not sorted.
"""

import os

from fs_tools.core import get_logger, get_tracer, operation_span
from fs_tools.core.exceptions import (
    FSToolsError,
    NotADirectoryPathError,
    ReadFailureError,
)

logger = get_logger(__name__)
tracer = get_tracer(__name__)


def _scan(path: str, recursive: bool, files: list[str]) -> None:
    """Append the files under ``path`` to ``files``.

    Raises:
        NotADirectoryPathError: If ``path`` cannot be opened as a directory
        ReadFailureError: If the directory entries cannot be read
    """
    try:
        scanner = os.scandir(path)
    except (OSError, ValueError) as e:
        raise NotADirectoryPathError(f"{path} is not a directory.", path) from e

    with scanner:
        try:
            entries = [(entry.name, entry.is_dir()) for entry in scanner]
        except OSError as e:
            raise ReadFailureError(f"Cannot read the contents of {path}", path) from e

    for name, entry_is_dir in entries:
        entry_path = os.path.join(path, name)

        if recursive and entry_is_dir:
            try:
                _scan(entry_path, True, files)
            except FSToolsError as e:
                # Partial results are preferred over failing the whole listing
                logger.debug("Skipping unreadable subdirectory", path=entry_path, error=str(e))
        elif not entry_is_dir:
            files.append(entry_path)


def get_files(path: str, recursive: bool = False) -> list[str]:
    """Get all the files in a directory.

    Args:
        path: Directory to list
        recursive: Descend into subdirectories

    Returns:
        Paths of the files found, each joined onto ``path``

    Raises:
        NotADirectoryPathError: If ``path`` cannot be opened as a directory
        ReadFailureError: If the directory entries cannot be read
    """
    logger.info("Listing files", path=path, recursive=recursive)

    files: list[str] = []
    with operation_span(tracer, "get_files", path=path, recursive=recursive) as span:

        try:
            _scan(path, recursive, files)
        except FSToolsError as e:
            logger.error(str(e), path=path, error=str(e.__cause__))
            raise

        span.set_attribute("fs_tools.file_count", len(files))

    logger.info("Files listed", path=path, file_count=len(files))
    return files


def _filter_by_name(files: list[str], substring: str) -> list[str]:
    return [file for file in files if substring in os.path.basename(file)]


def get_files_contains(path: str, substring: str) -> list[str]:
    """Get the files directly in ``path`` whose name contains ``substring``."""
    return _filter_by_name(get_files(path, recursive=False), substring)


def get_files_contains_recursive(path: str, substring: str) -> list[str]:
    """Get the files at any depth under ``path`` whose name contains ``substring``."""
    return _filter_by_name(get_files(path, recursive=True), substring)
