"""Copy and write operations for local files and directories.

Directory copies compose fully-qualified child paths at every level of the
recursion and never change the process working directory, so they can run
from several threads at once.
"""

import os
import stat
from typing import Optional

from fs_tools.core import get_logger, get_tracer, operation_span, settings
from fs_tools.core.exceptions import (
    DirectoryCopyError,
    DirectoryCreationError,
    FSToolsError,
    NotADirectoryPathError,
    PathNotFoundError,
    ReadFailureError,
    WriteFailureError,
    WrongTypeError,
)
from fs_tools.paths import abs_path, is_dir

logger = get_logger(__name__)
tracer = get_tracer(__name__)


def _directory_mode(mode: int) -> int:
    """Derive a mode for created directories from a file mode.

    The owner always gets rwx, and any class that can read also gets the
    search bit, so 0o644 becomes 0o755 and 0o600 becomes 0o700.
    """
    mode = stat.S_IMODE(mode) | stat.S_IRWXU
    return mode | ((mode & 0o044) >> 2)


def write_or_update_file(file: str, file_content: bytes, mode: int) -> None:
    """Write ``file_content`` to ``file``, creating any missing parent directories.

    An existing file is overwritten, never appended to, and its permission
    bits are set to ``mode``.

    Args:
        file: Target file path; a bare name is written to the working directory
        file_content: Bytes to write
        mode: Permission bits for the file

    Raises:
        DirectoryCreationError: If the leading directories cannot be created
        WriteFailureError: If the file cannot be written
    """
    logger.info("Writing file", path=file, size=len(file_content), mode=oct(mode))

    current_directory = abs_path(os.getcwd())
    file_name = os.path.basename(file)

    if file == file_name:
        write_directory = current_directory
    else:
        write_directory = abs_path(os.path.dirname(file))

    if os.path.normpath(current_directory) != os.path.normpath(write_directory):
        try:
            os.makedirs(write_directory, mode=_directory_mode(mode), exist_ok=True)
        except OSError as e:
            error_msg = (
                f"Failed to create the path leading up to {file_name}: {write_directory}"
            )
            logger.error(error_msg, path=write_directory, error=str(e))
            raise DirectoryCreationError(error_msg, write_directory) from e

    target = os.path.join(write_directory, file_name)

    try:
        fd = os.open(target, os.O_WRONLY | os.O_CREAT | os.O_TRUNC, stat.S_IMODE(mode))
        with os.fdopen(fd, "wb") as handle:
            handle.write(file_content)
        os.chmod(target, stat.S_IMODE(mode))
    except OSError as e:
        error_msg = f"Failed to write {file_name} in directory {write_directory}: {e}"
        logger.error(error_msg, path=target, error=str(e))
        raise WriteFailureError(error_msg, target) from e

    logger.info("File written", path=target, size=len(file_content))


def copy_file(source_file: str, destination_file: str) -> None:
    """Copy a single file's contents and permission bits.

    Args:
        source_file: File to copy
        destination_file: Path to write the copy to

    Raises:
        PathNotFoundError: If the source cannot be stat'ed or opened
        WrongTypeError: If the source is a directory
        ReadFailureError: If the source cannot be read
        DirectoryCreationError: If the destination's parents cannot be created
        WriteFailureError: If the destination cannot be written
    """
    logger.info("Copying file", source=source_file, destination=destination_file)

    try:
        source_stats = os.stat(source_file)
    except (OSError, ValueError) as e:
        error_msg = f"{source_file} does not exist."
        logger.error(error_msg, path=source_file, error=str(e))
        raise PathNotFoundError(error_msg, source_file) from e

    if stat.S_ISDIR(source_stats.st_mode):
        error_msg = f"{source_file} is a directory. Please use copy_directory instead."
        logger.error(error_msg, path=source_file)
        raise WrongTypeError(error_msg, source_file)

    try:
        handle = open(source_file, "rb")
    except OSError as e:
        error_msg = f"{source_file} could not be opened."
        logger.error(error_msg, path=source_file, error=str(e))
        raise PathNotFoundError(error_msg, source_file) from e

    with handle:
        try:
            file_content = handle.read()
        except OSError as e:
            error_msg = f"Unable to read: {source_file}"
            logger.error(error_msg, path=source_file, error=str(e))
            raise ReadFailureError(error_msg, source_file) from e

    write_or_update_file(
        destination_file, file_content, stat.S_IMODE(source_stats.st_mode)
    )
    logger.info("File copied", source=source_file, destination=destination_file)


def _copy_entries(
    source_directory: str, destination_directory: str, collect_errors: bool
) -> list[FSToolsError]:
    """Copy every entry of ``source_directory`` and return the failures seen."""
    if not is_dir(source_directory):
        error_msg = f"{source_directory} is not a directory."
        logger.error(error_msg, path=source_directory)
        raise NotADirectoryPathError(error_msg, source_directory)

    try:
        os.makedirs(destination_directory, mode=settings.directory_mode, exist_ok=True)
    except OSError as e:
        error_msg = f"Failed to create destination directory {destination_directory}"
        logger.error(error_msg, path=destination_directory, error=str(e))
        raise DirectoryCreationError(error_msg, destination_directory) from e

    try:
        scanner = os.scandir(source_directory)
    except OSError as e:
        error_msg = f"Unable to open: {source_directory}"
        logger.error(error_msg, path=source_directory, error=str(e))
        raise PathNotFoundError(error_msg, source_directory) from e

    with scanner:
        try:
            entries = [(entry.name, entry.is_dir()) for entry in scanner]
        except OSError as e:
            error_msg = f"Unable to read: {source_directory}"
            logger.error(error_msg, path=source_directory, error=str(e))
            raise ReadFailureError(error_msg, source_directory) from e

    errors: list[FSToolsError] = []
    for name, entry_is_dir in entries:
        source_item = os.path.join(source_directory, name)
        destination_item = os.path.join(destination_directory, name)

        try:
            if entry_is_dir:
                errors.extend(
                    _copy_entries(source_item, destination_item, collect_errors)
                )
            else:
                copy_file(source_item, destination_item)
        except FSToolsError as e:
            errors.append(e)

        if errors and not collect_errors:
            # Last error wins: only the most recent failure is kept
            errors = errors[-1:]

    return errors


def copy_directory(
    source_directory: str,
    destination_directory: str,
    *,
    collect_errors: Optional[bool] = None,
) -> None:
    """Recursively copy a directory and its contents into another directory.

    Every entry is attempted even after a failure. By default only the last
    failure is raised; earlier ones are discarded. With ``collect_errors``
    all failures are raised together as a DirectoryCopyError.

    Args:
        source_directory: Directory to copy
        destination_directory: Directory to copy into; created if missing
        collect_errors: Collect every failure instead of keeping the last.
            Defaults to ``settings.collect_copy_errors``.

    Raises:
        NotADirectoryPathError: If the source is not a directory
        DirectoryCreationError: If the destination cannot be created
        PathNotFoundError: If the source cannot be opened
        ReadFailureError: If the source entries cannot be read
        DirectoryCopyError: If errors were collected
        FSToolsError: The last entry failure, when not collecting
    """
    if collect_errors is None:
        collect_errors = settings.collect_copy_errors

    logger.info(
        "Copying directory",
        source=source_directory,
        destination=destination_directory,
        collect_errors=collect_errors,
    )

    with operation_span(
        tracer,
        "copy_directory",
        source=source_directory,
        destination=destination_directory,
    ) as span:

        errors = _copy_entries(source_directory, destination_directory, collect_errors)
        span.set_attribute("fs_tools.error_count", len(errors))

    if not errors:
        logger.info("Directory copied", source=source_directory)
        return

    if not collect_errors:
        raise errors[-1]

    error_msg = f"{len(errors)} error(s) while copying {source_directory}"
    logger.error(error_msg, path=source_directory, error_count=len(errors))
    raise DirectoryCopyError(error_msg, source_directory, errors)
