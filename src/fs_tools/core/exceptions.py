"""Exception hierarchy for fs-tools."""

from typing import Optional


class FSToolsError(Exception):
    """Base exception for all fs-tools errors.

    Attributes:
        path: The filesystem path the failure relates to, if any
    """

    def __init__(self, message: str, path: Optional[str] = None):
        super().__init__(message)
        self.path = path


class PathNotFoundError(FSToolsError):
    """Raised when a path expected to exist cannot be opened."""

    pass


class WrongTypeError(FSToolsError):
    """Raised when a file is given where a directory is expected, or vice versa."""

    pass


class NotADirectoryPathError(WrongTypeError):
    """Raised when a path is not a directory."""

    pass


class ReadFailureError(FSToolsError):
    """Raised when directory entries or file bytes cannot be read."""

    pass


class WriteFailureError(FSToolsError):
    """Raised when bytes cannot be written to the target path."""

    pass


class DirectoryCreationError(FSToolsError):
    """Raised when the leading directory chain cannot be created."""

    pass


class DirectoryCopyError(FSToolsError):
    """Raised when one or more entries failed during a directory copy.

    Only raised when error collection is enabled; ``errors`` holds every
    failure in the order it was encountered.
    """

    def __init__(self, message: str, path: Optional[str], errors: list[FSToolsError]):
        super().__init__(message, path)
        self.errors = errors
