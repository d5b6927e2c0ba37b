"""Best-effort path resolution.

Neither function in this module raises. Each failure branch degrades to a
defined fallback value instead:

- ``abs_path`` leaves ``~`` literal when the home directory is unknown, keeps
  the unresolved string when the working directory cannot be read, and falls
  back to an extension heuristic when the path cannot be stat'ed.
- ``is_dir`` reports ``False`` for anything it cannot stat.
"""

import os
import stat
from pathlib import Path
from typing import Optional

from fs_tools.core import get_logger

logger = get_logger(__name__)


def _home_directory() -> Optional[str]:
    """Return the current user's home directory, or None if it is unknown."""
    try:
        return str(Path.home())
    except (RuntimeError, KeyError) as e:
        logger.debug("Home directory lookup failed", error=str(e))
        return None


def _looks_like_file(path: str) -> bool:
    """Classify a path as a file or a directory.

    An existing path is classified by its metadata. A path that cannot be
    stat'ed is treated as a file when its final segment has an extension.
    Dotfiles such as ``.bashrc`` have no extension and count as directories.
    """
    try:
        return not stat.S_ISDIR(os.stat(path).st_mode)
    except (OSError, ValueError):
        _, extension = os.path.splitext(os.path.basename(path))
        return extension != ""


def abs_path(path: str) -> str:
    """Get the absolute directory path for ``path``.

    Home directory references are expanded, the path is resolved against the
    working directory, and a trailing file name is stripped so the result
    always names a directory. Absolute input is returned unchanged.

    Args:
        path: Relative, absolute, or home-relative path

    Returns:
        Absolute directory path; ends with a separator when a file name was stripped
    """
    if os.path.isabs(path):
        return path

    home = _home_directory()
    if home is not None:
        path = path.replace("~", home + os.sep)

    try:
        path = os.path.abspath(path)
    except OSError as e:
        logger.debug("Could not resolve against working directory", path=path, error=str(e))

    if _looks_like_file(path):
        # os.path.join adds the separator only when dirname lacks one
        path = os.path.join(os.path.dirname(path), "")

    return path


def is_dir(path: str) -> bool:
    """Check whether ``path`` exists and is a directory."""
    try:
        return stat.S_ISDIR(os.stat(path).st_mode)
    except (OSError, ValueError):
        return False
