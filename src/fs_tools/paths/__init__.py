"""Path resolution and classification helpers."""

from .resolver import abs_path, is_dir

__all__ = [
    "abs_path",
    "is_dir",
]
