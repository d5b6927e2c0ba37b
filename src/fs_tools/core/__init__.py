"""Core utilities and shared components for fs-tools."""

from .config import settings
from .exceptions import FSToolsError, WrongTypeError
from .observability import get_logger, get_tracer, operation_span

__all__ = [
    "settings",
    "FSToolsError",
    "WrongTypeError",
    "get_logger",
    "get_tracer",
    "operation_span",
]
