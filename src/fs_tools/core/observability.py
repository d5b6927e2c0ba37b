"""Observability setup for fs-tools.

Log records go to stderr so that command output on stdout, such as
``fs-tools list --json``, stays machine-readable.
"""

import logging
import sys
from collections.abc import Iterator
from contextlib import contextmanager
from typing import Any

import structlog
from opentelemetry import trace
from opentelemetry.sdk.resources import Resource
from opentelemetry.sdk.trace import TracerProvider
from opentelemetry.sdk.trace.export import BatchSpanProcessor, ConsoleSpanExporter

from .config import settings

ATTRIBUTE_PREFIX = "fs_tools."


def setup_tracing() -> None:
    """Set up OpenTelemetry tracing."""
    if not settings.otel_enabled:
        return

    resource = Resource.create({"service.name": settings.otel_service_name})
    provider = TracerProvider(resource=resource)

    # Keep spans off stdout, which carries command output
    processor = BatchSpanProcessor(ConsoleSpanExporter(out=sys.stderr))
    provider.add_span_processor(processor)

    trace.set_tracer_provider(provider)


def setup_logging() -> None:
    """Set up structured logging with structlog."""
    logging.basicConfig(
        format="%(message)s",
        stream=sys.stderr,
        level=getattr(logging, settings.log_level.upper()),
    )

    renderer: Any
    if settings.log_json:
        renderer = structlog.processors.JSONRenderer()
    else:
        renderer = structlog.dev.ConsoleRenderer(colors=False)

    structlog.configure(
        processors=[
            structlog.contextvars.merge_contextvars,
            structlog.stdlib.filter_by_level,
            structlog.stdlib.add_logger_name,
            structlog.stdlib.add_log_level,
            structlog.stdlib.PositionalArgumentsFormatter(),
            structlog.processors.TimeStamper(fmt="iso"),
            structlog.processors.StackInfoRenderer(),
            structlog.processors.format_exc_info,
            structlog.processors.UnicodeDecoder(),
            renderer,
        ],
        context_class=dict,
        logger_factory=structlog.stdlib.LoggerFactory(),
        cache_logger_on_first_use=True,
    )


def get_logger(name: str) -> Any:
    """Get a logger instance."""
    return structlog.get_logger(name)


def get_tracer(name: str) -> trace.Tracer:
    """Get a tracer instance."""
    return trace.get_tracer(name)


@contextmanager
def operation_span(
    tracer: trace.Tracer, operation: str, **attributes: Any
) -> Iterator[trace.Span]:
    """Run a filesystem operation inside a span with matching log context.

    Attributes are set on the span under the ``fs_tools.`` prefix, and the
    operation name is bound to every log record emitted inside the block.

    Args:
        tracer: Tracer to start the span with
        operation: Operation name, used as the span name
        **attributes: Span attributes such as ``path`` or ``recursive``

    Yields:
        The active span, for attributes only known after the work is done
    """
    with tracer.start_as_current_span(operation) as span:
        for key, value in attributes.items():
            span.set_attribute(ATTRIBUTE_PREFIX + key, value)
        with structlog.contextvars.bound_contextvars(operation=operation):
            yield span


# Initialize on import
setup_logging()
setup_tracing()
