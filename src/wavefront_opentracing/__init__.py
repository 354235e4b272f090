"""Wavefront OpenTracing SDK -- spans, span contexts, and span reporting."""

from wavefront_opentracing.__version__ import __version__
from wavefront_opentracing.core.config import TracerConfig
from wavefront_opentracing.core.constants import ReferenceType
from wavefront_opentracing.core.exceptions import (
    ConfigurationError,
    ReporterClosedError,
    ReportingError,
    WavefrontTracingError,
)
from wavefront_opentracing.core.reference import Reference, child_of, follows_from
from wavefront_opentracing.core.span import Span
from wavefront_opentracing.core.span_context import SpanContext
from wavefront_opentracing.core.tracer import Tracer
from wavefront_opentracing.reporting import (
    CompositeReporter,
    ConsoleReporter,
    InMemoryReporter,
    SpanReporter,
)
from wavefront_opentracing.utils.logging import (
    configure_logging,
    get_logger,
    set_sdk_log_level,
)

__all__ = [
    "__version__",
    # Core
    "Span",
    "SpanContext",
    "Tracer",
    "TracerConfig",
    "Reference",
    "ReferenceType",
    "child_of",
    "follows_from",
    # Reporting
    "SpanReporter",
    "CompositeReporter",
    "ConsoleReporter",
    "InMemoryReporter",
    # Exceptions
    "WavefrontTracingError",
    "ConfigurationError",
    "ReportingError",
    "ReporterClosedError",
    # Logging
    "configure_logging",
    "get_logger",
    "set_sdk_log_level",
]
