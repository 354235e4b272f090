from wavefront_opentracing.reporting.base import SpanReporter
from wavefront_opentracing.reporting.composite import CompositeReporter
from wavefront_opentracing.reporting.console import ConsoleReporter
from wavefront_opentracing.reporting.in_memory import InMemoryReporter

__all__ = ["CompositeReporter", "ConsoleReporter", "InMemoryReporter", "SpanReporter"]
