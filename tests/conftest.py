"""Shared test fixtures."""
from __future__ import annotations

import uuid
from collections.abc import Callable, Iterator
from typing import Any

import pytest
import structlog

from wavefront_opentracing.core.span import Span
from wavefront_opentracing.core.span_context import SpanContext
from wavefront_opentracing.core.tracer import Tracer
from wavefront_opentracing.reporting.in_memory import InMemoryReporter


class RecordingTracer:
    """Stands in for :class:`Tracer`; remembers every reported span."""

    def __init__(self) -> None:
        self.reported: list[Span] = []
        self.durations: list[int] = []

    def report_span(self, span: Span) -> None:
        self.reported.append(span)
        self.durations.append(span.duration_time)


@pytest.fixture(autouse=True)
def _reset_structlog() -> Iterator[None]:
    yield
    structlog.reset_defaults()


@pytest.fixture
def recording_tracer() -> RecordingTracer:
    return RecordingTracer()


@pytest.fixture
def context() -> SpanContext:
    return SpanContext(uuid.uuid4(), uuid.uuid4())


@pytest.fixture
def make_span(
    recording_tracer: RecordingTracer, context: SpanContext
) -> Callable[..., Span]:
    def _make(**overrides: Any) -> Span:
        kwargs: dict[str, Any] = {
            "tracer": recording_tracer,
            "operation_name": "op",
            "context": context,
            "start_time": 1000,
            "parents": [],
            "follows": [],
            "tags": {},
        }
        kwargs.update(overrides)
        return Span(**kwargs)

    return _make


@pytest.fixture
def reporter() -> InMemoryReporter:
    return InMemoryReporter()


@pytest.fixture
def tracer(reporter: InMemoryReporter) -> Tracer:
    return Tracer(reporter)
