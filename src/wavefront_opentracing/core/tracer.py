"""Tracer -- creates spans and hands finished spans to a reporter."""

from __future__ import annotations

import threading
import time
import uuid
from collections.abc import Mapping, Sequence
from types import TracebackType
from typing import Any, Union

import structlog

from wavefront_opentracing.core.config import TracerConfig
from wavefront_opentracing.core.constants import ReferenceType
from wavefront_opentracing.core.exceptions import ReporterClosedError
from wavefront_opentracing.core.reference import Reference, child_of as child_of_reference
from wavefront_opentracing.core.span import Span, Timestamp
from wavefront_opentracing.core.span_context import SpanContext
from wavefront_opentracing.reporting.base import SpanReporter
from wavefront_opentracing.utils.logging import set_sdk_log_level

logger = structlog.get_logger(__name__)


class Tracer:
    """Starts :class:`Span` objects and reports them once they finish.

    Usage::

        tracer = Tracer(InMemoryReporter(), TracerConfig(application="shop"))
        root = tracer.start_span("checkout")
        child = tracer.start_span("charge_card", child_of=root, tags={"amount": 42})
        child.finish()
        root.finish()
    """

    def __init__(
        self,
        reporter: SpanReporter,
        config: TracerConfig | None = None,
    ) -> None:
        self._reporter = reporter
        self._config = config or TracerConfig()
        self._global_tags = self._config.span_tags()
        self._closed = False
        self._close_lock = threading.Lock()

    @classmethod
    def from_env(cls, reporter: SpanReporter) -> Tracer:
        """Build a tracer from ``WAVEFRONT_*`` environment variables.

        Sets the level of the SDK's stdlib loggers to ``log_level``. Call
        :func:`~wavefront_opentracing.utils.logging.configure_logging`
        separately to have the SDK install its own structlog pipeline.
        """
        config = TracerConfig.from_env()
        set_sdk_log_level(config.log_level)
        return cls(reporter, config)

    @property
    def reporter(self) -> SpanReporter:
        return self._reporter

    @property
    def config(self) -> TracerConfig:
        return self._config

    @property
    def closed(self) -> bool:
        with self._close_lock:
            return self._closed

    def start_span(
        self,
        operation_name: str,
        child_of: Union[Span, SpanContext, None] = None,
        references: Sequence[Reference] | None = None,
        tags: Mapping[str, Any] | None = None,
        start_time: Timestamp | None = None,
    ) -> Span:
        """Create a new span.

        Parameters
        ----------
        operation_name:
            Name of the operation the span represents.
        child_of:
            Optional parent span or context; shorthand for a CHILD_OF
            reference placed before *references*.
        references:
            CHILD_OF / FOLLOWS_FROM references. The span joins the trace of
            the first referenced context and inherits the baggage of all of
            them (later references win on conflicting keys).
        tags:
            Initial tags, string-coerced. They override the tracer's global
            tags on conflicting keys.
        start_time:
            Explicit start time; defaults to now.
        """
        all_references: list[Reference] = []
        if child_of is not None:
            all_references.append(child_of_reference(child_of))
        all_references.extend(references or [])

        parents: list[uuid.UUID] = []
        follows: list[uuid.UUID] = []
        baggage: dict[str, str] = {}
        for reference in all_references:
            referenced = reference.referenced_context
            if reference.type == ReferenceType.CHILD_OF:
                parents.append(referenced.span_id)
            else:
                follows.append(referenced.span_id)
            baggage.update(referenced.baggage)

        if all_references:
            trace_id = all_references[0].referenced_context.trace_id
        else:
            trace_id = uuid.uuid4()
        context = SpanContext(trace_id, uuid.uuid4(), baggage)

        span_tags = dict(self._global_tags)
        for key, value in (tags or {}).items():
            span_tags[key] = "" if value is None else str(value)

        span = Span(
            tracer=self,
            operation_name=operation_name,
            context=context,
            start_time=start_time if start_time is not None else time.time(),
            parents=parents,
            follows=follows,
            tags=span_tags,
        )
        logger.debug(
            "span.started",
            operation_name=operation_name,
            trace_id=str(trace_id),
            span_id=str(context.span_id),
        )
        return span

    def report_span(self, span: Span) -> None:
        """Hand a finished span to the reporter.

        Raises:
            ReporterClosedError: If the tracer has been closed.
        """
        if self.closed:
            raise ReporterClosedError(
                "Tracer is closed",
                code="TRACER_CLOSED",
                details={"span_id": str(span.span_id)},
            )
        self._reporter.report(span)
        logger.debug(
            "tracer.span_reported",
            operation_name=span.operation_name,
            span_id=str(span.span_id),
            duration_time=span.duration_time,
        )

    def close(self) -> None:
        """Close the tracer and its reporter. Further calls are no-ops."""
        with self._close_lock:
            if self._closed:
                return
            self._closed = True
        self._reporter.close()
        logger.debug("tracer.closed", reporter=type(self._reporter).__name__)

    def __enter__(self) -> Tracer:
        return self

    def __exit__(
        self,
        exc_type: type[BaseException] | None,
        exc_val: BaseException | None,
        exc_tb: TracebackType | None,
    ) -> None:
        self.close()
