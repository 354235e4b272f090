"""Wavefront span -- a single timed unit of work within a distributed trace."""

from __future__ import annotations

import threading
import time
import uuid
from collections.abc import Mapping, Sequence
from datetime import datetime
from types import TracebackType
from typing import TYPE_CHECKING, Any, Union

import structlog

from wavefront_opentracing.core.constants import ERROR_TAG_KEY
from wavefront_opentracing.core.span_context import SpanContext

if TYPE_CHECKING:
    from wavefront_opentracing.core.tracer import Tracer

logger = structlog.get_logger(__name__)

Timestamp = Union[int, float, datetime]


def to_epoch_seconds(timestamp: Timestamp) -> int:
    """Truncate *timestamp* to whole epoch seconds."""
    if isinstance(timestamp, datetime):
        return int(timestamp.timestamp())
    return int(timestamp)


def _is_blank(value: str | None) -> bool:
    return value is None or not str(value).strip()


class Span:
    """A span of a trace, mutable until it is finished.

    Tags, the operation name, and the baggage-carrying context may be changed
    from several threads while the span is open. All of them, together with
    the finished flag and the duration, are guarded by one lock owned by the
    span. :meth:`finish` reports the span to its tracer exactly once; later
    calls are no-ops.

    Args:
        tracer: Tracer that created this span. Only used to report it.
        operation_name: Name of the operation this span represents.
        context: The span's :class:`SpanContext`.
        start_time: Start of the span, as epoch seconds or a ``datetime``.
        parents: Span ids of the spans this span is a child of.
        follows: Span ids of the spans this span follows from.
        tags: Initial tags of the span.
    """

    def __init__(
        self,
        tracer: Tracer,
        operation_name: str,
        context: SpanContext,
        start_time: Timestamp,
        parents: Sequence[uuid.UUID] | None = None,
        follows: Sequence[uuid.UUID] | None = None,
        tags: Mapping[str, str] | None = None,
    ) -> None:
        self._tracer = tracer
        self._operation_name = operation_name
        self._context = context
        self._start_time = to_epoch_seconds(start_time)
        self._duration_time = 0
        self._parents: list[uuid.UUID] = list(parents or [])
        self._follows: list[uuid.UUID] = list(follows or [])
        self._tags: dict[str, str] = dict(tags or {})
        self._finished = False
        self._update_lock = threading.Lock()

    # ------------------------------------------------------------------
    # Read-only state
    # ------------------------------------------------------------------

    @property
    def operation_name(self) -> str:
        with self._update_lock:
            return self._operation_name

    @property
    def context(self) -> SpanContext:
        with self._update_lock:
            return self._context

    @property
    def start_time(self) -> int:
        return self._start_time

    @property
    def duration_time(self) -> int:
        """Duration in whole seconds; ``0`` until the span is finished."""
        with self._update_lock:
            return self._duration_time

    @property
    def finished(self) -> bool:
        with self._update_lock:
            return self._finished

    @property
    def parents(self) -> list[uuid.UUID]:
        return list(self._parents)

    @property
    def follows(self) -> list[uuid.UUID]:
        return list(self._follows)

    @property
    def tags(self) -> dict[str, str]:
        return self.get_tags_as_map()

    @property
    def tracer(self) -> Tracer:
        return self._tracer

    @property
    def trace_id(self) -> uuid.UUID:
        return self.context.trace_id

    @property
    def span_id(self) -> uuid.UUID:
        return self.context.span_id

    # ------------------------------------------------------------------
    # Mutation
    # ------------------------------------------------------------------

    def set_tag(self, key: str | None, value: Any) -> Span:
        """Set a tag on the span.

        *value* is stored as its string form (``None`` becomes ``""``). The
        write is skipped only when *key* is blank and *value* is ``None`` or
        ``False``.
        """
        if _is_blank(key) and (value is None or value is False):
            return self
        tag_value = "" if value is None else str(value)
        with self._update_lock:
            self._tags[key] = tag_value  # type: ignore[index]
        return self

    def set_operation_name(self, operation_name: str) -> Span:
        with self._update_lock:
            self._operation_name = operation_name
        return self

    def set_baggage_item(self, key: str, value: str) -> Span:
        """Replace the span's context with one carrying the extra baggage item."""
        context_with_baggage = self.context.with_baggage_item(key, value)
        with self._update_lock:
            self._context = context_with_baggage
        return self

    def get_baggage_item(self, key: str) -> str | None:
        return self.context.get_baggage_item(key)

    # ------------------------------------------------------------------
    # Lifecycle
    # ------------------------------------------------------------------

    def finish(self, end_time: Timestamp | None = None) -> None:
        """Finish the span and report it to the tracer.

        Args:
            end_time: Explicit finish time. Defaults to now. An end time
                before the start time yields a negative duration, which is
                recorded as-is.
        """
        if end_time is not None:
            self._do_finish(to_epoch_seconds(end_time) - self._start_time)
        else:
            self._do_finish(int(time.time()) - self._start_time)

    def _do_finish(self, duration_time: int) -> None:
        with self._update_lock:
            if self._finished:
                return
            self._duration_time = duration_time
            self._finished = True
            span_id = self._context.span_id
        logger.debug(
            "span.finished",
            span_id=str(span_id),
            duration_time=duration_time,
        )
        # The reporter may block; it must never run while the lock is held.
        self._tracer.report_span(self)

    def __enter__(self) -> Span:
        return self

    def __exit__(
        self,
        exc_type: type[BaseException] | None,
        exc_val: BaseException | None,
        exc_tb: TracebackType | None,
    ) -> None:
        if exc_type is not None:
            self.set_tag(ERROR_TAG_KEY, "true")
            self.set_tag("error.kind", exc_type.__name__)
        self.finish()

    # ------------------------------------------------------------------
    # Projections
    # ------------------------------------------------------------------

    def get_tags_as_list(self) -> list[tuple[str, str]]:
        """Return the tags as ``(key, value)`` pairs in insertion order."""
        with self._update_lock:
            if not self._tags:
                return []
            return list(self._tags.items())

    def get_tags_as_map(self) -> dict[str, str]:
        """Return a copy of the tags mapping."""
        with self._update_lock:
            return dict(self._tags)

    def to_dict(self) -> dict[str, Any]:
        """Serialise the span to a plain dictionary."""
        with self._update_lock:
            context = self._context
            return {
                "operation_name": self._operation_name,
                "trace_id": str(context.trace_id),
                "span_id": str(context.span_id),
                "parents": [str(p) for p in self._parents],
                "follows": [str(f) for f in self._follows],
                "start_time": self._start_time,
                "duration_time": self._duration_time,
                "finished": self._finished,
                "tags": dict(self._tags),
                "baggage": context.baggage,
            }

    def __repr__(self) -> str:
        return (
            f"Span(operation_name={self._operation_name!r}, "
            f"span_id={self._context.span_id}, finished={self._finished})"
        )
