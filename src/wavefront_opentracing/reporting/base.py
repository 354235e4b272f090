"""Span reporter interface."""

from __future__ import annotations

import threading
from abc import ABC, abstractmethod
from typing import TYPE_CHECKING

from wavefront_opentracing.core.exceptions import ReporterClosedError

if TYPE_CHECKING:
    from wavefront_opentracing.core.span import Span


class SpanReporter(ABC):
    """Receives finished spans from a tracer.

    Subclasses implement :meth:`_report`. :meth:`report` rejects spans once
    the reporter is closed and counts failures raised by :meth:`_report`
    before re-raising them.
    """

    def __init__(self) -> None:
        self._state_lock = threading.Lock()
        self._closed = False
        self._failure_count = 0

    @property
    def closed(self) -> bool:
        with self._state_lock:
            return self._closed

    @property
    def failure_count(self) -> int:
        """Number of spans this reporter failed to handle."""
        with self._state_lock:
            return self._failure_count

    def report(self, span: Span) -> None:
        self._ensure_open(span)
        try:
            self._report(span)
        except Exception:
            self._record_failure()
            raise

    @abstractmethod
    def _report(self, span: Span) -> None: ...

    def close(self) -> None:
        with self._state_lock:
            self._closed = True

    def _ensure_open(self, span: Span) -> None:
        if self.closed:
            raise ReporterClosedError(
                f"{type(self).__name__} is closed",
                code="REPORTER_CLOSED",
                details={"span_id": str(span.span_id)},
            )

    def _record_failure(self, count: int = 1) -> None:
        with self._state_lock:
            self._failure_count += count
