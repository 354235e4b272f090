from __future__ import annotations

import threading
from typing import TYPE_CHECKING

from wavefront_opentracing.reporting.base import SpanReporter

if TYPE_CHECKING:
    from wavefront_opentracing.core.span import Span


class InMemoryReporter(SpanReporter):
    """Keeps every reported span in a list, in reporting order."""

    def __init__(self) -> None:
        super().__init__()
        self._spans: list[Span] = []
        self._spans_lock = threading.Lock()

    def _report(self, span: Span) -> None:
        with self._spans_lock:
            self._spans.append(span)

    def get_spans(self) -> list[Span]:
        """Return the spans reported so far."""
        with self._spans_lock:
            return list(self._spans)

    def clear(self) -> None:
        """Discard all collected spans."""
        with self._spans_lock:
            self._spans.clear()
