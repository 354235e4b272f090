from __future__ import annotations

from typing import TYPE_CHECKING

import structlog

from wavefront_opentracing.core.exceptions import ReportingError
from wavefront_opentracing.reporting.base import SpanReporter

if TYPE_CHECKING:
    from wavefront_opentracing.core.span import Span

logger = structlog.get_logger(__name__)


class CompositeReporter(SpanReporter):
    """Fans every span out to several reporters.

    A delegate that raises does not stop the others from receiving the span.
    Once every delegate has been tried, the failures are raised together as
    a single :class:`ReportingError`.
    """

    def __init__(self, *reporters: SpanReporter) -> None:
        super().__init__()
        self._reporters = list(reporters)

    @property
    def reporters(self) -> list[SpanReporter]:
        return list(self._reporters)

    def report(self, span: Span) -> None:
        # Failures are counted per delegate in _report, not once by the base.
        self._ensure_open(span)
        self._report(span)

    def _report(self, span: Span) -> None:
        failures: list[dict[str, str]] = []
        for reporter in self._reporters:
            try:
                reporter.report(span)
            except Exception as exc:
                logger.warning(
                    "reporter.failed",
                    reporter=type(reporter).__name__,
                    span_id=str(span.span_id),
                    error=str(exc),
                )
                failures.append({"reporter": type(reporter).__name__, "error": str(exc)})
        if failures:
            self._record_failure(len(failures))
            raise ReportingError(
                f"{len(failures)} of {len(self._reporters)} reporters failed",
                code="REPORT_FAILED",
                details={"failures": failures},
            )

    def close(self) -> None:
        for reporter in self._reporters:
            reporter.close()
        super().close()
