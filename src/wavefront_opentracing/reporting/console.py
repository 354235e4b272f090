from __future__ import annotations

from typing import TYPE_CHECKING

import structlog

from wavefront_opentracing.reporting.base import SpanReporter

if TYPE_CHECKING:
    from wavefront_opentracing.core.span import Span

logger = structlog.get_logger(__name__)


class ConsoleReporter(SpanReporter):
    """Writes each finished span as one structured log event.

    Output goes through structlog; call
    :func:`~wavefront_opentracing.utils.logging.configure_logging` to pick
    JSON or console rendering.
    """

    def __init__(self, event: str = "span.reported") -> None:
        super().__init__()
        self._event = event

    def _report(self, span: Span) -> None:
        logger.info(self._event, **span.to_dict())
