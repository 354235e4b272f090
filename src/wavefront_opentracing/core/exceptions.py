from __future__ import annotations

from typing import Any


class WavefrontTracingError(Exception):
    """Base exception for all Wavefront OpenTracing SDK errors.

    Attributes:
        code: Optional machine-readable error code (e.g. ``"REPORTER_CLOSED"``).
        details: Arbitrary key/value context about the error.
    """

    def __init__(
        self,
        message: str,
        code: str | None = None,
        details: dict[str, Any] | None = None,
    ) -> None:
        super().__init__(message)
        self.code = code
        self.details = details or {}


class ConfigurationError(WavefrontTracingError): ...


class ReportingError(WavefrontTracingError):
    """One or more reporters failed to accept a finished span.

    ``details["failures"]`` lists one ``{"reporter": ..., "error": ...}``
    entry per reporter that raised.
    """


class ReporterClosedError(ReportingError):
    """A span was handed to a reporter (or tracer) that has been closed."""
