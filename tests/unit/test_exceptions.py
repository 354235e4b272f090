"""Tests for core/exceptions.py."""
from __future__ import annotations

import pytest

from wavefront_opentracing.core.exceptions import (
    ConfigurationError,
    ReporterClosedError,
    ReportingError,
    WavefrontTracingError,
)


def test_base_exception_message() -> None:
    exc = WavefrontTracingError("something went wrong")
    assert str(exc) == "something went wrong"
    assert exc.code is None
    assert exc.details == {}


def test_base_exception_code_and_details() -> None:
    exc = WavefrontTracingError("msg", code="X", details={"k": "v"})
    assert exc.code == "X"
    assert exc.details == {"k": "v"}


@pytest.mark.parametrize(
    "exc_class", [ConfigurationError, ReportingError, ReporterClosedError]
)
def test_subclasses_inherit_base(exc_class: type[WavefrontTracingError]) -> None:
    assert issubclass(exc_class, WavefrontTracingError)
    with pytest.raises(WavefrontTracingError):
        raise exc_class("boom")


def test_reporter_closed_is_reporting_error() -> None:
    assert issubclass(ReporterClosedError, ReportingError)
