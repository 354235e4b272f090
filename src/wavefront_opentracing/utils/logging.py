from __future__ import annotations

import logging
import sys
from typing import IO, Any, cast

import structlog

SDK_LOGGER_NAME = "wavefront_opentracing"


def configure_logging(
    level: str = "INFO",
    json: bool = True,
    stream: IO[str] | None = None,
) -> None:
    """Configure structlog output for the Wavefront OpenTracing SDK.

    This is an opt-in for applications that have no structlog setup of their
    own: it calls :func:`structlog.configure`, which replaces the processors
    and logger factory of every structlog logger in the process. The stdlib
    handler is installed on the ``wavefront_opentracing`` logger only, so the
    application's root logger is left alone. Reporter output (for example
    :class:`~wavefront_opentracing.reporting.ConsoleReporter`) flows through
    that handler.

    Args:
        level: Standard logging level string, e.g. "DEBUG", "INFO", "WARNING".
        json: If True, render log entries as JSON. If False, use coloured console output.
        stream: Destination for rendered entries. Defaults to ``sys.stdout``.
    """
    log_level = getattr(logging, level.upper(), logging.INFO)

    shared_processors: list[structlog.types.Processor] = [
        structlog.contextvars.merge_contextvars,
        structlog.stdlib.add_logger_name,
        structlog.stdlib.add_log_level,
        structlog.processors.TimeStamper(fmt="iso"),
        structlog.processors.StackInfoRenderer(),
    ]

    if json:
        renderer: structlog.types.Processor = structlog.processors.JSONRenderer()
    else:
        renderer = structlog.dev.ConsoleRenderer(colors=False)

    structlog.configure(
        processors=shared_processors
        + [
            structlog.stdlib.ProcessorFormatter.wrap_for_formatter,
        ],
        context_class=dict,
        logger_factory=structlog.stdlib.LoggerFactory(),
        wrapper_class=structlog.stdlib.BoundLogger,
        cache_logger_on_first_use=False,
    )

    formatter = structlog.stdlib.ProcessorFormatter(
        processors=[
            structlog.stdlib.ProcessorFormatter.remove_processors_meta,
            renderer,
        ],
        foreign_pre_chain=shared_processors,
    )

    handler = logging.StreamHandler(stream or sys.stdout)
    handler.setFormatter(formatter)

    sdk_logger = logging.getLogger(SDK_LOGGER_NAME)
    # Re-configuring replaces the previous handler instead of stacking another.
    sdk_logger.handlers.clear()
    sdk_logger.addHandler(handler)
    sdk_logger.setLevel(log_level)
    sdk_logger.propagate = False


def set_sdk_log_level(level: str) -> None:
    """Set the stdlib level of the ``wavefront_opentracing`` logger hierarchy.

    Unlike :func:`configure_logging`, structlog's global configuration is
    left untouched.
    """
    logging.getLogger(SDK_LOGGER_NAME).setLevel(
        getattr(logging, level.upper(), logging.INFO)
    )


def get_logger(name: str, **initial_values: Any) -> structlog.stdlib.BoundLogger:
    """Return a named structlog logger, optionally pre-bound with context.

    Args:
        name: Logger name, typically ``__name__`` of the calling module.
        **initial_values: Key/value pairs bound to every event of this logger.

    Returns:
        A structlog BoundLogger bound to *name*.
    """
    return cast(
        structlog.stdlib.BoundLogger,
        structlog.get_logger(name, **initial_values),
    )
