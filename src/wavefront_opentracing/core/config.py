from __future__ import annotations

import os
from typing import Any, Literal

from pydantic import BaseModel, Field

from wavefront_opentracing.core.constants import APPLICATION_TAG_KEY, SERVICE_TAG_KEY
from wavefront_opentracing.core.exceptions import ConfigurationError


def parse_tag_list(raw: str) -> dict[str, str]:
    """Parse ``"k1=v1,k2=v2"`` into a tag mapping.

    Empty entries are ignored. An entry without ``=`` or with a blank key
    raises :class:`ConfigurationError`.
    """
    tags: dict[str, str] = {}
    for entry in raw.split(","):
        entry = entry.strip()
        if not entry:
            continue
        key, sep, value = entry.partition("=")
        if not sep or not key.strip():
            raise ConfigurationError(
                f"Malformed tag entry {entry!r}, expected key=value",
                code="INVALID_TAG",
                details={"entry": entry},
            )
        tags[key.strip()] = value.strip()
    return tags


class TracerConfig(BaseModel):
    application: str | None = None
    service: str | None = None
    global_tags: dict[str, str] = Field(default_factory=dict)
    """Tags added to every span the tracer starts."""
    log_level: Literal["DEBUG", "INFO", "WARNING", "ERROR"] = "INFO"

    def span_tags(self) -> dict[str, str]:
        """Return the tags every new span starts with.

        ``application`` and ``service`` are added as tags of the same name
        and take precedence over equally named entries in ``global_tags``.
        """
        tags = dict(self.global_tags)
        if self.application:
            tags[APPLICATION_TAG_KEY] = self.application
        if self.service:
            tags[SERVICE_TAG_KEY] = self.service
        return tags

    @classmethod
    def from_env(cls) -> TracerConfig:
        """Create a :class:`TracerConfig` from ``WAVEFRONT_*`` environment variables.

        Reads the following env vars (all optional):

        * ``WAVEFRONT_APPLICATION`` → ``application``
        * ``WAVEFRONT_SERVICE`` → ``service``
        * ``WAVEFRONT_GLOBAL_TAGS`` → ``global_tags`` (``k1=v1,k2=v2``)
        * ``WAVEFRONT_LOG_LEVEL`` → ``log_level`` (``DEBUG``, ``INFO``, ``WARNING``, ``ERROR``)

        Any variable that is not set or is empty is left at its default value.

        Raises:
            ConfigurationError: If ``WAVEFRONT_GLOBAL_TAGS`` is malformed.
        """
        kwargs: dict[str, Any] = {}

        application = os.environ.get("WAVEFRONT_APPLICATION")
        if application:
            kwargs["application"] = application

        service = os.environ.get("WAVEFRONT_SERVICE")
        if service:
            kwargs["service"] = service

        global_tags = os.environ.get("WAVEFRONT_GLOBAL_TAGS")
        if global_tags:
            kwargs["global_tags"] = parse_tag_list(global_tags)

        log_level = os.environ.get("WAVEFRONT_LOG_LEVEL")
        if log_level:
            kwargs["log_level"] = log_level.upper()

        return cls(**kwargs)
