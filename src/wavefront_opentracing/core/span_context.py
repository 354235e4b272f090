"""Span context -- immutable trace/span identity plus baggage."""

from __future__ import annotations

import uuid
from collections.abc import Mapping
from typing import Any

from pydantic import BaseModel, ConfigDict, Field


def _freeze(baggage: Mapping[str, str]) -> tuple[tuple[str, str], ...]:
    return tuple(sorted(baggage.items()))


class SpanContext(BaseModel):
    """Identity of a span within a trace, together with its baggage.

    Instances never change after construction. Baggage is held as sorted
    ``(key, value)`` pairs, so the context is hashable and cannot be edited
    in place. Adding baggage returns a new context, so contexts already
    handed to child spans keep the baggage they were created with.
    """

    model_config = ConfigDict(frozen=True)

    trace_id: uuid.UUID
    span_id: uuid.UUID
    baggage_items: tuple[tuple[str, str], ...] = Field(default=(), alias="baggage")

    def __init__(
        self,
        trace_id: uuid.UUID,
        span_id: uuid.UUID,
        baggage: Mapping[str, str] | None = None,
    ) -> None:
        super().__init__(
            trace_id=trace_id,
            span_id=span_id,
            baggage=_freeze(baggage or {}),
        )

    @property
    def baggage(self) -> dict[str, str]:
        """Return the baggage as a new dict."""
        return dict(self.baggage_items)

    def get_baggage_item(self, key: str) -> str | None:
        """Return the baggage value stored under *key*, or ``None``."""
        for item_key, value in self.baggage_items:
            if item_key == key:
                return value
        return None

    def with_baggage_item(self, key: str, value: str) -> SpanContext:
        """Return a copy of this context with ``baggage[key] = value``."""
        return self.with_baggage({key: value})

    def with_baggage(self, items: Mapping[str, str]) -> SpanContext:
        """Return a copy of this context with *items* merged into its baggage."""
        baggage = self.baggage
        baggage.update(items)
        return SpanContext(self.trace_id, self.span_id, baggage)

    def to_dict(self) -> dict[str, Any]:
        return {
            "trace_id": str(self.trace_id),
            "span_id": str(self.span_id),
            "baggage": self.baggage,
        }
