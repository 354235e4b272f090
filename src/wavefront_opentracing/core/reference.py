"""Causal references between spans (child-of / follows-from)."""

from __future__ import annotations

from typing import TYPE_CHECKING, Union

from pydantic import BaseModel, ConfigDict

from wavefront_opentracing.core.constants import ReferenceType
from wavefront_opentracing.core.span_context import SpanContext

if TYPE_CHECKING:
    from wavefront_opentracing.core.span import Span


class Reference(BaseModel):
    model_config = ConfigDict(frozen=True)

    type: ReferenceType
    referenced_context: SpanContext


def _context_of(target: Union[Span, SpanContext]) -> SpanContext:
    if isinstance(target, SpanContext):
        return target
    return target.context


def child_of(target: Union[Span, SpanContext]) -> Reference:
    """Build a CHILD_OF reference to *target* (a span or its context)."""
    return Reference(type=ReferenceType.CHILD_OF, referenced_context=_context_of(target))


def follows_from(target: Union[Span, SpanContext]) -> Reference:
    """Build a FOLLOWS_FROM reference to *target* (a span or its context)."""
    return Reference(
        type=ReferenceType.FOLLOWS_FROM, referenced_context=_context_of(target)
    )
