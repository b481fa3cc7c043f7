"""Blur event models for callers that want a typed event object.

Any object exposing ``target.name`` and ``target.value`` is accepted by the
engine; these models are a convenience, not a requirement.
"""

from typing import Any, Optional

from pydantic import BaseModel


class EventTarget(BaseModel):
    """The input element an event originated from."""

    name: Optional[str] = None
    value: Any = None


class BlurEvent(BaseModel):
    """A blur event carrying its target input."""

    type: str = "blur"
    target: EventTarget
