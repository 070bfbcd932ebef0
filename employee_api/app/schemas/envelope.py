"""
Found / not‑found result wrapper.

Lookups that may legitimately come back empty return an ``Envelope``
instead of raising: either ``Found(value)`` or the ``NOT_FOUND``
singleton.  The HTTP layer decides how each state is rendered.
"""

from dataclasses import dataclass
from typing import Generic, TypeVar, Union

T = TypeVar("T")


@dataclass(frozen=True)
class Found(Generic[T]):
    """A lookup that produced a value."""

    value: T


@dataclass(frozen=True)
class NotFound:
    """A lookup that produced nothing."""


NOT_FOUND = NotFound()

Envelope = Union[Found[T], NotFound]


def is_found(envelope: "Envelope[T]") -> bool:
    return isinstance(envelope, Found)
