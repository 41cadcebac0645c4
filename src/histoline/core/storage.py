"""Named storage - a histogram body bound to its registration name.

The body type is opaque here. Serializers only rely on the ``Storage``
protocol, so plain and keyed histogram bodies can sit side by side.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Generic, Protocol, TypeVar, runtime_checkable

from histoline.core.formats import SerializationFormat


@runtime_checkable
class Storage(Protocol):
    """A histogram body that can render itself for a serializer."""

    def to_json(self, format: SerializationFormat) -> Any:
        """Return a JSON-compatible rendering of the body."""
        ...


T = TypeVar("T", bound=Storage)


@dataclass(frozen=True, slots=True)
class NamedStorage(Generic[T]):
    """A storage body with a name attached.

    The name doubles as the registry key. Uniqueness is enforced by the
    registry, not here. ``contents`` is never rebound; the owning histogram
    mutates it in place and supplies its own locking if recording is
    concurrent.
    """

    name: str
    contents: T

    def __post_init__(self) -> None:
        if not isinstance(self.name, str) or not self.name:
            raise ValueError(f"Storage name must be a non-empty string, got {self.name!r}")

    def to_json(self, format: SerializationFormat) -> Any:
        return self.contents.to_json(format)


__all__ = ["Storage", "NamedStorage"]
