"""Flatten - Normalize recorded samples into u32 count contributions.

Histograms record heterogeneous sample kinds (flags, unit events, counters)
but every bucket stores a single unsigned 32-bit count. ``as_u32`` is the one
place that conversion happens.

Built-in mappings:
    None  -> 0        (unit event, no payload)
    bool  -> 1 / 0
    int   -> identity (must fit in u32)

Usage:
    from histoline.core.flatten import as_u32

    as_u32(True)   # 1
    as_u32(None)   # 0
    as_u32(42)     # 42

New sample kinds either implement the ``Flatten`` protocol (an ``as_u32()``
method) or register a converter with ``as_u32.register``.
"""

from __future__ import annotations

from functools import singledispatch
from typing import Any, Protocol, runtime_checkable

U32_MAX = 2**32 - 1


class FlattenError(ValueError):
    """Raised when a value cannot be flattened into a u32 count."""

    pass


@runtime_checkable
class Flatten(Protocol):
    """A sample kind that knows its own u32 contribution."""

    def as_u32(self) -> int: ...


@singledispatch
def as_u32(value: Any) -> int:
    """Return the u32 count contribution of a single sample.

    Args:
        value: A recorded sample.

    Returns:
        Integer in [0, U32_MAX].

    Raises:
        FlattenError: If the sample kind has no mapping or the result
            does not fit in a u32.
    """
    if isinstance(value, Flatten):
        return _check_u32(value.as_u32(), value)
    raise FlattenError(f"Cannot flatten sample of type {type(value).__name__}")


@as_u32.register(type(None))
def _(value: None) -> int:
    return 0


@as_u32.register(bool)
def _(value: bool) -> int:
    return 1 if value else 0


@as_u32.register(int)
def _(value: int) -> int:
    return _check_u32(value, value)


def _check_u32(result: int, value: Any) -> int:
    if isinstance(result, bool) or not isinstance(result, int):
        raise FlattenError(
            f"Flattened value of {value!r} must be an int, got {type(result).__name__}"
        )
    if not 0 <= result <= U32_MAX:
        raise FlattenError(f"Value {result} is out of u32 range [0, {U32_MAX}]")
    return result


__all__ = ["U32_MAX", "Flatten", "FlattenError", "as_u32"]
