"""Preallocation helpers for bucket arrays.

Histogram bodies size their per-bucket arrays once, at construction. These
helpers grow a list to a target length with copies of a fill value, without
requiring the element type to have a zero/default value.

The list length only ever covers fully initialized slots: slots are appended
one at a time, so if copying the fill value raises partway the exception
propagates and the list keeps exactly the slots appended so far.
"""

from __future__ import annotations

import copy
from typing import TypeVar

T = TypeVar("T")


def resize_to(buffer: list[T], min_len: int, fill_value: T) -> None:
    """Grow ``buffer`` in place until it holds at least ``min_len`` items.

    New slots receive deep copies of ``fill_value``; the final slot receives
    ``fill_value`` itself. No-op if the buffer is already long enough.

    Args:
        buffer: List to grow.
        min_len: Target minimum length.
        fill_value: Value placed in every new slot.

    Raises:
        ValueError: If min_len is negative.
    """
    if min_len < 0:
        raise ValueError(f"min_len must be non-negative, got {min_len}")
    delta = min_len - len(buffer)
    if delta <= 0:
        return
    for _ in range(delta - 1):
        buffer.append(copy.deepcopy(fill_value))
    buffer.append(fill_value)


def with_size(size: int, fill_value: T) -> list[T]:
    """Allocate a new list of exactly ``size`` copies of ``fill_value``."""
    if size < 0:
        raise ValueError(f"size must be non-negative, got {size}")
    buffer: list[T] = []
    resize_to(buffer, size, fill_value)
    return buffer


__all__ = ["resize_to", "with_size"]
