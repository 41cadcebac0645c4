"""Serialization selectors.

``Subset`` picks which collection of named storages a serializer walks;
``SerializationFormat`` picks how each storage body is encoded. Both are
plain tags with no behaviour of their own.
"""

from __future__ import annotations

from enum import Enum


class Subset(Enum):
    """Which collection of histograms to serialize."""

    ALL_PLAIN = "all_plain"
    ALL_KEYED = "all_keyed"


class SerializationFormat(Enum):
    """Encoding flavour used when rendering a storage body.

    SIMPLE_JSON:
        - flags are a single boolean
        - keyed flags are an array of the keys that were set
        - linear histograms are an array of numbers, one cell per bucket
        - keyed linear histograms are an object, key -> array as for linear
    """

    SIMPLE_JSON = "simple_json"


__all__ = ["Subset", "SerializationFormat"]
