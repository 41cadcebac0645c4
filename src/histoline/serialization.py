"""Serialization - render registered storages as Simple JSON.

The traversal lives here; each storage body renders itself through the
``Storage`` protocol. The shape helpers below encode the Simple JSON rules
so bodies produce consistent output:

    flag           -> true / false
    keyed flag     -> ["key_a", "key_b"]          (keys that were set)
    linear         -> [0, 3, 1, ...]              (one cell per bucket)
    keyed linear   -> {"key_a": [0, 3, ...], ...}

Usage:
    from histoline.serialization import serialize_to_string

    text = serialize_to_string(registry, Subset.ALL_PLAIN, SerializationFormat.SIMPLE_JSON)
"""

from __future__ import annotations

import json
from collections.abc import Iterable, Mapping, Sequence
from typing import Any

from histoline.core.config import HistolineSettings
from histoline.core.formats import SerializationFormat, Subset
from histoline.registry import StorageRegistry


def flag_to_json(value: bool) -> bool:
    return bool(value)


def keyed_flag_to_json(keys: Iterable[str]) -> list[str]:
    return sorted(keys)


def linear_to_json(counts: Sequence[int]) -> list[int]:
    return [int(count) for count in counts]


def keyed_linear_to_json(counts_by_key: Mapping[str, Sequence[int]]) -> dict[str, list[int]]:
    return {key: linear_to_json(counts) for key, counts in counts_by_key.items()}


def serialize(
    registry: StorageRegistry,
    subset: Subset,
    format: SerializationFormat,
) -> dict[str, Any]:
    """Render every storage of ``subset`` as a name -> body mapping.

    Args:
        registry: Registry to walk.
        subset: Which collection to render.
        format: Encoding flavour.

    Returns:
        JSON-compatible dict, in registration order.

    Raises:
        ValueError: If the format is not supported.
    """
    if format is not SerializationFormat.SIMPLE_JSON:
        raise ValueError(f"Unsupported serialization format: {format!r}")
    return {storage.name: storage.to_json(format) for storage in registry.iter_subset(subset)}


def serialize_to_string(
    registry: StorageRegistry,
    subset: Subset,
    format: SerializationFormat,
    indent: int | None = None,
    settings: HistolineSettings | None = None,
) -> str:
    """Serialize a subset of the registry to a JSON string.

    Without an explicit ``indent`` the output follows ``HISTOLINE_JSON_INDENT``
    (compact when unset).
    """
    if indent is None:
        indent = (settings or HistolineSettings()).json_indent
    return json.dumps(serialize(registry, subset, format), indent=indent)


__all__ = [
    "flag_to_json",
    "keyed_flag_to_json",
    "linear_to_json",
    "keyed_linear_to_json",
    "serialize",
    "serialize_to_string",
]
