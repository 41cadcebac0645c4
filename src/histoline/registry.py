"""Storage registry - named histogram storages indexed by name.

Keeps one insertion-ordered collection per ``Subset`` so a serializer can
walk all plain or all keyed histograms. Names are unique across the whole
registry.

Usage:
    from histoline.registry import StorageRegistry

    registry = StorageRegistry()
    registry.register(NamedStorage("GC_MS", body), Subset.ALL_PLAIN)
    for storage in registry.iter_subset(Subset.ALL_PLAIN):
        ...

Not thread-safe: callers that register from several threads must lock.
"""

from __future__ import annotations

import logging
from collections.abc import Iterator

from histoline.core.formats import Subset
from histoline.core.storage import NamedStorage

_logger = logging.getLogger(__name__)


class DuplicateNameError(ValueError):
    """Raised when registering a name that is already present."""

    pass


class StorageRegistry:
    """In-memory registry of named histogram storages."""

    def __init__(self) -> None:
        self._by_subset: dict[Subset, dict[str, NamedStorage]] = {
            subset: {} for subset in Subset
        }

    def register(self, storage: NamedStorage, subset: Subset) -> NamedStorage:
        """Add a storage under ``subset``.

        Raises:
            DuplicateNameError: If the name is already registered.
        """
        existing = self.subset_of(storage.name)
        if existing is not None:
            raise DuplicateNameError(
                f"Histogram name '{storage.name}' is already registered ({existing.value})"
            )
        self._by_subset[subset][storage.name] = storage
        _logger.debug(f"Registered histogram '{storage.name}' under {subset.value}")
        return storage

    def unregister(self, name: str) -> NamedStorage:
        """Remove and return the storage called ``name``.

        Raises:
            KeyError: If no storage has that name.
        """
        subset = self.subset_of(name)
        if subset is None:
            raise KeyError(name)
        storage = self._by_subset[subset].pop(name)
        _logger.debug(f"Unregistered histogram '{name}' from {subset.value}")
        return storage

    def get(self, name: str) -> NamedStorage | None:
        for storages in self._by_subset.values():
            if name in storages:
                return storages[name]
        return None

    def subset_of(self, name: str) -> Subset | None:
        for subset, storages in self._by_subset.items():
            if name in storages:
                return subset
        return None

    def names(self, subset: Subset) -> list[str]:
        return list(self._by_subset[subset])

    def iter_subset(self, subset: Subset) -> Iterator[NamedStorage]:
        yield from list(self._by_subset[subset].values())

    def clear(self) -> None:
        for storages in self._by_subset.values():
            storages.clear()

    def __contains__(self, name: object) -> bool:
        return isinstance(name, str) and self.subset_of(name) is not None

    def __len__(self) -> int:
        return sum(len(storages) for storages in self._by_subset.values())


__all__ = ["DuplicateNameError", "StorageRegistry"]
