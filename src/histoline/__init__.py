"""Histoline - Numeric and storage primitives for telemetry histograms.

Maps raw samples into fixed linear buckets and keeps histogram bodies
under unique names for serialization.

Subpackages:
- core: bucket math, sample flattening, buffers, named storage, selectors
- catalog: YAML histogram definitions
- registry: name-indexed storage collections
- serialization: Simple JSON rendering
"""

__version__ = "1.0.0"

# Re-export key types for convenience
from histoline.core import (
    LinearBuckets,
    NamedStorage,
    SerializationFormat,
    Subset,
    as_u32,
)
from histoline.registry import DuplicateNameError, StorageRegistry

__all__ = [
    "LinearBuckets",
    "NamedStorage",
    "SerializationFormat",
    "Subset",
    "as_u32",
    "DuplicateNameError",
    "StorageRegistry",
]
