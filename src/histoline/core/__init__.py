"""Core primitives for histoline.

Contains the bucket-mapping math, sample flattening, bucket array
preallocation, the named storage container and the serialization
selectors. Histogram implementations build on these; none of them
record samples themselves.
"""

from .buckets import BucketConfigurationError, LinearBuckets
from .buffers import resize_to, with_size
from .config import HistolineSettings, configure_logging
from .flatten import U32_MAX, Flatten, FlattenError, as_u32
from .formats import SerializationFormat, Subset
from .storage import NamedStorage, Storage

__all__ = [
    "BucketConfigurationError",
    "LinearBuckets",
    "resize_to",
    "with_size",
    "HistolineSettings",
    "configure_logging",
    "U32_MAX",
    "Flatten",
    "FlattenError",
    "as_u32",
    "SerializationFormat",
    "Subset",
    "NamedStorage",
    "Storage",
]
