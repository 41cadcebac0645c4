"""Linear bucket layout shared by plain and keyed linear histograms.

A ``LinearBuckets`` splits the half-open range [min, max) into ``buckets``
equal-width slots. Samples at or below ``min`` land in the first bucket and
samples at or above ``max`` land in the last one, so every u32 maps to a
valid index.

Interpolation runs in single precision (numpy.float32) and truncates toward
zero. A sample sitting exactly on an internal boundary may land on either
side of it depending on float32 rounding; that is the existing numeric
behaviour and is kept as-is.
"""

from __future__ import annotations

import numpy as np

from histoline.core.flatten import U32_MAX


class BucketConfigurationError(ValueError):
    """Raised for a bucket layout that violates min < max, 0 < buckets < max - min.

    This signals a broken histogram definition, not a runtime condition.
    Callers are not expected to recover from it.
    """

    pass


class LinearBuckets:
    """Immutable linear bucket layout.

    Attributes:
        min: Lower bound of the range (u32).
        max: Upper bound of the range (u32), strictly greater than min.
        buckets: Number of buckets, 0 < buckets < max - min.
    """

    __slots__ = ("_min", "_max", "_buckets")

    def __init__(self, min: int, max: int, buckets: int) -> None:
        for label, bound in (("min", min), ("max", max)):
            if isinstance(bound, bool) or not isinstance(bound, int):
                raise BucketConfigurationError(
                    f"{label} must be an int, got {type(bound).__name__}"
                )
            if not 0 <= bound <= U32_MAX:
                raise BucketConfigurationError(
                    f"{label} must be in u32 range [0, {U32_MAX}], got {bound}"
                )
        if isinstance(buckets, bool) or not isinstance(buckets, int):
            raise BucketConfigurationError(
                f"buckets must be an int, got {type(buckets).__name__}"
            )
        if min >= max:
            raise BucketConfigurationError(f"min must be < max, got min={min}, max={max}")
        if buckets <= 0:
            raise BucketConfigurationError(f"buckets must be positive, got {buckets}")
        if buckets >= max - min:
            raise BucketConfigurationError(
                f"buckets must be < max - min ({max - min}), got {buckets}"
            )
        self._min = min
        self._max = max
        self._buckets = buckets

    @property
    def min(self) -> int:
        return self._min

    @property
    def max(self) -> int:
        return self._max

    @property
    def buckets(self) -> int:
        return self._buckets

    def get_bucket(self, value: int) -> int:
        """Map a raw sample to a bucket index in [0, buckets).

        Args:
            value: Raw sample value.

        Returns:
            Bucket index. Out-of-range samples clamp to the first/last bucket.
        """
        if value <= self._min:
            return 0
        if value >= self._max:
            return self._buckets - 1
        num = np.float32(value) - np.float32(self._min)
        den = np.float32(self._max) - np.float32(self._min)
        res = (num / den) * np.float32(self._buckets)
        # float32 slop can push a value just under max onto the upper edge
        return min(int(res), self._buckets - 1)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, LinearBuckets):
            return NotImplemented
        return (self._min, self._max, self._buckets) == (
            other._min,
            other._max,
            other._buckets,
        )

    def __hash__(self) -> int:
        return hash((self._min, self._max, self._buckets))

    def __repr__(self) -> str:
        return f"LinearBuckets(min={self._min}, max={self._max}, buckets={self._buckets})"


__all__ = ["BucketConfigurationError", "LinearBuckets"]
