"""Shared pytest fixtures and configuration.

This file is automatically loaded by pytest and provides fixtures
accessible to all tests.
"""

import os
from pathlib import Path

import pytest
from hypothesis import HealthCheck, settings

from histoline.core.buckets import LinearBuckets
from histoline.core.buffers import with_size
from histoline.core.formats import SerializationFormat
from histoline.serialization import flag_to_json, keyed_linear_to_json, linear_to_json

# =============================================================================
# Hypothesis Configuration
# =============================================================================

settings.register_profile(
    "ci",
    max_examples=50,
    deadline=None,
    suppress_health_check=[HealthCheck.too_slow],
)

settings.register_profile(
    "dev",
    max_examples=10,
    deadline=500,
)

settings.register_profile(
    "thorough",
    max_examples=1000,
    deadline=None,
)

settings.load_profile(os.getenv("HYPOTHESIS_PROFILE", "dev"))


# =============================================================================
# Storage Bodies
# =============================================================================


class FlagBody:
    """Minimal flag histogram body."""

    def __init__(self) -> None:
        self.value = False

    def to_json(self, format: SerializationFormat) -> bool:
        return flag_to_json(self.value)


class LinearBody:
    """Minimal linear histogram body backed by a preallocated count array."""

    def __init__(self, buckets: LinearBuckets) -> None:
        self.buckets = buckets
        self.counts = with_size(buckets.buckets, 0)

    def record(self, value: int) -> None:
        self.counts[self.buckets.get_bucket(value)] += 1

    def to_json(self, format: SerializationFormat) -> list[int]:
        return linear_to_json(self.counts)


class KeyedLinearBody:
    """Minimal keyed linear histogram body."""

    def __init__(self, buckets: LinearBuckets) -> None:
        self.buckets = buckets
        self.counts: dict[str, list[int]] = {}

    def record(self, key: str, value: int) -> None:
        counts = self.counts.setdefault(key, with_size(self.buckets.buckets, 0))
        counts[self.buckets.get_bucket(value)] += 1

    def to_json(self, format: SerializationFormat) -> dict[str, list[int]]:
        return keyed_linear_to_json(self.counts)


@pytest.fixture
def flag_body() -> FlagBody:
    return FlagBody()


@pytest.fixture
def linear_body() -> LinearBody:
    return LinearBody(LinearBuckets(0, 100, 10))


@pytest.fixture
def keyed_linear_body() -> KeyedLinearBody:
    return KeyedLinearBody(LinearBuckets(0, 100, 10))


# =============================================================================
# Temporary Workspace Fixtures
# =============================================================================

@pytest.fixture
def temp_workspace(tmp_path: Path) -> Path:
    """Provide isolated temporary directory for test."""
    workspace = tmp_path / "workspace"
    workspace.mkdir()
    return workspace
