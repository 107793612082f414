"""Shared pytest fixtures for driftfield tests.

Provides configuration objects, seeded byte sources, and fixed byte
samples used across multiple test modules.
"""

from __future__ import annotations

from datetime import datetime

import pytest

from driftfield.config import DriftfieldConfig
from driftfield.entropy.mock import MockByteSource
from driftfield.entropy.system import SystemByteSource


@pytest.fixture
def default_config() -> DriftfieldConfig:
    """Return a DriftfieldConfig with all default values and no .env file."""
    return DriftfieldConfig(_env_file=None)  # type: ignore[call-arg]


@pytest.fixture
def silent_config() -> DriftfieldConfig:
    """Return a config with no logging for noise-free tests."""
    return DriftfieldConfig(_env_file=None, log_level="none")  # type: ignore[call-arg]


@pytest.fixture
def diagnostic_config() -> DriftfieldConfig:
    """Return a config with diagnostic mode and full logging enabled."""
    return DriftfieldConfig(
        _env_file=None,
        log_level="full",
        diagnostic_mode=True,  # type: ignore[call-arg]
    )


@pytest.fixture
def uniform_source() -> MockByteSource:
    """Return a seeded uniform MockByteSource for reproducible samples."""
    return MockByteSource(seed=42)


@pytest.fixture
def biased_source() -> MockByteSource:
    """Return a seeded MockByteSource clustered around 140."""
    return MockByteSource(mean=140.0, seed=42)


@pytest.fixture
def system_source() -> SystemByteSource:
    """Return an os.urandom-backed source."""
    return SystemByteSource()


@pytest.fixture
def uniform_sample(uniform_source: MockByteSource) -> bytes:
    """2048 seeded uniform bytes."""
    return uniform_source.get_random_bytes(2048)


@pytest.fixture
def flat_sample() -> bytes:
    """Every byte value exactly 8 times, in ascending cycles."""
    return bytes(range(256)) * 8


@pytest.fixture
def zero_sample() -> bytes:
    """2048 zero bytes: the fully degenerate sample."""
    return bytes(2048)


@pytest.fixture
def noon() -> datetime:
    """A fixed wall-clock moment: 2024-03-15 12:00 local."""
    return datetime(2024, 3, 15, 12, 0)
