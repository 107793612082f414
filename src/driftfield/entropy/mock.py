"""Configurable mock byte source for testing and bias simulation.

Generates uniform bytes from a seeded numpy generator by default, or bytes
from a normal distribution around a configurable mean to simulate a biased
source. Seeding makes scans and probes reproducible in tests.
"""

from __future__ import annotations

import numpy as np

from driftfield.entropy.base import ByteSource
from driftfield.entropy.registry import register_byte_source


@register_byte_source("mock_uniform")
class MockByteSource(ByteSource):
    """Configurable mock byte source for testing.

    Usage:
        - **Null hypothesis**: ``mean=None`` draws uniform bytes in [0, 255].
        - **Bias simulation**: ``mean=140.0`` draws ``N(mean, 40)`` clamped
          to [0, 255], which clusters values and raises the anomaly score.

    Args:
        mean: Centre of the normal distribution, or ``None`` for uniform bytes.
        seed: Optional RNG seed for reproducible output.
    """

    _MOCK_BYTE_STD: float = 40.0
    """Fixed standard deviation for biased output."""

    def __init__(self, mean: float | None = None, seed: int | None = None) -> None:
        self._mean = mean
        self._seed = seed
        self._rng = np.random.default_rng(seed)

    @property
    def name(self) -> str:
        """Return ``'mock_uniform'``."""
        return "mock_uniform"

    @property
    def is_available(self) -> bool:
        """Always returns ``True``."""
        return True

    def get_random_bytes(self, n: int) -> bytes:
        """Generate *n* bytes, uniform or biased depending on ``mean``."""
        if self._mean is None:
            return self._rng.integers(0, 256, size=n, dtype=np.uint8).tobytes()
        samples = self._rng.normal(loc=self._mean, scale=self._MOCK_BYTE_STD, size=n)
        return np.clip(samples, 0, 255).astype(np.uint8).tobytes()

    def close(self) -> None:
        """No-op; no resources to release."""
