"""Randomness-deviation statistics over a byte sample.

Every function takes raw bytes (anything ``bytes()`` accepts) and returns a
plain value or a frozen result. The functions are pure; they validate only
the minimum length each statistic needs and raise
:class:`~driftfield.exceptions.SampleError` below it.

The alphabet is fixed at 256 byte values. Chi-squared keeps its expected
count at ``n / 256`` for any ``n``; with fewer than a few samples per bucket
the test still runs but discriminates poorly.
"""

from __future__ import annotations

import math

import numpy as np

from driftfield.analysis.types import (
    ChiSquaredResult,
    EntropyMetrics,
    MonteCarloResult,
    RunsResult,
)
from driftfield.exceptions import SampleError

ALPHABET_SIZE = 256
CHI_SQUARED_DOF = ALPHABET_SIZE - 1
MAX_SHANNON_BITS = 8.0

# Monte Carlo consumes 4 bytes per (x, y) pair, so it sets the floor.
MIN_SAMPLE_SIZE = 4


def _as_samples(raw: bytes, minimum: int, statistic: str) -> np.ndarray:
    """View *raw* as a uint8 array, enforcing a minimum length."""
    samples = np.frombuffer(bytes(raw), dtype=np.uint8)
    if samples.size < minimum:
        raise SampleError(
            f"{statistic} needs at least {minimum} bytes, got {samples.size}"
        )
    return samples


def shannon_entropy(raw: bytes) -> float:
    """Compute ``H = -sum(p_i * log2(p_i))`` over observed byte frequencies.

    Returns:
        Entropy in bits, in [0, 8]. Equals 8 only for a perfectly flat
        histogram over all 256 values.
    """
    samples = _as_samples(raw, 1, "Shannon entropy")
    counts = np.bincount(samples, minlength=ALPHABET_SIZE)
    probs = counts[counts > 0] / samples.size
    entropy = -float(np.sum(probs * np.log2(probs)))
    # Guard against floating-point artifacts outside [0, 8].
    return min(MAX_SHANNON_BITS, max(0.0, entropy))


def runs_test(raw: bytes) -> RunsResult:
    """Count runs of bytes above-or-equal vs below the (upper) median."""
    samples = _as_samples(raw, 1, "Runs test")
    n = samples.size
    median = np.sort(samples)[n // 2]
    high = samples >= median

    changes = np.flatnonzero(high[1:] != high[:-1])
    runs = int(changes.size) + 1
    boundaries = np.concatenate(([0], changes + 1, [n]))
    max_run = int(np.diff(boundaries).max())

    expected = (n + 1) / 2
    return RunsResult(
        runs=runs,
        max_run=max_run,
        expected=expected,
        deviation=(runs - expected) / expected,
    )


def chi_squared(raw: bytes) -> ChiSquaredResult:
    """Chi-squared over 256 byte-value buckets, normalized against 255 dof."""
    samples = _as_samples(raw, 1, "Chi-squared")
    expected = samples.size / ALPHABET_SIZE
    counts = np.bincount(samples, minlength=ALPHABET_SIZE).astype(np.float64)
    chi2 = float(np.sum((counts - expected) ** 2 / expected))
    return ChiSquaredResult(chi2=chi2, normalized=(chi2 - CHI_SQUARED_DOF) / CHI_SQUARED_DOF)


def serial_correlation(raw: bytes) -> float:
    """Pearson correlation between the sample and itself shifted by one.

    Returns:
        Correlation in [-1, 1], or 0.0 when either side has zero variance
        (e.g., an all-equal sample).
    """
    samples = _as_samples(raw, 2, "Serial correlation")
    x = samples[:-1].astype(np.int64)
    y = samples[1:].astype(np.int64)
    n = int(x.size)

    # Exact integer sums; the denominator product can exceed int64.
    sum_x, sum_y = int(x.sum()), int(y.sum())
    sum_xy = int(np.dot(x, y))
    sum_x2, sum_y2 = int(np.dot(x, x)), int(np.dot(y, y))

    numerator = n * sum_xy - sum_x * sum_y
    denominator_sq = (n * sum_x2 - sum_x**2) * (n * sum_y2 - sum_y**2)
    if denominator_sq <= 0:
        return 0.0
    corr = numerator / math.sqrt(denominator_sq)
    return max(-1.0, min(1.0, corr))


def monte_carlo_deviation(raw: bytes) -> MonteCarloResult:
    """Estimate pi from 16-bit (x, y) pairs and report the relative error.

    Four bytes make one point: ``x = (b0 << 8 | b1) / 65536`` and
    ``y = (b2 << 8 | b3) / 65536``. Trailing bytes that do not fill a
    point are ignored.
    """
    samples = _as_samples(raw, MIN_SAMPLE_SIZE, "Monte Carlo")
    pairs = samples.size // 4
    quads = samples[: pairs * 4].reshape(pairs, 4).astype(np.uint32)
    x = ((quads[:, 0] << 8) | quads[:, 1]) / 65536.0
    y = ((quads[:, 2] << 8) | quads[:, 3]) / 65536.0
    inside = int(np.count_nonzero(x * x + y * y <= 1.0))

    pi_estimate = 4.0 * inside / pairs
    return MonteCarloResult(
        pi_estimate=pi_estimate,
        deviation=abs(pi_estimate - math.pi) / math.pi,
    )


def analyze_sample(raw: bytes) -> EntropyMetrics:
    """Run all five statistics over one sample.

    Args:
        raw: The byte sample. Must hold at least ``MIN_SAMPLE_SIZE`` bytes.

    Returns:
        EntropyMetrics bundling every statistic.

    Raises:
        SampleError: If the sample is shorter than ``MIN_SAMPLE_SIZE``.
    """
    data = bytes(raw)
    if len(data) < MIN_SAMPLE_SIZE:
        raise SampleError(
            f"Entropy analysis needs at least {MIN_SAMPLE_SIZE} bytes, got {len(data)}"
        )
    return EntropyMetrics(
        shannon=shannon_entropy(data),
        runs=runs_test(data),
        chi_squared=chi_squared(data),
        serial_correlation=serial_correlation(data),
        monte_carlo=monte_carlo_deviation(data),
        sample_size=len(data),
    )
