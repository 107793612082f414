"""Data types for the entropy analysis subsystem."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum


class Polarity(str, Enum):
    """Direction of a reading. Ties always resolve to ``POSITIVE``."""

    POSITIVE = "positive"
    NEGATIVE = "negative"


@dataclass(frozen=True, slots=True)
class RunsResult:
    """Runs test over above/below-median classification.

    Attributes:
        runs: Number of contiguous same-classification runs.
        max_run: Length of the longest run.
        expected: Expected run count for an ideal sequence, ``(n + 1) / 2``.
        deviation: ``(runs - expected) / expected``. Negative means clustering.
    """

    runs: int
    max_run: int
    expected: float
    deviation: float

    @property
    def cluster_score(self) -> float:
        """Positive when byte values cluster rather than alternate."""
        return -self.deviation


@dataclass(frozen=True, slots=True)
class ChiSquaredResult:
    """Chi-squared goodness of fit against a flat 256-bucket histogram.

    Attributes:
        chi2: Raw chi-squared statistic.
        normalized: ``(chi2 - 255) / 255``, centred on 0 for ideal input.
    """

    chi2: float
    normalized: float


@dataclass(frozen=True, slots=True)
class MonteCarloResult:
    """Monte Carlo estimate of pi from 16-bit coordinate pairs.

    Attributes:
        pi_estimate: ``4 * inside / pairs``.
        deviation: Relative distance of the estimate from ``math.pi``.
    """

    pi_estimate: float
    deviation: float


@dataclass(frozen=True, slots=True)
class EntropyMetrics:
    """The five randomness metrics computed over one byte sample."""

    shannon: float
    runs: RunsResult
    chi_squared: ChiSquaredResult
    serial_correlation: float
    monte_carlo: MonteCarloResult
    sample_size: int


@dataclass(frozen=True, slots=True)
class AnomalyResult:
    """Anomaly score and direction derived from one byte sample.

    Attributes:
        anomaly_score: Weighted deviation, scaled and clamped to [0, 1].
        raw_score: Weighted deviation before scaling and clamping.
        angle_degrees: Bearing in [0, 360) from bytes 0-1.
        magnitude: Direction magnitude in [0, 1] from bytes 2-3.
        action_seed: Index into the action table, ``byte[4] % 8``.
        polarity: Final polarity of the biased polarity value.
        polarity_raw: Biased polarity value that ``polarity`` was resolved from.
    """

    anomaly_score: float
    raw_score: float
    angle_degrees: float
    magnitude: float
    action_seed: int
    polarity: Polarity
    polarity_raw: float
