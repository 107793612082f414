"""Statistical property tests for the entropy analysis pipeline.

These tests validate mathematical invariants rather than individual code
paths, using seeded uniform and biased mock sources:

1. **Agreement with reference implementations**: Shannon entropy,
   chi-squared and serial correlation match scipy on the same bytes.

2. **Null-hypothesis centring**: over many uniform samples, the normalized
   chi-squared and the runs deviation average out near zero.

3. **Bias sensitivity**: clustered bytes push the anomaly score up.

Dependencies:
    scipy: listed in [project.optional-dependencies] test.
"""

from __future__ import annotations

import numpy as np
import pytest
from scipy import stats

from driftfield.analysis import (
    analyze_sample,
    anomaly_score,
    chi_squared,
    monte_carlo_deviation,
    runs_test,
    serial_correlation,
    shannon_entropy,
)
from driftfield.entropy.mock import MockByteSource

# Number of samples drawn for the averaging tests.
_NUM_TRIALS: int = 200

# Bytes per sample; the scan default.
_SAMPLE_SIZE: int = 2048


def _counts(raw: bytes) -> np.ndarray:
    return np.bincount(np.frombuffer(raw, dtype=np.uint8), minlength=256)


# ---------------------------------------------------------------------------
# Group 1: Agreement with scipy
# ---------------------------------------------------------------------------


class TestAgreesWithScipy:
    def test_shannon(self, uniform_sample: bytes) -> None:
        expected = stats.entropy(_counts(uniform_sample), base=2)
        assert shannon_entropy(uniform_sample) == pytest.approx(expected, rel=1e-9)

    def test_shannon_biased(self, biased_source: MockByteSource) -> None:
        raw = biased_source.get_random_bytes(_SAMPLE_SIZE)
        expected = stats.entropy(_counts(raw), base=2)
        assert shannon_entropy(raw) == pytest.approx(expected, rel=1e-9)

    def test_chi_squared(self, uniform_sample: bytes) -> None:
        expected = stats.chisquare(_counts(uniform_sample)).statistic
        assert chi_squared(uniform_sample).chi2 == pytest.approx(expected, rel=1e-9)

    def test_serial_correlation(self, uniform_sample: bytes) -> None:
        samples = np.frombuffer(uniform_sample, dtype=np.uint8).astype(np.float64)
        expected = stats.pearsonr(samples[:-1], samples[1:])[0]
        assert serial_correlation(uniform_sample) == pytest.approx(expected, abs=1e-9)

    def test_serial_correlation_biased(self, biased_source: MockByteSource) -> None:
        raw = biased_source.get_random_bytes(_SAMPLE_SIZE)
        samples = np.frombuffer(raw, dtype=np.uint8).astype(np.float64)
        expected = stats.pearsonr(samples[:-1], samples[1:])[0]
        assert serial_correlation(raw) == pytest.approx(expected, abs=1e-9)


# ---------------------------------------------------------------------------
# Group 2: Centring under the null hypothesis
# ---------------------------------------------------------------------------


class TestNullHypothesis:
    """Uniform bytes should look ideal on average.

    E[chi2] is exactly 255 for a multinomial over 256 equal buckets, so the
    normalized value centres on 0 with a standard deviation near
    ``sqrt(2 * 255) / 255 ~= 0.09`` per sample.
    """

    @pytest.fixture(scope="class")
    def samples(self) -> list[bytes]:
        source = MockByteSource(seed=7)
        return [source.get_random_bytes(_SAMPLE_SIZE) for _ in range(_NUM_TRIALS)]

    def test_chi_squared_centred(self, samples: list[bytes]) -> None:
        mean = np.mean([chi_squared(s).normalized for s in samples])
        assert mean == pytest.approx(0.0, abs=0.03)

    def test_runs_centred(self, samples: list[bytes]) -> None:
        mean = np.mean([runs_test(s).deviation for s in samples])
        assert mean == pytest.approx(0.0, abs=0.02)

    def test_serial_correlation_centred(self, samples: list[bytes]) -> None:
        mean = np.mean([serial_correlation(s) for s in samples])
        assert mean == pytest.approx(0.0, abs=0.01)

    def test_uniform_scores_mostly_weak(self, samples: list[bytes]) -> None:
        scores = [anomaly_score(analyze_sample(s))[1] for s in samples]
        assert np.median(scores) < 0.3
        assert all(0.0 <= s <= 1.0 for s in scores)

    def test_monte_carlo_improves_with_size(self) -> None:
        source = MockByteSource(seed=11)
        small = np.mean([monte_carlo_deviation(source.get_random_bytes(256)).deviation for _ in range(100)])
        large = np.mean([monte_carlo_deviation(source.get_random_bytes(4096)).deviation for _ in range(100)])
        assert large < small


# ---------------------------------------------------------------------------
# Group 3: Bias sensitivity
# ---------------------------------------------------------------------------


class TestBiasSensitivity:
    def test_biased_scores_above_uniform(self) -> None:
        uniform = MockByteSource(seed=21)
        biased = MockByteSource(mean=140.0, seed=21)
        for _ in range(20):
            u = anomaly_score(analyze_sample(uniform.get_random_bytes(_SAMPLE_SIZE)))[1]
            b = anomaly_score(analyze_sample(biased.get_random_bytes(_SAMPLE_SIZE)))[1]
            assert b > u

    def test_biased_entropy_below_uniform(self) -> None:
        raw = MockByteSource(mean=140.0, seed=5).get_random_bytes(4096)
        assert shannon_entropy(raw) < 7.5
