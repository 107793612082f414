"""Tests for the anomaly reducer."""

from __future__ import annotations

import pytest

from driftfield.analysis.anomaly import (
    ANOMALY_WEIGHTS,
    anomaly_score,
    reduce_anomaly,
    resolve_polarity,
)
from driftfield.analysis.statistics import analyze_sample
from driftfield.analysis.types import (
    ChiSquaredResult,
    EntropyMetrics,
    MonteCarloResult,
    Polarity,
    RunsResult,
)
from driftfield.exceptions import SampleError


def _metrics(
    shannon: float = 8.0,
    runs_deviation: float = 0.0,
    chi_normalized: float = 0.0,
    correlation: float = 0.0,
    pi_deviation: float = 0.0,
) -> EntropyMetrics:
    """Metrics for an ideal sample, with individual deviations overridable."""
    return EntropyMetrics(
        shannon=shannon,
        runs=RunsResult(runs=1024, max_run=8, expected=1024.5, deviation=runs_deviation),
        chi_squared=ChiSquaredResult(chi2=255.0 * (1 + chi_normalized), normalized=chi_normalized),
        serial_correlation=correlation,
        monte_carlo=MonteCarloResult(pi_estimate=3.14159, deviation=pi_deviation),
        sample_size=2048,
    )


def _sample(head: list[int], size: int = 2048) -> bytes:
    return bytes(head) + bytes(size - len(head))


class TestAnomalyScore:
    def test_weights_sum_to_one(self) -> None:
        assert sum(ANOMALY_WEIGHTS.values()) == pytest.approx(1.0)

    def test_ideal_metrics_score_zero(self) -> None:
        assert anomaly_score(_metrics()) == (0.0, 0.0)

    def test_weighted_sum_scaled_by_three(self) -> None:
        raw, score = anomaly_score(_metrics(runs_deviation=-0.04, chi_normalized=0.05))
        assert raw == pytest.approx(0.04 * 0.25 + 0.05 * 0.20)
        assert score == pytest.approx(raw * 3)

    def test_entropy_deviation_term(self) -> None:
        raw, _ = anomaly_score(_metrics(shannon=4.0))
        assert raw == pytest.approx(0.5 * 0.20)

    def test_clamped_to_one(self) -> None:
        _, score = anomaly_score(_metrics(chi_normalized=50.0))
        assert score == 1.0

    def test_constant_sample_hits_ceiling(self, zero_sample: bytes) -> None:
        result = reduce_anomaly(analyze_sample(zero_sample), zero_sample)
        assert result.anomaly_score == 1.0

    def test_flat_sample_in_range(self, flat_sample: bytes) -> None:
        result = reduce_anomaly(analyze_sample(flat_sample), flat_sample)
        assert 0.0 <= result.anomaly_score <= 1.0


class TestDirection:
    def test_bytes_map_to_direction(self) -> None:
        raw = _sample([0x80, 0x00, 0x40, 0x00, 13, 255])
        result = reduce_anomaly(analyze_sample(raw), raw)
        assert result.angle_degrees == 180.0
        assert result.magnitude == 0.25
        assert result.action_seed == 5
        # Degenerate sample scores 1.0, so the +0.2 bias applies.
        assert result.polarity_raw == pytest.approx(1.2)
        assert result.polarity is Polarity.POSITIVE

    def test_max_bytes_stay_below_full_circle(self) -> None:
        raw = _sample([0xFF, 0xFF, 0xFF, 0xFF, 0xFF, 0xFF])
        result = reduce_anomaly(analyze_sample(raw), raw)
        assert 359.99 < result.angle_degrees < 360.0
        assert result.magnitude < 1.0
        assert result.action_seed == 7

    def test_low_anomaly_biases_negative(self) -> None:
        # 128 maps to +0.0039; the -0.1 bias makes it negative.
        result = reduce_anomaly(_metrics(), _sample([0, 0, 0, 0, 0, 128]))
        assert result.anomaly_score == 0.0
        assert result.polarity_raw == pytest.approx(128 / 255 * 2 - 1 - 0.1)
        assert result.polarity is Polarity.NEGATIVE

    def test_low_anomaly_can_still_be_positive(self) -> None:
        result = reduce_anomaly(_metrics(), _sample([0, 0, 0, 0, 0, 141]))
        assert result.polarity is Polarity.POSITIVE

    def test_anomaly_above_threshold_biases_positive(self) -> None:
        # Score 0.15 > 0.1: seed 128 plus 0.2.
        metrics = _metrics(runs_deviation=0.2)
        result = reduce_anomaly(metrics, _sample([0, 0, 0, 0, 0, 128]))
        assert result.anomaly_score == pytest.approx(0.15)
        assert result.polarity_raw == pytest.approx(128 / 255 * 2 - 1 + 0.2)

    def test_deterministic_for_same_sample(self, uniform_sample: bytes) -> None:
        metrics = analyze_sample(uniform_sample)
        assert reduce_anomaly(metrics, uniform_sample) == reduce_anomaly(metrics, uniform_sample)

    def test_needs_six_bytes(self) -> None:
        with pytest.raises(SampleError, match="at least 6"):
            reduce_anomaly(_metrics(), bytes(5))


class TestResolvePolarity:
    def test_zero_is_positive(self) -> None:
        assert resolve_polarity(0.0) is Polarity.POSITIVE

    def test_negative_zero_is_positive(self) -> None:
        assert resolve_polarity(-0.0) is Polarity.POSITIVE

    def test_tiny_negative_is_negative(self) -> None:
        assert resolve_polarity(-1e-12) is Polarity.NEGATIVE
