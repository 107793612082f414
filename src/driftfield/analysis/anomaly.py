"""Reduce entropy metrics to an anomaly score and a direction.

The score is a weighted sum of five deviation magnitudes, scaled by 3 and
clamped to [0, 1]. Without the scaling, realistic sample sizes produce
scores clustered near zero.

Direction comes from fixed byte positions of the same sample and does not
depend on the statistics::

    bytes[0..1]  -> angle      (big-endian u16 / 65536 * 360)
    bytes[2..3]  -> magnitude  (big-endian u16 / 65536)
    byte[4] % 8  -> action seed
    byte[5]      -> polarity seed in [-1, 1], biased +0.2 when the
                    anomaly score exceeds 0.1, else -0.1
"""

from __future__ import annotations

from types import MappingProxyType

from driftfield.analysis.statistics import MAX_SHANNON_BITS
from driftfield.analysis.types import AnomalyResult, EntropyMetrics, Polarity
from driftfield.exceptions import SampleError

ANOMALY_WEIGHTS = MappingProxyType(
    {
        "entropy": 0.20,
        "runs": 0.25,
        "chi_squared": 0.20,
        "serial_correlation": 0.15,
        "monte_carlo": 0.20,
    }
)
ANOMALY_SCALE = 3.0

ACTION_COUNT = 8
POLARITY_THRESHOLD = 0.1
POSITIVE_BIAS = 0.2
NEGATIVE_BIAS = -0.1

# Direction reads bytes 0 through 5.
DIRECTION_BYTES = 6


def resolve_polarity(value: float) -> Polarity:
    """Map a signed value to a polarity; zero is positive."""
    return Polarity.POSITIVE if value >= 0 else Polarity.NEGATIVE


def _u16(high: int, low: int) -> float:
    """Big-endian 16-bit value normalized to [0, 1)."""
    return ((high << 8) | low) / 65536.0


def anomaly_score(metrics: EntropyMetrics) -> tuple[float, float]:
    """Compute the raw weighted deviation and the scaled, clamped score.

    Returns:
        ``(raw_score, anomaly_score)`` with ``anomaly_score`` in [0, 1].
    """
    entropy_deviation = abs(MAX_SHANNON_BITS - metrics.shannon) / MAX_SHANNON_BITS
    raw = (
        entropy_deviation * ANOMALY_WEIGHTS["entropy"]
        + abs(metrics.runs.deviation) * ANOMALY_WEIGHTS["runs"]
        + abs(metrics.chi_squared.normalized) * ANOMALY_WEIGHTS["chi_squared"]
        + abs(metrics.serial_correlation) * ANOMALY_WEIGHTS["serial_correlation"]
        + metrics.monte_carlo.deviation * ANOMALY_WEIGHTS["monte_carlo"]
    )
    return raw, max(0.0, min(1.0, raw * ANOMALY_SCALE))


def reduce_anomaly(metrics: EntropyMetrics, raw: bytes) -> AnomalyResult:
    """Combine *metrics* and the originating sample into an AnomalyResult.

    Args:
        metrics: Statistics computed from *raw*.
        raw: The byte sample the metrics came from.

    Returns:
        AnomalyResult. Deterministic for a given sample.

    Raises:
        SampleError: If *raw* holds fewer than six bytes.
    """
    data = bytes(raw)
    if len(data) < DIRECTION_BYTES:
        raise SampleError(
            f"Direction needs at least {DIRECTION_BYTES} bytes, got {len(data)}"
        )

    raw_score, score = anomaly_score(metrics)

    seed_value = (data[5] / 255.0) * 2.0 - 1.0
    bias = POSITIVE_BIAS if score > POLARITY_THRESHOLD else NEGATIVE_BIAS
    polarity_raw = seed_value + bias

    return AnomalyResult(
        anomaly_score=score,
        raw_score=raw_score,
        angle_degrees=_u16(data[0], data[1]) * 360.0,
        magnitude=max(0.0, min(1.0, _u16(data[2], data[3]))),
        action_seed=data[4] % ACTION_COUNT,
        polarity=resolve_polarity(polarity_raw),
        polarity_raw=polarity_raw,
    )
