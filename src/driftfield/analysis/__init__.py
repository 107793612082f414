"""Entropy analysis subsystem: five randomness statistics and their reduction
to an anomaly score plus a byte-derived direction."""

from driftfield.analysis.anomaly import (
    ANOMALY_SCALE,
    ANOMALY_WEIGHTS,
    anomaly_score,
    reduce_anomaly,
    resolve_polarity,
)
from driftfield.analysis.statistics import (
    analyze_sample,
    chi_squared,
    monte_carlo_deviation,
    runs_test,
    serial_correlation,
    shannon_entropy,
)
from driftfield.analysis.types import (
    AnomalyResult,
    ChiSquaredResult,
    EntropyMetrics,
    MonteCarloResult,
    Polarity,
    RunsResult,
)

__all__ = [
    "ANOMALY_SCALE",
    "ANOMALY_WEIGHTS",
    "AnomalyResult",
    "ChiSquaredResult",
    "EntropyMetrics",
    "MonteCarloResult",
    "Polarity",
    "RunsResult",
    "analyze_sample",
    "anomaly_score",
    "chi_squared",
    "monte_carlo_deviation",
    "reduce_anomaly",
    "resolve_polarity",
    "runs_test",
    "serial_correlation",
    "shannon_entropy",
]
