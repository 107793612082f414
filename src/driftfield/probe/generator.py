"""Probe generator.

Turns a fresh anomaly result (from a probe-sized sample) and the current
field reading into a :class:`~driftfield.probe.types.Probe`. Appending the
probe to a history is left to the caller.
"""

from __future__ import annotations

from datetime import datetime
from typing import TYPE_CHECKING

from driftfield.probe.actions import ProbeAction, compass_label, confidence_label
from driftfield.probe.types import EntropyDetail, Probe

if TYPE_CHECKING:
    from driftfield.analysis.types import AnomalyResult, EntropyMetrics
    from driftfield.field import FieldReading


def entropy_detail(metrics: EntropyMetrics, anomaly: AnomalyResult) -> EntropyDetail:
    return EntropyDetail(
        shannon=metrics.shannon,
        chi_squared=metrics.chi_squared.normalized,
        serial_correlation=metrics.serial_correlation,
        pi_deviation_pct=metrics.monte_carlo.deviation * 100.0,
        anomaly_pct=anomaly.anomaly_score * 100.0,
    )


def generate_probe(
    intention: str | None,
    metrics: EntropyMetrics,
    anomaly: AnomalyResult,
    field: FieldReading,
    created_at: datetime | None = None,
) -> Probe:
    """Build a probe record.

    Args:
        intention: Free text from the user; blank text is stored as ``None``.
        metrics: Statistics of the probe sample.
        anomaly: Anomaly result of the same sample.
        field: Current field reading.
        created_at: Timestamp to stamp on the probe (defaults to now).

    Returns:
        A new Probe.
    """
    text = (intention or "").strip()
    return Probe(
        intention=text or None,
        action=ProbeAction.from_seed(anomaly.action_seed),
        bearing_degrees=anomaly.angle_degrees,
        compass_label=compass_label(anomaly.angle_degrees),
        anomaly_strength=anomaly.anomaly_score,
        confidence=confidence_label(anomaly.anomaly_score),
        polarity=anomaly.polarity,
        polarity_raw=anomaly.polarity_raw,
        field_magnitude=field.magnitude,
        entropy_detail=entropy_detail(metrics, anomaly),
        created_at=created_at or datetime.now(),
    )
