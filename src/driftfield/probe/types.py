"""Data types for probes."""

from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime

from driftfield.analysis.types import Polarity
from driftfield.probe.actions import ConfidenceLabel, ProbeAction


@dataclass(frozen=True, slots=True)
class EntropyDetail:
    """Snapshot of the sub-metrics behind a probe.

    Attributes:
        shannon: Shannon entropy in bits.
        chi_squared: Normalized chi-squared.
        serial_correlation: Lag-1 correlation.
        pi_deviation_pct: Monte Carlo relative deviation, in percent.
        anomaly_pct: Anomaly score, in percent.
    """

    shannon: float
    chi_squared: float
    serial_correlation: float
    pi_deviation_pct: float
    anomaly_pct: float

    def formatted(self) -> dict[str, str]:
        """Display strings with fixed precision."""
        return {
            "shannon": f"{self.shannon:.4f}",
            "chi2": f"{self.chi_squared:.4f}",
            "serial": f"{self.serial_correlation:.4f}",
            "pi_dev": f"{self.pi_deviation_pct:.2f}",
            "anomaly": f"{self.anomaly_pct:.1f}",
        }


@dataclass(frozen=True, slots=True)
class Probe:
    """One directional-guidance result. Never mutated after creation."""

    intention: str | None
    action: ProbeAction
    bearing_degrees: float
    compass_label: str
    anomaly_strength: float
    confidence: ConfidenceLabel
    polarity: Polarity
    polarity_raw: float
    field_magnitude: float
    entropy_detail: EntropyDetail
    created_at: datetime

    @property
    def bearing_display(self) -> str:
        return f"{self.bearing_degrees:.1f}"
