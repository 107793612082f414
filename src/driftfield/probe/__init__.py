"""Probe subsystem: action table, compass and confidence labels, generator."""

from driftfield.probe.actions import (
    COMPASS_POINTS,
    ConfidenceLabel,
    ProbeAction,
    compass_label,
    confidence_label,
)
from driftfield.probe.generator import entropy_detail, generate_probe
from driftfield.probe.types import EntropyDetail, Probe

__all__ = [
    "COMPASS_POINTS",
    "ConfidenceLabel",
    "EntropyDetail",
    "Probe",
    "ProbeAction",
    "compass_label",
    "confidence_label",
    "entropy_detail",
    "generate_probe",
]
