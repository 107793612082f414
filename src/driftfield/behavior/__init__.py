"""Behavioral layer: pattern detection, decision and surface scoring, and the
weekly drift report. All functions are pure transforms over caller-supplied
histories."""

from driftfield.behavior.decision import evaluate_decision, score_option
from driftfield.behavior.patterns import detect_patterns
from driftfield.behavior.report import weekly_report
from driftfield.behavior.surface import score_surface
from driftfield.behavior.types import (
    DailyCheckIn,
    DecisionOption,
    DecisionResult,
    DriftReport,
    EventPolarity,
    Gut,
    LogEvent,
    OptionScore,
    Pattern,
    PatternReport,
    PatternType,
    SurfaceScore,
)

__all__ = [
    "DailyCheckIn",
    "DecisionOption",
    "DecisionResult",
    "DriftReport",
    "EventPolarity",
    "Gut",
    "LogEvent",
    "OptionScore",
    "Pattern",
    "PatternReport",
    "PatternType",
    "SurfaceScore",
    "detect_patterns",
    "evaluate_decision",
    "score_option",
    "score_surface",
    "weekly_report",
]
