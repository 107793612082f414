"""Cycle calculator: biorhythm, lunar phase, temporal gate and zodiac."""

from driftfield.cycles.calculator import (
    LUNAR_EPOCH,
    SYNODIC_MONTH_DAYS,
    biorhythm,
    compute_cycle_state,
    gate_for_hour,
    lunar_phase,
    temporal_gate,
    zodiac_sign,
)
from driftfield.cycles.tables import LunarPhase, TemporalGate, ZodiacSign
from driftfield.cycles.types import (
    BirthProfile,
    Biorhythm,
    BiorhythmChannel,
    CycleState,
    GateReading,
    LunarReading,
)

__all__ = [
    "LUNAR_EPOCH",
    "SYNODIC_MONTH_DAYS",
    "Biorhythm",
    "BiorhythmChannel",
    "BirthProfile",
    "CycleState",
    "GateReading",
    "LunarPhase",
    "LunarReading",
    "TemporalGate",
    "ZodiacSign",
    "biorhythm",
    "compute_cycle_state",
    "gate_for_hour",
    "lunar_phase",
    "temporal_gate",
    "zodiac_sign",
]
