"""Data types for the cycle calculator."""

from __future__ import annotations

from dataclasses import dataclass
from datetime import date, time

from driftfield.cycles.tables import LunarPhase, TemporalGate, ZodiacSign
from driftfield.exceptions import InvalidInputError


@dataclass(frozen=True, slots=True)
class BirthProfile:
    """Optional birth data supplied by the user.

    Only ``birth_date`` feeds any computation. ``birth_time`` and
    ``location`` are kept for display and persistence by the caller.
    """

    birth_date: date
    birth_time: time | None = None
    location: str | None = None

    def __post_init__(self) -> None:
        if not isinstance(self.birth_date, date):
            raise InvalidInputError(
                f"birth_date must be a date, got {type(self.birth_date).__name__}"
            )


@dataclass(frozen=True, slots=True)
class BiorhythmChannel:
    label: str
    value: float
    cycle_length_days: int


@dataclass(frozen=True, slots=True)
class Biorhythm:
    """Four sinusoidal channels keyed to whole days since birth."""

    days_since_birth: int
    physical: BiorhythmChannel
    emotional: BiorhythmChannel
    intellectual: BiorhythmChannel
    intuitive: BiorhythmChannel


@dataclass(frozen=True, slots=True)
class LunarReading:
    """Lunar phase at a moment.

    Attributes:
        phase: One of the eight phase buckets.
        energy: ``0.5 + 0.5 * sin(2 * pi * normalized)``, in [0, 1].
        normalized: Position in the synodic month, in [0, 1).
        phase_day: Days into the synodic month, in [0, 29.53).
    """

    phase: LunarPhase
    energy: float
    normalized: float
    phase_day: float


@dataclass(frozen=True, slots=True)
class GateReading:
    gate: TemporalGate
    hour: float

    @property
    def energy(self) -> float:
        return self.gate.energy


@dataclass(frozen=True, slots=True)
class CycleState:
    """Cyclical environment at a moment.

    ``biorhythm`` and ``zodiac`` are ``None`` unless a birth profile was given.
    """

    lunar: LunarReading
    gate: GateReading
    biorhythm: Biorhythm | None = None
    zodiac: ZodiacSign | None = None
