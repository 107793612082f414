"""Cycle calculator: biorhythm, lunar phase, time-of-day gate and zodiac.

All hour-of-day and day arithmetic uses local wall-clock time. Timezone-aware
datetimes are read at their own wall-clock value; no conversion is done.
"""

from __future__ import annotations

import math
from datetime import date, datetime, time

from driftfield.cycles.tables import (
    BIORHYTHM_CYCLES,
    ZODIAC_RANGES,
    LunarPhase,
    TemporalGate,
    ZodiacSign,
)
from driftfield.cycles.types import (
    BirthProfile,
    Biorhythm,
    BiorhythmChannel,
    CycleState,
    GateReading,
    LunarReading,
)
from driftfield.exceptions import InvalidInputError

SECONDS_PER_DAY = 86400.0
SYNODIC_MONTH_DAYS = 29.53058770576
LUNAR_EPOCH = datetime(2000, 1, 6, 18, 14)  # a known new moon, local time

# Birth dates are anchored at noon; the birth time is never consumed.
BIRTH_ANCHOR_TIME = time(12, 0)

_PHASES: tuple[LunarPhase, ...] = tuple(LunarPhase)
_GATES: tuple[TemporalGate, ...] = tuple(TemporalGate)


def wall_clock(moment: datetime) -> datetime:
    return moment.replace(tzinfo=None)


def _birth_date(birth: BirthProfile | date) -> date:
    if isinstance(birth, BirthProfile):
        return birth.birth_date
    if isinstance(birth, datetime):
        return birth.date()
    return birth


def biorhythm(birth: BirthProfile | date, now: datetime) -> Biorhythm:
    """Compute the four biorhythm channels for *now*.

    ``days = floor((now - birth) / 1 day)``; each channel is
    ``sin(2 * pi * days / cycle_length)``.
    """
    anchor = datetime.combine(_birth_date(birth), BIRTH_ANCHOR_TIME)
    elapsed = (wall_clock(now) - anchor).total_seconds()
    days = math.floor(elapsed / SECONDS_PER_DAY)

    channels = {
        label: BiorhythmChannel(
            label=label.capitalize(),
            value=math.sin(2.0 * math.pi * days / length),
            cycle_length_days=length,
        )
        for label, length in BIORHYTHM_CYCLES
    }
    return Biorhythm(days_since_birth=days, **channels)


def lunar_phase(now: datetime) -> LunarReading:
    """Place *now* in the synodic month.

    Dates before the epoch fold into [0, cycle) as well.
    """
    days_since = (wall_clock(now) - LUNAR_EPOCH).total_seconds() / SECONDS_PER_DAY
    phase_day = days_since % SYNODIC_MONTH_DAYS
    # Float modulo of a tiny negative value can land exactly on the modulus.
    if phase_day >= SYNODIC_MONTH_DAYS:
        phase_day = 0.0
    normalized = phase_day / SYNODIC_MONTH_DAYS

    return LunarReading(
        phase=_PHASES[math.floor(normalized * 8) % 8],
        energy=0.5 + 0.5 * math.sin(normalized * 2.0 * math.pi),
        normalized=normalized,
        phase_day=phase_day,
    )


def gate_for_hour(hour: float) -> TemporalGate:
    """Return the first gate whose ``[start, end)`` holds *hour*.

    Falls back to the first gate (only reachable at 24.0 or outside [0, 24)).
    """
    for gate in _GATES:
        if gate.contains(hour):
            return gate
    return _GATES[0]


def temporal_gate(now: datetime) -> GateReading:
    hour = now.hour + now.minute / 60.0
    return GateReading(gate=gate_for_hour(hour), hour=hour)


def zodiac_sign(month: int, day: int) -> ZodiacSign:
    """Return the sun sign for a (month, day), boundaries inclusive.

    Raises:
        InvalidInputError: If month or day is out of calendar range.
    """
    if not 1 <= month <= 12 or not 1 <= day <= 31:
        raise InvalidInputError(f"Invalid month/day: {month}/{day}")
    key = month * 100 + day
    for sign, (start_m, start_d), (end_m, end_d) in ZODIAC_RANGES:
        if start_m * 100 + start_d <= key <= end_m * 100 + end_d:
            return sign
    return ZODIAC_RANGES[0][0]


def compute_cycle_state(now: datetime, birth: BirthProfile | date | None = None) -> CycleState:
    """Compute the full cycle state for *now*.

    Args:
        now: Current wall-clock time.
        birth: Optional birth profile or date. Without it, biorhythm and
            zodiac are ``None`` rather than zeroed.

    Returns:
        CycleState for *now*.
    """
    if birth is None:
        return CycleState(lunar=lunar_phase(now), gate=temporal_gate(now))

    born = _birth_date(birth)
    return CycleState(
        lunar=lunar_phase(now),
        gate=temporal_gate(now),
        biorhythm=biorhythm(born, now),
        zodiac=zodiac_sign(born.month, born.day),
    )
