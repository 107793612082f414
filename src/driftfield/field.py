"""Field composer: blend the entropy anomaly with the cyclical modifiers.

::

    bio       = 0.2*physical + 0.3*emotional + 0.2*intellectual + 0.3*intuitive
    lunar     = (lunar_energy - 0.5) * 0.4
    temporal  = (gate_energy - 0.5) * 0.3
    entropy   = anomaly_score * (+1 if positive else -1) * 0.5
    composite = bio * 0.3 + lunar + temporal + entropy

Polarity is positive when ``composite >= 0``; magnitude is
``min(|composite| * 2.5, 1)``.
"""

from __future__ import annotations

from dataclasses import dataclass
from types import MappingProxyType
from typing import TYPE_CHECKING

from driftfield.analysis.anomaly import resolve_polarity
from driftfield.analysis.types import Polarity

if TYPE_CHECKING:
    from driftfield.analysis.types import AnomalyResult
    from driftfield.cycles.types import Biorhythm, CycleState

BIORHYTHM_WEIGHTS = MappingProxyType(
    {"physical": 0.2, "emotional": 0.3, "intellectual": 0.2, "intuitive": 0.3}
)
BIORHYTHM_FACTOR = 0.3
LUNAR_FACTOR = 0.4
TEMPORAL_FACTOR = 0.3
ENTROPY_FACTOR = 0.5
MAGNITUDE_GAIN = 2.5


@dataclass(frozen=True, slots=True)
class FieldReading:
    """Composite field value with the parts it was built from.

    Attributes:
        composite_value: Blended signed value.
        polarity: Sign of ``composite_value`` (zero is positive).
        magnitude: ``|composite_value| * 2.5`` clamped to [0, 1].
        bio_composite: Weighted biorhythm sum, 0.0 without a birth profile.
        cycles: The cycle state the reading was composed from.
    """

    composite_value: float
    polarity: Polarity
    magnitude: float
    bio_composite: float
    cycles: CycleState


def biorhythm_composite(bio: Biorhythm | None) -> float:
    if bio is None:
        return 0.0
    return sum(getattr(bio, channel).value * weight for channel, weight in BIORHYTHM_WEIGHTS.items())


def compose_field(anomaly: AnomalyResult, cycles: CycleState) -> FieldReading:
    """Blend one anomaly result with one cycle state."""
    bio = biorhythm_composite(cycles.biorhythm)
    lunar_mod = (cycles.lunar.energy - 0.5) * LUNAR_FACTOR
    temporal_mod = (cycles.gate.energy - 0.5) * TEMPORAL_FACTOR
    sign = 1.0 if anomaly.polarity is Polarity.POSITIVE else -1.0
    entropy_mod = anomaly.anomaly_score * sign * ENTROPY_FACTOR

    composite = bio * BIORHYTHM_FACTOR + lunar_mod + temporal_mod + entropy_mod
    return FieldReading(
        composite_value=composite,
        polarity=resolve_polarity(composite),
        magnitude=max(0.0, min(1.0, abs(composite) * MAGNITUDE_GAIN)),
        bio_composite=bio,
        cycles=cycles,
    )
