"""Data types for the behavioral layer."""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import date, datetime
from enum import Enum

from driftfield.exceptions import InvalidInputError


class EventPolarity(str, Enum):
    POSITIVE = "positive"
    NEGATIVE = "negative"
    NEUTRAL = "neutral"


class PatternType(str, Enum):
    TEMPORAL = "temporal"
    THEMATIC = "thematic"
    STREAK = "streak"
    ACCELERATION = "acceleration"


class Gut(str, Enum):
    EXCITED = "excited"
    ANXIOUS = "anxious"
    NEUTRAL = "neutral"
    DREAD = "dread"


@dataclass(frozen=True, slots=True)
class LogEvent:
    """A user-logged synchronicity event."""

    text: str
    polarity: EventPolarity
    timestamp: datetime
    category: str | None = None

    def __post_init__(self) -> None:
        if not isinstance(self.polarity, EventPolarity):
            object.__setattr__(self, "polarity", EventPolarity(self.polarity))


@dataclass(frozen=True, slots=True)
class Pattern:
    type: PatternType
    label: str
    suggestion: str
    strength: float


@dataclass(frozen=True, slots=True)
class PatternReport:
    """Detected patterns in evaluation order plus a one-line insight."""

    patterns: tuple[Pattern, ...]
    insight: str


@dataclass(frozen=True, slots=True)
class DecisionOption:
    """Attributes of one option in a two-way decision."""

    label: str = ""
    is_novel: bool = False
    meets_new: bool = False
    crowd: bool = False
    reversible: bool = True
    opens: bool = False
    closes: bool = False
    gut: Gut = Gut.NEUTRAL

    def __post_init__(self) -> None:
        if not isinstance(self.gut, Gut):
            object.__setattr__(self, "gut", Gut(self.gut))


@dataclass(frozen=True, slots=True)
class OptionScore:
    score: int
    notes: tuple[str, ...]


@dataclass(frozen=True, slots=True)
class DecisionResult:
    """Scores for both options, ``diff = a.score - b.score`` and a verdict."""

    a: OptionScore
    b: OptionScore
    diff: int
    verdict: str


@dataclass(frozen=True, slots=True)
class DailyCheckIn:
    """One day's openness check-in.

    Raises:
        InvalidInputError: If any count is not a non-negative int.
    """

    novelty: int = 0
    weak_ties: int = 0
    strong_ties: int = 0
    said_yes: bool = False
    noticed: bool = False
    shared: bool = False
    day: date | None = None

    def __post_init__(self) -> None:
        for name in ("novelty", "weak_ties", "strong_ties"):
            count = getattr(self, name)
            if not isinstance(count, int) or isinstance(count, bool):
                raise InvalidInputError(f"{name} must be an int, got {type(count).__name__}")
            if count < 0:
                raise InvalidInputError(f"{name} must be >= 0, got {count}")


@dataclass(frozen=True, slots=True)
class SurfaceScore:
    score: int
    factors: tuple[str, ...] = field(default_factory=tuple)


@dataclass(frozen=True, slots=True)
class DriftReport:
    """Activity summary over a trailing window (seven days by default)."""

    probe_count: int
    event_count: int
    peak_day: str | None
    peak_day_count: int
    top_pattern: Pattern | None

    @property
    def has_activity(self) -> bool:
        return self.probe_count + self.event_count > 0
