"""Pattern detector over a chronologically ordered event log.

Four independent checks run in a fixed order and may all fire:

1. **temporal**: the busiest of four day segments, if it holds >= 2 events.
2. **thematic**: the most frequent category, if it appears >= 2 times.
3. **streak**: the longest run of equal polarity, if it is >= 3 long.
4. **acceleration**: with >= 4 events, the mean of the last three gaps is
   under half the mean of all gaps.

Events must be supplied in timestamp order; the detector does not sort them
and never mutates the input. Malformed input yields an empty report.
"""

from __future__ import annotations

import logging
from collections import Counter
from typing import TYPE_CHECKING

from driftfield.behavior.types import (
    EventPolarity,
    Pattern,
    PatternReport,
    PatternType,
)
from driftfield.cycles.calculator import wall_clock

if TYPE_CHECKING:
    from collections.abc import Sequence

    from driftfield.behavior.types import LogEvent

logger = logging.getLogger("driftfield")

MIN_EVENTS = 3
MIN_ACCELERATION_EVENTS = 4
MIN_BUCKET_COUNT = 2
MIN_CATEGORY_COUNT = 2
MIN_STREAK = 3
RECENT_GAPS = 3
ACCELERATION_RATIO = 0.5
ACCELERATION_STRENGTH = 0.8

INSIGHT_NEED_DATA = "Log 3+ events to detect patterns."
INSIGHT_ACTIVE = "Active patterns in field."
INSIGHT_NONE = "No strong patterns yet."
INSIGHT_FAILED = "Unable to analyze events."


def day_segment(hour: int) -> str:
    if hour < 6:
        return "night"
    if hour < 12:
        return "morning"
    if hour < 18:
        return "afternoon"
    return "evening"


def _temporal(events: Sequence[LogEvent]) -> Pattern | None:
    counts = Counter(day_segment(e.timestamp.hour) for e in events)
    segment, count = counts.most_common(1)[0]
    if count < MIN_BUCKET_COUNT:
        return None
    return Pattern(
        type=PatternType.TEMPORAL,
        label=f"{count}/{len(events)} events in the {segment}",
        suggestion=f"Your {segment} is a high-signal window. Protect this time for exploration.",
        strength=count / len(events),
    )


def _thematic(events: Sequence[LogEvent]) -> Pattern | None:
    counts = Counter(e.category for e in events if e.category)
    if not counts:
        return None
    category, count = counts.most_common(1)[0]
    if count < MIN_CATEGORY_COUNT:
        return None
    return Pattern(
        type=PatternType.THEMATIC,
        label=f'"{category}" x {count}',
        suggestion=f'Recurring theme. Lean into "{category}" deliberately.',
        strength=count / len(events),
    )


def _streak(events: Sequence[LogEvent]) -> Pattern | None:
    streak = longest = 1
    polarity = events[0].polarity
    for previous, current in zip(events, events[1:]):
        if current.polarity == previous.polarity:
            streak += 1
            # Strict: an equal-length later run does not replace the first.
            if streak > longest:
                longest = streak
                polarity = current.polarity
        else:
            streak = 1
    if longest < MIN_STREAK:
        return None
    suggestion = (
        "Positive current. Increase exposure."
        if polarity is EventPolarity.POSITIVE
        else "Friction streak. Broaden environment."
    )
    return Pattern(
        type=PatternType.STREAK,
        label=f"{longest}x {polarity.value} streak",
        suggestion=suggestion,
        strength=longest / len(events),
    )


def _acceleration(events: Sequence[LogEvent]) -> Pattern | None:
    if len(events) < MIN_ACCELERATION_EVENTS:
        return None
    gaps = [
        (wall_clock(current.timestamp) - wall_clock(previous.timestamp)).total_seconds()
        for previous, current in zip(events, events[1:])
    ]
    recent = sum(gaps[-RECENT_GAPS:]) / RECENT_GAPS
    overall = sum(gaps) / len(gaps)
    if not recent < overall * ACCELERATION_RATIO:
        return None
    return Pattern(
        type=PatternType.ACCELERATION,
        label="Frequency increasing",
        suggestion="Synchronicities clustering. Cancel routine, leave space.",
        strength=ACCELERATION_STRENGTH,
    )


_CHECKS = (_temporal, _thematic, _streak, _acceleration)


def detect_patterns(events: Sequence[LogEvent]) -> PatternReport:
    """Detect patterns across the full event history.

    Args:
        events: Events in timestamp order.

    Returns:
        PatternReport with patterns in evaluation order (temporal, thematic,
        streak, acceleration). Empty with a "need more data" insight for
        fewer than three events.
    """
    snapshot = tuple(events)
    if len(snapshot) < MIN_EVENTS:
        return PatternReport(patterns=(), insight=INSIGHT_NEED_DATA)

    try:
        patterns = tuple(p for p in (check(snapshot) for check in _CHECKS) if p is not None)
    except (AttributeError, TypeError, ValueError):
        logger.warning("Pattern detection failed on malformed events", exc_info=True)
        return PatternReport(patterns=(), insight=INSIGHT_FAILED)

    return PatternReport(patterns=patterns, insight=INSIGHT_ACTIVE if patterns else INSIGHT_NONE)
