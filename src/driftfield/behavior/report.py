"""Weekly drift report over recent probes and events."""

from __future__ import annotations

from collections import Counter
from datetime import datetime, timedelta
from typing import TYPE_CHECKING

from driftfield.behavior.patterns import detect_patterns
from driftfield.behavior.types import DriftReport
from driftfield.cycles.calculator import wall_clock

if TYPE_CHECKING:
    from collections.abc import Iterable

    from driftfield.behavior.types import LogEvent
    from driftfield.probe.types import Probe

WEEK = timedelta(days=7)


def weekly_report(
    probes: Iterable[Probe],
    events: Iterable[LogEvent],
    now: datetime,
    window: timedelta = WEEK,
) -> DriftReport:
    """Summarize activity newer than ``now - window``.

    The peak day is the short weekday name (``"Mon"``) with the most probes
    and events combined; ties go to the day seen first. Timestamps are
    compared at their wall-clock value, so aware and naive datetimes mix.
    """
    cutoff = wall_clock(now) - window
    recent_probes = [p for p in probes if wall_clock(p.created_at) > cutoff]
    recent_events = [e for e in events if wall_clock(e.timestamp) > cutoff]

    days = Counter(p.created_at.strftime("%a") for p in recent_probes)
    days.update(e.timestamp.strftime("%a") for e in recent_events)
    peak_day, peak_count = days.most_common(1)[0] if days else (None, 0)

    patterns = detect_patterns(recent_events).patterns
    return DriftReport(
        probe_count=len(recent_probes),
        event_count=len(recent_events),
        peak_day=peak_day,
        peak_day_count=peak_count,
        top_pattern=patterns[0] if patterns else None,
    )
