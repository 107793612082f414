"""Daily surface-area score: how open the day was to chance encounters."""

from __future__ import annotations

from driftfield.behavior.types import DailyCheckIn, SurfaceScore

MAX_SCORE = 100

# (minimum count, points, factor), checked top down; first match wins.
NOVELTY_BANDS: tuple[tuple[int, int, str], ...] = (
    (3, 30, "High novelty exposure"),
    (2, 20, "Moderate novelty"),
    (1, 10, "Some novelty"),
)
WEAK_TIE_BANDS: tuple[tuple[int, int, str], ...] = (
    (2, 25, "Multiple weak-tie interactions"),
    (1, 15, "Weak-tie contact"),
)
STRONG_TIE_BANDS: tuple[tuple[int, int, str], ...] = ((1, 5, "Strong-tie contact"),)

SAID_YES_POINTS = 20
NOTICED_POINTS = 15
SHARED_POINTS = 10


def _band(value: int, bands: tuple[tuple[int, int, str], ...]) -> tuple[int, str] | None:
    for minimum, points, factor in bands:
        if value >= minimum:
            return points, factor
    return None


def score_surface(entry: DailyCheckIn) -> SurfaceScore:
    """Score a check-in on [0, 100] and list the contributing factors."""
    score = 0
    factors: list[str] = []

    novelty = _band(entry.novelty, NOVELTY_BANDS)
    if novelty is None:
        factors.append("Routine: low chance surface")
    for hit in (novelty, _band(entry.weak_ties, WEAK_TIE_BANDS), _band(entry.strong_ties, STRONG_TIE_BANDS)):
        if hit is not None:
            score += hit[0]
            factors.append(hit[1])

    if entry.said_yes:
        score += SAID_YES_POINTS
        factors.append("Said yes to the unexpected")
    if entry.noticed:
        score += NOTICED_POINTS
        factors.append("Peripheral attention active")
    if entry.shared:
        score += SHARED_POINTS
        factors.append("Shared publicly")

    return SurfaceScore(score=max(0, min(MAX_SCORE, score)), factors=tuple(factors))
