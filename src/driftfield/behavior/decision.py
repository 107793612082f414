"""Two-option decision scorer.

Each attribute contributes a fixed number of points and a note::

    novel +25 / familiar +5      meets new people +20     crowd +10
    reversible +15 / not +5      opens paths +20          closes paths -10
    gut: excited +15, anxious +10, dread -5, neutral 0

A margin under 10 points is called near-equal.
"""

from __future__ import annotations

import logging

from driftfield.behavior.types import DecisionOption, DecisionResult, Gut, OptionScore

logger = logging.getLogger("driftfield")

NEAR_EQUAL_MARGIN = 10

_GUT_POINTS: dict[Gut, tuple[int, str]] = {
    Gut.EXCITED: (15, "Intuition says yes"),
    Gut.ANXIOUS: (10, "Growth-edge anxiety"),
    Gut.DREAD: (-5, "Dread signal"),
}
_NO_GUT_SIGNAL = (0, "No intuition signal")


def score_option(option: DecisionOption) -> OptionScore:
    """Score one option, collecting a note per contributing factor."""
    contributions: list[tuple[int, str]] = []
    if option.is_novel:
        contributions.append((25, "Novel: expands possibility space"))
    else:
        contributions.append((5, "Familiar: predictable"))
    if option.meets_new:
        contributions.append((20, "New people = new weak ties"))
    if option.crowd:
        contributions.append((10, "Crowd exposure"))
    if option.reversible:
        contributions.append((15, "Reversible: low risk"))
    else:
        contributions.append((5, "Irreversible: higher stakes"))
    if option.opens:
        contributions.append((20, "Opens future paths"))
    if option.closes:
        contributions.append((-10, "Closes paths"))
    contributions.append(_GUT_POINTS.get(option.gut, _NO_GUT_SIGNAL))

    return OptionScore(
        score=sum(points for points, _ in contributions),
        notes=tuple(note for _, note in contributions),
    )


def _option_name(slot: str, option: DecisionOption) -> str:
    label = option.label.strip()
    return f"Option {slot} ({label})" if label else f"Option {slot}"


def evaluate_decision(a: DecisionOption, b: DecisionOption) -> DecisionResult:
    """Score both options and name the stronger one.

    Malformed options produce a neutral result (both scores 0) rather than
    an exception.
    """
    try:
        score_a, score_b = score_option(a), score_option(b)
    except (AttributeError, TypeError):
        logger.warning("Decision scoring failed on malformed options", exc_info=True)
        empty = OptionScore(score=0, notes=())
        return DecisionResult(a=empty, b=empty, diff=0, verdict="Unable to evaluate options.")

    diff = score_a.score - score_b.score
    if abs(diff) < NEAR_EQUAL_MARGIN:
        verdict = "Near-equal. Flip a coin: both expand surface area."
    elif diff > 0:
        verdict = f"{_option_name('A', a)}: +{diff} serendipity potential."
    else:
        verdict = f"{_option_name('B', b)}: +{-diff} serendipity potential."
    return DecisionResult(a=score_a, b=score_b, diff=diff, verdict=verdict)
