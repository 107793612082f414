"""Probe action table, compass rose and confidence labels."""

from __future__ import annotations

import math
from enum import Enum


class ProbeAction(Enum):
    """Eight actions, indexed by an anomaly result's action seed."""

    SEEK_NOVELTY = (
        0, "Seek Novelty",
        "Go somewhere unfamiliar. The entropy points toward unexplored territory.",
        "\U0001F9ED",
    )
    TALK_TO_A_STRANGER = (
        1, "Talk to a Stranger",
        "Weak ties are probability bridges. Start a conversation with someone new.",
        "\U0001F5E3",
    )
    FOLLOW_THE_THREAD = (
        2, "Follow the Thread",
        "Something caught your attention recently. Follow it one step further.",
        "\U0001F9F5",
    )
    SHARE_SOMETHING = (
        3, "Share Something",
        "Put an idea, creation, or question into the world. Luck needs witnesses.",
        "\U0001F4E1",
    )
    BREAK_A_PATTERN = (
        4, "Break a Pattern",
        "Do the opposite of your default. Entropy favors deviation.",
        "⚡",
    )
    WAIT_AND_RECEIVE = (
        5, "Wait & Receive",
        "Don't push. Soften your focus. What comes to you uninvited?",
        "\U0001F30A",
    )
    REVISIT_OLD_GROUND = (
        6, "Revisit Old Ground",
        "Return to somewhere meaningful. The field has shifted since you were last there.",
        "\U0001F504",
    )
    SAY_YES = (
        7, "Say Yes",
        "The next invitation, suggestion, or opportunity: take it without analysis.",
        "✦",
    )

    def __init__(self, index: int, label: str, description: str, icon: str) -> None:
        self.index = index
        self.label = label
        self.description = description
        self.icon = icon

    @classmethod
    def from_seed(cls, seed: int) -> ProbeAction:
        return _ACTIONS[seed]


_ACTIONS: tuple[ProbeAction, ...] = tuple(ProbeAction)


class ConfidenceLabel(str, Enum):
    STRONG = "strong"
    MODERATE = "moderate"
    WEAK = "weak"

    @property
    def display(self) -> str:
        return f"{self.value.capitalize()} signal"


COMPASS_POINTS: tuple[str, ...] = (
    "N", "NNE", "NE", "ENE", "E", "ESE", "SE", "SSE",
    "S", "SSW", "SW", "WSW", "W", "WNW", "NW", "NNW",
)
SECTOR_DEGREES = 360.0 / len(COMPASS_POINTS)

STRONG_THRESHOLD = 0.3
MODERATE_THRESHOLD = 0.15


def compass_label(bearing: float) -> str:
    """16-point compass label; sectors are 22.5 degrees wide starting at north."""
    return COMPASS_POINTS[math.floor(bearing / SECTOR_DEGREES) % len(COMPASS_POINTS)]


def confidence_label(anomaly_score: float) -> ConfidenceLabel:
    if anomaly_score > STRONG_THRESHOLD:
        return ConfidenceLabel.STRONG
    if anomaly_score > MODERATE_THRESHOLD:
        return ConfidenceLabel.MODERATE
    return ConfidenceLabel.WEAK
