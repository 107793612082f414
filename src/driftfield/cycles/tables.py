"""Fixed lookup tables for the cycle calculator.

Each table is an ordered Enum; definition order is the lookup order.
"""

from __future__ import annotations

from enum import Enum


class LunarPhase(Enum):
    """The eight lunar phases, in cycle order starting at the new moon."""

    NEW_MOON = ("New Moon", "\U0001F311", "Void potential. Set intentions into the dark.")
    WAXING_CRESCENT = ("Waxing Crescent", "\U0001F312", "Building momentum. Nurture new beginnings.")
    FIRST_QUARTER = ("First Quarter", "\U0001F313", "Tension and decision. Commit or release.")
    WAXING_GIBBOUS = ("Waxing Gibbous", "\U0001F314", "Expansion. Amplify what's working.")
    FULL_MOON = ("Full Moon", "\U0001F315", "Peak illumination. Maximum visibility and manifestation.")
    WANING_GIBBOUS = ("Waning Gibbous", "\U0001F316", "Gratitude and sharing. Distribute gains.")
    LAST_QUARTER = ("Last Quarter", "\U0001F317", "Release and let go. Shed what doesn't serve.")
    WANING_CRESCENT = ("Waning Crescent", "\U0001F318", "Surrender and rest. Prepare for renewal.")

    def __init__(self, label: str, symbol: str, quality: str) -> None:
        self.label = label
        self.symbol = symbol
        self.quality = quality


class TemporalGate(Enum):
    """Nine time-of-day gates covering [0, 24) without gaps.

    Values are ``(label, start_hour, end_hour, energy, quality)``; a gate
    contains hour ``h`` when ``start <= h < end``.
    """

    DEEP_VOID = (
        "Deep Void", 0.0, 3.0, 0.6,
        "Subconscious processing. Dreams seed intention. Entropy is high: random walks "
        "in thought may yield breakthroughs.",
    )
    PRE_DAWN_LIMINAL = (
        "Pre-Dawn Liminal", 3.0, 5.0, 0.8,
        "The veil is thin. Transition zone between unconscious and conscious. "
        "High-signal window for intuitive hits.",
    )
    DAWN_GATE = (
        "Dawn Gate", 5.0, 7.0, 0.9,
        "Maximum potential energy. Intentions set now carry momentum. "
        "The field is most receptive.",
    )
    MORNING_ASCENT = (
        "Morning Ascent", 7.0, 10.0, 0.7,
        "Rising energy. Social encounters gain weight. Good for initiating contact "
        "with weak ties.",
    )
    SOLAR_APEX = (
        "Solar Apex", 10.0, 13.0, 0.5,
        "Peak visibility. Actions taken now have maximum witnesses. "
        "Public sharing is amplified.",
    )
    AFTERNOON_DRIFT = (
        "Afternoon Drift", 13.0, 16.0, 0.4,
        "Analytical mind softens. Peripheral attention widens naturally. "
        "Aimless exploration yields discoveries.",
    )
    TWILIGHT_GATE = (
        "Twilight Gate", 16.0, 19.0, 0.85,
        "Second liminal threshold. Chance encounters peak. Routine deviation is most "
        "rewarded.",
    )
    EVENING_INTEGRATION = (
        "Evening Integration", 19.0, 22.0, 0.6,
        "Pattern recognition strengthens. Review and log events. Connect today's dots.",
    )
    NIGHT_DESCENT = (
        "Night Descent", 22.0, 24.0, 0.7,
        "Defenses lower. Honest reflection. Set tomorrow's intention before sleep.",
    )

    def __init__(
        self, label: str, start: float, end: float, energy: float, quality: str
    ) -> None:
        self.label = label
        self.start = start
        self.end = end
        self.energy = energy
        self.quality = quality

    def contains(self, hour: float) -> bool:
        return self.start <= hour < self.end


class ZodiacSign(Enum):
    """The twelve sun signs with their symbol and element."""

    ARIES = ("Aries", "♈", "Fire")
    TAURUS = ("Taurus", "♉", "Earth")
    GEMINI = ("Gemini", "♊", "Air")
    CANCER = ("Cancer", "♋", "Water")
    LEO = ("Leo", "♌", "Fire")
    VIRGO = ("Virgo", "♍", "Earth")
    LIBRA = ("Libra", "♎", "Air")
    SCORPIO = ("Scorpio", "♏", "Water")
    SAGITTARIUS = ("Sagittarius", "♐", "Fire")
    CAPRICORN = ("Capricorn", "♑", "Earth")
    AQUARIUS = ("Aquarius", "♒", "Air")
    PISCES = ("Pisces", "♓", "Water")

    def __init__(self, label: str, symbol: str, element: str) -> None:
        self.label = label
        self.symbol = symbol
        self.element = element


# (sign, (start_month, start_day), (end_month, end_day)), inclusive on both
# ends. Capricorn wraps the year boundary and appears twice.
ZODIAC_RANGES: tuple[tuple[ZodiacSign, tuple[int, int], tuple[int, int]], ...] = (
    (ZodiacSign.CAPRICORN, (1, 1), (1, 19)),
    (ZodiacSign.AQUARIUS, (1, 20), (2, 18)),
    (ZodiacSign.PISCES, (2, 19), (3, 20)),
    (ZodiacSign.ARIES, (3, 21), (4, 19)),
    (ZodiacSign.TAURUS, (4, 20), (5, 20)),
    (ZodiacSign.GEMINI, (5, 21), (6, 20)),
    (ZodiacSign.CANCER, (6, 21), (7, 22)),
    (ZodiacSign.LEO, (7, 23), (8, 22)),
    (ZodiacSign.VIRGO, (8, 23), (9, 22)),
    (ZodiacSign.LIBRA, (9, 23), (10, 22)),
    (ZodiacSign.SCORPIO, (10, 23), (11, 21)),
    (ZodiacSign.SAGITTARIUS, (11, 22), (12, 21)),
    (ZodiacSign.CAPRICORN, (12, 22), (12, 31)),
)

# Channel label -> cycle length in days.
BIORHYTHM_CYCLES: tuple[tuple[str, int], ...] = (
    ("physical", 23),
    ("emotional", 28),
    ("intellectual", 33),
    ("intuitive", 38),
)
