from dataclasses import dataclass
from enum import StrEnum

# Absorbs floating error in every tier comparison.
EPSILON: float = 0.01

MIN_TIER: float = 1.0
MAX_TIER: float = 10.0

TOP_BRACKET = "cedh"

BRACKET_TIERS: dict[str, float] = {
    "1": 1.0,
    "2": 2.0,
    "3": 3.0,
    "4": 4.0,
    TOP_BRACKET: 10.0,
}

BRACKET_ALIASES: dict[str, str] = {"top": TOP_BRACKET}

BRACKET_DISPLAY: dict[str, str] = {TOP_BRACKET: "cEDH"}


class Tolerance(StrEnum):
    EXACT = "exact"
    LENIENT = "lenient"
    SUPER_LENIENT = "super_lenient"

    @property
    def delta(self) -> float:
        return _TOLERANCE_DELTAS[self]


_TOLERANCE_DELTAS: dict[Tolerance, float] = {
    Tolerance.EXACT: 0.0,
    Tolerance.LENIENT: 0.5,
    Tolerance.SUPER_LENIENT: 1.0,
}


class TierMode(StrEnum):
    NUMERIC = "numeric"
    BRACKET = "bracket"


@dataclass(frozen=True)
class PowerProfile:
    tiers: tuple[float, ...]  # sorted, deduplicated
    average: float  # rounded to nearest 0.5
    labels: tuple[str, ...]  # as declared, for display
    mode: TierMode = TierMode.NUMERIC


def format_tier(tier: float) -> str:
    """Render a tier without a trailing ``.0`` (``7.0`` -> ``"7"``, ``6.5`` -> ``"6.5"``)."""
    if float(tier).is_integer():
        return str(int(tier))
    return f"{tier:g}"


def bracket_label(tier: float) -> str:
    for label, value in BRACKET_TIERS.items():
        if abs(value - tier) < EPSILON:
            return BRACKET_DISPLAY.get(label, label)
    return format_tier(tier)
