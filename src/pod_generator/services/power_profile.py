import math
import statistics
from collections.abc import Iterable

from pod_generator.domain.tier import (
    BRACKET_ALIASES,
    BRACKET_TIERS,
    MAX_TIER,
    MIN_TIER,
    PowerProfile,
    TierMode,
    format_tier,
)


class PowerProfileError(Exception):
    """Raised when a participant's declared tiers cannot be resolved."""


class EmptyTierSetError(PowerProfileError):
    """Raised when no tier was selected."""


class InvalidTierError(PowerProfileError):
    """Raised for out-of-range numeric tiers or unknown bracket labels."""


def round_half(value: float) -> float:
    """Round to the nearest 0.5, halves rounding up."""
    return math.floor(value * 2 + 0.5) / 2


def resolve_numeric(values: Iterable[float | int | str]) -> PowerProfile:
    tiers: set[float] = set()
    for raw in values:
        try:
            tier = float(raw)
        except (TypeError, ValueError) as err:
            raise InvalidTierError(f"Tier {raw!r} is not a number") from err
        if not math.isfinite(tier) or tier < MIN_TIER or tier > MAX_TIER:
            raise InvalidTierError(f"Tier {raw!r} is outside {format_tier(MIN_TIER)}-{format_tier(MAX_TIER)}")
        tiers.add(tier)
    if not tiers:
        raise EmptyTierSetError("No tier selected")

    ordered = tuple(sorted(tiers))
    return PowerProfile(
        tiers=ordered,
        average=round_half(statistics.fmean(ordered)),
        labels=tuple(format_tier(t) for t in ordered),
        mode=TierMode.NUMERIC,
    )


def normalize_bracket(raw: object) -> str:
    label = str(raw).strip().lower()
    label = BRACKET_ALIASES.get(label, label)
    if label not in BRACKET_TIERS:
        raise InvalidTierError(f"Unknown bracket {raw!r}; expected one of {', '.join(BRACKET_TIERS)}")
    return label


def resolve_brackets(labels: Iterable[object]) -> PowerProfile:
    by_tier: dict[float, str] = {}
    for raw in labels:
        label = normalize_bracket(raw)
        by_tier[BRACKET_TIERS[label]] = label
    if not by_tier:
        raise EmptyTierSetError("No bracket selected")

    ordered = tuple(sorted(by_tier))
    return PowerProfile(
        tiers=ordered,
        average=round_half(statistics.fmean(ordered)),
        labels=tuple(by_tier[t] for t in ordered),
        mode=TierMode.BRACKET,
    )


def resolve_profile(values: Iterable[object], mode: TierMode) -> PowerProfile:
    if mode is TierMode.BRACKET:
        return resolve_brackets(values)
    return resolve_numeric(values)  # type: ignore[arg-type]
