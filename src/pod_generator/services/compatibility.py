from collections.abc import Iterable, Sequence

from pod_generator.domain.tier import EPSILON


def within(a: float, b: float, tolerance: float) -> bool:
    """Whether two tiers match exactly or, with a positive tolerance, lie within it."""
    diff = abs(a - b)
    return diff < EPSILON or (tolerance > 0 and diff <= tolerance + EPSILON)


def covers(tiers: Iterable[float], target: float, tolerance: float) -> bool:
    return any(within(t, target, tolerance) for t in tiers)


def compatible(a: Sequence[float], b: Sequence[float], tolerance: float) -> bool:
    return any(within(x, y, tolerance) for x in a for y in b)


def shared_tiers(tier_sets: Sequence[Sequence[float]], tolerance: float) -> tuple[float, ...]:
    """Tiers from the union of ``tier_sets`` that every set can play under ``tolerance``.

    An empty tuple means the owners of these tier sets cannot share a pod.
    """
    if not tier_sets:
        return ()
    candidates = sorted({t for tiers in tier_sets for t in tiers})
    return tuple(t for t in candidates if all(covers(tiers, t, tolerance) for tiers in tier_sets))
