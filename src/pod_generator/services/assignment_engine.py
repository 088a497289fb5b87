"""Pod assignment: packs units into planned pod sizes under a tolerance.

The search is greedy per slot and bounded: for each candidate anchor tier the
units able to play it form a pool, and the pool is cut to the slot size using
the largest-first size composition it supports. Pods therefore always share at
least the anchor tier.
"""

from __future__ import annotations

import hashlib
import logging
import math
import random
import statistics
from collections import Counter, defaultdict
from dataclasses import dataclass
from typing import TYPE_CHECKING

from pod_generator.domain.pod import GenerationResult, Pod, PodSizeMode
from pod_generator.domain.tier import EPSILON, TierMode, Tolerance, format_tier
from pod_generator.services.compatibility import covers, shared_tiers
from pod_generator.services.pod_size_planner import MIN_POD_SIZE, allowed_sizes, plan_pod_sizes

if TYPE_CHECKING:
    from collections.abc import Iterator, Sequence

    from pod_generator.domain.participant import Unit

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class _Selection:
    composition: tuple[int, ...]
    pool_size: int
    positions: tuple[int, ...]

    def rank(self) -> tuple[tuple[int, ...], int, tuple[int, ...]]:
        # Larger units first, then the scarcest anchor, then earliest in shuffle order.
        return (tuple(-s for s in self.composition), self.pool_size, tuple(sorted(self.positions)))


def generate(
    units: Sequence[Unit],
    tolerance: Tolerance = Tolerance.EXACT,
    mode: PodSizeMode = PodSizeMode.BALANCED,
) -> GenerationResult:
    """Assign ``units`` to pods.

    Never raises on infeasible input: units that cannot be placed are returned
    in ``unassigned``, in input order. Identical input yields identical pods.
    Bracket tiers are discrete: any bracket participant forces an exact match.
    """
    total = sum(u.size for u in units)
    if total < MIN_POD_SIZE:
        logger.info("Only %d participant(s); at least %d are needed for a pod", total, MIN_POD_SIZE)
        return GenerationResult(pods=(), unassigned=tuple(units))

    if tolerance is not Tolerance.EXACT and _has_brackets(units):
        logger.debug("Bracket participants present; using exact tolerance instead of %s", tolerance)
        tolerance = Tolerance.EXACT

    delta = tolerance.delta
    order = shuffled_units(units)

    # Smaller headcounts only matter once the full plan strands someone; their
    # plans must still respect the sizes allowed for the whole roster.
    allowed = allowed_sizes(total, mode)
    best_pods: list[Pod] = []
    best_assigned = -1
    for headcount in range(total, MIN_POD_SIZE - 1, -1):
        if headcount <= best_assigned:
            break
        plan = plan_pod_sizes(headcount, mode)
        if not set(plan) <= allowed:
            continue
        pods = _fill_plan(order, plan, delta)
        assigned = sum(p.size for p in pods)
        logger.debug("Plan %s for %d of %d participants placed %d", plan, headcount, total, assigned)
        if assigned > best_assigned:
            best_pods, best_assigned = pods, assigned
        if assigned == total:
            break

    placed = {u.key for pod in best_pods for u in pod.units}
    unassigned = tuple(u for u in units if u.key not in placed)
    logger.info(
        "Generated %d pod(s): %d assigned, %d unassigned",
        len(best_pods),
        best_assigned,
        total - best_assigned,
    )
    return GenerationResult(pods=tuple(best_pods), unassigned=unassigned)


def _has_brackets(units: Sequence[Unit]) -> bool:
    return any(m.profile.mode is TierMode.BRACKET for u in units for m in u.members)


def unit_identity(unit: Unit) -> str:
    """Content identity of a unit: its members' names and tiers, never ids or positions."""
    return ";".join(sorted(f"{m.name}={','.join(format_tier(t) for t in m.tiers)}" for m in unit.members))


def shuffle_seed(units: Sequence[Unit]) -> int:
    """Seed derived from the sorted identities of ``units``, independent of their order."""
    content = "\n".join(sorted(unit_identity(u) for u in units))
    digest = hashlib.sha256(content.encode("utf-8")).digest()
    return int.from_bytes(digest[:8], "big")


def shuffled_units(units: Sequence[Unit]) -> list[Unit]:
    ordered = sorted(units, key=unit_identity)
    seed = shuffle_seed(units)
    logger.debug("Shuffling %d unit(s) with seed %d", len(ordered), seed)
    random.Random(seed).shuffle(ordered)
    return ordered


def _fill_plan(order: Sequence[Unit], plan: Sequence[int], tolerance: float) -> list[Pod]:
    remaining: dict[int, Unit] = dict(enumerate(order))
    pods: list[Pod] = []
    for slot, size in enumerate(plan):
        selection = _select(remaining, size, tolerance)
        if selection is None:
            logger.debug("Skipping slot %d (size %d): no compatible units fit", slot, size)
            continue
        chosen = [remaining.pop(pos) for pos in selection.positions]
        pods.append(build_pod(chosen, tolerance))
    return pods


def _select(remaining: dict[int, Unit], size: int, tolerance: float) -> _Selection | None:
    anchors = sorted({t for unit in remaining.values() for m in unit.members for t in m.tiers})
    best: _Selection | None = None
    for anchor in anchors:
        pool = [
            (pos, unit)
            for pos, unit in remaining.items()
            if unit.size <= size and all(covers(m.tiers, anchor, tolerance) for m in unit.members)
        ]
        candidate = _cut_pool(pool, size, anchor)
        if candidate is not None and (best is None or candidate.rank() < best.rank()):
            best = candidate
    return best


def _declares(unit: Unit, anchor: float) -> bool:
    return any(abs(t - anchor) < EPSILON for m in unit.members for t in m.tiers)


def _cut_pool(pool: list[tuple[int, Unit]], size: int, anchor: float) -> _Selection | None:
    """Cut ``pool`` down to ``size`` with the largest-first composition it supports.

    Every cut keeps a unit that declares ``anchor`` itself, the earliest one
    that fits the composition. Units reaching the anchor only through tolerance
    can sit on both sides of it and share no tier among themselves.
    """
    pool = sorted(pool, key=lambda item: item[0])
    pool_size = sum(unit.size for _, unit in pool)
    if pool_size < size:
        return None

    sizes = {pos: unit.size for pos, unit in pool}
    by_size: dict[int, list[int]] = defaultdict(list)
    for pos, unit in pool:
        by_size[unit.size].append(pos)
    holders = [pos for pos, unit in pool if _declares(unit, anchor)]

    for composition in _compositions(size, size):
        needed = Counter(composition)
        for holder in holders:
            positions = _fill_composition(needed, by_size, holder, sizes[holder])
            if positions is not None:
                positions.sort(key=lambda pos: (-sizes[pos], pos))
                return _Selection(composition=composition, pool_size=pool_size, positions=tuple(positions))
    return None


def _fill_composition(
    needed: Counter[int],
    by_size: dict[int, list[int]],
    holder: int,
    holder_size: int,
) -> list[int] | None:
    if needed[holder_size] == 0:
        return None
    positions = [holder]
    for s, count in needed.items():
        if s == holder_size:
            count -= 1
        chosen = [pos for pos in by_size[s] if pos != holder][:count]
        if len(chosen) < count:
            return None
        positions.extend(chosen)
    return positions


def _compositions(total: int, largest: int) -> Iterator[tuple[int, ...]]:
    """Non-increasing integer partitions of ``total``, largest parts first."""
    if total == 0:
        yield ()
        return
    for part in range(min(total, largest), 0, -1):
        for rest in _compositions(total - part, part):
            yield (part, *rest)


def build_pod(units: Sequence[Unit], tolerance: float) -> Pod:
    shared = shared_tiers([m.tiers for u in units for m in u.members], tolerance)
    return Pod(units=tuple(units), shared_tiers=shared, average_power=average_power(units))


def average_power(units: Sequence[Unit]) -> float:
    if not units:
        return 0.0
    return math.floor(statistics.fmean(u.average_tier for u in units) * 10 + 0.5) / 10
