from pod_generator.domain.pod import PodSizeMode

MIN_POD_SIZE = 3
AVOID_FIVE_MINIMUM = 9

ALLOWED_SIZES: dict[PodSizeMode, frozenset[int]] = {
    PodSizeMode.BALANCED: frozenset({3, 4, 5}),
    PodSizeMode.AVOID_FIVE: frozenset({3, 4}),
}

_BALANCED_FIXED: dict[int, list[int]] = {
    3: [3],
    4: [4],
    5: [5],
    6: [3, 3],
    7: [4, 3],
    8: [4, 4],
    9: [3, 3, 3],
    10: [5, 5],
}

_AVOID_FIVE_FIXED: dict[int, list[int]] = {
    9: [3, 3, 3],
    10: [4, 3, 3],
    11: [4, 4, 3],
    12: [4, 4, 4],
    13: [4, 3, 3, 3],
    14: [4, 4, 3, 3],
    15: [4, 4, 4, 3],
}


def plan_pod_sizes(n: int, mode: PodSizeMode = PodSizeMode.BALANCED) -> list[int]:
    """Split ``n`` participants into pod sizes.

    Returns an empty plan when fewer than three participants are available.
    Avoid-five mode only applies from nine participants up; below that a pod of
    five cannot always be avoided and the balanced plan is used.
    """
    if n < MIN_POD_SIZE:
        return []
    if mode is PodSizeMode.AVOID_FIVE and n >= AVOID_FIVE_MINIMUM:
        return _plan_avoid_five(n)
    return _plan_balanced(n)


def allowed_sizes(n: int, mode: PodSizeMode) -> frozenset[int]:
    """Pod sizes a plan for ``n`` participants may contain."""
    if mode is PodSizeMode.AVOID_FIVE and n >= AVOID_FIVE_MINIMUM:
        return ALLOWED_SIZES[PodSizeMode.AVOID_FIVE]
    return ALLOWED_SIZES[PodSizeMode.BALANCED]


def _plan_balanced(n: int) -> list[int]:
    if n in _BALANCED_FIXED:
        return list(_BALANCED_FIXED[n])

    fours, remainder = divmod(n, 4)
    if remainder == 0:
        return [4] * fours
    if remainder == 1:
        return [4] * (fours - 2) + [5, 4]
    if remainder == 2:
        return [4] * (fours - 1) + [3, 3]
    return [4] * fours + [3]


def _plan_avoid_five(n: int) -> list[int]:
    if n in _AVOID_FIVE_FIXED:
        return list(_AVOID_FIVE_FIXED[n])

    sizes: list[int] = []
    remaining = n
    while remaining >= 7:
        sizes.append(4)
        remaining -= 4

    if remaining == 6:
        sizes.extend([3, 3])
    elif remaining == 5:
        # 4 + 5 -> 3 + 3 + 3
        sizes.pop()
        sizes.extend([3, 3, 3])
    elif remaining in (3, 4):
        sizes.append(remaining)

    return sorted(sizes, reverse=True)
