from collections.abc import Sequence

from pod_generator.domain.participant import Collective, Individual, Participant, Unit
from pod_generator.domain.pod import GenerationResult, GroupReport, MemberReport, Pod, PodReport
from pod_generator.domain.tier import EPSILON, TierMode, Tolerance, bracket_label, format_tier
from pod_generator.services.compatibility import within

# Largest step between neighbouring tiers that still reads as a range.
_RANGE_STEP = 1.0


def is_contiguous(tiers: Sequence[float]) -> bool:
    return len(tiers) >= 2 and all(b - a <= _RANGE_STEP + EPSILON for a, b in zip(tiers, tiers[1:]))


def format_shared_tiers(tiers: Sequence[float], mode: TierMode = TierMode.NUMERIC) -> str:
    """Render shared tiers as ``"7"``, ``"7-8"`` or ``"6, 8"``.

    A run of two or more tiers with no gap wider than one renders as a range;
    anything else is listed. Bracket tiers render by label, so the top bracket
    never joins a range with bracket 4.
    """
    if not tiers:
        return "none"
    label = bracket_label if mode is TierMode.BRACKET else format_tier
    ordered = sorted(tiers)
    if len(ordered) == 1:
        return label(ordered[0])
    if is_contiguous(ordered):
        return f"{label(ordered[0])}-{label(ordered[-1])}"
    return ", ".join(label(t) for t in ordered)


def pod_title(number: int, shared_display: str, mode: TierMode = TierMode.NUMERIC) -> str:
    kind = "Bracket" if mode is TierMode.BRACKET else "Power"
    return f"Pod {number} ({kind}: {shared_display})"


def member_report(
    participant: Participant,
    shared: Sequence[float],
    tolerance: Tolerance,
    group_id: str | None = None,
) -> MemberReport:
    declared = participant.profile.labels
    highlighted = tuple(any(within(t, s, tolerance.delta) for s in shared) for t in participant.tiers)
    if participant.profile.mode is TierMode.BRACKET:
        declared = tuple(bracket_label(t) for t in participant.tiers)
    return MemberReport(
        name=participant.name,
        declared=declared,
        highlighted=highlighted,
        average_tier=participant.average_tier,
        group_id=group_id,
    )


def _entry(unit: Unit, shared: Sequence[float], tolerance: Tolerance) -> MemberReport | GroupReport:
    match unit:
        case Individual(participant=p):
            return member_report(p, shared, tolerance)
        case Collective(group=g):
            return GroupReport(
                group_id=g.id,
                average_tier=g.average_tier,
                members=tuple(member_report(p, shared, tolerance, group_id=g.id) for p in g.members),
            )


def report_pod(
    pod: Pod,
    number: int,
    tolerance: Tolerance = Tolerance.EXACT,
    mode: TierMode = TierMode.NUMERIC,
) -> PodReport:
    display = format_shared_tiers(pod.shared_tiers, mode)
    return PodReport(
        number=number,
        title=pod_title(number, display, mode),
        shared_tiers=pod.shared_tiers,
        shared_display=display,
        average_power=pod.average_power,
        size=pod.size,
        entries=tuple(_entry(u, pod.shared_tiers, tolerance) for u in pod.units),
    )


def report_unassigned(units: Sequence[Unit], tolerance: Tolerance = Tolerance.EXACT) -> list[MemberReport | GroupReport]:
    return [_entry(u, (), tolerance) for u in units]


def report_result(
    result: GenerationResult,
    tolerance: Tolerance = Tolerance.EXACT,
    mode: TierMode = TierMode.NUMERIC,
) -> list[PodReport]:
    return [report_pod(pod, i + 1, tolerance, mode) for i, pod in enumerate(result.pods)]
