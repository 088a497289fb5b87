from dataclasses import dataclass
from enum import StrEnum

from pod_generator.domain.participant import Unit


class PodSizeMode(StrEnum):
    BALANCED = "balanced"
    AVOID_FIVE = "avoid_five"


@dataclass(frozen=True)
class Pod:
    units: tuple[Unit, ...]
    shared_tiers: tuple[float, ...]
    average_power: float  # rounded to one decimal

    @property
    def size(self) -> int:
        return sum(u.size for u in self.units)


@dataclass(frozen=True)
class GenerationResult:
    pods: tuple[Pod, ...]
    unassigned: tuple[Unit, ...]

    @property
    def assigned_count(self) -> int:
        return sum(p.size for p in self.pods)

    @property
    def unassigned_count(self) -> int:
        return sum(u.size for u in self.unassigned)


@dataclass(frozen=True)
class MemberReport:
    name: str
    declared: tuple[str, ...]  # declared tier labels in tier order
    highlighted: tuple[bool, ...]  # parallel to ``declared``
    average_tier: float
    group_id: str | None = None


@dataclass(frozen=True)
class GroupReport:
    group_id: str
    average_tier: float
    members: tuple[MemberReport, ...]


@dataclass(frozen=True)
class PodReport:
    number: int  # 1-based
    title: str
    shared_tiers: tuple[float, ...]
    shared_display: str
    average_power: float
    size: int
    entries: tuple[MemberReport | GroupReport, ...]
