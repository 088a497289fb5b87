from dataclasses import dataclass
from typing import TypeAlias

from pod_generator.domain.tier import PowerProfile


@dataclass(frozen=True)
class Participant:
    id: int
    name: str
    profile: PowerProfile

    @property
    def tiers(self) -> tuple[float, ...]:
        return self.profile.tiers

    @property
    def average_tier(self) -> float:
        return self.profile.average


@dataclass(frozen=True)
class Group:
    id: str
    members: tuple[Participant, ...]
    tiers: tuple[float, ...]  # shared tiers of the members
    average_tier: float


@dataclass(frozen=True)
class Individual:
    participant: Participant

    @property
    def key(self) -> str:
        return f"player:{self.participant.id}"

    @property
    def size(self) -> int:
        return 1

    @property
    def tiers(self) -> tuple[float, ...]:
        return self.participant.tiers

    @property
    def average_tier(self) -> float:
        return self.participant.average_tier

    @property
    def members(self) -> tuple[Participant, ...]:
        return (self.participant,)


@dataclass(frozen=True)
class Collective:
    group: Group

    @property
    def key(self) -> str:
        return f"group:{self.group.id}"

    @property
    def size(self) -> int:
        return len(self.group.members)

    @property
    def tiers(self) -> tuple[float, ...]:
        return self.group.tiers

    @property
    def average_tier(self) -> float:
        return self.group.average_tier

    @property
    def members(self) -> tuple[Participant, ...]:
        return self.group.members


Unit: TypeAlias = Individual | Collective
