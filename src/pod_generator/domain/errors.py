from dataclasses import dataclass


@dataclass(frozen=True)
class PodGenError:
    message: str


@dataclass(frozen=True)
class RosterError(PodGenError):
    participant: str | None = None
    row: int | None = None


@dataclass(frozen=True)
class GroupError(PodGenError):
    group_id: str
    members: tuple[str, ...] = ()
