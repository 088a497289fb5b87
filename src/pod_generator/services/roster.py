import logging
from collections.abc import Sequence
from dataclasses import dataclass

from pod_generator.domain.errors import GroupError, RosterError
from pod_generator.domain.participant import Collective, Group, Individual, Participant, Unit
from pod_generator.domain.result import Err, Ok, Result
from pod_generator.domain.settings import GenerationSettings
from pod_generator.services.group_flattener import InfeasibleGroupError, flatten_group
from pod_generator.services.power_profile import PowerProfileError, resolve_profile

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class RosterEntry:
    name: str
    tiers: tuple[object, ...]
    group: str | None = None


@dataclass(frozen=True)
class Roster:
    participants: tuple[Participant, ...]
    groups: tuple[Group, ...]
    units: tuple[Unit, ...]

    @property
    def headcount(self) -> int:
        return len(self.participants)


def build_roster(
    entries: Sequence[RosterEntry],
    settings: GenerationSettings,
) -> Result[Roster, RosterError | GroupError]:
    """Validate raw entries and bundle them into engine units.

    Names must be non-empty and unique (case-insensitive), every entry needs at
    least one valid tier, and every group needs a tier all of its members can
    play. The first problem found is returned as an ``Err``.
    """
    participants: list[Participant] = []
    seen_names: dict[str, int] = {}
    duplicates: list[str] = []

    for row, entry in enumerate(entries, start=1):
        name = entry.name.strip()
        if not name:
            return Err(RosterError(message=f"Row {row}: participant name is empty", row=row))
        folded = name.casefold()
        if folded in seen_names:
            duplicates.append(name)
        seen_names.setdefault(folded, row)

        try:
            profile = resolve_profile(entry.tiers, settings.tier_mode)
        except PowerProfileError as e:
            return Err(RosterError(message=f"{name}: {e}", participant=name, row=row))

        participants.append(Participant(id=row - 1, name=name, profile=profile))

    if duplicates:
        return Err(RosterError(message=f"Duplicate participant names: {', '.join(duplicates)}"))

    group_members: dict[str, list[Participant]] = {}
    loners: list[Participant] = []
    for entry, participant in zip(entries, participants):
        group_id = entry.group.strip() if entry.group else ""
        if group_id:
            group_members.setdefault(group_id, []).append(participant)
        else:
            loners.append(participant)

    tolerance = settings.effective_tolerance.delta
    groups: list[Group] = []
    for group_id, members in group_members.items():
        try:
            groups.append(flatten_group(group_id, members, tolerance))
        except InfeasibleGroupError as e:
            return Err(GroupError(message=str(e), group_id=group_id, members=tuple(m.name for m in members)))

    units: list[Unit] = [Individual(p) for p in loners]
    units.extend(Collective(g) for g in groups)
    logger.debug("Built roster: %d participants, %d groups, %d units", len(participants), len(groups), len(units))
    return Ok(Roster(participants=tuple(participants), groups=tuple(groups), units=tuple(units)))
