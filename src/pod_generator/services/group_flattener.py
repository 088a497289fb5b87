import logging
import statistics
from collections.abc import Sequence

from pod_generator.domain.participant import Group, Participant
from pod_generator.services.compatibility import shared_tiers
from pod_generator.services.power_profile import round_half

logger = logging.getLogger(__name__)


class InfeasibleGroupError(Exception):
    """Raised when a group's members share no playable tier."""

    def __init__(self, group_id: str, members: Sequence[Participant]) -> None:
        self.group_id = group_id
        self.members = tuple(members)
        names = ", ".join(p.name for p in members)
        super().__init__(f"Group '{group_id}' has no tier every member can play ({names})")


def flatten_group(group_id: str, members: Sequence[Participant], tolerance: float) -> Group:
    """Collapse ``members`` into a single group whose tiers are their shared tiers.

    A group is only as flexible as its most restrictive member.
    """
    if not members:
        raise ValueError(f"Group '{group_id}' has no members")

    tiers = shared_tiers([m.tiers for m in members], tolerance)
    if not tiers:
        raise InfeasibleGroupError(group_id, members)

    average = round_half(statistics.fmean(m.average_tier for m in members))
    logger.debug("Flattened group %s: %d members, tiers=%s, avg=%.1f", group_id, len(members), tiers, average)
    return Group(id=group_id, members=tuple(members), tiers=tiers, average_tier=average)
