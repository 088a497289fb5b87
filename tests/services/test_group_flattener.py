import pytest

from pod_generator.domain.participant import Participant
from pod_generator.services.group_flattener import InfeasibleGroupError, flatten_group
from pod_generator.services.power_profile import resolve_numeric


def _participant(pid: int, name: str, *tiers: float) -> Participant:
    return Participant(id=pid, name=name, profile=resolve_numeric(tiers))


class TestFlattenGroup:
    def test_tiers_are_intersection(self) -> None:
        group = flatten_group("g1", [_participant(0, "A", 2, 3), _participant(1, "B", 3, 4)], 0.0)
        assert group.tiers == (3.0,)
        assert group.id == "g1"
        assert [m.name for m in group.members] == ["A", "B"]

    def test_most_restrictive_member_wins(self) -> None:
        group = flatten_group(
            "g1",
            [_participant(0, "A", 5, 6, 7, 8), _participant(1, "B", 6, 7), _participant(2, "C", 7)],
            0.0,
        )
        assert group.tiers == (7.0,)

    def test_average_is_mean_of_member_averages(self) -> None:
        # A averages 2.5, B averages 3.5
        group = flatten_group("g1", [_participant(0, "A", 2, 3), _participant(1, "B", 3, 4)], 0.0)
        assert group.average_tier == 3.0

    def test_tolerance_applies(self) -> None:
        group = flatten_group("g1", [_participant(0, "A", 6), _participant(1, "B", 6.5)], 0.5)
        assert group.tiers == (6.0, 6.5)

    def test_empty_intersection_raises(self) -> None:
        with pytest.raises(InfeasibleGroupError) as exc_info:
            flatten_group("g1", [_participant(0, "A", 1), _participant(1, "B", 5)], 0.0)
        assert exc_info.value.group_id == "g1"
        assert "A, B" in str(exc_info.value)

    def test_no_members_raises(self) -> None:
        with pytest.raises(ValueError, match="no members"):
            flatten_group("g1", [], 0.0)
