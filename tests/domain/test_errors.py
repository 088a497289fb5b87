from pod_generator.domain.errors import GroupError, PodGenError, RosterError


class TestPodGenError:
    def test_construction(self) -> None:
        err = PodGenError(message="something went wrong")
        assert err.message == "something went wrong"

    def test_frozen(self) -> None:
        err = PodGenError(message="x")
        try:
            err.message = "y"  # type: ignore[misc]
            raise AssertionError("Expected FrozenInstanceError")
        except AttributeError:
            pass


class TestRosterError:
    def test_defaults(self) -> None:
        err = RosterError(message="bad row")
        assert err.participant is None
        assert err.row is None

    def test_inherits_base(self) -> None:
        err = RosterError(message="x", participant="Alice", row=2)
        assert isinstance(err, PodGenError)
        assert err.participant == "Alice"
        assert err.row == 2


class TestGroupError:
    def test_construction(self) -> None:
        err = GroupError(message="no shared tier", group_id="g1", members=("A", "B"))
        assert err.group_id == "g1"
        assert err.members == ("A", "B")
        assert isinstance(err, PodGenError)
