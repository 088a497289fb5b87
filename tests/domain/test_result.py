from pod_generator.domain.errors import RosterError
from pod_generator.domain.result import Err, Ok, Result


class TestOk:
    def test_holds_value(self) -> None:
        ok: Ok[tuple[str, ...]] = Ok(("Alice", "Bob"))
        assert ok.value == ("Alice", "Bob")

    def test_frozen(self) -> None:
        ok = Ok(3)
        try:
            ok.value = 4  # type: ignore[misc]
            raise AssertionError("Expected FrozenInstanceError")
        except AttributeError:
            pass


class TestErr:
    def test_holds_error(self) -> None:
        err: Err[RosterError] = Err(RosterError(message="Row 2: participant name is empty", row=2))
        assert err.error.row == 2

    def test_equality(self) -> None:
        assert Err(RosterError(message="a")) == Err(RosterError(message="a"))
        assert Err(RosterError(message="a")) != Err(RosterError(message="b"))


class TestPatternMatching:
    def test_match_ok(self) -> None:
        result: Result[int, RosterError] = Ok(4)
        match result:
            case Ok(value):
                assert value == 4
            case Err():
                raise AssertionError("Should not match Err")

    def test_match_err(self) -> None:
        result: Result[int, RosterError] = Err(RosterError(message="Duplicate participant names: alice"))
        match result:
            case Ok():
                raise AssertionError("Should not match Ok")
            case Err(error):
                assert "alice" in error.message
