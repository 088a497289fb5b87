import json

import pytest

from pod_generator.cli._output import (
    format_declared,
    print_error,
    print_json,
    print_plan,
    print_pod_reports,
    print_unassigned,
)
from pod_generator.domain.pod import GroupReport, MemberReport, PodReport, PodSizeMode


def _member(name: str, declared: tuple[str, ...], highlighted: tuple[bool, ...], avg: float) -> MemberReport:
    return MemberReport(name=name, declared=declared, highlighted=highlighted, average_tier=avg)


def _report() -> PodReport:
    group = GroupReport(
        group_id="g1",
        average_tier=7.5,
        members=(
            MemberReport(name="Alice", declared=("7", "8"), highlighted=(True, True), average_tier=7.5, group_id="g1"),
            MemberReport(name="Bob", declared=("7", "8"), highlighted=(True, True), average_tier=7.5, group_id="g1"),
        ),
    )
    return PodReport(
        number=1,
        title="Pod 1 (Power: 7-8)",
        shared_tiers=(7.0, 8.0),
        shared_display="7-8",
        average_power=7.5,
        size=3,
        entries=(group, _member("Cara", ("6", "7"), (False, True), 6.5)),
    )


class TestFormatDeclared:
    def test_bolds_highlighted(self) -> None:
        member = _member("Cara", ("6", "7"), (False, True), 6.5)
        assert format_declared(member) == "6, [bold]7[/bold]"

    def test_nothing_highlighted(self) -> None:
        member = _member("Cara", ("3",), (False,), 3.0)
        assert format_declared(member) == "3"


class TestPrintPodReports:
    def test_prints_title_and_members(self, capsys: pytest.CaptureFixture[str]) -> None:
        print_pod_reports([_report()])
        out = capsys.readouterr().out
        assert "Pod 1 (Power: 7-8)" in out
        assert "3 players" in out
        assert "Group g1" in out
        assert "Alice" in out
        assert "Cara" in out

    def test_empty(self, capsys: pytest.CaptureFixture[str]) -> None:
        print_pod_reports([])
        assert "Could not form pods" in capsys.readouterr().out


class TestPrintUnassigned:
    def test_counts_group_members(self, capsys: pytest.CaptureFixture[str]) -> None:
        entries = [
            GroupReport(
                group_id="g2",
                average_tier=2.0,
                members=(_member("Dev", ("2",), (False,), 2.0), _member("Eve", ("2",), (False,), 2.0)),
            ),
            _member("Finn", ("10",), (False,), 10.0),
        ]
        print_unassigned(entries)
        out = capsys.readouterr().out
        assert "Unassigned" in out
        assert "(3 players)" in out
        assert "Finn" in out

    def test_nothing_unassigned_prints_nothing(self, capsys: pytest.CaptureFixture[str]) -> None:
        print_unassigned([])
        assert capsys.readouterr().out == ""


class TestPrintPlan:
    def test_sizes(self, capsys: pytest.CaptureFixture[str]) -> None:
        print_plan(10, PodSizeMode.AVOID_FIVE, [4, 3, 3])
        out = capsys.readouterr().out
        assert "4 + 3 + 3" in out
        assert "3 pods" in out

    def test_too_few(self, capsys: pytest.CaptureFixture[str]) -> None:
        print_plan(2, PodSizeMode.BALANCED, [])
        assert "cannot form a pod" in capsys.readouterr().out


def test_print_json(capsys: pytest.CaptureFixture[str]) -> None:
    print_json([_report()], [_member("Finn", ("10",), (False,), 10.0)])
    payload = json.loads(capsys.readouterr().out)
    assert payload["pods"][0]["title"] == "Pod 1 (Power: 7-8)"
    assert payload["pods"][0]["entries"][0]["group_id"] == "g1"
    assert payload["unassigned"][0]["name"] == "Finn"


def test_print_error(capsys: pytest.CaptureFixture[str]) -> None:
    print_error("something broke")
    err = capsys.readouterr().err
    assert "Error:" in err
    assert "something broke" in err
